"""Contract classes and abstract interfaces.

These are exported so they can be imported directly from :mod:`fast_base`.
"""

from .message_resolver import MessageResolver
from .translator import Translator

__all__ = [
    "MessageResolver",
    "Translator",
]
