from .arr import Arr
from .string_utils import humanize_field, replace_placeholders

__all__ = [
    "Arr",
    "humanize_field",
    "replace_placeholders",
]
