"""Core utilities re-exported for convenient access.

These modules provide the always-on fundamentals of the framework.
"""

from .api import validate_query, validate_request
from .localization import I18n, __, get_locale, get_translator, set_locale, set_translator, trans
from .message import Message, get_message_resolver, set_message_resolver
from .rules import (
    FreeFunctionRef,
    InlineCallable,
    NamedRule,
    RuleSpec,
    Slot,
    StaticRef,
    parse_rule,
    register_rule,
    unregister_rule,
)
from .valid import Valid
from .validation import ALL_FIELDS, ErrorEntry, Validation

__all__ = [
    "validate_query",
    "validate_request",
    "I18n",
    "__",
    "get_locale",
    "get_translator",
    "set_locale",
    "set_translator",
    "trans",
    "Message",
    "get_message_resolver",
    "set_message_resolver",
    "FreeFunctionRef",
    "InlineCallable",
    "NamedRule",
    "RuleSpec",
    "Slot",
    "StaticRef",
    "parse_rule",
    "register_rule",
    "unregister_rule",
    "Valid",
    "ALL_FIELDS",
    "ErrorEntry",
    "Validation",
]
