from typing import Any, Optional

from fast_base.exceptions.common_exceptions import AppException


class ReadOnlyViolationException(AppException, TypeError):
    """Raised on any write or delete through the keyed access of a `Validation`."""

    def __init__(self, key: Any = None):
        super().__init__("Validation objects are read-only.", data={"key": key} if key is not None else None)
        self.key = key

class RuleResolutionException(AppException, LookupError):
    """
    A rule identifier could not be resolved to a callable.

    Raised while checking, never reported as a validation failure.
    """

    def __init__(self, rule: Any, reason: Optional[str] = None):
        message = f"Unable to resolve validation rule `{rule!r}`"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.rule = rule
        self.reason = reason
