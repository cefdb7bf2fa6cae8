"""Custom exceptions for FastBase applications."""

from .common_exceptions import (
    AppException,
    EnvMissingException,
    EnvInvalidException,
)
from .http_exceptions import (
    HttpException,
    UnprocessableEntityException,
)
from .validation_exceptions import (
    ReadOnlyViolationException,
    RuleResolutionException,
)


__all__ = [
    # common
    "AppException",
    "EnvMissingException",
    "EnvInvalidException",
    # http
    "HttpException",
    "UnprocessableEntityException",
    # validation
    "ReadOnlyViolationException",
    "RuleResolutionException",
]
