"""
Custom exception types for the certrotation library.

Validation errors are returned as values by the validator rather than raised,
so a caller can report every problem with a configuration at once.
"""
from typing import Optional

VALIDATION_PREFIX = "failed to validate selfSignConfiguration"


class CertRotationException(Exception):
    """Base exception for all certrotation errors."""
    pass


class KubeConfigError(CertRotationException):
    """Raised when the Kubernetes configuration cannot be loaded."""
    pass


class SelfSignConfigurationError(CertRotationException):
    """Base class for a single problem found in a selfSignConfiguration."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{VALIDATION_PREFIX}: {message}")
        self.field = field


class MissingFieldError(SelfSignConfigurationError):
    def __init__(self, field: str) -> None:
        super().__init__(field, f"{field} is missing")


class UnparseableDurationError(SelfSignConfigurationError):
    def __init__(self, field: str, value: str, cause: Optional[Exception] = None) -> None:
        message = f"error parsing {field}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(field, message)
        self.value = value
        self.__cause__ = cause


class NonPositiveDurationError(SelfSignConfigurationError):
    def __init__(self, field: str, value: str) -> None:
        super().__init__(field, f"{field} duration has to be > 0")
        self.value = value


class OrderingViolationError(SelfSignConfigurationError):
    """Raised when ``lesser_field`` is longer than ``greater_field``."""

    def __init__(
        self,
        lesser_field: str,
        lesser_value: str,
        greater_field: str,
        greater_value: str,
    ) -> None:
        super().__init__(
            lesser_field,
            f"{lesser_field}({lesser_value}) has to be <= {greater_field}({greater_value})",
        )
        self.lesser_value = lesser_value
        self.greater_field = greater_field
        self.greater_value = greater_value


class InvalidManifestError(CertRotationException):
    """Raised when a document cannot hold a selfSignConfiguration."""
    pass
