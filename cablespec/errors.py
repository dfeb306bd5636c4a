"""Exceptions raised while parsing and classifying cable specifications."""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Closed set of failure kinds; every CableSpecError carries one."""
    EMPTY_SPEC = "EMPTY_SPEC"
    AMBIGUOUS_CATEGORY = "AMBIGUOUS_CATEGORY"
    INVALID_BUNDLE_COUNT = "INVALID_BUNDLE_COUNT"
    INVALID_SECTION = "INVALID_SECTION"
    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
    PATTERN_TIMEOUT = "PATTERN_TIMEOUT"
    CONFIGURATION = "CONFIGURATION"


class CableSpecError(Exception):
    """Base exception for cablespec."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class EmptySpecError(CableSpecError):
    """Raised when the specification string is None, empty or whitespace."""

    kind = ErrorKind.EMPTY_SPEC

    def __init__(self, spec: Optional[str] = None) -> None:
        self.spec = spec
        super().__init__("Specification string cannot be empty")


class AmbiguousCategoryError(CableSpecError):
    """Raised when a model carries both power and control cable keywords."""

    kind = ErrorKind.AMBIGUOUS_CATEGORY

    def __init__(self, model: str) -> None:
        self.model = model
        super().__init__(
            f"Model contains both power and control cable keywords: {model!r}"
        )


class InvalidBundleCountError(CableSpecError):
    """Raised when a bundle count is zero or negative."""

    kind = ErrorKind.INVALID_BUNDLE_COUNT

    def __init__(self, bundle_count: int, spec: Optional[str] = None) -> None:
        self.bundle_count = bundle_count
        self.spec = spec
        message = f"Bundle count must be >= 1, got {bundle_count}"
        if spec is not None:
            message += f" in {spec!r}"
        super().__init__(message)


class InvalidSectionError(CableSpecError):
    """Raised when a section token is not a non-negative decimal number."""

    kind = ErrorKind.INVALID_SECTION

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid section value: {token!r}")


class UnsupportedFormatError(CableSpecError):
    """Raised when no grammar matches the specification string."""

    kind = ErrorKind.UNSUPPORTED_FORMAT

    def __init__(self, spec: str) -> None:
        self.spec = spec
        super().__init__(f"Unsupported spec format: {spec!r}")


class PatternTimeoutError(CableSpecError):
    """Raised when a pattern match exceeds its time budget."""

    kind = ErrorKind.PATTERN_TIMEOUT

    def __init__(self, pattern: str, timeout: float) -> None:
        self.pattern = pattern
        self.timeout = timeout
        super().__init__(f"Pattern match timed out after {timeout}s: {pattern!r}")


class ConfigurationError(CableSpecError):
    """Raised when a parser configuration file cannot be loaded."""

    kind = ErrorKind.CONFIGURATION

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message)
