from dataclasses import dataclass
from typing import Any


class ConversionError(Exception):
    """Base exception for every reason a single input file is skipped."""


class UnknownTypeError(ConversionError):
    """Raised when the filename extension is not one of the supported types."""


class UnsupportedFormatError(ConversionError):
    """Raised when a tabular file declares a format the tabular parser does not know."""


class PayloadShapeMismatchError(ConversionError):
    """Raised when the payload representation does not match the detected type."""


@dataclass(frozen=True)
class ValidationIssue:
    """A single schema violation: JSON-pointer style path and message."""

    path: str
    message: str


class SchemaValidationError(ConversionError):
    """Raised when a candidate structured report does not conform to the schema."""

    def __init__(self, items: list[ValidationIssue], input: Any = None) -> None:
        self.items = items
        self.input = input
        super().__init__(f"{len(items)} schema violation(s)")


class GenericParseError(ConversionError):
    """Wraps any other failure raised while parsing a file."""

    def __init__(self, raw: BaseException) -> None:
        self.raw = raw
        super().__init__(str(raw) or type(raw).__name__)
