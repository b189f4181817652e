import base64 as b64
from dataclasses import dataclass
from typing import Any, Literal

SupportedType = Literal["xml", "csv", "xlsx", "json", "zip"]

SUPPORTED_FILE_TYPES: tuple[SupportedType, ...] = ("xml", "csv", "xlsx", "json", "zip")

StructuredReport = dict[str, Any]


@dataclass(frozen=True)
class InputFile:
    """One unit of batch input.

    Text types (xml, csv, json) carry their payload in ``text``. Binary types
    (xlsx, zip) carry it either as raw bytes in ``arrbuf`` or base64 text in ``base64``.
    """

    filename: str
    format: str | None = None
    text: str | None = None
    arrbuf: bytes | None = None
    base64: str | None = None

    def has_text(self) -> bool:
        return bool(self.text)

    def has_binary(self) -> bool:
        return bool(self.arrbuf) or bool(self.base64)

    def binary(self) -> bytes:
        """Return the binary payload, decoding base64 if that is what was supplied."""
        if self.arrbuf:
            return self.arrbuf
        if self.base64:
            return b64.b64decode(self.base64)
        return b""


@dataclass(frozen=True)
class ConversionResult:
    """One structured report extracted from an input file."""

    original_filename: str
    original_type: SupportedType
    output_filename: str
    structured_report: StructuredReport

    def to_dict(self) -> dict[str, Any]:
        return {
            "original_filename": self.original_filename,
            "original_type": self.original_type,
            "output_filename": self.output_filename,
            "structured_report": self.structured_report,
        }


@dataclass(frozen=True)
class FilenameArgs:
    structured_report: StructuredReport
    filename: str
    type: SupportedType
    index: int | None = None
