from collections.abc import Iterable

from labconvert.converter.exceptions import PayloadShapeMismatchError, UnsupportedFormatError
from labconvert.converter.models import InputFile, SupportedType

_TABULAR_TYPES = frozenset({"csv", "xlsx"})
_BINARY_TYPES = frozenset({"xlsx", "zip"})
_TEXT_TYPES = frozenset({"csv", "xml", "json"})


def check_preconditions(
    file: InputFile,
    file_type: SupportedType,
    table_format: str,
    supported_formats: Iterable[str],
) -> None:
    """Confirm the format option and payload representation suit the detected type.

    Raises:
        UnsupportedFormatError: tabular file with a format outside supported_formats.
        PayloadShapeMismatchError: payload not carried in the representation the type needs.
    """
    if file_type in _TABULAR_TYPES and table_format not in tuple(supported_formats):
        raise UnsupportedFormatError(
            f"format '{table_format}' is not supported for file {file.filename}. "
            f"Supported formats are: {list(supported_formats)}"
        )
    if file_type in _BINARY_TYPES and not file.has_binary():
        raise PayloadShapeMismatchError(
            f"type of {file.filename} was {file_type}, which must be raw bytes "
            "or a base64 encoded string"
        )
    if file_type in _TEXT_TYPES and not file.has_text():
        raise PayloadShapeMismatchError(
            f"CSV, XML, and JSON input files must be strings, but {file.filename} is not"
        )
