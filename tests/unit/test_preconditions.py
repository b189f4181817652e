import pytest

from labconvert.converter.exceptions import PayloadShapeMismatchError, UnsupportedFormatError
from labconvert.converter.models import InputFile
from labconvert.converter.preconditions import check_preconditions

_FORMATS = ("tomkat", "generic")


class TestTabularFormat:
    @pytest.mark.parametrize("file_type", ["csv", "xlsx"])
    def test_rejects_unknown_format(self, file_type: str) -> None:
        file = InputFile(filename=f"a.{file_type}", text="x", arrbuf=b"x")
        with pytest.raises(UnsupportedFormatError, match="'spreadsheet'"):
            check_preconditions(file, file_type, "spreadsheet", _FORMATS)  # type: ignore[arg-type]

    def test_format_ignored_for_non_tabular(self) -> None:
        file = InputFile(filename="a.xml", text="<Events/>")
        check_preconditions(file, "xml", "spreadsheet", _FORMATS)

    def test_format_checked_before_payload(self) -> None:
        file = InputFile(filename="a.xlsx")
        with pytest.raises(UnsupportedFormatError):
            check_preconditions(file, "xlsx", "bogus", _FORMATS)


class TestPayloadShape:
    @pytest.mark.parametrize("file_type", ["xlsx", "zip"])
    def test_binary_types_reject_text_only(self, file_type: str) -> None:
        file = InputFile(filename=f"a.{file_type}", text="not bytes")
        with pytest.raises(PayloadShapeMismatchError, match=file_type):
            check_preconditions(file, file_type, "tomkat", _FORMATS)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "file",
        [
            InputFile(filename="a.xlsx", arrbuf=b"PK\x03\x04"),
            InputFile(filename="a.xlsx", base64="UEsDBA=="),
        ],
    )
    def test_binary_types_accept_bytes_or_base64(self, file: InputFile) -> None:
        check_preconditions(file, "xlsx", "tomkat", _FORMATS)

    @pytest.mark.parametrize("file_type", ["csv", "xml", "json"])
    def test_text_types_reject_binary_only(self, file_type: str) -> None:
        file = InputFile(filename=f"a.{file_type}", arrbuf=b"bytes")
        with pytest.raises(PayloadShapeMismatchError, match="must be strings"):
            check_preconditions(file, file_type, "tomkat", _FORMATS)  # type: ignore[arg-type]

    def test_empty_text_counts_as_missing(self) -> None:
        file = InputFile(filename="a.json", text="")
        with pytest.raises(PayloadShapeMismatchError):
            check_preconditions(file, "json", "tomkat", _FORMATS)
