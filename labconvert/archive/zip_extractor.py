import io
import zipfile

from labconvert.archive.base import BaseArchiveExtractor, ConvertFn
from labconvert.archive.exceptions import ArchiveError
from labconvert.converter.detection import detect_type
from labconvert.converter.models import ConversionResult, InputFile
from labconvert.logging.logger import Log

_BINARY_MEMBER_TYPES = frozenset({"xlsx", "zip"})


class ZipArchiveExtractor(BaseArchiveExtractor):
    """Expands ZIP archives into ordinary input files, one per member."""

    def __init__(self, log: Log | None = None, skip_hidden: bool = True) -> None:
        self._log = log if log is not None else Log()
        self._skip_hidden = skip_hidden

    async def parse(self, file: InputFile, convert: ConvertFn) -> list[ConversionResult]:
        members = self.members(file)
        self._log.info(f"Expanding {len(members)} member(s) of archive {file.filename}")
        results: list[ConversionResult] = []
        for member in members:
            results.extend(await convert([member]))
        return results

    def members(self, file: InputFile) -> list[InputFile]:
        """Read every usable member of the archive as an InputFile, in archive order."""
        try:
            with zipfile.ZipFile(io.BytesIO(file.binary())) as archive:
                return [
                    self._to_input_file(info.filename, archive.read(info), file.format)
                    for info in archive.infolist()
                    if not self._is_skipped(info)
                ]
        except (zipfile.BadZipFile, zipfile.LargeZipFile) as exc:
            raise ArchiveError(f"Unable to read archive {file.filename}: {exc}") from exc

    def _is_skipped(self, info: zipfile.ZipInfo) -> bool:
        if info.is_dir():
            return True
        if not self._skip_hidden:
            return False
        parts = info.filename.split("/")
        return parts[0] == "__MACOSX" or any(part.startswith(".") for part in parts)

    def _to_input_file(self, name: str, data: bytes, table_format: str | None) -> InputFile:
        if detect_type(name) in _BINARY_MEMBER_TYPES:
            return InputFile(filename=name, format=table_format, arrbuf=data)
        try:
            text = data.decode("utf-8-sig")
        except UnicodeDecodeError:
            self._log.warning(f"Archive member {name} is not UTF-8 text, passing bytes")
            return InputFile(filename=name, format=table_format, arrbuf=data)
        return InputFile(filename=name, format=table_format, text=text)
