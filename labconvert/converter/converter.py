import asyncio
from collections.abc import Iterable, Sequence

from labconvert.converter.aggregator import ResultAggregator
from labconvert.converter.detection import detect_type
from labconvert.converter.dispatcher import ParsingDispatcher
from labconvert.converter.errors import classify, report_skip
from labconvert.converter.exceptions import UnknownTypeError
from labconvert.converter.filenames import derive_output_filename
from labconvert.converter.models import (
    SUPPORTED_FILE_TYPES,
    ConversionResult,
    FilenameArgs,
    InputFile,
)
from labconvert.converter.preconditions import check_preconditions
from labconvert.logging.logger import Log


class Converter:
    """Converts a batch of lab-report files into structured reports.

    Files are handled one at a time, in input order. A file that cannot be
    used is logged and skipped; it never aborts the batch.
    """

    def __init__(
        self,
        dispatcher: ParsingDispatcher,
        log: Log,
        supported_formats: Iterable[str],
        default_format: str = "tomkat",
    ) -> None:
        self._dispatcher = dispatcher
        self._log = log
        self._supported_formats = tuple(supported_formats)
        self._default_format = default_format

    async def to_json(self, files: InputFile | Sequence[InputFile]) -> list[ConversionResult]:
        """Convert every input file, returning results in input then extraction order."""
        if isinstance(files, InputFile):
            files = [files]
        aggregator = ResultAggregator()
        for file in files:
            await self._convert_file(file, aggregator)
        return aggregator.results

    def convert(self, files: InputFile | Sequence[InputFile]) -> list[ConversionResult]:
        """Synchronous wrapper around to_json for callers without an event loop."""
        return asyncio.run(self.to_json(files))

    async def _convert_file(self, file: InputFile, aggregator: ResultAggregator) -> None:
        file_type = detect_type(file.filename)
        try:
            if file_type is None:
                raise UnknownTypeError(
                    f"unable to determine file type from filename {file.filename}. "
                    f"Supported types are: {list(SUPPORTED_FILE_TYPES)}"
                )
            table_format = file.format or self._default_format
            check_preconditions(file, file_type, table_format, self._supported_formats)
            outcome = await self._dispatcher.dispatch(file, file_type, table_format, self.to_json)
        except Exception as exc:
            report_skip(self._log, file.filename, file_type, classify(exc))
            return

        aggregator.extend(outcome.archive_results)
        for extracted in outcome.reports:
            output_filename = derive_output_filename(
                FilenameArgs(
                    structured_report=extracted.structured_report,
                    filename=file.filename,
                    type=file_type,
                    index=extracted.index,
                )
            )
            aggregator.append(
                ConversionResult(
                    original_filename=file.filename,
                    original_type=file_type,
                    output_filename=output_filename,
                    structured_report=extracted.structured_report,
                )
            )
        self._log.debug(
            f"Converted {file.filename} into "
            f"{len(outcome.reports) + len(outcome.archive_results)} report(s)"
        )
