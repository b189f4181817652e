import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from labconvert.archive.base import BaseArchiveExtractor, ConvertFn
from labconvert.converter.models import (
    ConversionResult,
    InputFile,
    StructuredReport,
    SupportedType,
)
from labconvert.schema.validator import assert_structured_report
from labconvert.tabular.base import BaseTabularParser, TabularPayload
from labconvert.xml_report.base import BaseXmlParser


@dataclass(frozen=True)
class ExtractedReport:
    """A structured report plus its position, set only when a file yielded several."""

    structured_report: StructuredReport
    index: int | None = None


@dataclass(frozen=True)
class DispatchOutcome:
    """Reports still to be named locally, and archive results already named recursively."""

    reports: list[ExtractedReport] = field(default_factory=list)
    archive_results: list[ConversionResult] = field(default_factory=list)


class ParsingDispatcher:
    """Routes a validated input file to the parsing collaborator for its type."""

    def __init__(
        self,
        tabular_parser: BaseTabularParser,
        xml_parser: BaseXmlParser,
        archive_extractor: BaseArchiveExtractor,
        schema_assert: Callable[[Any], None] = assert_structured_report,
    ) -> None:
        self._tabular_parser = tabular_parser
        self._xml_parser = xml_parser
        self._archive_extractor = archive_extractor
        self._schema_assert = schema_assert

    async def dispatch(
        self,
        file: InputFile,
        file_type: SupportedType,
        table_format: str,
        convert: ConvertFn,
    ) -> DispatchOutcome:
        """Parse one file. Collaborator errors propagate to the caller unchanged."""
        if file_type == "zip":
            archive_results = await self._archive_extractor.parse(file, convert)
            return DispatchOutcome(archive_results=archive_results)
        if file_type == "json":
            return DispatchOutcome(reports=[ExtractedReport(self._parse_json(file.text or ""))])
        if file_type == "xml":
            report = await self._xml_parser.parse_report(file.text or "")
            return DispatchOutcome(reports=[ExtractedReport(report)] if report else [])
        return DispatchOutcome(reports=await self._parse_tabular(file, file_type, table_format))

    def _parse_json(self, text: str) -> StructuredReport:
        candidate = json.loads(text)
        self._schema_assert(candidate)
        return candidate

    async def _parse_tabular(
        self,
        file: InputFile,
        file_type: SupportedType,
        table_format: str,
    ) -> list[ExtractedReport]:
        if file_type == "csv":
            payload = TabularPayload(format=table_format, text=file.text)
        else:
            payload = TabularPayload(format=table_format, data=file.binary())
        reports = await self._tabular_parser.parse(payload)
        if len(reports) == 1:
            return [ExtractedReport(reports[0])]
        return [ExtractedReport(report, index) for index, report in enumerate(reports)]
