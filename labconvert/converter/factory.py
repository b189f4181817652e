from labconvert.archive.zip_extractor import ZipArchiveExtractor
from labconvert.config.settings import Settings
from labconvert.converter.converter import Converter
from labconvert.converter.dispatcher import ParsingDispatcher
from labconvert.logging.logger import Log
from labconvert.tabular.formats import SUPPORTED_FORMATS
from labconvert.tabular.parser import TabularParser
from labconvert.xml_report.parser import XmlReportParser


class ConverterFactory:
    """Creates a Converter wired with the default parsing collaborators."""

    @classmethod
    def create(cls, settings: Settings, log: Log | None = None) -> Converter:
        """Create a configured converter from application settings."""
        log = log if log is not None else Log()
        if settings.default_table_format not in SUPPORTED_FORMATS:
            raise ValueError(
                f"Unknown default table format '{settings.default_table_format}'. "
                f"Choose from: {list(SUPPORTED_FORMATS)}"
            )
        dispatcher = ParsingDispatcher(
            tabular_parser=TabularParser(log=log),
            xml_parser=XmlReportParser(),
            archive_extractor=ZipArchiveExtractor(
                log=log, skip_hidden=settings.archive_skip_hidden
            ),
        )
        return Converter(
            dispatcher=dispatcher,
            log=log,
            supported_formats=SUPPORTED_FORMATS,
            default_format=settings.default_table_format,
        )
