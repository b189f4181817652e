from abc import ABC, abstractmethod

from labconvert.converter.models import StructuredReport


class BaseXmlParser(ABC):
    """Contract for all XML lab-report parsing adapters."""

    @abstractmethod
    async def parse_report(self, text: str) -> StructuredReport | None:
        """Parse XML text into a structured report.

        Returns:
            The structured report, or None when the document holds no events.

        Raises:
            XmlParseError: if the text is not well-formed XML.
        """
