from abc import ABC, abstractmethod
from dataclasses import dataclass

from labconvert.converter.models import StructuredReport


@dataclass(frozen=True)
class TabularPayload:
    """Input to the tabular parser: CSV text or XLSX bytes plus the declared format."""

    format: str
    text: str | None = None
    data: bytes | None = None


class BaseTabularParser(ABC):
    """Contract for all tabular (CSV/XLSX) parsing adapters."""

    @abstractmethod
    async def parse(self, payload: TabularPayload) -> list[StructuredReport]:
        """Parse delimited or spreadsheet data into structured reports.

        Returns:
            One structured report per report group found, in sheet then row order.

        Raises:
            TabularParseError: if the payload is malformed.
        """
