from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

from labconvert.converter.models import ConversionResult, InputFile

ConvertFn = Callable[[list[InputFile]], Awaitable[list[ConversionResult]]]


class BaseArchiveExtractor(ABC):
    """Contract for all archive extraction adapters."""

    @abstractmethod
    async def parse(self, file: InputFile, convert: ConvertFn) -> list[ConversionResult]:
        """Expand an archive and convert each member through ``convert``.

        Args:
            file: The archive input file, carrying a binary payload.
            convert: The batch entry point, re-entered once per member.

        Returns:
            The concatenated results of every member, in archive order.

        Raises:
            ArchiveError: if the archive cannot be read.
        """
