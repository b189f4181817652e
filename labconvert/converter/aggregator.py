from collections.abc import Iterable

from labconvert.converter.models import ConversionResult


class ResultAggregator:
    """Append-only, order-preserving collection of conversion results."""

    def __init__(self) -> None:
        self._results: list[ConversionResult] = []

    def append(self, result: ConversionResult) -> None:
        self._results.append(result)

    def extend(self, results: Iterable[ConversionResult]) -> None:
        self._results.extend(results)

    @property
    def results(self) -> list[ConversionResult]:
        return list(self._results)

    def __len__(self) -> int:
        return len(self._results)
