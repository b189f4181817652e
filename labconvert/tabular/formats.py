"""Column vocabularies for the supported tabular lab-report formats."""

from typing import Final

SUPPORTED_FORMATS: Final[tuple[str, ...]] = ("tomkat", "generic")

_GENERIC_ALIASES: Final[dict[str, tuple[str, ...]]] = {
    "sample_number": ("samplenumber", "sample number", "sampleid", "sample id", "sample"),
    "report_id": ("reportid", "report id", "report", "labreportid"),
    "date": ("date", "eventdate", "reportdate", "sampledate"),
    "lab_name": ("lab", "labname", "lab name"),
    "depth": ("depth", "depthid", "depth id"),
}

_TOMKAT_EXTRA_ALIASES: Final[dict[str, tuple[str, ...]]] = {
    "sample_number": ("sample_id", "lab id"),
    "report_id": ("report_no",),
    "date": ("date_sub", "date received"),
}


def column_aliases(table_format: str) -> dict[str, tuple[str, ...]]:
    """Return lower-cased header aliases for each metadata column of a format.

    Raises:
        ValueError: if table_format is not one of SUPPORTED_FORMATS.
    """
    if table_format not in SUPPORTED_FORMATS:
        raise ValueError(
            f"Unknown tabular format '{table_format}'. Choose from: {list(SUPPORTED_FORMATS)}"
        )
    if table_format == "generic":
        return dict(_GENERIC_ALIASES)
    return {
        key: aliases + _TOMKAT_EXTRA_ALIASES.get(key, ())
        for key, aliases in _GENERIC_ALIASES.items()
    }
