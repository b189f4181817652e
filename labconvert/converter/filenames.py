import re
from typing import Any

from labconvert.converter.models import FilenameArgs

_RECOGNIZED_EXTENSION = re.compile(r"\.(xml|csv|xlsx|zip)$")
_UNSAFE_LABEL_CHARS = re.compile(r"[^A-Za-z0-9_-]")
_LABELLED_TYPES = frozenset({"csv", "xlsx", "zip"})


def derive_output_filename(args: FilenameArgs) -> str:
    """Compute the output filename for one structured report.

    Tabular and archive-derived reports are named by their sanitized report
    description whenever they carry a non-empty one, even if sanitizing
    leaves nothing to append. Otherwise the extraction index is appended
    when the input produced several reports.
    """
    output_filename = _RECOGNIZED_EXTENSION.sub(".json", args.filename)
    description = None
    if args.type in _LABELLED_TYPES:
        description = report_description(args.structured_report)
    if description:
        return _insert_before_suffix(output_filename, sanitize_label(description))
    if args.index is not None:
        return _insert_before_suffix(output_filename, f"_{args.index}")
    return output_filename


def report_description(structured_report: Any) -> str | None:
    """Return Events[0].LabMetaData.Reports[0].FileDescription if present."""
    try:
        description = structured_report["Events"][0]["LabMetaData"]["Reports"][0][
            "FileDescription"
        ]
    except (KeyError, IndexError, TypeError):
        return None
    return description if isinstance(description, str) else None


def sanitize_label(label: str | None) -> str:
    if not label:
        return ""
    return _UNSAFE_LABEL_CHARS.sub("", label)


def _insert_before_suffix(filename: str, insert: str) -> str:
    if filename.endswith(".json"):
        return f"{filename[: -len('.json')]}{insert}.json"
    return f"{filename}{insert}.json"
