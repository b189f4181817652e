class TabularParseError(Exception):
    """Raised when a CSV or XLSX payload cannot be turned into structured reports."""
