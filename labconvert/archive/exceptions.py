class ArchiveError(Exception):
    """Raised when a ZIP archive cannot be opened or read."""
