from labconvert.converter.models import SUPPORTED_FILE_TYPES, SupportedType


def detect_type(filename: str) -> SupportedType | None:
    """Map a filename's trailing extension to a supported type, or None."""
    for file_type in SUPPORTED_FILE_TYPES:
        if filename.endswith(f".{file_type}"):
            return file_type
    return None
