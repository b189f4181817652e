from labconvert.converter.exceptions import (
    ConversionError,
    GenericParseError,
    SchemaValidationError,
)
from labconvert.logging.logger import Log


def classify(exc: Exception) -> ConversionError:
    """Return the taxonomy error for any failure raised while handling one file."""
    if isinstance(exc, ConversionError):
        return exc
    return GenericParseError(exc)


def report_skip(log: Log, filename: str, file_type: str | None, error: ConversionError) -> None:
    """Log why a file was skipped. Never raises."""
    kind = type(error).__name__
    if isinstance(error, SchemaValidationError):
        log.warning(
            f"Failed to validate file {filename} (type {file_type}): {error}. Skipping file.",
            input_filename=filename,
            error_kind=kind,
        )
        for item in error.items:
            log.warning(f"Path {item.path or '/'} {item.message}", input_filename=filename)
        return
    if isinstance(error, GenericParseError):
        log.warning(
            f"Failed to read file {filename} (type {file_type}): "
            f"{type(error.raw).__name__}: {error.raw}. Skipping file.",
            input_filename=filename,
            error_kind=kind,
        )
        return
    log.warning(f"{error}. Skipping file {filename}.", input_filename=filename, error_kind=kind)
