import logging
import sys


class Log:
    """Structured logging capability passed into the converter and its collaborators."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger if logger is not None else logging.getLogger("labconvert")

    def configure(self, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler."""
        self._logger.setLevel(log_level.upper())
        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            self._logger.addHandler(handler)

    def info(self, message: str, **kwargs: object) -> None:
        """Log an info message."""
        self._logger.info(message, extra=kwargs)

    def error(self, message: str, **kwargs: object) -> None:
        """Log an error message."""
        self._logger.error(message, extra=kwargs)

    def warning(self, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        self._logger.warning(message, extra=kwargs)

    def debug(self, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        self._logger.debug(message, extra=kwargs)
