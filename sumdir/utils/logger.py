import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Library default: stay silent until the application configures logging.
_NULL_HANDLER = logging.NullHandler()
logging.getLogger("sumdir").addHandler(_NULL_HANDLER)


def configure_logging(level: int | str = logging.WARNING, log_file: Path | None = None) -> None:
    """Configure sumdir logging.

    Messages go to stderr so stdout stays reserved for the rendered report.
    A log file is only written when one is configured explicitly. Calling
    this again replaces the handlers installed by the previous call.

    Args:
        level: Logging level for the ``sumdir`` logger.
        log_file: Optional path of a rotating log file.
    """
    root_logger = logging.getLogger("sumdir")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        if handler is not _NULL_HANDLER:
            root_logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if log_file is not None:
        log_file = Path(log_file).expanduser()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name."""
    return logging.getLogger(f"sumdir.{name}")
