import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO", log_file: Path | None = None) -> None:
    """Configure devlog logging for a long-running process.

    Installs a rotating file handler (when ``log_file`` is given) and a stderr
    handler on the ``devlog`` logger. Later calls are no-ops.

    Args:
        level: Logging level name
        log_file: Path of the rotating log file, or None for stderr only
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    root_logger = logging.getLogger("devlog")
    root_logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    _CONFIGURED = True
