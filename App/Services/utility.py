"""Small utilities for logging."""
import logging


def setup_logging(level: int | str | None = None) -> None:
    """Configure global logging once for the application.

    Args:
        level: Optional logging level, as a number or a name such as
            ``"DEBUG"``. Defaults to ``logging.INFO``.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = None
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.basicConfig(level=level or logging.INFO)


def logging_function(message: str, level: str = "info") -> None:
    """Unified logging entry used across the project.

    Args:
        message: Text to log.
        level: One of ``"debug"``, ``"info"``, ``"warning"``, ``"error"``,
            or ``"critical"``.
    """
    level_lower = (level or "info").lower()
    if level_lower == "debug":
        logging.debug(message)
    elif level_lower == "warning":
        logging.warning(message)
    elif level_lower == "error":
        logging.error(message)
    elif level_lower == "critical":
        logging.critical(message)
    else:
        logging.info(message)
