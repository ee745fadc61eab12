import logging

from .configure_logging import configure_logging, is_configured


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Safe at import time: handlers are attached later by ``ensure_logging``.
    """
    return logging.getLogger(f"vaultmend.{name}")


def ensure_logging() -> str | None:
    """Configure logging from the current configuration unless already done.

    Returns:
        A warning when the log file cannot be opened; the run continues without it
    """
    if is_configured():
        return None
    try:
        configure_logging()
    except OSError as exc:
        return f"Logging disabled: {exc}"
    return None
