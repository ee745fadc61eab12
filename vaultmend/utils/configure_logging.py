import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False
_HANDLERS: list[logging.Handler] = []


def is_configured() -> bool:
    return _CONFIGURED


def configure_logging(home: Path | None = None, level: str | None = None, filename: str | None = None) -> None:
    """Configure file logging for the vaultmend logger tree.

    Args:
        home: Directory holding the log file. If None, derived from VAULTMEND_HOME.
        level: Logging level name. If None, taken from the configuration.
        filename: Log file name. If None, taken from the configuration.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None or level is None or filename is None:
        from vaultmend.api.config.LogConfig import LogConfig
        from vaultmend.api.config.VaultmendConfig import VaultmendConfig

        try:
            log_config = VaultmendConfig.load().log
        except ValueError:
            # A broken config file is reported by the command that loads it
            log_config = LogConfig()
        home = home or VaultmendConfig.get_home_dir()
        level = level or log_config.level
        filename = filename or log_config.filename

    root_logger = logging.getLogger("vaultmend")
    root_logger.setLevel(level)
    # Terminal output belongs to the CLI, not the log
    root_logger.propagate = False

    home.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        home / filename,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    root_logger.addHandler(handler)
    _HANDLERS.append(handler)

    _CONFIGURED = True


def reset_logging() -> None:
    """Detach and close the handlers added by configure_logging."""
    global _CONFIGURED
    root_logger = logging.getLogger("vaultmend")
    while _HANDLERS:
        handler = _HANDLERS.pop()
        root_logger.removeHandler(handler)
        handler.close()
    _CONFIGURED = False
