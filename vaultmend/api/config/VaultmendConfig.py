"""Top-level vaultmend configuration."""

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..vault.VaultConfig import VaultConfig
from .LogConfig import LogConfig


class VaultmendConfig(BaseModel):
    """Top-level configuration. Every section is optional."""

    model_config = ConfigDict(extra="forbid")

    vault: VaultConfig = Field(default_factory=VaultConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get home directory based on VAULTMEND_HOME or default to ~/.vaultmend."""
        home_env = os.environ.get("VAULTMEND_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".vaultmend"

    @classmethod
    def get_config_path(cls) -> Path:
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "VaultmendConfig":
        """Load and validate config from file.

        A missing file yields the defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration validation error: expected a JSON object in {path}")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
