"""Vault configuration management."""

from __future__ import annotations

__all__ = ["VaultConfig"]

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VaultConfig(BaseModel):
    """Vault configuration model."""

    model_config = ConfigDict(extra="forbid")

    base_dir: str | None = Field(None, description="Default vault root for check and create")
    extension: str = Field(".md", description="Recognized document extension")
    exclude_dirnames: list[str] = Field(default_factory=list, description="Directory names skipped while scanning")

    @field_validator("base_dir")
    @classmethod
    def _normalize_base_dir(cls, v: str | None) -> str | None:
        from ..config.normalize_path import normalize_path

        if v is None:
            return None
        return str(normalize_path(v))

    @field_validator("extension")
    @classmethod
    def _check_extension(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2:
            raise ValueError(f"extension must start with '.' and name a suffix, got {v!r}")
        return v
