"""Configuration management for vaultmeta."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from loguru import logger

DEFAULT_PROTOTYPES_ROOT_PATH = "_/_assets/_data/_prototypes"
DEFAULT_VALUES_ROOT_PATH = "_/_assets/_data/_values"


@dataclass
class Config:
    """Main application configuration.

    Only ``prototypes_root_path`` and ``values_root_path`` are read by the
    metadata core; the remaining fields configure the filesystem vault
    adapters.
    """

    vault_path: Path = field(default_factory=Path.cwd)
    prototypes_root_path: str = DEFAULT_PROTOTYPES_ROOT_PATH
    values_root_path: str = DEFAULT_VALUES_ROOT_PATH
    note_extension: str = "md"  # without the leading dot
    fs_protocol: str = "file"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls()._apply_env()

    @classmethod
    def from_file(cls, path: str | Path) -> "Config":
        """Load configuration from a TOML file, then apply env overrides.

        Args:
            path: Path to a TOML file with top-level config keys.

        Returns:
            Config with TOML values applied and environment taking precedence.
        """
        with open(path, "rb") as f:
            data = tomllib.load(f)

        config = cls()
        known = {f.name for f in fields(cls)}
        for key, value in data.items():
            if key not in known:
                logger.warning(f"Ignoring unknown config key {key!r} in {path}")
                continue
            setattr(config, key, _coerce(key, value))

        return config._apply_env()

    @classmethod
    def from_env_or_file(cls, path: str | Path | None = None) -> "Config":
        """Load from an explicit path, ``VAULTMETA_CONFIG``, or env only."""
        path = path or os.environ.get("VAULTMETA_CONFIG")
        if path:
            return cls.from_file(path)
        return cls.from_env()

    def _apply_env(self) -> "Config":
        if vault := os.environ.get("VAULTMETA_VAULT"):
            self.vault_path = Path(vault)

        if prototypes := os.environ.get("VAULTMETA_PROTOTYPES_PATH"):
            self.prototypes_root_path = prototypes

        if values := os.environ.get("VAULTMETA_VALUES_PATH"):
            self.values_root_path = values

        if extension := os.environ.get("VAULTMETA_NOTE_EXTENSION"):
            self.note_extension = extension.lstrip(".")

        if protocol := os.environ.get("VAULTMETA_FS_PROTOCOL"):
            self.fs_protocol = protocol

        return self


def _coerce(key: str, value: Any) -> Any:
    if key == "vault_path":
        return Path(value)
    if key == "note_extension":
        return str(value).lstrip(".")
    return value
