"""Top-level sumdir configuration."""

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..scan.ScanConfig import ScanConfig
from .LogConfig import LogConfig


class SumdirConfig(BaseModel):
    """Top-level configuration for sumdir."""

    model_config = ConfigDict(extra="forbid")

    scan: ScanConfig = Field(default_factory=ScanConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get sumdir home directory based on SUMDIR_HOME or default to ~/.sumdir."""
        home_env = os.environ.get("SUMDIR_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".sumdir"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file inside the sumdir home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls, path: Path | None = None) -> "SumdirConfig":
        """Load and validate config from file.

        The file is optional; when it does not exist the defaults are used.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = path or cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration in {path} must be a JSON object")

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
