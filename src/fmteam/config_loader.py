"""Load the JSON configuration file and resolve input paths."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError
from pydantic.config import ConfigDict

from fmteam.errors import ConfigError


class InputConfig(BaseModel):
    role_file: str = ""
    players_file: str = ""

    model_config = ConfigDict(extra="ignore")


class OutputConfig(BaseModel):
    format: Literal["text", "json"] = "text"

    model_config = ConfigDict(extra="ignore")


class AppConfig(BaseModel):
    """Top-level config; sections belonging to other FM tools are ignored."""

    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def load(cls, path: Path) -> "AppConfig":
        try:
            text = Path(path).expanduser().read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"Failed to read config file {path}: {exc}") from exc
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in config file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid config file {path}: {exc}") from exc


@dataclass(frozen=True)
class ResolvedInputs:
    role_file: Path
    players_file: Path


def _pick(cli_value: Optional[Path], config_value: str, label: str) -> Path:
    if cli_value is not None:
        return Path(cli_value).expanduser()
    if config_value.strip():
        return Path(config_value.strip()).expanduser()
    raise ConfigError(f"No {label} given on the command line or in the config file")


def resolve_inputs(
    config: AppConfig,
    *,
    role_file: Optional[Path] = None,
    players_file: Optional[Path] = None,
) -> ResolvedInputs:
    """Resolve input paths with priority: CLI argument, then config file."""

    return ResolvedInputs(
        role_file=_pick(role_file, config.input.role_file, "role file"),
        players_file=_pick(players_file, config.input.players_file, "players file"),
    )
