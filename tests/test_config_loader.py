import json
from pathlib import Path

import pytest

from fmteam.config_loader import AppConfig, resolve_inputs
from fmteam.errors import ConfigError


def _write(tmp_path: Path, payload) -> Path:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_reads_input_and_output_sections(tmp_path):
    path = _write(tmp_path, {
        "input": {"role_file": "roles.txt", "players_file": "players.csv"},
        "output": {"format": "json"},
    })
    config = AppConfig.load(path)
    assert config.input.role_file == "roles.txt"
    assert config.input.players_file == "players.csv"
    assert config.output.format == "json"


def test_load_ignores_unrelated_sections(tmp_path):
    path = _write(tmp_path, {
        "google": {"spreadsheet_id": "abc", "sheet_name": "Squad"},
        "input": {"role_file": "roles.txt", "extra": 1},
    })
    config = AppConfig.load(path)
    assert config.input.role_file == "roles.txt"
    assert config.input.players_file == ""
    assert config.output.format == "text"


def test_load_missing_file(tmp_path):
    with pytest.raises(ConfigError) as excinfo:
        AppConfig.load(tmp_path / "absent.json")
    assert str(excinfo.value).startswith("Configuration error: Failed to read config file")


def test_load_invalid_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid JSON"):
        AppConfig.load(path)


def test_load_requires_object(tmp_path):
    with pytest.raises(ConfigError, match="must contain a JSON object"):
        AppConfig.load(_write(tmp_path, ["roles.txt"]))


def test_load_rejects_unknown_output_format(tmp_path):
    with pytest.raises(ConfigError, match="Invalid config file"):
        AppConfig.load(_write(tmp_path, {"output": {"format": "xml"}}))


def test_resolve_prefers_command_line():
    config = AppConfig.model_validate({"input": {"role_file": "cfg_roles.txt", "players_file": "cfg.csv"}})
    inputs = resolve_inputs(config, role_file=Path("cli_roles.txt"))
    assert inputs.role_file == Path("cli_roles.txt")
    assert inputs.players_file == Path("cfg.csv")


def test_resolve_falls_back_to_config():
    config = AppConfig.model_validate({"input": {"role_file": " roles.txt ", "players_file": "players.csv"}})
    inputs = resolve_inputs(config)
    assert inputs.role_file == Path("roles.txt")
    assert inputs.players_file == Path("players.csv")


def test_resolve_without_any_source():
    with pytest.raises(ConfigError) as excinfo:
        resolve_inputs(AppConfig(), players_file=Path("players.csv"))
    assert str(excinfo.value) == (
        "Configuration error: No role file given on the command line or in the config file"
    )

    with pytest.raises(ConfigError, match="No players file"):
        resolve_inputs(AppConfig(), role_file=Path("roles.txt"))
