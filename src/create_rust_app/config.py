from __future__ import annotations

import dataclasses
import tomllib
from pathlib import Path
from typing import Any

from create_rust_app.errors import ConfigurationError
from create_rust_app.naming import DEFAULT_MAX_NAME_LENGTH
from create_rust_app.placeholder import DEFAULT_PLACEHOLDER

CONFIG_TABLE = "create_rust_app"
DEFAULT_CONFIG_PATH = Path("tools") / "create_rust_app.toml"


@dataclasses.dataclass(frozen=True)
class ScaffoldConfig:
    """Workspace layout conventions. Paths are relative to the workspace root."""

    template_dir: str = "tools/rust_app_template"
    apps_dir: str = "apps"
    manifest: str = "Cargo.toml"
    placeholder: str = DEFAULT_PLACEHOLDER
    max_name_length: int = DEFAULT_MAX_NAME_LENGTH


_EXPECTED: dict[str, type] = {
    "template_dir": str,
    "apps_dir": str,
    "manifest": str,
    "placeholder": str,
    "max_name_length": int,
}


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read config file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid TOML in {path}: {exc}") from exc


def config_from_mapping(data: dict[str, Any], *, where: str = CONFIG_TABLE) -> ScaffoldConfig:
    overrides: dict[str, Any] = {}
    for key, value in data.items():
        expected = _EXPECTED.get(key)
        if expected is None:
            raise ConfigurationError(f"{where}: unknown key {key!r}")
        # bool is an int subclass; reject it explicitly.
        if not isinstance(value, expected) or isinstance(value, bool):
            raise ConfigurationError(f"{where}.{key} must be of type {expected.__name__}")
        if expected is str and not value:
            raise ConfigurationError(f"{where}.{key} must be a non-empty string")
        overrides[key] = value

    max_len = overrides.get("max_name_length")
    if max_len is not None and max_len < 1:
        raise ConfigurationError(f"{where}.max_name_length must be a positive integer")

    return dataclasses.replace(ScaffoldConfig(), **overrides)


def load_config(root: Path, config_path: Path | None = None) -> ScaffoldConfig:
    """
    Resolve the scaffold config for a workspace.

    An explicit `config_path` must exist. Without one, `tools/create_rust_app.toml` under `root` is used when
    present, otherwise the built-in defaults apply.
    """
    if config_path is None:
        candidate = root / DEFAULT_CONFIG_PATH
        if not candidate.is_file():
            return ScaffoldConfig()
        config_path = candidate
    elif not config_path.is_file():
        raise ConfigurationError(f"Config file not found: {config_path}")

    data = _load_toml(config_path)
    table = data.get(CONFIG_TABLE, {})
    if not isinstance(table, dict):
        raise ConfigurationError(f"{config_path}: [{CONFIG_TABLE}] must be a table")
    return config_from_mapping(table, where=f"{config_path.name}: {CONFIG_TABLE}")
