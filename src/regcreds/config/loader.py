"""Config loading entry points for regcreds."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from .models import RegcredsConfig

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "regcreds.default.yaml"
OUTPUT_DIR_ENV = "REGCREDS_OUTPUT_DIR"


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


def load_config(
    path: Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> RegcredsConfig:
    """Load the regcreds configuration applying optional overrides.

    Precedence, lowest first: the bundled defaults, the file at `path`,
    ``REGCREDS_OUTPUT_DIR``, then `overrides` (dotted keys allowed).
    """

    merged = _default_data()

    if path:
        merged = _deep_merge(merged, _expect_mapping(_read_structured_file(path), path))

    env_dir = os.getenv(OUTPUT_DIR_ENV, "").strip()
    if env_dir:
        merged = _deep_merge(merged, {"output": {"directory": env_dir}})

    if overrides:
        merged = _deep_merge(merged, _expand_override_keys(overrides))

    try:
        return RegcredsConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def dump_example_config(dest: Path) -> None:
    """Write the default configuration to ``dest``."""

    dest.parent.mkdir(parents=True, exist_ok=True)

    merged = _default_data()
    if dest.suffix.lower() == ".toml":
        raise ConfigError("TOML export is not supported yet; use a YAML destination.")
    if dest.suffix.lower() in {".json"}:
        dest.write_text(json.dumps(merged, indent=2), encoding="utf-8")
        return
    dest.write_text(
        yaml.safe_dump(merged, sort_keys=False),
        encoding="utf-8",
    )


def _default_data() -> dict[str, Any]:
    """Return the bundled defaults, or the model defaults when the file is absent."""

    if not DEFAULT_CONFIG_PATH.exists():
        return RegcredsConfig().model_dump(mode="json")
    return _expect_mapping(_read_structured_file(DEFAULT_CONFIG_PATH), DEFAULT_CONFIG_PATH)


def _expect_mapping(payload: Any, source: Path) -> dict[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ConfigError(f"Expected mapping data in {source}, got {type(payload)!r}.")
    return dict(payload)


def _read_structured_file(path: Path) -> Any:
    """Return the parsed contents of a YAML/TOML/JSON file."""

    if not path.exists():
        raise ConfigError(f"Config file {path} does not exist.")

    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    try:
        if suffix in {".yaml", ".yml"}:
            return yaml.safe_load(text) or {}
        if suffix == ".toml":
            return tomllib.loads(text)
        if suffix == ".json":
            return json.loads(text)
    except (yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Unable to parse {path}: {exc}") from exc

    raise ConfigError(f"Unsupported config format for {path}")


def _deep_merge(base: Mapping[str, Any], extra: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge two mappings returning a new dictionary."""

    result: dict[str, Any] = {key: value for key, value in base.items()}
    for key, value in extra.items():
        if (
            key in result
            and isinstance(result[key], Mapping)
            and isinstance(value, Mapping)
        ):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _expand_override_keys(overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Support dotted-notation overrides like ``output.directory``."""

    result: dict[str, Any] = {}
    for key, value in overrides.items():
        result = _deep_merge(result, _expand_single_override(key, value))
    return result


def _expand_single_override(key: Any, value: Any) -> dict[str, Any]:
    if isinstance(key, str) and "." in key:
        parts = key.split(".")
        cursor: dict[str, Any] = {}
        root = cursor
        for segment in parts[:-1]:
            next_cursor: dict[str, Any] = {}
            cursor[segment] = next_cursor
            cursor = next_cursor
        cursor[parts[-1]] = value
        return root
    return {key: value}


__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "OUTPUT_DIR_ENV",
    "load_config",
    "dump_example_config",
]
