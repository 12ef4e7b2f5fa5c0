"""Configuration layering: defaults, YAML config file, environment, flags."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError

DEFAULT_CONFIG_PATH = Path.home() / ".ecs-exec.yaml"
ENV_PREFIX = "ECS_EXEC_"


@dataclass(frozen=True)
class ExecConfig:
    """Settings shared by every resolver call of a single invocation."""

    cluster: str = "default"
    profile: str | None = None
    region: str | None = None
    pipe: str = "@SSH"
    verbose: bool = False


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def _from_environment(environ: Mapping[str, str]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for key in ("cluster", "profile", "region", "pipe"):
        value = environ.get(f"{ENV_PREFIX}{key.upper()}")
        if value:
            values[key] = value
    if environ.get(f"{ENV_PREFIX}AWS_VERBOSE"):
        values["verbose"] = True
    return values


def _known_keys(values: Mapping[str, Any]) -> dict[str, Any]:
    names = {f.name for f in fields(ExecConfig)}
    return {key: value for key, value in values.items() if key in names and value is not None}


def load_config(
    config_path: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> ExecConfig:
    """Build the effective configuration.

    Later layers win: config file, then ``ECS_EXEC_*`` environment variables,
    then explicit overrides (command-line flags). ``None`` overrides are ignored
    so unset flags fall through to the layers below.
    """
    path = Path(config_path).expanduser() if config_path else DEFAULT_CONFIG_PATH
    if config_path and not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    config = ExecConfig()
    config = replace(config, **_known_keys(_read_yaml(path)))
    config = replace(config, **_from_environment(os.environ if environ is None else environ))
    return replace(config, **_known_keys(overrides or {}))
