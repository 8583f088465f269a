# Copyright (c) Syntropy Systems
"""Configuration management for slmbench."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, cast

import yaml

if TYPE_CHECKING:
    from collections.abc import Mapping

CONFIG_FILENAME = "slmbench.yaml"


class ConfigError(Exception):
    """Configuration could not be loaded."""


@dataclass
class BenchConfig:
    """Configuration for slmbench."""

    # Inference server base URL
    url: str = "http://localhost:11434"

    # Model name as known to the server
    model: str = "deepseek-r1:1.5b"

    # Per-request timeout in seconds
    timeout: float = 300.0

    # Directory for JSON exports
    export_dir: Path = field(default_factory=Path)

    # Random test size when no prompts or patterns are given
    random_prompts: int = 5
    random_configs: int = 5

    # File the values were read from, if any
    source: Path | None = None


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find the nearest slmbench.yaml by walking up from start_path.

    Returns None if no config file is found.
    """
    if start_path is None:
        start_path = Path.cwd()

    current = start_path.resolve()

    while current != current.parent:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        current = current.parent

    # Check root
    candidate = current / CONFIG_FILENAME
    if candidate.is_file():
        return candidate

    return None


def get_global_config_path() -> Path:
    """Get the global config file path (~/.slmbench/config.yaml)."""
    return Path.home() / ".slmbench" / "config.yaml"


def _apply_file(config: BenchConfig, data: Mapping[str, object]) -> None:
    url = data.get("url")
    if isinstance(url, str):
        config.url = url
    model = data.get("model")
    if isinstance(model, str):
        config.model = model
    timeout = data.get("timeout")
    if isinstance(timeout, (int, float)) and not isinstance(timeout, bool):
        config.timeout = float(timeout)
    export_dir = data.get("export_dir")
    if isinstance(export_dir, str):
        config.export_dir = Path(export_dir)
    random_prompts = data.get("random_prompts")
    if isinstance(random_prompts, int) and not isinstance(random_prompts, bool):
        config.random_prompts = random_prompts
    random_configs = data.get("random_configs")
    if isinstance(random_configs, int) and not isinstance(random_configs, bool):
        config.random_configs = random_configs


def _apply_env(config: BenchConfig, env: Mapping[str, str]) -> None:
    if env.get("SLMBENCH_URL"):
        config.url = env["SLMBENCH_URL"]
    if env.get("SLMBENCH_MODEL"):
        config.model = env["SLMBENCH_MODEL"]
    if env.get("SLMBENCH_EXPORT_DIR"):
        config.export_dir = Path(env["SLMBENCH_EXPORT_DIR"])
    timeout = env.get("SLMBENCH_TIMEOUT")
    if timeout:
        try:
            config.timeout = float(timeout)
        except ValueError as e:
            msg = f"SLMBENCH_TIMEOUT must be a number, got '{timeout}'"
            raise ConfigError(msg) from e


def load_config(
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> BenchConfig:
    """Load configuration from defaults, a YAML file and the environment.

    Looks for the file in:
    1. Provided config_path
    2. Nearest slmbench.yaml walking up from the working directory
    3. ~/.slmbench/config.yaml

    Environment variables override file values.
    """
    config = BenchConfig()

    if config_path is not None:
        if not config_path.is_file():
            msg = f"Config file not found: {config_path}"
            raise ConfigError(msg)
    else:
        config_path = find_config_file()
        if config_path is None:
            global_config = get_global_config_path()
            if global_config.is_file():
                config_path = global_config

    if config_path is not None:
        try:
            with config_path.open() as f:
                data = cast("object", yaml.safe_load(f) or {})
        except (OSError, yaml.YAMLError) as e:
            msg = f"Could not read {config_path}: {e}"
            raise ConfigError(msg) from e
        if not isinstance(data, dict):
            msg = f"{config_path} must contain a mapping"
            raise ConfigError(msg)
        _apply_file(config, cast("dict[str, object]", data))
        config.source = config_path

    _apply_env(config, os.environ if env is None else env)
    return config
