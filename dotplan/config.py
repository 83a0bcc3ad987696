"""Loading of the Comtrya.yaml configuration file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import platformdirs
import yaml

__all__ = ["Config", "ConfigError", "CONFIG_FILE_NAME", "load_config"]

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "Comtrya.yaml"


class ConfigError(Exception):
    """The configuration file could not be read or understood."""


def _string_list(name: str, value: Any) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"'{name}' must be a list of strings")
    return list(value)


@dataclass
class Config:
    """Settings that shape a run."""

    manifest_paths: list[str] = field(default_factory=list)
    variables: dict[str, str] = field(default_factory=dict)
    include_variables: list[str] | None = None
    disable_update_check: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build a configuration from a mapping; unknown keys are ignored."""
        if not isinstance(data, dict):
            raise ConfigError("the configuration must be a mapping")

        config = cls()
        if "manifest_paths" in data:
            config.manifest_paths = _string_list("manifest_paths", data["manifest_paths"])
        if "variables" in data:
            variables = data["variables"]
            if not isinstance(variables, dict) or not all(
                isinstance(key, str) and isinstance(value, str)
                for key, value in variables.items()
            ):
                raise ConfigError("'variables' must map strings to strings")
            config.variables = dict(sorted(variables.items()))
        if data.get("include_variables") is not None:
            config.include_variables = _string_list(
                "include_variables", data["include_variables"]
            )
        if "disable_update_check" in data:
            flag = data["disable_update_check"]
            if not isinstance(flag, bool):
                raise ConfigError("'disable_update_check' must be a boolean")
            config.disable_update_check = flag
        return config


def _find_config() -> Path | None:
    local = Path(os.getcwd()) / CONFIG_FILE_NAME
    if local.is_file():
        logger.debug("%s found in current working directory", CONFIG_FILE_NAME)
        return local
    logger.debug("No %s found in current working directory", CONFIG_FILE_NAME)

    user_config = Path(platformdirs.user_config_dir()) / CONFIG_FILE_NAME
    if user_config.is_file():
        logger.debug("%s found in users config directory", CONFIG_FILE_NAME)
        return user_config
    logger.debug("No %s found in users config directory", CONFIG_FILE_NAME)
    return None


def load_config() -> Config:
    """Load Comtrya.yaml from the working directory, else the user config directory."""
    config_path = _find_config()
    if config_path is None:
        return Config(manifest_paths=["."])

    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise ConfigError(
            "Found Comtrya.yaml, but was unable to read the contents."
        ) from err

    if not text.strip():
        config = Config()
    else:
        try:
            config = Config.from_dict(yaml.safe_load(text))
        except (yaml.YAMLError, ConfigError) as err:
            raise ConfigError(
                "Found Comtrya.yaml, but couldn't deserialize the YAML."
            ) from err

    # A config file makes its own directory the implicit manifest location.
    if not config.manifest_paths:
        config.manifest_paths.append(str(config_path.parent))
    return config