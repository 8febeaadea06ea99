"""
JSON configuration files under ``config/``.

``BaseConfigLoader`` reads a file and looks up sections and parameters with
``ConfigurationError`` for anything missing; ``load_config`` is the one-call
shortcut for reading a file.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from indicator_charts.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _resolve_config_dir() -> Path:
    working_config_dir = Path.cwd() / "config"
    if working_config_dir.exists():
        return working_config_dir
    return Path(__file__).parent.parent.parent / "config"


_CONFIG_DIR = _resolve_config_dir()


class BaseConfigLoader:
    """
    Reads chart configuration files and resolves ``section.parameter`` lookups.

    Example usage:
        loader = BaseConfigLoader()
        config = loader.load_json_file("chart_config.json")
        width = loader.get_parameter(config, "layout", "default_width")
    """

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = config_dir if config_dir is not None else _CONFIG_DIR

    def load_json_file(self, filename: str) -> Dict[str, Any]:
        """
        Read ``filename`` from the config directory.

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigurationError: If the file is not valid JSON or not an object
        """
        config_path = self.config_dir / filename
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Invalid JSON in config file {filename}", path=str(config_path)) from exc

        if not isinstance(payload, dict):
            raise ConfigurationError(
                f"Config file {filename} must contain an object at the top level", path=str(config_path)
            )
        logger.debug("Loaded config file %s", config_path)
        return payload

    def get_section(self, config: Dict[str, Any], section_name: str) -> Dict[str, Any]:
        if section_name not in config:
            raise ConfigurationError(f"Configuration section not found: {section_name}", section=section_name)

        section = config[section_name]
        if not isinstance(section, dict):
            raise ConfigurationError(
                f"Configuration section '{section_name}' must be a dict, got {type(section).__name__}",
                section=section_name,
            )
        return section

    def get_parameter(self, config: Dict[str, Any], section_name: str, parameter_name: str) -> Any:
        section = self.get_section(config, section_name)
        if parameter_name not in section:
            raise ConfigurationError(
                f"Parameter '{parameter_name}' not found in section '{section_name}'",
                section=section_name,
                parameter=parameter_name,
            )
        return section[parameter_name]


def load_config(filename: str, config_dir: Optional[Path] = None) -> Dict[str, Any]:
    """
    Read a configuration file from ``config_dir`` (default: the project ``config/``).

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the file is not valid JSON
    """
    return BaseConfigLoader(config_dir).load_json_file(filename)


__all__ = ["BaseConfigLoader", "load_config"]
