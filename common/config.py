"""
Service Configuration.

Reads the JSON configuration file of the conversion service. The keys are
the ones the REST front end has always used, so an existing ``config.json``
keeps working::

    {"APIRoot": "api/", "DocRoot": "doc/", "Binding": ":1111", "LogLevel": "INFO"}

A missing file is not an error: the defaults apply. A missing default
``config.json`` is logged at DEBUG, any other missing file at WARNING.
A file that exists but cannot be parsed is fatal.
"""

import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Union

from common.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_FILE = "config.json"

# JSON key -> ServiceConfig field
_KEYS = {
    "APIRoot": "api_root",
    "DocRoot": "doc_root",
    "Binding": "binding",
    "LogLevel": "log_level",
}


class ConfigError(Exception):
    """The configuration file exists but is not a valid configuration."""


@dataclass(frozen=True)
class ServiceConfig:
    """Settings of the conversion service.

    Attributes
    ----------
    api_root : str
        URL prefix of the conversion API.
    doc_root : str
        Directory of the static documentation.
    binding : str
        ``host:port`` the HTTP front end listens on.
    log_level : str
        Level name applied to all loggers of the system.

    `api_root`, `doc_root` and `binding` are not read by the conversion
    engine or the CLI. They are kept so that the HTTP front end, which is
    not part of this package, reads the same file.
    """
    api_root: str = "api/"
    doc_root: str = "doc/"
    binding: str = ":1111"
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ServiceConfig':
        """Build a configuration from the decoded JSON document.

        Raises
        ------
        ConfigError
            If a known key does not hold a string or the log level is unknown.
        """
        values = {}
        for key, value in data.items():
            if key not in _KEYS:
                logger.debug(f"Ignoring unknown configuration key {key!r}")
                continue
            if not isinstance(value, str):
                raise ConfigError(f"Configuration key {key!r} must be a string, got {value!r}")
            values[_KEYS[key]] = value

        config = cls(**values)
        if not isinstance(logging.getLevelName(config.log_level.upper()), int):
            raise ConfigError(f"Unknown log level {config.log_level!r}")
        return config

    def to_dict(self) -> Dict[str, str]:
        """Return the configuration under its JSON keys."""
        fields = asdict(self)
        return {key: fields[name] for key, name in _KEYS.items()}


def load_config(path: Union[str, Path] = DEFAULT_CONFIG_FILE) -> ServiceConfig:
    """Load the service configuration from a JSON file.

    Parameters
    ----------
    path : str or Path
        Location of the JSON configuration file.

    Returns
    -------
    ServiceConfig
        The configuration, or the defaults if the file does not exist.

    Raises
    ------
    ConfigError
        If the file is not valid JSON or not a JSON object.
    """
    path = Path(path)
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except FileNotFoundError:
        # the default file is optional
        log = logger.debug if path == Path(DEFAULT_CONFIG_FILE) else logger.warning
        log(f"Configuration file {path} not found, using defaults")
        return ServiceConfig()
    except json.JSONDecodeError as e:
        raise ConfigError(f"Unable to parse JSON configuration file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file {path} must contain a JSON object")

    config = ServiceConfig.from_dict(data)
    logger.info(f"Loaded configuration from {path}")
    return config
