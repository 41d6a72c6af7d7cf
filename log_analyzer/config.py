"""Configuration loading from an optional YAML file and env vars."""

import codecs
import logging
import os
from dataclasses import dataclass

import yaml

from log_analyzer.formatter import FORMATS

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when a config value is invalid or the YAML cannot be parsed."""


@dataclass(frozen=True)
class Config:
    top_n: int = 5
    default_format: str = "text"
    encoding: str = "utf-8"
    log_level: str = "WARNING"


# YAML key -> (Config field, env var)
_FIELDS = {
    "top_errors": ("top_n", "LOG_ANALYZER_TOP_ERRORS"),
    "format": ("default_format", "LOG_ANALYZER_FORMAT"),
    "encoding": ("encoding", "LOG_ANALYZER_ENCODING"),
    "log_level": ("log_level", "LOG_ANALYZER_LOG_LEVEL"),
}


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    logger.info("Loaded YAML config from %s", path)
    return data


def _validate(cfg: Config) -> Config:
    if cfg.top_n < 1:
        raise ConfigError(f"top_errors must be a positive integer, got {cfg.top_n}")
    if cfg.default_format not in FORMATS:
        raise ConfigError(
            f"format must be one of {', '.join(FORMATS)}, got {cfg.default_format!r}"
        )
    if cfg.log_level not in LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {cfg.log_level!r}")
    try:
        codecs.lookup(cfg.encoding)
    except LookupError as exc:
        raise ConfigError(f"Unknown encoding: {cfg.encoding!r}") from exc
    return cfg


def load_config(yaml_data: dict | None = None) -> Config:
    """Build Config from defaults, then YAML data, then environment variables."""
    values = {}
    for key, (attr, env_var) in _FIELDS.items():
        value = (yaml_data or {}).get(key)
        value = os.environ.get(env_var, value)
        if value is not None:
            values[attr] = value

    try:
        top_n = int(values.get("top_n", Config.top_n))
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"top_errors must be an integer: {values['top_n']!r}") from exc

    return _validate(Config(
        top_n=top_n,
        default_format=str(values.get("default_format", Config.default_format)).lower(),
        encoding=str(values.get("encoding", Config.encoding)),
        log_level=str(values.get("log_level", Config.log_level)).upper(),
    ))
