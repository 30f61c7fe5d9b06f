#
# Copyright (C) 2026 razertray Developers — LGPL-3.0-or-later
#
"""
User configuration.

Settings are read from a YAML file and may be overridden by
environment variables:

    RAZERTRAY_BUS            session | system
    RAZERTRAY_POLL_INTERVAL  seconds between battery polls
    RAZERTRAY_LOG_LEVEL      logging level name
    NO_COLOR                 disable colored log output
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from razertray.log import Log


CONFDIR = os.path.join(
    os.environ.get("XDG_CONFIG_HOME") or os.path.join(os.path.expanduser("~"), ".config"),
    "razertray",
)
CONFFILE = os.path.join(CONFDIR, "config.yaml")

BUS_CHOICES = ("session", "system")

logger = Log.get("razertray.config")


class ConfigError(ValueError):
    """Raised when a configuration value is invalid."""


@dataclass(frozen=True)
class Settings:
    """Runtime settings, immutable once loaded."""

    bus: str = "session"
    poll_interval: float = 1.0
    log_level: str = "warning"
    color: bool = True

    def validate(self) -> Settings:
        if self.bus not in BUS_CHOICES:
            raise ConfigError("bus must be one of %s, not %r" % (", ".join(BUS_CHOICES), self.bus))
        if not self.poll_interval > 0:
            raise ConfigError("poll_interval must be positive, not %r" % self.poll_interval)
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigError("Unknown log_level: %r" % self.log_level)
        return self


def _coerce(name: str, value, kind):
    if kind is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in ("1", "true", "yes", "on"):
            return True
        if isinstance(value, str) and value.lower() in ("0", "false", "no", "off"):
            return False
        raise ConfigError("%s must be a boolean, not %r" % (name, value))

    if kind is float:
        if isinstance(value, bool):
            raise ConfigError("%s must be a number, not %r" % (name, value))
        try:
            return float(value)
        except (TypeError, ValueError) as err:
            raise ConfigError("%s must be a number, not %r" % (name, value)) from err

    if not isinstance(value, str):
        raise ConfigError("%s must be a string, not %r" % (name, value))
    return value.lower()


_TYPES = {"bus": str, "poll_interval": float, "log_level": str, "color": bool}


def _apply(settings: Settings, values: dict) -> Settings:
    known = {f.name for f in fields(Settings)}
    changes = {}
    for name, value in values.items():
        if name not in known:
            logger.warning("Ignoring unknown configuration key: %s", name)
            continue
        changes[name] = _coerce(name, value, _TYPES[name])
    return replace(settings, **changes)


def load_yaml(path: str) -> dict:
    """
    Read a configuration file.

    :param path: path to the YAML file
    :raises ConfigError: if the file is not valid YAML or not a mapping
    :return: dict of raw values, empty if the file does not exist
    """
    if not os.path.isfile(path):
        return {}

    try:
        with open(path, "r") as yaml_file:
            data = YAML(typ="safe").load(yaml_file)
    except YAMLError as err:
        raise ConfigError("Invalid configuration file %s: %s" % (path, err)) from err

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("Configuration file %s must contain a mapping" % path)
    return data


def env_overrides(environ=None) -> dict:
    """Collect overrides from the environment."""
    if environ is None:
        environ = os.environ

    values = {}
    if environ.get("RAZERTRAY_BUS"):
        values["bus"] = environ["RAZERTRAY_BUS"]
    if environ.get("RAZERTRAY_POLL_INTERVAL"):
        values["poll_interval"] = environ["RAZERTRAY_POLL_INTERVAL"]
    if environ.get("RAZERTRAY_LOG_LEVEL"):
        values["log_level"] = environ["RAZERTRAY_LOG_LEVEL"]
    if environ.get("NO_COLOR"):
        values["color"] = False
    return values


def load_settings(path: str | None = None, environ=None) -> Settings:
    """
    Load settings from the configuration file and the environment.

    Environment values take precedence over the file.

    :param path: configuration file, defaults to CONFFILE
    :param environ: environment mapping, defaults to os.environ
    :raises ConfigError: on invalid values
    """
    settings = _apply(Settings(), load_yaml(path or CONFFILE))
    settings = _apply(settings, env_overrides(environ))
    return settings.validate()
