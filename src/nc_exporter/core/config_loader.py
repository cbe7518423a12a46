"""
config_loader.py
- Loads the exporter YAML config (Nextcloud URL, credentials, replacement table path).
- Loads the JSON replacement table referenced by it.
- Environment variables NC_URL, NC_USER, NC_PASSWORD, NC_REPLACEMENT_CONFIG and
  NC_TIMEOUT override values from the file.
"""

import json
import os
from pathlib import Path

import yaml
from loguru import logger

from nc_exporter.core.config import DEFAULT_FETCH_TIMEOUT, DEFAULT_REPLACEMENT_CONFIG, ExporterConfig
from nc_exporter.core.errors import ConfigError
from nc_exporter.lib.replacements import ReplacementTable

ENV_OVERRIDES = {
    "nc_url": "NC_URL",
    "nc_user": "NC_USER",
    "nc_password": "NC_PASSWORD",
    "nc_replacement_config": "NC_REPLACEMENT_CONFIG",
    "nc_timeout": "NC_TIMEOUT",
}


def load_yaml(path):
    """
    Load a YAML file and return a parsed dict.

    Returns {} if the file does not exist. Raises ConfigError if it cannot be
    read or does not contain a mapping.
    """
    if not Path(path).exists():
        logger.warning(f"[config] File not found: {path}")
        return {}

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data


def load_exporter_config(path, environ=None):
    """
    Build the ExporterConfig from the YAML file at `path` and the environment.

    Args:
        path (str): Exporter config file location.
        environ (dict): Environment to read overrides from (defaults to os.environ).

    Returns:
        ExporterConfig
    """
    environ = os.environ if environ is None else environ
    data = load_yaml(path)

    values = {}
    for key, env_var in ENV_OVERRIDES.items():
        value = environ.get(env_var, data.get(key))
        if value is not None:
            values[key] = value

    try:
        timeout = float(values.pop("nc_timeout", DEFAULT_FETCH_TIMEOUT))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"nc_timeout must be a number: {e}") from e
    if timeout <= 0:
        raise ConfigError(f"nc_timeout must be > 0, got {timeout}")

    config = ExporterConfig(
        nc_url=str(values.get("nc_url", "")),
        nc_user=str(values.get("nc_user", "")),
        nc_password=str(values.get("nc_password", "")),
        nc_replacement_config=str(values.get("nc_replacement_config", DEFAULT_REPLACEMENT_CONFIG)),
        nc_timeout=timeout,
    )

    problems = config.problems()
    for problem in problems:
        logger.warning(f"[config] {problem}")
    if problems:
        logger.warning(f"[config] Consider updating the configuration ({path}).")

    logger.debug(f"[config] Config loaded {config}")
    return config


def resolve_replacement_path(config, config_path):
    """Resolve a relative replacement table path against the config file's directory."""
    rep_path = Path(config.nc_replacement_config)
    if not rep_path.is_absolute():
        rep_path = Path(config_path).resolve().parent / rep_path
    return rep_path


def load_replacement_table(path):
    """
    Load the JSON replacement table.

    A missing file yields an empty table. Malformed content raises ConfigError.
    """
    logger.debug(f"[config] Reading replace config from: {path}")
    if not Path(path).exists():
        logger.error(f"[config] Replacement config file doesn't exist: {path}")
        return ReplacementTable()

    try:
        with open(path, "r") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"The replace configuration could not be read ({path}): {e}") from e

    if isinstance(data, dict) and "values" not in data:
        logger.warning(f'[config] Replacement config {path} has no "values" section.')

    table = ReplacementTable.from_config(data)
    logger.debug(f"[config] Replace config loaded with {len(table)} values")
    return table
