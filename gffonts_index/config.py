"""
Configuration for gffonts_index.

Configuration is read-only: a file (JSON, TOML or YAML) merged over the
defaults, then environment variable overrides.
"""

import json
import logging
import os
import tomllib
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

ENV_PREFIX = "GFFONTS_INDEX_"


def get_config_path():
    """Get the path to the configuration file.

    Checks in order:
    1. GFFONTS_INDEX_CONFIG environment variable
    2. ~/.gffonts_index/ directory
    """
    if 'GFFONTS_INDEX_CONFIG' in os.environ:
        path = Path(os.environ['GFFONTS_INDEX_CONFIG'])
        if path.exists():
            return path

    config_dir = Path.home() / '.gffonts_index'
    for filename in ['config.json', 'config.toml', 'config.yaml', 'config.yml']:
        path = config_dir / filename
        if path.exists():
            return path

    return config_dir / 'config.json'


def get_default_config():
    """Get default configuration."""
    return {
        "general": {
            "repository_directory": "~/oss/fonts",
            "family_filter": "",
        },
        "logging": {
            "level": "INFO",
            "format": "%(levelname)s: %(message)s"
        },
    }


def _read_config_file(config_path):
    suffix = config_path.suffix.lower()
    if suffix == '.toml':
        with open(config_path, 'rb') as f:
            return tomllib.load(f)
    if suffix in ['.yaml', '.yml']:
        with open(config_path, 'r') as f:
            return yaml.safe_load(f) or {}
    with open(config_path, 'r') as f:
        return json.load(f)


def load_config(config_path=None):
    """Load configuration from file.

    Args:
        config_path: Explicit config file (searched for if None)

    Returns:
        dict: Defaults merged with the file and environment overrides
    """
    config_path = Path(config_path) if config_path else get_config_path()

    config = get_default_config()

    if config_path.exists():
        try:
            file_config = _read_config_file(config_path)
            config = merge_configs(config, file_config)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Error loading config from {config_path}: {e}")

    return apply_env_overrides(config)


def merge_configs(base_config, override_config):
    """
    Recursively merge two configuration dictionaries.

    Args:
        base_config (dict): Base configuration
        override_config (dict): Configuration to merge/override with

    Returns:
        dict: Merged configuration
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value

    return merged


def _coerce(value):
    if value.lower() in ('true', '1', 'yes', 'on'):
        return True
    if value.lower() in ('false', '0', 'no', 'off'):
        return False
    if value.isdigit():
        return int(value)
    return value


def apply_env_overrides(config, environ=None):
    """
    Apply environment variable overrides to configuration.

    Environment variables follow the pattern GFFONTS_INDEX_SECTION_KEY, for
    example GFFONTS_INDEX_GENERAL_REPOSITORY_DIRECTORY=/src/fonts. Keys that
    themselves contain underscores are matched longest first.
    """
    environ = os.environ if environ is None else environ

    for env_key, value in environ.items():
        if not env_key.startswith(ENV_PREFIX) or env_key == 'GFFONTS_INDEX_CONFIG':
            continue

        key_parts = env_key[len(ENV_PREFIX):].lower().split('_')
        typed_value = _coerce(value)

        current_level = config
        i = 0
        while i < len(key_parts):
            best_match_len = 0
            matched_key = None

            for config_key in current_level.keys():
                config_key_parts = config_key.split('_')
                if key_parts[i:i + len(config_key_parts)] == config_key_parts:
                    if len(config_key_parts) > best_match_len:
                        best_match_len = len(config_key_parts)
                        matched_key = config_key

            if matched_key is None:
                break

            if i + best_match_len == len(key_parts):
                current_level[matched_key] = typed_value
                break

            if not isinstance(current_level[matched_key], dict):
                break
            current_level = current_level[matched_key]
            i += best_match_len

    return config


def configure_logging(config, debug=False):
    """Configure root logging from the ``logging`` config section."""
    section = config.get("logging", {})
    level = logging.DEBUG if debug else getattr(logging, str(section.get("level", "INFO")).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format=section.get("format", "%(levelname)s: %(message)s"),
        force=True,
    )
