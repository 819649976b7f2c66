"""Configuration loader and validator for clipio.

Provides ``load_config(path)`` which reads a JSON config (with
comment and trailing-comma tolerant sanitizer) and merges user
overrides from ``~/.config/clipio/config.json``.

Also provides ``validate_config(conf)`` which normalizes and
validates config keys, raising ``ValueError`` on invalid values.
"""

from __future__ import annotations

import json
import logging
import os
import re

logger = logging.getLogger(__name__)

USER_CONFIG_PATH = '~/.config/clipio/config.json'

# Single source of truth for default configuration
DEFAULT_CONFIG: dict = {
    'timeout': 2.0,
    'debug': False,
    'read_command': None,
    'write_command': None,
}


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _sanitize_json_text(s: str) -> str:
    """Remove ``#``/``//`` comments and trailing commas from JSON-like text."""
    # Hash-style line comments
    s = re.sub(r"^[ \t]*#.*$", "", s, flags=re.MULTILINE)
    # C++-style line comments
    s = re.sub(r"^[ \t]*//.*$", "", s, flags=re.MULTILINE)
    # Trailing commas before } or ]
    s = re.sub(r",[ \t\r\n]+(\}|\])", r"\1", s)
    return s


def _validate_argv(key: str, value) -> list[str] | None:
    if value is None:
        return None
    if (not isinstance(value, list) or not value
            or not all(isinstance(part, str) and part for part in value)):
        raise ValueError(f"Invalid '{key}': must be null or a non-empty list of strings")
    return list(value)


# ------------------------------------------------------------------
# Validation
# ------------------------------------------------------------------

def validate_config(conf: dict | None) -> dict:
    """Validate and normalize configuration dictionary.

    Returns a normalized dict with all expected keys.
    Raises ``ValueError`` on invalid values.
    """
    if conf is None:
        conf = {}

    defaults = dict(DEFAULT_CONFIG)
    out = dict(defaults)

    # timeout — positive float in [0.1, 60.0]
    tmo = conf.get('timeout', defaults['timeout'])
    if isinstance(tmo, bool):
        raise ValueError(f"Invalid 'timeout': {tmo}")
    try:
        tmo_val = float(tmo)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid 'timeout': {tmo}")
    if not (0.1 <= tmo_val <= 60.0):
        raise ValueError(f"Invalid 'timeout': {tmo} (must be between 0.1 and 60.0)")
    out['timeout'] = tmo_val

    # debug — boolean
    dbg = conf.get('debug', defaults['debug'])
    if not isinstance(dbg, bool):
        raise ValueError("Invalid 'debug' flag: must be boolean")
    out['debug'] = dbg

    # read_command / write_command — explicit argv overrides
    out['read_command'] = _validate_argv('read_command', conf.get('read_command'))
    out['write_command'] = _validate_argv('write_command', conf.get('write_command'))

    return out


def _read_and_merge(path: str, target_config: dict) -> bool:
    """Read a JSON file, validate, and merge into *target_config*.

    Returns True on success, False on any error.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = f.read()
    except OSError as exc:
        logger.warning("Cannot read config %s: %s", path, exc)
        return False

    try:
        cfg = json.loads(raw)
    except json.JSONDecodeError:
        try:
            cfg = json.loads(_sanitize_json_text(raw))
        except json.JSONDecodeError as exc:
            logger.warning("JSON parse error in %s: %s", path, exc)
            return False

    if not isinstance(cfg, dict):
        logger.warning("Invalid config %s: top level must be an object", path)
        return False

    try:
        validated = validate_config(cfg)
    except ValueError as verr:
        logger.warning("Invalid config %s: %s", path, verr)
        return False

    # Only override keys explicitly present in source
    for k in cfg:
        if k in validated:
            target_config[k] = validated[k]
    target_config['_config_path'] = path
    return True


# ------------------------------------------------------------------
# Top-level loader
# ------------------------------------------------------------------

def load_config(config_path: str | None = None) -> dict:
    """Load and merge configuration.

    If *config_path* is given, uses only that file (returns defaults if
    the file does not exist).  Otherwise falls back to
    ``~/.config/clipio/config.json``.

    Returns the effective configuration dict (always has all default keys).
    """
    config = dict(DEFAULT_CONFIG)

    path = config_path if config_path is not None else os.path.expanduser(USER_CONFIG_PATH)
    if os.path.exists(path):
        _read_and_merge(path, config)
    return config


def public_config(conf: dict) -> dict:
    """Return *conf* without internal ``_``-prefixed keys."""
    return {k: v for k, v in conf.items() if not k.startswith('_')}
