"""
GuMap policies stored as JSON.

One file can hold a default "policy" plus named "presets"; flag names are
anything normalize_config accepts, including the camelCase spellings.

File format:
    {
      "policy": {"immutable_properties": true, "error_on_mutation_blocked": true},
      "presets": {
        "frozen": {"immutable_map": true}
      },
      "notes": {}
    }

Usage:
    from gumap.config_loader import load_policy

    policy = load_policy()                      # default config, or code defaults
    policy = load_policy("path/to/gumap.json")
    policy = load_policy(preset="frozen")
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from gumap.config import GuMapConfig, normalize_config


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

CONFIG_ENV_VAR = "GUMAP_CONFIG"
DEFAULT_CONFIG_PATH = Path("gumap.json")


def _resolve_path(config_path: Optional[PathLike]) -> Path:
    return Path(config_path) if config_path else get_config_path()


def get_config_path() -> Path:
    """Path named by GUMAP_CONFIG, else gumap.json in the working directory."""
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else DEFAULT_CONFIG_PATH


def load_config(config_path: Optional[PathLike] = None) -> Dict[str, Any]:
    """Raw JSON document, or {} when no file exists."""
    path = _resolve_path(config_path)
    if not path.exists():
        logger.debug("No GuMap config at %s, using defaults", path)
        return {}

    with open(path) as f:
        return json.load(f)


def load_preset(preset_name: str, config_path: Optional[PathLike] = None) -> Dict[str, Any]:
    """Flags of one entry under "presets"; {} for an unknown name."""
    return load_config(config_path).get("presets", {}).get(preset_name, {})


def load_policy(
    config_path: Optional[PathLike] = None,
    preset: Optional[str] = None,
) -> GuMapConfig:
    """
    Build a GuMapConfig from the "policy" section, or from a preset.

    An absent file, section, or preset yields the all-False policy.
    """
    if preset is None:
        section = load_config(config_path).get("policy", {})
    else:
        section = load_preset(preset, config_path)
        if not section:
            logger.debug("GuMap preset %r not found, using defaults", preset)

    return normalize_config(section)


def save_policy(
    policy: GuMapConfig,
    config_path: Optional[PathLike] = None,
    notes: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Write policy into the "policy" section.

    Presets already in the file are left alone; notes are merged key by key.
    """
    path = _resolve_path(config_path)
    document = load_config(path)
    document["policy"] = policy.to_dict()
    if notes:
        document["notes"] = {**document.get("notes", {}), **notes}

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(document, f, indent=2)
