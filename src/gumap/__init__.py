"""
GuMap Package

An ordered mapping that enforces a small, declarative immutability policy
on every access.

Architecture:
    caller (m.x / m["x"] / m.get("x")) → GuMap checks → Verdict → dict
                                             ↑
                                        GuMapConfig (frozen)

Modules:
    gu_map.py        - The policy-enforcing mapping (recommended entry point)
    config.py        - Frozen, normalized policy record
    config_loader.py - Policies from JSON config files
    errors.py        - MutationBlockedError, MissingKeyError, ImmutableStructureError
    verdict.py       - Tagged results of access checks
"""

# Mapping
from gumap.gu_map import (
    GuMap,
    BRIDGE_NAMES,
    create_gu_map,
    is_reserved,
)

# Policy
from gumap.config import (
    GuMapConfig,
    MapMode,
    normalize_config,
)

# Config files
from gumap.config_loader import (
    load_config,
    load_policy,
    load_preset,
    save_policy,
    get_config_path,
)

# Errors
from gumap.errors import (
    GuMapError,
    MutationBlockedError,
    MissingKeyError,
    MissingAttributeError,
    ImmutableStructureError,
)

from gumap.verdict import Verdict

__version__ = "1.0.0"

__all__ = [
    "GuMap",
    "BRIDGE_NAMES",
    "create_gu_map",
    "is_reserved",
    "GuMapConfig",
    "MapMode",
    "normalize_config",
    "load_config",
    "load_policy",
    "load_preset",
    "save_policy",
    "get_config_path",
    "GuMapError",
    "MutationBlockedError",
    "MissingKeyError",
    "MissingAttributeError",
    "ImmutableStructureError",
    "Verdict",
]
