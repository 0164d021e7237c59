"""
GuMap Config

The policy record for one GuMap. Flags are coerced to bool and frozen at
construction; there is no way to change a policy afterwards.

Invariant:
    immutable_map => immutable_properties

Usage:
    from gumap.config import GuMapConfig, normalize_config

    cfg = GuMapConfig(immutable_properties=True)
    cfg = normalize_config({"immutable_map": 1})   # immutable_properties is True
    cfg = normalize_config({"immutableMap": True}) # camelCase spelling accepted
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from enum import Enum, auto
from typing import Any, Dict, Optional, Tuple


class MapMode(Enum):
    """Policy-derived mode. Fixed for the lifetime of a GuMap."""
    MUTABLE = auto()
    IMMUTABLE_PROPERTIES = auto()   # Add only
    IMMUTABLE_MAP = auto()          # Frozen as constructed


# Alternate spellings accepted in mappings, per canonical field
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "immutable_map": ("immutableMap", "fullyImmutable", "fully_immutable"),
    "immutable_properties": (
        "immutableProperties", "propertiesImmutable", "properties_immutable",
    ),
    "error_on_mutation_blocked": (
        "throwErrorOnPropertyMutate", "errorOnMutationBlocked",
    ),
    "error_on_missing_key": (
        "throwErrorOnNonexistentProperty", "errorOnMissingKey",
    ),
}


@dataclass(frozen=True)
class GuMapConfig:
    """
    Immutability and error-reporting policy for one GuMap.

    immutable_map: no entries may be added, changed, or deleted.
        Overrides immutable_properties.
    immutable_properties: new entries may be added, existing entries
        cannot be changed or deleted.
    error_on_mutation_blocked: raise MutationBlockedError when the policy
        blocks a mutation. Otherwise the operation reports False and
        nothing changes.
    error_on_missing_key: raise MissingKeyError when a read or delete
        targets an absent key. Otherwise reads return None and deletes
        report False.
    """
    immutable_map: bool = False
    immutable_properties: bool = False
    error_on_mutation_blocked: bool = False
    error_on_missing_key: bool = False

    def __post_init__(self):
        # Frozen dataclass: normalize through object.__setattr__
        immutable_map = bool(self.immutable_map)
        object.__setattr__(self, "immutable_map", immutable_map)
        object.__setattr__(
            self, "immutable_properties",
            immutable_map or bool(self.immutable_properties),
        )
        object.__setattr__(
            self, "error_on_mutation_blocked", bool(self.error_on_mutation_blocked)
        )
        object.__setattr__(
            self, "error_on_missing_key", bool(self.error_on_missing_key)
        )

    @property
    def mode(self) -> MapMode:
        if self.immutable_map:
            return MapMode.IMMUTABLE_MAP
        if self.immutable_properties:
            return MapMode.IMMUTABLE_PROPERTIES
        return MapMode.MUTABLE

    def to_dict(self) -> Dict[str, bool]:
        """Serialize to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "GuMapConfig":
        """
        Build from a dictionary.

        Unrecognized keys are ignored, missing keys default to False.
        """
        values = {}
        for name, aliases in FIELD_ALIASES.items():
            for candidate in (name,) + aliases:
                if candidate in d:
                    values[name] = d[candidate]
                    break
        return cls(**values)


def normalize_config(options: Optional[Any] = None) -> GuMapConfig:
    """
    Normalize anything config-shaped into a GuMapConfig.

    Accepts None, a GuMapConfig (returned as is), a mapping, or any object
    exposing the flags as attributes. Never raises.
    """
    if options is None:
        return GuMapConfig()
    if isinstance(options, GuMapConfig):
        return options
    if isinstance(options, Mapping):
        return GuMapConfig.from_dict(options)
    return GuMapConfig(**{
        f.name: getattr(options, f.name, False) for f in fields(GuMapConfig)
    })
