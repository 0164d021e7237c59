"""Verdicts returned by the façade's access checks."""

from enum import Enum, auto


class Verdict(Enum):
    """Result of checking one access against the policy and the container."""
    ALLOWED = auto()
    DENIED_IMMUTABLE_MAP = auto()          # Nothing may be added, changed, or removed
    DENIED_IMMUTABLE_PROPERTIES = auto()   # Existing entries may not change
    DENIED_RESERVED = auto()               # Name belongs to the bridge
    DENIED_MISSING = auto()                # Key not present

    @property
    def allowed(self) -> bool:
        return self is Verdict.ALLOWED
