"""
GuMap Errors

Two independent fault categories, each surfaced only when the policy asks:
- MutationBlockedError: a write/delete/clear was refused by the policy
- MissingKeyError: a read/delete targeted a key that is not present
  (MissingAttributeError when the read was m.name, so hasattr() works)

ImmutableStructureError is not configurable. It protects the class and
private attributes of the façade itself.
"""

from typing import Any, Optional

from gumap.verdict import Verdict


ERROR_PREFIX = "GuMap Error:"

# Operations that act on the whole map rather than one key
MAP_OPERATIONS = ("clear", "popitem")


class GuMapError(Exception):
    """Base class for all GuMap errors."""
    pass


class MutationBlockedError(GuMapError):
    """A mutating operation was blocked by the immutability policy."""

    def __init__(self, operation: str, key: Any, verdict: Verdict):
        self.operation = operation
        self.key = key
        self.verdict = verdict
        super().__init__(
            f"{ERROR_PREFIX}{_blocked_reason(verdict, key)} "
            f"Cannot {operation} {_target(operation, key)}."
        )


class MissingKeyError(GuMapError, KeyError):
    """A read or delete targeted an absent key."""

    def __init__(self, operation: str, key: Any):
        self.operation = operation
        self.key = key
        if operation in MAP_OPERATIONS:
            message = f"{ERROR_PREFIX} Map is empty. Cannot {operation} the map."
        else:
            message = (
                f"{ERROR_PREFIX} Property {key!r} does not exist. "
                f"Cannot {operation} property {key!r}."
            )
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the whole message
        return self.args[0]


class MissingAttributeError(MissingKeyError, AttributeError):
    """MissingKeyError raised from attribute access (m.name)."""
    pass


class ImmutableStructureError(GuMapError, TypeError):
    """An attempt was made to alter the façade's class or reserved names."""

    def __init__(self, detail: str, name: Optional[str] = None):
        self.name = name
        super().__init__(f"{ERROR_PREFIX} {detail}")


def _target(operation: str, key: Any) -> str:
    if operation in MAP_OPERATIONS:
        return "the map"
    return f"property {key!r}"


def _blocked_reason(verdict: Verdict, key: Any) -> str:
    if verdict == Verdict.DENIED_IMMUTABLE_MAP:
        return " Map is immutable."
    if verdict == Verdict.DENIED_IMMUTABLE_PROPERTIES:
        return " Properties are immutable."
    if verdict == Verdict.DENIED_RESERVED:
        return f" {key!r} is a reserved name."
    return f" {verdict.name}."
