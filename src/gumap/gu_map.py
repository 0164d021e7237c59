"""
GuMap - Policy-Enforcing Mapping

A MutableMapping façade over a private dict. Every read, write, delete and
membership check is evaluated against a frozen GuMapConfig before the dict
is touched, so a rejected operation never partially applies.

Access surfaces (all routed through the same checks):
    m.get("a")      m["a"]      m.a
    m.set("a", 1)   m["a"] = 1  m.a = 1
    m.delete("a")   del m["a"]  del m.a
    m.has("a")      "a" in m

Reserved names (BRIDGE_NAMES) always resolve to the built-in operation and
are always rejected on write, so they can never become entries.

The name transliterates 固Map ("gù-map"): 固 means solid, firm, sure.

Usage:
    from gumap import create_gu_map

    m = create_gu_map([("a", 1)], {"immutable_properties": True})
    m.b = 2          # added
    m.a = 5          # silently ignored: existing entries are immutable
    m.set("a", 5)    # False
"""

import logging
import types
from collections.abc import Mapping, MutableMapping
from typing import Any, Callable, Iterable, Iterator, List, Optional

from gumap.config import GuMapConfig, normalize_config
from gumap.errors import (
    ImmutableStructureError,
    MissingAttributeError,
    MissingKeyError,
    MutationBlockedError,
)
from gumap.verdict import Verdict


logger = logging.getLogger(__name__)


# =============================================================================
# Reserved Names
# =============================================================================

BRIDGE_NAMES = frozenset({
    # Core operations
    "get",
    "set",
    "has",
    "delete",
    "entries",
    "keys",
    "values",
    "clear",
    "for_each",
    "size",
    "__iter__",
    # Mapping protocol
    "items",
    "pop",
    "popitem",
    "setdefault",
    "update",
    "copy",
    # Reflection
    "own_names",
    "config",
})

_MISSING = object()


def is_reserved(key: Any) -> bool:
    """True if key names a bridge operation."""
    return isinstance(key, str) and key in BRIDGE_NAMES


# =============================================================================
# GuMap
# =============================================================================

class GuMap(MutableMapping):
    """
    Ordered mapping with attribute access and a frozen immutability policy.

    Args:
        entries: iterable of (key, value) pairs, or a mapping. Loaded as
            constructed, before the policy applies.
        config: GuMapConfig, mapping, or flag-bearing object; see
            normalize_config.
    """

    __slots__ = ("_store", "_config")

    def __init__(self, entries: Optional[Any] = None, config: Optional[Any] = None):
        store = {}
        if entries is not None:
            pairs = entries.items() if isinstance(entries, Mapping) else entries
            for key, value in pairs:
                if is_reserved(key):
                    raise ImmutableStructureError(
                        f"{key!r} is a reserved name and cannot be an entry.",
                        name=key,
                    )
                store[key] = value
        object.__setattr__(self, "_store", store)
        object.__setattr__(self, "_config", normalize_config(config))

    # -------------------------------------------------------------------------
    # Checks
    # -------------------------------------------------------------------------

    def _check_set(self, key: Any) -> Verdict:
        if is_reserved(key):
            return Verdict.DENIED_RESERVED
        if self._config.immutable_map:
            return Verdict.DENIED_IMMUTABLE_MAP
        if self._config.immutable_properties and key in self._store:
            return Verdict.DENIED_IMMUTABLE_PROPERTIES
        return Verdict.ALLOWED

    def _check_delete(self, key: Any) -> Verdict:
        # Deleting is a change under either mode, present key or not
        verdict = self._check_clear()
        if not verdict.allowed:
            return verdict
        if is_reserved(key):
            return Verdict.DENIED_RESERVED
        if key not in self._store:
            return Verdict.DENIED_MISSING
        return Verdict.ALLOWED

    def _check_clear(self) -> Verdict:
        if self._config.immutable_map:
            return Verdict.DENIED_IMMUTABLE_MAP
        if self._config.immutable_properties:
            return Verdict.DENIED_IMMUTABLE_PROPERTIES
        return Verdict.ALLOWED

    def _resolve(self, operation: str, key: Any, verdict: Verdict) -> bool:
        """
        Turn a verdict into a result.

        Returns True if the operation may proceed. A denial raises when the
        matching error flag is set, otherwise returns False.
        """
        if verdict.allowed:
            return True

        logger.debug("GuMap %s %r rejected: %s", operation, key, verdict.name)

        if verdict == Verdict.DENIED_MISSING:
            if self._config.error_on_missing_key:
                raise MissingKeyError(operation, key)
            return False

        if self._config.error_on_mutation_blocked:
            raise MutationBlockedError(operation, key, verdict)
        return False

    # -------------------------------------------------------------------------
    # Bridge operations
    # -------------------------------------------------------------------------

    def get(self, key: Any, default: Any = None) -> Any:
        """
        Read an entry.

        Reserved names return the bound operation (or the current value for
        size and config). Absent keys return default unless the policy
        raises on missing keys.
        """
        if is_reserved(key):
            return getattr(self, key)
        if key in self._store:
            return self._store[key]
        self._resolve("get", key, Verdict.DENIED_MISSING)
        return default

    def set(self, key: Any, value: Any) -> bool:
        """Write an entry. Returns True if applied."""
        if not self._resolve("set", key, self._check_set(key)):
            return False
        self._store[key] = value
        return True

    def has(self, key: Any) -> bool:
        if is_reserved(key):
            return True
        try:
            return key in self._store
        except TypeError:
            # Unhashable keys can never be stored
            return False

    def delete(self, key: Any) -> bool:
        """Delete an entry. Returns True if an entry was removed."""
        if not self._resolve("delete", key, self._check_delete(key)):
            return False
        del self._store[key]
        return True

    def clear(self) -> bool:
        """Remove all entries. Returns True if applied."""
        if not self._resolve("clear", None, self._check_clear()):
            return False
        self._store.clear()
        return True

    def entries(self):
        """Live, read-only view of (key, value) pairs in insertion order."""
        return self._store.items()

    items = entries

    def keys(self):
        return self._store.keys()

    def values(self):
        return self._store.values()

    def for_each(self, callback: Callable[..., Any], this_arg: Any = None) -> None:
        """
        Call callback(value, key, self) for each entry in insertion order.

        The third argument is this GuMap, never the underlying dict, so the
        callback cannot sidestep the policy. If this_arg is given, the
        callback is bound to it as its first argument.
        """
        if this_arg is not None:
            callback = types.MethodType(callback, this_arg)
        for key, value in self._store.items():
            callback(value, key, self)

    @property
    def size(self) -> int:
        return len(self._store)

    @property
    def config(self) -> GuMapConfig:
        return self._config

    def own_names(self) -> List[Any]:
        """Entry keys followed by the reserved names."""
        return list(self._store) + sorted(BRIDGE_NAMES)

    # -------------------------------------------------------------------------
    # Mapping protocol
    # -------------------------------------------------------------------------

    def pop(self, key: Any, default: Any = _MISSING) -> Any:
        """
        Delete an entry and return its value.

        With a default, a missing key returns the default. A silently
        rejected pop returns the default, or None.
        """
        verdict = self._check_delete(key)
        if verdict == Verdict.DENIED_MISSING and default is not _MISSING:
            return default
        if not self._resolve("delete", key, verdict):
            return None if default is _MISSING else default
        return self._store.pop(key)

    def popitem(self) -> Any:
        """Delete and return the last inserted (key, value) pair."""
        if not self._store:
            verdict = self._check_clear()
            if verdict.allowed:
                verdict = Verdict.DENIED_MISSING
            self._resolve("popitem", None, verdict)
            return None
        key = next(reversed(self._store))
        if not self._resolve("delete", key, self._check_delete(key)):
            return None
        return self._store.popitem()

    def setdefault(self, key: Any, default: Any = None) -> Any:
        if self.has(key):
            return self.get(key)
        if self.set(key, default):
            return default
        return self._store.get(key)

    def update(self, other: Any = (), **kwargs: Any) -> None:
        """
        Write each pair through set(), in order.

        Each write is checked on its own; a raising write stops the update.
        """
        pairs = other.items() if isinstance(other, Mapping) else other
        for key, value in pairs:
            self.set(key, value)
        for key, value in kwargs.items():
            self.set(key, value)

    def copy(self) -> "GuMap":
        """New GuMap with the same entries and the same policy."""
        return type(self)(self._store.items(), self._config)

    def __getitem__(self, key: Any) -> Any:
        return self.get(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: Any) -> None:
        self.delete(key)

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._store!r}, config={self._config!r})"

    def __reduce__(self):
        return (type(self), (list(self._store.items()), self._config))

    # -------------------------------------------------------------------------
    # Attribute access
    # -------------------------------------------------------------------------

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails, so reserved names never get here
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self.get(name)
        except MissingKeyError:
            # hasattr() and getattr(m, name, default) expect AttributeError
            raise MissingAttributeError("get", name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "__class__":
            raise ImmutableStructureError("The class of a GuMap cannot be changed.", name=name)
        if is_reserved(name):
            self.set(name, value)
            return
        if name.startswith("_"):
            raise ImmutableStructureError(
                f"Cannot set {name}. The structure of a GuMap cannot be changed.",
                name=name,
            )
        self.set(name, value)

    def __delattr__(self, name: str) -> None:
        if is_reserved(name):
            self.delete(name)
            return
        if name.startswith("_"):
            raise ImmutableStructureError(
                f"Cannot delete {name}. The structure of a GuMap cannot be changed.",
                name=name,
            )
        self.delete(name)

    def __dir__(self) -> Iterable[str]:
        names = {key for key in self._store if isinstance(key, str)}
        return names | BRIDGE_NAMES


def create_gu_map(entries: Optional[Any] = None, config: Optional[Any] = None) -> GuMap:
    """Build a GuMap from initial entries and a config."""
    return GuMap(entries, config)
