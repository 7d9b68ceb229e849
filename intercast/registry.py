"""Registry of casters from concrete types to target traits."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Hashable

_SYNC_MESSAGE = "Prepend [sync] to the list of target traits for Sync + Send types"


class SyncRequiredError(TypeError):
    """Raised when a shared thread-safe cast uses a caster not marked sync."""


@dataclass(frozen=True)
class Caster:
    """Knows how to cast an instance of one concrete type to one target."""

    concrete: type
    target: Hashable
    sync: bool = False

    def _downcast(self, source: Any) -> Any:
        if type(source) is not self.concrete:
            raise TypeError(
                f"expected an instance of {self.concrete.__qualname__}, "
                f"got {type(source).__qualname__}"
            )
        return source

    def cast_ref(self, source: Any) -> Any:
        """Cast a borrowed value."""
        return self._downcast(source)

    def cast_mut(self, source: Any) -> Any:
        """Cast a value borrowed for mutation."""
        return self._downcast(source)

    def cast_box(self, source: Any) -> Any:
        """Cast an owned value."""
        return self._downcast(source)

    def cast_rc(self, source: Any) -> Any:
        """Cast a shared value."""
        return self._downcast(source)

    def cast_arc(self, source: Any) -> Any:
        """Cast a value shared between threads; requires a sync caster."""
        if not self.sync:
            raise SyncRequiredError(_SYNC_MESSAGE)
        return self._downcast(source)


class CasterRegistry:
    """Maps (concrete type, target) pairs to casters."""

    def __init__(self) -> None:
        self._casters: dict[tuple[type, Hashable], Caster] = {}
        self._lock = threading.Lock()

    def register(self, concrete: type, target: Hashable, sync: bool = False) -> Caster:
        """Register a caster; a later registration for the same pair replaces it."""
        if not isinstance(concrete, type):
            raise TypeError(f"concrete must be a type, got {concrete!r}")
        caster = Caster(concrete=concrete, target=target, sync=sync)
        with self._lock:
            self._casters[(concrete, target)] = caster
        return caster

    def lookup(self, concrete: type, target: Hashable) -> Caster | None:
        """Return the caster for the pair, or None."""
        return self._casters.get((concrete, target))

    def contains(self, concrete: type, target: Hashable) -> bool:
        """Tell whether a caster is registered for the pair."""
        return (concrete, target) in self._casters

    def __contains__(self, key: object) -> bool:
        return key in self._casters

    def __len__(self) -> int:
        return len(self._casters)


class CastFrom:
    """Optional marker base for types whose instances are cast from.

    Every object can be cast; subclassing only documents the intent.
    """

    __slots__ = ()


class CastFromSync(CastFrom):
    """Marker base for types whose instances may be shared between threads."""

    __slots__ = ()


_DEFAULT_REGISTRY = CasterRegistry()


def default_registry() -> CasterRegistry:
    """Return the process-wide registry."""
    return _DEFAULT_REGISTRY