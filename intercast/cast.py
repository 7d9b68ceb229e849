"""Casting a value to a registered target trait.

Each function looks up a caster for the value's concrete type and the
requested target in a registry (the process-wide one unless given).
"""

from __future__ import annotations

from typing import Any, Hashable

from intercast.registry import CasterRegistry, default_registry


class CastError(TypeError):
    """Raised when an owned or shared value cannot be cast.

    The value that failed to cast is kept in ``source`` so it is not lost.
    """

    def __init__(self, source: Any, target: Hashable) -> None:
        super().__init__(
            f"{type(source).__qualname__} cannot be cast to {target!r}"
        )
        self.source = source
        self.target = target


def _resolve(registry: CasterRegistry | None) -> CasterRegistry:
    return default_registry() if registry is None else registry


def cast(source: Any, target: Hashable, registry: CasterRegistry | None = None) -> Any:
    """Return ``source`` viewed as ``target``, or None if no caster exists."""
    caster = _resolve(registry).lookup(type(source), target)
    if caster is None:
        return None
    return caster.cast_ref(source)


def cast_mut(source: Any, target: Hashable, registry: CasterRegistry | None = None) -> Any:
    """Like :func:`cast`, for a value about to be mutated."""
    caster = _resolve(registry).lookup(type(source), target)
    if caster is None:
        return None
    return caster.cast_mut(source)


def cast_owned(source: Any, target: Hashable, registry: CasterRegistry | None = None) -> Any:
    """Cast an owned value; raise :class:`CastError` holding it on failure."""
    caster = _resolve(registry).lookup(type(source), target)
    if caster is None:
        raise CastError(source, target)
    return caster.cast_box(source)


def cast_shared(source: Any, target: Hashable, registry: CasterRegistry | None = None) -> Any:
    """Cast a value shared between threads.

    Raises :class:`CastError` if no caster exists and
    :class:`~intercast.registry.SyncRequiredError` if the caster is not sync.
    """
    caster = _resolve(registry).lookup(type(source), target)
    if caster is None:
        raise CastError(source, target)
    return caster.cast_arc(source)


def impls(source: Any, target: Hashable, registry: CasterRegistry | None = None) -> bool:
    """Tell whether ``source`` can be cast to ``target``."""
    return _resolve(registry).contains(type(source), target)