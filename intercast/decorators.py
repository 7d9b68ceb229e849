"""Declaring cast targets for concrete types."""

from __future__ import annotations

import typing
from typing import Any, Callable, Hashable

from intercast.registry import (
    Caster,
    CasterRegistry,
    CastFrom,
    CastFromSync,
    default_registry,
)

_NOT_TRAITS = (object, typing.Generic, typing.Protocol, CastFrom, CastFromSync)


class CastToError(TypeError):
    """Raised when a cast declaration is used where it cannot apply."""


def generate_caster(
    concrete: type,
    target: Hashable,
    sync: bool = False,
    registry: CasterRegistry | None = None,
) -> Caster:
    """Register a caster from ``concrete`` to ``target`` and return it."""
    registry = default_registry() if registry is None else registry
    return registry.register(concrete, target, sync)


def _is_trait(base: Any) -> bool:
    origin = typing.get_origin(base) or base
    return origin not in _NOT_TRAITS


def _implemented_traits(cls: type) -> list:
    bases = cls.__dict__.get("__orig_bases__", cls.__bases__)
    return [base for base in bases if _is_trait(base)]


def cast_to(
    *args: Hashable,
    sync: bool = False,
    registry: CasterRegistry | None = None,
) -> Callable[[type], type]:
    """Class decorator registering the decorated class as castable.

    ``@cast_to()`` registers every trait the class directly derives from
    (parametrised bases such as ``Producer[int]`` are kept as written).
    ``@cast_to(Greet, Other)`` registers the listed targets instead.
    The decorated class is returned unchanged.
    """
    targets = args

    def decorate(cls: type) -> type:
        if not isinstance(cls, type):
            raise CastToError("cast_to can only decorate a class")
        if targets:
            if getattr(cls, "__parameters__", ()):
                raise CastToError(
                    "cast_to(...) can't be used on a generic type definition"
                )
            chosen = list(targets)
        else:
            chosen = _implemented_traits(cls)
            if not chosen:
                raise CastToError(
                    "cast_to() should only be on a class that implements a trait"
                )
        for target in chosen:
            generate_caster(cls, target, sync, registry)
        return cls

    return decorate


def castable_to(
    ty: type,
    *args: Hashable,
    sync: bool = False,
    registry: CasterRegistry | None = None,
) -> list[Caster]:
    """Register ``ty`` as castable to each of the given targets."""
    return [generate_caster(ty, target, sync, registry) for target in args]