"""Casting objects between registered targets through a registry of casters."""

__version__ = "0.4.0"

__all__ = ["args", "cast", "decorators", "hasher", "registry"]