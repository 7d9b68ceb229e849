"""Parsing of cast target lists such as ``[sync] Greet, std::fmt::Debug``."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field

_IDENT = r"[A-Za-z_][A-Za-z0-9_]*"
_IDENT_RE = re.compile(_IDENT)
_PATH_HEAD_RE = re.compile(rf"\s*(?:::\s*)?{_IDENT}(?:\s*::\s*{_IDENT})*")
_CRATE_RE = re.compile(r"\s*crate\s*=(?!>)")


class ArgumentError(ValueError):
    """Raised when a target list or cast declaration is malformed."""


class Flag(enum.Enum):
    """Flags that may precede a target list."""

    SYNC = "sync"


@dataclass(frozen=True)
class Targets:
    """Flags and target trait paths of a declaration."""

    flags: frozenset = field(default_factory=frozenset)
    paths: tuple = ()

    @property
    def sync(self) -> bool:
        return Flag.SYNC in self.flags


@dataclass(frozen=True)
class Casts:
    """A full declaration: optional crate location, concrete type and targets."""

    crate_loc: str | None
    ty: str
    targets: Targets


def parse_flag(name: str) -> Flag:
    """Return the flag called ``name``."""
    try:
        return Flag(name)
    except ValueError:
        raise ArgumentError(f"Unknown flag: {name}") from None


def parse_flags(names) -> frozenset:
    """Parse flag names, rejecting unknown and repeated ones."""
    flags = set()
    for name in names:
        flag = parse_flag(name)
        if flag in flags:
            raise ArgumentError(f"Duplicated flag: {name}")
        flags.add(flag)
    return frozenset(flags)


def _split_terminated(text: str, what: str) -> list[str]:
    """Split on top-level commas, allowing one trailing comma."""
    parts: list[str] = []
    current: list[str] = []
    depth = 0
    previous = ""
    for ch in text:
        if ch in "<([":
            depth += 1
        elif ch in ")]" or (ch == ">" and previous != "-"):
            depth -= 1
            if depth < 0:
                raise ArgumentError(f"unbalanced `{ch}`")
        if ch == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
        previous = ch
    if depth:
        raise ArgumentError("unclosed delimiter")
    parts.append("".join(current).strip())
    if len(parts) > 1 and not parts[-1]:
        parts.pop()
    if len(parts) == 1 and not parts[0]:
        return []
    if any(not part for part in parts):
        raise ArgumentError(f"expected {what}")
    return parts


def _parse_path(text: str) -> str:
    path = text.strip()
    match = _PATH_HEAD_RE.match(path)
    if not match:
        raise ArgumentError(f"expected path, found `{path}`")
    rest = path[match.end():].strip()
    if rest and not (rest.startswith("<") and rest.endswith(">")):
        raise ArgumentError(f"expected path, found `{path}`")
    return path


def parse_targets(text: str) -> Targets:
    """Parse ``[flag, ...] Path, Path, ...``; both parts are optional."""
    rest = text.strip()
    if not rest:
        return Targets()

    flags: frozenset = frozenset()
    if rest.startswith("["):
        close = rest.find("]")
        if close < 0:
            raise ArgumentError("expected `]`")
        names = _split_terminated(rest[1:close], "identifier")
        for name in names:
            if not _IDENT_RE.fullmatch(name):
                raise ArgumentError(f"expected identifier, found `{name}`")
        flags = parse_flags(names)
        rest = rest[close + 1:].strip()

    if not rest:
        return Targets(flags=flags)

    paths = tuple(_parse_path(part) for part in _split_terminated(rest, "path"))
    return Targets(flags=flags, paths=paths)


def parse_casts(text: str) -> Casts:
    """Parse ``[crate = path |] Type => targets``."""
    rest = text
    crate_loc = None
    match = _CRATE_RE.match(rest)
    if match:
        location, separator, rest = rest[match.end():].partition("|")
        if not separator:
            raise ArgumentError("expected `|` after crate location")
        crate_loc = _parse_path(location)

    ty, separator, targets = rest.partition("=>")
    if not separator:
        raise ArgumentError("expected `=>`")
    ty = ty.strip()
    if not ty:
        raise ArgumentError("expected type")
    return Casts(crate_loc=crate_loc, ty=ty, targets=parse_targets(targets))