# intercast

`intercast` lets you take an object that you know through one interface and
ask whether, and as what, it may be used through another interface. For each
concrete class you register the targets it may be cast to; a cast then looks
the pair (concrete class, target) up in a registry instead of inspecting the
object.

Targets are any hashable values, usually classes. A successful cast returns the
object itself: no wrapper or adapter is built.

## Installation

```
pip install intercast
```

The package has no dependencies outside the standard library.

## Registering targets

`intercast.decorators` offers three ways to register targets.

Name the targets on the class:

```python
from intercast.decorators import cast_to

class Greet:
    def greet(self) -> str:
        raise NotImplementedError

class Greet1:
    def greet1(self) -> str:
        raise NotImplementedError

@cast_to(Greet, Greet1)
class Data:
    def greet(self) -> str:
        return "Hello"

    def greet1(self) -> str:
        return "Hello1"
```

Use `@cast_to()` with no targets to register every base the class directly
derives from. Parametrised bases such as `Producer[int]` are registered as
written, so the cast must ask for `Producer[int]`. `object`, `Generic`,
`Protocol`, `CastFrom` and `CastFromSync` are never registered.

```python
@cast_to()
class Polite(Greet):
    def greet(self) -> str:
        return "Good day"
```

`cast_to` raises `CastToError` when it decorates something that is not a class,
when `@cast_to()` finds no base to register, or when explicit targets are
given for a generic class (one with type parameters).

Register a class defined elsewhere with `castable_to`, which returns the list
of `Caster` objects it created:

```python
from intercast.decorators import castable_to

castable_to(Data, Greet, Greet1)
```

`generate_caster(concrete, target, sync=False, registry=None)` registers a
single pair and returns its `Caster`.

Pass `sync=True` to any of these when the object is to be cast as a value
shared between threads with `cast_shared`.

Each call takes a `registry=` argument. Without it the process-wide registry
from `intercast.registry.default_registry()` is used. A `CasterRegistry` can
also be built and filled directly with `register(concrete, target, sync)`;
`lookup(concrete, target)` returns the `Caster` or `None`, and
`contains(concrete, target)` tells whether one is registered. Registering the
same pair again replaces the earlier caster.

`intercast.registry` also has the marker bases `CastFrom` and `CastFromSync`.
Subclassing them is optional and only documents intent; any object can be cast.

## Casting

The functions in `intercast.cast` all take `(source, target, registry=None)`
and look up the exact class of `source` (`type(source)`); a subclass of a
registered class is not covered by its parent's registration.

| function      | on success      | when no caster is registered |
|---------------|-----------------|------------------------------|
| `cast`        | the object      | `None`                       |
| `cast_mut`    | the object      | `None`                       |
| `cast_owned`  | the object      | raises `CastError`           |
| `cast_shared` | the object      | raises `CastError`           |
| `impls`       | `True`          | `False`                      |

`cast_shared` also raises `SyncRequiredError` (from `intercast.registry`) if
the caster was registered without `sync=True`.

```python
from intercast.cast import cast, cast_owned, impls, CastError

data = Data()
greeter = cast(data, Greet)
print(greeter.greet())

assert impls(data, Greet1)
assert not impls(data, str)

try:
    cast_owned(data, str)
except CastError as err:
    assert err.source is data
```

`CastError` is a `TypeError` and keeps the value in `source` and the requested
target in `target`.

## Argument strings

`intercast.args` parses textual declarations:

- `parse_targets("[sync] Greet, std::fmt::Debug")` returns a `Targets` with
  `flags`, `paths` and a `sync` property.
- `parse_casts("crate = some::path | Data => [sync] Debug, Greet")` returns a
  `Casts` with `crate_loc`, `ty` and `targets`; the `crate = ... |` part is
  optional.
- `parse_flag` and `parse_flags` turn flag names into `Flag` members.

The only flag is `sync`. Unknown flags, repeated flags and malformed input
raise `ArgumentError`, a `ValueError`. These functions only parse; they do not
register anything.

## Hashing

`intercast.hasher.FastHasher` XOR-folds bytes into a 64-bit state through
`write(data)` and `finish()`; `fast_hash(data)` hashes a bytes-like value in one
call. It is a standalone utility: the registry keys its casters with an
ordinary dictionary.

## What it does not do

Registration and casting happen at run time. Nothing checks that a class
really provides the methods of the targets it is registered for, and there is
no command-line tool.