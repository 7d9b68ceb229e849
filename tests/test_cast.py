import pytest

from intercast.cast import CastError, cast, cast_mut, cast_owned, cast_shared, impls
from intercast.registry import CasterRegistry, CastFromSync, SyncRequiredError


class Debug:
    pass


class Display:
    pass


class SourceTrait(CastFromSync):
    pass


class TestStruct(SourceTrait):
    pass


@pytest.fixture
def registry():
    reg = CasterRegistry()
    reg.register(TestStruct, Debug, sync=True)
    return reg


def test_cast_ref(registry):
    ts = TestStruct()
    assert cast(ts, Debug, registry) is ts


def test_cast_mut(registry):
    ts = TestStruct()
    assert cast_mut(ts, Debug, registry) is ts


def test_cast_box(registry):
    ts = TestStruct()
    assert cast_owned(ts, Debug, registry) is ts


def test_cast_rc_and_arc(registry):
    ts = TestStruct()
    assert cast_shared(ts, Debug, registry) is ts


def test_cast_ref_wrong(registry):
    assert cast(TestStruct(), Display, registry) is None


def test_cast_mut_wrong(registry):
    assert cast_mut(TestStruct(), Display, registry) is None


def test_cast_box_wrong_returns_source(registry):
    ts = TestStruct()
    with pytest.raises(CastError) as err:
        cast_owned(ts, Display, registry)
    assert err.value.source is ts
    assert err.value.target is Display


def test_cast_shared_wrong_returns_source(registry):
    ts = TestStruct()
    with pytest.raises(CastError) as err:
        cast_shared(ts, Display, registry)
    assert err.value.source is ts


def test_cast_from_plain_object():
    class Plain:
        pass

    reg = CasterRegistry()
    reg.register(Plain, Debug)
    value = Plain()
    assert cast(value, Debug, reg) is value
    assert cast_owned(value, Debug, reg) is value


def test_cast_shared_requires_sync():
    reg = CasterRegistry()
    reg.register(TestStruct, Debug)
    with pytest.raises(SyncRequiredError):
        cast_shared(TestStruct(), Debug, reg)


def test_impls(registry):
    ts = TestStruct()
    assert impls(ts, Debug, registry) is True
    assert impls(ts, Display, registry) is False


def test_subclass_is_not_registered(registry):
    class Child(TestStruct):
        pass

    assert cast(Child(), Debug, registry) is None
    assert impls(Child(), Debug, registry) is False


def test_default_registry_used_when_none():
    class Local:
        pass

    class Target:
        pass

    value = Local()
    assert cast(value, Target) is None
    assert impls(value, Target) is False