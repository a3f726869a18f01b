import pytest
from funtils.core.errors import LiftNameConflictError
from funtils.functional.monad import Monad, monad


@pytest.fixture
def monader():
    unit = monad(lambda m, value: value + " - modified")
    unit.lift("lifted", lambda value: value + " - lifted")
    return unit


def test_unwrap_value(monader):
    assert monader("initial value").value() == "initial value - modified"


def test_call_lifted_function(monader):
    result = monader("initial value").lifted()

    assert isinstance(result, Monad)
    assert result.value() == "initial value - modified - lifted - modified"


def test_without_modifier_value_is_stored_unchanged():
    unit = monad()
    value = {"a": 1}

    assert unit(value).value() is value


def test_non_callable_modifier_is_ignored():
    assert monad("not callable")(3).value() == 3


def test_modifier_receives_instance():
    seen = []

    def modifier(instance, value):
        seen.append(instance)
        return value

    wrapped = monad(modifier)(1)

    assert seen == [wrapped]


def test_bind_wraps_plain_results():
    unit = monad(lambda m, value: value * 10)

    result = unit(1).bind(lambda value, extra: value + extra, (5,))

    assert isinstance(result, Monad)
    assert result.value() == 150


def test_bind_returns_monad_results_unchanged():
    unit = monad(lambda m, value: value + 1)
    other = unit(0)

    assert unit(5).bind(lambda value: other) is other


def test_lifted_operation_forwards_arguments():
    unit = monad()
    unit.lift("add", lambda value, a, b: value + a + b)

    assert unit(1).add(2, 3).value() == 6


def test_lift_applies_to_existing_instances():
    unit = monad()
    existing = unit(2)

    unit.lift("double", lambda value: value * 2)

    assert existing.double().double().value() == 8


def test_lift_returns_unit_for_chaining():
    unit = monad()

    chained = unit.lift("inc", lambda v: v + 1).lift("dec", lambda v: v - 1)

    assert chained is unit
    assert unit(0).inc().inc().dec().value() == 1


def test_lift_duplicate_name_raises(monader):
    with pytest.raises(LiftNameConflictError, match='"lifted" is already defined'):
        monader.lift("lifted", lambda value: value)


@pytest.mark.parametrize("name", ["bind", "value"])
def test_lift_builtin_name_raises(name):
    with pytest.raises(LiftNameConflictError) as excinfo:
        monad().lift(name, lambda value: value)

    assert excinfo.value.name == name
    assert isinstance(excinfo.value, ValueError)


def test_lifted_operations_do_not_leak_between_constructors(monader):
    other = monad()

    with pytest.raises(AttributeError):
        other("x").lifted()

    other.lift("lifted", lambda value: value)


def test_foreign_objects_are_rewrapped():
    class LooksLikeMonad:
        _is_monad = True

    foreign = LooksLikeMonad()
    result = monad()(1).bind(lambda value: foreign)

    assert isinstance(result, Monad)
    assert result.value() is foreign


@pytest.mark.parametrize("name", ["__add__", "__len__", "__custom__"])
def test_lift_special_names_raise(name):
    unit = monad()

    with pytest.raises(LiftNameConflictError):
        unit.lift(name, lambda value, other: value + other)

    assert name not in unit.operations
