import math
from unittest.mock import MagicMock

import pytest
from funtils.functional.combinators import (
    compose,
    curry,
    dispatch,
    existy,
    identity,
    noop,
    partial,
)


def make_dispatchees(returns):
    return [MagicMock(return_value=ret) for ret in returns]


@pytest.mark.parametrize("value", [True, False, 0, "", [], {}, math.nan])
def test_existy_reports_values_as_existing(value):
    assert existy(value) is True


def test_existy_reports_none_as_not_existing():
    assert existy(None) is False


def test_dispatch_first_match():
    dispatchees = make_dispatchees(["FIRST CALLED", "MIDDLE CALLED", "LAST CALLED"])

    assert dispatch(*dispatchees)("TEST FIRST") == "FIRST CALLED"
    dispatchees[0].assert_called_once_with("TEST FIRST")
    dispatchees[1].assert_not_called()
    dispatchees[2].assert_not_called()


def test_dispatch_middle_match():
    dispatchees = make_dispatchees([None, "MIDDLE CALLED", "LAST CALLED"])

    assert dispatch(*dispatchees)("TEST MIDDLE") == "MIDDLE CALLED"
    assert dispatchees[0].call_count == 1
    dispatchees[2].assert_not_called()


def test_dispatch_last_match():
    dispatchees = make_dispatchees([None, None, "LAST CALLED"])

    assert dispatch(*dispatchees)("TEST LAST") == "LAST CALLED"
    assert dispatchees[0].called
    assert dispatchees[1].called


def test_dispatch_forwards_extra_arguments():
    handler = MagicMock(return_value="ok")

    dispatch(handler)("target", 1, 2)

    handler.assert_called_once_with("target", 1, 2)


def test_dispatch_accepts_falsy_existy_result():
    fallback = MagicMock(return_value="fallback")

    assert dispatch(lambda x: 0, fallback)("target") == 0
    fallback.assert_not_called()


def test_dispatch_without_match_returns_none():
    assert dispatch(lambda x: None, lambda x: None)("target") is None
    assert dispatch()("target") is None


def test_identity_always_returns_value():
    value = {"a": 1}
    always = identity(value)

    assert always() is value
    assert always() is value


def test_curry_passes_single_argument():
    fn = MagicMock(return_value="called")

    assert curry(fn)("arg") == "called"
    fn.assert_called_once_with("arg")


def test_curry_rejects_extra_arguments():
    with pytest.raises(TypeError):
        curry(lambda x: x)(1, 2)


def test_partial_prepends_bound_arguments():
    fn = MagicMock(return_value="result")

    bound = partial(fn, 1, 2)

    assert bound(3, 4) == "result"
    fn.assert_called_once_with(1, 2, 3, 4)


def test_partial_keyword_arguments():
    def greet(greeting, name, punctuation="."):
        return f"{greeting}, {name}{punctuation}"

    hello = partial(greet, "Hello", punctuation="!")

    assert hello("world") == "Hello, world!"
    assert hello("world", punctuation="?") == "Hello, world?"


def test_compose_applies_right_to_left():
    composed = compose(lambda x: x * 2, lambda x: x + 1)

    # (2 + 1) * 2, not (2 * 2) + 1
    assert composed(2) == 6


def test_noop_returns_none():
    assert noop() is None
    assert noop(1, key="value") is None
