import pytest

import funtils
from funtils import LiftNameConflictError, clone, existy, merge, monad


def test_public_api_is_exported():
    for name in funtils.__all__:
        assert hasattr(funtils, name), name


def test_top_level_helpers_work_together():
    base = {"config": {"retries": 3}, "tags": ["a"]}
    merged = merge(base, {"tags": ["b"]})

    assert merged == {"config": {"retries": 3}, "tags": ["b"]}
    assert merged["config"] is not base["config"]
    assert clone(merged) == merged
    assert existy(merged.get("missing")) is False


def test_lift_error_is_exported():
    unit = monad().lift("op", lambda v: v)

    with pytest.raises(LiftNameConflictError) as excinfo:
        unit.lift("op", lambda v: v)

    assert excinfo.value.name == "op"
