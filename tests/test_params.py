import math
import random
from dataclasses import FrozenInstanceError

import pytest

from star_rating.params import (
    MAX_COUNT,
    MAX_SCALE,
    MAX_SPACE,
    MIN_COUNT,
    MIN_SCALE,
    MIN_SPACE,
    RenderParameters,
    clamp,
    normalize_params,
)


def assert_in_bounds(params: RenderParameters) -> None:
    assert MIN_COUNT <= params.count <= MAX_COUNT
    assert 0 <= params.rate <= params.count
    assert MIN_SCALE <= params.scale <= MAX_SCALE
    assert MIN_SPACE <= params.space <= MAX_SPACE


def test_defaults_when_absent() -> None:
    assert normalize_params() == RenderParameters(
        rate=0.0, space=0, scale=1.0, count=5
    )


def test_in_range_values_pass_through() -> None:
    params = normalize_params(rate=3.5, scale=2.0, space=4, count=7)
    assert params == RenderParameters(rate=3.5, space=4, scale=2.0, count=7)


@pytest.mark.parametrize(
    "count, expected",
    [(0, 1), (-4, 1), (1, 1), (10, 10), (11, 10), (1000, 10)],
)
def test_count_is_clamped(count: int, expected: int) -> None:
    assert normalize_params(count=count).count == expected


def test_rate_is_clamped_against_clamped_count() -> None:
    # count 50 becomes 10, so rate 25 must stop at 10 rather than 50
    params = normalize_params(rate=25, count=50)
    assert params.count == 10
    assert params.rate == 10

    params = normalize_params(rate=4.5, count=3)
    assert params.rate == 3


def test_rate_defaults_against_default_count() -> None:
    assert normalize_params(rate=9).rate == 5


def test_negative_rate_becomes_zero() -> None:
    assert normalize_params(rate=-2.5).rate == 0


@pytest.mark.parametrize(
    "scale, expected", [(0.0, 0.1), (-1.0, 0.1), (0.05, 0.1), (10.5, 10.0)]
)
def test_scale_is_clamped(scale: float, expected: float) -> None:
    assert normalize_params(scale=scale).scale == pytest.approx(expected)


@pytest.mark.parametrize("space, expected", [(-1, 0), (0, 0), (100, 100), (101, 100)])
def test_space_is_clamped(space: int, expected: int) -> None:
    assert normalize_params(space=space).space == expected


def test_non_finite_floats() -> None:
    params = normalize_params(rate=math.nan, scale=math.nan)
    assert params.rate == 0
    assert params.scale == 1

    params = normalize_params(rate=math.inf, scale=-math.inf)
    assert params.rate == params.count
    assert params.scale == MIN_SCALE


def test_random_inputs_always_in_bounds() -> None:
    rng = random.Random(1234)
    for _ in range(500):
        params = normalize_params(
            rate=rng.uniform(-50, 50),
            scale=rng.uniform(-50, 50),
            space=rng.randint(-500, 500),
            count=rng.randint(-50, 50),
        )
        assert_in_bounds(params)


def test_parameters_are_structural_cache_keys() -> None:
    a = normalize_params(rate=2.5, count=5)
    b = normalize_params(rate=2.5, count=5, scale=1, space=0)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, normalize_params(rate=3)}) == 2


def test_parameters_are_immutable() -> None:
    params = normalize_params()
    with pytest.raises(FrozenInstanceError):
        params.rate = 4  # type: ignore[misc]


def test_clamp() -> None:
    assert clamp(5, 1, 10) == 5
    assert clamp(-1, 1, 10) == 1
    assert clamp(11.5, 0.1, 10.0) == 10.0
