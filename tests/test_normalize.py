"""Point normalization: record shapes, radius fallback chain, hard validation."""

from __future__ import annotations

import math
from types import SimpleNamespace

import pytest

from roundpath.core.models import GeneratorConfig, Vertex
from roundpath.core.normalize import normalize_point, normalize_points
from roundpath.utils.errors import RpValidationError


def test_mapping_record_with_explicit_radius():
    v = normalize_point({"x": 1, "y": 2, "cornerRadius": 3})
    assert v == Vertex(1.0, 2.0, 3.0)


def test_radius_falls_back_to_call_default_then_zero():
    assert normalize_point({"x": 1, "y": 2}, default_radius=4).radius == 4.0
    assert normalize_point({"x": 1, "y": 2}).radius == 0.0
    # None explícito = "no definido"
    assert normalize_point({"x": 1, "y": 2, "cornerRadius": None}, default_radius=5).radius == 5.0


def test_explicit_zero_radius_wins_over_default():
    assert normalize_point({"x": 0, "y": 0, "cornerRadius": 0}, default_radius=7).radius == 0.0


def test_sequence_and_object_records():
    assert normalize_point((3, 4)) == Vertex(3.0, 4.0, 0.0)
    assert normalize_point([3, 4, 1.5]) == Vertex(3.0, 4.0, 1.5)
    assert normalize_point(SimpleNamespace(x=5, y=6, cornerRadius=2)) == Vertex(5.0, 6.0, 2.0)


def test_custom_keys():
    cfg = GeneratorConfig(x_key="px", y_key="py", radius_key="r")
    out = normalize_points([{"px": 1, "py": 2, "r": 0.5}], cfg)
    assert out == [Vertex(1.0, 2.0, 0.5)]


def test_numeric_strings_are_coerced():
    assert normalize_point({"x": "1.5", "y": "2"}) == Vertex(1.5, 2.0, 0.0)


@pytest.mark.parametrize(
    "record",
    [
        {"y": 1},
        {"x": 1},
        {"x": "abc", "y": 1},
        {"x": None, "y": 1},
        {"x": True, "y": 1},
        {"x": math.nan, "y": 1},
        {"x": 1, "y": math.inf},
        (1,),
    ],
)
def test_invalid_coordinates_raise(record):
    with pytest.raises(RpValidationError):
        normalize_point(record)


def test_error_names_the_point_index():
    with pytest.raises(RpValidationError, match=r"points\[1\]"):
        normalize_points([{"x": 0, "y": 0}, {"x": 1}])


def test_non_numeric_radius_raises():
    with pytest.raises(RpValidationError):
        normalize_point({"x": 0, "y": 0, "cornerRadius": "big"})


def test_negative_radius_is_clamped_to_zero():
    assert normalize_point({"x": 0, "y": 0, "cornerRadius": -3}).radius == 0.0


def test_call_default_overrides_config_default():
    cfg = GeneratorConfig(default_radius=2)
    assert normalize_points([{"x": 0, "y": 0}], cfg)[0].radius == 2.0
    assert normalize_points([{"x": 0, "y": 0}], cfg, default_radius=9)[0].radius == 9.0


@pytest.mark.parametrize("bad", [None, "points", {"x": 1, "y": 2}])
def test_points_must_be_a_sequence(bad):
    with pytest.raises(RpValidationError):
        normalize_points(bad)
