"""PathGenerator facade: end-to-end encode/decode and per-call `closed`."""

from __future__ import annotations

import dataclasses
from concurrent.futures import ThreadPoolExecutor

import pytest

from roundpath import GeneratorConfig, PathGenerator


POINTS = [
    {"x": 0, "y": 0, "cornerRadius": 0},
    {"x": 10, "y": 0, "cornerRadius": 2},
    {"x": 10, "y": 10, "cornerRadius": 0},
]


def test_open_example_path():
    assert PathGenerator().points_to_path(POINTS) == "M 0 0 L 8 0 Q 10 0 10 2 L 10 10"


def test_large_radius_is_clamped():
    pts = [dict(p, cornerRadius=10) for p in POINTS]
    assert PathGenerator().points_to_path(pts) == "M 0 0 L 5 0 Q 10 0 10 5 L 10 10"


def test_cubic_config():
    gen = PathGenerator(curve="cubic")
    assert gen.points_to_path(POINTS) == "M 0 0 L 8 0 C 10 0 10 0 10 2 L 10 10"


@pytest.mark.parametrize("points", [[], [{"x": 3, "y": 4, "cornerRadius": 2}]])
@pytest.mark.parametrize("closed", [False, True])
def test_empty_and_single_point_encode_to_empty_string(points, closed):
    assert PathGenerator().points_to_path(points, closed=closed) == ""


def test_zero_radius_round_trip():
    pts = [{"x": 0, "y": 0}, {"x": 3.5, "y": -2}, {"x": 7.25, "y": 4}, {"x": -1, "y": 9}]
    gen = PathGenerator()
    d = gen.points_to_path(pts)
    assert {c for c in d if c.isalpha()} <= {"M", "L"}
    decoded = gen.path_to_points(d)
    assert len(decoded) == len(pts)
    for a, b in zip(decoded, pts):
        assert a["x"] == pytest.approx(b["x"])
        assert a["y"] == pytest.approx(b["y"])


ARBITRARY = [
    {"x": 0.1 + 0.2, "y": 1 / 3},
    {"x": 1e-5, "y": -123456.789012},
    {"x": 3.14159265, "y": 2.0},
    {"x": -0.0001, "y": 1.23456},
]


def test_zero_radius_round_trip_is_exact_for_arbitrary_floats():
    gen = PathGenerator()
    decoded = gen.path_to_points(gen.points_to_path(ARBITRARY))
    assert decoded == [{"x": p["x"], "y": p["y"]} for p in ARBITRARY]


def test_closed_zero_radius_round_trip_adds_start_point():
    gen = PathGenerator()
    d = gen.points_to_path(ARBITRARY, closed=True)
    assert d.endswith(" Z")
    decoded = gen.path_to_points(d)
    expected = [{"x": p["x"], "y": p["y"]} for p in ARBITRARY]
    assert decoded == expected + [expected[0]]


def test_precision_rounds_only_when_configured():
    pts = [{"x": 0.0001, "y": 1.23456}, {"x": 3.14159265, "y": 2.0}]
    assert PathGenerator().points_to_path(pts) == "M 0.0001 1.23456 L 3.14159265 2"
    assert PathGenerator(precision=3).points_to_path(pts) == "M 0 1.235 L 3.142 2"


def test_rounded_decode_recovers_endpoints_not_controls():
    gen = PathGenerator()
    decoded = [(p["x"], p["y"]) for p in gen.path_to_points(gen.points_to_path(POINTS))]
    assert decoded == [(0, 0), (8, 0), (10, 2), (10, 10)]


def test_closed_is_per_call_and_does_not_leak():
    gen = PathGenerator()
    closed = gen.points_to_path(POINTS, closed=True)
    assert closed.endswith("Z")
    assert not gen.points_to_path(POINTS).endswith("Z")


def test_config_is_read_only():
    gen = PathGenerator(GeneratorConfig(default_radius=1))
    with pytest.raises(dataclasses.FrozenInstanceError):
        gen.config.default_radius = 5  # type: ignore[misc]


def test_default_radius_per_call():
    pts = [{"x": 0, "y": 0}, {"x": 10, "y": 0}, {"x": 10, "y": 10}]
    gen = PathGenerator(default_radius=1)
    assert gen.points_to_path(pts) == "M 0 0 L 9 0 Q 10 0 10 1 L 10 10"
    assert gen.points_to_path(pts, default_radius=0) == "M 0 0 L 10 0 L 10 10"


def test_concurrent_calls_with_different_closed_flags():
    gen = PathGenerator()
    expected = {
        False: "M 0 0 L 8 0 Q 10 0 10 2 L 10 10",
        True: "M 0 0 L 8 0 Q 10 0 10 2 L 10 10 Z",
    }
    flags = [i % 2 == 0 for i in range(200)]
    with ThreadPoolExecutor(max_workers=8) as ex:
        results = list(ex.map(lambda c: (c, gen.points_to_path(POINTS, closed=c)), flags))
    for c, d in results:
        assert d == expected[c]


def test_element_and_json_helpers():
    gen = PathGenerator()
    assert gen.element_from_document({"points": POINTS, "fill": "none"}) == (
        '<path d="M 0 0 L 8 0 Q 10 0 10 2 L 10 10" fill="none" />'
    )
    assert gen.element_from_json('{"points": [], "closePath": true}') == '<path d="" />'
    assert gen.points_json_from_path_json('"M 1 2"') == '[{"x": 1.0, "y": 2.0}]'


def test_svgelements_reads_encoder_output():
    svgelements = pytest.importorskip("svgelements")
    d = PathGenerator().points_to_path(POINTS, closed=True)
    segs = list(svgelements.Path(d))
    kinds = [type(s).__name__ for s in segs]
    assert kinds[0] == "Move"
    assert kinds[-1] == "Close"
    quad = next(s for s in segs if isinstance(s, svgelements.QuadraticBezier))
    assert (quad.control.x, quad.control.y) == pytest.approx((10, 0))
    assert (quad.end.x, quad.end.y) == pytest.approx((10, 2))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"curve": "spline"},
        {"default_radius": -1},
        {"precision": 99},
        {"precision": -1},
        {"precision": "x"},
        {"precision": True},
        {"x_key": ""},
    ],
)
def test_invalid_config_is_rejected(kwargs):
    from roundpath.utils.errors import RpValidationError

    with pytest.raises(RpValidationError):
        GeneratorConfig(**kwargs)
