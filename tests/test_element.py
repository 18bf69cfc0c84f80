"""<path/> wrapper: document validation, attribute allow-list, escaping."""

from __future__ import annotations

import logging

import pytest

from roundpath.core.models import GeneratorConfig
from roundpath.svg.element import build_path_element, element_from_json
from roundpath.utils.errors import RpSchemaError, RpValidationError

SQUARE = [{"x": 0, "y": 0}, {"x": 10, "y": 0}, {"x": 10, "y": 10}]


def test_basic_element_with_passthrough_attributes():
    doc = {"points": SQUARE, "stroke": "blue", "stroke-width": 2, "closePath": True}
    assert build_path_element(doc) == '<path d="M 0 0 L 10 0 L 10 10 Z" stroke="blue" stroke-width="2" />'


def test_document_corner_radius_is_call_default():
    doc = {"points": SQUARE, "cornerRadius": 2}
    assert build_path_element(doc) == '<path d="M 0 0 L 8 0 Q 10 0 10 2 L 10 10" />'


def test_closed_argument_overrides_document():
    doc = {"points": SQUARE, "closePath": True}
    assert build_path_element(doc, closed=False) == '<path d="M 0 0 L 10 0 L 10 10" />'


def test_values_are_escaped():
    doc = {"points": [], "id": 'a"<b>&'}
    assert build_path_element(doc) == '<path d="" id="a&quot;&lt;b&gt;&amp;" />'


def test_disallowed_attributes_are_dropped(caplog):
    doc = {"points": [], "onclick": "alert(1)", "fill": "red", "d": "M 9 9"}
    with caplog.at_level(logging.WARNING, logger="roundpath.svg.element"):
        out = build_path_element(doc)
    assert out == '<path d="" fill="red" />'
    assert any("onclick" in r.getMessage() for r in caplog.records)


def test_data_attributes_pass_and_non_scalar_values_are_dropped():
    doc = {"points": [], "data-role": "edge", "style": {"color": "red"}, "opacity": True}
    assert build_path_element(doc) == '<path d="" data-role="edge" />'


def test_custom_allow_list():
    cfg = GeneratorConfig(allowed_attributes=("marker-end",))
    doc = {"points": [], "marker-end": "url(#a)", "stroke": "red"}
    assert build_path_element(doc, cfg) == '<path d="" marker-end="url(#a)" />'


@pytest.mark.parametrize(
    "doc",
    [
        {},
        {"points": None},
        {"points": "0,0 1,1"},
        {"points": {"x": 0, "y": 0}},
        {"points": [], "closePath": "yes"},
        {"points": [], "cornerRadius": "3"},
        ["not", "a", "mapping"],
    ],
)
def test_invalid_documents_fail_fast(doc):
    with pytest.raises(RpSchemaError):
        build_path_element(doc)


def test_invalid_vertex_propagates():
    with pytest.raises(RpValidationError):
        build_path_element({"points": [{"x": 0, "y": 0}, {"x": "n/a", "y": 1}]})


def test_element_from_json():
    text = '{"points": [{"x": 0, "y": 0}, {"x": 5, "y": 5}], "stroke": "black"}'
    assert element_from_json(text) == '<path d="M 0 0 L 5 5" stroke="black" />'


@pytest.mark.parametrize("text", ["{not json", "[1, 2]", "42"])
def test_element_from_json_rejects_bad_input(text):
    with pytest.raises(RpValidationError):
        element_from_json(text)
