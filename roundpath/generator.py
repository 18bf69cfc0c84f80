# File: roundpath/generator.py
# Project: RoundPath (RPT)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Fachada: config del generador + encode/decode/element en un solo objeto.
# Notes: `closed` es SIEMPRE argumento de la llamada (la instancia es inmutable y compartible).
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Optional

from roundpath.core.models import GeneratorConfig, Segment
from roundpath.core.pipeline import points_to_path, points_to_segments
from roundpath.core.serialization import points_json_from_path_json
from roundpath.svg.element import build_path_element, element_from_json
from roundpath.svg.parser import path_to_points


class PathGenerator:
    """Generador de paths SVG con radio de esquina por punto.

    Uso:
        gen = PathGenerator(GeneratorConfig(default_radius=2))
        d = gen.points_to_path([{"x": 0, "y": 0}, {"x": 10, "y": 0}, {"x": 10, "y": 10}])
        pts = gen.path_to_points(d)
    """

    def __init__(self, config: GeneratorConfig | None = None, **overrides: Any) -> None:
        cfg = config or GeneratorConfig()
        self._config = cfg.with_overrides(**overrides) if overrides else cfg

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    def points_to_segments(
        self,
        points: Iterable[Any],
        *,
        closed: bool = False,
        default_radius: Optional[float] = None,
    ) -> list[Segment]:
        return points_to_segments(points, self._config, closed=closed, default_radius=default_radius)

    def points_to_path(
        self,
        points: Iterable[Any],
        *,
        closed: bool = False,
        default_radius: Optional[float] = None,
    ) -> str:
        return points_to_path(points, self._config, closed=closed, default_radius=default_radius)

    def path_to_points(self, d: str) -> list[dict[str, float]]:
        return path_to_points(d)

    def element_from_document(self, document: Mapping[str, Any], *, closed: Optional[bool] = None) -> str:
        return build_path_element(document, self._config, closed=closed)

    def element_from_json(self, text: str, *, closed: Optional[bool] = None) -> str:
        return element_from_json(text, self._config, closed=closed)

    def points_json_from_path_json(self, text: str) -> str:
        return points_json_from_path_json(text)

    def __repr__(self) -> str:
        return f"PathGenerator({self._config!r})"
