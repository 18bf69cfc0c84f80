# File: roundpath/core/pipeline.py
# Project: RoundPath (RPT)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Encode completo: puntos -> Vertex -> segmentos -> `d`.
# Notes: Funciones puras. La config se lee, nunca se modifica.
from __future__ import annotations

from typing import Any, Iterable, Optional

from roundpath.core.models import GeneratorConfig, Segment
from roundpath.core.normalize import normalize_points
from roundpath.core.rounder import round_corners
from roundpath.svg.serializer import serialize_path


def points_to_segments(
    points: Iterable[Any],
    config: GeneratorConfig | None = None,
    *,
    closed: bool = False,
    default_radius: Optional[float] = None,
) -> list[Segment]:
    cfg = config or GeneratorConfig()
    vertices = normalize_points(points, cfg, default_radius=default_radius)
    return round_corners(vertices, closed=bool(closed), curve=cfg.curve)


def points_to_path(
    points: Iterable[Any],
    config: GeneratorConfig | None = None,
    *,
    closed: bool = False,
    default_radius: Optional[float] = None,
) -> str:
    """Puntos -> atributo `d`. Lista vacía o de un punto -> ""."""
    cfg = config or GeneratorConfig()
    segments = points_to_segments(points, cfg, closed=closed, default_radius=default_radius)
    return serialize_path(segments, precision=cfg.precision)
