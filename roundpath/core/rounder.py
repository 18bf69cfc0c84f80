# File: roundpath/core/rounder.py
# Project: RoundPath (RPT)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Motor geométrico: polilínea -> segmentos con esquinas redondeadas.
# Notes:
#   - Un solo algoritmo (tangentes sobre las aristas + curva con control en el vértice).
#   - El tipo de curva (Q/C) solo cambia el segmento emitido, no la geometría.
#   - `closed` es argumento explícito; nunca estado compartido.
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

from roundpath.core.models import (
    ClosePath,
    CubicCurveTo,
    CurveKind,
    LineTo,
    MoveTo,
    Point,
    QuadCurveTo,
    Segment,
    Vertex,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Corner:
    """Resultado geométrico de una esquina.

    Si `effective_radius == 0` la esquina es viva y `t_in`/`t_out` son None.
    """

    vertex: Vertex
    effective_radius: float
    t_in: Optional[Point] = None
    t_out: Optional[Point] = None

    @property
    def rounded(self) -> bool:
        return self.t_in is not None

    @property
    def start(self) -> Point:
        """Primer punto de la esquina (donde llega la arista entrante)."""
        return self.t_in if self.t_in is not None else self.vertex.xy


def corner_geometry(prev: Vertex, vertex: Vertex, nxt: Vertex) -> Corner:
    """Calcula radio efectivo y puntos tangentes de `vertex`.

    effective_radius = min(radius, d_prev / 2, d_next / 2)

    Aristas de largo 0 (puntos coincidentes) -> esquina viva, sin dividir por cero.
    """
    d_prev = math.hypot(vertex.x - prev.x, vertex.y - prev.y)
    d_next = math.hypot(nxt.x - vertex.x, nxt.y - vertex.y)

    if vertex.radius <= 0 or d_prev == 0 or d_next == 0:
        return Corner(vertex=vertex, effective_radius=0.0)

    r = min(vertex.radius, d_prev / 2.0, d_next / 2.0)
    if r < vertex.radius:
        log.debug(
            "Radio recortado en (%s, %s): %s -> %s", vertex.x, vertex.y, vertex.radius, r
        )

    k_in = r / d_prev
    k_out = r / d_next
    t_in = (vertex.x + (prev.x - vertex.x) * k_in, vertex.y + (prev.y - vertex.y) * k_in)
    t_out = (vertex.x + (nxt.x - vertex.x) * k_out, vertex.y + (nxt.y - vertex.y) * k_out)
    return Corner(vertex=vertex, effective_radius=r, t_in=t_in, t_out=t_out)


def corners_of(vertices: Sequence[Vertex], *, closed: bool) -> list[Corner]:
    """Esquinas de la polilínea.

    - closed: todas las esquinas (con wrap-around).
    - abierta: solo las interiores (los extremos no se redondean).
    """
    n = len(vertices)
    if n < 2:
        return []
    if closed:
        return [corner_geometry(vertices[i - 1], vertices[i], vertices[(i + 1) % n]) for i in range(n)]
    return [corner_geometry(vertices[i - 1], vertices[i], vertices[i + 1]) for i in range(1, n - 1)]


def round_corners(
    vertices: Sequence[Vertex],
    *,
    closed: bool,
    curve: CurveKind = "quadratic",
) -> list[Segment]:
    """Convierte la polilínea en segmentos (M / L / Q|C / Z).

    Abierta:  M v0, [L t_in, curva]* por esquina interior, L v_last.
    Cerrada:  M en el primer punto de la esquina 0, curva de la esquina 0 (si aplica),
              esquinas 1..n-1, Z (el cierre dibuja la arista v_last -> v0).

    Menos de 2 vértices -> [] (path vacío).
    """
    n = len(vertices)
    if n < 2:
        return []

    segments: list[Segment] = []

    if closed:
        corners = corners_of(vertices, closed=True)
        first = corners[0]
        sx, sy = first.start
        segments.append(MoveTo(sx, sy))
        if first.rounded:
            segments.append(_curve(first, curve))
        for c in corners[1:]:
            _emit_corner(segments, c, curve)
        segments.append(ClosePath())
        return segments

    v0 = vertices[0]
    segments.append(MoveTo(v0.x, v0.y))
    for c in corners_of(vertices, closed=False):
        _emit_corner(segments, c, curve)
    last = vertices[-1]
    segments.append(LineTo(last.x, last.y))
    return segments


def _emit_corner(segments: list[Segment], corner: Corner, curve: CurveKind) -> None:
    x, y = corner.start
    segments.append(LineTo(x, y))
    if corner.rounded:
        segments.append(_curve(corner, curve))


def _curve(corner: Corner, curve: CurveKind) -> Segment:
    v = corner.vertex
    ex, ey = corner.t_out  # type: ignore[misc]
    if curve == "cubic":
        # Ambos controles en el vértice: mismos extremos/tangentes que la Q.
        return CubicCurveTo(v.x, v.y, v.x, v.y, ex, ey)
    return QuadCurveTo(v.x, v.y, ex, ey)


def segment_points(segments: Sequence[Segment]) -> list[Point]:
    """Extremos de cada segmento, resolviendo Z al último M.

    Útil para verificar continuidad y para tests.
    """
    out: list[Point] = []
    start: Optional[Point] = None
    for seg in segments:
        if isinstance(seg, ClosePath):
            if start is not None:
                out.append(start)
            continue
        end = seg.end
        if isinstance(seg, MoveTo):
            start = end
        out.append(end)  # type: ignore[arg-type]
    return out
