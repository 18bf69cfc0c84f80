# File: roundpath/svg/qpath_render.py
# Project: RoundPath (RPT)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Segmentos / `d` -> QPainterPath (preview sin QtSvg).
# Notes:
#   - `segments_to_qpath`: geometría exacta del encoder (Q/C sin pérdida).
#   - `d_to_qpath`: cualquier `d` vía svgelements (arcos -> cúbicas).
#   - Si el `d` no se puede parsear, devuelve un path vacío (no rompe la UI).
from __future__ import annotations

import logging
from typing import Iterable

from PySide6.QtGui import QPainterPath

from roundpath.core.models import ClosePath, CubicCurveTo, LineTo, MoveTo, QuadCurveTo, Segment

log = logging.getLogger(__name__)


def segments_to_qpath(segments: Iterable[Segment]) -> QPainterPath:
    q = QPainterPath()
    for seg in segments:
        if isinstance(seg, MoveTo):
            q.moveTo(seg.x, seg.y)
        elif isinstance(seg, LineTo):
            q.lineTo(seg.x, seg.y)
        elif isinstance(seg, QuadCurveTo):
            q.quadTo(seg.cx, seg.cy, seg.x, seg.y)
        elif isinstance(seg, CubicCurveTo):
            q.cubicTo(seg.c1x, seg.c1y, seg.c2x, seg.c2y, seg.x, seg.y)
        elif isinstance(seg, ClosePath):
            q.closeSubpath()
        else:
            raise TypeError(f"Segmento no soportado: {type(seg).__name__}")
    return q


def d_to_qpath(d: str) -> QPainterPath:
    """Parsea un `d` arbitrario con svgelements y lo convierte a QPainterPath."""
    from svgelements import Arc, Close, CubicBezier, Line, Move, QuadraticBezier
    from svgelements import Path as SvgPath

    if not d or not d.strip():
        return QPainterPath()

    try:
        sp = SvgPath(d)
        # Convertir arcs a cubics si el lib lo soporta
        if hasattr(sp, "approximate_arcs_with_cubics"):
            sp.approximate_arcs_with_cubics()
    except Exception:
        log.debug("No se pudo parsear d=%r", d[:64], exc_info=True)
        return QPainterPath()

    q = QPainterPath()
    current_set = False

    for seg in sp:
        if isinstance(seg, Move):
            q.moveTo(float(seg.end.x), float(seg.end.y))
            current_set = True
            continue

        # si no hubo move previo, anclamos en el start
        if not current_set and seg.start is not None:
            q.moveTo(float(seg.start.x), float(seg.start.y))
            current_set = True

        if isinstance(seg, Line):
            q.lineTo(float(seg.end.x), float(seg.end.y))
        elif isinstance(seg, CubicBezier):
            q.cubicTo(
                float(seg.control1.x), float(seg.control1.y),
                float(seg.control2.x), float(seg.control2.y),
                float(seg.end.x), float(seg.end.y),
            )
        elif isinstance(seg, QuadraticBezier):
            q.quadTo(float(seg.control.x), float(seg.control.y), float(seg.end.x), float(seg.end.y))
        elif isinstance(seg, Close):
            q.closeSubpath()
        elif isinstance(seg, Arc):
            # Fallback: sampleo (si no fue aproximado)
            steps = 12
            for i in range(1, steps + 1):
                pt = seg.point(i / steps)
                q.lineTo(float(pt.x), float(pt.y))
        else:
            q.lineTo(float(seg.end.x), float(seg.end.y))

    return q
