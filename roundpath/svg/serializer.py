# File: roundpath/svg/serializer.py
# Project: RoundPath (RPT)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Segmentos -> atributo `d` de SVG.
# Notes: Formato fijo: "M x y L x y Q cx cy x y ..." (un espacio entre todo).
#        Por defecto cada número sale exacto (repr más corto); `precision` redondea a pedido.
from __future__ import annotations

from typing import Iterable, Optional

from roundpath.core.models import Segment


def format_number(value: float, precision: Optional[int] = None) -> str:
    """Número compacto, sin ".0" de cola ni "-0".

    - precision=None: forma exacta más corta del float (decode(encode(x)) == x).
    - precision=N: redondeo a N decimales y se quitan los ceros de cola.
    """
    v = float(value)
    if precision is None:
        s = repr(v)
        if s.endswith(".0"):
            s = s[:-2]
    else:
        s = f"{v:.{int(precision)}f}"
        if "." in s:
            s = s.rstrip("0").rstrip(".")
    if s in ("-0", ""):
        s = "0"
    return s


def serialize_segment(segment: Segment, *, precision: Optional[int] = None) -> str:
    ops = segment.operands()
    if not ops:
        return segment.command
    return " ".join([segment.command, *(format_number(v, precision) for v in ops)])


def serialize_path(segments: Iterable[Segment], *, precision: Optional[int] = None) -> str:
    """Renderiza la lista de segmentos. Path vacío -> ""."""
    return " ".join(serialize_segment(s, precision=precision) for s in segments)
