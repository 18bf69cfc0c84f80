# File: roundpath/core/models.py
# Project: RoundPath (RPT)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Modelos de datos: vértices, segmentos de path y config del generador.
# Notes: Todo es inmutable (frozen). El flag `closed` NO vive acá: es argumento de cada llamada.
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Literal, Optional, Union

from roundpath.core.version import (
    DEFAULT_ALLOWED_ATTRIBUTES,
    DEFAULT_CORNER_RADIUS,
    DEFAULT_CURVE,
    DEFAULT_PRECISION,
    DEFAULT_RADIUS_KEY,
    DEFAULT_X_KEY,
    DEFAULT_Y_KEY,
    PRECISION_RANGE,
)
from roundpath.utils.errors import RpValidationError

CurveKind = Literal["quadratic", "cubic"]
CURVE_KINDS = ("quadratic", "cubic")

Point = tuple[float, float]


@dataclass(frozen=True)
class Vertex:
    x: float
    y: float
    radius: float = 0.0  # 0 = esquina viva

    @property
    def xy(self) -> Point:
        return (self.x, self.y)


# ----------------------------
# Segmentos
# ----------------------------

@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float

    command = "M"

    def operands(self) -> tuple[float, ...]:
        return (self.x, self.y)

    @property
    def end(self) -> Point:
        return (self.x, self.y)


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float

    command = "L"

    def operands(self) -> tuple[float, ...]:
        return (self.x, self.y)

    @property
    def end(self) -> Point:
        return (self.x, self.y)


@dataclass(frozen=True)
class QuadCurveTo:
    cx: float
    cy: float
    x: float
    y: float

    command = "Q"

    def operands(self) -> tuple[float, ...]:
        return (self.cx, self.cy, self.x, self.y)

    @property
    def end(self) -> Point:
        return (self.x, self.y)


@dataclass(frozen=True)
class CubicCurveTo:
    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float

    command = "C"

    def operands(self) -> tuple[float, ...]:
        return (self.c1x, self.c1y, self.c2x, self.c2y, self.x, self.y)

    @property
    def end(self) -> Point:
        return (self.x, self.y)


@dataclass(frozen=True)
class ClosePath:
    command = "Z"

    def operands(self) -> tuple[float, ...]:
        return ()

    @property
    def end(self) -> Optional[Point]:
        # Vuelve al último M; el punto lo resuelve quien recorre el path.
        return None


Segment = Union[MoveTo, LineTo, QuadCurveTo, CubicCurveTo, ClosePath]


# ----------------------------
# Config del generador
# ----------------------------

@dataclass(frozen=True)
class GeneratorConfig:
    """Configuración de larga vida del generador (solo lectura durante la conversión).

    Para variantes usar `with_overrides(...)` (devuelve una copia).
    """

    default_radius: float = DEFAULT_CORNER_RADIUS
    x_key: str = DEFAULT_X_KEY
    y_key: str = DEFAULT_Y_KEY
    radius_key: str = DEFAULT_RADIUS_KEY
    curve: CurveKind = DEFAULT_CURVE  # type: ignore[assignment]
    precision: Optional[int] = DEFAULT_PRECISION  # None = exacto; N = redondeo a N decimales
    allowed_attributes: tuple[str, ...] = field(default=DEFAULT_ALLOWED_ATTRIBUTES)

    def __post_init__(self) -> None:
        if self.curve not in CURVE_KINDS:
            raise RpValidationError(f"curve inválido: {self.curve!r} (se espera {', '.join(CURVE_KINDS)})")
        r = _as_float(self.default_radius, "default_radius")
        if r < 0:
            raise RpValidationError(f"default_radius inválido: {r!r} (debe ser >= 0)")
        # Valor explícito fuera de rango = error. El clamp es cosa de settings (archivo/env).
        p = self.precision
        if p is not None:
            lo, hi = PRECISION_RANGE
            if isinstance(p, bool):
                raise RpValidationError(f"precision inválido: {p!r}")
            try:
                p = int(p)
            except (TypeError, ValueError) as e:
                raise RpValidationError(f"precision inválido: {self.precision!r}") from e
            if not lo <= p <= hi:
                raise RpValidationError(f"precision inválido: {p!r} (rango {lo}..{hi})")
        for name in ("x_key", "y_key", "radius_key"):
            v = getattr(self, name)
            if not isinstance(v, str) or not v:
                raise RpValidationError(f"{name} inválido: {v!r}")
        # frozen: normalizamos tipos vía object.__setattr__
        object.__setattr__(self, "default_radius", r)
        object.__setattr__(self, "precision", p)
        object.__setattr__(self, "allowed_attributes", tuple(str(a) for a in self.allowed_attributes))

    def with_overrides(self, **changes: Any) -> "GeneratorConfig":
        clean = {k: v for k, v in changes.items() if v is not None}
        if not clean:
            return self
        return replace(self, **clean)

    def to_dict(self) -> dict[str, Any]:
        return {
            "default_radius": float(self.default_radius),
            "x_key": self.x_key,
            "y_key": self.y_key,
            "radius_key": self.radius_key,
            "curve": self.curve,
            "precision": self.precision,
            "allowed_attributes": list(self.allowed_attributes),
        }


def _as_float(value: Any, field: str) -> float:
    if isinstance(value, bool):
        raise RpValidationError(f"Campo {field} inválido (float): {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise RpValidationError(f"Campo {field} inválido (float): {value!r}") from e
