# File: roundpath/core/normalize.py
# Project: RoundPath (RPT)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Normalización de puntos heterogéneos -> Vertex(x, y, radius).
# Notes: x/y inválidos son error duro (nunca NaN silencioso).
from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from typing import Any, Iterable, Optional

from roundpath.core.models import GeneratorConfig, Vertex
from roundpath.utils.errors import RpValidationError

log = logging.getLogger(__name__)

_MISSING = object()


def normalize_point(
    record: Any,
    *,
    x_key: str = "x",
    y_key: str = "y",
    radius_key: str = "cornerRadius",
    default_radius: float = 0.0,
    index: Optional[int] = None,
) -> Vertex:
    """Convierte un registro de punto en Vertex.

    Acepta:
        - dict/Mapping: por clave (`x_key`, `y_key`, `radius_key`)
        - tupla/lista: (x, y) o (x, y, radius)
        - objeto con atributos de esos nombres

    Orden del radio: campo del punto (si existe y no es None) -> default_radius -> 0.
    """
    where = f"points[{index}]" if index is not None else "point"

    raw_x = _pick(record, x_key, 0)
    raw_y = _pick(record, y_key, 1)
    raw_r = _pick(record, radius_key, 2)

    if raw_x is _MISSING:
        raise RpValidationError(f"{where}: falta '{x_key}'")
    if raw_y is _MISSING:
        raise RpValidationError(f"{where}: falta '{y_key}'")

    x = _as_coord(raw_x, f"{where}.{x_key}")
    y = _as_coord(raw_y, f"{where}.{y_key}")

    if raw_r is _MISSING or raw_r is None:
        raw_r = default_radius if default_radius is not None else 0.0
    radius = _as_coord(raw_r, f"{where}.{radius_key}")
    if radius < 0:
        log.debug("%s: radio negativo (%s) -> 0", where, radius)
        radius = 0.0

    return Vertex(x=x, y=y, radius=radius)


def normalize_points(
    records: Iterable[Any],
    config: GeneratorConfig | None = None,
    *,
    default_radius: Optional[float] = None,
) -> list[Vertex]:
    """Normaliza una secuencia de puntos usando las claves de `config`.

    `default_radius` (si no es None) reemplaza al default de la config solo para esta llamada.
    """
    cfg = config or GeneratorConfig()
    if records is None or isinstance(records, (str, bytes, Mapping)):
        raise RpValidationError(f"points inválido: se espera lista, llegó {type(records).__name__}")

    base_r = cfg.default_radius if default_radius is None else default_radius
    return [
        normalize_point(
            rec,
            x_key=cfg.x_key,
            y_key=cfg.y_key,
            radius_key=cfg.radius_key,
            default_radius=base_r,
            index=i,
        )
        for i, rec in enumerate(records)
    ]


def _pick(record: Any, key: str, position: int) -> Any:
    if isinstance(record, Mapping):
        return record.get(key, _MISSING)
    if isinstance(record, Sequence) and not isinstance(record, (str, bytes)):
        return record[position] if len(record) > position else _MISSING
    return getattr(record, key, _MISSING)


def _as_coord(value: Any, field: str) -> float:
    # bool es int en Python: lo rechazamos explícitamente.
    if isinstance(value, bool) or value is None:
        raise RpValidationError(f"Campo {field} inválido (número): {value!r}")
    try:
        v = float(value)
    except (TypeError, ValueError) as e:
        raise RpValidationError(f"Campo {field} inválido (número): {value!r}") from e
    if not math.isfinite(v):
        raise RpValidationError(f"Campo {field} inválido (no finito): {value!r}")
    return v
