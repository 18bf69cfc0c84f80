# File: roundpath/svg/element.py
# Project: RoundPath (RPT)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Documento JSON -> elemento <path d="..." .../>.
# Notes:
#   - Regla dura: solo atributos en allow-list (o data-*); el resto se descarta con warning.
#   - El escape de valores lo hace ElementTree (nunca concatenar strings a mano).
#   - `closePath` se pasa explícito al encoder; no se guarda en ningún lado.
from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, Optional
from xml.etree.ElementTree import Element, tostring

from roundpath.core.models import GeneratorConfig
from roundpath.core.pipeline import points_to_path
from roundpath.core.serialization import load_document
from roundpath.utils.errors import RpSchemaError

log = logging.getLogger(__name__)

# Claves del documento que consume el generador (no son atributos SVG).
RESERVED_KEYS = ("points", "closePath", "cornerRadius")

_DATA_ATTR_RE = re.compile(r"^data-[A-Za-z0-9_.\-]+$")


def build_path_element(
    document: Mapping[str, Any],
    config: GeneratorConfig | None = None,
    *,
    closed: Optional[bool] = None,
) -> str:
    """Genera `<path d="..." .../>` a partir del documento.

    - `points` debe ser lista (si no: RpSchemaError, el encoder no se invoca).
    - `closePath` (bool) define si se cierra; `closed` explícito tiene prioridad.
    - `cornerRadius` a nivel documento = radio por defecto solo para esta llamada.
    """
    cfg = config or GeneratorConfig()
    points, is_closed, radius = resolve_document(document, closed=closed)
    d = points_to_path(points, cfg, closed=is_closed, default_radius=radius)

    attrs: dict[str, str] = {"d": d}
    attrs.update(filter_attributes(document, cfg.allowed_attributes))
    return tostring(Element("path", attrs), encoding="unicode")


def resolve_document(
    document: Mapping[str, Any],
    *,
    closed: Optional[bool] = None,
) -> tuple[list[Any], bool, Optional[float]]:
    """Valida el documento y devuelve (points, closed, cornerRadius del documento)."""
    if not isinstance(document, Mapping):
        raise RpSchemaError("Documento inválido: se esperaba objeto")

    points = document.get("points")
    if not isinstance(points, list):
        raise RpSchemaError("Documento inválido: 'points' falta o no es una lista")

    close_raw = document.get("closePath", False)
    if not isinstance(close_raw, bool):
        raise RpSchemaError(f"closePath inválido (bool): {close_raw!r}")
    is_closed = close_raw if closed is None else bool(closed)

    radius_raw = document.get("cornerRadius")
    if radius_raw is not None and (isinstance(radius_raw, bool) or not isinstance(radius_raw, (int, float))):
        raise RpSchemaError(f"cornerRadius inválido (número): {radius_raw!r}")

    return points, is_closed, radius_raw


def filter_attributes(document: Mapping[str, Any], allowed: tuple[str, ...]) -> dict[str, str]:
    """Atributos pasables del documento, en el orden original."""
    out: dict[str, str] = {}
    allowed_set = set(allowed)
    for key, value in document.items():
        if key in RESERVED_KEYS:
            continue
        if key == "d":
            log.warning("Atributo 'd' del documento ignorado (lo genera el encoder)")
            continue
        if key not in allowed_set and not _DATA_ATTR_RE.match(key):
            log.warning("Atributo no permitido descartado: %r", key)
            continue
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            log.warning("Valor de atributo %r descartado (tipo %s)", key, type(value).__name__)
            continue
        out[key] = str(value)
    return out


def element_from_json(
    text: str,
    config: GeneratorConfig | None = None,
    *,
    closed: Optional[bool] = None,
) -> str:
    return build_path_element(load_document(text), config, closed=closed)
