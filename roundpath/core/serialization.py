# File: roundpath/core/serialization.py
# Project: RoundPath (RPT)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Carga/volcado JSON: documento de path y listas de puntos.
# Notes: JSON malformado es error (no se devuelve un placeholder).
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from roundpath.svg.parser import path_to_points
from roundpath.utils.errors import RpIOError, RpValidationError


def load_json(text: str, *, what: str = "JSON") -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise RpValidationError(
            "{} inválido (JSON malformado): línea {}, columna {}".format(what, e.lineno, e.colno)
        ) from e
    except TypeError as e:
        raise RpValidationError("{} inválido: se esperaba texto, llegó {}".format(what, type(text).__name__)) from e


def load_document(text: str) -> dict[str, Any]:
    """Parsea el documento de path ({points, closePath, ...atributos})."""
    data = load_json(text, what="Documento")
    if not isinstance(data, dict):
        raise RpValidationError("Documento inválido: raíz no es objeto JSON")
    return data


def read_text(path: str | Path) -> str:
    p = Path(path)
    # utf-8-sig: acepta el BOM que agregan algunos editores en Windows.
    try:
        return p.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise RpIOError("No es UTF-8 válido: {} (byte {})".format(p, e.start)) from e
    except OSError as e:
        raise RpIOError("No se pudo leer: {}".format(p)) from e


def load_document_file(path: str | Path) -> dict[str, Any]:
    return load_document(read_text(path))


def dump_points(points: Iterable[dict[str, float]]) -> str:
    return json.dumps([{"x": float(p["x"]), "y": float(p["y"])} for p in points])


def points_json_from_path_json(text: str) -> str:
    """JSON con un string `d` -> JSON con la lista de puntos decodificados.

    Ej: '"M 0 0 L 10 0"' -> '[{"x": 0.0, "y": 0.0}, {"x": 10.0, "y": 0.0}]'
    """
    d = load_json(text, what="Path JSON")
    if not isinstance(d, str):
        raise RpValidationError("Path JSON inválido: se esperaba un string, llegó {}".format(type(d).__name__))
    return dump_points(path_to_points(d))
