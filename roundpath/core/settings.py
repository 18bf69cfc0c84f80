# File: roundpath/core/settings.py
# Project: RoundPath (RPT)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Config del generador desde roundpath_settings.json (repo-local) + env vars.
# Notes: Tolerante: un valor inválido se ignora con warning y gana el default.
from __future__ import annotations

import json
import math
import logging
import os
from pathlib import Path
from typing import Any, Dict

from roundpath.core.models import CURVE_KINDS, GeneratorConfig
from roundpath.core.version import PRECISION_RANGE

log = logging.getLogger(__name__)


# ------------------------------
# Project settings (repo-local)
# ------------------------------
# Permite defaults reproducibles por proyecto sin tocar el código.
# Archivo esperado: roundpath_settings.json en el CWD o en algún padre.
PROJECT_SETTINGS_FILENAME = "roundpath_settings.json"

ENV_DEFAULT_RADIUS = "ROUNDPATH_DEFAULT_RADIUS"
ENV_X_KEY = "ROUNDPATH_X_KEY"
ENV_Y_KEY = "ROUNDPATH_Y_KEY"
ENV_RADIUS_KEY = "ROUNDPATH_RADIUS_KEY"
ENV_CURVE = "ROUNDPATH_CURVE"
ENV_PRECISION = "ROUNDPATH_PRECISION"


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca roundpath_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_project_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> Dict[str, Any]:
    """Carga el JSON de project settings. Devuelve {} si no existe o es inválido."""
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}
    if not isinstance(data, dict):
        _log.warning("Settings ignorados (raíz no es objeto): %s", p)
        return {}
    return data


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def load_generator_config(
    start: Path | None = None,
    *,
    prefer_env: bool = True,
    logger: logging.Logger | None = None,
) -> GeneratorConfig:
    """Arma la GeneratorConfig: defaults <- JSON <- env (o env <- JSON si prefer_env=False).

    Claves JSON:
        generator.default_radius | generator.x_key | generator.y_key | generator.radius_key
        generator.curve | generator.precision | element.allowed_attributes
    """
    _log = logger or log
    data = load_project_settings(start, logger=_log)

    from_json: Dict[str, Any] = {}
    from_env: Dict[str, Any] = {}

    # JSON
    v = _coerce_radius(_deep_get(data, "generator.default_radius"))
    if v is not None:
        from_json["default_radius"] = v
    for field, key in (("x_key", "generator.x_key"), ("y_key", "generator.y_key"), ("radius_key", "generator.radius_key")):
        v = _coerce_key(_deep_get(data, key))
        if v is not None:
            from_json[field] = v
    v = _coerce_curve(_deep_get(data, "generator.curve"))
    if v is not None:
        from_json["curve"] = v
    v = _coerce_precision(_deep_get(data, "generator.precision"))
    if v is not None:
        from_json["precision"] = v
    attrs = _deep_get(data, "element.allowed_attributes")
    if isinstance(attrs, list) and all(isinstance(a, str) and a for a in attrs):
        from_json["allowed_attributes"] = tuple(attrs)
    elif attrs is not None:
        _log.warning("element.allowed_attributes inválido (se espera lista de strings): %r", attrs)

    # Env vars
    env_sources = (
        ("default_radius", ENV_DEFAULT_RADIUS, _coerce_radius),
        ("x_key", ENV_X_KEY, _coerce_key),
        ("y_key", ENV_Y_KEY, _coerce_key),
        ("radius_key", ENV_RADIUS_KEY, _coerce_key),
        ("curve", ENV_CURVE, _coerce_curve),
        ("precision", ENV_PRECISION, _coerce_precision),
    )
    for field, env, coerce in env_sources:
        raw = os.environ.get(env)
        if not raw:
            continue
        val = coerce(raw)
        if val is None:
            _log.warning("Env %s inválida: %r (se ignora)", env, raw)
            continue
        from_env[field] = val

    merged: Dict[str, Any] = {}
    if prefer_env:
        merged.update(from_json)
        merged.update(from_env)
    else:
        merged.update(from_env)
        merged.update(from_json)

    if merged:
        _log.debug("Config del generador (json=%s env=%s)", from_json, from_env)
    return GeneratorConfig(**merged)


def _coerce_radius(v: Any) -> float | None:
    if v is None or isinstance(v, bool):
        return None
    try:
        r = float(v)
    except (TypeError, ValueError):
        log.warning("default_radius inválido: %r", v)
        return None
    if r < 0 or not math.isfinite(r):
        log.warning("default_radius inválido: %r", v)
        return None
    return r


def _coerce_key(v: Any) -> str | None:
    if isinstance(v, str) and v.strip():
        return v.strip()
    return None


def _coerce_curve(v: Any) -> str | None:
    if isinstance(v, str):
        s = v.strip().lower()
        if s in CURVE_KINDS:
            return s
        log.warning("curve inválido: %r (valores: %s)", v, ", ".join(CURVE_KINDS))
    return None


def _coerce_precision(v: Any) -> int | None:
    if v is None or isinstance(v, bool):
        return None
    try:
        n = int(v)
    except (TypeError, ValueError):
        log.warning("precision inválido: %r", v)
        return None
    # Desde archivo/env se clampa (tolerante); GeneratorConfig(precision=...) explícito valida estricto.
    lo, hi = PRECISION_RANGE
    if not lo <= n <= hi:
        clamped = min(max(n, lo), hi)
        log.warning("precision fuera de rango: %r (se usa %d)", v, clamped)
        return clamped
    return n
