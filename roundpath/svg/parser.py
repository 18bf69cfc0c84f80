# File: roundpath/svg/parser.py
# Project: RoundPath (RPT)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Decoder "best effort" de `d` -> lista de puntos (solo extremos).
# Notes:
#   - Con pérdida: de cada curva/arco se queda SOLO el punto final.
#   - Comandos desconocidos o mal formados: warning y se sigue con el próximo.
#   - Para parseo completo (geometría real) ver svg/qpath_render.py (svgelements).
from __future__ import annotations

import logging
import re
from typing import Optional

log = logging.getLogger(__name__)

# Se corta justo antes de cada letra (menos e/E: son exponentes, no comandos).
_SPLIT_RE = re.compile(r"(?=[A-DF-Za-df-z])")
_SEP_RE = re.compile(r"[\s,]+")

# Cantidad de operandos por grupo y posición (x, y) del extremo dentro del grupo.
# H/V usan una sola coordenada (se resuelven aparte).
_LAYOUT: dict[str, tuple[int, int]] = {
    "M": (2, 0),
    "L": (2, 0),
    "T": (2, 0),
    "Q": (4, 2),
    "S": (4, 2),
    "C": (6, 4),
    "A": (7, 5),
    "H": (1, 0),
    "V": (1, 0),
    "Z": (0, 0),
}


def path_to_points(d: str) -> list[dict[str, float]]:
    """Decodifica un `d` a [{"x": .., "y": ..}, ...].

    - Un punto por comando (o por grupo de operandos si el comando se repite implícitamente).
    - Z agrega una copia del inicio del subpath actual (para un solo subpath = primer punto).
    - Comandos relativos (minúscula) se resuelven contra el punto actual.
    """
    points: list[dict[str, float]] = []
    if not d or not d.strip():
        return points

    cur_x = cur_y = 0.0
    start: Optional[tuple[float, float]] = None

    for token in _SPLIT_RE.split(d.strip()):
        token = token.strip()
        if not token:
            continue

        letter = token[0]
        cmd = letter.upper()
        if not letter.isalpha() or cmd not in _LAYOUT:
            log.warning("Comando SVG desconocido: %r (se ignora)", token[:16])
            continue

        relative = letter.islower()
        rest = token[1:].strip(" \t\r\n,")

        if cmd == "Z":
            if rest:
                log.warning("Operandos de más en Z: %r (se ignoran)", rest)
            if start is not None:
                cur_x, cur_y = start
                points.append({"x": cur_x, "y": cur_y})
            continue

        nums = _parse_numbers(rest, letter)
        if nums is None:
            continue

        arity, end_at = _LAYOUT[cmd]
        groups = len(nums) // arity
        if groups == 0:
            log.warning("Comando %s con operandos insuficientes: %r (se ignora)", letter, rest)
            continue
        if len(nums) % arity:
            log.warning("Comando %s con operandos sobrantes: %r (se ignoran)", letter, nums[groups * arity:])

        for g in range(groups):
            chunk = nums[g * arity:(g + 1) * arity]
            if cmd == "H":
                cur_x = cur_x + chunk[0] if relative else chunk[0]
            elif cmd == "V":
                cur_y = cur_y + chunk[0] if relative else chunk[0]
            else:
                ex, ey = chunk[end_at], chunk[end_at + 1]
                if relative:
                    ex, ey = cur_x + ex, cur_y + ey
                cur_x, cur_y = ex, ey

            # M inicia subpath; los pares siguientes de M son lineto implícitos.
            if cmd == "M" and g == 0:
                start = (cur_x, cur_y)
            elif start is None:
                start = (cur_x, cur_y)
            points.append({"x": cur_x, "y": cur_y})

    return points


def _parse_numbers(rest: str, letter: str) -> Optional[list[float]]:
    if not rest:
        return []
    out: list[float] = []
    for part in _SEP_RE.split(rest):
        if not part:
            continue
        try:
            out.append(float(part))
        except ValueError:
            log.warning("Operando no numérico en %s: %r (se ignora el comando)", letter, part)
            return None
    return out


# ----------------------------
# Helpers de debug
# ----------------------------

def path_to_string(d: str) -> str:
    return d.strip()


def strip_leading_move(d: str) -> str:
    """Devuelve el `d` sin la letra M/m inicial; los operandos se conservan.

    "M 0 0 L 8 0" -> "0 0 L 8 0"
    """
    s = d.strip()
    if not s or s[0] not in "Mm":
        return s
    return s[1:].lstrip(" \t\r\n,")
