# File: roundpath/app.py
# Project: RoundPath (RPT)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Entry-point de línea de comandos (encode / element / decode).
# Notes: Errores del proyecto -> stderr + exit 2. Nada de tracebacks para input inválido.
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from roundpath.core.models import CURVE_KINDS
from roundpath.core.serialization import dump_points, load_json, read_text
from roundpath.core.settings import load_generator_config
from roundpath.core.version import APP_NAME, APP_VERSION
from roundpath.generator import PathGenerator
from roundpath.svg.element import resolve_document
from roundpath.utils.errors import RpError
from roundpath.utils.log import get_logger, setup_logging

log = get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="roundpath",
        description="Puntos con radio de esquina <-> atributo d de SVG.",
    )
    ap.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    ap.add_argument("-v", "--verbose", action="store_true", help="Logging DEBUG.")
    ap.add_argument("--log-dir", default=None, help="Carpeta para roundpath.log (opcional).")

    sub = ap.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encode", help="Documento JSON (o lista de puntos) -> d")
    enc.add_argument("source", help="Archivo JSON o '-' para stdin.")
    _add_generator_args(enc)
    enc.add_argument("--closed", action="store_true", default=None, help="Cerrar el path (Z).")

    el = sub.add_parser("element", help="Documento JSON -> <path .../>")
    el.add_argument("source", help="Archivo JSON o '-' para stdin.")
    _add_generator_args(el)

    dec = sub.add_parser("decode", help="d -> JSON con los puntos (solo extremos)")
    dec.add_argument("d", help="String d o '-' para stdin.")

    return ap


def _add_generator_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--radius", type=float, default=None, help="Radio por defecto.")
    p.add_argument("--curve", choices=CURVE_KINDS, default=None, help="Tipo de curva en las esquinas.")
    p.add_argument("--precision", type=int, default=None, help="Redondeo a N decimales en el d (por defecto: número exacto).")


def _read_source(source: str, stdin: TextIO) -> str:
    if source == "-":
        return stdin.read()
    return read_text(source)


def _make_generator(args: argparse.Namespace) -> PathGenerator:
    cfg = load_generator_config()
    return PathGenerator(cfg, default_radius=args.radius, curve=args.curve, precision=args.precision)


def run(args: argparse.Namespace, *, stdin: TextIO, stdout: TextIO) -> int:
    if args.command == "decode":
        d = args.d if args.d != "-" else stdin.read()
        stdout.write(dump_points(PathGenerator().path_to_points(d)) + "\n")
        return EXIT_OK

    gen = _make_generator(args)
    data = load_json(_read_source(args.source, stdin), what="Documento")

    if args.command == "element":
        stdout.write(gen.element_from_document(data) + "\n")
        return EXIT_OK

    # encode: lista de puntos directa, o documento con la misma validación que `element`
    if isinstance(data, list):
        points = data
        closed = bool(args.closed)
        radius = None
    else:
        points, closed, radius = resolve_document(data, closed=args.closed)
    stdout.write(gen.points_to_path(points, closed=closed, default_radius=radius) + "\n")
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_dir, level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        return run(args, stdin=sys.stdin, stdout=sys.stdout)
    except RpError as e:
        log.debug("Fallo %s", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
