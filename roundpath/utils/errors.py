# File: roundpath/utils/errors.py
# Project: RoundPath (RPT)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Errores tipados del proyecto.
# Notes: La geometría degenerada NO es un error (se resuelve en el rounder).
from __future__ import annotations


class RpError(Exception):
    """Error base del proyecto."""


class RpValidationError(RpError):
    """Error de validación (punto inválido, JSON malformado, settings)."""


class RpSchemaError(RpValidationError):
    """Documento de entrada con estructura inválida (falta 'points', etc.)."""


class RpIOError(RpError):
    """Error de E/S (lectura/escritura)."""
