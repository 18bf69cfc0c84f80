"""Core: modelos, normalización de puntos y geometría de esquinas.

No depende de Qt.
"""

from __future__ import annotations
