"""RoundPath: puntos con radio de esquina <-> atributo `d` de SVG.

Encode:  points -> Vertex -> segmentos (M/L/Q|C/Z) -> `d`
Decode:  `d` -> puntos (solo extremos; las curvas se pierden)
"""

from __future__ import annotations

from roundpath.core.models import GeneratorConfig, Vertex
from roundpath.core.version import APP_VERSION as __version__
from roundpath.generator import PathGenerator

__all__ = ["GeneratorConfig", "PathGenerator", "Vertex", "__version__"]
