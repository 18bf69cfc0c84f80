"""SVG: serializer/parser del atributo `d`, wrapper <path/> y adapter Qt."""

from __future__ import annotations
