"""RoundPath - version constants.

Keep this module tiny and dependency-free. It is imported by models,
settings and the CLI and must not have side effects.
"""

APP_NAME = "RoundPath"
APP_SHORT = "RPT"

APP_VERSION = "0.1.0"

# Defaults del generador.
# NOTE: keep these stable; changing them changes every emitted `d` string.
DEFAULT_CORNER_RADIUS = 0.0
DEFAULT_X_KEY = "x"
DEFAULT_Y_KEY = "y"
DEFAULT_RADIUS_KEY = "cornerRadius"
DEFAULT_CURVE = "quadratic"
DEFAULT_PRECISION = None  # None = número exacto (sin redondeo)

# Rango aceptado para `precision` (decimales en el `d`, redondeo opcional).
PRECISION_RANGE = (0, 10)

# Atributos SVG que el wrapper de <path/> deja pasar desde el documento JSON.
DEFAULT_ALLOWED_ATTRIBUTES = (
    "id",
    "class",
    "style",
    "fill",
    "fill-opacity",
    "fill-rule",
    "stroke",
    "stroke-width",
    "stroke-opacity",
    "stroke-linecap",
    "stroke-linejoin",
    "stroke-miterlimit",
    "stroke-dasharray",
    "stroke-dashoffset",
    "opacity",
    "transform",
    "visibility",
    "vector-effect",
)
