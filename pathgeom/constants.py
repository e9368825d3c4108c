import math

# Tolerances
EPSILON = 1e-10
ROOT_EPSILON = 1e-12

# Offset of the cubic control points when approximating a quarter circle
BEZIER_CIRCLE_CONSTANT = 0.5519150244935106

# Typical command count of a path; a circle is MoveTo + 4 CubicTo + Close
PATH_INLINE_CAPACITY = 16

# Number of samples used when curves are flattened to polylines
DEFAULT_CURVE_SAMPLES = 32
DEFAULT_ARC_LENGTH_SAMPLES = 100

DEFAULT_STROKE_WIDTH = 2.0
DEFAULT_FONT_SIZE = 48.0
DEFAULT_FONT_FAMILY = "sans-serif"

DEFAULT_ARROW_TIP = 0.35

TAU = 2.0 * math.pi
