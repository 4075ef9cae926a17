"""Named numeric constants shared by the shape kernel.

Every operation that needs one of these takes it as a keyword argument;
the values here are only the defaults.
"""

ABSOLUTE_TOLERANCE = 0.001    # distance at which two points count as coincident
PARAMETER_EPSILON = 1e-9      # slack on parametric range checks (0 <= u <= 1)
INVERT_Y = False              # True for screen coordinates (y grows downwards)
CIRCLE_SEGMENTS = 60          # default polyline sampling of a full circle
