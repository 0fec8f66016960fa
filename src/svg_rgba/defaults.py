"""Default values for decoding.

:author: Shay Hill
:created: 2026-10-19
"""

# Fallback intrinsic size. An svg without a usable width or height (no absolute
# width/height attribute and no viewBox) will be treated as this size on the
# missing axis.
DEFAULT_WIDTH = 512
DEFAULT_HEIGHT = 512


# Resolution used to convert absolute units (mm, in, pt, ...) to pixels. This is
# the CSS reference resolution, so 1in == 96px.
DEFAULT_DPI = 96.0


# Load system fonts unless told otherwise. Without fonts, <text> elements are not
# drawn. Font discovery is slow, but it only happens once per process.
DEFAULT_LOAD_FONTS = True
