"""Constants for the project.

:author: Shay Hill
:created: 2026-10-19
"""

# Refuse to render documents with more elements than this. The number is the
# element limit of resvg, so documents that fail here would fail there.
ELEMENTS_LIMIT = 1_000_000

# First two bytes of any gzip stream (svgz files).
GZIP_MAGIC = b"\x1f\x8b"

# bytes per pixel in the output buffer
RGBA_CHANNELS = 4

FONT_SUFFIXES = frozenset((".ttf", ".otf", ".ttc", ".otc"))

# Largest width or height of a cairo image surface.
CAIRO_MAX_SIZE = 32767
