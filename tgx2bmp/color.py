"""Unpacking of packed 16-bit TGX colors into 8-bit channels.

The original converter read three 4-bit fields at bit offsets 1, 6 and 11
and stored the last one over red, so blue was never set. ``LEGACY``
reproduces that output exactly and is the default. ``RGB555`` is the
corrected unpack and ``XRGB1555`` is the conventional 1-5-5-5 layout.
Both corrected layouts give different colors than the original tool.
"""

COLOR_MASK_BLUE = 0x001F
COLOR_MASK_GREEN = 0x03E0
COLOR_MASK_RED = 0x7C00

LEGACY = "legacy"
RGB555 = "rgb555"
XRGB1555 = "xrgb1555"

def _field(v, offset):
	return ((v >> offset) & 0b11111) << 3

def unpack_legacy(v):
	# red is written twice, the offset 11 field wins
	red = ((v >> 1) & 0b1111) << 3
	green = ((v >> 6) & 0b1111) << 3
	red = ((v >> 11) & 0b1111) << 3
	return (red, green, 0)

def unpack_rgb555(v):
	return (_field(v, 1), _field(v, 6), _field(v, 11))

def unpack_xrgb1555(v):
	blue = ((COLOR_MASK_BLUE & v) << 3) & 0xff
	green = ((COLOR_MASK_GREEN & v) >> 2) & 0xff
	red = ((COLOR_MASK_RED & v) >> 7) & 0xff
	return (red, green, blue)

LAYOUTS = {
	LEGACY: unpack_legacy,
	RGB555: unpack_rgb555,
	XRGB1555: unpack_xrgb1555,
}

def get_unpacker(layout=LEGACY):
	try:
		return LAYOUTS[layout]
	except KeyError:
		raise ValueError("unknown color layout", layout) from None

def unpack_color(v, layout=LEGACY):
	"""Return the (red, green, blue) channels of the packed value ``v``."""
	return get_unpacker(layout)(v & 0xffff)
