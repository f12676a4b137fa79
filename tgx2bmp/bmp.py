"""Serialization of a FrameBuffer as an uncompressed 24-bit BMP.

The header follows the byte table of the original converter: a 14 byte
file header and a 40 byte BITMAPINFOHEADER, with width and height stored
as 16-bit values whose high words are zero. The file size field is the
fixed value 0x3A the original always wrote. Pixel rows follow bottom-up,
BGR order, each padded with zero bytes to a multiple of four.
"""
import logging
import os
from collections import namedtuple

from .errors import IncompleteFrame, StorageError

logger = logging.getLogger(__name__)

def i2b(i, length=1, signed=False, byteorder="little"):
	return int.to_bytes(i, length=length, byteorder=byteorder, signed=signed)

FILE_HEADER_FIELDS = (
	("signature", 2),
	("file_size", 4),
	("reserved1", 2),
	("reserved2", 2),
	("data_offset", 4),
)

INFO_HEADER_FIELDS = (
	("header_size", 4),
	("width", 2),
	("width_high", 2),
	("height", 2),
	("height_high", 2),
	("planes", 2),
	("bits_per_pixel", 2),
	("compression", 4),
	("image_size", 4),
	("x_pixels_per_meter", 4),
	("y_pixels_per_meter", 4),
	("colors_used", 4),
	("colors_important", 4),
)

FILE_HEADER_SIZE = sum(size for _, size in FILE_HEADER_FIELDS)
INFO_HEADER_SIZE = sum(size for _, size in INFO_HEADER_FIELDS)
HEADER_SIZE = FILE_HEADER_SIZE + INFO_HEADER_SIZE

SIGNATURE = 0x4D42 # "BM"
FIXED_FILE_SIZE = 0x3A
RESOLUTION = 0x2E23
BITS_PER_PIXEL = 24
BI_RGB = 0

def _pack(fields, values):
	return b"".join(i2b(getattr(values, name), size) for name, size in fields)

class BmpFileHeader(namedtuple("BmpFileHeader", [name for name, _ in FILE_HEADER_FIELDS])):
	__slots__ = ()

	def pack(self):
		return _pack(FILE_HEADER_FIELDS, self)

class BmpInfoHeader(namedtuple("BmpInfoHeader", [name for name, _ in INFO_HEADER_FIELDS])):
	__slots__ = ()

	def pack(self):
		return _pack(INFO_HEADER_FIELDS, self)

def file_header():
	return BmpFileHeader(
		signature=SIGNATURE,
		file_size=FIXED_FILE_SIZE,
		reserved1=0,
		reserved2=0,
		data_offset=HEADER_SIZE,
	)

def info_header(width, height):
	return BmpInfoHeader(
		header_size=INFO_HEADER_SIZE,
		width=width & 0xffff,
		width_high=0,
		height=height & 0xffff,
		height_high=0,
		planes=1,
		bits_per_pixel=BITS_PER_PIXEL,
		compression=BI_RGB,
		image_size=0,
		x_pixels_per_meter=RESOLUTION,
		y_pixels_per_meter=RESOLUTION,
		colors_used=0,
		colors_important=0,
	)

def row_padding(width):
	return -(width * 3) % 4

def encode_bmp(frame):
	if not frame.complete:
		raise IncompleteFrame(frame.width * frame.height, len(frame))
	padding = bytes(row_padding(frame.width))
	out = bytearray(file_header().pack() + info_header(frame.width, frame.height).pack())
	for y in reversed(range(frame.height)):
		out += frame.row_bytes(y)
		out += padding
	return bytes(out)

def write_bmp(frame, path):
	"""Encode ``frame`` and write it to ``path``.

	The data goes to a temporary file next to ``path`` first, so a failed
	write never leaves a partial bitmap behind.
	"""
	data = encode_bmp(frame)
	tmp = os.fspath(path) + ".tmp"
	try:
		with open(tmp, "wb") as f:
			f.write(data)
		os.replace(tmp, path)
	except OSError as e:
		if os.path.exists(tmp):
			os.remove(tmp)
		raise StorageError("cannot write %s: %s" % (path, e)) from e
	logger.debug("wrote %d bytes to %s", len(data), path)
	return len(data)
