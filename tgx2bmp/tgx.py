import logging
from collections import namedtuple

from .color import LEGACY, get_unpacker
from .errors import InputNotFound, StorageError, TruncatedHeader, TruncatedOpcode, UnrecognizedOpcode, IncompleteFrame
from .framebuffer import BLACK, FrameBuffer

logger = logging.getLogger(__name__)

HEADER_SIZE = 8

OPT_PIXELSTREAM = 0
OPT_NEWLINE = 4
OPT_PIXREPEAT = 2
OPT_TRANSPARENT = 1

Token = namedtuple("Token", ["option", "count"])

def toint(b):
	return int.from_bytes(b, byteorder='little', signed=False)

def parse_token(byte):
	"""Split a control byte into its 3-bit option and 5-bit count (stored minus one)."""
	return Token((byte >> 5) & 0b111, (byte & 0b11111) + 1)

class TGX:
	"""Single pass decoder from a complete TGX byte string to a FrameBuffer.

	Bytes 2-3 and 6-7 of the header are reserved and skipped.
	"""

	def __init__(self, data, layout=LEGACY):
		self.bytes = data
		self.index = 0
		self.unpack = get_unpacker(layout)
		self.header()

		while self.index < len(self.bytes):
			self.token()

		if not self.frame.complete:
			raise IncompleteFrame(self.width * self.height, len(self.frame))

	def r(self, n, error=TruncatedOpcode):
		if self.index + n > len(self.bytes):
			raise error("need %d bytes at offset %d, only %d left"
				% (n, self.index, len(self.bytes) - self.index))
		ret = self.bytes[self.index:self.index+n]
		self.index += n
		return ret

	def header(self):
		self.width = toint(self.r(2, TruncatedHeader))
		self.r(2, TruncatedHeader)
		self.height = toint(self.r(2, TruncatedHeader))
		self.r(2, TruncatedHeader)
		logger.debug("tgx header: %dx%d, %d bytes of opcodes", self.width, self.height, len(self.bytes) - HEADER_SIZE)

		self.frame = FrameBuffer(self.width, self.height)

	def rgb(self):
		return self.unpack(toint(self.r(2)))

	def token(self):
		offset = self.index
		option, count = parse_token(self.r(1)[0])
		if option == OPT_PIXELSTREAM:
			# check the whole run up front so a short stream never appends a partial run
			if self.index + 2 * count > len(self.bytes):
				raise TruncatedOpcode("literal run of %d pixels at offset %d is truncated" % (count, offset))
			for i in range(count):
				self.frame.append_pixels(1, *self.rgb())
		elif option == OPT_NEWLINE:
			self.frame.pad_row_and_advance()
		elif option == OPT_PIXREPEAT:
			self.frame.append_pixels(count, *self.rgb())
		elif option == OPT_TRANSPARENT:
			self.frame.append_pixels(count, *BLACK)
		else:
			raise UnrecognizedOpcode(option, offset)

def decode(data, layout=LEGACY):
	"""Decode a whole TGX file held in memory and return its FrameBuffer."""
	return TGX(data, layout).frame

def read(path):
	try:
		with open(path, "rb") as f:
			return f.read()
	except FileNotFoundError as e:
		raise InputNotFound("input file not found: %s" % path) from e
	except OSError as e:
		raise StorageError("cannot read %s: %s" % (path, e)) from e

def load(path, layout=LEGACY):
	data = read(path)
	logger.debug("read %d bytes from %s", len(data), path)
	return decode(data, layout)
