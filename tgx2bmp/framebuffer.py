from PIL import Image

from .errors import InvalidDimensions, OpcodeOverrun

MAX_PIXELS = 1 << 26

BLACK = (0, 0, 0)

class FrameBuffer:
	"""Row-major grid of BGR pixel triples filled one run at a time.

	``cursor`` is the column of the next pixel in the current row and only
	goes back to 0 through ``newline``. ``row`` counts the rows closed so far.
	"""

	def __init__(self, width, height):
		if width <= 0 or height <= 0:
			raise InvalidDimensions("invalid dimensions %dx%d" % (width, height))
		if width * height > MAX_PIXELS:
			raise InvalidDimensions("image too large: %dx%d" % (width, height))
		self.width = width
		self.height = height
		self.cursor = 0
		self.row = 0
		self.pixels = bytearray()

	def __len__(self):
		return len(self.pixels) // 3

	def __repr__(self):
		return "<FrameBuffer %dx%d row=%d cursor=%d>" % (self.width, self.height, self.row, self.cursor)

	@property
	def complete(self):
		return len(self) == self.width * self.height

	def append_pixels(self, count, r, g, b):
		if self.row >= self.height:
			raise OpcodeOverrun("run of %d pixels past the last row" % count)
		if self.cursor + count > self.width:
			raise OpcodeOverrun("run of %d pixels at column %d crosses row %d of width %d"
				% (count, self.cursor, self.row, self.width))
		self.pixels += bytes((b, g, r)) * count
		self.cursor += count

	def pad_row_and_advance(self):
		if self.row >= self.height:
			raise OpcodeOverrun("newline past the last row")
		self.pixels += bytes(3 * (self.width - self.cursor))
		self.cursor = 0
		self.row += 1

	def getpixel(self, x, y):
		"""Return the (red, green, blue) value at column ``x`` of row ``y``."""
		i = 3 * (y * self.width + x)
		b, g, r = self.pixels[i:i+3]
		return (r, g, b)

	def row_bytes(self, y):
		start = 3 * self.width * y
		return bytes(self.pixels[start:start + 3 * self.width])

	def to_image(self):
		data = bytes(self.pixels).ljust(3 * self.width * self.height, b"\0")
		return Image.frombytes("RGB", (self.width, self.height), data, "raw", "BGR")
