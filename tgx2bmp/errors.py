class TGXError(Exception):
	pass

class StorageError(TGXError):
	"""Input unreadable or output unwritable."""

class InputNotFound(StorageError):
	pass

class DecodeError(TGXError, ValueError):
	"""The input is not a well-formed TGX stream."""

class InvalidDimensions(DecodeError):
	pass

class TruncatedHeader(DecodeError):
	pass

class TruncatedOpcode(DecodeError):
	pass

class UnrecognizedOpcode(DecodeError):
	def __init__(self, option, offset):
		super().__init__("unrecognized opcode %s at offset %d" % (format(option, "03b"), offset))
		self.option = option
		self.offset = offset

class OpcodeOverrun(DecodeError):
	pass

class IncompleteFrame(DecodeError):
	def __init__(self, expected, actual):
		super().__init__("frame incomplete: %d of %d pixels decoded" % (actual, expected))
		self.expected = expected
		self.actual = actual
