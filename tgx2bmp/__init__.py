from .bmp import encode_bmp, write_bmp
from .color import LEGACY, RGB555, XRGB1555, unpack_color
from .errors import (TGXError, StorageError, InputNotFound, DecodeError, InvalidDimensions,
	TruncatedHeader, TruncatedOpcode, UnrecognizedOpcode, OpcodeOverrun, IncompleteFrame)
from .framebuffer import FrameBuffer
from .main import convert
from .tgx import TGX, decode, load, parse_token

__version__ = "0.1.0"
