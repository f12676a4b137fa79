import argparse
import logging
import os
import sys
import time

from .bmp import write_bmp
from .color import LAYOUTS, LEGACY
from .errors import DecodeError, InputNotFound, StorageError
from .tgx import load

logger = logging.getLogger(__name__)

def convert(path, layout=LEGACY, png=False):
	"""Decode the TGX file at ``path`` and write ``path + ".bmp"``.

	With ``png`` a Pillow preview is saved as ``path + ".png"`` as well.
	Returns the list of written paths.
	"""
	frame = load(path, layout)
	outpath = os.fspath(path) + ".bmp"
	write_bmp(frame, outpath)
	written = [outpath]
	if png:
		pngpath = os.fspath(path) + ".png"
		try:
			frame.to_image().save(pngpath)
		except OSError as e:
			raise StorageError("cannot write %s: %s" % (pngpath, e)) from e
		written.append(pngpath)
	return written

def get_args(argv=None):
	parser = argparse.ArgumentParser(prog="tgx2bmp", description="Convert a TGX image to a 24-bit BMP written next to it.")
	parser.add_argument("path", nargs="?", help="path to the .tgx file")
	parser.add_argument("--layout", choices=sorted(LAYOUTS), default=LEGACY,
		help="packed color layout (default: legacy, same colors as the original converter; "
		"the other layouts fix the channel unpacking and give different colors)")
	parser.add_argument("--png", action="store_true", help="also save a PNG preview")
	parser.add_argument("-v", "--verbose", action="store_true")
	return parser, parser.parse_args(argv)

def main(argv=None):
	parser, args = get_args(argv)
	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(message)s")

	if args.path is None:
		parser.print_usage()
		print("Please set path to tgx file")
		return 0

	logger.info("FILE: %s", args.path)
	start = time.perf_counter()
	try:
		written = convert(args.path, args.layout, args.png)
	except InputNotFound as e:
		logger.error("input not found: %s", e)
		return 1
	except StorageError as e:
		logger.error("io error: %s", e)
		return 1
	except DecodeError as e:
		logger.error("%s: %s", type(e).__name__, e)
		return 1

	for outpath in written:
		logger.info("wrote %s", outpath)
	logger.info("Time elapsed: %d ms", (time.perf_counter() - start) * 1000)
	return 0

if __name__ == "__main__":
	sys.exit(main())
