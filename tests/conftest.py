import pytest

def _header(width, height):
	return width.to_bytes(2, "little") + b"\0\0" + height.to_bytes(2, "little") + b"\0\0"

@pytest.fixture
def make_tgx():
	"""Build a TGX byte string from dimensions and raw opcode bytes."""
	def build(width, height, *ops):
		return _header(width, height) + b"".join(bytes(op) if isinstance(op, list) else op for op in ops)
	return build

@pytest.fixture
def tgx_file(tmp_path, make_tgx):
	def write(width, height, *ops, name="image.tgx"):
		path = tmp_path / name
		path.write_bytes(make_tgx(width, height, *ops))
		return path
	return write
