import pytest

from tgx2bmp.color import LEGACY, RGB555, XRGB1555, get_unpacker, unpack_color

def test_legacy_offset_11_field_lands_in_red():
	assert unpack_color(0x0800) == (8, 0, 0)
	assert unpack_color(0x7800) == (120, 0, 0)

def test_legacy_offset_1_field_is_overwritten():
	assert unpack_color(0x0002) == (0, 0, 0)
	assert unpack_color(0x001E) == (0, 0, 0)

def test_legacy_green_and_blue():
	assert unpack_color(0x0040) == (0, 8, 0)
	assert unpack_color(0xFFFF) == (120, 120, 0)

def test_legacy_ignores_unused_bits():
	for bit in (0, 5, 10, 15):
		assert unpack_color(1 << bit) == (0, 0, 0)

def test_rgb555():
	assert unpack_color(0x0002, RGB555) == (8, 0, 0)
	assert unpack_color(0x0040, RGB555) == (0, 8, 0)
	assert unpack_color(0x0800, RGB555) == (0, 0, 8)
	assert unpack_color(0x7C00, RGB555) == (0, 128, 120)
	assert unpack_color(0xFFFE, RGB555) == (248, 248, 248)

def test_xrgb1555():
	assert unpack_color(0x7C00, XRGB1555) == (248, 0, 0)
	assert unpack_color(0x03E0, XRGB1555) == (0, 248, 0)
	assert unpack_color(0x001F, XRGB1555) == (0, 0, 248)
	assert unpack_color(0x8000, XRGB1555) == (0, 0, 0)

def test_layouts_disagree_on_same_value():
	values = {unpack_color(0x0842, layout) for layout in (LEGACY, RGB555, XRGB1555)}
	assert len(values) == 3

def test_unknown_layout():
	with pytest.raises(ValueError):
		get_unpacker("rgb565")
