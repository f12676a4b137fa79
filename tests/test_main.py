import logging

from PIL import Image

from tgx2bmp.main import convert, main

BLACK_2X1 = [0b00100001]

def test_no_argument(capsys):
	assert main([]) == 0
	out = capsys.readouterr().out
	assert "usage" in out
	assert "Please set path to tgx file" in out

def test_convert_writes_bmp_next_to_input(tgx_file):
	path = tgx_file(2, 1, BLACK_2X1)
	written = convert(path)
	assert written == [str(path) + ".bmp"]
	with open(written[0], "rb") as f:
		assert len(f.read()) == 62

def test_convert_png_preview(tgx_file):
	path = tgx_file(1, 1, [0b01000000, 0x00, 0x08])
	bmppath, pngpath = convert(path, png=True)
	with Image.open(pngpath) as img:
		assert img.getpixel((0, 0)) == (8, 0, 0)

def test_main_success(tgx_file, caplog):
	path = tgx_file(2, 1, BLACK_2X1)
	with caplog.at_level(logging.INFO):
		assert main([str(path)]) == 0
	assert (path.parent / "image.tgx.bmp").exists()
	assert "Time elapsed" in caplog.text

def test_main_layout(tgx_file):
	path = tgx_file(1, 1, [0b01000000, 0x00, 0x08])
	assert main([str(path), "--layout", "rgb555"]) == 0
	with Image.open(str(path) + ".bmp") as img:
		assert img.convert("RGB").getpixel((0, 0)) == (0, 0, 8)

def test_main_missing_input(tmp_path, caplog):
	assert main([str(tmp_path / "nope.tgx")]) == 1
	assert "input not found" in caplog.text
	assert not (tmp_path / "nope.tgx.bmp").exists()

def test_main_malformed_input_writes_nothing(tgx_file, caplog):
	path = tgx_file(2, 1, [0b01100000])
	assert main([str(path)]) == 1
	assert "UnrecognizedOpcode" in caplog.text
	assert not (path.parent / "image.tgx.bmp").exists()

def test_main_truncated_input(tgx_file, caplog):
	path = tgx_file(5, 1, [0b00000100, 0x00])
	assert main([str(path)]) == 1
	assert "TruncatedOpcode" in caplog.text
