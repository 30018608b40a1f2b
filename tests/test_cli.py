import pytest

import huffman_cli
from huffman_errors import FileTooLargeError


def test_encode_then_decode(tmp_path, capsys):
	src = tmp_path / "book.txt"
	src.write_bytes(b"It was the best of times, it was the worst of times.\n" * 40)

	assert huffman_cli.main(["encode", "--input", str(src)]) == 0
	packed = tmp_path / "book.txt.huff"
	assert packed.exists()
	assert "Compression ratio:" in capsys.readouterr().out

	restored = tmp_path / "restored.txt"
	assert huffman_cli.main(["decode", "--input", str(packed), "--output", str(restored), "--quiet"]) == 0
	assert restored.read_bytes() == src.read_bytes()
	assert capsys.readouterr().out == ""


def test_tree_dump(tmp_path):
	src = tmp_path / "in.bin"
	src.write_bytes(b"aaaabbc")
	tree = tmp_path / "tree.txt"

	code = huffman_cli.main(["encode", "--input", str(src), "--output", str(tmp_path / "out"), "--tree", str(tree), "--quiet"])
	assert code == 0
	text = tree.read_text(encoding="utf-8")
	assert text.startswith("Internal: (7)")
	assert "Leaf: (a:4)" in text


def test_missing_input(tmp_path):
	assert huffman_cli.main(["encode", "--input", str(tmp_path / "nope")]) == 1


def test_empty_input_fails(tmp_path):
	src = tmp_path / "empty"
	src.write_bytes(b"")
	assert huffman_cli.main(["encode", "--input", str(src)]) == 1
	assert not (tmp_path / "empty.huff").exists()


def test_corrupt_input_fails(tmp_path):
	src = tmp_path / "bad.huff"
	src.write_bytes(b"\x00\x00")
	assert huffman_cli.main(["decode", "--input", str(src)]) == 1
	assert not (tmp_path / "bad").exists()


def test_size_limit(tmp_path):
	src = tmp_path / "big"
	src.write_bytes(b"x" * 100)
	with pytest.raises(FileTooLargeError):
		huffman_cli.read_whole_input(str(src), max_size=99)
	assert huffman_cli.read_whole_input(str(src), max_size=100) == b"x" * 100
	assert huffman_cli.main(["encode", "--input", str(src), "--max-size", "10"]) == 1


def test_default_output_path():
	assert huffman_cli.default_output_path("a.txt", "encode") == "a.txt.huff"
	assert huffman_cli.default_output_path("a.txt.huff", "decode") == "a.txt"
	assert huffman_cli.default_output_path("a.bin", "decode") == "a.bin.out"


def test_format_statistics():
	text = huffman_cli.format_statistics(100, 40)
	assert text.splitlines() == [
		"Byte count comparison:",
		"Original: 100 bytes",
		"Encoded:  40 bytes",
		"Compression ratio: 2.50",
	]


def test_tree_dump_not_written_when_output_fails(tmp_path):
	src = tmp_path / "in.bin"
	src.write_bytes(b"aaaabbc")
	out_dir = tmp_path / "outdir"
	out_dir.mkdir()
	tree = tmp_path / "tree.txt"

	code = huffman_cli.main(["encode", "--input", str(src), "--output", str(out_dir), "--tree", str(tree), "--quiet"])
	assert code == 1
	assert not tree.exists()
