from huffman_codec.__main__ import main


def test_compress_then_decompress(tmp_path, capsys):
    source = tmp_path / "story.txt"
    source.write_bytes(b"once upon a time " * 50)
    compressed = tmp_path / "story.txt.huff"
    restored = tmp_path / "story_out.txt"

    assert main(["c", str(source), str(compressed)]) == 0
    out = capsys.readouterr().out
    assert "Original File Size: 850 bytes" in out
    assert "Compression Ratio:" in out
    assert "Time Taken to Compress:" in out

    assert main(["d", str(compressed), str(restored)]) == 0
    out = capsys.readouterr().out
    assert "Decompressed File Size: 850 bytes" in out
    assert restored.read_bytes() == source.read_bytes()


def test_explicit_mode(tmp_path):
    source = tmp_path / "data"
    source.write_bytes(bytes(range(256)) * 3)
    compressed = tmp_path / "data.huff"
    restored = tmp_path / "data.out"

    assert main(["c", str(source), str(compressed), "bytes"]) == 0
    assert main(["d", str(compressed), str(restored), "bytes"]) == 0
    assert restored.read_bytes() == source.read_bytes()


def test_empty_input(tmp_path, capsys):
    source = tmp_path / "empty.txt"
    source.write_bytes(b"")
    assert main(["c", str(source), str(tmp_path / "empty.huff")]) == 0
    assert "No compression needed" in capsys.readouterr().out


def test_usage(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_invalid_command(tmp_path, capsys):
    assert main(["x", "a", "b"]) == 1
    assert "Invalid mode" in capsys.readouterr().out


def test_corrupt_input(tmp_path, capsys):
    bad = tmp_path / "bad.huff"
    bad.write_bytes(b"\x00\x01")
    assert main(["d", str(bad), str(tmp_path / "out")]) == 1
    assert capsys.readouterr().out.startswith("Error:")


def test_missing_file(tmp_path, capsys):
    assert main(["c", str(tmp_path / "missing.txt"), str(tmp_path / "out.huff")]) == 1
    assert "Error:" in capsys.readouterr().out
