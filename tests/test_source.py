import pytest

from bfinterp.source import SourceFile, read_source


def test_open_reads_text_and_size(tmp_path):
    path = tmp_path / "prog.bf"
    path.write_bytes(b"+++ comment\n.")
    source = SourceFile.open(path)
    assert source.text == "+++ comment\n."
    assert source.size == len(b"+++ comment\n.")
    assert source.path == path


def test_open_accepts_string_path(tmp_path):
    path = tmp_path / "prog.bf"
    path.write_text("[-]")
    assert SourceFile.open(str(path)).text == "[-]"


def test_one_character_per_byte(tmp_path):
    path = tmp_path / "prog.bf"
    raw = bytes([0xC3, 0xA9, ord("+")])
    path.write_bytes(raw)
    source = SourceFile.open(path)
    assert source.size == len(raw)
    assert source.text.encode("latin-1") == raw


def test_missing_file_raises_and_logs(tmp_path, capsys):
    with pytest.raises(FileNotFoundError):
        SourceFile.open(tmp_path / "missing.bf")
    assert "[CRIT_ERROR] Error opening file" in capsys.readouterr().out


def test_read_source(tmp_path):
    path = tmp_path / "prog.bf"
    path.write_text("><")
    assert read_source(path) == "><"