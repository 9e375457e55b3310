import pytest

from usracc.file_writer import FileWriter


def test_append_creates_file(tmp_path):
    target = tmp_path / "out.bin"
    with FileWriter() as writer:
        writer.open(target)
        assert writer.append(b"abc") == 3
    assert target.read_bytes() == b"abc"


def test_append_adds_to_end(tmp_path):
    target = tmp_path / "out.bin"
    with FileWriter() as writer:
        writer.open(target)
        writer.append(b"abc")
        writer.append(b"def")
    assert target.read_bytes() == b"abcdef"


def test_open_keeps_existing_content(tmp_path):
    target = tmp_path / "out.bin"
    target.write_bytes(b"head")
    with FileWriter() as writer:
        writer.open(target)
        writer.append(b"tail")
    assert target.read_bytes() == b"headtail"


def test_write_at_overwrites_in_place(tmp_path):
    target = tmp_path / "out.bin"
    target.write_bytes(b"0123456789")
    with FileWriter() as writer:
        writer.open(target)
        assert writer.write_at(b"ab", 3) == 2
    assert target.read_bytes() == b"012ab56789"


def test_write_at_past_end_extends_with_zeros(tmp_path):
    target = tmp_path / "out.bin"
    with FileWriter() as writer:
        writer.open(target)
        writer.write_at(b"x", 4)
    assert target.read_bytes() == b"\x00\x00\x00\x00x"


def test_length_tracks_writes(tmp_path):
    target = tmp_path / "out.bin"
    with FileWriter() as writer:
        writer.open(target)
        assert writer.length() == 0
        writer.append(b"hello")
        assert writer.length() == len(b"hello")


def test_length_leaves_position_unchanged(tmp_path):
    target = tmp_path / "out.bin"
    with FileWriter() as writer:
        writer.open(target)
        writer.write_at(b"abcdef", 0)
        writer.length()
        writer.write_at(b"Z", 0)
        assert writer.length() == 6
    assert target.read_bytes() == b"Zbcdef"


def test_path_is_recorded(tmp_path):
    target = tmp_path / "out.bin"
    writer = FileWriter()
    writer.open(target)
    try:
        assert writer.path == str(target)
        assert writer.is_open
    finally:
        writer.close()
    assert not writer.is_open


def test_reopen_switches_file(tmp_path):
    first, second = tmp_path / "a.bin", tmp_path / "b.bin"
    with FileWriter() as writer:
        writer.open(first)
        writer.append(b"one")
        writer.open(second)
        writer.append(b"two")
    assert first.read_bytes() == b"one"
    assert second.read_bytes() == b"two"


def test_write_without_open_raises():
    writer = FileWriter()
    with pytest.raises(ValueError):
        writer.append(b"data")
    with pytest.raises(ValueError):
        writer.length()


def test_negative_offset_raises(tmp_path):
    with FileWriter() as writer:
        writer.open(tmp_path / "out.bin")
        with pytest.raises(ValueError):
            writer.write_at(b"x", -1)


def test_open_missing_directory_raises(tmp_path):
    writer = FileWriter()
    with pytest.raises(FileNotFoundError):
        writer.open(tmp_path / "missing" / "out.bin")