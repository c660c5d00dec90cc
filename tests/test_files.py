import pytest

from corekit.files import copy_file, file_exists


def test_file_exists_for_existing_file(tmp_path):
    content = b"hello"
    path = tmp_path / "a.txt"
    path.write_bytes(content)

    info = file_exists(path)
    assert info is not None
    assert info.st_size == len(content)


def test_file_exists_for_missing_file(tmp_path):
    assert file_exists(tmp_path / "missing.txt") is None


def test_file_exists_for_directory(tmp_path):
    info = file_exists(tmp_path)
    assert info is not None
    assert info.st_ino == tmp_path.stat().st_ino


def test_copy_file_round_trip(tmp_path):
    content = b"some content\x00\xff"
    source = tmp_path / "src.bin"
    dest = tmp_path / "dst.bin"
    source.write_bytes(content)

    copy_file(source, dest)

    assert dest.read_bytes() == content
    assert source.read_bytes() == content


def test_copy_file_truncates_destination(tmp_path):
    source = tmp_path / "src.txt"
    dest = tmp_path / "dst.txt"
    source.write_bytes(b"short")
    dest.write_bytes(b"a much longer existing content")

    copy_file(source, dest)

    assert dest.read_bytes() == b"short"


def test_copy_file_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        copy_file(tmp_path / "missing.txt", tmp_path / "dst.txt")
    assert file_exists(tmp_path / "dst.txt") is None


def test_copy_file_missing_destination_dir(tmp_path):
    source = tmp_path / "src.txt"
    source.write_bytes(b"data")
    with pytest.raises(FileNotFoundError):
        copy_file(source, tmp_path / "nope" / "dst.txt")