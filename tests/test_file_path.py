import pytest

from hotline.file_path import (
    FilePath,
    FilePathItem,
    file_item_scanner,
    read_path,
)

ROOT = "/usr/local/var/mobius/Files"


def test_from_bytes_unmarshals_items():
    data = bytes(
        [0x00, 0x02, 0x00, 0x00, 0x0F]
        + list(b"First Level Dir")
        + [0x00, 0x00, 0x08]
        + list(b"A SubDir")
    )
    fp = FilePath.from_bytes(data)
    assert fp == FilePath([FilePathItem(b"First Level Dir"), FilePathItem(b"A SubDir")])
    assert len(fp) == 2
    assert fp.items[0].length == 0x0F
    assert fp.items[1].length == 0x08


def test_from_bytes_handles_empty_payload():
    fp = FilePath.from_bytes(bytes([0x00, 0x00]))
    assert fp == FilePath([])
    assert len(fp) == 0


def test_from_bytes_with_no_data():
    assert len(FilePath.from_bytes(b"")) == 0


def test_from_bytes_rejects_single_byte():
    with pytest.raises(ValueError):
        FilePath.from_bytes(bytes([0x61]))


def test_from_bytes_rejects_truncated_item():
    with pytest.raises(ValueError):
        FilePath.from_bytes(bytes([0x00, 0x01, 0x00, 0x00, 0x05, 0x61]))


def test_item_from_bytes_too_short():
    with pytest.raises(ValueError, match="buflen too small"):
        FilePathItem.from_bytes(b"\x00\x00")


@pytest.mark.parametrize(
    "name, dropbox, upload",
    [
        (b"My Drop Box", True, False),
        (b"Uploads", False, True),
        (b"Files", False, False),
    ],
)
def test_special_folder_detection(name, dropbox, upload):
    fp = FilePath([FilePathItem(b"top"), FilePathItem(name)])
    assert fp.is_dropbox() is dropbox
    assert fp.is_upload_dir() is upload


def test_empty_path_is_not_special():
    fp = FilePath()
    assert fp.is_dropbox() is False
    assert fp.is_upload_dir() is False


def test_read_path_invalid_file_path():
    with pytest.raises(ValueError):
        read_path(ROOT, bytes([0x61]), bytes([0x61, 0x61, 0x61]))


@pytest.mark.parametrize(
    "file_path, file_name, expected",
    [
        (None, b"foo", "/usr/local/var/mobius/Files/foo"),
        (None, b"../../../foo", "/usr/local/var/mobius/Files/foo"),
        (
            bytes([0x00, 0x02, 0x00, 0x00, 0x03, 0x2E, 0x2E, 0x2F, 0x00, 0x00, 0x08])
            + b"A SubDir",
            b"foo",
            "/usr/local/var/mobius/Files/A SubDir/foo",
        ),
        (
            bytes([0x00, 0x01, 0x00, 0x00, 0x0B, 0x2E, 0x2E, 0x2F]) + b"A SubDir",
            b"foo",
            "/usr/local/var/mobius/Files/A SubDir/foo",
        ),
        (None, None, "/usr/local/var/mobius/Files"),
    ],
)
def test_read_path(file_path, file_name, expected):
    assert read_path(ROOT, file_path, file_name) == expected


def test_file_item_scanner_full_item():
    data = bytes([0, 0, 0x09]) + b"subfolder"
    assert file_item_scanner(data, False) == (12, data)


def test_file_item_scanner_with_extra_bytes():
    item = bytes([0, 0, 0x09]) + b"subfolder"
    assert file_item_scanner(item + bytes([1, 1, 1, 1, 1, 1]), False) == (12, item)


def test_file_item_scanner_insufficient_bytes():
    assert file_item_scanner(bytes([0, 0]), False) == (0, None)