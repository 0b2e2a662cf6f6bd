import io

import pytest

from hotline.flattened_file_object import (
    FlatFileForkHeader,
    FlatFileHeader,
    FlatFileInformationFork,
    FlattenedFileObject,
    new_flat_file_information_fork,
)

_PREFIX = bytes([0x41, 0x4D, 0x41, 0x43]) + bytes([0x3F] * 8) + bytes(58) + bytes([0x00, 0x09])
WITHOUT_COMMENT = _PREFIX + b"bear.tiff"
WITH_COMMENT = WITHOUT_COMMENT + b"\x00\x00"


def test_unmarshal_when_comment_size_is_omitted():
    ffif = FlatFileInformationFork.from_bytes(WITHOUT_COMMENT)
    assert ffif.name == b"bear.tiff"
    assert ffif.comment == b""
    assert ffif.platform == b"AMAC"


def test_unmarshal_when_zero_comment_size_is_included():
    ffif = FlatFileInformationFork.from_bytes(WITH_COMMENT)
    assert ffif.name == b"bear.tiff"
    assert ffif.comment_size == b"\x00\x00"
    assert ffif.comment == b""


@pytest.mark.parametrize("data", [WITHOUT_COMMENT, WITH_COMMENT])
def test_information_fork_round_trip(data):
    assert FlatFileInformationFork.from_bytes(data).to_bytes() == data


def test_information_fork_with_comment_round_trip():
    ffif = FlatFileInformationFork(name=b"foo")
    ffif.set_comment(b"a comment")
    parsed = FlatFileInformationFork.from_bytes(ffif.to_bytes())
    assert parsed.comment == b"a comment"
    assert parsed.comment_size == len(b"a comment").to_bytes(2, "big")


def test_information_fork_truncated_raises():
    with pytest.raises(ValueError):
        FlatFileInformationFork.from_bytes(WITHOUT_COMMENT[:-1])


def test_data_size_matches_encoded_length():
    ffif = new_flat_file_information_fork("foo.txt", bytes(8), "TEXT", "ttxt")
    ffif.set_comment(b"hi")
    assert int.from_bytes(ffif.data_size(), "big") == len(ffif.to_bytes())


def test_friendly_names():
    ffif = FlatFileInformationFork(type_signature=b"TEXT", creator_signature=b"ogle")
    assert ffif.friendly_type() == b"Text File"
    assert ffif.friendly_creator() == b"ogle"


def test_new_information_fork_uses_modify_time_for_both_dates():
    stamp = b"\x07\xe6\x00\x00\x00\x00\x00\x01"
    ffif = new_flat_file_information_fork("foo", stamp, "TEXT", "TTXT")
    assert ffif.create_date == stamp
    assert ffif.modify_date == stamp
    assert ffif.name_size == b"\x00\x03"


def test_flat_file_header_defaults():
    data = FlatFileHeader().to_bytes()
    assert data[:6] == b"FILP\x00\x01"
    assert FlatFileHeader.from_bytes(data) == FlatFileHeader()


def test_fork_header_round_trip():
    header = FlatFileForkHeader(fork_type=b"DATA", data_size=b"\x00\x00\x10\x00")
    assert FlatFileForkHeader.from_bytes(header.to_bytes()) == header


def _object():
    info = new_flat_file_information_fork("foo.txt", bytes(8), "TEXT", "ttxt")
    return FlattenedFileObject(
        info_fork_header=FlatFileForkHeader(fork_type=b"INFO", data_size=info.data_size()),
        info_fork=info,
        data_fork_header=FlatFileForkHeader(fork_type=b"DATA", data_size=b"\x00\x00\x01\x00"),
    )


def test_read_from_round_trip():
    ffo = _object()
    assert FlattenedFileObject.read_from(io.BytesIO(ffo.to_bytes())) == ffo


def test_read_from_truncated_stream_raises():
    with pytest.raises(EOFError):
        FlattenedFileObject.read_from(io.BytesIO(_object().to_bytes()[:-3]))


def test_transfer_size_accounts_for_offset_and_forks():
    ffo = _object()
    ffo.res_fork_header = FlatFileForkHeader(fork_type=b"MACR", data_size=b"\x00\x00\x00\x20")
    full = int.from_bytes(ffo.transfer_size(0), "big")
    assert full == len(ffo.to_bytes()) + ffo.data_size() + ffo.rsrc_size()
    assert full - int.from_bytes(ffo.transfer_size(10), "big") == 10


def test_sizes_read_fork_headers():
    ffo = _object()
    assert ffo.data_size() == 0x100
    assert ffo.rsrc_size() == 0