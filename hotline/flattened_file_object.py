"""The flattened file object: headers and info fork sent before file data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO

from .file_types import FRIENDLY_CREATOR_NAMES

FLAT_FILE_HEADER_LEN = 24
FORK_HEADER_LEN = 16
INFO_FORK_FIXED_LEN = 74
_NAME_SIZE_END = 72


@dataclass
class FlatFileHeader:
    """First section of a flattened file object."""

    format: bytes = b"FILP"
    version: bytes = b"\x00\x01"
    rsvd: bytes = b"\x00" * 16
    fork_count: bytes = b"\x00\x02"

    def to_bytes(self) -> bytes:
        return b"".join((self.format, self.version, self.rsvd, self.fork_count))

    @classmethod
    def from_bytes(cls, data: bytes) -> "FlatFileHeader":
        data = bytes(data)
        if len(data) < FLAT_FILE_HEADER_LEN:
            raise ValueError("flat file header is truncated")
        return cls(format=data[0:4], version=data[4:6], rsvd=data[6:22], fork_count=data[22:24])


@dataclass
class FlatFileForkHeader:
    """Header of one fork: INFO, DATA or MACR."""

    fork_type: bytes = b"\x00" * 4
    compression_type: bytes = b"\x00" * 4
    rsvd: bytes = b"\x00" * 4
    data_size: bytes = b"\x00" * 4

    def to_bytes(self) -> bytes:
        return b"".join((self.fork_type, self.compression_type, self.rsvd, self.data_size))

    @classmethod
    def from_bytes(cls, data: bytes) -> "FlatFileForkHeader":
        data = bytes(data)
        if len(data) < FORK_HEADER_LEN:
            raise ValueError("fork header is truncated")
        return cls(
            fork_type=data[0:4],
            compression_type=data[4:8],
            rsvd=data[8:12],
            data_size=data[12:16],
        )


def _friendly(signature: bytes) -> bytes:
    name = FRIENDLY_CREATOR_NAMES.get(signature.decode("latin-1"))
    return name.encode() if name is not None else signature


@dataclass
class FlatFileInformationFork:
    """File metadata: platform, type and creator codes, dates, name and comment."""

    platform: bytes = b"AMAC"
    type_signature: bytes = b"TEXT"
    creator_signature: bytes = b"TTXT"
    flags: bytes = b"\x00" * 4
    platform_flags: bytes = b"\x00\x00\x01\x00"
    rsvd: bytes = b"\x00" * 32
    create_date: bytes = b"\x00" * 8
    modify_date: bytes = b"\x00" * 8
    name_script: bytes = b"\x00\x00"
    name_size: bytes = b"\x00\x00"
    name: bytes = b""
    comment_size: bytes = b"\x00\x00"
    comment: bytes = b""

    def friendly_type(self) -> bytes:
        """Display name of the type code, or the code itself."""
        return _friendly(self.type_signature)

    def friendly_creator(self) -> bytes:
        """Display name of the creator code, or the code itself."""
        return _friendly(self.creator_signature)

    def set_comment(self, comment: bytes) -> None:
        self.comment = bytes(comment)
        self.comment_size = (len(comment) & 0xFFFF).to_bytes(2, "big")

    def data_size(self) -> bytes:
        """Length of the fork: fixed fields plus name and comment, as 4 bytes."""
        size = len(self.name) + len(self.comment) + INFO_FORK_FIXED_LEN
        return (size & 0xFFFFFFFF).to_bytes(4, "big")

    def _name_size_bytes(self) -> bytes:
        return (len(self.name) & 0xFFFF).to_bytes(2, "big")

    def to_bytes(self) -> bytes:
        return b"".join(
            (
                self.platform,
                self.type_signature,
                self.creator_signature,
                self.flags,
                self.platform_flags,
                self.rsvd,
                self.create_date,
                self.modify_date,
                self.name_script,
                self._name_size_bytes(),
                self.name,
                self.comment_size,
                self.comment,
            )
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "FlatFileInformationFork":
        """Parse an info fork; the trailing comment size may be omitted."""
        data = bytes(data)
        if len(data) < _NAME_SIZE_END:
            raise ValueError("information fork is truncated")
        name_size = data[70:72]
        name_end = _NAME_SIZE_END + int.from_bytes(name_size, "big")
        if len(data) < name_end:
            raise ValueError("information fork name is truncated")

        comment_size = b""
        comment = b""
        if len(data) > name_end:
            comment_size = data[name_end:name_end + 2]
            if len(comment_size) < 2:
                raise ValueError("information fork comment size is truncated")
            comment_end = name_end + 2 + int.from_bytes(comment_size, "big")
            comment = data[name_end + 2:comment_end]
            if len(data) < comment_end:
                raise ValueError("information fork comment is truncated")

        return cls(
            platform=data[0:4],
            type_signature=data[4:8],
            creator_signature=data[8:12],
            flags=data[12:16],
            platform_flags=data[16:20],
            rsvd=data[20:52],
            create_date=data[52:60],
            modify_date=data[60:68],
            name_script=data[68:70],
            name_size=name_size,
            name=data[_NAME_SIZE_END:name_end],
            comment_size=comment_size,
            comment=comment,
        )


def new_flat_file_information_fork(
    file_name: str, modify_time: bytes, type_signature: str, creator_signature: str
) -> FlatFileInformationFork:
    """Build an info fork for a file; the create date mirrors the modify date."""
    name = file_name.encode("utf-8")
    return FlatFileInformationFork(
        platform=b"AMAC",
        type_signature=type_signature.encode("latin-1"),
        creator_signature=creator_signature.encode("latin-1"),
        create_date=bytes(modify_time),
        modify_date=bytes(modify_time),
        name_size=(len(name) & 0xFFFF).to_bytes(2, "big"),
        name=name,
    )


def _read_exactly(stream: BinaryIO, size: int) -> bytes:
    buf = bytearray()
    while len(buf) < size:
        chunk = stream.read(size - len(buf))
        if not chunk:
            raise EOFError("unexpected end of flattened file object")
        buf += chunk
    return bytes(buf)


@dataclass
class FlattenedFileObject:
    """Header, info fork and fork headers that precede a file's contents."""

    flat_file_header: FlatFileHeader = field(default_factory=FlatFileHeader)
    info_fork_header: FlatFileForkHeader = field(default_factory=FlatFileForkHeader)
    info_fork: FlatFileInformationFork = field(default_factory=FlatFileInformationFork)
    data_fork_header: FlatFileForkHeader = field(default_factory=FlatFileForkHeader)
    res_fork_header: FlatFileForkHeader = field(default_factory=FlatFileForkHeader)

    def to_bytes(self) -> bytes:
        """Encode the header, info fork and data fork header."""
        return b"".join(
            (
                self.flat_file_header.to_bytes(),
                b"INFO",
                b"\x00" * 4,
                b"\x00" * 4,
                self.info_fork.data_size(),
                self.info_fork.to_bytes(),
                self.data_fork_header.to_bytes(),
            )
        )

    def transfer_size(self, offset: int) -> bytes:
        """Total bytes to send from offset onwards, as 4 bytes."""
        total = len(self.to_bytes()) + self.data_size() + self.rsrc_size() - offset
        return (total & 0xFFFFFFFF).to_bytes(4, "big")

    @classmethod
    def read_from(cls, stream: BinaryIO) -> "FlattenedFileObject":
        """Read a flattened file object up to and including the data fork header."""
        header = FlatFileHeader.from_bytes(_read_exactly(stream, FLAT_FILE_HEADER_LEN))
        info_header = FlatFileForkHeader.from_bytes(_read_exactly(stream, FORK_HEADER_LEN))
        info_len = int.from_bytes(info_header.data_size, "big")
        info_fork = FlatFileInformationFork.from_bytes(_read_exactly(stream, info_len))
        data_header = FlatFileForkHeader.from_bytes(_read_exactly(stream, FORK_HEADER_LEN))
        return cls(
            flat_file_header=header,
            info_fork_header=info_header,
            info_fork=info_fork,
            data_fork_header=data_header,
        )

    def data_size(self) -> int:
        return int.from_bytes(self.data_fork_header.data_size, "big")

    def rsrc_size(self) -> int:
        return int.from_bytes(self.res_fork_header.data_size, "big")