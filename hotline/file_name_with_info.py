"""File list entries: fixed header of codes and sizes followed by the name."""

from __future__ import annotations

from dataclasses import dataclass

HEADER_LEN = 20


@dataclass
class FileNameWithInfo:
    """One entry of a file name list."""

    file_type: bytes = b"\x00" * 4
    creator: bytes = b"\x00" * 4
    file_size: bytes = b"\x00" * 4
    rsvd: bytes = b"\x00" * 4
    name_script: bytes = b"\x00" * 2
    name_size: bytes = b"\x00" * 2
    name: bytes = b""

    @property
    def name_len(self) -> int:
        return int.from_bytes(self.name_size, "big")

    def to_bytes(self) -> bytes:
        """Return the wire encoding of the entry."""
        return b"".join(
            (
                self.file_type,
                self.creator,
                self.file_size,
                self.rsvd,
                self.name_script,
                self.name_size,
                self.name,
            )
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "FileNameWithInfo":
        """Parse an entry; raises ValueError if data is truncated."""
        data = bytes(data)
        if len(data) < HEADER_LEN:
            raise ValueError("file name with info header is truncated")
        name_size = data[18:20]
        name_len = int.from_bytes(name_size, "big")
        name = data[HEADER_LEN:HEADER_LEN + name_len]
        if len(name) < name_len:
            raise ValueError("file name with info name is truncated")
        return cls(
            file_type=data[0:4],
            creator=data[4:8],
            file_size=data[8:12],
            rsvd=data[12:16],
            name_script=data[16:18],
            name_size=name_size,
            name=name,
        )