"""Resume data sent when a transfer continues from an offset."""

from __future__ import annotations

from dataclasses import dataclass, field

FORK_INFO_LEN = 16
RESUME_HEADER_LEN = 42


@dataclass
class ForkInfoList:
    """Fork type and the offset from which to resume it."""

    fork: bytes = b"DATA"
    data_size: bytes = b"\x00" * 4
    rsvda: bytes = b"\x00" * 4
    rsvdb: bytes = b"\x00" * 4

    @classmethod
    def from_data_size(cls, data_size: bytes) -> "ForkInfoList":
        """A DATA fork entry resuming at the 4 byte offset data_size."""
        if len(data_size) < 4:
            raise ValueError("data size must be 4 bytes")
        return cls(fork=b"DATA", data_size=bytes(data_size[:4]))

    def to_bytes(self) -> bytes:
        return b"".join((self.fork, self.data_size, self.rsvda, self.rsvdb))


@dataclass
class FileResumeData:
    """The "RFLT" resume record with its list of forks."""

    fork_info_list: list[ForkInfoList] = field(default_factory=list)
    format: bytes = b"RFLT"
    version: bytes = b"\x00\x01"
    rsvd: bytes = b"\x00" * 34

    @property
    def fork_count(self) -> bytes:
        return bytes([0, len(self.fork_info_list) & 0xFF])

    def to_bytes(self) -> bytes:
        return b"".join(
            (self.format, self.version, self.rsvd, self.fork_count)
            + tuple(fork.to_bytes() for fork in self.fork_info_list)
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "FileResumeData":
        """Parse a resume record; raises ValueError if data is truncated."""
        data = bytes(data)
        if len(data) < RESUME_HEADER_LEN:
            raise ValueError("file resume data is truncated")
        count = data[41]
        forks = []
        for start in range(RESUME_HEADER_LEN, RESUME_HEADER_LEN + count * FORK_INFO_LEN, FORK_INFO_LEN):
            chunk = data[start:start + FORK_INFO_LEN]
            if len(chunk) < FORK_INFO_LEN:
                raise ValueError("fork info list is truncated")
            forks.append(
                ForkInfoList(
                    fork=chunk[0:4],
                    data_size=chunk[4:8],
                    rsvda=chunk[8:12],
                    rsvdb=chunk[12:16],
                )
            )
        return cls(fork_info_list=forks, format=data[0:4], version=data[4:6])