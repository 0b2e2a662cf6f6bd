"""Header sent before each item of a folder transfer."""

from __future__ import annotations

from dataclasses import dataclass

from .files import encode_file_path


@dataclass
class FileHeader:
    """Total size, entry type (0 file, 1 folder) and encoded path."""

    size: bytes
    type: bytes
    file_path: bytes

    def payload(self) -> bytes:
        """Return the wire encoding of the header."""
        return b"".join((self.size, self.type, self.file_path))


def new_file_header(file_name: str, is_dir: bool) -> FileHeader:
    """Build a header for the file or folder at file_name."""
    file_path = encode_file_path(file_name)
    entry_type = b"\x00\x01" if is_dir else b"\x00\x00"
    size = ((len(file_path) + len(entry_type)) & 0xFFFF).to_bytes(2, "big")
    return FileHeader(size=size, type=entry_type, file_path=file_path)