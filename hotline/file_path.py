"""Parsing of Hotline file paths and resolution against a file root."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

FILE_ITEM_MIN_LEN = 3


def file_item_scanner(data: bytes, at_eof: bool = False) -> tuple[int, Optional[bytes]]:
    """Split off one path item token.

    Returns (advance, token); (0, None) when more data is needed.
    """
    if len(data) < FILE_ITEM_MIN_LEN:
        return 0, None
    advance = FILE_ITEM_MIN_LEN + data[2]
    return advance, bytes(data[:advance])


@dataclass
class FilePathItem:
    """One directory or file name within a path."""

    name: bytes

    @property
    def length(self) -> int:
        return len(self.name)

    @classmethod
    def from_bytes(cls, data: bytes) -> "FilePathItem":
        if len(data) < FILE_ITEM_MIN_LEN:
            raise ValueError("buflen too small")
        size = data[2]
        name = bytes(data[FILE_ITEM_MIN_LEN:FILE_ITEM_MIN_LEN + size])
        if len(name) < size:
            raise ValueError("file path item is truncated")
        return cls(name)


@dataclass
class FilePath:
    """A list of path items as sent in a file path field."""

    items: list[FilePathItem] = field(default_factory=list)

    @classmethod
    def from_bytes(cls, data: bytes) -> "FilePath":
        if not data:
            return cls()
        if len(data) < 2:
            raise ValueError("file path is too short")
        count = int.from_bytes(data[:2], "big")
        rest = bytes(data[2:])
        items = []
        for _ in range(count):
            advance, token = file_item_scanner(rest, True)
            if token is None or len(token) < advance:
                raise ValueError("buflen too small")
            items.append(FilePathItem.from_bytes(token))
            rest = rest[advance:]
        return cls(items)

    def __len__(self) -> int:
        return len(self.items)

    def _last_name_contains(self, needle: bytes) -> bool:
        if not self.items:
            return False
        return needle in self.items[-1].name.lower()

    def is_dropbox(self) -> bool:
        """True if the last path item is a drop box folder."""
        return self._last_name_contains(b"drop box")

    def is_upload_dir(self) -> bool:
        """True if the last path item is an upload folder."""
        return self._last_name_contains(b"upload")


def _clean(path: str) -> str:
    rooted = path.startswith("/")
    parts: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if parts and parts[-1] != "..":
                parts.pop()
            elif not rooted:
                parts.append("..")
            continue
        parts.append(part)
    joined = "/".join(parts)
    if rooted:
        return "/" + joined
    return joined or "."


def _join(*elements: str) -> str:
    joined = "/".join(element for element in elements if element)
    return _clean(joined) if joined else ""


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="surrogateescape")


def read_path(file_root: str, file_path: Optional[bytes], file_name: Optional[bytes]) -> str:
    """Resolve an encoded path and name beneath file_root.

    Any ".." components are confined to the root.
    """
    fp = FilePath.from_bytes(file_path) if file_path is not None else FilePath()

    sub_path = ""
    for item in fp.items:
        sub_path = _join("/", sub_path, _decode(item.name))

    return _join(file_root, sub_path, _join("/", _decode(file_name or b"")))