"""File type lookup, directory size and item counting, and path encoding."""

from __future__ import annotations

import os
import re
import stat
from typing import Iterable, Iterator

from .file_types import DEFAULT_FILE_TYPE, FILE_TYPES, FileType


def _extension(filename: str) -> str:
    base = filename.rsplit("/", 1)[-1]
    dot = base.rfind(".")
    return base[dot:] if dot >= 0 else ""


def file_type_from_filename(filename: str) -> FileType:
    """Return the type and creator codes for a file name's extension."""
    return FILE_TYPES.get(_extension(filename).lower(), DEFAULT_FILE_TYPE)


def file_type_from_info(path: str) -> FileType:
    """Return the type and creator codes for the file or folder at path."""
    if os.path.isdir(path):
        return FileType("fldr", "n/a ")
    return file_type_from_filename(os.path.basename(path))


def _walk(path: str, name: str | None = None) -> Iterator[tuple[str, os.stat_result]]:
    """Yield (name, lstat) for path and everything beneath it, in lexical order."""
    if name is None:
        name = os.path.basename(os.path.normpath(path))
    info = os.lstat(path)
    yield name, info
    if stat.S_ISDIR(info.st_mode):
        for child in sorted(os.listdir(path)):
            yield from _walk(os.path.join(path, child), child)


def calc_total_size(file_path: str) -> bytes:
    """Return the summed size of all regular entries below file_path as 4 bytes."""
    total = sum(
        info.st_size for _, info in _walk(file_path) if not stat.S_ISDIR(info.st_mode)
    )
    return (total & 0xFFFFFFFF).to_bytes(4, "big")


def calc_item_count(file_path: str) -> bytes:
    """Return the number of non-hidden items below file_path as 2 bytes."""
    count = sum(1 for name, _ in _walk(file_path) if not name.startswith("."))
    return ((count - 1) & 0xFFFF).to_bytes(2, "big")


def encode_file_path(file_path: str) -> bytes:
    """Encode a slash separated path into the Hotline file path format."""
    sections = file_path.split("/")
    out = bytearray((len(sections) & 0xFFFF).to_bytes(2, "big"))
    for section in sections:
        encoded = section.encode("utf-8")
        out += b"\x00\x00"
        out.append(len(encoded) & 0xFF)
        out += encoded
    return bytes(out)


def ignore_file(file_name: str, ignore_list: Iterable[str]) -> bool:
    """True if file_name matches any regular expression in ignore_list."""
    for pattern in ignore_list:
        try:
            if re.search(pattern, file_name):
                return True
        except re.error:
            continue
    return False