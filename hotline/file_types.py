"""Mapping of file extensions to classic Mac OS type and creator codes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FileType:
    """Four character type and creator codes used in file transfers."""

    type_code: str
    creator_code: str


DEFAULT_FILE_TYPE = FileType("TEXT", "TTXT")

FILE_TYPES: dict[str, FileType] = {
    ".sit": FileType("SIT!", "SIT!"),
    ".pdf": FileType("PDF ", "CARO"),
    ".gif": FileType("GIFf", "ogle"),
    ".txt": FileType("TEXT", "ttxt"),
    ".zip": FileType("ZIP ", "SITx"),
    ".tgz": FileType("Gzip", "SITx"),
    ".hqx": FileType("TEXT", "SITx"),
    ".jpg": FileType("JPEG", "ogle"),
    ".jpeg": FileType("JPEG", "ogle"),
    ".img": FileType("rohd", "ddsk"),
    ".sea": FileType("APPL", "aust"),
    ".mov": FileType("MooV", "TVOD"),
    ".incomplete": FileType("HTft", "HTLC"),  # partial file upload
}

# Codes shown in the GetInfo window by name rather than by code.
FRIENDLY_CREATOR_NAMES: dict[str, str] = {
    "APPL": "Application Program",
    "HTbm": "Hotline Bookmark",
    "fldr": "Folder",
    "flda": "Folder Alias",
    "HTft": "Incomplete File",
    "SIT!": "StuffIt Archive",
    "TEXT": "Text File",
    "HTLC": "Hotline",
}


def friendly_name(code: str) -> str:
    """Return the display name for a type or creator code, or the code itself."""
    return FRIENDLY_CREATOR_NAMES.get(code, code)