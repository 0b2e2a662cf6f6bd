"""User account access permissions stored as a 64 bit bitmap."""

from __future__ import annotations

from dataclasses import dataclass, field

ACCESS_DELETE_FILE = 0
ACCESS_UPLOAD_FILE = 1
ACCESS_DOWNLOAD_FILE = 2
ACCESS_RENAME_FILE = 3
ACCESS_MOVE_FILE = 4
ACCESS_CREATE_FOLDER = 5
ACCESS_DELETE_FOLDER = 6
ACCESS_RENAME_FOLDER = 7
ACCESS_MOVE_FOLDER = 8
ACCESS_READ_CHAT = 9
ACCESS_SEND_CHAT = 10
ACCESS_OPEN_CHAT = 11
ACCESS_CREATE_USER = 14
ACCESS_DELETE_USER = 15
ACCESS_OPEN_USER = 16
ACCESS_MODIFY_USER = 17
ACCESS_NEWS_READ_ART = 20
ACCESS_NEWS_POST_ART = 21
ACCESS_DISCON_USER = 22
ACCESS_CANNOT_BE_DISCON = 23
ACCESS_GET_CLIENT_INFO = 24
ACCESS_UPLOAD_ANYWHERE = 25
ACCESS_ANY_NAME = 26
ACCESS_NO_AGREEMENT = 27
ACCESS_SET_FILE_COMMENT = 28
ACCESS_SET_FOLDER_COMMENT = 29
ACCESS_VIEW_DROP_BOXES = 30
ACCESS_MAKE_ALIAS = 31
ACCESS_BROADCAST = 32
ACCESS_NEWS_DELETE_ART = 33
ACCESS_NEWS_CREATE_CAT = 34
ACCESS_NEWS_DELETE_CAT = 35
ACCESS_NEWS_CREATE_FLDR = 36
ACCESS_NEWS_DELETE_FLDR = 37
ACCESS_SEND_PRIV_MSG = 40

ACCESS_BITMAP_LEN = 8


@dataclass
class AccessBitmap:
    """Eight bytes of permission bits, most significant bit first."""

    bits: bytearray = field(default_factory=lambda: bytearray(ACCESS_BITMAP_LEN))

    def __post_init__(self) -> None:
        self.bits = bytearray(self.bits)
        if len(self.bits) != ACCESS_BITMAP_LEN:
            raise ValueError(f"access bitmap must be {ACCESS_BITMAP_LEN} bytes")

    def set(self, i: int) -> None:
        """Grant permission bit i."""
        self.bits[i // 8] |= 1 << (7 - i % 8)

    def is_set(self, i: int) -> bool:
        """True if permission bit i is granted."""
        return bool(self.bits[i // 8] & (1 << (7 - i % 8)))

    def __bytes__(self) -> bytes:
        return bytes(self.bits)