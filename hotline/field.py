"""Hotline protocol fields: typed, length-prefixed chunks of transaction data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

FIELD_ERROR = 100
FIELD_DATA = 101
FIELD_USER_NAME = 102
FIELD_USER_ID = 103
FIELD_USER_ICON_ID = 104
FIELD_USER_LOGIN = 105
FIELD_USER_PASSWORD = 106
FIELD_REF_NUM = 107
FIELD_TRANSFER_SIZE = 108
FIELD_CHAT_OPTIONS = 109
FIELD_USER_ACCESS = 110
FIELD_USER_ALIAS = 111
FIELD_USER_FLAGS = 112
FIELD_OPTIONS = 113
FIELD_CHAT_ID = 114
FIELD_CHAT_SUBJECT = 115
FIELD_WAITING_COUNT = 116
FIELD_BANNER_TYPE = 152
FIELD_NO_SERVER_AGREEMENT = 152
FIELD_VERSION = 160
FIELD_COMMUNITY_BANNER_ID = 161
FIELD_SERVER_NAME = 162
FIELD_FILE_NAME_WITH_INFO = 200
FIELD_FILE_NAME = 201
FIELD_FILE_PATH = 202
FIELD_FILE_RESUME_DATA = 203
FIELD_FILE_TRANSFER_OPTIONS = 204
FIELD_FILE_TYPE_STRING = 205
FIELD_FILE_CREATOR_STRING = 206
FIELD_FILE_SIZE = 207
FIELD_FILE_CREATE_DATE = 208
FIELD_FILE_MODIFY_DATE = 209
FIELD_FILE_COMMENT = 210
FIELD_FILE_NEW_NAME = 211
FIELD_FILE_NEW_PATH = 212
FIELD_FILE_TYPE = 213
FIELD_QUOTING_MSG = 214
FIELD_AUTOMATIC_RESPONSE = 215
FIELD_FOLDER_ITEM_COUNT = 220
FIELD_USERNAME_WITH_INFO = 300
FIELD_NEWS_ART_LIST_DATA = 321
FIELD_NEWS_CAT_NAME = 322
FIELD_NEWS_CAT_LIST_DATA15 = 323
FIELD_NEWS_PATH = 325
FIELD_NEWS_ART_ID = 326
FIELD_NEWS_ART_DATA_FLAV = 327
FIELD_NEWS_ART_TITLE = 328
FIELD_NEWS_ART_POSTER = 329
FIELD_NEWS_ART_DATE = 330
FIELD_NEWS_ART_PREV_ART = 331
FIELD_NEWS_ART_NEXT_ART = 332
FIELD_NEWS_ART_DATA = 333
FIELD_NEWS_ART_FLAGS = 334
FIELD_NEWS_ART_PARENT_ART = 335
FIELD_NEWS_ART_1ST_CHILD_ART = 336
FIELD_NEWS_ART_RECURSE_DEL = 337


@dataclass
class Field:
    """A single field: a 2 byte type, a 2 byte size and the data itself."""

    id: int
    data: bytes = b""

    @property
    def id_bytes(self) -> bytes:
        return (self.id & 0xFFFF).to_bytes(2, "big")

    @property
    def field_size(self) -> bytes:
        return (len(self.data) & 0xFFFF).to_bytes(2, "big")

    def payload(self) -> bytes:
        """Return the wire encoding of the field."""
        return b"".join((self.id_bytes, self.field_size, bytes(self.data)))


def get_field(field_id: int, fields: Iterable[Field]) -> Optional[Field]:
    """Return the first field with the given type, or None."""
    return next((field for field in fields if field.id == field_id), None)