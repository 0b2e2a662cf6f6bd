"""Threaded news: categories, bundles and article list encoding."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

NEWS_BUNDLE = b"\x00\x02"
NEWS_CATEGORY = b"\x00\x03"

DEFAULT_NEWS_DATE_FORMAT = "%b%d %H:%M"  # Jun23 20:49

DEFAULT_NEWS_TEMPLATE = (
    "From %s (%s):\n\n%s\n\n"
    "__________________________________________________________"
)

_ADD_SN = b"\x00\x00\x00\x01"
_DELETE_SN = b"\x00\x00\x00\x02"
_FLAVOR = b"\x0atext/plain"


def _u8_len(data: bytes) -> bytes:
    return bytes([len(data) & 0xFF])


@dataclass
class NewsArtData:
    """A single news article."""

    title: str = ""
    poster: str = ""
    date: bytes = b"\x00" * 8
    prev_art: bytes = b"\x00" * 4
    next_art: bytes = b"\x00" * 4
    parent_art: bytes = b"\x00" * 4
    first_child_art: bytes = b"\x00" * 4
    data_flav: bytes = b"text/plain"
    data: str = ""

    def data_size(self) -> bytes:
        """Length of the article body as 2 bytes."""
        return (len(self.data.encode("utf-8")) & 0xFFFF).to_bytes(2, "big")


@dataclass
class NewsArtList:
    """Summary of an article for display in a list view."""

    id: bytes
    time_stamp: bytes = b"\x00" * 8
    parent_id: bytes = b"\x00" * 4
    flags: bytes = b"\x00" * 4
    flavor_count: bytes = b"\x00\x00"
    title: bytes = b""
    poster: bytes = b""
    article_size: bytes = b"\x00\x00"

    def payload(self) -> bytes:
        """Return the wire encoding, with a single text/plain flavor."""
        return b"".join(
            (
                self.id,
                self.time_stamp,
                self.parent_id,
                self.flags,
                b"\x00\x01",
                _u8_len(self.title),
                self.title,
                _u8_len(self.poster),
                self.poster,
                _FLAVOR,
                self.article_size,
            )
        )


@dataclass
class NewsArtListData:
    """A list of article summaries for one category."""

    id: bytes = b"\x00" * 4
    name: bytes = b""
    description: bytes = b""
    news_art_list: bytes = b""
    count: int = 0

    def payload(self) -> bytes:
        return b"".join(
            (
                self.id,
                (self.count & 0xFFFFFFFF).to_bytes(4, "big"),
                _u8_len(self.name),
                self.name,
                _u8_len(self.description),
                self.description,
                self.news_art_list,
            )
        )


@dataclass
class NewsCategoryListData15:
    """A news bundle (type 2) or category (type 3)."""

    type: bytes = NEWS_BUNDLE
    name: str = ""
    articles: dict[int, NewsArtData] = field(default_factory=dict)
    sub_cats: dict[str, "NewsCategoryListData15"] = field(default_factory=dict)
    count: bytes = b""
    guid: bytes = b""
    add_sn: bytes = b""
    delete_sn: bytes = b""

    def get_news_art_list_data(self) -> NewsArtListData:
        """Summaries of all articles in the category, ordered by article ID."""
        arts = [
            NewsArtList(
                id=(art_id & 0xFFFFFFFF).to_bytes(4, "big"),
                time_stamp=art.date,
                parent_id=art.parent_art,
                flags=b"\x00" * 4,
                flavor_count=b"\x00\x00",
                title=art.title.encode("utf-8"),
                poster=art.poster.encode("utf-8"),
                article_size=art.data_size(),
            )
            for art_id, art in sorted(self.articles.items())
        ]
        return NewsArtListData(
            id=b"\x00" * 4,
            count=len(arts),
            name=b"",
            description=b"",
            news_art_list=b"".join(art.payload() for art in arts),
        )

    def to_bytes(self) -> bytes:
        """Encode the category; categories carry a freshly generated GUID."""
        count = ((len(self.articles) + len(self.sub_cats)) & 0xFFFF).to_bytes(2, "big")
        parts = [bytes(self.type), count]
        if bytes(self.type) == NEWS_CATEGORY:
            parts += [os.urandom(16), _ADD_SN, _DELETE_SN]
        name = self.name.encode("utf-8")
        parts += [_u8_len(name), name]
        return b"".join(parts)


def read_news_category_list_data(payload: bytes) -> NewsCategoryListData15:
    """Parse a category list entry as received by a client."""
    payload = bytes(payload)
    if len(payload) < 4:
        raise ValueError("news category list data is truncated")
    cat = NewsCategoryListData15(type=payload[0:2], count=payload[2:4])
    if cat.type == NEWS_CATEGORY:
        if len(payload) < 29:
            raise ValueError("news category list data is truncated")
        cat.guid = payload[4:20]
        cat.add_sn = payload[20:24]
        cat.delete_sn = payload[24:28]
        cat.name = payload[29:].decode("utf-8", errors="replace")
    else:
        cat.name = payload[5:].decode("utf-8", errors="replace")
    return cat


def read_news_path(news_path: bytes) -> list[str]:
    """Decode a news path field into its list of names."""
    news_path = bytes(news_path)
    if not news_path:
        return []
    if len(news_path) < 2:
        raise ValueError("news path is truncated")
    count = int.from_bytes(news_path[0:2], "big")
    rest = news_path[2:]
    paths = []
    for _ in range(count):
        if len(rest) < 3:
            raise ValueError("news path is truncated")
        size = rest[2]
        name = rest[3:3 + size]
        if len(name) < size:
            raise ValueError("news path is truncated")
        paths.append(name.decode("utf-8", errors="replace"))
        rest = rest[3 + size:]
    return paths