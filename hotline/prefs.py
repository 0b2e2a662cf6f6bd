"""Client preferences and bookmarks, loaded from the client's YAML config."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

import yaml


@dataclass
class Bookmark:
    """A saved server address with optional credentials."""

    name: str = ""
    addr: str = ""
    login: str = ""
    password: str = ""

    @classmethod
    def _from_mapping(cls, data: Any) -> "Bookmark":
        if not isinstance(data, Mapping):
            raise ValueError("bookmark must be a mapping")
        return cls(
            name=_text(data.get("Name")),
            addr=_text(data.get("Addr")),
            login=_text(data.get("Login")),
            password=_text(data.get("Password")),
        )


@dataclass
class ClientPrefs:
    """User name, icon, bookmarks, tracker and bell settings."""

    username: str = ""
    icon_id: int = 0
    bookmarks: list[Bookmark] = field(default_factory=list)
    tracker: str = ""
    enable_bell: bool = False

    def icon_bytes(self) -> bytes:
        """The icon ID as a 2 byte big-endian value."""
        return (self.icon_id & 0xFFFF).to_bytes(2, "big")

    def add_bookmark(self, name: str, addr: str, login: str, password: str) -> None:
        """Append a bookmark for addr with the given credentials."""
        self.bookmarks.append(Bookmark(addr=addr, login=login, password=password))

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Any]) -> "ClientPrefs":
        raw_bookmarks = data.get("Bookmarks")
        if raw_bookmarks is None:
            raw_bookmarks = []
        if not isinstance(raw_bookmarks, list):
            raise ValueError("Bookmarks must be a list")

        icon_id = data.get("IconID")
        if icon_id is None:
            icon_id = 0
        if isinstance(icon_id, bool) or not isinstance(icon_id, int):
            raise ValueError("IconID must be an integer")

        enable_bell = data.get("EnableBell")
        if enable_bell is None:
            enable_bell = False
        if not isinstance(enable_bell, bool):
            raise ValueError("EnableBell must be a boolean")

        return cls(
            username=_text(data.get("Username")),
            icon_id=icon_id,
            bookmarks=[Bookmark._from_mapping(item) for item in raw_bookmarks],
            tracker=_text(data.get("Tracker")),
            enable_bell=enable_bell,
        )


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def read_client_prefs(path: str) -> ClientPrefs:
    """Load client preferences from the YAML file at path.

    Raises OSError if the file cannot be opened and ValueError if it is
    empty or not a valid preferences document.
    """
    with open(path, "r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise ValueError(f"invalid config file {path}: {exc}") from exc

    if data is None:
        raise ValueError(f"config file {path} is empty")
    if not isinstance(data, Mapping):
        raise ValueError(f"config file {path} must hold a mapping")
    return ClientPrefs._from_mapping(data)