"""Server side of the TRTP connection handshake."""

from __future__ import annotations

from typing import BinaryIO

TRTP = b"TRTP"
HANDSHAKE_LEN = 12
SERVER_HANDSHAKE_REPLY = TRTP + b"\x00\x00\x00\x00"


class HandshakeError(Exception):
    """Raised when a client handshake is incomplete or invalid."""


def _read_exactly(stream: BinaryIO, size: int) -> bytes:
    buf = bytearray()
    while len(buf) < size:
        chunk = stream.read(size - len(buf))
        if not chunk:
            raise HandshakeError("unexpected end of stream during handshake")
        buf += chunk
    return bytes(buf)


def handshake(stream: BinaryIO) -> None:
    """Read a client handshake from stream and reply with success.

    The client sends protocol ID "TRTP", a 4 byte sub-protocol, a 2 byte
    version and a 2 byte sub-version; the server answers "TRTP" followed by
    a zero error code.
    """
    data = _read_exactly(stream, HANDSHAKE_LEN)
    if data[:4] != TRTP:
        raise HandshakeError("invalid handshake")
    stream.write(SERVER_HANDSHAKE_REPLY)
    flush = getattr(stream, "flush", None)
    if flush is not None:
        flush()