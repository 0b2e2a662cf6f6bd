import io

import pytest

from hotline.handshake import HandshakeError, handshake


class _Duplex:
    def __init__(self, incoming: bytes):
        self.incoming = io.BytesIO(incoming)
        self.outgoing = io.BytesIO()

    def read(self, size=-1):
        return self.incoming.read(size)

    def write(self, data):
        return self.outgoing.write(data)


class _Trickle(_Duplex):
    def read(self, size=-1):
        return self.incoming.read(min(size, 1))


CLIENT_HANDSHAKE = bytes(
    [0x54, 0x52, 0x54, 0x50, 0x48, 0x4F, 0x54, 0x4C, 0x00, 0x01, 0x00, 0x02]
)


def test_valid_handshake_gets_success_reply():
    stream = _Duplex(CLIENT_HANDSHAKE)
    handshake(stream)
    assert stream.outgoing.getvalue() == bytes([84, 82, 84, 80, 0, 0, 0, 0])


def test_handshake_read_in_small_pieces():
    stream = _Trickle(CLIENT_HANDSHAKE)
    handshake(stream)
    assert stream.outgoing.getvalue() == bytes([84, 82, 84, 80, 0, 0, 0, 0])


def test_invalid_protocol_is_rejected():
    stream = _Duplex(b"XXXX" + CLIENT_HANDSHAKE[4:])
    with pytest.raises(HandshakeError, match="invalid handshake"):
        handshake(stream)
    assert stream.outgoing.getvalue() == b""


def test_short_handshake_is_rejected():
    stream = _Duplex(CLIENT_HANDSHAKE[:6])
    with pytest.raises(HandshakeError):
        handshake(stream)
    assert stream.outgoing.getvalue() == b""