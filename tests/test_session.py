import socket

import pytest

from longvinter.packet import Packet, encode_packet
from longvinter.session import NetworkSession


@pytest.fixture
def pair():
    local, remote = socket.socketpair()
    remote.settimeout(2)
    session = NetworkSession("chat", connector=lambda address, port: local)
    yield session, remote
    session.close()
    remote.close()


def test_connect_sets_connected(pair):
    session, _ = pair
    assert session.connect("127.0.0.1", 7070) is True
    assert session.is_connected
    assert session.name == "chat"


def test_failed_connect():
    def refuse(address, port):
        raise ConnectionRefusedError("refused")

    session = NetworkSession("x", connector=refuse)
    assert session.connect("127.0.0.1", 1) is False
    assert not session.is_connected


def test_send_writes_framed_packet(pair):
    session, remote = pair
    session.connect("127.0.0.1", 7070)
    assert session.send(0, 7, b"hi") is True
    assert remote.recv(4096) == encode_packet(0, 7, b"hi")


def test_receive_reads_framed_packet(pair):
    session, remote = pair
    session.connect("127.0.0.1", 7070)
    remote.sendall(encode_packet(0, 9, b"payload"))
    assert session.receive() == Packet(0, 9, b"payload")


def test_receive_after_peer_closed(pair):
    session, remote = pair
    session.connect("127.0.0.1", 7070)
    remote.close()
    assert session.receive() is None


def test_not_connected_session_fails():
    session = NetworkSession("idle")
    assert session.receive() is None
    assert session.send(0, 0, b"x") is False


def test_close_disconnects(pair):
    session, _ = pair
    session.connect("127.0.0.1", 7070)
    session.close()
    assert not session.is_connected
    assert session.send(0, 0, b"x") is False
    session.close()
    assert not session.is_connected


def test_context_manager_closes(pair):
    session, _ = pair
    with session as active:
        active.connect("127.0.0.1", 7070)
        assert active.is_connected
    assert not session.is_connected