import socket
import threading

import pytest

from longvinter.netmanager import NetworkManager
from longvinter.packet import Packet, PacketQueue, encode_packet
from longvinter.session import NetworkSession
from longvinter.threads import ThreadBase


@pytest.fixture
def wired():
    local, remote = socket.socketpair()
    remote.settimeout(2)
    manager = NetworkManager(lambda name: NetworkSession(name, lambda a, p: local))
    yield manager, remote
    manager.shutdown()
    remote.close()


class SignalThread(ThreadBase):
    def __init__(self):
        super().__init__()
        self.ran = threading.Event()
        self.exited = False
        self.closed = False

    def run(self):
        self.ran.set()
        return 0

    def exit(self):
        self.exited = True

    def close(self):
        self.closed = True


def test_connect_creates_session(wired):
    manager, _ = wired
    assert manager.connect("chat", "127.0.0.1", 7070) is True
    assert manager.check_session("chat")
    assert manager.find_session("chat").name == "chat"


def test_second_connect_fails_while_connected(wired):
    manager, _ = wired
    manager.connect("chat", "127.0.0.1", 7070)
    assert manager.connect("chat", "127.0.0.1", 7070) is False


def test_close(wired):
    manager, _ = wired
    assert manager.close("chat") is False
    manager.connect("chat", "127.0.0.1", 7070)
    assert manager.close("chat") is True
    assert manager.close("chat") is False


def test_send_and_receive(wired):
    manager, remote = wired
    manager.connect("chat", "127.0.0.1", 7070)
    assert manager.send("chat", 0, 4, b"out") is True
    assert remote.recv(4096) == encode_packet(0, 4, b"out")
    remote.sendall(encode_packet(0, 5, b"in"))
    assert manager.receive("chat") == Packet(0, 5, b"in")


def test_missing_session_operations():
    manager = NetworkManager()
    assert manager.send("none", 0, 0, b"") is False
    assert manager.receive("none") is None
    assert manager.find_session("none") is None
    assert manager.remove_session("none") is False


def test_remove_session(wired):
    manager, _ = wired
    manager.connect("chat", "127.0.0.1", 7070)
    session = manager.find_session("chat")
    assert manager.remove_session("chat") is True
    assert not manager.check_session("chat")
    assert not session.is_connected


def test_packet_queues():
    manager = NetworkManager()
    assert manager.create_packet_queue("q") is True
    assert manager.create_packet_queue("q") is False
    queue = manager.find_packet_queue("q")
    assert isinstance(queue, PacketQueue)
    assert manager.find_packet_queue("other") is None


def test_thread_created_suspended_then_resumed():
    manager = NetworkManager()
    action = manager.create_thread("worker", SignalThread)
    assert action.name == "worker"
    assert manager.create_thread("worker", SignalThread) is None
    assert not action.ran.wait(0.05)
    assert manager.suspend_thread("worker", False) is True
    assert action.ran.wait(2)


def test_remove_thread():
    manager = NetworkManager()
    action = manager.create_thread("worker", SignalThread)
    manager.suspend_thread("worker", False)
    assert manager.remove_thread("worker") is True
    assert action.exited and action.closed
    assert manager.remove_thread("worker") is False
    assert manager.suspend_thread("worker", True) is False


def test_shutdown_closes_everything(wired):
    manager, _ = wired
    manager.connect("chat", "127.0.0.1", 7070)
    session = manager.find_session("chat")
    action = manager.create_thread("worker", SignalThread)
    manager.create_packet_queue("q")
    manager.shutdown()
    assert not session.is_connected
    assert action.exited and action.closed
    assert manager.find_packet_queue("q") is None
    assert not manager.check_session("chat")