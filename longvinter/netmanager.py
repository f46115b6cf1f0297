"""Registry of named sessions, packet queues and worker threads."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Callable, TypeVar

from .packet import Packet, PacketQueue
from .session import NetworkSession
from .threads import ThreadBase

ThreadT = TypeVar("ThreadT", bound=ThreadBase)

_JOIN_TIMEOUT = 1.0


@dataclass
class _ThreadInfo:
    action: ThreadBase
    thread: threading.Thread
    resumed: threading.Event = field(default_factory=threading.Event)

    def start_if_resumed(self) -> None:
        if self.resumed.is_set() and not self.thread.is_alive() and self.thread.ident is None:
            self.thread.start()

    def join(self) -> None:
        if self.thread.ident is not None:
            self.thread.join(_JOIN_TIMEOUT)


class NetworkManager:
    """Creates, finds and removes sessions, packet queues and threads by name."""

    def __init__(
        self, session_factory: Callable[[str], NetworkSession] = NetworkSession
    ) -> None:
        self._session_factory = session_factory
        self._sessions: dict[str, NetworkSession] = {}
        self._threads: dict[str, _ThreadInfo] = {}
        self._queues: dict[str, PacketQueue] = {}

    def check_session(self, name: str) -> bool:
        return name in self._sessions

    def connect(self, name: str, address: str, port: int) -> bool:
        """Connect the named session, creating it if needed; False if already connected."""
        session = self._sessions.get(name)
        if session is None:
            session = self._session_factory(name)
            self._sessions[name] = session
        if session.is_connected:
            return False
        return session.connect(address, port)

    def close(self, name: str) -> bool:
        """Close the named session; False if it is missing or not connected."""
        session = self._sessions.get(name)
        if session is None or not session.is_connected:
            return False
        session.close()
        return True

    def receive(self, name: str) -> Packet | None:
        session = self._sessions.get(name)
        if session is None or not session.is_connected:
            return None
        return session.receive()

    def send(self, name: str, header: int, player_id: int, payload: bytes) -> bool:
        session = self._sessions.get(name)
        if session is None or not session.is_connected:
            return False
        return session.send(header, player_id, payload)

    def find_session(self, name: str) -> NetworkSession | None:
        return self._sessions.get(name)

    def remove_session(self, name: str) -> bool:
        """Close and forget the named session; False if there was none."""
        session = self._sessions.pop(name, None)
        if session is None:
            return False
        session.close()
        return True

    def create_packet_queue(self, name: str) -> bool:
        """Create a queue under the name; False if one already exists."""
        if name in self._queues:
            return False
        self._queues[name] = PacketQueue()
        return True

    def find_packet_queue(self, name: str) -> PacketQueue | None:
        return self._queues.get(name)

    def create_thread(self, name: str, factory: Callable[[], ThreadT]) -> ThreadT | None:
        """Create a suspended thread running factory()'s work; None if the name is taken."""
        if name in self._threads:
            return None
        action = factory()
        action.name = name
        info = _ThreadInfo(action, threading.Thread(name=name, daemon=True))
        info.thread = threading.Thread(
            target=self._run_when_resumed, args=(info,), name=name, daemon=True
        )
        self._threads[name] = info
        return action

    @staticmethod
    def _run_when_resumed(info: _ThreadInfo) -> None:
        info.resumed.wait()
        info.action.run()

    def suspend_thread(self, name: str, pause: bool) -> bool:
        """Pause or resume the named thread; a pause holds back only work not yet begun."""
        info = self._threads.get(name)
        if info is None:
            return False
        if pause:
            info.resumed.clear()
        else:
            info.resumed.set()
            info.start_if_resumed()
        return True

    def remove_thread(self, name: str) -> bool:
        """End, wait for and forget the named thread; False if there was none."""
        info = self._threads.pop(name, None)
        if info is None:
            return False
        info.action.exit()
        info.join()
        info.action.close()
        return True

    def shutdown(self) -> None:
        """End every thread, close every session and drop all queues."""
        for info in self._threads.values():
            info.action.exit()
        for session in self._sessions.values():
            session.close()
        for info in self._threads.values():
            info.join()
            info.action.close()
        self._threads.clear()
        self._sessions.clear()
        self._queues.clear()

    def __enter__(self) -> NetworkManager:
        return self

    def __exit__(self, *exc: object) -> None:
        self.shutdown()