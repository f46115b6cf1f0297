"""Worker bodies run by the network manager's threads."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .packet import PacketQueue
    from .session import NetworkSession

_IDLE_WAIT = 0.01


class ThreadBase:
    """The work a managed thread runs; loops while `loop` stays true."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.loop = True

    def run(self) -> int:
        """The thread's work; returns its exit code."""
        return 0

    def stop(self) -> None:
        """Called when the thread is asked to stop early."""

    def exit(self) -> None:
        """Ask the work to finish."""

    def close(self) -> None:
        """Release what the work holds once its thread has ended."""


class ReceiveThread(ThreadBase):
    """Reads packets from a session and pushes them onto a packet queue."""

    def __init__(
        self,
        name: str = "",
        session: NetworkSession | None = None,
        queue: PacketQueue | None = None,
    ) -> None:
        super().__init__(name)
        self.session = session
        self.queue = queue

    def run(self) -> int:
        """Receive until the session fails or the loop is ended."""
        while True:
            if self.session is not None:
                packet = self.session.receive()
                if packet is None:
                    return 0
                if self.queue is None:
                    raise RuntimeError("receive thread has no packet queue")
                self.queue.push(packet.header, packet.player_id, packet.data)
            elif self.loop:
                time.sleep(_IDLE_WAIT)
            if not self.loop:
                return 0

    def exit(self) -> None:
        self.loop = False

    def close(self) -> None:
        if self.queue is not None:
            self.queue.clear()