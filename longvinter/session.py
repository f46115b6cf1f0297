"""A named TCP session that sends and receives framed packets."""

from __future__ import annotations

import socket
from typing import Any, Callable

from .gameinfo import PACKET_SIZE
from .packet import Packet, decode_packet, encode_packet

Connector = Callable[[str, int], Any]


def _default_connector(address: str, port: int) -> socket.socket:
    return socket.create_connection((address, port))


class NetworkSession:
    """One connection to a server, exchanging one framed packet per read or write."""

    def __init__(self, name: str = "", connector: Connector | None = None) -> None:
        self.name = name
        self._connector = connector or _default_connector
        self._socket: Any = None
        self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected

    def connect(self, address: str, port: int) -> bool:
        """Open the connection; returns whether it succeeded."""
        self.close()
        try:
            self._socket = self._connector(address, port)
        except OSError:
            self._socket = None
            self._connected = False
        else:
            self._connected = True
        return self._connected

    def close(self) -> None:
        """Close the connection if it is open."""
        if not self._connected:
            return
        sock, self._socket = self._socket, None
        self._connected = False
        shutdown = getattr(sock, "shutdown", None)
        if shutdown is not None:
            try:
                shutdown(socket.SHUT_RDWR)
            except OSError:
                pass
        sock.close()

    def receive(self) -> Packet | None:
        """Read one packet; None if not connected, the peer closed, or the read failed."""
        if not self._connected:
            return None
        try:
            data = self._socket.recv(PACKET_SIZE)
        except (OSError, AttributeError):
            return None
        if not data:
            return None
        try:
            return decode_packet(data)
        except ValueError:
            return None

    def send(self, header: int, player_id: int, payload: bytes) -> bool:
        """Send one packet; returns False if not connected or the write failed."""
        if not self._connected:
            return False
        data = encode_packet(header, player_id, payload)
        try:
            self._socket.sendall(data)
        except OSError:
            return False
        return True

    def __enter__(self) -> NetworkSession:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()