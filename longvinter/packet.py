"""Packet framing, a byte cursor over a packet buffer, and a bounded packet queue."""

from __future__ import annotations

import struct
import threading
from collections import deque
from dataclasses import dataclass

from .gameinfo import PACKET_SIZE

_HEADER = struct.Struct("<iii")
HEADER_SIZE = _HEADER.size
QUEUE_CAPACITY = 200


class PacketStream:
    """A cursor that writes bytes into, or reads bytes out of, a packet buffer."""

    def __init__(
        self,
        buffer: bytes | bytearray | None = None,
        capacity: int = PACKET_SIZE,
    ) -> None:
        self._buffer = bytearray(buffer) if buffer is not None else bytearray()
        self._capacity = capacity
        self.length = 0

    def add_data(self, data: bytes | bytearray) -> None:
        """Write data at the cursor and move past it."""
        end = self.length + len(data)
        if end > self._capacity:
            raise ValueError(
                f"packet overflow: {end} bytes exceed the {self._capacity}-byte buffer"
            )
        self._buffer[self.length:end] = data
        self.length = end

    def get_data(self, size: int) -> bytes:
        """Read size bytes at the cursor and move past them."""
        if size < 0:
            raise ValueError("size must not be negative")
        end = self.length + size
        if end > len(self._buffer):
            raise ValueError(
                f"packet underflow: need {end} bytes, buffer holds {len(self._buffer)}"
            )
        data = bytes(self._buffer[self.length:end])
        self.length = end
        return data

    def getvalue(self) -> bytes:
        """The bytes from the start of the buffer up to the cursor."""
        return bytes(self._buffer[: self.length])


@dataclass(frozen=True)
class Packet:
    """A framed message: its header, the sending player's id and its payload."""

    header: int
    player_id: int
    data: bytes


def encode_packet(header: int, player_id: int, payload: bytes) -> bytes:
    """Frame a payload: header, player id and payload length as little-endian int32s."""
    try:
        prefix = _HEADER.pack(header, player_id, len(payload))
    except struct.error as exc:
        raise ValueError(str(exc)) from None
    stream = PacketStream()
    stream.add_data(prefix)
    stream.add_data(payload)
    return stream.getvalue()


def decode_packet(data: bytes) -> Packet:
    """Parse one framed packet; raises ValueError if the data is malformed."""
    stream = PacketStream(data, capacity=max(len(data), PACKET_SIZE))
    header, player_id, length = _HEADER.unpack(stream.get_data(HEADER_SIZE))
    if length < 0:
        raise ValueError(f"negative payload length {length}")
    return Packet(header, player_id, stream.get_data(length))


class PacketQueue:
    """A thread-safe FIFO of packets that drops new packets once it is full."""

    def __init__(self, capacity: int = QUEUE_CAPACITY) -> None:
        self.capacity = capacity
        self._lock = threading.Lock()
        self._items: deque[Packet] = deque()

    def push(self, header: int, player_id: int, data: bytes) -> bool:
        """Queue a packet; returns False if the queue was full and it was dropped."""
        if len(data) > PACKET_SIZE:
            raise ValueError(f"payload of {len(data)} bytes exceeds {PACKET_SIZE}")
        with self._lock:
            if len(self._items) >= self.capacity:
                return False
            self._items.append(Packet(header, player_id, bytes(data)))
            return True

    def pop(self) -> Packet | None:
        """Take the oldest packet, or None if the queue is empty."""
        with self._lock:
            return self._items.popleft() if self._items else None

    def empty(self) -> bool:
        with self._lock:
            return not self._items

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)