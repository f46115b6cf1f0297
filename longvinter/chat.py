"""Chat client: connects to the chat server and relays messages through events."""

from __future__ import annotations

from .gameinfo import PACKET_SIZE, ChatPacketHeader
from .netmanager import NetworkManager
from .packet import PacketQueue
from .runtime import Event, print_viewport
from .threads import ReceiveThread

SESSION_NAME = "ChatSession"
THREAD_NAME = "ChatReceive"
QUEUE_NAME = "ChatReceive_Queue"
DEFAULT_ADDRESS = "127.0.0.1"
DEFAULT_PORT = 7070
MESSAGE_SHOW_TIME = 30.0


def encode_message(text: str) -> bytes:
    """Encode chat text as UTF-16LE, two bytes per character."""
    data = text.encode("utf-16-le")
    if len(data) > PACKET_SIZE:
        raise ValueError(f"message of {len(data)} bytes exceeds {PACKET_SIZE}")
    return data


def decode_message(payload: bytes) -> str:
    """Decode UTF-16LE chat text, ending at the first NUL character."""
    if len(payload) % 2:
        payload = payload[:-1]
    text = payload.decode("utf-16-le", errors="replace")
    return text.split("\x00", 1)[0]


class ChatClient:
    """Sends chat messages and delivers received ones; does nothing when not local."""

    def __init__(self, manager: NetworkManager | None = None, is_local: bool = True) -> None:
        self.manager = manager if manager is not None else NetworkManager()
        self.is_local = is_local
        self.message_received = Event()
        self.message_sent = Event()
        self._queue: PacketQueue | None = None

    def start(self, address: str = DEFAULT_ADDRESS, port: int = DEFAULT_PORT) -> None:
        """Connect to the chat server and start the receiving thread."""
        if not self.is_local:
            return
        manager = self.manager
        manager.connect(SESSION_NAME, address, port)
        action = manager.create_thread(THREAD_NAME, ReceiveThread)
        if action is not None:
            action.session = manager.find_session(SESSION_NAME)
            queue_name = action.name + "_Queue"
            manager.create_packet_queue(queue_name)
            action.queue = manager.find_packet_queue(queue_name)
        self._queue = manager.find_packet_queue(QUEUE_NAME)
        manager.suspend_thread(THREAD_NAME, False)

    def stop(self) -> None:
        """Disconnect and end the receiving thread."""
        if not self.is_local:
            return
        self.manager.close(SESSION_NAME)
        self.manager.remove_thread(THREAD_NAME)
        self.manager.remove_session(SESSION_NAME)

    def poll(self) -> str | None:
        """Deliver one received message, if any, and return its text."""
        if not self.is_local or self._queue is None:
            return None
        packet = self._queue.pop()
        if packet is None or packet.header != ChatPacketHeader.MSG:
            return None
        text = decode_message(packet.data)
        print_viewport(MESSAGE_SHOW_TIME, "red", text)
        self.message_received.broadcast(text, packet.player_id)
        return text

    def send(self, text: str, player_id: int) -> bool:
        """Send a message to the chat server and announce it; returns whether it was sent."""
        if not self.is_local:
            return False
        sent = self.manager.send(
            SESSION_NAME, ChatPacketHeader.MSG, player_id, encode_message(text)
        )
        self.message_sent.broadcast(text, player_id)
        return sent