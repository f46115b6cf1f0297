"""Event, timer and on-screen message primitives shared by the game components."""

from __future__ import annotations

import itertools
import sys
from dataclasses import dataclass
from typing import Any, Callable

_handle_ids = itertools.count(1)


class Event:
    """A multicast event: each broadcast reaches every registered callback in order."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[..., Any]] = []

    def add(self, callback: Callable[..., Any]) -> Callable[..., Any]:
        """Register a callback and return it."""
        self._callbacks.append(callback)
        return callback

    def remove(self, callback: Callable[..., Any]) -> None:
        """Unregister a callback; raises ValueError if it was never added."""
        try:
            self._callbacks.remove(callback)
        except ValueError:
            raise ValueError("callback is not registered") from None

    def broadcast(self, *args: Any) -> None:
        """Call every registered callback with the given arguments."""
        for callback in list(self._callbacks):
            callback(*args)

    def __len__(self) -> int:
        return len(self._callbacks)


class TimerHandle:
    """Identifies a timer set on a TimerManager."""

    __slots__ = ("_id",)

    def __init__(self) -> None:
        self._id: int | None = None

    def is_valid(self) -> bool:
        """True once a timer has been set through this handle and not invalidated."""
        return self._id is not None

    def invalidate(self) -> None:
        """Detach the handle from any timer."""
        self._id = None

    def __repr__(self) -> str:
        return f"TimerHandle(id={self._id})"


@dataclass
class _Timer:
    callback: Callable[[], Any]
    rate: float
    loop: bool
    elapsed: float = 0.0


class TimerManager:
    """Runs callbacks after simulated time has passed; time moves only through advance()."""

    def __init__(self) -> None:
        self._timers: dict[int, _Timer] = {}

    def set_timer(
        self,
        handle: TimerHandle,
        callback: Callable[[], Any],
        rate: float,
        loop: bool = False,
    ) -> TimerHandle:
        """Start a timer on the handle, replacing any timer it held.

        A rate of zero or less only clears the handle.
        """
        self.clear_timer(handle)
        if rate <= 0:
            return handle
        handle._id = next(_handle_ids)
        self._timers[handle._id] = _Timer(callback, float(rate), bool(loop))
        return handle

    def clear_timer(self, handle: TimerHandle) -> None:
        """Stop the handle's timer, if any, and invalidate the handle."""
        if handle._id is not None:
            self._timers.pop(handle._id, None)
        handle.invalidate()

    def is_active(self, handle: TimerHandle) -> bool:
        """True while the handle's timer is still waiting to fire."""
        return handle._id is not None and handle._id in self._timers

    def elapsed(self, handle: TimerHandle) -> float | None:
        """Time since the timer was set (or last looped), or None if it is not active."""
        if handle._id is None:
            return None
        timer = self._timers.get(handle._id)
        return None if timer is None else timer.elapsed

    def advance(self, delta: float) -> None:
        """Move time forward and fire every timer that comes due."""
        if delta < 0:
            raise ValueError("time cannot move backwards")
        for key, timer in list(self._timers.items()):
            if self._timers.get(key) is not timer:
                continue
            timer.elapsed += delta
            while self._timers.get(key) is timer and timer.elapsed >= timer.rate:
                if timer.loop:
                    timer.elapsed -= timer.rate
                else:
                    del self._timers[key]
                timer.callback()


@dataclass(frozen=True)
class ViewportMessage:
    """A debug message shown on screen for a number of seconds."""

    time: float
    color: Any
    text: str


def print_viewport(time: float, color: Any, text: str) -> ViewportMessage:
    """Show a debug message on the console and return it."""
    message = ViewportMessage(float(time), color, text)
    print(f"[{message.color}] {message.text}", file=sys.stderr)
    return message