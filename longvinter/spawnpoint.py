"""A point in the world that spawns an actor and respawns it after it ends."""

from __future__ import annotations

from functools import partial
from typing import Any, Callable

from .runtime import TimerHandle, TimerManager

Vector = tuple[float, float, float]
SpawnFactory = Callable[[Vector, Vector], Any]


class SpawnPoint:
    """Spawns one actor on the server and a replacement each time one ends."""

    def __init__(
        self,
        spawn_class: SpawnFactory | None,
        spawn_interval: float = 0.0,
        timers: TimerManager | None = None,
        location: Vector = (0.0, 0.0, 0.0),
        rotation: Vector = (0.0, 0.0, 0.0),
    ) -> None:
        self.spawn_class = spawn_class
        self.spawn_interval = spawn_interval
        self.timers = timers if timers is not None else TimerManager()
        self.location = location
        self.rotation = rotation
        self.spawned: list[Any] = []
        self.once_check = False
        self._is_server = False

    def tick(self, is_server: bool) -> Any:
        """Spawn the first actor the first time this runs on a server."""
        self._is_server = is_server
        if self.once_check or not is_server:
            return None
        self.once_check = True
        return self.spawn()

    def spawn(self) -> Any:
        """Create an actor at this point; None if there is nothing to spawn."""
        if self.spawn_class is None:
            return None
        actor = self.spawn_class(self.location, self.rotation)
        self.spawned.append(actor)
        return actor

    def on_spawned_end(self, actor: Any) -> TimerHandle:
        """Schedule a replacement for an actor that has ended."""
        handle = TimerHandle()
        self.timers.set_timer(handle, partial(self._on_timer_expired, actor), self.spawn_interval)
        return handle

    def _on_timer_expired(self, actor: Any) -> None:
        if self._is_server:
            self.once_check = True
            self.spawn()