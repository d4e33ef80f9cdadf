"""Game state: spawning, falling, catching and the countdown."""

from __future__ import annotations

import random
import time
from typing import Callable, Optional

from .character import GAME_HEIGHT, GAME_WIDTH, FallingObject, Player, Shape

MAX_FALLING_OBJECTS = 20
GAME_TIME_LIMIT = 120
SPAWN_INTERVAL = 20
INITIAL_OBJECTS = 5

__all__ = [
    "GAME_WIDTH",
    "GAME_HEIGHT",
    "MAX_FALLING_OBJECTS",
    "GAME_TIME_LIMIT",
    "SPAWN_INTERVAL",
    "INITIAL_OBJECTS",
    "GameState",
]


class GameState:
    """Everything that changes while a round is being played.

    ``objects`` is a fixed list of slots; an empty slot holds ``None``.
    ``clock`` returns seconds as a float and drives the countdown.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock if clock is not None else time.monotonic
        self.reset()

    def reset(self) -> None:
        """Start a fresh round with a few shapes already in the air."""
        self.player = Player()
        self.objects: list[Optional[FallingObject]] = [None] * MAX_FALLING_OBJECTS
        self.score = 0
        self.frame_count = 0
        self.game_over = False
        self.start_time = self.clock()
        self.time_remaining = GAME_TIME_LIMIT
        for _ in range(INITIAL_OBJECTS):
            self.spawn_new_object()

    def active_objects(self) -> int:
        """Number of occupied slots."""
        return sum(obj is not None for obj in self.objects)

    def update(self) -> None:
        """Advance one frame."""
        self.frame_count += 1

        elapsed = int(self.clock() - self.start_time)
        self.time_remaining = GAME_TIME_LIMIT - elapsed
        if self.time_remaining <= 0:
            self.time_remaining = 0
            self.game_over = True
            return

        if self.frame_count % SPAWN_INTERVAL == 0:
            self.spawn_new_object()

        for index, obj in enumerate(self.objects):
            if obj is None or self.frame_count % obj.speed:
                continue
            obj.y += 1
            if obj.y >= GAME_HEIGHT:
                self.objects[index] = None

        self.check_collisions()

    def check_collisions(self) -> None:
        """Collect every shape touching the player's triangle."""
        px, py = self.player.x, self.player.y
        for index, obj in enumerate(self.objects):
            if obj is not None and obj.y == py and px - 1 <= obj.x <= px + 1:
                self.score += obj.points
                self.objects[index] = None

    def spawn_new_object(self) -> Optional[FallingObject]:
        """Put a random shape into the first free slot; return it, or None if full."""
        try:
            index = self.objects.index(None)
        except ValueError:
            return None
        shape = Shape(self.rng.randrange(5))
        speed = self.rng.randrange(3) + 1
        x = self.rng.randrange(GAME_WIDTH - 2) + 1
        obj = FallingObject(shape=shape, x=x, y=0, speed=speed)
        self.objects[index] = obj
        return obj