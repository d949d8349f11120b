"""Mutable per-session puzzle state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class PuzzlePhase(Enum):
    """Where the player stands relative to the door."""

    LOCKED = "locked"
    NEEDS_KEY = "needs_key"
    READY = "ready"


@dataclass
class GameState:
    """Flags and lock digits for one play session.

    ``has_started``, ``has_key`` and ``is_padlock_unlocked`` only ever go from
    False to True. ``is_muted`` is a free toggle. A fresh session needs a new
    instance; there is no reset.
    """

    has_started: bool = False
    is_muted: bool = False
    has_key: bool = False
    is_padlock_unlocked: bool = False
    current_code: List[int] = field(default_factory=lambda: [0, 0, 0])

    @classmethod
    def for_code_length(cls, length: int) -> "GameState":
        return cls(current_code=[0] * length)

    @property
    def phase(self) -> PuzzlePhase:
        if self.has_key:
            return PuzzlePhase.READY
        if self.is_padlock_unlocked:
            return PuzzlePhase.NEEDS_KEY
        return PuzzlePhase.LOCKED
