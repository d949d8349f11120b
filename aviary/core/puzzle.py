"""Padlock, key and door transitions for the aviary room."""

from __future__ import annotations

import logging
from typing import List

from aviary.core.config import RoomConfig
from aviary.core.effects import (
    Alert,
    Delay,
    Effect,
    PlayClip,
    SetClickable,
    SetColor,
    SetElementStyle,
    SetMaterialColor,
    SetMaterialOpacity,
    SetTextValue,
    SetVisible,
    ShowElement,
    StopClip,
)
from aviary.core.state import GameState, PuzzlePhase

logger = logging.getLogger(__name__)

LOCKED_MESSAGE = "The door is locked."
OPEN_CAGE_HINT = "You need to open the cage first."
NEED_KEY_HINT = "You need the key from the bird."


def door_locked_message(phase: PuzzlePhase) -> str:
    """Player feedback for a door click without the key."""
    hint = NEED_KEY_HINT if phase is PuzzlePhase.NEEDS_KEY else OPEN_CAGE_HINT
    return f"{LOCKED_MESSAGE} {hint}"


class PuzzleMachine:
    """Validates player clicks against :class:`GameState` and returns effects.

    Every transition mutates the shared state and hands back the list of
    scene/overlay commands the caller should execute. Nothing here touches
    the scene directly, so the whole puzzle can run without a window.
    """

    def __init__(self, state: GameState, config: RoomConfig) -> None:
        self._state = state
        self._config = config

    @property
    def state(self) -> GameState:
        return self._state

    def on_digit_click(self, index: int) -> List[Effect]:
        """Advance one lock digit by one, wrapping 9 back to 0."""
        if self._state.is_padlock_unlocked:
            return []

        code = self._state.current_code
        code[index] = (code[index] + 1) % 10
        effects: List[Effect] = [
            SetTextValue(self._config.scene.digits[index], str(code[index]))
        ]
        effects.extend(self.check_padlock())
        return effects

    def check_padlock(self) -> List[Effect]:
        if self._state.is_padlock_unlocked:
            return []
        if tuple(self._state.current_code) != tuple(self._config.correct_code):
            return []

        logger.info("Padlock unlocked")
        self._state.is_padlock_unlocked = True

        ids = self._config.scene
        effects: List[Effect] = [PlayClip(ids.sfx_cage)]
        effects.extend(SetColor(digit, self._config.solved_color) for digit in ids.digits)
        effects.append(
            Delay(
                self._config.unlock_delay_ms,
                (
                    SetVisible(ids.padlock, False),
                    SetVisible(ids.cage_closed, False),
                    SetVisible(ids.cage_open, True),
                    SetVisible(ids.bird, True),
                    PlayClip(ids.sfx_birds),
                ),
            )
        )
        return effects

    def on_key_click(self) -> List[Effect]:
        # No has_key guard: the key entity stops being clickable after the
        # first pickup.
        if self._config.require_padlock_for_key and not self._state.is_padlock_unlocked:
            logger.info("Key clicked before the cage was opened, ignoring")
            return []

        ids = self._config.scene
        slot = self._config.overlay.key_slot
        self._state.has_key = True
        logger.info("Key collected")
        return [
            PlayClip(ids.sfx_key),
            SetVisible(ids.key, False),
            SetClickable(ids.key, False),
            ShowElement(slot),
            SetElementStyle(slot, "transform", f"scale({self._config.pulse_scale:g})"),
            Delay(self._config.pulse_ms, (SetElementStyle(slot, "transform", "scale(1)"),)),
            SetMaterialColor(ids.door, self._config.door_glow_color),
            SetMaterialOpacity(ids.door, self._config.door_glow_opacity),
        ]

    def on_door_click(self) -> List[Effect]:
        phase = self._state.phase
        if phase is PuzzlePhase.READY:
            logger.info("Door unlocked, player wins")
            return [
                ShowElement(self._config.overlay.win_overlay),
                StopClip(self._config.scene.bgm),
            ]

        message = door_locked_message(phase)
        logger.info("Door click rejected (%s): %s", phase.value, message)
        return [Alert(message)]
