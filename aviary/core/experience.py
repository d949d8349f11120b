from __future__ import annotations

import logging
from typing import List

from aviary.core.config import RoomConfig
from aviary.core.effects import Effect, HideElement, PlayClip, ShowElement
from aviary.core.state import GameState

logger = logging.getLogger(__name__)


class ExperienceController:
    """One-shot transition from the intro overlay into the room.

    The start button and the fallback timer both land here; whichever runs
    second sees ``has_started`` and does nothing.
    """

    def __init__(self, state: GameState, config: RoomConfig) -> None:
        self._state = state
        self._config = config

    def start_experience(self, trigger: str = "manual") -> List[Effect]:
        if self._state.has_started:
            logger.info("Experience already started, skipping (%s)", trigger)
            return []

        logger.info("Starting experience (%s)", trigger)
        self._state.has_started = True
        return [
            PlayClip(self._config.scene.bgm),
            HideElement(self._config.overlay.start_overlay),
            ShowElement(self._config.overlay.music_toggle),
        ]

    def auto_start(self) -> List[Effect]:
        if self._state.has_started:
            return []
        logger.info(
            "Auto-starting experience after %g seconds",
            self._config.auto_start_delay_ms / 1000,
        )
        return self.start_experience("timeout")
