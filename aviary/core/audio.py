from __future__ import annotations

import logging
from typing import List

from aviary.core.config import RoomConfig
from aviary.core.effects import Effect, SetElementText, SetVolume
from aviary.core.state import GameState

logger = logging.getLogger(__name__)


class AudioMuteController:
    """Mutes and restores the ambient track. Independent of puzzle progress."""

    def __init__(self, state: GameState, config: RoomConfig) -> None:
        self._state = state
        self._config = config

    def toggle_mute(self, ambient_available: bool = True) -> List[Effect]:
        if not ambient_available:
            logger.error("Cannot toggle music: ambient sound not available")
            return []

        self._state.is_muted = not self._state.is_muted
        bgm = self._config.scene.bgm
        toggle = self._config.overlay.music_toggle
        if self._state.is_muted:
            logger.info("Background music muted")
            return [SetVolume(bgm, 0.0), SetElementText(toggle, self._config.music_off_label)]

        logger.info("Background music unmuted")
        return [
            SetVolume(bgm, self._config.nominal_volume),
            SetElementText(toggle, self._config.music_on_label),
        ]
