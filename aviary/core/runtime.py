"""Owns the session state and runs controller effects against the scene."""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable, Dict, Iterable, Optional

from aviary.core.audio import AudioMuteController
from aviary.core.config import RoomConfig
from aviary.core.effects import (
    Alert,
    Delay,
    Effect,
    HideElement,
    PlayClip,
    SetClickable,
    SetColor,
    SetElementStyle,
    SetElementText,
    SetMaterialColor,
    SetMaterialOpacity,
    SetTextValue,
    SetVisible,
    SetVolume,
    ShowElement,
    StopClip,
)
from aviary.core.experience import ExperienceController
from aviary.core.facade import EntityHandle, OverlayFacade, SceneFacade
from aviary.core.puzzle import PuzzleMachine
from aviary.core.scheduler import Scheduler
from aviary.core.state import GameState

logger = logging.getLogger(__name__)


class GameRuntime:
    """Glue between click events, the controllers and the facades.

    Missing entities or overlay elements are logged once in :meth:`init` and
    the feature that depends on them stays unwired. Audio calls are guarded
    one by one so a failing sound never stops the game.
    """

    def __init__(
        self,
        scene: SceneFacade,
        overlay: OverlayFacade,
        scheduler: Scheduler,
        config: Optional[RoomConfig] = None,
        state: Optional[GameState] = None,
    ) -> None:
        self._scene = scene
        self._overlay = overlay
        self._scheduler = scheduler
        self._config = config or RoomConfig()
        self._state = state or GameState.for_code_length(len(self._config.correct_code))
        self.puzzle = PuzzleMachine(self._state, self._config)
        self.experience = ExperienceController(self._state, self._config)
        self.audio = AudioMuteController(self._state, self._config)
        self._initialized = False
        self._handlers: Dict[type, Callable] = {
            SetVisible: lambda e: self._entity_call(e.entity_id, lambda h: h.set_visible(e.visible)),
            SetClickable: lambda e: self._entity_call(e.entity_id, lambda h: h.set_clickable(e.clickable)),
            SetMaterialColor: lambda e: self._entity_call(
                e.entity_id, lambda h: h.set_material_property("color", e.color)
            ),
            SetMaterialOpacity: lambda e: self._entity_call(
                e.entity_id, lambda h: h.set_material_property("opacity", e.opacity)
            ),
            SetTextValue: lambda e: self._entity_call(e.entity_id, lambda h: h.set_text_value(e.value)),
            SetColor: lambda e: self._entity_call(e.entity_id, lambda h: h.set_color(e.color)),
            PlayClip: lambda e: self._sound_call(e.entity_id, "play", lambda h: h.play_sound()),
            StopClip: lambda e: self._sound_call(e.entity_id, "stop", lambda h: h.stop_sound()),
            SetVolume: lambda e: self._sound_call(e.entity_id, "set volume on", lambda h: h.set_volume(e.volume)),
            ShowElement: lambda e: self._overlay_call(e.element_id, lambda: self._overlay.show(e.element_id)),
            HideElement: lambda e: self._overlay_call(e.element_id, lambda: self._overlay.hide(e.element_id)),
            SetElementText: lambda e: self._overlay_call(
                e.element_id, lambda: self._overlay.set_text(e.element_id, e.text)
            ),
            SetElementStyle: lambda e: self._overlay_call(
                e.element_id, lambda: self._overlay.set_style(e.element_id, e.prop, e.value)
            ),
            Alert: lambda e: self._overlay.blocking_alert(e.message),
            Delay: self._schedule,
        }

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def config(self) -> RoomConfig:
        return self._config

    def init(self) -> None:
        """Wire click handlers. Call once the scene reports it has loaded."""
        if self._initialized:
            logger.warning("Runtime already initialized")
            return
        self._initialized = True
        ids = self._config.scene
        overlay_ids = self._config.overlay

        key = self._require(ids.key, "Key entity")
        if key is not None:
            key.on_click(self.handle_key_click)

        for index, digit_id in enumerate(ids.digits):
            digit = self._require(digit_id, f"Padlock digit {index + 1}")
            if digit is not None:
                digit.on_click(partial(self.handle_digit_click, index))

        door = self._require(ids.door, "Door collider")
        if door is not None:
            door.on_click(self.handle_door_click)

        for entity_id in (ids.padlock, ids.cage_closed, ids.cage_open, ids.bird):
            self._require(entity_id, "Scene entity")

        bgm = self._require(ids.bgm, "Background music entity")
        if bgm is not None and not bgm.has_sound():
            logger.error("Sound not available on %s, music controls disabled", ids.bgm)

        if not self._overlay.bind_click(overlay_ids.start_button, self.start_experience):
            logger.warning("Start button (%s) not found", overlay_ids.start_button)
        if not self._overlay.bind_click(overlay_ids.music_toggle, self.toggle_mute):
            logger.warning("Music toggle (%s) not found", overlay_ids.music_toggle)

        logger.info("Game logic initialized")

    def schedule_auto_start(self) -> None:
        self._scheduler.call_later(self._config.auto_start_delay_ms, self.auto_start)

    # -- event entry points -------------------------------------------------

    def handle_digit_click(self, index: int) -> None:
        self.apply(self.puzzle.on_digit_click(index))

    def handle_key_click(self) -> None:
        logger.debug("Key clicked")
        self.apply(self.puzzle.on_key_click())

    def handle_door_click(self) -> None:
        logger.debug("Door clicked")
        self.apply(self.puzzle.on_door_click())

    def start_experience(self) -> None:
        self.apply(self.experience.start_experience())

    def auto_start(self) -> None:
        self.apply(self.experience.auto_start())

    def toggle_mute(self) -> None:
        self.apply(self.audio.toggle_mute(self.ambient_available()))

    def ambient_available(self) -> bool:
        bgm = self._scene.get_entity_by_id(self._config.scene.bgm)
        return bgm is not None and bgm.has_sound()

    # -- effect execution ---------------------------------------------------

    def apply(self, effects: Iterable[Effect]) -> None:
        for effect in effects:
            handler = self._handlers.get(type(effect))
            if handler is None:
                raise TypeError(f"Unsupported effect: {effect!r}")
            handler(effect)

    def _schedule(self, effect: Delay) -> None:
        self._scheduler.call_later(effect.delay_ms, lambda: self.apply(effect.effects))

    def _require(self, entity_id: str, label: str) -> Optional[EntityHandle]:
        handle = self._scene.get_entity_by_id(entity_id)
        if handle is None:
            logger.error("%s (%s) not found", label, entity_id)
        return handle

    def _entity_call(self, entity_id: str, action: Callable[[EntityHandle], None]) -> None:
        handle = self._scene.get_entity_by_id(entity_id)
        if handle is None:
            logger.debug("Skipping effect on missing entity %s", entity_id)
            return
        action(handle)

    def _sound_call(self, entity_id: str, verb: str, action: Callable[[EntityHandle], None]) -> None:
        handle = self._scene.get_entity_by_id(entity_id)
        if handle is None or not handle.has_sound():
            logger.debug("No sound on %s, cannot %s it", entity_id, verb)
            return
        try:
            action(handle)
        except Exception:
            logger.exception("Failed to %s sound %s", verb, entity_id)

    def _overlay_call(self, element_id: str, action: Callable[[], None]) -> None:
        if not self._overlay.has_element(element_id):
            logger.debug("Skipping effect on missing element %s", element_id)
            return
        action()
