"""Shared fakes for the scene and overlay facades."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

import pytest

from aviary.core.config import RoomConfig
from aviary.core.runtime import GameRuntime
from aviary.core.scheduler import VirtualScheduler


class FakeEntity:
    def __init__(self, entity_id: str, sound: bool = False) -> None:
        self.entity_id = entity_id
        self.visible = True
        self.clickable = True
        self.material: Dict[str, Any] = {}
        self.text: Optional[str] = None
        self.color: Optional[str] = None
        self.volume = 1.0
        self.sound = sound
        self.plays = 0
        self.stops = 0
        self.fail_audio = False
        self._handlers: List[Callable[[], None]] = []

    def on_click(self, handler: Callable[[], None]) -> None:
        self._handlers.append(handler)

    def click(self) -> None:
        if not self.clickable:
            return
        for handler in list(self._handlers):
            handler()

    def set_clickable(self, clickable: bool) -> None:
        self.clickable = clickable

    def set_visible(self, visible: bool) -> None:
        self.visible = visible

    def set_material_property(self, name: str, value: Any) -> None:
        self.material[name] = value

    def set_text_value(self, value: str) -> None:
        self.text = value

    def set_color(self, value: str) -> None:
        self.color = value

    def has_sound(self) -> bool:
        return self.sound

    def play_sound(self) -> None:
        if self.fail_audio:
            raise RuntimeError("audio engine exploded")
        self.plays += 1

    def stop_sound(self) -> None:
        if self.fail_audio:
            raise RuntimeError("audio engine exploded")
        self.stops += 1

    def set_volume(self, volume: float) -> None:
        self.volume = volume


class FakeScene:
    def __init__(self, config: RoomConfig) -> None:
        ids = config.scene
        self.entities: Dict[str, FakeEntity] = {}
        for entity_id in (ids.key, ids.door, ids.padlock, ids.cage_closed, ids.cage_open, ids.bird, *ids.digits):
            self.entities[entity_id] = FakeEntity(entity_id)
        for entity_id in (ids.sfx_cage, ids.sfx_birds, ids.sfx_key, ids.bgm):
            self.entities[entity_id] = FakeEntity(entity_id, sound=True)
        self.entities[ids.cage_open].visible = False
        self.entities[ids.bird].visible = False
        self.entities[ids.bgm].volume = config.nominal_volume

    def get_entity_by_id(self, entity_id: str) -> Optional[FakeEntity]:
        return self.entities.get(entity_id)


class FakeOverlay:
    def __init__(self, config: RoomConfig) -> None:
        ids = config.overlay
        self.visible: Dict[str, bool] = {
            ids.start_overlay: True,
            ids.start_button: True,
            ids.music_toggle: False,
            ids.key_slot: False,
            ids.win_overlay: False,
        }
        self.text: Dict[str, str] = {ids.music_toggle: config.music_on_label}
        self.styles: Dict[str, Dict[str, str]] = {}
        self.alerts: List[str] = []
        self.buttons: Dict[str, Callable[[], None]] = {}

    def has_element(self, element_id: str) -> bool:
        return element_id in self.visible

    def show(self, element_id: str) -> None:
        self.visible[element_id] = True

    def hide(self, element_id: str) -> None:
        self.visible[element_id] = False

    def set_text(self, element_id: str, value: str) -> None:
        self.text[element_id] = value

    def set_style(self, element_id: str, prop: str, value: str) -> None:
        self.styles.setdefault(element_id, {})[prop] = value

    def bind_click(self, element_id: str, handler: Callable[[], None]) -> bool:
        if element_id not in self.visible:
            return False
        self.buttons[element_id] = handler
        return True

    def press(self, element_id: str) -> None:
        self.buttons[element_id]()

    def blocking_alert(self, message: str) -> None:
        self.alerts.append(message)


@pytest.fixture()
def config() -> RoomConfig:
    return RoomConfig()


@pytest.fixture()
def scene(config: RoomConfig) -> FakeScene:
    return FakeScene(config)


@pytest.fixture()
def overlay(config: RoomConfig) -> FakeOverlay:
    return FakeOverlay(config)


@pytest.fixture()
def scheduler() -> VirtualScheduler:
    return VirtualScheduler()


@pytest.fixture()
def runtime(scene: FakeScene, overlay: FakeOverlay, scheduler: VirtualScheduler, config: RoomConfig) -> GameRuntime:
    rt = GameRuntime(scene=scene, overlay=overlay, scheduler=scheduler, config=config)
    rt.init()
    return rt


@pytest.fixture(scope="session")
def qapp():
    """Offscreen QApplication for the widget tests; skipped when Qt can't load."""
    import os

    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    widgets = pytest.importorskip("PySide6.QtWidgets")
    pytest.importorskip("PySide6.QtMultimedia")
    app = widgets.QApplication.instance() or widgets.QApplication([])
    yield app
