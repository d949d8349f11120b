"""Capabilities the game needs from the scene and the overlay layer."""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol


class EntityHandle(Protocol):
    def on_click(self, handler: Callable[[], None]) -> None: ...

    def set_clickable(self, clickable: bool) -> None: ...

    def set_visible(self, visible: bool) -> None: ...

    def set_material_property(self, name: str, value: Any) -> None: ...

    def set_text_value(self, value: str) -> None: ...

    def set_color(self, value: str) -> None: ...

    def has_sound(self) -> bool: ...

    def play_sound(self) -> None: ...

    def stop_sound(self) -> None: ...

    def set_volume(self, volume: float) -> None: ...


class SceneFacade(Protocol):
    def get_entity_by_id(self, entity_id: str) -> Optional[EntityHandle]: ...


class OverlayFacade(Protocol):
    def has_element(self, element_id: str) -> bool: ...

    def show(self, element_id: str) -> None: ...

    def hide(self, element_id: str) -> None: ...

    def set_text(self, element_id: str, value: str) -> None: ...

    def set_style(self, element_id: str, prop: str, value: str) -> None: ...

    def bind_click(self, element_id: str, handler: Callable[[], None]) -> bool: ...

    def blocking_alert(self, message: str) -> None: ...
