"""Qt stand-ins for the clickable scene entities and their sounds."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from PySide6.QtCore import Qt, QTimer, QUrl, Signal
from PySide6.QtGui import QMouseEvent
from PySide6.QtMultimedia import QSoundEffect
from PySide6.QtWidgets import QLabel, QWidget

from aviary.ui.colors import RoomColors, blend_hex, hex_to_rgba

logger = logging.getLogger(__name__)


class SceneEntityWidget(QLabel):
    """A label that behaves like a clickable scene entity with a material."""

    clicked = Signal()

    def __init__(self, entity_id: str, text: str = "", parent: Optional[QWidget] = None) -> None:
        super().__init__(text, parent)
        self.setObjectName(entity_id)
        self.setAlignment(Qt.AlignCenter)
        self._clickable = True
        self._hovered = False
        self._material: Dict[str, Any] = {"color": "#ffffff", "opacity": 0.0}
        self._text_color = RoomColors.TEXT_PRIMARY
        self._font_px = 14
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self._restyle()

    @property
    def clickable(self) -> bool:
        return self._clickable

    def set_clickable(self, clickable: bool) -> None:
        self._clickable = clickable
        self.setCursor(Qt.CursorShape.PointingHandCursor if clickable else Qt.CursorShape.ArrowCursor)
        self._restyle()

    def set_material(self, name: str, value: Any) -> None:
        self._material[name] = value
        self._restyle()

    def set_text_color(self, color: str) -> None:
        self._text_color = color
        self._restyle()

    def set_font_px(self, px: int) -> None:
        self._font_px = px
        self._restyle()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if self._clickable and event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit()
        super().mousePressEvent(event)

    def enterEvent(self, event) -> None:
        self._hovered = True
        self._restyle()
        super().enterEvent(event)

    def leaveEvent(self, event) -> None:
        self._hovered = False
        self._restyle()
        super().leaveEvent(event)

    def _restyle(self) -> None:
        color = str(self._material.get("color", "#ffffff"))
        opacity = float(self._material.get("opacity", 0.0))
        if self._hovered and self._clickable:
            color = blend_hex(color, "#ffffff", 0.3)
            opacity = min(1.0, opacity + 0.15)
        self.setStyleSheet(
            f"""
            QLabel#{self.objectName()} {{
                background: {hex_to_rgba(color, opacity)};
                color: {self._text_color};
                border-radius: 8px;
                font-size: {self._font_px}px;
                font-weight: 700;
            }}
            """
        )


def load_sound(path: Path, loop: bool = False, volume: float = 1.0) -> Optional[QSoundEffect]:
    """Create a sound effect for ``path``, or None if the file is missing."""
    if not path.exists():
        logger.warning("Sound file not found: %s", path)
        return None
    effect = QSoundEffect()
    effect.setSource(QUrl.fromLocalFile(str(path)))
    effect.setVolume(volume)
    if loop:
        effect.setLoopCount(QSoundEffect.Loop.Infinite.value)
    return effect


class QtEntityHandle:
    """Adapter from a scene entity id to its widget and/or sound."""

    def __init__(
        self,
        entity_id: str,
        widget: Optional[SceneEntityWidget] = None,
        sound: Optional[QSoundEffect] = None,
    ) -> None:
        self.entity_id = entity_id
        self.widget = widget
        self._sound = sound

    def on_click(self, handler: Callable[[], None]) -> None:
        if self.widget is None:
            logger.warning("Entity %s has no widget to click", self.entity_id)
            return
        self.widget.clicked.connect(handler)

    def set_clickable(self, clickable: bool) -> None:
        if self.widget is not None:
            self.widget.set_clickable(clickable)

    def set_visible(self, visible: bool) -> None:
        if self.widget is not None:
            self.widget.setVisible(visible)

    def set_material_property(self, name: str, value: Any) -> None:
        if self.widget is not None:
            self.widget.set_material(name, value)

    def set_text_value(self, value: str) -> None:
        if self.widget is not None:
            self.widget.setText(value)

    def set_color(self, value: str) -> None:
        if self.widget is not None:
            self.widget.set_text_color(value)

    def has_sound(self) -> bool:
        return self._sound is not None

    def play_sound(self) -> None:
        if self._sound is not None:
            self._sound.play()

    def stop_sound(self) -> None:
        if self._sound is not None:
            self._sound.stop()

    def set_volume(self, volume: float) -> None:
        if self._sound is not None:
            self._sound.setVolume(volume)


class QtSceneFacade:
    def __init__(self) -> None:
        self._entities: Dict[str, QtEntityHandle] = {}

    def add(self, handle: QtEntityHandle) -> QtEntityHandle:
        self._entities[handle.entity_id] = handle
        return handle

    def get_entity_by_id(self, entity_id: str) -> Optional[QtEntityHandle]:
        return self._entities.get(entity_id)


class QtScheduler:
    """Runs delayed callbacks on the Qt event loop."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        QTimer.singleShot(int(delay_ms), callback)
