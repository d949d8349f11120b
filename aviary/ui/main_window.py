from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Optional

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtGui import QKeySequence, QPixmap, QShortcut
from PySide6.QtWidgets import (
    QGridLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QWidget,
)

from aviary.core.config import RoomConfig
from aviary.core.layout import LayoutRegistry
from aviary.ui.colors import RoomColors, parse_scale
from aviary.ui.layout_panel import LayoutPanel
from aviary.ui.overlays import StartOverlay, WinOverlay
from aviary.ui.scene import QtEntityHandle, QtSceneFacade, SceneEntityWidget, load_sound

logger = logging.getLogger(__name__)

ROOM_WIDTH = 1280
ROOM_HEIGHT = 720
KEY_SLOT_FONT_PX = 28


def key_slot_style(scale: float) -> str:
    return f"""
        background: rgba(0, 0, 0, 0.45);
        border: 2px solid {RoomColors.BRASS};
        border-radius: 12px;
        font-size: {int(KEY_SLOT_FONT_PX * scale)}px;
    """


class MainWindow(QMainWindow):
    """The aviary room: clickable entities on a backdrop, plus the HUD and overlays.

    Exposes a scene facade over the entity widgets and an overlay facade over
    the HUD and cards, keyed by the ids in ``config.overlay``. ``scene_loaded`` fires once
    the window has been shown for the first time.
    """

    scene_loaded = Signal()

    def __init__(self, config: RoomConfig, assets_dir: Optional[Path] = None) -> None:
        super().__init__()
        self._config = config
        self._assets_dir = assets_dir or Path(__file__).resolve().parent.parent / "assets"
        self._scene = QtSceneFacade()
        self._overlay = QtOverlayFacade(self)
        self._entity_widgets: Dict[str, SceneEntityWidget] = {}
        self._loaded_emitted = False
        self._layout_registry = LayoutRegistry()

        self.setWindowTitle("Aviary Escape")
        self._build_ui()
        self._layout_panel = LayoutPanel(self._layout_registry)
        self._layout_panel.setWindowFlag(Qt.WindowType.Tool, True)
        for name, widget in self._entity_widgets.items():
            if name in self._config.layout:
                self._layout_panel.register_widget(name, widget)
        self._layout_panel.hide()
        self._layout_shortcut = QShortcut(QKeySequence(Qt.Key_F12), self)
        self._layout_shortcut.activated.connect(self._toggle_layout_panel)

    @property
    def scene(self) -> QtSceneFacade:
        return self._scene

    @property
    def overlay(self) -> "QtOverlayFacade":
        return self._overlay

    # -- construction --------------------------------------------------------

    def _build_ui(self) -> None:
        central = QWidget()
        central.setObjectName("aviaryCentral")
        central.setStyleSheet(f"QWidget#aviaryCentral {{ background: {RoomColors.BG_BOTTOM}; }}")
        grid = QGridLayout(central)
        grid.setContentsMargins(0, 0, 0, 0)

        self._room = QWidget()
        self._room.setFixedSize(ROOM_WIDTH, ROOM_HEIGHT)
        grid.addWidget(self._room, 0, 0, Qt.AlignCenter)
        self.setCentralWidget(central)

        self._build_backdrop()
        self._build_entities()
        self._build_sounds()
        self._build_hud(central)

        self._start_overlay = StartOverlay(central)
        self._win_overlay = WinOverlay(central)
        self._win_overlay.hide()

        overlay_ids = self._config.overlay
        self._overlay.elements[overlay_ids.start_overlay] = self._start_overlay
        self._overlay.elements[overlay_ids.start_button] = self._start_overlay.start_button
        self._overlay.elements[overlay_ids.win_overlay] = self._win_overlay

    def _build_backdrop(self) -> None:
        backdrop = QLabel(self._room)
        backdrop.setGeometry(0, 0, ROOM_WIDTH, ROOM_HEIGHT)
        backdrop.setStyleSheet(
            f"""
            background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                stop:0 {RoomColors.BG_TOP}, stop:1 {RoomColors.BG_BOTTOM});
            """
        )
        if not self._config.panorama:
            return
        image_path = self._assets_dir / self._config.panorama
        pixmap = QPixmap(str(image_path)) if image_path.exists() else QPixmap()
        if pixmap.isNull():
            logger.error("Panorama image failed to load. Check that the file exists at: %s", image_path)
            return
        backdrop.setPixmap(
            pixmap.scaled(ROOM_WIDTH, ROOM_HEIGHT, Qt.KeepAspectRatioByExpanding, Qt.SmoothTransformation)
        )
        logger.info("Panorama image loaded: %s (%dx%d)", image_path, pixmap.width(), pixmap.height())

    def _build_entities(self) -> None:
        ids = self._config.scene
        door = self._entity(ids.door, "DOOR", RoomColors.WOOD, 0.85)
        door.set_font_px(22)
        self._entity(ids.cage_closed, "▥▥▥\ncage", RoomColors.CAGE_BAR, 0.35).set_font_px(28)
        cage_open = self._entity(ids.cage_open, "▥  ▥\nopen cage", RoomColors.CAGE_BAR, 0.2)
        cage_open.set_font_px(28)
        cage_open.hide()
        self._entity(ids.padlock, "🔒", RoomColors.BRASS, 0.9).set_font_px(26)

        bird = self._entity(ids.bird, "🐦", RoomColors.PRIMARY_LIGHT, 0.0)
        bird.set_font_px(48)
        bird.setAlignment(Qt.AlignTop | Qt.AlignHCenter)
        bird.hide()
        # The key rides on the bird, so it only shows once the bird does.
        key = self._entity(ids.key, "🗝", RoomColors.BRASS, 0.0, parent=bird)
        key.set_font_px(30)

        for digit_id in ids.digits:
            digit = self._entity(digit_id, "0", RoomColors.DIGIT_BG, 1.0)
            digit.set_text_color(RoomColors.DIGIT_TEXT)
            digit.set_font_px(24)

    def _entity(
        self,
        entity_id: str,
        text: str,
        color: str,
        opacity: float,
        parent: Optional[QWidget] = None,
    ) -> SceneEntityWidget:
        widget = SceneEntityWidget(entity_id, text, parent or self._room)
        widget.set_material("color", color)
        widget.set_material("opacity", opacity)
        rect = self._config.layout.get(entity_id)
        if rect is None:
            logger.warning("No layout for entity %s", entity_id)
        else:
            widget.setGeometry(*rect)
        self._entity_widgets[entity_id] = widget
        self._scene.add(QtEntityHandle(entity_id, widget=widget))
        return widget

    def _build_sounds(self) -> None:
        ids = self._config.scene
        for entity_id in (ids.sfx_cage, ids.sfx_birds, ids.sfx_key, ids.bgm):
            relative = self._config.sounds.get(entity_id)
            if relative is None:
                logger.warning("No sound configured for %s", entity_id)
                continue
            is_bgm = entity_id == ids.bgm
            sound = load_sound(
                self._assets_dir / relative,
                loop=is_bgm,
                volume=self._config.nominal_volume if is_bgm else 1.0,
            )
            self._scene.add(QtEntityHandle(entity_id, sound=sound))

    def _build_hud(self, parent: QWidget) -> None:
        overlay_ids = self._config.overlay
        music_toggle = QPushButton(self._config.music_on_label, parent)
        music_toggle.setCursor(Qt.CursorShape.PointingHandCursor)
        music_toggle.setStyleSheet(
            f"""
            QPushButton {{
                background: rgba(0, 0, 0, 0.45);
                color: {RoomColors.TEXT_PRIMARY};
                border: 1px solid {RoomColors.PRIMARY_LIGHT};
                border-radius: 14px;
                padding: 6px 14px;
                font-size: 14px;
            }}
            """
        )
        music_toggle.hide()
        self._overlay.elements[overlay_ids.music_toggle] = music_toggle

        key_slot = QLabel("🗝", parent)
        key_slot.setAlignment(Qt.AlignCenter)
        key_slot.setFixedSize(64, 64)
        key_slot.hide()
        self._overlay.add_scalable(overlay_ids.key_slot, key_slot, key_slot_style)

    # -- Qt events -----------------------------------------------------------

    def showEvent(self, event) -> None:
        super().showEvent(event)
        if not self._loaded_emitted:
            self._loaded_emitted = True
            QTimer.singleShot(0, self.scene_loaded.emit)

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        central = self.centralWidget()
        if central is None:
            return
        rect = central.rect()
        self._start_overlay.setGeometry(rect)
        self._win_overlay.setGeometry(rect)
        toggle = self._overlay.elements[self._config.overlay.music_toggle]
        toggle.adjustSize()
        toggle.move(rect.width() - toggle.width() - 20, 20)
        slot = self._overlay.elements[self._config.overlay.key_slot]
        slot.move(20, 20)

    def _toggle_layout_panel(self) -> None:
        self._layout_panel.setVisible(not self._layout_panel.isVisible())


class QtOverlayFacade:
    """Overlay elements (HUD, intro and win cards) addressed by id."""

    def __init__(self, window: QWidget) -> None:
        self._window = window
        self.elements: Dict[str, QWidget] = {}
        self._scaled_styles: Dict[str, Callable[[float], str]] = {}

    def add_scalable(self, element_id: str, widget: QWidget, style: Callable[[float], str]) -> None:
        """Register an element whose ``transform: scale(n)`` is rendered by ``style(n)``."""
        self.elements[element_id] = widget
        self._scaled_styles[element_id] = style
        widget.setStyleSheet(style(1.0))

    def has_element(self, element_id: str) -> bool:
        return element_id in self.elements

    def show(self, element_id: str) -> None:
        widget = self.elements[element_id]
        widget.show()
        widget.raise_()

    def hide(self, element_id: str) -> None:
        self.elements[element_id].hide()

    def set_text(self, element_id: str, value: str) -> None:
        widget = self.elements[element_id]
        if isinstance(widget, (QLabel, QPushButton)):
            widget.setText(value)
        else:
            logger.warning("Element %s has no text", element_id)

    def set_style(self, element_id: str, prop: str, value: str) -> None:
        widget = self.elements[element_id]
        if prop == "transform" and element_id in self._scaled_styles:
            widget.setStyleSheet(self._scaled_styles[element_id](parse_scale(value)))
        elif prop == "display":
            widget.setVisible(value != "none")
        else:
            logger.warning("Unsupported style %s on %s", prop, element_id)

    def bind_click(self, element_id: str, handler: Callable[[], None]) -> bool:
        widget = self.elements.get(element_id)
        if not isinstance(widget, QPushButton):
            return False
        widget.clicked.connect(lambda _checked=False: handler())
        return True

    def blocking_alert(self, message: str) -> None:
        QMessageBox.information(self._window, "Aviary Escape", message)
