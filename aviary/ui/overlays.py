"""In-window overlays: intro/start card and win card."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QGridLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from aviary.ui.colors import RoomColors


def _themed_card_container(radius: int = 20, object_name: str = "overlayContainer") -> QFrame:
    container = QFrame()
    container.setObjectName(object_name)
    container.setMinimumWidth(420)
    container.setMaximumWidth(520)
    container.setStyleSheet(
        f"""
        QFrame#{object_name} {{
            background: {RoomColors.BG_BOTTOM};
            border: 1px solid {RoomColors.PRIMARY_LIGHT};
            border-radius: {radius}px;
        }}
        """
    )
    shadow = QGraphicsDropShadowEffect(container)
    shadow.setBlurRadius(24)
    shadow.setOffset(0, 8)
    shadow.setColor(QColor(0, 0, 0, 90))
    container.setGraphicsEffect(shadow)
    return container


def _overlay_background(parent: QWidget) -> QWidget:
    overlay_bg = QWidget(parent)
    overlay_bg.setStyleSheet(f"background: {RoomColors.OVERLAY_SCRIM};")
    overlay_bg.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
    overlay_bg.setMinimumSize(1, 1)
    return overlay_bg


def _primary_button_style() -> str:
    return f"""
        QPushButton {{
            background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                stop:0 {RoomColors.PRIMARY_LIGHT}, stop:1 {RoomColors.PRIMARY});
            color: white;
            padding: 12px 20px;
            border: none;
            border-radius: 12px;
            font-weight: 700;
            font-size: 15px;
        }}
        QPushButton:hover {{ background: {RoomColors.PRIMARY}; }}
    """


def _title_label(text: str) -> QLabel:
    title = QLabel(text)
    title.setAlignment(Qt.AlignCenter)
    title.setStyleSheet(f"color: {RoomColors.TEXT_PRIMARY}; font-size: 26px; font-weight: 800;")
    return title


def _body_label(text: str) -> QLabel:
    body = QLabel(text)
    body.setAlignment(Qt.AlignCenter)
    body.setWordWrap(True)
    body.setStyleSheet(f"color: {RoomColors.TEXT_MUTED}; font-size: 14px;")
    return body


class _CardOverlay(QWidget):
    """Scrim covering the whole window with a centred card on top."""

    def __init__(self, object_name: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        main_layout = QGridLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)
        main_layout.setRowStretch(0, 1)
        main_layout.setColumnStretch(0, 1)
        main_layout.addWidget(_overlay_background(self), 0, 0)

        self.container = _themed_card_container(object_name=object_name)
        self.content = QVBoxLayout(self.container)
        self.content.setContentsMargins(32, 28, 32, 28)
        self.content.setSpacing(16)
        main_layout.addWidget(self.container, 0, 0, Qt.AlignCenter)


class StartOverlay(_CardOverlay):
    """Instructions shown before the experience starts."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__("startContainer", parent)
        self.content.addWidget(_title_label("Aviary Escape"))
        self.content.addWidget(
            _body_label(
                "A songbird is locked in its cage and so are you.\n"
                "Crack the padlock, free the bird, take its key and open the door."
            )
        )
        self.start_button = QPushButton("Start")
        self.start_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.start_button.setStyleSheet(_primary_button_style())
        self.content.addWidget(self.start_button, 0, Qt.AlignCenter)


class WinOverlay(_CardOverlay):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__("winContainer", parent)
        self.content.addWidget(_title_label("You escaped!"))
        self.content.addWidget(_body_label("The door swings open and the bird follows you out."))
