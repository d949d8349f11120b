"""Hidden developer panel for nudging entity placement."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from PySide6.QtWidgets import (
    QCheckBox,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QMessageBox,
    QPushButton,
    QScrollArea,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from aviary.core.layout import LayoutRegistry

logger = logging.getLogger(__name__)


class LayoutPanel(QWidget):
    """Edits position, size and visibility of registered widgets. Toggle with F12."""

    def __init__(self, registry: LayoutRegistry, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Layout Manager")
        self._registry = registry
        self._widgets: Dict[str, QWidget] = {}
        self.spins: Dict[str, Dict[str, QSpinBox]] = {}

        outer = QVBoxLayout(self)
        outer.setContentsMargins(8, 8, 8, 8)
        print_button = QPushButton("Print All Configs")
        print_button.clicked.connect(self.print_all_configs)
        outer.addWidget(print_button)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        body = QWidget()
        self._items_layout = QVBoxLayout(body)
        self._items_layout.addStretch(1)
        scroll.setWidget(body)
        outer.addWidget(scroll, 1)
        self.resize(280, 520)

    def register_widget(self, name: str, widget: QWidget) -> None:
        geometry = widget.geometry()
        self._registry.register(
            name,
            x=geometry.x(),
            y=geometry.y(),
            width=geometry.width(),
            height=geometry.height(),
            visible=not widget.isHidden(),
        )
        self._widgets[name] = widget

        group = QGroupBox(name)
        form = QFormLayout(group)
        pos_row = QHBoxLayout()
        x_spin = self._spin(geometry.x())
        y_spin = self._spin(geometry.y())
        pos_row.addWidget(x_spin)
        pos_row.addWidget(y_spin)
        form.addRow("Pos X / Y", pos_row)
        size_row = QHBoxLayout()
        w_spin = self._spin(geometry.width(), minimum=1)
        h_spin = self._spin(geometry.height(), minimum=1)
        size_row.addWidget(w_spin)
        size_row.addWidget(h_spin)
        form.addRow("Width / Height", size_row)
        self.spins[name] = {"x": x_spin, "y": y_spin, "width": w_spin, "height": h_spin}
        visible_box = QCheckBox()
        visible_box.setChecked(not widget.isHidden())
        form.addRow("Visible", visible_box)

        x_spin.valueChanged.connect(lambda v, n=name: self._move(n, x=v))
        y_spin.valueChanged.connect(lambda v, n=name: self._move(n, y=v))
        w_spin.valueChanged.connect(lambda v, n=name: self._resize(n, width=v))
        h_spin.valueChanged.connect(lambda v, n=name: self._resize(n, height=v))
        visible_box.toggled.connect(lambda v, n=name: self._set_visible(n, v))
        self._items_layout.insertWidget(self._items_layout.count() - 1, group)

    def print_all_configs(self) -> None:
        dump = self._registry.dump_configs()
        logger.info("%s", dump)
        QMessageBox.information(self, "Layout Manager", "Configuration printed to the log.")

    def _spin(self, value: int, minimum: int = -2000) -> QSpinBox:
        spin = QSpinBox()
        spin.setRange(minimum, 4000)
        spin.setValue(value)
        return spin

    def _move(self, name: str, **coords: int) -> None:
        item = self._registry.update(name, **coords)
        self._widgets[name].move(int(item.x), int(item.y))

    def _resize(self, name: str, **size: int) -> None:
        item = self._registry.update(name, **size)
        self._widgets[name].resize(int(item.width), int(item.height))

    def _set_visible(self, name: str, visible: bool) -> None:
        self._registry.update(name, visible=visible)
        self._widgets[name].setVisible(visible)
