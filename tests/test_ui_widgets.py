"""Tests for aviary.ui – overlay facade styling and the layout panel (offscreen Qt)."""

from __future__ import annotations

import pytest

from aviary.core.layout import LayoutRegistry


# ===========================================================================
# QtOverlayFacade.set_style
# ===========================================================================

class TestOverlaySetStyle:
    @pytest.fixture()
    def facade(self, qapp):
        from PySide6.QtWidgets import QLabel, QWidget

        from aviary.ui.main_window import QtOverlayFacade, key_slot_style

        root = QWidget()
        f = QtOverlayFacade(root)
        f.add_scalable("keySlot", QLabel("🗝", root), key_slot_style)
        banner = QLabel("hello", root)
        banner.setStyleSheet("color: red;")
        f.elements["banner"] = banner
        return f

    def test_scalable_starts_at_one(self, facade):
        from aviary.ui.main_window import key_slot_style

        assert facade.elements["keySlot"].styleSheet() == key_slot_style(1.0)

    def test_pulse_and_reset(self, facade):
        from aviary.ui.main_window import key_slot_style

        facade.set_style("keySlot", "transform", "scale(1.2)")
        assert facade.elements["keySlot"].styleSheet() == key_slot_style(1.2)
        facade.set_style("keySlot", "transform", "scale(1)")
        assert facade.elements["keySlot"].styleSheet() == key_slot_style(1.0)

    def test_transform_on_other_label_keeps_its_style(self, facade):
        facade.set_style("banner", "transform", "scale(2)")
        assert facade.elements["banner"].styleSheet() == "color: red;"


# ===========================================================================
# LayoutPanel
# ===========================================================================

class TestLayoutPanel:
    @pytest.fixture()
    def setup(self, qapp):
        from PySide6.QtWidgets import QWidget

        from aviary.ui.layout_panel import LayoutPanel

        room = QWidget()
        room.resize(800, 600)
        entity = QWidget(room)
        entity.setGeometry(10, 20, 100, 50)
        registry = LayoutRegistry()
        panel = LayoutPanel(registry)
        panel.register_widget("door-collider", entity)
        return room, entity, registry, panel

    def test_registers_geometry(self, setup):
        _, _, registry, _ = setup
        item = registry.get("door-collider")
        assert (item.x, item.y, item.width, item.height) == (10, 20, 100, 50)

    def test_width_spin_resizes_widget(self, setup):
        _, entity, registry, panel = setup
        panel.spins["door-collider"]["width"].setValue(150)
        assert entity.width() == 150
        assert registry.get("door-collider").width == 150

    def test_height_spin_resizes_widget(self, setup):
        _, entity, registry, panel = setup
        panel.spins["door-collider"]["height"].setValue(80)
        assert entity.height() == 80
        assert registry.format_configs()["door-collider"]["size"] == "100 80"

    def test_position_spin_moves_widget(self, setup):
        _, entity, registry, panel = setup
        panel.spins["door-collider"]["x"].setValue(42)
        assert entity.x() == 42
        assert registry.get("door-collider").x == 42
