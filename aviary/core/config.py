from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict, Optional, Tuple

import yaml


@dataclass(frozen=True)
class SceneIds:
    key: str = "key-entity"
    door: str = "door-collider"
    padlock: str = "padlock"
    digits: Tuple[str, ...] = ("digit1", "digit2", "digit3")
    cage_closed: str = "cage-closed"
    cage_open: str = "cage-open"
    bird: str = "bird-rig"
    sfx_cage: str = "sfx-cage-open"
    sfx_birds: str = "sfx-birds"
    sfx_key: str = "sfx-key"
    bgm: str = "bgmEntity"


@dataclass(frozen=True)
class OverlayIds:
    start_overlay: str = "startOverlay"
    start_button: str = "startButton"
    music_toggle: str = "musicToggle"
    key_slot: str = "keySlot"
    win_overlay: str = "winOverlay"


@dataclass(frozen=True)
class RoomConfig:
    correct_code: Tuple[int, ...] = (4, 9, 7)
    unlock_delay_ms: int = 500
    pulse_ms: int = 200
    pulse_scale: float = 1.2
    auto_start_delay_ms: int = 20000
    nominal_volume: float = 0.3
    solved_color: str = "#4CAF50"
    door_glow_color: str = "#fff3c2"
    door_glow_opacity: float = 0.6
    music_on_label: str = "🎵 On"
    music_off_label: str = "🎵 Off"
    require_padlock_for_key: bool = False
    scene: SceneIds = field(default_factory=SceneIds)
    overlay: OverlayIds = field(default_factory=OverlayIds)
    layout: Dict[str, Tuple[int, int, int, int]] = field(default_factory=dict)
    panorama: Optional[str] = None
    sounds: Dict[str, str] = field(default_factory=dict)


def default_config_path() -> Path:
    return Path(__file__).resolve().parent.parent / "data" / "room.yaml"


def load_room_config(path: Optional[Path] = None) -> RoomConfig:
    """Read ``room.yaml`` and return a validated :class:`RoomConfig`.

    Keys missing from the file keep their dataclass defaults. Malformed
    values raise ``ValueError`` naming the file.
    """
    config_path = path or default_config_path()
    if not config_path.exists():
        raise FileNotFoundError(f"Room config not found: {config_path}")

    raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"{config_path.name}: expected a YAML mapping")
    return parse_room_config(raw, source=config_path.name)


def parse_room_config(raw: dict, source: str = "room.yaml") -> RoomConfig:
    known = {f.name for f in fields(RoomConfig)}
    unknown = set(raw) - known
    if unknown:
        raise ValueError(f"{source}: unknown keys {sorted(unknown)}")

    values = dict(raw)

    scene_raw = values.pop("scene", None) or {}
    overlay_raw = values.pop("overlay", None) or {}
    scene = _build_ids(SceneIds, scene_raw, source, "scene")
    overlay = _build_ids(OverlayIds, overlay_raw, source, "overlay")

    code = values.pop("correct_code", None)
    if code is not None:
        if not isinstance(code, (list, tuple)) or not code:
            raise ValueError(f"{source}: 'correct_code' must be a non-empty list")
        if not all(_is_int(d) and 0 <= d <= 9 for d in code):
            raise ValueError(f"{source}: 'correct_code' digits must be integers 0-9")
        values["correct_code"] = tuple(code)

    layout = values.pop("layout", None) or {}
    if not isinstance(layout, dict):
        raise ValueError(f"{source}: 'layout' must be a mapping")
    parsed_layout: Dict[str, Tuple[int, int, int, int]] = {}
    for name, rect in layout.items():
        if not isinstance(rect, (list, tuple)) or len(rect) != 4:
            raise ValueError(f"{source}: layout '{name}' must be [x, y, width, height]")
        parsed_layout[str(name)] = tuple(int(v) for v in rect)

    sounds = values.pop("sounds", None) or {}
    if not isinstance(sounds, dict):
        raise ValueError(f"{source}: 'sounds' must be a mapping")

    for name in ("unlock_delay_ms", "pulse_ms", "auto_start_delay_ms"):
        if name in values and (not _is_int(values[name]) or values[name] < 0):
            raise ValueError(f"{source}: '{name}' must be a non-negative integer")
    for name in ("nominal_volume", "door_glow_opacity"):
        if name in values and (not _is_number(values[name]) or not 0.0 <= values[name] <= 1.0):
            raise ValueError(f"{source}: '{name}' must be a number between 0 and 1")
    if "pulse_scale" in values and (not _is_number(values["pulse_scale"]) or values["pulse_scale"] <= 0):
        raise ValueError(f"{source}: 'pulse_scale' must be a positive number")

    config = RoomConfig(
        **values,
        scene=scene,
        overlay=overlay,
        layout=parsed_layout,
        sounds={str(k): str(v) for k, v in sounds.items()},
    )
    if len(config.correct_code) != len(config.scene.digits):
        raise ValueError(
            f"{source}: 'correct_code' has {len(config.correct_code)} digits "
            f"but scene defines {len(config.scene.digits)}"
        )
    return config


def _build_ids(cls, raw, source: str, section: str):
    if not isinstance(raw, dict):
        raise ValueError(f"{source}: '{section}' must be a mapping")
    known = {f.name for f in fields(cls)}
    unknown = set(raw) - known
    if unknown:
        raise ValueError(f"{source}: unknown {section} ids {sorted(unknown)}")
    ids = {}
    for name, value in raw.items():
        if name == "digits":
            if not isinstance(value, list) or not value or not all(isinstance(v, str) and v for v in value):
                raise ValueError(f"{source}: '{section}.digits' must be a non-empty list of ids")
            ids[name] = tuple(value)
        elif not isinstance(value, str) or not value:
            raise ValueError(f"{source}: '{section}.{name}' must be a non-empty string")
        else:
            ids[name] = value
    return cls(**ids)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
