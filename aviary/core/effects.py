"""Commands issued by the controllers and executed against the scene."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class SetVisible:
    entity_id: str
    visible: bool


@dataclass(frozen=True)
class SetClickable:
    entity_id: str
    clickable: bool


@dataclass(frozen=True)
class SetMaterialColor:
    entity_id: str
    color: str


@dataclass(frozen=True)
class SetMaterialOpacity:
    entity_id: str
    opacity: float


@dataclass(frozen=True)
class SetTextValue:
    entity_id: str
    value: str


@dataclass(frozen=True)
class SetColor:
    entity_id: str
    color: str


@dataclass(frozen=True)
class PlayClip:
    entity_id: str


@dataclass(frozen=True)
class StopClip:
    entity_id: str


@dataclass(frozen=True)
class SetVolume:
    entity_id: str
    volume: float


@dataclass(frozen=True)
class ShowElement:
    element_id: str


@dataclass(frozen=True)
class HideElement:
    element_id: str


@dataclass(frozen=True)
class SetElementText:
    element_id: str
    text: str


@dataclass(frozen=True)
class SetElementStyle:
    element_id: str
    prop: str
    value: str


@dataclass(frozen=True)
class Alert:
    """Blocking notification shown to the player."""

    message: str


@dataclass(frozen=True)
class Delay:
    """Run ``effects`` once ``delay_ms`` has elapsed."""

    delay_ms: int
    effects: Tuple["Effect", ...]


Effect = Union[
    SetVisible,
    SetClickable,
    SetMaterialColor,
    SetMaterialOpacity,
    SetTextValue,
    SetColor,
    PlayClip,
    StopClip,
    SetVolume,
    ShowElement,
    HideElement,
    SetElementText,
    SetElementStyle,
    Alert,
    Delay,
]
