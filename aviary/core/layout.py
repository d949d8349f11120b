"""Developer-only registry of entity placement, used by the layout panel."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from typing import Dict, List

logger = logging.getLogger(__name__)


@dataclass
class LayoutItem:
    x: float
    y: float
    width: float
    height: float
    visible: bool = True


class LayoutRegistry:
    def __init__(self) -> None:
        self._items: Dict[str, LayoutItem] = {}

    def register(
        self,
        name: str,
        x: float,
        y: float,
        width: float,
        height: float,
        visible: bool = True,
    ) -> LayoutItem:
        item = LayoutItem(x=x, y=y, width=width, height=height, visible=visible)
        self._items[name] = item
        return item

    def names(self) -> List[str]:
        return list(self._items)

    def get(self, name: str) -> LayoutItem:
        return self._items[name]

    def update(self, name: str, **values) -> LayoutItem:
        item = self._items[name]
        allowed = {f.name for f in fields(LayoutItem)}
        for key, value in values.items():
            if key not in allowed:
                raise KeyError(f"Unknown layout field: {key}")
            setattr(item, key, value)
        return item

    def format_configs(self) -> Dict[str, Dict[str, str]]:
        """Position/size strings per item, ready to paste back into room.yaml."""
        return {
            name: {
                "position": f"{item.x:.0f} {item.y:.0f}",
                "size": f"{item.width:.0f} {item.height:.0f}",
                "visible": "true" if item.visible else "false",
            }
            for name, item in self._items.items()
        }

    def dump_configs(self) -> str:
        configs = self.format_configs()
        logger.info("--- Current Layout Configuration ---")
        for name, config in configs.items():
            logger.info("%s: position=%s size=%s", name, config["position"], config["size"])
        return json.dumps(configs, indent=2)
