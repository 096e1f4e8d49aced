"""Recommendation output schemas."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Tuple


class Zone(str, Enum):
    BASE = "base"
    MID = "mid"
    OUTER = "outer"


ZONE_LABELS: Dict[Zone, str] = {
    Zone.BASE: "Base Layer",
    Zone.MID: "Mid Layer",
    Zone.OUTER: "Outer Layer",
}


@dataclass(frozen=True)
class ClothingItem:
    zone: Zone
    item: str
    reason: str

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.zone.value, "item": self.item, "reason": self.reason}


@dataclass(frozen=True)
class Recommendation:
    """Clothing layers, accessories and tips for a single activity outing.

    ``layers`` is ordered base-top, mid, outer, base-bottom; mid and outer may
    be absent.
    """

    layers: Tuple[ClothingItem, ...]
    accessories: Tuple[str, ...] = ()
    tips: Tuple[str, ...] = ()

    def layers_by_zone(self) -> Dict[str, List[ClothingItem]]:
        """Group layers under their display label, skipping empty zones."""

        grouped: Dict[str, List[ClothingItem]] = {}
        for zone, label in ZONE_LABELS.items():
            items = [layer for layer in self.layers if layer.zone is zone]
            if items:
                grouped[label] = items
        return grouped

    def to_dict(self) -> Dict[str, Any]:
        return {
            "layers": [layer.to_dict() for layer in self.layers],
            "accessories": list(self.accessories),
            "tips": list(self.tips),
        }


__all__ = ["ClothingItem", "Recommendation", "Zone", "ZONE_LABELS"]
