"""Plain-text rendering of a recommendation for the CLI."""

from __future__ import annotations

from typing import List

from models.recommendation import Recommendation


def render_text(recommendation: Recommendation) -> str:
    """Render layers grouped by zone, then accessories and tips as bullet lists."""

    lines: List[str] = []
    for label, items in recommendation.layers_by_zone().items():
        lines.append(f"{label}:")
        lines.extend(f"  - {item.item} ({item.reason})" for item in items)
    if recommendation.accessories:
        lines.append("Accessories:")
        lines.extend(f"  - {accessory}" for accessory in recommendation.accessories)
    if recommendation.tips:
        lines.append("Tips:")
        lines.extend(f"  - {tip}" for tip in recommendation.tips)
    return "\n".join(lines)


__all__ = ["render_text"]
