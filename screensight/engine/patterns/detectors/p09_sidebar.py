"""P09 — Sidebar: a vertical stack of components hugging the left or right edge."""

from __future__ import annotations

from screensight.engine.config import EngineConfig
from screensight.engine.patterns.registry import Detection, PatternInput, pattern


@pattern(
    id="P09",
    name="sidebar",
    description="Sidebar with widgets",
    characteristics={"position": "side", "vertical_stack": True},
)
def sidebar(scene: PatternInput, config: EngineConfig) -> Detection:
    width = scene.image.width
    edge = config.sidebar_edge_fraction
    left = [c for c in scene.components if c.position.x < width * edge]
    right = [c for c in scene.components if c.position.x > width * (1 - edge)]

    side, members = ("left", left) if len(left) > len(right) else ("right", right)
    if len(members) < config.sidebar_min_elements:
        return Detection()

    stacked = sorted(members, key=lambda c: c.position.y)
    for above, below in zip(stacked, stacked[1:]):
        gap = below.position.y - above.position.bottom
        if gap < -config.sidebar_max_overlap or gap > config.sidebar_max_gap:
            return Detection()

    return Detection(
        config.sidebar_confidence,
        [f"{len(members)} vertically stacked elements on {side} side"],
        {"side": side, "widget_count": len(members)},
    )
