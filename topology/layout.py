"""Deterministic tiered layout.

Tier 0 holds routers and firewalls, tier 1 switches, tier 2 servers, and
workstations fill a 4-column grid from tier 3 down. Printers, access points
and unknown devices stack in a side lane to the right. Horizontal tiers are
centered on x = 0. Positions depend only on category and per-category order,
so re-rendering the same inventory never moves anything.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, List, Sequence

from models import Position, VisualNode
from topology.categories import DeviceCategory

HORIZONTAL_SPACING = 200
VERTICAL_SPACING = 150
WORKSTATIONS_PER_ROW = 4

# Category -> tier index for the centered rows.
TIERS: Dict[DeviceCategory, int] = {
    DeviceCategory.ROUTER: 0,
    DeviceCategory.FIREWALL: 0,
    DeviceCategory.SWITCH: 1,
    DeviceCategory.SERVER: 2,
}


def _centered_x(index: int, count: int) -> float:
    return HORIZONTAL_SPACING * (index - (count - 1) / 2)


def apply_layout(nodes: Sequence[VisualNode]) -> List[VisualNode]:
    """Return new nodes, in input order, with positions assigned."""
    tiers: Dict[int, List[int]] = {0: [], 1: [], 2: []}
    workstations: List[int] = []
    side_lane: List[int] = []
    for i, node in enumerate(nodes):
        if node.category in TIERS:
            tiers[TIERS[node.category]].append(i)
        elif node.category == DeviceCategory.WORKSTATION:
            workstations.append(i)
        else:
            side_lane.append(i)

    positions: Dict[int, Position] = {}
    for tier, members in tiers.items():
        for k, i in enumerate(members):
            positions[i] = Position(float(_centered_x(k, len(members))), float(VERTICAL_SPACING * tier))

    for k, i in enumerate(workstations):
        row, col = divmod(k, WORKSTATIONS_PER_ROW)
        positions[i] = Position(
            float(_centered_x(col, WORKSTATIONS_PER_ROW)),
            float(VERTICAL_SPACING * (3 + row)),
        )

    for k, i in enumerate(side_lane):
        positions[i] = Position(float(HORIZONTAL_SPACING * 2), float(VERTICAL_SPACING * (k + 1)))

    return [replace(node, position=positions[i]) for i, node in enumerate(nodes)]


def layout_bounds(nodes: Sequence[VisualNode]) -> Dict[str, float]:
    """Bounding box of node positions, for the renderer's fit-view."""
    if not nodes:
        return {"min_x": 0.0, "min_y": 0.0, "max_x": 0.0, "max_y": 0.0, "width": 0.0, "height": 0.0}
    xs = [n.position.x for n in nodes]
    ys = [n.position.y for n in nodes]
    min_x, max_x, min_y, max_y = min(xs), max(xs), min(ys), max(ys)
    return {
        "min_x": min_x,
        "min_y": min_y,
        "max_x": max_x,
        "max_y": max_y,
        "width": max_x - min_x,
        "height": max_y - min_y,
    }
