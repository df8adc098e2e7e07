"""Network topology modeling and automatic layout.

Turns an unordered device inventory into a connected, non-overlapping,
tiered graph for the topology view:
- categories: device-type classification and per-category presentation
- builder / inference: nodes and (when no wiring is known) inferred links
- layout: deterministic tiered placement
- pipeline: the composed entry points used by the API and CLI
"""

from topology.categories import DeviceCategory, classify
from topology.pipeline import (
    Topology,
    build_topology,
    generate_demo_topology,
    generate_topology_from_devices,
    summarize_topology,
)

__all__ = [
    "DeviceCategory",
    "Topology",
    "build_topology",
    "classify",
    "generate_demo_topology",
    "generate_topology_from_devices",
    "summarize_topology",
]
