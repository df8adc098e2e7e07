"""Topology pipeline: devices -> nodes -> inferred edges -> layout -> styled edges."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import replace
from typing import Any, Dict, List, Optional, Sequence

from models import NetworkConnection, NetworkDevice, Topology
from topology.builder import assign_device_ids, build_edges, build_nodes
from topology.categories import DeviceCategory, is_gateway
from topology.demo import generate_demo_topology
from topology.inference import infer_connections
from topology.layout import apply_layout, layout_bounds

logger = logging.getLogger(__name__)

__all__ = [
    "Topology",
    "build_topology",
    "generate_demo_topology",
    "generate_topology_from_devices",
    "summarize_topology",
]


def _unique_ids(devices: List[NetworkDevice]) -> List[NetworkDevice]:
    """Rename repeated ids to ``<id>-2``, ``<id>-3``... so node ids stay unique."""
    seen = {d.id for d in devices}
    used = set()
    out = []
    for device in devices:
        if device.id not in used:
            used.add(device.id)
            out.append(device)
            continue
        n = 2
        while f"{device.id}-{n}" in seen or f"{device.id}-{n}" in used:
            n += 1
        new_id = f"{device.id}-{n}"
        logger.warning("Duplicate device id %r renamed to %r", device.id, new_id)
        used.add(new_id)
        out.append(replace(device, id=new_id))
    return out


def _prepare_devices(devices: Sequence[NetworkDevice]) -> List[NetworkDevice]:
    return _unique_ids(assign_device_ids(devices))


def _valid_connections(connections: Sequence[NetworkConnection], node_ids: set) -> List[NetworkConnection]:
    kept = []
    for conn in connections:
        if conn.source not in node_ids or conn.target not in node_ids:
            logger.warning("Dropping connection %s -> %s: unknown device id", conn.source, conn.target)
            continue
        if conn.source == conn.target:
            logger.warning("Dropping self-loop connection on %s", conn.source)
            continue
        kept.append(conn)
    return kept


def generate_topology_from_devices(devices: Sequence[NetworkDevice]) -> Topology:
    """Build the full topology for an inventory; an empty inventory yields the demo."""
    if not devices:
        return generate_demo_topology()

    prepared = _prepare_devices(devices)
    nodes = apply_layout(build_nodes(prepared))
    connections = infer_connections(prepared, prioritize_gateways=True)
    edges = build_edges(connections)
    logger.debug("Built topology: %d nodes, %d inferred edges", len(nodes), len(edges))
    return Topology(nodes=nodes, edges=edges)


def build_topology(
    devices: Sequence[NetworkDevice],
    *,
    connections: Optional[Sequence[NetworkConnection]] = None,
    demo: bool = False,
) -> Topology:
    """Entry point for the API and CLI.

    Explicit `connections`, when given, replace inference; links to unknown
    ids and self-loops are dropped.
    """
    if demo or not devices:
        return generate_demo_topology()
    if connections is None:
        return generate_topology_from_devices(devices)

    prepared = _prepare_devices(devices)
    nodes = apply_layout(build_nodes(prepared))
    kept = _valid_connections(connections, {n.id for n in nodes})
    edges = build_edges(kept)
    logger.debug("Built topology: %d nodes, %d explicit edges", len(nodes), len(edges))
    return Topology(nodes=nodes, edges=edges)


def summarize_topology(topology: Topology) -> Dict[str, Any]:
    counts = Counter(str(n.category) for n in topology.nodes)
    return {
        "node_count": len(topology.nodes),
        "edge_count": len(topology.edges),
        "categories": {c.value: counts.get(c.value, 0) for c in DeviceCategory},
        "gateways": [n.id for n in topology.nodes if is_gateway(n.category)],
        "bounds": layout_bounds(topology.nodes),
    }
