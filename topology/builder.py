"""Devices to visual nodes, connections to styled visual edges."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Sequence

from models import NetworkConnection, NetworkDevice, Position, VisualEdge, VisualNode
from topology.categories import classify
from topology.styles import edge_style

logger = logging.getLogger(__name__)


def device_id(device: NetworkDevice, index: int) -> str:
    return device.id or f"device-{index}"


def assign_device_ids(devices: Sequence[NetworkDevice]) -> List[NetworkDevice]:
    """Return copies of `devices` with missing ids filled in as ``device-{index}``.

    Devices that already carry an id are returned as-is; the input list is not modified.
    """
    out = []
    for i, device in enumerate(devices):
        if device.id:
            out.append(device)
        else:
            out.append(replace(device, id=device_id(device, i)))
    return out


def build_nodes(devices: Sequence[NetworkDevice]) -> List[VisualNode]:
    """One node per device, in input order, positioned at the origin until laid out."""
    return [
        VisualNode(
            id=device_id(device, i),
            category=classify(device.device_type),
            position=Position(0.0, 0.0),
            data=device,
        )
        for i, device in enumerate(devices)
    ]


def _edge_ids(connections: Sequence[NetworkConnection]) -> List[str]:
    """Caller ids win; generated ``edge-{i}`` names and repeats get ``-2``, ``-3``... suffixes."""
    reserved = {c.id for c in connections if c.id}
    used = set()
    ids = []
    for i, conn in enumerate(connections):
        base = conn.id or f"edge-{i}"
        taken = base in used or (not conn.id and base in reserved)
        edge_id = base
        if taken:
            n = 2
            while f"{base}-{n}" in used or f"{base}-{n}" in reserved:
                n += 1
            edge_id = f"{base}-{n}"
            logger.warning("Edge id %r already in use, renamed to %r", base, edge_id)
        used.add(edge_id)
        ids.append(edge_id)
    return ids


def build_edges(connections: Sequence[NetworkConnection]) -> List[VisualEdge]:
    edges = []
    for edge_id, conn in zip(_edge_ids(connections), connections):
        category = conn.connection_type or "unknown"
        edges.append(
            VisualEdge(
                id=edge_id,
                source=conn.source,
                target=conn.target,
                category=category,
                label=conn.bandwidth or "",
                animated=conn.is_active is not False,
                style=edge_style(category),
                data=conn,
            )
        )
    return edges
