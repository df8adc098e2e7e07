"""Connection inference for inventories that arrive without wiring.

The result is a plausible, connected, acyclic edge set, not a reconstruction
of real cabling:

- with gateways (routers/firewalls) and ``prioritize_gateways``: gateways are
  chained in input order and every other device hangs off the first gateway;
- otherwise: a simple path through the devices in input order.
"""

from __future__ import annotations

from typing import List, Sequence

from models import NetworkConnection, NetworkDevice
from topology.builder import device_id
from topology.categories import classify, is_gateway


def infer_connections(devices: Sequence[NetworkDevice], prioritize_gateways: bool = True) -> List[NetworkConnection]:
    if len(devices) < 2:
        return []

    ids = [device_id(d, i) for i, d in enumerate(devices)]
    gateways: List[str] = []
    others: List[str] = []
    for dev_id, device in zip(ids, devices):
        if is_gateway(classify(device.device_type)):
            gateways.append(dev_id)
        else:
            others.append(dev_id)

    connections: List[NetworkConnection] = []
    if gateways and prioritize_gateways:
        for a, b in zip(gateways, gateways[1:]):
            connections.append(NetworkConnection(source=a, target=b, connection_type="wired"))
        main_gateway = gateways[0]
        for dev_id in others:
            connections.append(NetworkConnection(source=main_gateway, target=dev_id, connection_type="wired"))
    else:
        for a, b in zip(ids, ids[1:]):
            connections.append(NetworkConnection(source=a, target=b, connection_type="wired"))
    return connections
