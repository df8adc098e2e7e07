"""
NetTopo topology service.
Parses inventory payloads at the boundary and renders topology responses for the API and CLI.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from models import DeviceValidationError, NetworkConnection, NetworkDevice, Topology
from topology import build_topology, summarize_topology
from topology.categories import display_role


def parse_devices(raw: Any) -> List[NetworkDevice]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise DeviceValidationError("'devices' must be a list")
    devices = []
    for i, record in enumerate(raw):
        try:
            devices.append(NetworkDevice.from_dict(record))
        except DeviceValidationError as exc:
            raise DeviceValidationError(f"devices[{i}]: {exc}") from exc
    return devices


def parse_connections(raw: Any) -> Optional[List[NetworkConnection]]:
    """None means "infer"; an explicit list (even empty) means "use these"."""
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise DeviceValidationError("'connections' must be a list")
    connections = []
    for i, record in enumerate(raw):
        try:
            connections.append(NetworkConnection.from_dict(record))
        except DeviceValidationError as exc:
            raise DeviceValidationError(f"connections[{i}]: {exc}") from exc
    return connections


def parse_inventory(payload: Any) -> Tuple[List[NetworkDevice], Optional[List[NetworkConnection]], bool]:
    """Accept either a bare device list or ``{"devices", "connections", "demo"}``."""
    if isinstance(payload, list):
        return parse_devices(payload), None, False
    if not isinstance(payload, dict):
        raise DeviceValidationError("Inventory must be a list of devices or an object")
    demo = payload.get("demo", False)
    if not isinstance(demo, bool):
        raise DeviceValidationError("'demo' must be a boolean")
    return parse_devices(payload.get("devices")), parse_connections(payload.get("connections")), demo


def topology_payload(topology: Topology, *, demo: bool, source: str) -> Dict[str, Any]:
    data = topology.to_dict()
    for node_dict, node in zip(data["nodes"], topology.nodes):
        node_dict["displayRole"] = display_role(node.data.role, node.category)
    data["metadata"] = {
        "generated_at": datetime.now().isoformat(),
        "demo": demo,
        "source": source,
        **summarize_topology(topology),
    }
    return data


def build_topology_response(payload: Any, *, source: str = "api") -> Dict[str, Any]:
    """Parse an inventory payload and return the renderer-ready topology dict.

    Raises DeviceValidationError for malformed input.
    """
    devices, connections, demo = parse_inventory(payload)
    topology = build_topology(devices, connections=connections, demo=demo)
    return topology_payload(topology, demo=demo or not devices, source=source)
