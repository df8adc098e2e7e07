"""
NetTopo data models.
Dataclasses for devices, connections, and the visual nodes/edges handed to the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from topology.categories import DeviceCategory


CONNECTION_TYPES = ("wired", "wireless", "vpn", "unknown")

_DEVICE_STRING_FIELDS = {
    "id": "id",
    "ipAddress": "ip_address",
    "macAddress": "mac_address",
    "model": "model",
    "manufacturer": "manufacturer",
    "role": "role",
    "location": "location",
    "lastSeen": "last_seen",
}


class DeviceValidationError(ValueError):
    """Raised when an external device or connection record is malformed."""


def _optional_str(record: dict, key: str, kind: str) -> Optional[str]:
    value = record.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise DeviceValidationError(f"{kind} field '{key}' must be a string")
    return value


def _str_list(record: dict, key: str, kind: str) -> List[str]:
    value = record.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise DeviceValidationError(f"{kind} field '{key}' must be a list of strings")
    return list(value)


def _optional_bool(record: dict, key: str, kind: str) -> Optional[bool]:
    value = record.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise DeviceValidationError(f"{kind} field '{key}' must be a boolean")
    return value


@dataclass
class NetworkDevice:
    """A discovered or manually entered network endpoint."""

    name: str = ""
    device_type: str = ""
    id: Optional[str] = None
    ip_address: Optional[str] = None
    mac_address: Optional[str] = None
    model: Optional[str] = None
    manufacturer: Optional[str] = None
    role: Optional[str] = None
    location: Optional[str] = None
    is_online: Optional[bool] = None
    last_seen: Optional[str] = None  # ISO timestamp
    services: List[str] = field(default_factory=list)
    vulnerabilities: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, record: Any) -> "NetworkDevice":
        """Parse one device record using the assessment tool's camelCase keys."""
        if not isinstance(record, dict):
            raise DeviceValidationError("Device record must be an object")

        name = record.get("name")
        if name is None:
            name = ""
        elif not isinstance(name, str):
            raise DeviceValidationError("Device field 'name' must be a string")

        device_type = record.get("deviceType")
        if device_type is None:
            device_type = ""
        elif not isinstance(device_type, str):
            raise DeviceValidationError("Device field 'deviceType' must be a string")

        kwargs = {attr: _optional_str(record, key, "Device") for key, attr in _DEVICE_STRING_FIELDS.items()}
        return cls(
            name=name,
            device_type=device_type,
            is_online=_optional_bool(record, "isOnline", "Device"),
            services=_str_list(record, "services", "Device"),
            vulnerabilities=_str_list(record, "vulnerabilities", "Device"),
            **kwargs,
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"name": self.name, "deviceType": self.device_type}
        for key, attr in _DEVICE_STRING_FIELDS.items():
            value = getattr(self, attr)
            if value is not None:
                out[key] = value
        if self.is_online is not None:
            out["isOnline"] = self.is_online
        out["services"] = list(self.services)
        out["vulnerabilities"] = list(self.vulnerabilities)
        return out


@dataclass
class NetworkConnection:
    """An inferred or explicit link between two devices."""

    source: str
    target: str
    id: Optional[str] = None
    connection_type: str = "unknown"  # wired, wireless, vpn, unknown
    bandwidth: Optional[str] = None
    is_active: bool = True
    latency: Optional[float] = None
    protocol: Optional[str] = None

    @classmethod
    def from_dict(cls, record: Any) -> "NetworkConnection":
        if not isinstance(record, dict):
            raise DeviceValidationError("Connection record must be an object")

        source = record.get("source")
        target = record.get("target")
        if not isinstance(source, str) or not source:
            raise DeviceValidationError("Connection field 'source' must be a non-empty string")
        if not isinstance(target, str) or not target:
            raise DeviceValidationError("Connection field 'target' must be a non-empty string")

        connection_type = record.get("connectionType") or "unknown"
        if connection_type not in CONNECTION_TYPES:
            raise DeviceValidationError(f"Unknown connectionType: {connection_type}")

        latency = record.get("latency")
        if latency is not None and (isinstance(latency, bool) or not isinstance(latency, (int, float))):
            raise DeviceValidationError("Connection field 'latency' must be a number")

        is_active = _optional_bool(record, "isActive", "Connection")
        return cls(
            source=source,
            target=target,
            id=_optional_str(record, "id", "Connection"),
            connection_type=connection_type,
            bandwidth=_optional_str(record, "bandwidth", "Connection"),
            is_active=True if is_active is None else is_active,
            latency=float(latency) if latency is not None else None,
            protocol=_optional_str(record, "protocol", "Connection"),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "source": self.source,
            "target": self.target,
            "connectionType": self.connection_type,
            "isActive": self.is_active,
        }
        if self.id is not None:
            out["id"] = self.id
        if self.bandwidth is not None:
            out["bandwidth"] = self.bandwidth
        if self.latency is not None:
            out["latency"] = self.latency
        if self.protocol is not None:
            out["protocol"] = self.protocol
        return out


@dataclass(frozen=True)
class Position:
    x: float = 0.0
    y: float = 0.0


@dataclass
class VisualNode:
    """A device placed on the canvas. `category` is a DeviceCategory value."""

    id: str
    category: DeviceCategory
    position: Position
    data: NetworkDevice

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "category": str(self.category),
            "position": {"x": self.position.x, "y": self.position.y},
            "data": self.data.to_dict(),
        }


@dataclass
class VisualEdge:
    """A connection ready for drawing, with its presentation style attached."""

    id: str
    source: str
    target: str
    category: str
    label: str = ""
    animated: bool = True
    style: Dict[str, Any] = field(default_factory=dict)
    data: Optional[NetworkConnection] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "source": self.source,
            "target": self.target,
            "category": self.category,
            "label": self.label,
            "animated": self.animated,
            "style": dict(self.style),
            "data": self.data.to_dict() if self.data is not None else {},
        }


@dataclass
class Topology:
    """The node/edge pair handed to the renderer."""

    nodes: List[VisualNode] = field(default_factory=list)
    edges: List[VisualEdge] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }
