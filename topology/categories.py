"""Device classification into the fixed set of visual categories."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class DeviceCategory(str, Enum):
    ROUTER = "router"
    FIREWALL = "firewall"
    SWITCH = "switch"
    SERVER = "server"
    WORKSTATION = "workstation"
    PRINTER = "printer"
    ACCESS_POINT = "accessPoint"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


# Exact matches on the lower-cased device type; no fuzzy matching.
DEVICE_TYPE_CATEGORIES: Dict[str, DeviceCategory] = {
    "router": DeviceCategory.ROUTER,
    "firewall": DeviceCategory.FIREWALL,
    "switch": DeviceCategory.SWITCH,
    "server": DeviceCategory.SERVER,
    "workstation": DeviceCategory.WORKSTATION,
    "printer": DeviceCategory.PRINTER,
    "access point": DeviceCategory.ACCESS_POINT,
}

GATEWAY_CATEGORIES = frozenset({DeviceCategory.ROUTER, DeviceCategory.FIREWALL})


def classify(device_type: Optional[str]) -> DeviceCategory:
    """Map a free-text device type to a DeviceCategory. Never raises."""
    if not isinstance(device_type, str):
        return DeviceCategory.UNKNOWN
    return DEVICE_TYPE_CATEGORIES.get(device_type.lower(), DeviceCategory.UNKNOWN)


def is_gateway(category: DeviceCategory) -> bool:
    return category in GATEWAY_CATEGORIES


@dataclass(frozen=True)
class CategoryProfile:
    """How the renderer should present a category (label, fallback role, icon, accent)."""

    label: str
    default_role: str
    icon: str
    color: str


CATEGORY_PROFILES: Dict[DeviceCategory, CategoryProfile] = {
    DeviceCategory.ROUTER: CategoryProfile("Router", "Network Gateway", "router", "#1e40af"),
    DeviceCategory.FIREWALL: CategoryProfile("Firewall", "Security Device", "shield", "#9a3412"),
    DeviceCategory.SWITCH: CategoryProfile("Switch", "Network Switch", "network", "#166534"),
    DeviceCategory.SERVER: CategoryProfile("Server", "Application Server", "server", "#6b21a8"),
    DeviceCategory.WORKSTATION: CategoryProfile("Workstation", "User Computer", "monitor", "#334155"),
    DeviceCategory.PRINTER: CategoryProfile("Printer", "Printing Device", "printer", "#991b1b"),
    DeviceCategory.ACCESS_POINT: CategoryProfile("Access Point", "Wireless Access", "wifi", "#155e75"),
    DeviceCategory.UNKNOWN: CategoryProfile("Unknown", "Unknown Device", "cpu", "#374151"),
}


def display_role(role: Optional[str], category: DeviceCategory) -> str:
    """Role text shown on a node: the device's own role, else the category default."""
    if role:
        return role
    return CATEGORY_PROFILES[category].default_role


def category_profiles_as_list():
    return [
        {
            "category": category.value,
            "label": profile.label,
            "default_role": profile.default_role,
            "icon": profile.icon,
            "color": profile.color,
        }
        for category, profile in CATEGORY_PROFILES.items()
    ]
