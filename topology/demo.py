"""Fixed demo topology: a small office network with explicit wiring.

Shown when an assessment has no device inventory yet, and used as the
reference fixture for rendering tests.
"""

from __future__ import annotations

from typing import List

from models import NetworkConnection, NetworkDevice, Topology
from topology.builder import build_edges, build_nodes
from topology.layout import apply_layout

DEMO_SWITCH_ID = "device-3"


def demo_devices() -> List[NetworkDevice]:
    return [
        NetworkDevice(id="device-1", name="Main Firewall", device_type="Firewall",
                      ip_address="192.168.1.1", model="Cisco ASA 5506-X", role="Network Security"),
        NetworkDevice(id="device-2", name="Core Router", device_type="Router",
                      ip_address="192.168.1.2", model="Cisco 4321", role="Internet Gateway"),
        NetworkDevice(id="device-3", name="Main Switch", device_type="Switch",
                      ip_address="192.168.1.3", model="Cisco Catalyst 2960", role="Network Distribution"),
        NetworkDevice(id="device-4", name="File Server", device_type="Server",
                      ip_address="192.168.1.10", model="Dell PowerEdge R740", role="File Storage"),
        NetworkDevice(id="device-5", name="Database Server", device_type="Server",
                      ip_address="192.168.1.11", model="Dell PowerEdge R740", role="Database"),
        NetworkDevice(id="device-6", name="Workstation 1", device_type="Workstation",
                      ip_address="192.168.1.101", model="Dell OptiPlex 7080", role="Employee Desktop"),
        NetworkDevice(id="device-7", name="Workstation 2", device_type="Workstation",
                      ip_address="192.168.1.102", model="Dell OptiPlex 7080", role="Employee Desktop"),
        NetworkDevice(id="device-8", name="Office Printer", device_type="Printer",
                      ip_address="192.168.1.201", model="HP LaserJet Pro M404n", role="Document Printing"),
        NetworkDevice(id="device-9", name="WiFi Access Point", device_type="Access Point",
                      ip_address="192.168.1.250", model="Ubiquiti UniFi AP-AC-Pro", role="Wireless Access"),
    ]


def demo_connections() -> List[NetworkConnection]:
    # firewall -> router -> switch, then the switch fans out to every leaf
    links = [("device-1", "device-2"), ("device-2", DEMO_SWITCH_ID)]
    links += [(DEMO_SWITCH_ID, f"device-{n}") for n in range(4, 10)]
    return [
        NetworkConnection(source=src, target=dst, connection_type="wired", bandwidth="1 Gbps")
        for src, dst in links
    ]


def generate_demo_topology() -> Topology:
    nodes = apply_layout(build_nodes(demo_devices()))
    edges = build_edges(demo_connections())
    return Topology(nodes=nodes, edges=edges)
