#!/usr/bin/env python3
"""
NetTopo Topology CLI
====================

Build a laid-out topology from a device inventory file:

1. Classify every device (router, firewall, switch, server, ...)
2. Infer links when the inventory carries no wiring
3. Place devices in tiers and print a summary

The inventory is JSON: either a list of devices, or an object with
"devices" and optional "connections".

Usage:
    python topology_cli.py inventory.json
    python topology_cli.py inventory.json --output topology.json
    python topology_cli.py --demo
"""

import json
import sys
from typing import Any, Dict

from models import DeviceValidationError
from services.topology_service import build_topology_response

EXIT_INVALID_INVENTORY = 2
EXIT_OUTPUT_FAILED = 3


# Color output
class Colors:
    RED = '\033[91m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    RESET = '\033[0m'
    BOLD = '\033[1m'


def print_header(text: str):
    print(f"\n{Colors.CYAN}{'='*60}")
    print(f"  {text}")
    print(f"{'='*60}{Colors.RESET}\n")


def print_success(text: str):
    print(f"{Colors.GREEN}  ✓ {text}{Colors.RESET}")


def print_warning(text: str):
    print(f"{Colors.YELLOW}  ⚠ {text}{Colors.RESET}")


def print_error(text: str):
    print(f"{Colors.RED}  ✗ {text}{Colors.RESET}")


def print_info(text: str):
    print(f"{Colors.BLUE}  → {text}{Colors.RESET}")


def load_inventory(path: str) -> Any:
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def print_summary(result: Dict[str, Any]):
    meta = result["metadata"]
    print_header("TOPOLOGY SUMMARY")
    if meta["demo"]:
        print_warning("No devices in inventory, showing demo topology")
    print(f"  {Colors.BOLD}Devices:{Colors.RESET} {meta['node_count']}")
    print(f"  {Colors.BOLD}Links:{Colors.RESET} {meta['edge_count']}")
    print(f"  {Colors.BOLD}Gateways:{Colors.RESET} {', '.join(meta['gateways']) or 'none'}")
    print(f"  {Colors.BOLD}Categories:{Colors.RESET}")
    for category, count in meta["categories"].items():
        if count:
            print(f"    {category}: {count}")

    # Group by row for a rough picture of the tiers
    rows: Dict[float, list] = {}
    for node in result["nodes"]:
        rows.setdefault(node["position"]["y"], []).append(node)
    print(f"  {Colors.BOLD}Layout:{Colors.RESET}")
    for y in sorted(rows):
        names = [n["data"].get("name") or n["id"] for n in sorted(rows[y], key=lambda n: n["position"]["x"])]
        print(f"    y={y:g}: {' | '.join(names)}")

    bounds = meta["bounds"]
    print(f"  {Colors.BOLD}Bounds:{Colors.RESET} {bounds['width']:g} x {bounds['height']:g}")
    for edge in result["edges"]:
        label = f" ({edge['label']})" if edge["label"] else ""
        print(f"    {edge['source']} → {edge['target']} [{edge['category']}]{label}")


def main(argv=None) -> int:
    import argparse
    parser = argparse.ArgumentParser(description='NetTopo Topology CLI')
    parser.add_argument('inventory', nargs='?', default=None, help='Device inventory JSON file')
    parser.add_argument('--demo', action='store_true', help='Use the demo topology')
    parser.add_argument('--output', '-o', default=None, help='Output JSON file')
    parser.add_argument('--no-infer', action='store_true',
                        help='Use only the connections listed in the inventory')
    args = parser.parse_args(argv)

    if not args.inventory and not args.demo:
        parser.print_help()
        return 0

    payload: Any = {"devices": [], "demo": True}
    if args.inventory:
        print_info(f"Loading {args.inventory}")
        try:
            payload = load_inventory(args.inventory)
        except (OSError, ValueError) as e:
            print_error(f"Could not read {args.inventory}: {e}")
            return EXIT_INVALID_INVENTORY
        if isinstance(payload, list):
            payload = {"devices": payload}
        if isinstance(payload, dict):
            if args.demo:
                payload = dict(payload, demo=True)
            if args.no_infer and payload.get("connections") is None:
                payload = dict(payload, connections=[])

    try:
        result = build_topology_response(payload, source="cli")
    except DeviceValidationError as e:
        print_error(f"Invalid inventory: {e}")
        return EXIT_INVALID_INVENTORY

    print_summary(result)

    if args.output:
        try:
            with open(args.output, 'w', encoding='utf-8') as f:
                json.dump(result, f, indent=2)
        except OSError as e:
            print_error(f"Could not write {args.output}: {e}")
            return EXIT_OUTPUT_FAILED
        print_success(f"Saved to {args.output}")

    print()
    return 0


if __name__ == '__main__':
    sys.exit(main())
