#!/usr/bin/env python3
"""
NetTopo - Network Topology Service
Entry point: configures logging and runs the Flask/Socket.IO app.
"""

import logging

import config
import server
from topology import generate_demo_topology, summarize_topology


def configure_logging(level: str = config.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="NetTopo - Network Topology Server")
    parser.add_argument("--host", default=config.HOST, help="Host to bind to")
    parser.add_argument("--port", type=int, default=config.PORT, help="Port to bind to")
    parser.add_argument("--demo", action="store_true", help="Print the demo topology summary on startup")
    args = parser.parse_args()

    configure_logging()
    if args.demo:
        summary = summarize_topology(generate_demo_topology())
        print(f"Demo topology: {summary['node_count']} devices, {summary['edge_count']} links")
    print(f"Starting NetTopo server on {args.host}:{args.port}")
    print(f"API key required: {bool(config.API_KEY)}")
    print(f"Debug: {config.DEBUG}")
    server.socketio.run(
        server.app,
        host=args.host,
        port=args.port,
        debug=config.DEBUG,
        allow_unsafe_werkzeug=config.DEBUG,
    )
