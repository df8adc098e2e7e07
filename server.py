#!/usr/bin/env python3
"""
NetTopo - Network Topology Service
Backend server that turns assessment device inventories into laid-out topology graphs
"""

import logging
from datetime import datetime

from flask import Flask, jsonify, request
from flask_cors import CORS
from flask_socketio import SocketIO

import config
from models import CONNECTION_TYPES, DeviceValidationError
from services.topology_service import build_topology_response, topology_payload
from topology import generate_demo_topology
from topology.categories import DeviceCategory, category_profiles_as_list
from topology.layout import HORIZONTAL_SPACING, VERTICAL_SPACING, WORKSTATIONS_PER_ROW
from topology.styles import EDGE_STYLES

logger = logging.getLogger(__name__)

SERVICE_NAME = "nettopo"
SERVICE_VERSION = "1.0.0"

app = Flask(__name__)
CORS(app)
socketio = SocketIO(app, cors_allowed_origins="*", async_mode='threading')
API_KEY = config.API_KEY


@app.before_request
def enforce_optional_api_key():
    """Optional API key guard. Disabled when NETTOPO_API_KEY is unset."""
    if not API_KEY:
        return None
    # Keep status readable without auth to simplify local diagnostics.
    if request.path == "/api/status":
        return None
    provided = request.headers.get("X-API-Key", "")
    if provided != API_KEY:
        return jsonify({"error": "Unauthorized"}), 401
    return None


def _topology_from_request(source: str):
    payload = request.get_json(silent=True)
    if payload is None:
        return None, (jsonify({"error": "Request body must be JSON"}), 400)
    try:
        return build_topology_response(payload, source=source), None
    except DeviceValidationError as exc:
        return None, (jsonify({"error": str(exc)}), 400)
    except Exception as exc:
        logger.exception("Topology build failed")
        return None, (jsonify({"error": str(exc)}), 500)


# REST API Endpoints
@app.route('/api/status', methods=['GET'])
def get_status():
    """Get service status"""
    return jsonify({
        'service': SERVICE_NAME,
        'version': SERVICE_VERSION,
        'time': datetime.now().isoformat(),
        'categories': [c.value for c in DeviceCategory],
        'connection_types': list(CONNECTION_TYPES),
        'layout': {
            'horizontal_spacing': HORIZONTAL_SPACING,
            'vertical_spacing': VERTICAL_SPACING,
            'workstations_per_row': WORKSTATIONS_PER_ROW,
        },
        'api_key_enabled': bool(API_KEY),
    })


@app.route('/api/topology/demo', methods=['GET'])
def get_demo_topology():
    """Fixed demo topology for assessments without an inventory"""
    return jsonify(topology_payload(generate_demo_topology(), demo=True, source="demo"))


@app.route('/api/topology', methods=['POST'])
def create_topology():
    """Build a topology from a device inventory"""
    data, error = _topology_from_request("api")
    if error is not None:
        return error
    return jsonify(data)


@app.route('/api/topology/regenerate', methods=['POST'])
def regenerate_topology():
    """Rebuild the topology and push it to connected viewers"""
    data, error = _topology_from_request("regenerate")
    if error is not None:
        return error
    socketio.emit('topology_update', data)
    return jsonify(data)


@app.route('/api/topology/categories', methods=['GET'])
def get_categories():
    """Category presentation profiles and edge styles for the renderer"""
    return jsonify({
        'categories': category_profiles_as_list(),
        'edge_styles': EDGE_STYLES,
    })


if __name__ == '__main__':
    import argparse
    parser = argparse.ArgumentParser(description='NetTopo - Network Topology Server')
    parser.add_argument('--host', default=config.HOST, help='Host to bind to')
    parser.add_argument('--port', type=int, default=config.PORT, help='Port to bind to')
    args = parser.parse_args()

    print(f"Starting NetTopo server on {args.host}:{args.port}")
    socketio.run(
        app,
        host=args.host,
        port=args.port,
        debug=config.DEBUG,
        allow_unsafe_werkzeug=config.DEBUG,
    )
