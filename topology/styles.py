"""Edge presentation policy, keyed by connection type.

Kept apart from the classification enum; the two only meet when the pipeline
turns connections into drawable edges.
"""

from typing import Any, Dict

EDGE_STYLES: Dict[str, Dict[str, Any]] = {
    "wired": {"strokeWidth": 2, "stroke": "#3b82f6"},  # blue
    "wireless": {"strokeWidth": 2, "stroke": "#8b5cf6", "strokeDasharray": "5,5"},  # purple
    "vpn": {"strokeWidth": 2, "stroke": "#10b981", "strokeDasharray": "10,5"},  # green
    "unknown": {"strokeWidth": 1.5, "stroke": "#64748b"},  # slate
}


def edge_style(connection_type: str) -> Dict[str, Any]:
    """Style for a connection type; anything unrecognised draws as `unknown`."""
    return dict(EDGE_STYLES.get(connection_type, EDGE_STYLES["unknown"]))
