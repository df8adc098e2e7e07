"""
NetTopo runtime configuration.
Read once from the environment at import time.
"""

import os


def _env_flag(name: str) -> bool:
    return str(os.environ.get(name, "")).strip().lower() in ("1", "true", "yes", "on")


API_KEY = os.environ.get("NETTOPO_API_KEY", "").strip()
DEBUG = _env_flag("NETTOPO_DEBUG")
LOG_LEVEL = os.environ.get("NETTOPO_LOG_LEVEL", "INFO").strip().upper() or "INFO"
HOST = os.environ.get("NETTOPO_HOST", "0.0.0.0")

try:
    PORT = int(os.environ.get("NETTOPO_PORT", "5001"))
except ValueError:
    PORT = 5001
