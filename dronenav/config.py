"""Central configuration for the drone navigation geometry service.

All values are constants imported by the rest of the package. Overrides are
read from environment variables (optionally via a local `.env`).
"""

from __future__ import annotations

import math
import os

from dotenv import load_dotenv


def _env_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        number = float(value)
    except ValueError:
        return default
    return number if math.isfinite(number) else default


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


# Load .env from the current directory or any parent folder.
load_dotenv()


# ---------------------------------------------------------------------------
# HTTP service
# ---------------------------------------------------------------------------
# Interface and port the CLI binds to.
HOST = os.getenv("DRONENAV_HOST", "0.0.0.0")
PORT = _env_int("DRONENAV_PORT", 8080)

# External ILP REST service linked from the welcome page.
SERVICE_URL = os.getenv("ILP_SERVICE_URL", "https://ilp-rest-2024.azurewebsites.net/")

# Static identifier returned by the /uid endpoint.
SERVICE_UID = os.getenv("DRONENAV_UID", "s2550230")

# Root logger level used by the CLI when it installs handlers.
LOG_LEVEL = os.getenv("DRONENAV_LOG_LEVEL", "INFO")


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------
# Two positions are "close" when their distance (degrees) is strictly below this.
CLOSE_THRESHOLD = _env_float("DRONENAV_CLOSE_THRESHOLD", 0.00015)

# Length (degrees) of a single drone move.
STEP_SIZE = _env_float("DRONENAV_STEP_SIZE", 0.00015)

# Valid move angles are multiples of this value in [0, 360).
ANGLE_GRANULARITY = 22.5

# Cross-product tolerance for treating a point as lying on a polygon edge.
# Vertex membership and polygon closure still use exact comparison.
EDGE_TOLERANCE = _env_float("DRONENAV_EDGE_TOLERANCE", 1e-12)

# A closed polygon needs three distinct vertices plus the closing duplicate.
MIN_REGION_VERTICES = 4
