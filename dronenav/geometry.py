"""Flat-plane geometry on (lng, lat) degree coordinates.

Functions here assume validated input: every position carries both
coordinates and regions are closed polygons. Distances are plain Euclidean
norms in degree space, which is accurate enough at the scale of a single
drone flight.
"""

from __future__ import annotations

import math
from typing import Sequence

from .config import CLOSE_THRESHOLD, EDGE_TOLERANCE, STEP_SIZE
from .models import Position


def calculate_distance(position1: Position, position2: Position) -> float:
    """Return the Euclidean distance between two positions in degrees."""

    lng_delta = position1.lng - position2.lng
    lat_delta = position1.lat - position2.lat
    return math.hypot(lng_delta, lat_delta)


def is_close_to(
    position1: Position, position2: Position, threshold: float = CLOSE_THRESHOLD
) -> bool:
    """Return True when the positions are strictly closer than ``threshold``."""

    return calculate_distance(position1, position2) < threshold


def calculate_next_position(
    start: Position, angle: float, step_size: float = STEP_SIZE
) -> Position:
    """Move ``step_size`` degrees from ``start`` along a compass ``angle``.

    Angles run counter-clockwise from East: 0 = East, 90 = North,
    180 = West, 270 = South. Cosine drives longitude and sine latitude.
    """

    radians = math.radians(angle)
    return Position(
        lng=start.lng + step_size * math.cos(radians),
        lat=start.lat + step_size * math.sin(radians),
    )


def _on_edge(
    position: Position, current: Position, previous: Position, tolerance: float
) -> bool:
    x, y = position.lng, position.lat
    cross = (y - current.lat) * (previous.lng - current.lng) - (
        previous.lat - current.lat
    ) * (x - current.lng)
    if abs(cross) >= tolerance:
        return False
    return (
        min(current.lng, previous.lng) - tolerance
        <= x
        <= max(current.lng, previous.lng) + tolerance
        and min(current.lat, previous.lat) - tolerance
        <= y
        <= max(current.lat, previous.lat) + tolerance
    )


def is_in_region(
    position: Position,
    vertices: Sequence[Position],
    tolerance: float = EDGE_TOLERANCE,
) -> bool:
    """Return True if ``position`` is inside or on the border of the polygon.

    Uses ray casting with the even-odd rule: a horizontal ray is cast towards
    increasing longitude and each edge it crosses flips the inside state.
    Points equal to a vertex (exact comparison) or lying on an edge (within
    ``tolerance`` of the edge line) count as inside regardless of parity.
    """

    if position in vertices:
        return True

    x, y = position.lng, position.lat
    crossings = 0
    previous = vertices[-1]
    for current in vertices:
        if _on_edge(position, current, previous, tolerance):
            return True
        # Horizontal and zero-length edges never straddle, so the division
        # below only runs when previous.lat != current.lat.
        if (y < current.lat) != (y < previous.lat):
            x_intersect = current.lng + (y - current.lat) / (
                previous.lat - current.lat
            ) * (previous.lng - current.lng)
            if x < x_intersect:
                crossings += 1
        previous = current
    return crossings % 2 == 1
