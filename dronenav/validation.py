"""Input validation for every geometry operation.

Validators return ``None`` for acceptable input and raise a
:class:`~dronenav.errors.ValidationError` subclass otherwise. Checks run in a
fixed order so the first problem found is the one reported.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from .config import ANGLE_GRANULARITY, MIN_REGION_VERTICES
from .errors import (
    InvalidAngleError,
    InvalidVertexCountError,
    MissingCoordinateError,
    MissingPositionError,
    MissingRegionError,
    MissingRequestError,
    UnclosedPolygonError,
    ValidationError,
)
from .models import DistanceRequest, NextPositionRequest, Position, RegionRequest


def validate_position(position: Optional[Position]) -> None:
    if position is None:
        raise MissingPositionError("position is missing")
    if position.lng is None or position.lat is None:
        raise MissingCoordinateError("lng or lat is missing")


def _validate_labelled(position: Optional[Position], label: str) -> None:
    """Validate ``position`` and prefix any failure message with ``label``."""

    try:
        validate_position(position)
    except ValidationError as exc:
        raise type(exc)(f"{label}: {exc}") from None


def validate_distance(request: Optional[DistanceRequest]) -> None:
    if request is None:
        raise MissingRequestError("distance request is missing")
    _validate_labelled(request.position1, "position1")
    _validate_labelled(request.position2, "position2")


def validate_next_position(request: Optional[NextPositionRequest]) -> None:
    """Check the start position and that the angle is a legal compass move.

    Legal angles lie in ``[0, 360)`` and are exact multiples of 22.5 degrees.
    """

    if request is None:
        raise MissingRequestError("next position request is missing")
    _validate_labelled(request.start, "start")
    angle = request.angle
    if angle is None:
        raise InvalidAngleError("angle is missing")
    if angle < 0 or angle >= 360:
        raise InvalidAngleError(f"angle out of range: {angle}")
    if angle % ANGLE_GRANULARITY != 0:
        raise InvalidAngleError(
            f"angle not a multiple of {ANGLE_GRANULARITY}: {angle}"
        )


def validate_region(request: Optional[RegionRequest]) -> None:
    """Check the tested position and that the region is a closed polygon.

    Vertex problems are reported with the offending index. Closure compares
    the first and last vertex coordinates exactly.
    """

    if request is None:
        raise MissingRequestError("region request is missing")
    _validate_labelled(request.position, "position")
    region = request.region
    if region is None:
        raise MissingRegionError("region is missing")
    if not region.name:
        raise MissingRegionError("region name is missing")
    vertices = region.vertices
    if not vertices:
        raise MissingRegionError("region vertices are missing")
    for index, vertex in enumerate(vertices):
        _validate_labelled(vertex, f"vertex {index}")
    if len(vertices) < MIN_REGION_VERTICES:
        raise InvalidVertexCountError(
            f"too few vertices: {len(vertices)} (need at least {MIN_REGION_VERTICES})"
        )
    first, last = vertices[0], vertices[-1]
    if first.lng != last.lng or first.lat != last.lat:
        raise UnclosedPolygonError("polygon not closed: first and last vertices differ")


def validation_error(
    validator: Callable[[Any], None], request: Any
) -> Optional[str]:
    """Return the failure message from ``validator`` or ``None`` if valid."""

    try:
        validator(request)
    except ValidationError as exc:
        return str(exc)
    return None
