"""Decode JSON request bodies into request dataclasses.

Only the *shape* of the JSON is checked here: objects where objects are
expected, numbers where numbers are expected. Missing fields decode to
``None`` and are left for :mod:`dronenav.validation` to reject.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from .errors import MalformedRequestError
from .models import (
    DistanceRequest,
    NextPositionRequest,
    Position,
    Region,
    RegionRequest,
)


def _as_object(value: Any, label: str) -> Optional[Mapping[str, Any]]:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise MalformedRequestError(f"{label} must be a JSON object")
    return value


def _as_number(value: Any, label: str) -> Optional[float]:
    if value is None:
        return None
    # bool is an int subclass; JSON true/false is not a coordinate.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedRequestError(f"{label} must be a number, got {value!r}")
    try:
        number = float(value)
    except OverflowError as exc:
        raise MalformedRequestError(f"{label} is out of range, got {value!r}") from exc
    if not math.isfinite(number):
        raise MalformedRequestError(f"{label} must be finite, got {value!r}")
    return number


def parse_position(value: Any, label: str = "position") -> Optional[Position]:
    data = _as_object(value, label)
    if data is None:
        return None
    return Position(
        lng=_as_number(data.get("lng"), f"{label}.lng"),
        lat=_as_number(data.get("lat"), f"{label}.lat"),
    )


def parse_region(value: Any) -> Optional[Region]:
    data = _as_object(value, "region")
    if data is None:
        return None
    name = data.get("name")
    if name is not None and not isinstance(name, str):
        raise MalformedRequestError("region.name must be a string")
    raw_vertices = data.get("vertices")
    vertices = None
    if raw_vertices is not None:
        if not isinstance(raw_vertices, list):
            raise MalformedRequestError("region.vertices must be a JSON array")
        vertices = tuple(
            parse_position(item, f"region.vertices[{index}]")
            for index, item in enumerate(raw_vertices)
        )
    return Region(name=name, vertices=vertices)


def parse_distance_request(body: Any) -> Optional[DistanceRequest]:
    data = _as_object(body, "request body")
    if data is None:
        return None
    return DistanceRequest(
        position1=parse_position(data.get("position1"), "position1"),
        position2=parse_position(data.get("position2"), "position2"),
    )


def parse_next_position_request(body: Any) -> Optional[NextPositionRequest]:
    data = _as_object(body, "request body")
    if data is None:
        return None
    return NextPositionRequest(
        start=parse_position(data.get("start"), "start"),
        angle=_as_number(data.get("angle"), "angle"),
    )


def parse_region_request(body: Any) -> Optional[RegionRequest]:
    data = _as_object(body, "request body")
    if data is None:
        return None
    return RegionRequest(
        position=parse_position(data.get("position"), "position"),
        region=parse_region(data.get("region")),
    )
