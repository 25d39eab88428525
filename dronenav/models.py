"""Dataclasses describing positions, regions and per-request inputs.

Fields are ``Optional`` because absent values are legal on the wire and are
rejected later by :mod:`dronenav.validation`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class Position:
    """A point in degree space. Equality is exact on both coordinates."""

    lng: Optional[float]
    lat: Optional[float]

    def to_dict(self) -> dict[str, Optional[float]]:
        return {"lng": self.lng, "lat": self.lat}


@dataclass(frozen=True, slots=True)
class Region:
    """Named polygon whose vertex list repeats the first vertex at the end."""

    name: Optional[str]
    vertices: Optional[Tuple[Optional[Position], ...]]


@dataclass(frozen=True, slots=True)
class DistanceRequest:
    position1: Optional[Position]
    position2: Optional[Position]


@dataclass(frozen=True, slots=True)
class NextPositionRequest:
    start: Optional[Position]
    angle: Optional[float]


@dataclass(frozen=True, slots=True)
class RegionRequest:
    position: Optional[Position]
    region: Optional[Region]
