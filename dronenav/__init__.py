"""Drone navigation geometry service package."""

from .app import create_app
from .errors import ValidationError
from .models import (
    DistanceRequest,
    NextPositionRequest,
    Position,
    Region,
    RegionRequest,
)
from .services import PositionService, PositionServiceConfig

__all__ = [
    "create_app",
    "ValidationError",
    "DistanceRequest",
    "NextPositionRequest",
    "Position",
    "Region",
    "RegionRequest",
    "PositionService",
    "PositionServiceConfig",
]
