"""Position service.

Runs validation before every geometry computation so callers never see a
partial result for bad input. Thresholds and the logger are injected via
:class:`PositionServiceConfig` instead of being read from module globals.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional

from ..config import CLOSE_THRESHOLD, EDGE_TOLERANCE, STEP_SIZE
from ..geometry import (
    calculate_distance,
    calculate_next_position,
    is_close_to,
    is_in_region,
)
from ..models import DistanceRequest, NextPositionRequest, Position, RegionRequest
from ..validation import validate_distance, validate_next_position, validate_region


@dataclass(frozen=True, slots=True)
class PositionServiceConfig:
    close_threshold: float = CLOSE_THRESHOLD
    step_size: float = STEP_SIZE
    edge_tolerance: float = EDGE_TOLERANCE
    logger: logging.Logger | None = None


class PositionService:
    def __init__(self, config: PositionServiceConfig | None = None):
        self.config = config or PositionServiceConfig()
        self._log = self.config.logger or logging.getLogger(self.__class__.__name__)

    def distance(self, request: Optional[DistanceRequest]) -> float:
        validate_distance(request)
        result = calculate_distance(request.position1, request.position2)
        self._log.debug(
            "distance %s -> %s = %s", request.position1, request.position2, result
        )
        return result

    def is_close(
        self, request: Optional[DistanceRequest], threshold: float | None = None
    ) -> bool:
        """Return True when the request's positions are closer than the threshold.

        ``threshold`` defaults to the configured ``close_threshold``.
        """

        validate_distance(request)
        limit = self.config.close_threshold if threshold is None else threshold
        result = is_close_to(request.position1, request.position2, limit)
        self._log.debug("isCloseTo threshold=%s -> %s", limit, result)
        return result

    def next_position(self, request: Optional[NextPositionRequest]) -> Position:
        validate_next_position(request)
        result = calculate_next_position(
            request.start, request.angle, self.config.step_size
        )
        self._log.debug(
            "nextPosition from %s at %s deg -> %s", request.start, request.angle, result
        )
        return result

    def in_region(self, request: Optional[RegionRequest]) -> bool:
        validate_region(request)
        result = is_in_region(
            request.position, request.region.vertices, self.config.edge_tolerance
        )
        self._log.debug(
            "isInRegion %s in region '%s' (%d vertices) -> %s",
            request.position,
            request.region.name,
            len(request.region.vertices),
            result,
        )
        return result
