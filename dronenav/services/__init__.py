"""Service layer package.

Exports high-level services consumed by the HTTP layer.
"""

from .position_service import PositionService, PositionServiceConfig

__all__ = ["PositionService", "PositionServiceConfig"]
