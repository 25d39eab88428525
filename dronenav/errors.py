"""Central error types used across the application.

Every error here describes bad client input. They are raised before any
computation happens and the HTTP layer answers all of them with an empty
400 response.
"""

from __future__ import annotations


class ValidationError(ValueError):
    """Base error for requests that cannot be evaluated."""


class MissingRequestError(ValidationError):
    """Raised when the request body itself is absent."""


class MissingPositionError(ValidationError):
    """Raised when a required position is absent."""


class MissingCoordinateError(ValidationError):
    """Raised when a position lacks its longitude or latitude."""


class MissingRegionError(ValidationError):
    """Raised when the region, its name, or its vertex list is absent."""


class InvalidVertexCountError(ValidationError):
    """Raised when a region has fewer vertices than a closed polygon needs."""


class UnclosedPolygonError(ValidationError):
    """Raised when a region's first and last vertices differ."""


class InvalidAngleError(ValidationError):
    """Raised when an angle is missing, out of range, or off the 22.5° grid."""


class MalformedRequestError(ValidationError):
    """Raised when a body is not valid JSON or has the wrong JSON types."""


__all__ = [
    "ValidationError",
    "MissingRequestError",
    "MissingPositionError",
    "MissingCoordinateError",
    "MissingRegionError",
    "InvalidVertexCountError",
    "UnclosedPolygonError",
    "InvalidAngleError",
    "MalformedRequestError",
]
