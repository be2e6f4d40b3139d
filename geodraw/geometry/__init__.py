"""Geometry model, metrics and validation for map drawing."""

from geodraw.geometry.features import DrawFeature, EditTargetMetadata, Geometry
from geodraw.geometry.metrics import (
    PolygonStats,
    calculate_polygon_area,
    count_polygon_vertices,
    format_area,
    polygon_stats,
)
from geodraw.geometry.validation import (
    GeometryValidator,
    ValidationResult,
    validate_geometry,
    validate_point_coordinates,
    validate_polygon_geometry,
)

__all__ = [
    "DrawFeature",
    "EditTargetMetadata",
    "Geometry",
    "GeometryValidator",
    "PolygonStats",
    "ValidationResult",
    "calculate_polygon_area",
    "count_polygon_vertices",
    "format_area",
    "polygon_stats",
    "validate_geometry",
    "validate_point_coordinates",
    "validate_polygon_geometry",
]
