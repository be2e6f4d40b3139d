"""Geometry validation for features drawn on the map.

Checks performed per geometry type:

Point:
    - coordinates are ``[longitude, latitude]`` numbers
    - both values finite and inside the configured longitude/latitude range

Polygon (errors accumulate so the UI can list every problem at once):
    1. structure: non-empty list of rings with a non-empty outer ring
    2. closure: outer ring has ≥4 positions and first == last
    3. minimum vertices: at least 3 besides the closing point
    4. bounds: every position of every ring is finite and in range
    5. self-intersection (only when bounds passed): Shapely ring simplicity
       on the outer ring; a ring that cannot be built counts as intersecting
    6. area: always computed, must be inside [min_area_m2, max_area_m2]

Validation never raises on bad geometry; problems are returned as data in a
:class:`ValidationResult`. Whether an invalid feature may be saved is the
caller's decision.
"""

import math
from dataclasses import dataclass, field
from typing import Any

from loguru import logger
from shapely.errors import ShapelyError
from shapely.geometry import LinearRing

from geodraw.config import ValidationLimits
from geodraw.geometry.features import DrawFeature
from geodraw.geometry.metrics import as_position, calculate_polygon_area, outer_ring, to_float

POINT_SHAPE_ERROR = "Point coordinates must be [longitude, latitude]"
POINT_FINITE_ERROR = "Point coordinates must be finite numbers"
POLYGON_SHAPE_ERROR = "Polygon coordinates must be a non-empty list of rings"
POLYGON_CLOSED_ERROR = "Polygon must be closed (first and last points must match)"
POLYGON_MIN_VERTICES_ERROR = "Polygon must have at least 3 vertices"
POLYGON_BOUNDS_ERROR = "All coordinates must be within valid bounds"
POLYGON_KINKS_ERROR = "Polygon must not have self-intersections"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one geometry."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: list[str]) -> "ValidationResult":
        return cls(is_valid=not errors, errors=list(errors))


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


class GeometryValidator:
    """Validates point and polygon features against :class:`ValidationLimits`."""

    def __init__(self, limits: ValidationLimits | None = None):
        self.limits = limits or ValidationLimits()

    # ========================================================================
    # Feature dispatch
    # ========================================================================

    def validate(self, feature: DrawFeature | None) -> ValidationResult:
        """Validate a feature, dispatching on its geometry type."""
        if feature is None:
            return ValidationResult.from_errors(["Invalid feature: feature is missing"])

        geometry = feature.geometry
        if geometry is None:
            return ValidationResult.from_errors(["Invalid feature: missing geometry"])

        coordinates = geometry.coordinates
        if geometry.is_point:
            if not _is_sequence(coordinates) or len(coordinates) != 2:
                return ValidationResult.from_errors(
                    ["Invalid Point geometry: coordinates must be [longitude, latitude]"]
                )
            result = self.validate_point_coordinates(coordinates)
        elif geometry.is_polygon:
            if not _is_sequence(coordinates) or len(coordinates) == 0:
                return ValidationResult.from_errors(
                    ["Invalid Polygon geometry: coordinates must be a list of rings"]
                )
            result = self.validate_polygon_geometry(coordinates)
        else:
            logger.debug(f"Unsupported geometry type: {geometry.type}")
            return ValidationResult.from_errors([f"Unsupported geometry type: {geometry.type}"])

        if not result.is_valid:
            logger.debug(f"Feature {feature.id} failed validation: {'; '.join(result.errors)}")
        return result

    # ========================================================================
    # Point
    # ========================================================================

    def validate_point_coordinates(self, coordinates: Any) -> ValidationResult:
        """Validate ``[lng, lat]``, reporting every violated constraint."""
        if not _is_sequence(coordinates) or len(coordinates) != 2:
            return ValidationResult.from_errors([POINT_SHAPE_ERROR])

        lng, lat = coordinates
        if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in (lng, lat)):
            return ValidationResult.from_errors([POINT_SHAPE_ERROR])

        # NaN/inf floats are non-finite; integers too large for a float are out of range
        lng_nan_or_inf = isinstance(lng, float) and not math.isfinite(lng)
        lat_nan_or_inf = isinstance(lat, float) and not math.isfinite(lat)
        errors: list[str] = []
        if lng_nan_or_inf or lat_nan_or_inf:
            errors.append(POINT_FINITE_ERROR)
        if not lng_nan_or_inf and not self._longitude_in_range(to_float(lng)):
            errors.append(self.longitude_error)
        if not lat_nan_or_inf and not self._latitude_in_range(to_float(lat)):
            errors.append(self.latitude_error)
        return ValidationResult.from_errors(errors)

    @property
    def longitude_error(self) -> str:
        return (
            f"Longitude must be between {self.limits.min_longitude:g} "
            f"and {self.limits.max_longitude:g} degrees"
        )

    @property
    def latitude_error(self) -> str:
        return (
            f"Latitude must be between {self.limits.min_latitude:g} "
            f"and {self.limits.max_latitude:g} degrees"
        )

    def _longitude_in_range(self, lng: float) -> bool:
        return self.limits.min_longitude <= lng <= self.limits.max_longitude

    def _latitude_in_range(self, lat: float) -> bool:
        return self.limits.min_latitude <= lat <= self.limits.max_latitude

    # ========================================================================
    # Polygon
    # ========================================================================

    def validate_polygon_geometry(self, coordinates: Any) -> ValidationResult:
        """Validate polygon rings (or a bare outer ring), collecting all errors."""
        if (
            not _is_sequence(coordinates)
            or len(coordinates) == 0
            or not _is_sequence(coordinates[0])
            or len(coordinates[0]) == 0
        ):
            return ValidationResult.from_errors([POLYGON_SHAPE_ERROR])

        ring = outer_ring(coordinates)
        errors: list[str] = []

        self._check_closed(ring, errors)
        if len(ring) - 1 < 3:
            errors.append(POLYGON_MIN_VERTICES_ERROR)

        bounds_ok = self._all_positions_in_bounds(coordinates)
        if not bounds_ok:
            errors.append(POLYGON_BOUNDS_ERROR)

        if bounds_ok and self._has_self_intersections(ring):
            errors.append(POLYGON_KINKS_ERROR)

        self._check_area(coordinates, errors)
        return ValidationResult.from_errors(errors)

    def _check_closed(self, ring: list | tuple, errors: list[str]) -> None:
        if len(ring) < 4:
            errors.append(POLYGON_CLOSED_ERROR)
            return
        first, last = ring[0], ring[-1]
        if (
            not _is_sequence(first)
            or not _is_sequence(last)
            or len(first) < 2
            or len(last) < 2
            or first[0] != last[0]
            or first[1] != last[1]
        ):
            errors.append(POLYGON_CLOSED_ERROR)

    def _all_positions_in_bounds(self, coordinates: Any) -> bool:
        # bare ring input has no holes
        rings = [coordinates] if outer_ring(coordinates) is coordinates else coordinates
        for current in rings:
            if not _is_sequence(current):
                return False
            for value in current:
                position = as_position(value)
                if position is None:
                    return False
                lng, lat = position
                if not (self._longitude_in_range(lng) and self._latitude_in_range(lat)):
                    return False
        return True

    def _has_self_intersections(self, ring: list | tuple) -> bool:
        """Check the outer ring for kinks (edges crossing or touching)."""
        try:
            shape = _build_ring(ring)
        except (ValueError, TypeError, ShapelyError) as e:
            logger.debug(f"Could not build ring for kink check, treating as invalid: {e}")
            return True
        return not shape.is_simple

    def _check_area(self, coordinates: Any, errors: list[str]) -> None:
        area = calculate_polygon_area(coordinates)
        if area < self.limits.min_area_m2:
            errors.append(f"Polygon area must be at least {self.limits.min_area_m2:,g} m²")
        if area > self.limits.max_area_m2:
            errors.append(
                f"Polygon area must be less than {self.limits.max_area_m2 / 1_000_000:,g} km²"
            )


def _build_ring(ring: list | tuple) -> LinearRing:
    """Build a closed Shapely ring, refusing input Shapely would silently close.

    Raises:
        ValueError: If the ring has fewer than 4 positions or is not closed.
    """
    positions = [as_position(value) for value in ring]
    if any(p is None for p in positions):
        raise ValueError("Ring contains malformed positions")
    if len(positions) < 4:
        raise ValueError(f"A ring needs at least 4 positions, got {len(positions)}")
    if positions[0] != positions[-1]:
        raise ValueError("First and last positions of the ring differ")
    return LinearRing(positions)


_default_validator = GeometryValidator()


def validate_geometry(feature: DrawFeature | None) -> ValidationResult:
    """Validate a feature with the default limits."""
    return _default_validator.validate(feature)


def validate_point_coordinates(coordinates: Any) -> ValidationResult:
    """Validate point coordinates with the default limits."""
    return _default_validator.validate_point_coordinates(coordinates)


def validate_polygon_geometry(coordinates: Any) -> ValidationResult:
    """Validate polygon coordinates with the default limits."""
    return _default_validator.validate_polygon_geometry(coordinates)
