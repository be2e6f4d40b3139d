"""Polygon metrics for live drawing feedback and validation.

Area uses the spherical Shoelace approximation (Chamberlain & Duquette):

    A = |R² / 2 * Σ (λ₂ - λ₁) · (2 + sin φ₁ + sin φ₂)|

over consecutive vertex pairs in radians. Accuracy degrades for polygons
larger than ~100 km², near the poles (|lat| > 60°) and across the
antimeridian; the editor only needs it for feedback and coarse area bounds,
so no geodesic library is involved.

Both the outer-ring list form ``[[ring], [hole], ...]`` and a bare ring
``[[lng, lat], ...]`` are accepted. Holes are ignored.
"""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any

from geodraw.geometry.features import DrawFeature

EARTH_RADIUS_M = 6_371_000.0

SQUARE_METERS_PER_HECTARE = 10_000
SQUARE_METERS_PER_KM2 = 1_000_000


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def outer_ring(coordinates: Any) -> list | tuple | None:
    """Return the outer ring of polygon coordinates.

    Args:
        coordinates: Polygon rings, or a single ring of positions.

    Returns:
        The outer ring, or None when the input is not a non-empty sequence.
    """
    if not _is_sequence(coordinates) or len(coordinates) == 0:
        return None
    first = coordinates[0]
    if _is_sequence(first) and len(first) > 0 and _is_sequence(first[0]):
        return first
    return coordinates


def to_float(value: Real) -> float:
    """``float(value)``, saturating to ±inf for integers too large for a float."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def as_position(value: Any) -> tuple[float, float] | None:
    """Parse ``[lng, lat]`` into a float tuple; None if malformed or non-finite."""
    if not _is_sequence(value) or len(value) < 2:
        return None
    lng, lat = value[0], value[1]
    if not (_is_number(lng) and _is_number(lat)):
        return None
    lng, lat = to_float(lng), to_float(lat)
    if not (math.isfinite(lng) and math.isfinite(lat)):
        return None
    return lng, lat


def calculate_polygon_area(coordinates: Any) -> float:
    """Approximate area of the outer ring in square meters.

    Returns:
        Area in m², or 0.0 for degenerate input (missing, empty, fewer than
        3 vertices, malformed coordinate pairs).
    """
    ring = outer_ring(coordinates)
    if ring is None or len(ring) < 3:
        return 0.0

    positions = [as_position(p) for p in ring]
    if any(p is None for p in positions):
        return 0.0

    total = 0.0
    count = len(positions)
    for i in range(count):
        lng1, lat1 = positions[i]
        lng2, lat2 = positions[(i + 1) % count]
        total += math.radians(lng2 - lng1) * (
            2 + math.sin(math.radians(lat1)) + math.sin(math.radians(lat2))
        )

    return abs(total * EARTH_RADIUS_M * EARTH_RADIUS_M / 2)


def count_polygon_vertices(coordinates: Any) -> int:
    """Number of vertices in the outer ring, excluding the closing point.

    The ring is assumed to be closed: an unclosed ring still reports
    ``len(ring) - 1``.

    Returns:
        Vertex count, or 0 when fewer than 3 vertices remain.
    """
    ring = outer_ring(coordinates)
    if ring is None:
        return 0
    vertices = len(ring) - 1
    return vertices if vertices >= 3 else 0


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_area(square_meters: float) -> str:
    """Format an area for display, picking m², ha or km².

    Examples:
        >>> format_area(0.5)
        '< 1 m²'
        >>> format_area(9999)
        '10,000 m²'
        >>> format_area(123456)
        '12.35 ha'
        >>> format_area(1_000_000)
        '1.00 km²'
    """
    if not math.isfinite(square_meters) or square_meters < 1:
        return "< 1 m²"
    if square_meters < SQUARE_METERS_PER_HECTARE:
        if square_meters > 100:
            rounded = _round_half_up(square_meters / 10) * 10
        else:
            rounded = _round_half_up(square_meters)
        return f"{rounded:,} m²"
    if square_meters < SQUARE_METERS_PER_KM2:
        return f"{square_meters / SQUARE_METERS_PER_HECTARE:,.2f} ha"
    return f"{square_meters / SQUARE_METERS_PER_KM2:,.2f} km²"


@dataclass(frozen=True)
class PolygonStats:
    """Live statistics shown while drawing a polygon."""

    vertices: int
    area_m2: float

    @property
    def formatted_area(self) -> str:
        return format_area(self.area_m2)


def polygon_stats(feature: DrawFeature | None) -> PolygonStats | None:
    """Vertex count and area for a polygon feature, None for anything else."""
    if feature is None or feature.geometry is None or not feature.geometry.is_polygon:
        return None
    coordinates = feature.geometry.coordinates
    if not _is_sequence(coordinates):
        return None
    return PolygonStats(
        vertices=count_polygon_vertices(coordinates),
        area_m2=calculate_polygon_area(coordinates),
    )
