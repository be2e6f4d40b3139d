"""GeoJSON-shaped feature types exchanged with the drawing surface.

A drawing surface reports raw GeoJSON dicts. The session wraps them in the
dataclasses below so history snapshots and validation work on one shape:

    {
        "type": "Feature",
        "id": "f1",
        "geometry": {"type": "Polygon", "coordinates": [[[lng, lat], ...]]},
        "properties": {}
    }

Coordinates are kept as-is (no coercion), because the validator has to report
malformed input rather than have it rejected at construction time.
"""

import copy
from dataclasses import dataclass, field, replace
from typing import Any

from geodraw.common.types import PolygonCoordinates, RawFeature

POINT = "Point"
POLYGON = "Polygon"


@dataclass(frozen=True)
class Geometry:
    """A GeoJSON geometry (Point or Polygon for the editor)."""

    type: str
    """GeoJSON geometry type, e.g. 'Point' or 'Polygon'."""

    coordinates: Any
    """`[lng, lat]` for points, list of rings for polygons."""

    @classmethod
    def point(cls, lng: float, lat: float) -> "Geometry":
        """Create a Point geometry."""
        return cls(type=POINT, coordinates=[lng, lat])

    @classmethod
    def polygon(cls, rings: PolygonCoordinates) -> "Geometry":
        """Create a Polygon geometry from rings (outer ring first)."""
        return cls(type=POLYGON, coordinates=[[list(pos) for pos in ring] for ring in rings])

    @property
    def is_point(self) -> bool:
        return self.type == POINT

    @property
    def is_polygon(self) -> bool:
        return self.type == POLYGON

    def to_dict(self) -> dict[str, Any]:
        """Convert to a GeoJSON geometry dict."""
        return {"type": self.type, "coordinates": copy.deepcopy(self.coordinates)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Geometry":
        """Create a Geometry from a GeoJSON geometry dict."""
        return cls(type=data.get("type", ""), coordinates=copy.deepcopy(data.get("coordinates")))


@dataclass(frozen=True)
class DrawFeature:
    """In-progress feature owned by a draw session.

    Never persisted directly; saving goes through the session's save callback.
    """

    geometry: Geometry | None
    id: str | None = None
    properties: dict[str, Any] = field(default_factory=dict)

    def snapshot(self) -> "DrawFeature":
        """Return a deep copy safe to keep in undo/redo history."""
        return copy.deepcopy(self)

    def with_id(self, feature_id: str) -> "DrawFeature":
        """Return a copy carrying the id assigned by the drawing surface."""
        return replace(self, id=feature_id)

    def to_dict(self) -> RawFeature:
        """Convert to a GeoJSON Feature dict for the drawing surface."""
        data: RawFeature = {
            "type": "Feature",
            "geometry": self.geometry.to_dict() if self.geometry else None,
            "properties": copy.deepcopy(self.properties),
        }
        if self.id is not None:
            data["id"] = self.id
        return data

    @classmethod
    def from_dict(cls, data: RawFeature) -> "DrawFeature":
        """Create a DrawFeature from a GeoJSON Feature dict."""
        raw_geometry = data.get("geometry")
        raw_id = data.get("id")
        return cls(
            geometry=Geometry.from_dict(raw_geometry) if isinstance(raw_geometry, dict) else None,
            id=str(raw_id) if raw_id is not None else None,
            properties=copy.deepcopy(data.get("properties") or {}),
        )


@dataclass(frozen=True)
class EditTargetMetadata:
    """Identity of a persisted location being edited."""

    location_id: str
    """Database location ID."""

    version: int
    """Optimistic-lock version, checked by the save mutation."""

    type: str
    """Location type ('point' or 'region')."""
