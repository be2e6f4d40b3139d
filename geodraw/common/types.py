"""
Module specifying types used in geodraw
"""

from typing import Any

# Geometry types
Position = tuple[float, float]
"""Type alias for a WGS84 position ``(longitude, latitude)`` in degrees"""

Ring = list[Position]
"""Type alias for an ordered ring of positions; closed when first == last"""

PolygonCoordinates = list[Ring]
"""
Type alias for GeoJSON polygon coordinates: the outer ring first, holes after
`[[outer...], [hole...], ...]`
"""

RawFeature = dict[str, Any]
"""Type alias for a GeoJSON feature dict as stored by a drawing surface"""
