"""Drawing-surface boundary used by the draw session.

The map's drawing toolkit is an opaque, mutable canvas of GeoJSON features
keyed by id. The session only needs the five calls in :class:`DrawingSurface`;
anything implementing them (a toolkit bridge, or the in-memory surface below)
can be attached.
"""

import copy
import uuid
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from loguru import logger

from geodraw.common.types import RawFeature


class SurfaceMode(str, Enum):
    """Interaction modes understood by the drawing toolkit."""

    SIMPLE_SELECT = "simple_select"  # view only
    DIRECT_SELECT = "direct_select"  # vertex editing of one feature
    DRAW_POINT = "draw_point"
    DRAW_POLYGON = "draw_polygon"


@runtime_checkable
class DrawingSurface(Protocol):
    """Feature canvas driven by the draw session."""

    def get(self, feature_id: str) -> RawFeature | None:
        """Return the feature with this id, or None."""
        ...

    def add(self, feature: RawFeature) -> list[str]:
        """Add or replace a feature; returns the ids it was stored under."""
        ...

    def delete(self, feature_id: str) -> None:
        """Remove a feature; unknown ids are ignored."""
        ...

    def delete_all(self) -> None:
        """Remove every feature."""
        ...

    def change_mode(self, mode: str, options: dict[str, Any] | None = None) -> None:
        """Switch interaction mode, e.g. ``("direct_select", {"featureId": id})``."""
        ...


class InMemoryDrawingSurface:
    """Dict-backed :class:`DrawingSurface` for headless use and tests."""

    def __init__(self, features: list[RawFeature] | None = None):
        self.features: dict[str, RawFeature] = {}
        self.mode: str = SurfaceMode.SIMPLE_SELECT.value
        self.mode_options: dict[str, Any] = {}
        self.mode_changes: list[tuple[str, dict[str, Any]]] = []
        for feature in features or []:
            self.add(feature)

    def get(self, feature_id: str) -> RawFeature | None:
        feature = self.features.get(feature_id)
        return copy.deepcopy(feature) if feature is not None else None

    def add(self, feature: RawFeature) -> list[str]:
        stored = copy.deepcopy(feature)
        feature_id = stored.get("id") or uuid.uuid4().hex
        stored["id"] = feature_id
        self.features[feature_id] = stored
        logger.debug(f"Surface: stored feature {feature_id}")
        return [feature_id]

    def delete(self, feature_id: str) -> None:
        if self.features.pop(feature_id, None) is not None:
            logger.debug(f"Surface: deleted feature {feature_id}")

    def delete_all(self) -> None:
        self.features.clear()

    def change_mode(self, mode: str, options: dict[str, Any] | None = None) -> None:
        self.mode = SurfaceMode(mode).value
        self.mode_options = dict(options or {})
        self.mode_changes.append((self.mode, self.mode_options))

    def __len__(self) -> int:
        return len(self.features)

    def __contains__(self, feature_id: object) -> bool:
        return feature_id in self.features
