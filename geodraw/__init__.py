"""Interactive point/polygon editing for map UIs: draw session, undo history
and geometry validation."""

from geodraw.config import EditorConfig, ValidationLimits, load_editor_config
from geodraw.editor import DrawMode, DrawSession, InMemoryDrawingSurface
from geodraw.geometry import DrawFeature, EditTargetMetadata, Geometry, validate_geometry

__all__ = [
    "DrawFeature",
    "DrawMode",
    "DrawSession",
    "EditTargetMetadata",
    "EditorConfig",
    "Geometry",
    "InMemoryDrawingSurface",
    "ValidationLimits",
    "load_editor_config",
    "validate_geometry",
]
