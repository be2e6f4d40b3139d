"""Draw session state machine for creating and editing map geometry.

A session drives one feature at a time through these modes:

    NONE ──start_draw_point()──▶ DRAW_POINT ──┐
      │                                       │
      ├──start_draw_polygon()─▶ DRAW_POLYGON ─┤── cancel_draw() / save_feature() ──▶ NONE
      │                                       │
      └──start_edit(id)───────▶ EDIT ─────────┘

Event flow:
- The drawing surface reports user edits; the embedding UI forwards them to
  handle_feature_created() / handle_feature_updated().
- Every created/updated/restored feature is validated immediately and the
  result is exposed in ``state.validation_result``.
- Updates push the previous feature onto a bounded undo history.
- save_feature() awaits the external save callback and only resets the
  session when it succeeds; failures propagate with the session untouched.

Whether invalid geometry may be saved is left to the caller (the toolbar
disables Save); the session runs whatever it is asked to run.

Usage Example:
    from geodraw.editor import DrawSession, InMemoryDrawingSurface

    async def persist(feature):
        await api.update_location_geometry(feature.geometry.to_dict())

    session = DrawSession(InMemoryDrawingSurface(), on_save=persist)
    session.start_draw_polygon()
    session.handle_feature_created(feature)
    if session.state.validation_result.is_valid:
        await session.save_feature()
"""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from loguru import logger

from geodraw.common.errors import warn_soft_degrade
from geodraw.config import EditorConfig
from geodraw.editor.history import UndoRedoHistory
from geodraw.editor.surface import DrawingSurface, SurfaceMode
from geodraw.geometry.features import DrawFeature, EditTargetMetadata
from geodraw.geometry.validation import GeometryValidator, ValidationResult

SaveCallback = Callable[[DrawFeature], Awaitable[None]]
FeatureCallback = Callable[[DrawFeature], None]


class DrawMode(str, Enum):
    """Session modes; exactly one is active."""

    NONE = "none"
    """Viewing, no feature in progress."""

    DRAW_POINT = "draw_point"
    """Creating a new point."""

    DRAW_POLYGON = "draw_polygon"
    """Creating a new polygon."""

    EDIT = "edit"
    """Editing the vertices of an existing feature."""


@dataclass(frozen=True)
class DrawSessionState:
    """Read-only snapshot of a session, rebuilt on every access."""

    mode: DrawMode
    current_feature: DrawFeature | None
    has_unsaved_changes: bool
    validation_result: ValidationResult | None
    edit_feature_id: str | None
    edit_location_metadata: EditTargetMetadata | None
    can_undo: bool
    can_redo: bool


@dataclass(frozen=True)
class DrawSessionActions:
    """Bound session operations, handed to toolbars and key bindings."""

    start_draw_point: Callable[[], None]
    start_draw_polygon: Callable[[], None]
    start_edit: Callable[..., None]
    cancel_draw: Callable[[], None]
    save_feature: Callable[[], Awaitable[None]]
    clear_feature: Callable[[], None]
    undo: Callable[[], None]
    redo: Callable[[], None]


class DrawSession:
    """Owns the in-progress feature, its validation and its undo history.

    Attributes:
        surface: Drawing surface the session mutates (None until attached)
        validator: Geometry validator applied on every change
        history: Bounded undo/redo stacks of feature snapshots
    """

    def __init__(
        self,
        surface: DrawingSurface | None = None,
        *,
        on_save: SaveCallback | None = None,
        on_feature_created: FeatureCallback | None = None,
        on_feature_updated: FeatureCallback | None = None,
        config: EditorConfig | None = None,
        validator: GeometryValidator | None = None,
    ):
        self.config = config or EditorConfig()
        self.surface = surface
        self.validator = validator or GeometryValidator(self.config.validation)
        self.history = UndoRedoHistory(self.config.history_size)

        self.on_save = on_save
        self.on_feature_created = on_feature_created
        self.on_feature_updated = on_feature_updated

        self._mode = DrawMode.NONE
        self._current_feature: DrawFeature | None = None
        self._has_unsaved_changes = False
        self._validation_result: ValidationResult | None = None
        self._edit_feature_id: str | None = None
        self._edit_location_metadata: EditTargetMetadata | None = None

    def attach_surface(self, surface: DrawingSurface | None) -> None:
        """Bind (or unbind) the drawing surface, e.g. once the map has loaded."""
        self.surface = surface
        logger.debug(f"Drawing surface {'attached' if surface else 'detached'}")

    @property
    def state(self) -> DrawSessionState:
        return DrawSessionState(
            mode=self._mode,
            current_feature=self._current_feature,
            has_unsaved_changes=self._has_unsaved_changes,
            validation_result=self._validation_result,
            edit_feature_id=self._edit_feature_id,
            edit_location_metadata=self._edit_location_metadata,
            can_undo=self.history.can_undo,
            can_redo=self.history.can_redo,
        )

    @property
    def actions(self) -> DrawSessionActions:
        return DrawSessionActions(
            start_draw_point=self.start_draw_point,
            start_draw_polygon=self.start_draw_polygon,
            start_edit=self.start_edit,
            cancel_draw=self.cancel_draw,
            save_feature=self.save_feature,
            clear_feature=self.clear_feature,
            undo=self.undo,
            redo=self.redo,
        )

    # ========================================================================
    # Mode transitions
    # ========================================================================

    def start_draw_point(self) -> None:
        """Discard whatever is on the surface and start drawing a point."""
        self._start_draw(DrawMode.DRAW_POINT, SurfaceMode.DRAW_POINT)

    def start_draw_polygon(self) -> None:
        """Discard whatever is on the surface and start drawing a polygon."""
        self._start_draw(DrawMode.DRAW_POLYGON, SurfaceMode.DRAW_POLYGON)

    def _start_draw(self, mode: DrawMode, surface_mode: SurfaceMode) -> None:
        surface = self._require_surface(f"start {mode.value}")
        if surface is None:
            return

        surface.delete_all()
        surface.change_mode(surface_mode.value)
        self._reset_feature_state()
        self._mode = mode
        logger.info(f"Started {mode.value}")

    def start_edit(self, feature_id: str, metadata: EditTargetMetadata | None = None) -> None:
        """Edit the vertices of a feature already on the surface.

        Args:
            feature_id: Surface id of the feature
            metadata: Persisted location identity and version, when editing a
                saved location (None for an unsaved drawing)
        """
        surface = self._require_surface("start edit")
        if surface is None:
            return

        raw = surface.get(feature_id)
        if raw is None:
            logger.error(f"Feature with ID {feature_id} not found in drawing surface")
            return

        surface.change_mode(SurfaceMode.DIRECT_SELECT.value, {"featureId": feature_id})

        feature = DrawFeature.from_dict(raw)
        if feature.id is None:
            feature = feature.with_id(feature_id)

        self._mode = DrawMode.EDIT
        self._edit_feature_id = feature_id
        self._edit_location_metadata = metadata
        self._current_feature = feature
        self._has_unsaved_changes = False
        # pre-existing geometry may already be invalid
        self._validation_result = self.validator.validate(feature)
        self.history.clear()
        logger.info(
            f"Editing feature {feature_id}"
            + (f" (location {metadata.location_id} v{metadata.version})" if metadata else "")
        )

    def cancel_draw(self) -> None:
        """Leave the current mode without saving.

        A brand-new drawing is removed from the surface; an edited feature is
        left there untouched. Confirming the discard is up to the UI.
        """
        surface = self._require_surface("cancel")
        if surface is None:
            return

        feature = self._current_feature
        if self._edit_feature_id is None and feature is not None:
            surface.delete(feature.id or "")
            logger.debug(f"Discarded draft feature {feature.id}")

        surface.change_mode(SurfaceMode.SIMPLE_SELECT.value)
        self._reset_feature_state()
        self._mode = DrawMode.NONE
        logger.info("Drawing cancelled")

    def clear_feature(self) -> None:
        """Remove every feature from the surface and forget the current one.

        The mode is kept so the user can start over in the same tool.
        """
        surface = self._require_surface("clear")
        if surface is None:
            return

        surface.delete_all()
        self._reset_feature_state()
        logger.info("Cleared drawing surface")

    async def save_feature(self) -> None:
        """Hand the current feature to the save callback.

        On success the surface is cleared and the session returns to NONE.

        Raises:
            Exception: Whatever the save callback raises; the session keeps
                its feature, unsaved flag and history so the user can retry.
        """
        feature = self._current_feature
        if feature is None:
            logger.warning("Save requested without a feature")
            return
        if self.on_save is None:
            warn_soft_degrade("save callback", "not configured", "feature stays unsaved")
            return

        try:
            await self.on_save(feature.snapshot())
        except Exception as e:
            logger.error(f"Failed to save feature {feature.id}: {e}")
            raise

        if self.surface is not None:
            self.surface.delete_all()
        self._reset_feature_state()
        self._mode = DrawMode.NONE
        logger.info(f"Saved feature {feature.id}")

    # ========================================================================
    # Surface events
    # ========================================================================

    def handle_feature_created(self, feature: DrawFeature | Mapping[str, Any]) -> None:
        """Record a feature the surface just created."""
        feature = _as_feature(feature)
        result = self.validator.validate(feature)
        self._current_feature = feature
        self._has_unsaved_changes = True
        self._validation_result = result
        logger.debug(f"Feature created: {feature.id} valid={self._validation_result.is_valid}")

        if self.on_feature_created:
            self.on_feature_created(feature)

    def handle_feature_updated(self, feature: DrawFeature | Mapping[str, Any]) -> None:
        """Record an edit; the previous feature goes onto the undo stack."""
        feature = _as_feature(feature)
        result = self.validator.validate(feature)
        if self._current_feature is not None:
            self.history.record_change(self._current_feature)

        self._current_feature = feature
        self._has_unsaved_changes = True
        self._validation_result = result
        logger.debug(f"Feature updated: {feature.id} valid={self._validation_result.is_valid}")

        if self.on_feature_updated:
            self.on_feature_updated(feature)

    # ========================================================================
    # Undo / redo
    # ========================================================================

    def undo(self) -> None:
        """Restore the feature as it was before the last update."""
        self._restore(self.history.undo, "Undo")

    def redo(self) -> None:
        """Re-apply the last undone update."""
        self._restore(self.history.redo, "Redo")

    def _restore(
        self, step: Callable[[DrawFeature | None], DrawFeature | None], label: str
    ) -> None:
        surface = self.surface
        if surface is None:
            logger.debug(f"{label} ignored: no drawing surface")
            return

        current = self._current_feature
        restored = step(current)
        if restored is None:
            return

        surface.delete(current.id or "")
        ids = surface.add(restored.to_dict())
        if restored.id is None and ids:
            restored = restored.with_id(ids[0])

        if self._mode == DrawMode.EDIT and restored.id:
            surface.change_mode(SurfaceMode.DIRECT_SELECT.value, {"featureId": restored.id})

        self._current_feature = restored
        self._validation_result = self.validator.validate(restored)
        logger.info(f"{label} executed")

    # ========================================================================
    # Helpers
    # ========================================================================

    def _require_surface(self, operation: str) -> DrawingSurface | None:
        if self.surface is None:
            warn_soft_degrade("drawing surface", f"unavailable for {operation}", "ignoring request")
        return self.surface

    def _reset_feature_state(self) -> None:
        self._current_feature = None
        self._has_unsaved_changes = False
        self._validation_result = None
        self._edit_feature_id = None
        self._edit_location_metadata = None
        self.history.clear()


def _as_feature(feature: DrawFeature | Mapping[str, Any]) -> DrawFeature:
    if isinstance(feature, DrawFeature):
        return feature
    return DrawFeature.from_dict(dict(feature))
