"""Toolbar view model derived from a draw session state.

Renders nothing itself; a UI layer reads :class:`ToolbarView` to decide which
controls to show. Three layouts exist:

- CREATE: no session active, offer "Add Point" / "Draw Region"
- EDITING: unsaved changes, offer Save/Cancel plus stats and errors
- INSTRUCTIONS: a mode is active but nothing changed yet, show a hint

Save gating lives here, not in the session: Save is disabled while a save is
in flight or while the current feature fails validation.
"""

from dataclasses import dataclass, field
from enum import Enum

from geodraw.editor.session import DrawMode, DrawSessionState
from geodraw.geometry.metrics import PolygonStats, polygon_stats

INSTRUCTIONS = {
    DrawMode.DRAW_POINT: "Click on the map to place a point",
    DrawMode.DRAW_POLYGON: "Click to add vertices, double-click to complete",
    DrawMode.EDIT: "Drag vertices to edit the shape",
}
SAVE_BLOCKED_TOOLTIP = "Cannot save: validation errors present"


class ToolbarLayout(Enum):
    CREATE = "create"
    EDITING = "editing"
    INSTRUCTIONS = "instructions"


@dataclass(frozen=True)
class ToolbarView:
    """What the drawing toolbar should display."""

    layout: ToolbarLayout
    save_enabled: bool = False
    cancel_enabled: bool = False
    save_label: str = "Save"
    save_tooltip: str | None = None
    stats: PolygonStats | None = None
    errors: list[str] = field(default_factory=list)
    instructions: str | None = None


def toolbar_view(state: DrawSessionState, is_saving: bool = False) -> ToolbarView:
    """Build the toolbar view for ``state``.

    Args:
        state: Current session snapshot
        is_saving: Whether the UI has a save in flight

    Returns:
        ToolbarView for the current layout
    """
    if state.mode == DrawMode.NONE:
        return ToolbarView(layout=ToolbarLayout.CREATE)

    if not state.has_unsaved_changes:
        return ToolbarView(
            layout=ToolbarLayout.INSTRUCTIONS,
            cancel_enabled=True,
            instructions=INSTRUCTIONS.get(state.mode),
        )

    result = state.validation_result
    is_valid = result is None or result.is_valid
    return ToolbarView(
        layout=ToolbarLayout.EDITING,
        save_enabled=is_valid and not is_saving,
        cancel_enabled=not is_saving,
        save_label="Saving..." if is_saving else "Save",
        save_tooltip=None if is_valid else SAVE_BLOCKED_TOOLTIP,
        stats=polygon_stats(state.current_feature),
        errors=[] if is_valid else list(result.errors),
    )
