"""Draw session, undo history and UI helpers for editing map geometry."""

from geodraw.editor.history import BoundedStack, UndoRedoHistory
from geodraw.editor.save_errors import SaveErrorKind, describe_save_error
from geodraw.editor.session import DrawMode, DrawSession, DrawSessionActions, DrawSessionState
from geodraw.editor.shortcuts import ShortcutDispatcher
from geodraw.editor.surface import DrawingSurface, InMemoryDrawingSurface, SurfaceMode
from geodraw.editor.toolbar import ToolbarLayout, ToolbarView, toolbar_view

__all__ = [
    "BoundedStack",
    "DrawMode",
    "DrawSession",
    "DrawSessionActions",
    "DrawSessionState",
    "DrawingSurface",
    "InMemoryDrawingSurface",
    "SaveErrorKind",
    "ShortcutDispatcher",
    "SurfaceMode",
    "ToolbarLayout",
    "ToolbarView",
    "UndoRedoHistory",
    "describe_save_error",
    "toolbar_view",
]
