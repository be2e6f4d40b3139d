"""User-facing messages for failed saves.

The session re-raises whatever the save callback raised. Callers that want
a friendly message pass the exception through :func:`describe_save_error`,
which sorts it by keywords in its message the way the map page does.
"""

from dataclasses import dataclass
from enum import Enum


class SaveErrorKind(str, Enum):
    """Categories of save failures."""

    VERSION_CONFLICT = "version_conflict"
    NETWORK = "network"
    PERMISSION = "permission"
    UNKNOWN = "unknown"


SAVE_ERROR_MESSAGES = {
    SaveErrorKind.VERSION_CONFLICT: (
        "This location was modified by someone else. Please refresh and try again."
    ),
    SaveErrorKind.NETWORK: "Network error. Please check your connection and try again.",
    SaveErrorKind.PERMISSION: "You do not have permission to edit this location.",
    SaveErrorKind.UNKNOWN: "Failed to save location geometry. Please try again.",
}

# checked in order; first match wins
_KEYWORDS = (
    (SaveErrorKind.VERSION_CONFLICT, ("version", "conflict")),
    (SaveErrorKind.NETWORK, ("network", "fetch")),
    (SaveErrorKind.PERMISSION, ("auth", "permission")),
)


@dataclass(frozen=True)
class SaveErrorInfo:
    kind: SaveErrorKind
    message: str


def classify_save_error(error: BaseException) -> SaveErrorKind:
    """Categorize a save failure by keywords in its message."""
    text = str(error).lower()
    for kind, keywords in _KEYWORDS:
        if any(word in text for word in keywords):
            return kind
    return SaveErrorKind.UNKNOWN


def describe_save_error(error: BaseException) -> SaveErrorInfo:
    """Category and user-facing message for a save failure."""
    kind = classify_save_error(error)
    return SaveErrorInfo(kind=kind, message=SAVE_ERROR_MESSAGES[kind])
