"""Tests for save failure categorization."""

import pytest

from geodraw.editor.save_errors import (
    SAVE_ERROR_MESSAGES,
    SaveErrorKind,
    classify_save_error,
    describe_save_error,
)


class TestClassifySaveError:
    @pytest.mark.parametrize(
        ("message", "kind"),
        [
            ("Version mismatch: expected 3, got 4", SaveErrorKind.VERSION_CONFLICT),
            ("409 Conflict", SaveErrorKind.VERSION_CONFLICT),
            ("NetworkError when attempting to fetch resource", SaveErrorKind.NETWORK),
            ("Failed to fetch", SaveErrorKind.NETWORK),
            ("Not authorized", SaveErrorKind.PERMISSION),
            ("Missing permission location:update", SaveErrorKind.PERMISSION),
            ("Internal server error", SaveErrorKind.UNKNOWN),
        ],
    )
    def test_keywords(self, message, kind):
        assert classify_save_error(RuntimeError(message)) == kind

    def test_first_match_wins(self):
        assert classify_save_error(RuntimeError("network version")) == SaveErrorKind.VERSION_CONFLICT


class TestDescribeSaveError:
    def test_conflict_message(self):
        info = describe_save_error(RuntimeError("version conflict"))
        assert info.kind == SaveErrorKind.VERSION_CONFLICT
        assert info.message == (
            "This location was modified by someone else. Please refresh and try again."
        )

    def test_generic_message(self):
        info = describe_save_error(ValueError("boom"))
        assert info.message == "Failed to save location geometry. Please try again."

    def test_every_kind_has_a_message(self):
        assert set(SAVE_ERROR_MESSAGES) == set(SaveErrorKind)
