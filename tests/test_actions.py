"""Tests for running mirror operations on behalf of a view."""

from __future__ import annotations

from controllers.actions import ActionResult, pop_notice, run_action
from services.errors import InvalidInputError
from services.remote_store.base import RemoteStoreError


def _view_state():
    return {"is_submitting": False}


def test_success_stores_notice_and_releases_flag():
    state = _view_state()
    seen = {}

    async def action():
        seen["submitting"] = state["is_submitting"]

    result = run_action(state, action, "Saved", "Could not save")

    assert result == ActionResult(success=True, message="Saved")
    assert seen["submitting"] is True
    assert state["is_submitting"] is False
    assert pop_notice(state) == result
    assert pop_notice(state) is None


def test_validation_error_uses_its_own_message():
    state = _view_state()

    async def action():
        raise InvalidInputError("Category name is required")

    result = run_action(state, action, "Saved", "Could not save")

    assert result == ActionResult(success=False, message="Category name is required")
    assert state["is_submitting"] is False


def test_store_error_uses_generic_message():
    state = _view_state()

    async def action():
        raise RemoteStoreError("categories", "insert", "permission denied", status_code=401)

    result = run_action(state, action, "Saved", "Could not save")

    assert result == ActionResult(success=False, message="Could not save")
    assert state["is_submitting"] is False
