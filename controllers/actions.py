"""
Shared helpers for running state mirror operations from Streamlit.

Streamlit scripts are synchronous, so each mirror coroutine is run to
completion with asyncio.run while the view's submission flag is held.
"""

import asyncio
import streamlit as st
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from services.errors import InvalidInputError
from services.remote_store.base import RemoteStoreError


@dataclass
class ActionResult:
    """Outcome of a user action, shown to the user as a notice."""
    success: bool
    message: str


def run_action(
    view_state: dict,
    action: Callable[[], Awaitable[Any]],
    success_message: str,
    failure_message: str,
) -> ActionResult:
    """
    Run one mirror operation on behalf of a view.

    Args:
        view_state: The view's session state dict (needs 'is_submitting')
        action: Zero-argument callable returning the coroutine to run
        success_message: Notice text when the operation succeeds
        failure_message: Generic notice text when the store call fails

    Validation errors carry their own message; store errors are already
    logged by the mirror and are reported with the generic message.
    """
    view_state["is_submitting"] = True
    try:
        asyncio.run(action())
    except InvalidInputError as e:
        result = ActionResult(success=False, message=str(e))
    except RemoteStoreError:
        result = ActionResult(success=False, message=failure_message)
    else:
        result = ActionResult(success=True, message=success_message)
    finally:
        view_state["is_submitting"] = False

    view_state["notice"] = result
    return result


def pop_notice(view_state: dict) -> Optional[ActionResult]:
    """Take the pending notice so it is shown only once."""
    return view_state.pop("notice", None)


def clear_stale_choice(key: str, options: list[str]) -> None:
    """
    Reset a select widget whose stored choice is no longer offered.

    Happens when the chosen category or item was deleted since the
    widget was last rendered.
    """
    value = st.session_state.get(key)
    if value is not None and value not in options:
        st.session_state[key] = None
