"""
Notice component - shows the outcome of the last user action.
"""

import streamlit as st
from typing import Any, Optional


def render_notice(result: Optional[Any]):
    """
    Show an action result once.

    Args:
        result: ActionResult (needs .success, .message) or None
    """
    if result is None:
        return

    if result.success:
        st.toast(result.message, icon="✅")
    else:
        st.error(result.message)
