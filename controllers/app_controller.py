"""
App Controller - owns the state mirror and the active tab.

The mirror is created once per browser session and shared by every
view; data is loaded from the store the first time the app renders.
"""

import asyncio
import logging
import streamlit as st
from typing import Optional

from config.settings import get_settings
from controllers.actions import ActionResult
from services.state_mirror import StateMirror

logger = logging.getLogger(__name__)

# Tab id -> label, in display order
TABS = {
    "categories": "Categories",
    "items": "Items",
    "shopping": "Shopping List",
}
DEFAULT_TAB = "categories"
ACTIVE_TAB_KEY = "active_tab"

LOAD_FAILED_MESSAGE = "Could not load data from the server"


class AppController:
    """Controller for the application shell."""

    def __init__(self):
        self.settings = get_settings()
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if "app" not in st.session_state:
            st.session_state.app = {
                "mirror": None,
                "loaded": False,
            }
        if ACTIVE_TAB_KEY not in st.session_state:
            st.session_state[ACTIVE_TAB_KEY] = DEFAULT_TAB

    # ==========================================
    # Configuration
    # ==========================================

    def is_store_configured(self) -> bool:
        return self.settings.is_store_configured()

    def get_config_issues(self) -> list[str]:
        """Get list of store configuration issues."""
        issues = []
        if not self.settings.store_url.strip():
            issues.append("Missing CHECKMARKET_STORE_URL")
        if not self.settings.store_key.strip():
            issues.append("Missing CHECKMARKET_STORE_KEY")
        return issues

    # ==========================================
    # State Mirror
    # ==========================================

    def get_mirror(self) -> StateMirror:
        """Get this session's mirror, creating it on first use."""
        if st.session_state.app["mirror"] is None:
            st.session_state.app["mirror"] = StateMirror.from_settings(self.settings)
        return st.session_state.app["mirror"]

    def needs_initial_load(self) -> bool:
        return not st.session_state.app["loaded"]

    def load_data(self) -> Optional[ActionResult]:
        """
        Load every table into the mirror.

        Tables that fail are skipped by the mirror itself; a single
        generic notice covers any failure.
        """
        mirror = self.get_mirror()
        try:
            asyncio.run(mirror.load_all())
        except Exception:
            logger.exception("Unexpected error while loading data")
            return ActionResult(success=False, message=LOAD_FAILED_MESSAGE)
        finally:
            st.session_state.app["loaded"] = True

        if mirror.load_errors:
            return ActionResult(success=False, message=LOAD_FAILED_MESSAGE)
        return None

    # ==========================================
    # Navigation
    # ==========================================

    def get_tabs(self) -> dict[str, str]:
        return TABS

    def get_active_tab(self) -> str:
        tab = st.session_state[ACTIVE_TAB_KEY]
        return tab if tab in TABS else DEFAULT_TAB
