"""
Tab navigation component.
"""

import streamlit as st


def render_navigation(tabs: dict[str, str], key: str):
    """
    Render the tab switcher.

    Args:
        tabs: Mapping of tab id to label, in display order
        key: Session state key holding the active tab id
    """
    st.radio(
        "Section",
        options=list(tabs.keys()),
        format_func=lambda tab_id: tabs[tab_id],
        key=key,
        horizontal=True,
        label_visibility="collapsed",
    )
    st.markdown("---")
