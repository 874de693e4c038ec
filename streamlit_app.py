"""
Checkmarket - Shopping List

Manage product categories, an item catalog and a shopping list with
quantities, prices and running totals. Data lives in a hosted
Supabase / PostgREST database.
"""

import streamlit as st

# Page configuration (must be first Streamlit command)
st.set_page_config(
    page_title="Checkmarket",
    page_icon="🛒",
    layout="wide"
)

from config.logging import configure_logging
from config.settings import get_settings
from controllers.app_controller import ACTIVE_TAB_KEY, AppController
from views import CategoryView, ItemView, ShoppingView
from views.components.navigation import render_navigation
from views.components.notice import render_notice

VIEWS = {
    "categories": CategoryView,
    "items": ItemView,
    "shopping": ShoppingView,
}

settings = get_settings()
configure_logging(settings.log_level, secrets=[settings.store_key])

st.title("🛒 Checkmarket")

app = AppController()

if not app.is_store_configured():
    st.warning("The data store is not configured.")
    with st.expander("Setup"):
        for issue in app.get_config_issues():
            st.markdown(f"- {issue}")
        st.code(
            "# Set these environment variables (or put them in .env):\n"
            "export CHECKMARKET_STORE_URL='https://<project>.supabase.co'\n"
            "export CHECKMARKET_STORE_KEY='<anon key>'",
            language="bash"
        )
    st.stop()

if app.needs_initial_load():
    with st.spinner("Loading data..."):
        render_notice(app.load_data())

render_navigation(app.get_tabs(), key=ACTIVE_TAB_KEY)

view = VIEWS[app.get_active_tab()](app.get_mirror())
view.render()
