"""
Lobster Harvest Dashboard - Streamlit Application

Records harvest catches and investor contributions and shows summary
statistics. Run with ``streamlit run dashboard/app.py``.
"""

import streamlit as st
import sys
from pathlib import Path

# Add src to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))
# Add repository root to path so `dashboard.*` imports work
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.config import PAGE_TITLE
from config.models import DashboardConfig
from service.backend_client import BackendClient
from service.controller import DashboardController
from utils.logging import get_logger, setup_logging
from dashboard.components import forms, layout, system_test

logger = get_logger("dashboard")

CONTROLLER_KEY = "controller"
CONFIG_KEY = "config"


@st.cache_resource
def load_config() -> DashboardConfig:
    """Read configuration once per server process."""
    config = DashboardConfig.from_env()
    setup_logging(level=config.log_level, log_file=config.log_file)
    logger.info(f"Backend URL: {config.base_url} (from {config.source.get('base_url')})")
    return config


def get_controller() -> DashboardController:
    """Create the session's controller on first run and load both collections."""
    if CONTROLLER_KEY not in st.session_state:
        config = load_config()
        logger.info("Starting dashboard session")

        controller = DashboardController(
            BackendClient.from_config(config),
            notify=layout.queue_notification,
        )
        st.session_state[CONFIG_KEY] = config
        st.session_state[CONTROLLER_KEY] = controller
        with st.spinner("Loading..."):
            controller.dispatch("load")
    return st.session_state[CONTROLLER_KEY]


def _on_refresh(controller: DashboardController) -> None:
    controller.dispatch("refresh")


def main():
    """Main dashboard application."""

    st.set_page_config(
        page_title=PAGE_TITLE,
        page_icon="🦞",
        layout="wide",
        initial_sidebar_state="expanded"
    )
    layout.apply_custom_css()

    st.title(f"🦞 {PAGE_TITLE}")
    st.markdown("Track harvests and investments in one place.")

    controller = get_controller()

    # Sidebar navigation
    st.sidebar.title("🧭 Navigation")
    panel_option = st.sidebar.selectbox(
        "Select Panel:",
        options=[
            "📊 Dashboard",
            "🧪 System Test",
            "📋 About"
        ],
        index=0
    )

    st.sidebar.button("🔄 Refresh Now", on_click=_on_refresh, args=(controller,))

    if panel_option == "📊 Dashboard":
        render_dashboard_panel(controller)
    elif panel_option == "🧪 System Test":
        render_system_test_panel(controller)
    elif panel_option == "📋 About":
        render_about_panel()

    st.divider()
    st.caption("Built for sustainable lobster fisheries: track harvests and investments in one place.")


def render_dashboard_panel(controller: DashboardController):
    """Render stat tiles, entry forms and record tables."""
    try:
        layout.render_notifications()
        state = controller.state

        layout.render_stat_tiles(controller.stats())
        st.divider()

        col_harvest, col_invest = st.columns(2)
        with col_harvest:
            forms.render_harvest_form(controller)
        with col_invest:
            forms.render_investment_form(controller)

        st.divider()

        col_h_table, col_i_table = st.columns(2)
        with col_h_table:
            layout.render_records_table(
                "Recent Harvests",
                layout.harvest_rows(state.harvests),
                layout.HARVEST_COLUMNS,
                empty_message="No harvests recorded yet.",
            )
        with col_i_table:
            layout.render_records_table(
                "Recent Investments",
                layout.investment_rows(state.investments),
                layout.INVESTMENT_COLUMNS,
                empty_message="No investments recorded yet.",
            )

        layout.render_status(state.loading, state.error)

        st.sidebar.subheader("📊 Data Status")
        if state.error:
            st.sidebar.error("❌ Showing last loaded data")
        else:
            st.sidebar.success(
                f"✅ {len(state.harvests)} harvests, {len(state.investments)} investments"
            )

    except Exception as e:
        logger.exception("Dashboard panel failed to render")
        st.error(f"❌ Error rendering dashboard: {e}")
        st.sidebar.error("❌ Panel Error")


def render_system_test_panel(controller: DashboardController):
    """Render the backend connectivity checks."""
    try:
        panel_result = system_test.render_panel(controller.client)

        st.sidebar.subheader("🧪 System Test")
        status = panel_result.get("status", "unknown")
        if status == "ok":
            st.sidebar.success("✅ Backend reachable")
        elif status == "failed":
            st.sidebar.error(f"❌ {panel_result.get('passed', 0)}/{panel_result.get('total', 0)} checks passed")
        else:
            st.sidebar.info(f"ℹ️ Status: {status}")

    except Exception as e:
        logger.exception("System test panel failed to render")
        st.error(f"❌ Error rendering System Test panel: {e}")
        st.sidebar.error("❌ Panel Error")


def render_about_panel():
    """Render the about/information panel."""
    st.header("📋 About the Lobster Harvest Dashboard")

    st.markdown("""
    ### 🎯 Purpose
    Log lobster catches and investor contributions, and keep an eye on the numbers.

    ### 📊 Features
    - **Stat tiles**: total catch, average dock price, estimated revenue and total invested
    - **Log Harvest / Record Investment**: entries are saved to the backend and the tables reload
    - **Recent Harvests / Investments**: the latest data loaded from the backend
    - **System Test**: checks that both backend collections respond

    ### 🔧 Technical Details
    - Built with Streamlit
    - Data is stored by the backend; this page keeps no local state
    - If loading fails, the last loaded data stays visible with an error message
    """)

    st.subheader("⚙️ Current Configuration")
    config = st.session_state.get(CONFIG_KEY)
    if config is None:
        st.info("Configuration not loaded yet.")
        return

    col1, col2 = st.columns(2)
    with col1:
        st.code(f"""
Backend URL: {config.base_url}
Source: {config.source.get('base_url', 'default')}
        """)
    with col2:
        timeout = f"{config.request_timeout_s}s" if config.request_timeout_s else "none"
        st.code(f"""
Request timeout: {timeout}
Log level: {config.log_level}
        """)


if __name__ == "__main__":
    main()
