import streamlit as st
import logging

from hios.core.state import AppState
from hios.core.services import load_site_config, get_catalog
from hios.view.components import apply_global_styles, render_header, render_footer
from hios.view.presentation import render_landing_page, render_project_details, render_not_found

# --- Basic Configuration ---
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")


def main():
    """
    The main execution flow of the Streamlit application.
    """
    # --- 1. Initial Setup ---
    site_config = load_site_config()

    st.set_page_config(
        page_title=site_config.site_name,
        page_icon=site_config.branding.page_icon or "🔧",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    # --- 2. State Initialization ---
    state = AppState.from_streamlit(default_theme=site_config.theme.default)
    apply_global_styles(site_config, state)

    # --- 3. Header: locale and theme may change here ---
    render_header(site_config, state)
    if state.changed:
        state.apply_to_streamlit()
        st.rerun()

    # --- 4. Main Content Rendering ---
    # The catalog is read from disk on every run.
    catalog = get_catalog()

    if state.project:
        project = catalog.get_project(state.project)
        if project:
            render_project_details(project, catalog, site_config, state)
        else:
            render_not_found(state)
    else:
        render_landing_page(catalog.get_all_projects(), catalog, site_config, state)

    # --- 5. Footer ---
    render_footer(site_config, state.language)


if __name__ == "__main__":
    main()
