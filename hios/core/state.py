# hios/core/state.py

from __future__ import annotations
import streamlit as st
from pydantic import BaseModel, PrivateAttr

from .constants import DEFAULT_LANGUAGE, DEFAULT_THEME
from .i18n import normalize_locale
from .models import ThemeMode
from .theme import normalize_mode, toggle_mode


class AppState(BaseModel):
    """
    A single source of truth for the application's request-scoped state.
    `project` is the slug of the detail page being shown; empty means the landing page.
    """

    language: str = DEFAULT_LANGUAGE
    project: str = ""
    theme: ThemeMode = DEFAULT_THEME

    _changed: bool = PrivateAttr(default=False)

    @classmethod
    def from_streamlit(cls, default_theme: str = DEFAULT_THEME) -> AppState:
        """
        Factory method to initialize the state from Streamlit's query and session state.
        This should be called once at the beginning of each script run.
        """
        # Priority: Query Param > Session State > Default
        lang = _get_query_param("lang") or st.session_state.get("lang", DEFAULT_LANGUAGE)
        project = _get_query_param("project")
        theme = _get_query_param("theme") or st.session_state.get("theme", default_theme)

        lang = normalize_locale(lang)
        theme = normalize_mode(theme)

        # Session state survives reruns that drop the query string.
        st.session_state["lang"] = lang
        st.session_state["theme"] = theme

        return cls(language=lang, project=project, theme=theme)

    def apply_to_streamlit(self) -> None:
        """Writes the current state back to the query string and session state."""
        _set_query_param("lang", self.language)
        _set_query_param("theme", self.theme)
        if self.project:
            _set_query_param("project", self.project)
        elif "project" in st.query_params:
            del st.query_params["project"]
        st.session_state["lang"] = self.language
        st.session_state["theme"] = self.theme

    def set_language(self, lang_code: str):
        """Switches locale and keeps the current page."""
        lang_code = normalize_locale(lang_code)
        if self.language != lang_code:
            self.language = lang_code
            self._changed = True

    def toggle_theme(self):
        self.theme = toggle_mode(self.theme)
        self._changed = True

    def open_project(self, slug: str):
        if self.project != slug:
            self.project = slug
            self._changed = True

    def go_home(self):
        self.open_project("")

    @property
    def changed(self) -> bool:
        return self._changed

# --- Helper functions to interact with Streamlit's query params ---
def _get_query_param(name: str, default: str = "") -> str:
    """A robust way to get a single query parameter."""
    params = st.query_params
    value = params.get(name)
    if isinstance(value, list):
        return str(value[0]) if value else default
    return str(value) if value is not None else default

def _set_query_param(name: str, value: str):
    """Sets a query parameter."""
    st.query_params[name] = value
