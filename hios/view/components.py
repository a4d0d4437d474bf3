# hios/view/components.py

from __future__ import annotations
from urllib.parse import urlencode
import html
import logging

import streamlit as st

from hios.core.models import SiteConfig
from hios.core.state import AppState
from hios.core.i18n import t
from hios.core.theme import build_theme_css, get_palette
from hios.core.utils import read_text_file
from hios.core.constants import ASSETS_DIR

logger = logging.getLogger(__name__)


def page_link(state: AppState, project: str = "") -> str:
    """Query-string link that keeps the current language and theme."""
    params = {"lang": state.language, "theme": state.theme}
    if project:
        params["project"] = project
    return "?" + urlencode(params)


def apply_global_styles(site_config: SiteConfig, state: AppState):
    """Injects the theme variables and the global stylesheet."""
    palette = get_palette(state.theme)
    css = build_theme_css(palette, accent=site_config.branding.accent_color)
    try:
        css += "\n" + read_text_file(ASSETS_DIR / "style.css")
    except FileNotFoundError:
        logger.warning("assets/style.css not found. Only theme variables will be applied.")
    st.markdown(f"<style>{css}</style>", unsafe_allow_html=True)


def render_header(site_config: SiteConfig, state: AppState):
    """Renders the brand, the locale switcher and the theme toggle."""
    left, middle, right = st.columns([4, 2, 1])
    with left:
        st.markdown(
            f'<a href="{page_link(state)}" target="_self" class="hios-brand">'
            f'{html.escape(site_config.branding.page_icon)} {html.escape(site_config.site_name)}</a>',
            unsafe_allow_html=True,
        )

    with middle:
        new_lang = render_language_switcher(site_config, state.language)
        state.set_language(new_lang)

    with right:
        is_dark = state.theme == "dark"
        if st.toggle(t("nav.dark_mode", state.language), value=is_dark) != is_dark:
            state.toggle_theme()


def render_language_switcher(site_config: SiteConfig, current_lang: str) -> str:
    """Renders the language selection dropdown."""
    languages = site_config.i18n.languages
    if len(languages) <= 1:
        return current_lang

    codes = [lang.code for lang in languages]
    labels = [lang.label for lang in languages]

    try:
        current_idx = codes.index(current_lang)
    except ValueError:
        current_idx = 0

    selected_label = st.selectbox(
        label=t("nav.language", current_lang),
        options=labels,
        index=current_idx,
        label_visibility="collapsed",
    )
    return codes[labels.index(selected_label)]


def render_footer(site_config: SiteConfig, lang: str):
    """Renders the page footer."""
    st.write("---")
    links = []
    if site_config.social.github:
        links.append(f"[GitHub]({site_config.social.github})")
    if site_config.social.email:
        links.append(f"[{t('footer.contact', lang)}](mailto:{site_config.social.email})")
    if links:
        st.write(" &nbsp;•&nbsp; ".join(links))
    st.caption(f"© {site_config.author or site_config.site_name} · {t('footer.made_with', lang)}")
