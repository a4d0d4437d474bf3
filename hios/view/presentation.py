from __future__ import annotations
from typing import List, Optional
from pathlib import Path
import html
import logging
import mimetypes

import streamlit as st
from PIL import Image, UnidentifiedImageError

from hios.core.models import ProjectRecord, SiteConfig, Tool
from hios.core.projects import ProjectCatalog
from hios.core.state import AppState
from hios.core.i18n import t
from hios.core.listing import collect_documents, count_documents, filter_tools
from hios.core.constants import ALL_TOOLS_ID
from hios.core.utils import load_image
from hios.view.components import page_link

logger = logging.getLogger(__name__)

STATUS_COLORS = {"prototype": "green", "concept": "blue", "wip": "orange"}
FILE_ICONS = {"pdf": "📄", "md": "📝", "code": "💾", "other": "📎"}


def open_project_image(path: Path) -> Optional[Image.Image]:
    """Opens a gallery image; files that are not readable images yield None."""
    try:
        image = load_image(path)
        # Decode now so truncated files fail here instead of inside st.image.
        image.load()
        return image
    except (UnidentifiedImageError, OSError) as e:
        logger.warning("Skipping unreadable image '%s': %s", path, e)
        return None


def _status_badge(status: str, lang: str) -> str:
    color = STATUS_COLORS.get(status, "gray")
    return f":{color}-badge[{t(f'status.{status}', lang, default=status.upper())}]"


# --- Landing Page ---

def render_hero(site_config: SiteConfig, lang: str):
    """Renders the brand tag, headline and intro paragraph."""
    st.markdown(
        f'<p class="hios-brand-tag">{html.escape(site_config.branding.brand_tag)}</p>',
        unsafe_allow_html=True,
    )
    st.markdown(
        f'<h1 class="hios-hero-title">{html.escape(t("hero.title", lang))} '
        f'<span class="hios-gradient">{html.escape(t("hero.highlight", lang))}</span></h1>',
        unsafe_allow_html=True,
    )
    st.markdown(t("hero.subtitle", lang))


def _render_project_card(project: ProjectRecord, catalog: ProjectCatalog, state: AppState):
    """Renders a single project card with its cover image."""
    lang = state.language
    with st.container(border=True):
        cover_path = catalog.resolve_asset(project.slug, project.cover_image) if project.cover_image else None
        cover = open_project_image(cover_path) if cover_path else None
        if cover is not None:
            st.image(cover)
        else:
            st.markdown(
                f'<div class="hios-cover-placeholder">🔧 {html.escape(t("projects.in_development", lang))}</div>',
                unsafe_allow_html=True,
            )

        st.markdown(f"##### {project.name}  {_status_badge(project.status, lang)}")
        if project.description:
            st.caption(project.description)
        st.markdown(
            f'<a href="{page_link(state, project.slug)}" target="_self" class="hios-card-button">'
            f'{html.escape(t("projects.view_details", lang))}</a>',
            unsafe_allow_html=True,
        )


def render_projects_grid(projects: List[ProjectRecord], catalog: ProjectCatalog, state: AppState):
    """Renders the grid of project cards, two per row."""
    lang = state.language
    st.markdown(f"## {t('projects.title', lang)}")
    st.caption(t("projects.subtitle", lang))

    if not projects:
        st.info(t("projects.empty", lang))
        return

    num_columns = 2
    rows = [projects[i:i + num_columns] for i in range(0, len(projects), num_columns)]
    for row_projects in rows:
        cols = st.columns(num_columns)
        for i, project in enumerate(row_projects):
            with cols[i]:
                _render_project_card(project, catalog, state)


def render_documentation_section(projects: List[ProjectRecord], state: AppState):
    """Lists every downloadable document in the catalog, grouped by project."""
    lang = state.language
    st.markdown(f"## {t('documentation.title', lang)}")
    st.caption(t("documentation.subtitle", lang))

    total = count_documents(projects)
    st.markdown(f"**{total}** {t('documentation.documents_count', lang)}")

    for project, files in collect_documents(projects):
        with st.expander(f"{project.name} ({len(files)})"):
            for project_file in files:
                icon = FILE_ICONS.get(project_file.type, FILE_ICONS["other"])
                st.markdown(f"{icon} [{project_file.name}]({page_link(state, project.slug)})")


def _render_tool_card(tool: Tool, lang: str):
    with st.container(border=True):
        title = f"[{tool.name}]({tool.url})" if tool.url else tool.name
        st.markdown(f"**{title}**")
        if tool.description:
            st.caption(tool.description)
        if tool.used_for:
            st.markdown(f"*{t('tools.used_for', lang)}:* {tool.used_for}")
        if tool.projects_using:
            st.caption(f"{tool.projects_using} {t('tools.projects_using', lang)}")


def render_tools_section(tools: List[Tool], lang: str):
    """Renders the tools grid with an all/software/hardware filter."""
    st.markdown(f"## {t('tools.title', lang)}")
    st.caption(t("tools.subtitle", lang))

    options = [ALL_TOOLS_ID, "software", "hardware"]
    selected = st.radio(
        label=t("tools.filter", lang),
        options=options,
        format_func=lambda option: t(f"tools.filter_{option}", lang),
        horizontal=True,
        label_visibility="collapsed",
    )

    visible = filter_tools(tools, selected)
    num_columns = 3
    for start in range(0, len(visible), num_columns):
        cols = st.columns(num_columns)
        for i, tool in enumerate(visible[start:start + num_columns]):
            with cols[i]:
                _render_tool_card(tool, lang)


def render_landing_page(projects: List[ProjectRecord], catalog: ProjectCatalog, site_config: SiteConfig, state: AppState):
    render_hero(site_config, state.language)
    st.write("---")
    render_projects_grid(projects, catalog, state)
    st.write("---")
    render_documentation_section(projects, state)
    if site_config.tools:
        st.write("---")
        render_tools_section(site_config.tools, state.language)


# --- Project Detail Page ---

def render_project_details(project: ProjectRecord, catalog: ProjectCatalog, site_config: SiteConfig, state: AppState):
    """Renders the detail page for a single project."""
    lang = state.language
    st.markdown(
        f'<a href="{page_link(state)}" target="_self">← {html.escape(t("detail.back", lang))}</a>',
        unsafe_allow_html=True,
    )
    st.markdown(_status_badge(project.status, lang))
    st.title(project.name)
    if project.description:
        st.markdown(f"> {project.description}")

    _render_downloads(project, catalog, lang)
    st.write("---")

    if project.readme:
        st.markdown(project.readme)
    else:
        st.info(t("detail.no_readme", lang))

    _render_gallery(project, catalog, lang)

    st.write("---")
    st.subheader(t("detail.want_one", lang))
    repo_url = f"{site_config.catalog.repo_tree_url.rstrip('/')}/{project.slug}"
    st.link_button(t("detail.view_on_github", lang), repo_url)


def _render_downloads(project: ProjectRecord, catalog: ProjectCatalog, lang: str):
    if not project.files:
        return
    cols = st.columns(min(3, len(project.files)))
    for i, project_file in enumerate(project.files):
        path = catalog.resolve_asset(project.slug, project_file.path)
        if not path:
            continue
        mime, _ = mimetypes.guess_type(project_file.name)
        cols[i % len(cols)].download_button(
            label=f"{FILE_ICONS.get(project_file.type, '')} {project_file.name}",
            data=path.read_bytes(),
            file_name=project_file.name,
            mime=mime or "application/octet-stream",
            key=f"download-{project.slug}-{project_file.name}",
        )


def _render_gallery(project: ProjectRecord, catalog: ProjectCatalog, lang: str):
    gallery_paths = [p for p in (catalog.resolve_asset(project.slug, img) for img in project.images) if p]
    images = [img for img in (open_project_image(p) for p in gallery_paths) if img is not None]
    if not images:
        return
    st.subheader(t("detail.gallery", lang))
    cols = st.columns(min(3, len(images)))
    for i, image in enumerate(images):
        cols[i % len(cols)].image(image)


def render_not_found(state: AppState):
    """Shown when the requested project folder does not exist."""
    lang = state.language
    st.header(t("not_found.title", lang))
    st.write(t("not_found.message", lang))
    st.markdown(
        f'<a href="{page_link(state)}" target="_self">← {html.escape(t("detail.back", lang))}</a>',
        unsafe_allow_html=True,
    )
