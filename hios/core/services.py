from __future__ import annotations
from typing import List, Optional
import logging

import streamlit as st

from .models import SiteConfig, ProjectRecord
from .projects import ProjectCatalog
from .utils import read_yaml_file
from .constants import CONFIG_DIR

logger = logging.getLogger(__name__)


# --- Configuration Loading ---

@st.cache_data(show_spinner=False)
def load_site_config() -> SiteConfig:
    """Loads the main site configuration from site.yaml, with HIOS_* env overrides."""
    config_path = CONFIG_DIR / "site.yaml"
    if not config_path.exists():
        logger.error("site.yaml not found, using default SiteConfig.")
        return SiteConfig()

    data = read_yaml_file(config_path)
    return SiteConfig(**data)


# --- Project Catalog ---
# Not cached: project folders change out-of-band between renders.

def get_catalog() -> ProjectCatalog:
    """Catalog over the configured projects directory."""
    catalog_config = load_site_config().catalog
    return ProjectCatalog(catalog_config.projects_dir, catalog_config.default_status)

def get_project_slugs() -> List[str]:
    return get_catalog().list_slugs()

def get_project_by_slug(slug: str) -> Optional[ProjectRecord]:
    return get_catalog().get_project(slug)

def get_all_projects() -> List[ProjectRecord]:
    return get_catalog().get_all_projects()
