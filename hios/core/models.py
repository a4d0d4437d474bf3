# hios/core/models.py

from __future__ import annotations
from typing import List, Optional, Literal
from pathlib import Path

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_LANGUAGE,
    DEFAULT_PROJECT_STATUS,
    DEFAULT_THEME,
    PROJECTS_DIR,
    ROOT_DIR,
)

# Lifecycle tag shown on project cards.
ProjectStatus = Literal["prototype", "concept", "wip"]
# Classification of a loose file in a project folder.
FileType = Literal["pdf", "md", "code", "other"]
ThemeMode = Literal["light", "dark"]
ToolCategory = Literal["software", "hardware"]


# --- Site Configuration Models ---

class LanguageEntry(BaseModel):
    code: str
    label: str
    flag: str = ""

class I18nConfig(BaseModel):
    default: str = DEFAULT_LANGUAGE
    languages: List[LanguageEntry] = [
        LanguageEntry(code="en", label="English", flag="gb"),
        LanguageEntry(code="es", label="Español", flag="es"),
        LanguageEntry(code="de", label="Deutsch", flag="de"),
        LanguageEntry(code="it", label="Italiano", flag="it"),
    ]

class ThemeConfig(BaseModel):
    default: ThemeMode = DEFAULT_THEME

class CatalogConfig(BaseModel):
    projects_dir: Path = PROJECTS_DIR
    # Every record gets this status; it is not read from the project folder.
    default_status: ProjectStatus = DEFAULT_PROJECT_STATUS
    repo_tree_url: str = "https://github.com/hios-open-systems/web/tree/main/projects"

    @field_validator("projects_dir")
    @classmethod
    def resolve_projects_dir(cls, v: Path) -> Path:
        # Relative paths in site.yaml are relative to the site root, not the cwd.
        return v if v.is_absolute() else ROOT_DIR / v

class Branding(BaseModel):
    page_icon: str = "🔧"
    brand_tag: str = "HIOS — HI Open Systems"
    accent_color: str = "#f59e0b"

class SocialLinks(BaseModel):
    github: Optional[str] = None
    email: Optional[str] = None

class Tool(BaseModel):
    name: str
    description: str = ""
    category: ToolCategory = "software"
    used_for: str = ""
    projects_using: int = 0
    url: str = ""

class SiteConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="HIOS_", env_nested_delimiter="__")

    site_name: str = "HIOS"
    tagline: str = ""
    author: str = ""
    social: SocialLinks = SocialLinks()
    branding: Branding = Branding()
    i18n: I18nConfig = I18nConfig()
    theme: ThemeConfig = ThemeConfig()
    catalog: CatalogConfig = CatalogConfig()
    tools: List[Tool] = []

    @classmethod
    def settings_customise_sources(
        cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings
    ):
        # Environment variables win over values read from site.yaml.
        return env_settings, init_settings, file_secret_settings


# --- Core Domain Models ---

class ProjectFile(BaseModel):
    """A downloadable file published for a project."""
    name: str
    path: str
    type: FileType


class ProjectRecord(BaseModel):
    """
    One project folder as seen at the moment it was read.
    Built fresh from disk on every request and never written back.
    """
    slug: str
    name: str
    description: str = ""
    status: ProjectStatus = DEFAULT_PROJECT_STATUS
    images: List[str] = []
    readme: str = ""
    files: List[ProjectFile] = []

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("slug must not be empty")
        return v

    @property
    def cover_image(self) -> Optional[str]:
        """First gallery image, used as the card cover."""
        return self.images[0] if self.images else None
