"""
Project catalog: turns the `projects/` directory into ProjectRecord objects.

Layout of one project folder:

    projects/<slug>/README.md     -> name, description, readme
    projects/<slug>/pics/*.jpg    -> images (/images/<slug>/<file>)
    projects/<slug>/*.pdf, *.md   -> files  (/downloads/<slug>/<file>)

Nothing is cached: every call reads the disk again.
"""

from __future__ import annotations
from pathlib import Path
from typing import List, Optional
import logging

from .constants import (
    CODE_EXTENSIONS,
    DEFAULT_PROJECT_STATUS,
    DOWNLOADS_URL_PREFIX,
    IMAGE_EXTENSIONS,
    IMAGES_URL_PREFIX,
    PICS_DIRNAME,
    README_FILENAME,
)
from .models import FileType, ProjectFile, ProjectRecord, ProjectStatus
from .readme import parse_readme
from .utils import is_safe_slug, read_text_file, secure_path_resolve

logger = logging.getLogger(__name__)

PUBLISHED_FILE_TYPES = ("pdf", "md")


def classify_file(filename: str) -> FileType:
    """Classifies a file by its extension only."""
    suffix = Path(filename).suffix.lower()
    if suffix == ".pdf":
        return "pdf"
    if suffix == ".md":
        return "md"
    if suffix in CODE_EXTENSIONS:
        return "code"
    return "other"

def is_published(filename: str, file_type: FileType) -> bool:
    """Only documents are offered for download; the README is shown inline instead."""
    if file_type not in PUBLISHED_FILE_TYPES:
        return False
    return not (file_type == "md" and filename == README_FILENAME)

def is_image(filename: str) -> bool:
    return Path(filename).suffix.lower() in IMAGE_EXTENSIONS


class ProjectCatalog:
    """Read-only view over a directory of project folders."""

    def __init__(self, root: Path, default_status: ProjectStatus = DEFAULT_PROJECT_STATUS):
        self.root = Path(root)
        self.default_status = default_status

    # --- Listing ---

    def list_slugs(self) -> List[str]:
        """Names of the directories directly under the root, sorted."""
        if not self.root.is_dir():
            logger.warning("Projects directory not found: %s", self.root)
            return []
        return sorted(entry.name for entry in self.root.iterdir() if entry.is_dir())

    # --- Single Project ---

    def get_project(self, slug: str) -> Optional[ProjectRecord]:
        """Builds the record for one project, or None when it does not exist."""
        if not is_safe_slug(slug):
            logger.warning("Rejected unsafe project slug: %r", slug)
            return None

        project_path = self.root / slug
        if not project_path.is_dir():
            return None

        readme_path = project_path / README_FILENAME
        readme = read_text_file(readme_path) if readme_path.is_file() else ""
        name, description = parse_readme(readme, fallback_name=slug.upper())

        record = ProjectRecord(
            slug=slug,
            name=name,
            description=description,
            status=self.default_status,
            images=self._collect_images(project_path, slug),
            readme=readme,
            files=self._collect_files(project_path, slug),
        )
        logger.debug(
            "Loaded project '%s': %d images, %d files",
            slug, len(record.images), len(record.files)
        )
        return record

    def _collect_images(self, project_path: Path, slug: str) -> List[str]:
        pics_path = project_path / PICS_DIRNAME
        if not pics_path.is_dir():
            return []
        return [
            f"{IMAGES_URL_PREFIX}/{slug}/{entry.name}"
            for entry in sorted(pics_path.iterdir(), key=lambda p: p.name)
            if entry.is_file() and is_image(entry.name)
        ]

    def _collect_files(self, project_path: Path, slug: str) -> List[ProjectFile]:
        files: List[ProjectFile] = []
        for entry in sorted(project_path.iterdir(), key=lambda p: p.name):
            if not entry.is_file():
                continue
            file_type = classify_file(entry.name)
            if is_published(entry.name, file_type):
                files.append(ProjectFile(
                    name=entry.name,
                    path=f"{DOWNLOADS_URL_PREFIX}/{slug}/{entry.name}",
                    type=file_type,
                ))
        return files

    # --- Whole Catalog ---

    def get_all_projects(self) -> List[ProjectRecord]:
        """Records for every listed project; folders that vanished meanwhile are skipped."""
        projects: List[ProjectRecord] = []
        for slug in self.list_slugs():
            try:
                project = self.get_project(slug)
            except FileNotFoundError:
                # Removed between the existence check and the read.
                logger.info("Project '%s' disappeared while loading, skipping.", slug)
                continue
            if project is not None:
                projects.append(project)
        logger.info("Loaded %d projects from %s", len(projects), self.root)
        return projects

    # --- Asset Resolution ---

    def resolve_asset(self, slug: str, url: str) -> Optional[Path]:
        """
        Maps a published image or download URL back to the file on disk.
        Returns None for foreign URLs, unsafe slugs, traversal attempts and missing files.
        """
        if not is_safe_slug(slug):
            return None

        images_prefix = f"{IMAGES_URL_PREFIX}/{slug}/"
        downloads_prefix = f"{DOWNLOADS_URL_PREFIX}/{slug}/"
        project_path = self.root / slug
        if url.startswith(images_prefix):
            base_dir, filename = project_path / PICS_DIRNAME, url[len(images_prefix):]
        elif url.startswith(downloads_prefix):
            base_dir, filename = project_path, url[len(downloads_prefix):]
        else:
            return None

        try:
            return secure_path_resolve(base_dir, filename)
        except (ValueError, FileNotFoundError) as e:
            logger.warning("Could not resolve asset '%s' for project '%s': %s", url, slug, e)
            return None

