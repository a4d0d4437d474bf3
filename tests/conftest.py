"""Shared fixtures: throwaway project trees under tmp_path."""

from pathlib import Path

import pytest

from hios.core.projects import ProjectCatalog


@pytest.fixture
def projects_root(tmp_path: Path) -> Path:
    root = tmp_path / "projects"
    root.mkdir()
    return root


@pytest.fixture
def make_project(projects_root: Path):
    """Factory: make_project(slug, readme=None, pics=(), files=()) -> project folder."""

    def _make(slug: str, readme: str | None = None, pics=(), files=()) -> Path:
        folder = projects_root / slug
        folder.mkdir()
        if readme is not None:
            (folder / "README.md").write_text(readme, encoding="utf-8")
        if pics:
            pics_dir = folder / "pics"
            pics_dir.mkdir()
            for name in pics:
                (pics_dir / name).write_bytes(b"\x89PNG")
        for name in files:
            (folder / name).write_bytes(b"content")
        return folder

    return _make


@pytest.fixture
def catalog(projects_root: Path) -> ProjectCatalog:
    return ProjectCatalog(projects_root)
