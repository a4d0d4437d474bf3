"""Unit tests for core/projects.py — ProjectCatalog behaviour over real temp trees."""

import shutil
from pathlib import Path

import pytest

from hios.core.projects import ProjectCatalog, classify_file, is_image, is_published

# ---------------------------------------------------------------------------
# classification helpers
# ---------------------------------------------------------------------------


class TestClassifyFile:
    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("guide.pdf", "pdf"),
            ("notes.md", "md"),
            ("firmware.ino", "code"),
            ("main.cpp", "code"),
            ("pins.h", "code"),
            ("board.kicad_pcb", "other"),
            ("Makefile", "other"),
        ],
    )
    def test_by_extension(self, filename: str, expected: str) -> None:
        assert classify_file(filename) == expected

    def test_extension_is_case_insensitive(self) -> None:
        assert classify_file("MANUAL.PDF") == "pdf"


class TestIsPublished:
    def test_pdf_is_published(self) -> None:
        assert is_published("guide.pdf", "pdf")

    def test_markdown_other_than_readme_is_published(self) -> None:
        assert is_published("guide.md", "md")

    def test_readme_is_not_published(self) -> None:
        assert not is_published("README.md", "md")

    def test_code_and_other_are_not_published(self) -> None:
        assert not is_published("main.cpp", "code")
        assert not is_published("photo.zip", "other")


class TestIsImage:
    def test_accepts_raster_formats_in_any_case(self) -> None:
        assert all(is_image(n) for n in ["a.jpg", "b.JPEG", "c.Png", "d.webp"])

    def test_rejects_other_files(self) -> None:
        assert not is_image("notes.txt")
        assert not is_image("logo.svg")


# ---------------------------------------------------------------------------
# list_slugs
# ---------------------------------------------------------------------------


class TestListSlugs:
    def test_missing_root_returns_empty_list(self, tmp_path: Path) -> None:
        catalog = ProjectCatalog(tmp_path / "does-not-exist")
        assert catalog.list_slugs() == []

    def test_returns_only_directories(self, catalog, make_project, projects_root) -> None:
        make_project("btdac")
        make_project("wspeaker")
        (projects_root / "stray.txt").write_text("x")

        assert catalog.list_slugs() == ["btdac", "wspeaker"]

    def test_sorted_output(self, catalog, make_project) -> None:
        for slug in ["zeta", "alpha", "mid"]:
            make_project(slug)
        assert catalog.list_slugs() == ["alpha", "mid", "zeta"]


# ---------------------------------------------------------------------------
# get_project
# ---------------------------------------------------------------------------


class TestGetProject:
    def test_returns_none_for_unknown_slug(self, catalog) -> None:
        assert catalog.get_project("nope") is None

    def test_returns_none_when_root_missing(self, tmp_path: Path) -> None:
        assert ProjectCatalog(tmp_path / "missing").get_project("btdac") is None

    @pytest.mark.parametrize("slug", ["../etc", "..", "a/b", ".hidden", "", "with space"])
    def test_rejects_unsafe_slugs(self, catalog, slug: str) -> None:
        assert catalog.get_project(slug) is None

    def test_name_from_first_heading(self, catalog, make_project) -> None:
        make_project("widget", readme="# Widget\n\nA tiny widget.\n")

        project = catalog.get_project("widget")

        assert project is not None
        assert project.name == "Widget"
        assert project.description == "A tiny widget."

    def test_name_falls_back_to_uppercased_slug(self, catalog, make_project) -> None:
        make_project("btdac")

        project = catalog.get_project("btdac")

        assert project.name == "BTDAC"
        assert project.description == ""
        assert project.readme == ""

    def test_readme_is_kept_verbatim(self, catalog, make_project) -> None:
        text = "# Widget\n\nBody\n\n## Section\n"
        make_project("widget", readme=text)
        assert catalog.get_project("widget").readme == text

    def test_status_is_default_prototype(self, catalog, make_project) -> None:
        make_project("btdac", readme="# BTDAC")
        assert catalog.get_project("btdac").status == "prototype"

    def test_status_follows_configured_default(self, projects_root, make_project) -> None:
        make_project("btdac")
        catalog = ProjectCatalog(projects_root, default_status="wip")
        assert catalog.get_project("btdac").status == "wip"

    def test_images_filtered_by_extension(self, catalog, make_project) -> None:
        make_project("btdac", pics=["a.jpg", "b.PNG", "notes.txt"])

        project = catalog.get_project("btdac")

        assert project.images == ["/images/btdac/a.jpg", "/images/btdac/b.PNG"]

    def test_images_empty_without_pics_folder(self, catalog, make_project) -> None:
        make_project("btdac")
        assert catalog.get_project("btdac").images == []

    def test_images_sorted_by_filename(self, catalog, make_project) -> None:
        make_project("btdac", pics=["c.jpg", "a.webp", "b.jpeg"])
        assert catalog.get_project("btdac").images == [
            "/images/btdac/a.webp",
            "/images/btdac/b.jpeg",
            "/images/btdac/c.jpg",
        ]

    def test_files_exclude_readme_and_non_documents(self, catalog, make_project) -> None:
        make_project(
            "btdac",
            readme="# BTDAC",
            files=["guide.md", "schematic.pdf", "main.cpp", "firmware.ino", "board.zip"],
        )

        files = catalog.get_project("btdac").files

        assert [(f.name, f.path, f.type) for f in files] == [
            ("guide.md", "/downloads/btdac/guide.md", "md"),
            ("schematic.pdf", "/downloads/btdac/schematic.pdf", "pdf"),
        ]

    def test_subdirectories_are_not_files(self, catalog, make_project) -> None:
        folder = make_project("btdac", pics=["a.jpg"])
        (folder / "docs.md").mkdir()
        assert catalog.get_project("btdac").files == []

    def test_readme_with_invalid_utf8_still_loads(self, catalog, make_project) -> None:
        folder = make_project("beta")
        (folder / "README.md").write_bytes(b"# Beta\n\xff\xfe caf\xe9\n")

        project = catalog.get_project("beta")

        assert project.name == "Beta"
        assert "\ufffd" in project.readme

    def test_rereads_disk_on_every_call(self, catalog, make_project) -> None:
        folder = make_project("btdac", readme="# Old")
        assert catalog.get_project("btdac").name == "Old"

        (folder / "README.md").write_text("# New", encoding="utf-8")

        assert catalog.get_project("btdac").name == "New"


# ---------------------------------------------------------------------------
# get_all_projects
# ---------------------------------------------------------------------------


class TestGetAllProjects:
    def test_missing_root_returns_empty_list(self, tmp_path: Path) -> None:
        assert ProjectCatalog(tmp_path / "missing").get_all_projects() == []

    def test_returns_record_per_directory(self, catalog, make_project) -> None:
        make_project("alpha", readme="# Alpha")
        make_project("beta", readme="# Beta")

        projects = catalog.get_all_projects()

        assert [p.slug for p in projects] == ["alpha", "beta"]
        assert [p.name for p in projects] == ["Alpha", "Beta"]

    def test_undecodable_readme_does_not_drop_projects(self, catalog, make_project) -> None:
        make_project("alpha", readme="# Alpha")
        beta = make_project("beta")
        (beta / "README.md").write_bytes(b"# Beta\n\xff\xfe caf\xe9\n")

        projects = catalog.get_all_projects()

        assert [p.slug for p in projects] == ["alpha", "beta"]

    def test_skips_directory_deleted_after_listing(self, catalog, make_project, monkeypatch) -> None:
        make_project("alpha", readme="# Alpha")
        doomed = make_project("beta", readme="# Beta")
        slugs = catalog.list_slugs()
        shutil.rmtree(doomed)
        monkeypatch.setattr(catalog, "list_slugs", lambda: slugs)

        projects = catalog.get_all_projects()

        assert [p.slug for p in projects] == ["alpha"]

    def test_skips_directory_vanishing_mid_read(self, catalog, make_project, monkeypatch) -> None:
        make_project("alpha", readme="# Alpha")
        make_project("beta", readme="# Beta")
        real_get_project = catalog.get_project

        def flaky(slug):
            if slug == "beta":
                raise FileNotFoundError(slug)
            return real_get_project(slug)

        monkeypatch.setattr(catalog, "get_project", flaky)

        assert [p.slug for p in catalog.get_all_projects()] == ["alpha"]

    def test_unsafe_directory_names_are_dropped(self, catalog, make_project) -> None:
        make_project("alpha")
        make_project(".git")
        assert [p.slug for p in catalog.get_all_projects()] == ["alpha"]


# ---------------------------------------------------------------------------
# resolve_asset
# ---------------------------------------------------------------------------


class TestResolveAsset:
    def test_resolves_image_url(self, catalog, make_project) -> None:
        folder = make_project("btdac", pics=["a.jpg"])
        path = catalog.resolve_asset("btdac", "/images/btdac/a.jpg")
        assert path == (folder / "pics" / "a.jpg").resolve()

    def test_resolves_download_url(self, catalog, make_project) -> None:
        folder = make_project("btdac", files=["guide.pdf"])
        path = catalog.resolve_asset("btdac", "/downloads/btdac/guide.pdf")
        assert path == (folder / "guide.pdf").resolve()

    def test_missing_file_returns_none(self, catalog, make_project) -> None:
        make_project("btdac")
        assert catalog.resolve_asset("btdac", "/downloads/btdac/nothing.pdf") is None

    def test_foreign_url_returns_none(self, catalog, make_project) -> None:
        make_project("btdac", files=["guide.pdf"])
        assert catalog.resolve_asset("btdac", "/downloads/other/guide.pdf") is None

    def test_traversal_returns_none(self, catalog, make_project, projects_root) -> None:
        make_project("btdac")
        (projects_root.parent / "secret.txt").write_text("x")
        assert catalog.resolve_asset("btdac", "/downloads/btdac/../../secret.txt") is None
