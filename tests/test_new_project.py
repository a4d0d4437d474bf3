"""Tests for scripts/new_project.py — scaffolding a project folder."""

import importlib.util
from pathlib import Path

import pytest

from hios.core.projects import ProjectCatalog

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "new_project.py"


@pytest.fixture(scope="module")
def new_project():
    spec = importlib.util.spec_from_file_location("new_project", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestCreateProject:
    def test_creates_readme_and_pics(self, new_project, projects_root: Path) -> None:
        target = new_project.create_project("WiFi Speaker", "ESP32 speaker.", projects_root)

        assert target == projects_root / "wifi-speaker"
        assert (target / "pics").is_dir()
        assert (target / "README.md").read_text(encoding="utf-8").startswith("# WiFi Speaker\n")

    def test_scaffold_is_readable_by_catalog(self, new_project, projects_root: Path) -> None:
        new_project.create_project("WiFi Speaker", "ESP32 speaker.", projects_root)

        project = ProjectCatalog(projects_root).get_project("wifi-speaker")

        assert project.name == "WiFi Speaker"
        assert project.description == "ESP32 speaker."
        assert project.files == []

    def test_refuses_existing_folder(self, new_project, projects_root: Path) -> None:
        new_project.create_project("BTDAC", "x", projects_root)
        with pytest.raises(FileExistsError):
            new_project.create_project("BTDAC", "x", projects_root)

    def test_refuses_unsluggable_name(self, new_project, projects_root: Path) -> None:
        with pytest.raises(ValueError):
            new_project.create_project("!!!", "x", projects_root)


class TestMain:
    def test_success_exit_code(self, new_project, projects_root: Path, capsys) -> None:
        code = new_project.main(["BTDAC", "--projects-dir", str(projects_root), "--no-pics"])

        assert code == 0
        assert not (projects_root / "btdac" / "pics").exists()
        assert "Created project: btdac" in capsys.readouterr().out

    def test_error_exit_code(self, new_project, projects_root: Path, capsys) -> None:
        (projects_root / "btdac").mkdir()

        code = new_project.main(["BTDAC", "--projects-dir", str(projects_root)])

        assert code == 1
        assert "Error:" in capsys.readouterr().out
