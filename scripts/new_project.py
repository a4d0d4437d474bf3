#!/usr/bin/env python3
# scripts/new_project.py

from __future__ import annotations
import argparse
from pathlib import Path
import sys

from hios.core.constants import PICS_DIRNAME, PROJECTS_DIR, README_FILENAME
from hios.core.utils import slugify

README_TEMPLATE = """# {name}

{description}

## What it does

- Point 1
- Point 2

## Lessons learned

"""


def create_project(name: str, description: str, projects_dir: Path, with_pics: bool = True) -> Path:
    """Creates the folder layout the catalog expects and returns its path."""
    project_slug = slugify(name)
    if not project_slug:
        raise ValueError("Could not generate a valid slug from the provided name.")

    target_dir = projects_dir / project_slug
    if target_dir.exists():
        raise FileExistsError(f"Project directory '{target_dir}' already exists.")

    target_dir.mkdir(parents=True)
    if with_pics:
        (target_dir / PICS_DIRNAME).mkdir()

    readme = README_TEMPLATE.format(name=name, description=description)
    (target_dir / README_FILENAME).write_text(readme, encoding="utf-8")
    return target_dir


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a new project folder scaffold.")
    parser.add_argument("name", help="The name of the project, e.g., 'WiFi Speaker'")
    parser.add_argument("--description", default="A short description.", help="The one-line description shown on the card")
    parser.add_argument("--projects-dir", type=Path, default=PROJECTS_DIR, help="Root folder of the catalog")
    parser.add_argument("--no-pics", action="store_true", help="Do not create the pics/ folder")
    args = parser.parse_args(argv)

    try:
        target_dir = create_project(args.name, args.description, args.projects_dir, with_pics=not args.no_pics)
    except (ValueError, FileExistsError) as e:
        print(f"Error: {e}")
        return 1

    print(f"Created project: {target_dir.name}")
    print(f"Scaffold created at: {target_dir}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
