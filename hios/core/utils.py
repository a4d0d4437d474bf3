from __future__ import annotations
from typing import Any, Dict
from pathlib import Path
import re
import yaml
import logging

import streamlit as st
from PIL import Image
from slugify import slugify as python_slugify

logger = logging.getLogger(__name__)

# Letters, digits, hyphen and underscore; must start with a letter or digit.
SAFE_SLUG_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")


# --- File Readers ---

def read_text_file(path: str | Path) -> str:
    """Reads a UTF-8 text file, replacing undecodable bytes. Not cached: project content can change between requests."""
    p = Path(path)
    return p.read_text(encoding="utf-8", errors="replace")

@st.cache_data(show_spinner=False)
def read_yaml_file(path: str | Path) -> Dict[str, Any]:
    """Cached function to read a YAML file."""
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

def load_image(path: str | Path) -> Image.Image:
    """Opens an image from the project tree."""
    p = Path(path)
    return Image.open(str(p))


# --- Security & Path Utilities ---

def is_safe_slug(slug: str) -> bool:
    """True when the slug can be joined to a directory without escaping it."""
    return bool(slug) and SAFE_SLUG_RE.match(slug) is not None

def secure_path_resolve(base_dir: Path, user_path: str) -> Path:
    """
    Safely resolves a path, ensuring it doesn't escape the base directory.
    Prevents Path Traversal attacks.
    """
    abs_base = base_dir.resolve()
    abs_res = (abs_base / user_path).resolve()

    if abs_res != abs_base and abs_base not in abs_res.parents:
        logger.warning(
            "Path Traversal attempt detected: base='%s', path='%s'",
            base_dir, user_path
        )
        raise ValueError("Path Traversal attempt detected")

    if not abs_res.exists():
        raise FileNotFoundError(f"Asset not found at resolved path: {abs_res}")

    return abs_res


# --- String Utilities ---

def slugify(text: str) -> str:
    """Generates a URL-friendly slug from a string."""
    return python_slugify(text)
