from __future__ import annotations
from typing import Iterable, Optional, Tuple

TITLE_PREFIX = "# "
HEADING_MARKER = "#"


def find_title(lines: Iterable[str]) -> Optional[str]:
    """Returns the text of the first top-level '# ' heading, or None."""
    for line in lines:
        if line.startswith(TITLE_PREFIX):
            return line[len(TITLE_PREFIX):].strip()
    return None

def find_description(lines: Iterable[str]) -> str:
    """Returns the first non-blank line that is not a heading."""
    for line in lines:
        if line.strip() and not line.startswith(HEADING_MARKER):
            return line.strip()
    return ""

def parse_readme(text: str, fallback_name: str) -> Tuple[str, str]:
    """
    Derives (name, description) from free-form README text.

    Both scans start from the top and the first match wins. A README
    without a title line falls back to `fallback_name`.
    """
    lines = text.split("\n")
    title = find_title(lines)
    name = title if title is not None else fallback_name
    return name, find_description(lines)
