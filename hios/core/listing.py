from __future__ import annotations
from typing import List, Tuple

from .constants import ALL_TOOLS_ID
from .models import ProjectFile, ProjectRecord, Tool


def collect_documents(projects: List[ProjectRecord]) -> List[Tuple[ProjectRecord, List[ProjectFile]]]:
    """Groups the published files by project, skipping projects with nothing to download."""
    return [(project, list(project.files)) for project in projects if project.files]

def count_documents(projects: List[ProjectRecord]) -> int:
    return sum(len(project.files) for project in projects)

def filter_tools(tools: List[Tool], category: str) -> List[Tool]:
    """Keeps the tools of one category; the 'all' id keeps everything."""
    normalized = (category or ALL_TOOLS_ID).strip().lower()
    if normalized == ALL_TOOLS_ID:
        return list(tools)
    return [tool for tool in tools if tool.category == normalized]
