#!/usr/bin/env python3
"""Markdown file discovery for content collections."""

from pathlib import Path
from typing import List


MARKDOWN_SUFFIX = '.md'


def collect_md_files(root: Path) -> List[Path]:
    """Recursively collect markdown files under a collection root.

    Entries are visited in the order the filesystem lists them; callers that
    need a stable order sort the result.

    Args:
        root: Collection root directory

    Returns:
        List of markdown file paths, empty if root is missing or unreadable
    """
    files: List[Path] = []
    try:
        for entry in Path(root).iterdir():
            if entry.is_dir():
                files.extend(collect_md_files(entry))
            elif entry.name.endswith(MARKDOWN_SUFFIX):
                files.append(entry)
    except OSError:
        # Missing collection directory counts as an empty collection
        pass
    return files
