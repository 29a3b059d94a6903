"""Bucket files into statistics categories by extension."""

import os
from enum import Enum


class FileCategory(str, Enum):
    SCRIPT = "script"
    DATA = "data"
    DOCUMENTATION = "documentation"


_CATEGORY_BY_EXTENSION: dict[str, FileCategory] = {
    # JavaScript / TypeScript
    ".js": FileCategory.SCRIPT,
    ".jsx": FileCategory.SCRIPT,
    ".ts": FileCategory.SCRIPT,
    ".tsx": FileCategory.SCRIPT,
    # Data
    ".json": FileCategory.DATA,
    # Docs
    ".md": FileCategory.DOCUMENTATION,
    ".markdown": FileCategory.DOCUMENTATION,
}


def file_extension(file_name: str) -> str:
    """Lowercased extension including the dot; "" for none (".json" has none)."""
    return os.path.splitext(file_name)[1].lower()


def classify_file(file_name: str) -> FileCategory | None:
    """
    Return the category for a file name, or None if it counts toward no bucket.
    Matching is case-insensitive: README.MD is documentation.
    """
    if not file_name:
        return None
    return _CATEGORY_BY_EXTENSION.get(file_extension(file_name))
