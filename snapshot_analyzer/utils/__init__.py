from .file_category import FileCategory, classify_file

__all__ = ["FileCategory", "classify_file"]
