"""Service layer exports."""

from .analysis.service import RepositoryAnalyzer

__all__ = ["RepositoryAnalyzer"]
