"""Result models for repository snapshot analysis."""

from .analysis_result import AnalysisResult, AnalysisResultDict, ProjectStats, TreeStats

__all__ = [
    "AnalysisResult",
    "AnalysisResultDict",
    "ProjectStats",
    "TreeStats",
]
