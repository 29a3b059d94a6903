from .service import RepositoryAnalyzer

__all__ = ["RepositoryAnalyzer"]
