"""Immutable statistics produced by walking a repository snapshot."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TypedDict

from ..utils.file_category import FileCategory


class ProjectStatsDict(TypedDict):
    script: int
    data: int
    documentation: int


class AnalysisResultDict(TypedDict):
    file_count: int
    total_lines: int
    stats: ProjectStatsDict
    analysis_date: str


@dataclass(frozen=True)
class ProjectStats:
    """File counts per category. Files with no category are not counted here."""

    script_files: int = 0
    data_files: int = 0
    documentation_files: int = 0

    @classmethod
    def for_category(cls, category: FileCategory | None) -> "ProjectStats":
        """Stats for a single file of the given category (all zero for None)."""
        if category is FileCategory.SCRIPT:
            return cls(script_files=1)
        if category is FileCategory.DATA:
            return cls(data_files=1)
        if category is FileCategory.DOCUMENTATION:
            return cls(documentation_files=1)
        return cls()

    def __add__(self, other: "ProjectStats") -> "ProjectStats":
        return ProjectStats(
            script_files=self.script_files + other.script_files,
            data_files=self.data_files + other.data_files,
            documentation_files=self.documentation_files + other.documentation_files,
        )

    @property
    def count_by_category(self) -> dict[FileCategory, int]:
        return {
            FileCategory.SCRIPT: self.script_files,
            FileCategory.DATA: self.data_files,
            FileCategory.DOCUMENTATION: self.documentation_files,
        }

    @property
    def categorized_files(self) -> int:
        return self.script_files + self.data_files + self.documentation_files

    def to_dict(self) -> ProjectStatsDict:
        return ProjectStatsDict(
            script=self.script_files,
            data=self.data_files,
            documentation=self.documentation_files,
        )


@dataclass(frozen=True)
class TreeStats:
    """
    Partial result for part of a tree. Partials over disjoint files are summed,
    so the walk order never affects the totals.
    """

    file_count: int = 0
    total_lines: int = 0
    stats: ProjectStats = field(default_factory=ProjectStats)

    @classmethod
    def for_file(cls, line_count: int, category: FileCategory | None) -> "TreeStats":
        return cls(file_count=1, total_lines=line_count, stats=ProjectStats.for_category(category))

    def __add__(self, other: "TreeStats") -> "TreeStats":
        return TreeStats(
            file_count=self.file_count + other.file_count,
            total_lines=self.total_lines + other.total_lines,
            stats=self.stats + other.stats,
        )


@dataclass(frozen=True)
class AnalysisResult:
    """
    Aggregate statistics for one analyzed repository snapshot.

    analysis_date is the UTC time at which the snapshot was removed.
    """

    file_count: int
    total_lines: int
    stats: ProjectStats
    analysis_date: datetime

    @classmethod
    def from_tree_stats(cls, tree: TreeStats, *, analysis_date: datetime | None = None) -> "AnalysisResult":
        return cls(
            file_count=tree.file_count,
            total_lines=tree.total_lines,
            stats=tree.stats,
            analysis_date=analysis_date or datetime.now(timezone.utc),
        )

    def to_dict(self) -> AnalysisResultDict:
        """Serialize for JSON responses."""
        return AnalysisResultDict(
            file_count=self.file_count,
            total_lines=self.total_lines,
            stats=self.stats.to_dict(),
            analysis_date=self.analysis_date.isoformat(),
        )
