"""Errors raised while cloning, walking, or removing a repository snapshot."""

from pathlib import Path


class SnapshotError(Exception):
    """Base error for a failed analysis. Wraps the underlying cause."""

    def __init__(self, message: str, *, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class CloneError(SnapshotError):
    """The clone could not be started, timed out, or exited non-zero."""


class TraversalError(SnapshotError):
    """A directory listing or file read failed during the walk."""

    def __init__(self, message: str, *, path: Path | str, cause: BaseException | None = None):
        super().__init__(message, cause=cause)
        self.path = Path(path)


class CleanupError(SnapshotError):
    """The snapshot directory could not be removed after a successful analysis."""

    def __init__(self, message: str, *, path: Path | str, cause: BaseException | None = None):
        super().__init__(message, cause=cause)
        self.path = Path(path)
