from .repo_git_utils import clone_snapshot, repo_local_name
from .snapshot import remove_snapshot, snapshot_path, snapshot_workspace

__all__ = [
    "clone_snapshot",
    "repo_local_name",
    "remove_snapshot",
    "snapshot_path",
    "snapshot_workspace",
]
