"""App constants, overridable via environment variables."""

import os
from pathlib import Path

# Snapshot root; default "analysis_temp" under the working directory, overridable via ANALYSIS_TEMP_DIR env
ANALYSIS_TEMP_DIR = (
    Path(os.environ["ANALYSIS_TEMP_DIR"])
    if os.environ.get("ANALYSIS_TEMP_DIR")
    else Path.cwd() / "analysis_temp"
)

# ── Clone ─────────────────────────────────────────────────────────────────────
# "git" runs the git executable; "dulwich" clones in-process.
CLONE_BACKEND: str = os.environ.get("CLONE_BACKEND", "git")

# Seconds before a clone is aborted.
CLONE_TIMEOUT_SECONDS: int = int(os.environ.get("CLONE_TIMEOUT_SECONDS", "300"))

# Branch used when a request does not name one.
DEFAULT_BRANCH: str = os.environ.get("DEFAULT_BRANCH", "main")

# ── Traversal ─────────────────────────────────────────────────────────────────
# "replace" counts non-UTF-8 files like any other; "strict" fails the analysis on them.
DECODE_ERRORS: str = os.environ.get("DECODE_ERRORS", "replace")
