"""Capture a repository's uncommitted state without touching its real index."""

from __future__ import annotations

__all__ = ["shadow_index_path", "take_snapshot"]

import logging
import os
import subprocess
from datetime import datetime
from pathlib import Path

from ...constants import ENTRY_TIME_FORMAT, SHADOW_INDEX_NAME
from .SnapshotError import SnapshotError

logger = logging.getLogger(__name__)


def shadow_index_path(repo_path: Path | str) -> Path:
    """Private index file used in place of ``.git/index`` for snapshots."""
    return Path(repo_path) / ".git" / SHADOW_INDEX_NAME


def _run_git(repo_path: str, args: list[str], env: dict[str, str], step: str) -> bytes:
    result = subprocess.run(["git", "-C", repo_path, *args], capture_output=True, env=env)
    if result.returncode != 0:
        raise SnapshotError(repo_path, step, result.stderr.decode("utf-8", errors="replace").strip())
    return result.stdout


def take_snapshot(
    repo_path: Path | str,
    project_name: str,
    log_file: Path,
    prev_diff: bytes,
    now: datetime | None = None,
) -> bytes:
    """Append the working-tree diff of ``repo_path`` to ``log_file`` if it changed.

    Stages everything (tracked changes and untracked files) into a private
    index selected with ``GIT_INDEX_FILE`` in the child environment only,
    then diffs that index against ``HEAD``. The user's real index is never
    read or written, and the daemon's own environment is never modified.

    The diff is kept as the bytes git produced, so file content in any
    encoding reaches the log unchanged.

    Args:
        repo_path: Repository root
        project_name: Project the snapshot is filed under (used for logging)
        log_file: Snapshot log to append to
        prev_diff: Last diff written for this repository, ``b""`` if none
        now: Timestamp for the entry header; defaults to the local time

    Returns:
        ``b""`` if there are no changes, otherwise the captured diff. The diff
        is returned unchanged when it equals ``prev_diff``; nothing is written
        in that case.

    Raises:
        SnapshotError: If ``git add`` or ``git diff`` exits non-zero
        OSError: If the repository directory is inaccessible or the log
            cannot be written
    """
    repo = str(repo_path)
    env = {**os.environ, "GIT_INDEX_FILE": str(shadow_index_path(repo))}

    _run_git(repo, ["add", "-A"], env, "add")
    diff = _run_git(repo, ["diff", "--no-color", "HEAD"], env, "diff")

    if not diff.strip():
        return b""

    if diff == prev_diff:
        logger.debug("Snapshot unchanged for %s (%s), skipping", project_name, repo)
        return diff

    log_file.parent.mkdir(parents=True, exist_ok=True)
    stamp = (now or datetime.now()).strftime(ENTRY_TIME_FORMAT)
    with log_file.open("ab") as fh:
        fh.write(f"=== SNAPSHOT {stamp} ===\n".encode())
        fh.write(diff)
        fh.write(b"\n")

    logger.info("Snapshot written for %s to %s", project_name, log_file)
    return diff
