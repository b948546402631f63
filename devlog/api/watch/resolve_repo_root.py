"""Resolve a directory to the root of its git working tree."""

import subprocess
from pathlib import Path

from .NotARepositoryError import NotARepositoryError


def resolve_repo_root(path: Path | str) -> str:
    """Return the absolute top-level directory of the repository containing ``path``.

    Raises:
        NotARepositoryError: If ``path`` is missing or not inside a git work tree
    """
    result = subprocess.run(
        ["git", "-C", str(path), "rev-parse", "--show-toplevel"],
        capture_output=True,
        text=True,
        timeout=5,
    )
    root = result.stdout.strip()
    if result.returncode != 0 or not root:
        raise NotARepositoryError(str(path))
    return root
