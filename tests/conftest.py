"""Shared pytest configuration and fixtures for all tests."""

import shutil
import subprocess
import tempfile
from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: tests that run a real daemon")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Git Helpers
# =============================================================================


def git(repo: Path, *args: str) -> str:
    """Run git in ``repo`` and return stdout; fail the test on error."""
    result = subprocess.run(
        ["git", "-C", str(repo), *args],
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


def init_git_repo(repo_path: Path, initial_files: dict[str, str] | None = None) -> Path:
    """Create a git repository with one commit and return its resolved root."""
    repo_path.mkdir(parents=True, exist_ok=True)
    subprocess.run(["git", "init", "-q"], cwd=repo_path, capture_output=True, check=True)
    git(repo_path, "config", "user.email", "test@example.com")
    git(repo_path, "config", "user.name", "Test User")
    git(repo_path, "config", "commit.gpgsign", "false")

    for name, content in (initial_files or {"README.md": "hello\n"}).items():
        target = repo_path / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content)
    git(repo_path, "add", "-A")
    git(repo_path, "commit", "-q", "-m", "Initial")
    return repo_path.resolve()


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def devlog_env(tmp_path: Path, monkeypatch) -> dict[str, Path]:
    """Point every devlog location at a private temp tree.

    The runtime dir lives directly under /tmp so socket paths stay short.

    Returns dict with config, state, data, runtime and raw directories.
    """
    runtime_dir = Path(tempfile.mkdtemp(prefix="dl-", dir="/tmp"))
    dirs = {
        "config": tmp_path / "xdg-config",
        "state": tmp_path / "xdg-state",
        "data": tmp_path / "xdg-data",
        "runtime": runtime_dir,
    }
    monkeypatch.setenv("XDG_CONFIG_HOME", str(dirs["config"]))
    monkeypatch.setenv("XDG_STATE_HOME", str(dirs["state"]))
    monkeypatch.setenv("XDG_DATA_HOME", str(dirs["data"]))
    monkeypatch.setenv("XDG_RUNTIME_DIR", str(runtime_dir))
    monkeypatch.delenv("DEVLOG_RAW_DIR", raising=False)
    monkeypatch.delenv("EDITOR", raising=False)
    dirs["raw"] = dirs["data"] / "devlog" / "raw"
    yield dirs
    shutil.rmtree(runtime_dir, ignore_errors=True)


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """A committed git repository named ``project``."""
    return init_git_repo(tmp_path / "repos" / "project")


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
