"""Tests for watch commands when no daemon is running (state file edited directly)."""

import json
import shutil

from devlog.api.config.get_state_path import get_state_path
from devlog.api.watch.cmd_add import cmd_add
from devlog.api.watch.cmd_list import cmd_list
from devlog.api.watch.cmd_remove import cmd_remove
from tests.conftest import init_git_repo, run_cmd


def test_add_writes_state_file(devlog_env, git_repo):
    result = run_cmd(cmd_add, git_repo / ".")
    assert result.success is True
    assert result.output["via_daemon"] is False
    assert result.output["path"] == str(git_repo)
    assert result.output["name"] == "project"
    assert any("daemon not running" in w for w in result.output["warnings"])
    on_disk = json.loads(get_state_path().read_text())
    assert on_disk["watched"] == [{"path": str(git_repo), "name": "project"}]


def test_add_with_name(devlog_env, git_repo):
    result = run_cmd(cmd_add, git_repo, "backend")
    assert result.output["name"] == "backend"


def test_add_twice_warns_already_watched(devlog_env, git_repo):
    run_cmd(cmd_add, git_repo)
    result = run_cmd(cmd_add, git_repo)
    assert result.success is True
    assert any("already watched" in w for w in result.output["warnings"])
    assert len(result.output["watched"]) == 1


def test_add_name_conflict_fails(devlog_env, git_repo, tmp_path):
    other = init_git_repo(tmp_path / "other" / "project")
    run_cmd(cmd_add, git_repo)
    result = run_cmd(cmd_add, other)
    assert result.success is False
    assert "name conflict" in result.output["errors"][0]


def test_add_non_repository_fails(devlog_env, tmp_path):
    plain = tmp_path / "plain"
    plain.mkdir()
    result = run_cmd(cmd_add, plain)
    assert result.success is False
    assert result.output["errors"] == [f"not a git repository: {plain}"]
    assert not get_state_path().exists()


def test_remove_and_remove_again(devlog_env, git_repo):
    run_cmd(cmd_add, git_repo)
    first = run_cmd(cmd_remove, git_repo)
    assert first.success is True
    assert first.output["removed"] is True
    assert first.output["watched"] == []

    second = run_cmd(cmd_remove, git_repo)
    assert second.success is True
    assert second.output["removed"] is False
    assert any("was not watched" in w for w in second.output["warnings"])


def test_remove_deleted_repository_by_path(devlog_env, tmp_path):
    repo = init_git_repo(tmp_path / "doomed")
    run_cmd(cmd_add, repo)
    shutil.rmtree(repo)
    result = run_cmd(cmd_remove, repo)
    assert result.success is True
    assert result.output["removed"] is True


def test_remove_unknown_non_repository_fails(devlog_env, tmp_path):
    result = run_cmd(cmd_remove, tmp_path / "nowhere")
    assert result.success is False
    assert result.output["errors"][0].startswith("not a git repository")


def test_list_reads_state_file(devlog_env, git_repo):
    result = run_cmd(cmd_list)
    assert result.success is True
    assert result.output["watched"] == []

    run_cmd(cmd_add, git_repo)
    result = run_cmd(cmd_list)
    assert result.output["via_daemon"] is False
    assert result.output["watched"] == [{"path": str(git_repo), "name": "project"}]


def test_list_reports_corrupt_state_file(devlog_env):
    path = get_state_path()
    path.parent.mkdir(parents=True)
    path.write_text("garbage")
    result = run_cmd(cmd_list)
    assert result.success is False
    assert result.output["errors"]


def test_list_reports_unreadable_state_file(devlog_env):
    get_state_path().mkdir(parents=True)
    result = run_cmd(cmd_list)
    assert result.success is False
    assert "Cannot read state file" in result.output["errors"][0]


def test_remove_reports_unreadable_state_file(devlog_env, git_repo):
    get_state_path().mkdir(parents=True)
    result = run_cmd(cmd_remove, git_repo)
    assert result.success is False
    assert result.output["errors"]
