"""Tests for devlog.api.daemon.ControlHandler (no socket involved)."""

import json
import os
import shutil
import threading

import pytest

from devlog.api.daemon.ControlHandler import ControlHandler
from devlog.api.daemon.DaemonState import DaemonState
from devlog.api.daemon.protocol import ControlRequest
from devlog.api.watch.WatchRegistry import WatchRegistry
from tests.conftest import init_git_repo


class StopRecorder:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


@pytest.fixture
def state(tmp_path):
    return DaemonState(WatchRegistry.load(tmp_path / "state" / "state.json"), "2024-03-01")


@pytest.fixture
def stopper():
    return StopRecorder()


@pytest.fixture
def handler(state, stopper):
    return ControlHandler(state, stopper)


def send(handler, command, args=None):
    return handler(ControlRequest(command=command, args=args).encode())


def test_unparseable_line_is_invalid_request(handler):
    response = handler(b"this is not json\n")
    assert response.ok is False
    assert response.error == "invalid request"
    assert response.data is None


def test_non_object_is_invalid_request(handler):
    assert handler(b"[1, 2]\n").error == "invalid request"


def test_unknown_command(handler):
    response = send(handler, "frobnicate")
    assert response.ok is False
    assert response.error == "unknown command: frobnicate"


def test_watch_missing_path_is_invalid_args(handler):
    response = send(handler, "watch")
    assert response.ok is False
    assert response.error.startswith("invalid args: path")


def test_watch_empty_path_is_invalid_args(handler):
    response = send(handler, "watch", {"path": ""})
    assert response.error.startswith("invalid args: path")


def test_watch_non_repository(handler, tmp_path):
    plain = tmp_path / "plain"
    plain.mkdir()
    response = send(handler, "watch", {"path": str(plain)})
    assert response.ok is False
    assert response.error == f"not a git repository: {plain}"


def test_watch_resolves_root_and_persists(handler, state, git_repo):
    sub = git_repo / "src"
    sub.mkdir()
    response = send(handler, "watch", {"path": str(sub)})

    assert response.ok is True
    assert response.data == {"watched": [{"path": str(git_repo), "name": "project"}]}
    on_disk = json.loads(state.registry.path.read_text())
    assert on_disk["watched"] == [{"path": str(git_repo), "name": "project"}]


def test_watch_with_name(handler, git_repo):
    response = send(handler, "watch", {"path": str(git_repo), "name": "alias"})
    assert response.data["watched"] == [{"path": str(git_repo), "name": "alias"}]


def test_watch_twice_is_idempotent(handler, git_repo):
    send(handler, "watch", {"path": str(git_repo)})
    response = send(handler, "watch", {"path": str(git_repo), "name": "ignored"})
    assert response.ok is True
    assert response.data["watched"] == [{"path": str(git_repo), "name": "project"}]


def test_watch_name_conflict(handler, git_repo, tmp_path):
    other = init_git_repo(tmp_path / "elsewhere" / "project")
    send(handler, "watch", {"path": str(git_repo)})
    response = send(handler, "watch", {"path": str(other)})
    assert response.ok is False
    assert "name conflict" in response.error
    assert str(git_repo) in response.error


def test_concurrent_watch_with_same_name_admits_one(handler, state, tmp_path):
    first = init_git_repo(tmp_path / "x" / "same")
    second = init_git_repo(tmp_path / "y" / "same")
    barrier = threading.Barrier(2)
    results = []

    def watch(repo):
        barrier.wait()
        results.append(send(handler, "watch", {"path": str(repo)}))

    threads = [threading.Thread(target=watch, args=(repo,)) for repo in (first, second)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)

    assert sorted(r.ok for r in results) == [False, True]
    assert len(state.registry) == 1
    (failed,) = [r for r in results if not r.ok]
    assert "name conflict" in failed.error


def test_unwatch_removes_entry_and_dedup(handler, state, git_repo):
    send(handler, "watch", {"path": str(git_repo)})
    state.dedup.record(str(git_repo), b"some diff")

    response = send(handler, "unwatch", {"path": str(git_repo)})

    assert response.ok is True
    assert response.data == {"watched": []}
    assert state.dedup.get(str(git_repo)) == b""


def test_unwatch_unknown_repository_succeeds(handler, git_repo):
    response = send(handler, "unwatch", {"path": str(git_repo)})
    assert response.ok is True
    assert response.data == {"watched": []}


def test_unwatch_deleted_repository_by_recorded_path(handler, state, git_repo):
    send(handler, "watch", {"path": str(git_repo)})
    shutil.rmtree(git_repo)
    response = send(handler, "unwatch", {"path": str(git_repo)})
    assert response.ok is True
    assert len(state.registry) == 0


def test_unwatch_unknown_non_repository_fails(handler, tmp_path):
    response = send(handler, "unwatch", {"path": str(tmp_path / "gone")})
    assert response.ok is False
    assert response.error.startswith("not a git repository")


def test_watch_persist_failure_still_succeeds(handler, state, git_repo, monkeypatch):
    def fail_save():
        raise OSError("disk full")

    monkeypatch.setattr(state.registry, "save", fail_save)
    response = send(handler, "watch", {"path": str(git_repo)})
    assert response.ok is True
    assert response.data["watched"] == [{"path": str(git_repo), "name": "project"}]


def test_status_reports_pid_and_watched(handler, git_repo):
    send(handler, "watch", {"path": str(git_repo)})
    response = send(handler, "status")
    assert response.ok is True
    assert response.data == {"watched": [{"path": str(git_repo), "name": "project"}], "pid": os.getpid()}


def test_stop_requests_shutdown(handler, stopper):
    response = send(handler, "stop")
    assert response.ok is True
    assert response.data == {}
    assert stopper.calls == 1


def test_handler_exception_becomes_internal_error(handler, state, monkeypatch):
    def explode():
        raise RuntimeError("kaboom")

    monkeypatch.setattr(state.registry, "to_list", explode)
    response = send(handler, "status")
    assert response.ok is False
    assert response.error == "internal error: kaboom"
