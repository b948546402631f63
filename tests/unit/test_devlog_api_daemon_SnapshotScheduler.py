"""Tests for devlog.api.daemon.SnapshotScheduler cycles."""

import threading
from datetime import datetime

import pytest

from devlog.api.config.DevlogConfig import DevlogConfig
from devlog.api.daemon.DaemonState import DaemonState
from devlog.api.daemon.SnapshotScheduler import SnapshotScheduler
from devlog.api.watch.WatchRegistry import WatchRegistry


class Clock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock():
    return Clock(datetime(2024, 3, 1, 9, 30))


@pytest.fixture
def config(tmp_path, monkeypatch):
    monkeypatch.delenv("DEVLOG_RAW_DIR", raising=False)
    return DevlogConfig(raw_dir=str(tmp_path / "raw"), snapshot_interval_secs=0.05)


def make_scheduler(registry, config, clock, stop_event=None):
    state = DaemonState(registry, clock().strftime("%Y-%m-%d"))
    return SnapshotScheduler(state, config, stop_event or threading.Event(), clock=clock), state


def test_cycle_writes_changed_repository(git_repo, config, clock, tmp_path):
    registry = WatchRegistry()
    registry.add(str(git_repo))
    scheduler, state = make_scheduler(registry, config, clock)
    (git_repo / "README.md").write_text("edited\n")

    assert scheduler.run_cycle() == 1

    log_file = tmp_path / "raw" / "2024-03-01" / "git-project.log"
    assert log_file.read_text().startswith("=== SNAPSHOT 09:30 ===\n")
    assert state.dedup.get(str(git_repo)) != b""


def test_cycle_skips_unchanged_diff(git_repo, config, clock, tmp_path):
    registry = WatchRegistry()
    registry.add(str(git_repo))
    scheduler, _ = make_scheduler(registry, config, clock)
    (git_repo / "README.md").write_text("edited\n")
    scheduler.run_cycle()
    log_file = tmp_path / "raw" / "2024-03-01" / "git-project.log"
    content = log_file.read_text()

    assert scheduler.run_cycle() == 0
    assert log_file.read_text() == content


def test_cycle_writes_again_after_further_edit(git_repo, config, clock, tmp_path):
    registry = WatchRegistry()
    registry.add(str(git_repo))
    scheduler, _ = make_scheduler(registry, config, clock)
    (git_repo / "README.md").write_text("edited\n")
    scheduler.run_cycle()
    (git_repo / "README.md").write_text("edited again\n")

    assert scheduler.run_cycle() == 1
    log_file = tmp_path / "raw" / "2024-03-01" / "git-project.log"
    assert log_file.read_text().count("=== SNAPSHOT") == 2


def test_clean_repository_writes_nothing(git_repo, config, clock, tmp_path):
    registry = WatchRegistry()
    registry.add(str(git_repo))
    scheduler, state = make_scheduler(registry, config, clock)
    assert scheduler.run_cycle() == 0
    assert not (tmp_path / "raw").exists()
    assert len(state.dedup) == 0


def test_new_day_rewrites_same_diff_into_new_file(git_repo, config, clock, tmp_path):
    registry = WatchRegistry()
    registry.add(str(git_repo))
    scheduler, state = make_scheduler(registry, config, clock)
    (git_repo / "README.md").write_text("edited\n")
    scheduler.run_cycle()

    clock.now = datetime(2024, 3, 2, 0, 1)
    assert scheduler.run_cycle() == 1
    assert state.dedup.active_date == "2024-03-02"
    assert (tmp_path / "raw" / "2024-03-02" / "git-project.log").read_text().startswith("=== SNAPSHOT 00:01 ===")


def test_failing_repository_does_not_block_others(git_repo, config, clock, tmp_path):
    registry = WatchRegistry()
    registry.add(str(tmp_path / "vanished"))
    registry.add(str(git_repo))
    scheduler, _ = make_scheduler(registry, config, clock)
    (git_repo / "README.md").write_text("edited\n")

    assert scheduler.run_cycle() == 1
    assert (tmp_path / "raw" / "2024-03-01" / "git-project.log").exists()


def test_uses_configured_path_template(git_repo, clock, tmp_path, monkeypatch):
    monkeypatch.delenv("DEVLOG_RAW_DIR", raising=False)
    config = DevlogConfig(raw_dir=str(tmp_path / "raw"), git_path="<raw_dir>/snapshots/<project>-<date>.txt")
    registry = WatchRegistry()
    registry.add(str(git_repo), "api")
    scheduler, _ = make_scheduler(registry, config, clock)
    (git_repo / "README.md").write_text("edited\n")

    scheduler.run_cycle()
    assert (tmp_path / "raw" / "snapshots" / "api-2024-03-01.txt").exists()


def test_run_performs_immediate_cycle_and_stops(git_repo, config, clock, tmp_path):
    registry = WatchRegistry()
    registry.add(str(git_repo))
    stop_event = threading.Event()
    scheduler, _ = make_scheduler(registry, config, clock, stop_event)
    (git_repo / "README.md").write_text("edited\n")

    thread = threading.Thread(target=scheduler.run)
    thread.start()
    log_file = tmp_path / "raw" / "2024-03-01" / "git-project.log"
    for _ in range(100):
        if log_file.exists():
            break
        stop_event.wait(0.05)
    stop_event.set()
    thread.join(timeout=5)

    assert not thread.is_alive()
    assert log_file.exists()
