"""Tests for daemon client commands when no daemon is listening."""

import socket

from devlog.api.daemon.cmd_status import cmd_status
from devlog.api.daemon.cmd_stop import cmd_stop
from tests.conftest import run_cmd


def test_status_not_running_is_success(devlog_env):
    result = run_cmd(cmd_status)
    assert result.success is True
    assert result.output["running"] is False
    assert result.output["pid"] == -1
    assert result.output["socket_path"] == str(devlog_env["runtime"] / "devlog.sock")


def test_stop_not_running_is_success(devlog_env):
    result = run_cmd(cmd_stop)
    assert result.success is True
    assert result.output["stopped"] is False
    assert result.output["warnings"] == ["daemon was not running"]


def test_stale_socket_file_counts_as_not_running(devlog_env):
    path = devlog_env["runtime"] / "devlog.sock"
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    sock.bind(str(path))
    sock.close()

    result = run_cmd(cmd_status)
    assert result.success is True
    assert result.output["running"] is False
