"""Shared constants for devlog file locations and formats."""

APP_NAME = "devlog"

CONFIG_FILENAME = "config.json"
STATE_FILENAME = "state.json"
SOCKET_FILENAME = "devlog.sock"
PID_FILENAME = "devlog.pid"
DAEMON_LOG_FILENAME = "devlog.log"

# Private index used by snapshots, kept next to the repository's real index
SHADOW_INDEX_NAME = "devlog_shadow_index"

DEFAULT_SNAPSHOT_INTERVAL_SECS = 300.0
DEFAULT_GIT_PATH = "<raw_dir>/<date>/git-<project>.log"
DEFAULT_NOTES_PATH = "<raw_dir>/<date>/notes-<project>.log"
DEFAULT_EDITOR = "vi"

DATE_FORMAT = "%Y-%m-%d"
ENTRY_TIME_FORMAT = "%H:%M"

# Grace period between answering a stop request and shutting down
STOP_DELAY_SECS = 0.05
STOP_WAIT_SECS = 5.0
STOP_POLL_SECS = 0.1
