"""Run daemon (foreground blocking)."""

import logging

from ..config.ConfigError import ConfigError
from ..config.DevlogConfig import DevlogConfig
from ..config.get_state_path import get_state_dir
from ...constants import DAEMON_LOG_FILENAME
from ...utils.logger import configure_logging
from .Daemon import Daemon
from .DaemonAlreadyRunningError import DaemonAlreadyRunningError

logger = logging.getLogger(__name__)


def cmd_run() -> int:
    """Run the snapshot daemon in the foreground until it is told to stop.

    Returns:
        Process exit code. A daemon that is already running is not an error.
    """
    try:
        config = DevlogConfig.load()
    except ConfigError as exc:
        print(f"Error: {exc}")
        return 1

    configure_logging(config.log.level, get_state_dir() / DAEMON_LOG_FILENAME)

    daemon = Daemon(config)
    try:
        daemon.run()
    except DaemonAlreadyRunningError as exc:
        print(str(exc))
        return 0
    except OSError as exc:
        logger.error("daemon failed to start: %s", exc)
        print(f"Error: {exc}")
        return 1
    except KeyboardInterrupt:
        pass
    return 0
