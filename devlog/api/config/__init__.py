"""Config API module."""

from .ConfigError import ConfigError
from .DevlogConfig import DevlogConfig
from .get_config_path import get_config_path
from .get_pid_path import get_pid_path
from .get_raw_dir import get_raw_dir
from .get_socket_path import get_socket_path
from .get_state_path import get_state_dir, get_state_path
from .LogConfig import LogConfig
from .resolve_path_template import resolve_path_template

__all__ = [
    "ConfigError",
    "DevlogConfig",
    "LogConfig",
    "get_config_path",
    "get_pid_path",
    "get_raw_dir",
    "get_socket_path",
    "get_state_dir",
    "get_state_path",
    "resolve_path_template",
]
