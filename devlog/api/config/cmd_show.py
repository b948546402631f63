"""Show configuration command."""

from collections.abc import Iterator

from .._output_schemas.config import ConfigShowOutput
from ..StageResult import StageResult
from .ConfigError import ConfigError
from .DevlogConfig import DevlogConfig
from .get_pid_path import get_pid_path
from .get_socket_path import get_socket_path
from .get_state_path import get_state_path


def cmd_show() -> StageResult:
    """Show the effective configuration and the paths derived from it."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = DevlogConfig.get_config_path()
        yield (0.3, "Loading configuration...")
        try:
            config = DevlogConfig.load()
        except ConfigError as exc:
            yield (1.0, "Complete")
            result_obj.result = f"Error loading configuration: {exc}"
            result_obj.output = ConfigShowOutput(
                errors=[str(exc)],
                warnings=[],
                config_path=str(config_path),
                exists=config_path.exists(),
                content={},
                paths={},
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.7, "Resolving paths...")
        warnings: list[str] = []
        if not config_path.exists():
            warnings.append(f"No config file at {config_path}; using defaults")
        paths = {
            "state": str(get_state_path()),
            "socket": str(get_socket_path()),
            "pid": str(get_pid_path()),
            "raw_dir": str(config.raw_path),
        }
        yield (1.0, "Complete")
        result_obj.result = "Configuration loaded"
        result_obj.output = ConfigShowOutput(
            errors=[],
            warnings=warnings,
            config_path=str(config_path),
            exists=config_path.exists(),
            content=config.to_dict(),
            paths=paths,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Loading configuration...",
        progress_callback=do_work,
    )
