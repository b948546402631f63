"""Watch list command."""

from collections.abc import Iterator

from pydantic import ValidationError

from .._output_schemas.watch import WatchListOutput
from ..daemon.DaemonNotRunningError import DaemonNotRunningError
from ..StageResult import StageResult
from ._daemon_watched import _daemon_watched
from .WatchRegistry import WatchRegistry


def cmd_list() -> StageResult:
    """List watched repositories, from the daemon when it is running."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Contacting daemon...")
        try:
            watched = _daemon_watched()
            via_daemon = True
        except DaemonNotRunningError:
            via_daemon = False
        except (OSError, RuntimeError, ValidationError) as exc:
            yield (1.0, "Complete")
            result_obj.result = f"Error listing watches: {exc}"
            result_obj.output = WatchListOutput(
                errors=[str(exc)], warnings=[], via_daemon=True, watched=[]
            ).model_dump(mode="python")
            result_obj.success = False
            return

        warnings: list[str] = []
        if not via_daemon:
            yield (0.6, "Daemon not running, reading state file...")
            try:
                registry = WatchRegistry.load()
            except ValueError as exc:
                yield (1.0, "Complete")
                result_obj.result = f"Error listing watches: {exc}"
                result_obj.output = WatchListOutput(
                    errors=[str(exc)], warnings=[], via_daemon=False, watched=[]
                ).model_dump(mode="python")
                result_obj.success = False
                return
            watched = registry.to_list()
            warnings.append(f"daemon not running; read {registry.path}")

        yield (1.0, "Complete")
        result_obj.result = f"{len(watched)} watched repositories"
        result_obj.output = WatchListOutput(
            errors=[],
            warnings=warnings,
            via_daemon=via_daemon,
            watched=watched,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Listing watched repositories...",
        progress_callback=do_work,
    )
