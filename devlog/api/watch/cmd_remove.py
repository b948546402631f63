"""Watch remove command."""

from collections.abc import Iterator
from pathlib import Path

from pydantic import ValidationError

from .._output_schemas.watch import WatchRemoveOutput
from ..daemon.DaemonNotRunningError import DaemonNotRunningError
from ..daemon.protocol import ControlRequest
from ..daemon.send_request import send_request
from ..StageResult import StageResult
from ._daemon_watched import _daemon_watched
from .NotARepositoryError import NotARepositoryError
from .resolve_repo_root import resolve_repo_root
from .WatchRegistry import WatchRegistry


def cmd_remove(path: Path | str = ".") -> StageResult:
    """Stop watching the repository containing ``path``.

    A repository that no longer exists can still be removed by the path it
    was registered under.
    """

    def _fail(result_obj: StageResult, message: str, repo_root: str = "", via_daemon: bool = False) -> None:
        result_obj.result = f"Error: {message}"
        result_obj.output = WatchRemoveOutput(
            errors=[message],
            warnings=[],
            path=repo_root,
            removed=False,
            via_daemon=via_daemon,
            watched=[],
        ).model_dump(mode="python")
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Resolving repository root...")
        resolve_error: NotARepositoryError | None = None
        try:
            repo_root = resolve_repo_root(Path(path).expanduser())
        except NotARepositoryError as exc:
            resolve_error = exc
            repo_root = str(Path(path).expanduser().resolve())

        warnings: list[str] = []
        yield (0.4, "Contacting daemon...")
        try:
            before = _daemon_watched()
            response = send_request(ControlRequest(command="unwatch", args={"path": repo_root}))
        except DaemonNotRunningError:
            via_daemon = False
        except (OSError, RuntimeError, ValidationError) as exc:
            yield (1.0, "Complete")
            _fail(result_obj, str(exc), repo_root, via_daemon=True)
            return
        else:
            via_daemon = True

        if via_daemon:
            yield (1.0, "Complete")
            if not response.ok:
                _fail(result_obj, response.error or "unwatch failed", repo_root, via_daemon=True)
                return
            watched = list((response.data or {}).get("watched", []))
            removed = any(entry.get("path") == repo_root for entry in before)
        else:
            yield (0.6, "Daemon not running, updating state file...")
            try:
                registry = WatchRegistry.load()
            except ValueError as exc:
                yield (1.0, "Complete")
                _fail(result_obj, f"cannot read watch list: {exc}", repo_root)
                return
            if resolve_error is not None and registry.find(repo_root) is None:
                yield (1.0, "Complete")
                _fail(result_obj, str(resolve_error), repo_root)
                return
            try:
                removed = registry.remove(repo_root)
            except OSError as exc:
                yield (1.0, "Complete")
                _fail(result_obj, f"cannot update watch list: {exc}", repo_root)
                return
            watched = registry.to_list()
            warnings.append(f"daemon not running; updated {registry.path} directly")
            yield (1.0, "Complete")

        if removed:
            result_obj.result = f"Stopped watching {repo_root}"
        else:
            result_obj.result = f"{repo_root} was not watched"
            warnings.append(f"{repo_root} was not watched")
        result_obj.output = WatchRemoveOutput(
            errors=[],
            warnings=warnings,
            path=repo_root,
            removed=removed,
            via_daemon=via_daemon,
            watched=watched,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Removing watch for {path}...",
        progress_callback=do_work,
    )
