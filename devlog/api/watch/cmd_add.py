"""Watch add command."""

from collections.abc import Iterator
from pathlib import Path

from pydantic import ValidationError

from .._output_schemas.watch import WatchAddOutput
from ..daemon.DaemonNotRunningError import DaemonNotRunningError
from ..daemon.protocol import ControlRequest
from ..daemon.send_request import send_request
from ..StageResult import StageResult
from ._daemon_watched import _daemon_watched
from .NameConflictError import NameConflictError
from .NotARepositoryError import NotARepositoryError
from .resolve_repo_root import resolve_repo_root
from .WatchRegistry import WatchRegistry


def _name_for(watched: list[dict[str, str]], path: str) -> str:
    for entry in watched:
        if entry.get("path") == path:
            return entry.get("name", "")
    return ""


def cmd_add(path: Path | str = ".", name: str = "") -> StageResult:
    """Start watching the repository containing ``path``.

    The running daemon applies the change when reachable; otherwise the state
    file is updated directly and the daemon picks it up on its next start.
    """

    def _fail(result_obj: StageResult, message: str, repo_root: str = "", via_daemon: bool = False) -> None:
        result_obj.result = f"Error: {message}"
        result_obj.output = WatchAddOutput(
            errors=[message],
            warnings=[],
            path=repo_root,
            name="",
            via_daemon=via_daemon,
            watched=[],
        ).model_dump(mode="python")
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Resolving repository root...")
        try:
            repo_root = resolve_repo_root(Path(path).expanduser())
        except NotARepositoryError as exc:
            yield (1.0, "Complete")
            _fail(result_obj, str(exc))
            return

        warnings: list[str] = []
        yield (0.4, "Contacting daemon...")
        try:
            before = _daemon_watched()
            response = send_request(ControlRequest(command="watch", args={"path": repo_root, "name": name}))
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
                _fail(result_obj, response.error or "watch failed", repo_root, via_daemon=True)
                return
            watched = list((response.data or {}).get("watched", []))
            added = _name_for(before, repo_root) == ""
        else:
            yield (0.6, "Daemon not running, updating state file...")
            try:
                registry = WatchRegistry.load()
                added = registry.add(repo_root, name)
            except (ValueError, OSError) as exc:
                # NameConflictError is a ValueError
                yield (1.0, "Complete")
                message = str(exc) if isinstance(exc, NameConflictError) else f"cannot update watch list: {exc}"
                _fail(result_obj, message, repo_root)
                return
            watched = registry.to_list()
            warnings.append(f"daemon not running; updated {registry.path} directly")
            yield (1.0, "Complete")

        effective_name = _name_for(watched, repo_root)
        if added:
            result_obj.result = f"Watching {repo_root} as {effective_name!r}"
        else:
            result_obj.result = f"Already watching {repo_root}"
            warnings.append(f"{repo_root} is already watched as {effective_name!r}")
        result_obj.output = WatchAddOutput(
            errors=[],
            warnings=warnings,
            path=repo_root,
            name=effective_name,
            via_daemon=via_daemon,
            watched=watched,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Adding watch for {path}...",
        progress_callback=do_work,
    )
