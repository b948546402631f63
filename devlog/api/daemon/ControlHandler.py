"""Dispatch control-plane requests against the daemon state."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable

from pydantic import ValidationError

from ..watch.NameConflictError import NameConflictError
from ..watch.NotARepositoryError import NotARepositoryError
from ..watch.resolve_repo_root import resolve_repo_root
from .DaemonState import DaemonState
from .protocol import ControlRequest, ControlResponse, UnwatchArgs, WatchArgs

logger = logging.getLogger(__name__)


def _args_error(exc: ValidationError) -> str:
    first = exc.errors()[0] if exc.errors() else {}
    loc = ".".join(str(x) for x in first.get("loc", ()))
    msg = first.get("msg", str(exc))
    return f"invalid args: {loc}: {msg}" if loc else f"invalid args: {msg}"


class ControlHandler:
    """Command table for the control socket.

    ``watch``/``unwatch`` validate and mutate under the write lock;
    ``status`` reads under the read lock; ``stop`` calls ``request_stop``
    and answers immediately.
    """

    def __init__(self, state: DaemonState, request_stop: Callable[[], None]):
        self.state = state
        self._request_stop = request_stop
        self._commands: dict[str, Callable[[ControlRequest], ControlResponse]] = {
            "watch": self.handle_watch,
            "unwatch": self.handle_unwatch,
            "status": self.handle_status,
            "stop": self.handle_stop,
        }

    def __call__(self, line: bytes) -> ControlResponse:
        try:
            request = ControlRequest.model_validate_json(line)
        except ValidationError:
            return ControlResponse.failure("invalid request")
        return self.dispatch(request)

    def dispatch(self, request: ControlRequest) -> ControlResponse:
        handler = self._commands.get(request.command)
        if handler is None:
            return ControlResponse.failure(f"unknown command: {request.command}")
        logger.debug("control command %s %s", request.command, request.args or {})
        try:
            return handler(request)
        except Exception as exc:
            logger.exception("control command %s failed", request.command)
            return ControlResponse.failure(f"internal error: {exc}")

    def handle_watch(self, request: ControlRequest) -> ControlResponse:
        try:
            args = WatchArgs.model_validate(request.args or {})
        except ValidationError as exc:
            return ControlResponse.failure(_args_error(exc))

        try:
            repo_root = resolve_repo_root(args.path)
        except NotARepositoryError as exc:
            return ControlResponse.failure(str(exc))

        with self.state.lock.write():
            try:
                added = self.state.registry.add(repo_root, args.name)
            except NameConflictError as exc:
                return ControlResponse.failure(str(exc))
            except OSError as exc:
                added = True
                logger.warning("failed to save watch list: %s", exc)
            if added:
                logger.info("watching %s", repo_root)
            return ControlResponse.success({"watched": self.state.registry.to_list()})

    def handle_unwatch(self, request: ControlRequest) -> ControlResponse:
        try:
            args = UnwatchArgs.model_validate(request.args or {})
        except ValidationError as exc:
            return ControlResponse.failure(_args_error(exc))

        try:
            repo_root = resolve_repo_root(args.path)
        except NotARepositoryError as exc:
            # A deleted repository can still be unwatched by its recorded path
            with self.state.lock.read():
                known = self.state.registry.find(args.path) is not None
            if not known:
                return ControlResponse.failure(str(exc))
            repo_root = args.path

        with self.state.lock.write():
            try:
                removed = self.state.registry.remove(repo_root)
            except OSError as exc:
                removed = True
                logger.warning("failed to save watch list: %s", exc)
            if removed:
                self.state.dedup.forget(repo_root)
                logger.info("stopped watching %s", repo_root)
            return ControlResponse.success({"watched": self.state.registry.to_list()})

    def handle_status(self, request: ControlRequest) -> ControlResponse:  # noqa: ARG002
        with self.state.lock.read():
            watched = self.state.registry.to_list()
        return ControlResponse.success({"watched": watched, "pid": os.getpid()})

    def handle_stop(self, request: ControlRequest) -> ControlResponse:  # noqa: ARG002
        self._request_stop()
        return ControlResponse.success({})
