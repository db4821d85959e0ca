# Hook dispatcher: named extension points around lifecycle operations
import json
import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from xface.config import PROJECT_DIR_NAME
from xface.errors import HookAborted, SubprocessFailed
from xface.utils import run_command

logger = logging.getLogger(__name__)

HookHandler = Callable[[dict[str, Any]], None]


@dataclass(frozen=True)
class _Registration:
    handler: HookHandler
    observe: bool


class HookDispatcher:
    """Fires named hook events for one project.

    ABOUTME: Scripts in <project>/.xface/hooks/<event>/ run first, sorted by name
    ABOUTME: Registered callables run next, in registration order
    ABOUTME: Any failure raises HookAborted, except for observe=True handlers
    """

    def __init__(self, project_root: Path | None = None) -> None:
        self.project_root = Path(project_root) if project_root else None
        self._handlers: dict[str, list[_Registration]] = {}

    @property
    def hooks_dir(self) -> Path | None:
        if self.project_root is None:
            return None
        return self.project_root / PROJECT_DIR_NAME / "hooks"

    def on(self, event: str, handler: HookHandler, observe: bool = False) -> None:
        """Register a handler for an event.

        Args:
            event: Event name, e.g. "pre_package"
            handler: Callable receiving the payload dict
            observe: Observational handler; its errors are logged, never raised
        """
        self._handlers.setdefault(event, []).append(_Registration(handler, observe))

    def off(self, event: str, handler: HookHandler) -> None:
        registrations = self._handlers.get(event, [])
        self._handlers[event] = [r for r in registrations if r.handler is not handler]

    def scripts(self, event: str) -> list[Path]:
        """Executable hook scripts for an event, sorted by file name."""
        if self.hooks_dir is None:
            return []
        event_dir = self.hooks_dir / event
        if not event_dir.is_dir():
            return []
        return sorted(
            entry
            for entry in event_dir.iterdir()
            if entry.is_file() and not entry.name.startswith(".")
        )

    def fire(self, event: str, payload: dict[str, Any] | None = None) -> None:
        """Run every hook for `event` one after the other.

        Raises:
            HookAborted: When a script or a non-observing handler fails
        """
        payload = dict(payload or {})
        logger.debug(f"Firing hook {event}")

        for script in self.scripts(event):
            self._run_script(event, script, payload)

        for registration in list(self._handlers.get(event, [])):
            try:
                registration.handler(payload)
            except Exception as e:
                if registration.observe:
                    logger.warning(f"Observer for hook {event} failed: {e}")
                    continue
                raise HookAborted(event, e) from e

    def _run_script(self, event: str, script: Path, payload: dict[str, Any]) -> None:
        env = dict(os.environ)
        env["XFACE_HOOK"] = event
        env["XFACE_HOOK_PAYLOAD"] = json.dumps(payload, default=str)
        logger.info(f"Executing hook script {script}")
        try:
            run_command([script, self.project_root], cwd=self.project_root, env=env)
        except SubprocessFailed as e:
            raise HookAborted(event, e) from e
