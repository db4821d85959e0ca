# External command execution
import logging
import os
import subprocess
from collections.abc import Sequence
from pathlib import Path

from xface.errors import SubprocessFailed

logger = logging.getLogger(__name__)


def get_process_timeout() -> float | None:
    """Return XFACE_PROCESS_TIMEOUT in seconds, or None for no limit."""
    raw = (os.environ.get("XFACE_PROCESS_TIMEOUT") or "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def format_command(args: Sequence[str | os.PathLike[str]]) -> str:
    """Render a command the way it would be typed, quoting every argument."""
    return " ".join(f'"{arg}"' for arg in args)


def run_command(
    args: Sequence[str | os.PathLike[str]],
    cwd: Path | None = None,
    env: dict[str, str] | None = None,
    timeout: float | None = None,
) -> str:
    """Run an external command and return its stdout.

    ABOUTME: Exit code 0 is success; anything else raises SubprocessFailed
    ABOUTME: The error carries stdout and stderr concatenated

    Args:
        args: Program and arguments
        cwd: Working directory
        env: Full environment for the child (defaults to ours)
        timeout: Seconds before the process is killed (default from env)

    Returns:
        Captured stdout

    Raises:
        SubprocessFailed: On nonzero exit, timeout or launch error
    """
    command = format_command(args)
    if timeout is None:
        timeout = get_process_timeout()
    logger.debug(f"Running {command} (output to follow)")

    try:
        result = subprocess.run(
            [str(arg) for arg in args],
            cwd=cwd,
            env=env,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise SubprocessFailed(command, f"timed out after {timeout} seconds") from e
    except OSError as e:
        raise SubprocessFailed(command, str(e)) from e

    if result.stdout:
        logger.debug(result.stdout.rstrip())
    if result.returncode != 0:
        raise SubprocessFailed(command, result.stdout + result.stderr, result.returncode)
    return result.stdout
