"""External program launching with terminal hand-off, quiet and detach modes.

Launch problems never propagate to the caller: a missing executable is
reported through ``SpawnResult`` with ``LAUNCH_FAILURE_STATUS``, the shell
status for a command that cannot be run.
"""

from __future__ import annotations

import enum
import shlex
import signal
import subprocess
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from .debug import get_logger

logger = get_logger(__name__)

LAUNCH_FAILURE_STATUS = 127


class SpawnMode(enum.Flag):
    """Independent lifecycle flags for ``spawn``."""

    NONE = 0
    # Leave the TUI before launch and restore it once the child is done.
    TERMINAL = enum.auto()
    # Send the child's stdout and stderr to /dev/null.
    QUIET = enum.auto()
    # Do not wait; run the child in its own session, deaf to SIGHUP/SIGPIPE.
    DETACH = enum.auto()


@dataclass(frozen=True)
class SpawnResult:
    """What the parent observed about one launch."""

    argv: tuple[str, ...]
    pid: int | None
    returncode: int | None
    error: OSError | None = None

    @property
    def launched(self) -> bool:
        return self.error is None


def _ignore_hangup_signals() -> None:
    """Runs in the child between fork and exec."""
    signal.signal(signal.SIGHUP, signal.SIG_IGN)
    signal.signal(signal.SIGPIPE, signal.SIG_IGN)


def _wait_ignoring_interrupts(process: subprocess.Popen) -> int:
    while True:
        try:
            return process.wait()
        except KeyboardInterrupt:
            continue


def spawn(
    argv: Sequence[str],
    mode: SpawnMode = SpawnMode.NONE,
    *,
    cwd: Path | None = None,
    suspend_tui: Callable[[], None] | None = None,
    resume_tui: Callable[[], None] | None = None,
) -> SpawnResult:
    """Start ``argv`` under ``mode`` and report the outcome.

    Without ``DETACH`` the call blocks until the child exits; interrupts
    during the wait are retried. With ``TERMINAL`` the TUI callbacks bracket
    the whole launch, including a failed one.
    """
    command = tuple(str(part) for part in argv)
    if not command:
        raise ValueError("cannot spawn an empty command")

    kwargs: dict[str, object] = {}
    if SpawnMode.QUIET in mode:
        kwargs["stdout"] = subprocess.DEVNULL
        kwargs["stderr"] = subprocess.DEVNULL
    if SpawnMode.DETACH in mode:
        kwargs["stdin"] = subprocess.DEVNULL
        kwargs["start_new_session"] = True
        kwargs["preexec_fn"] = _ignore_hangup_signals

    hand_off = SpawnMode.TERMINAL in mode
    if hand_off and suspend_tui is not None:
        suspend_tui()
    try:
        try:
            process = subprocess.Popen(command, cwd=cwd, **kwargs)
        except OSError as exc:
            logger.warning("failed to launch %s: %s", shlex.join(command), exc)
            return SpawnResult(command, None, LAUNCH_FAILURE_STATUS, exc)

        logger.info("launched %s (pid %d, mode %s)", shlex.join(command), process.pid, mode)
        if SpawnMode.DETACH in mode:
            return SpawnResult(command, process.pid, None)
        returncode = _wait_ignoring_interrupts(process)
        return SpawnResult(command, process.pid, returncode)
    finally:
        if hand_off and resume_tui is not None:
            resume_tui()


def command_for(program: str, target: Path) -> list[str]:
    """Split a configured program string and append ``target``."""
    parts = shlex.split(program)
    if not parts:
        raise ValueError("program is empty")
    return [*parts, str(target)]


__all__ = [
    "LAUNCH_FAILURE_STATUS",
    "SpawnMode",
    "SpawnResult",
    "command_for",
    "spawn",
]
