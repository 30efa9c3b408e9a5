"""Post-scaffold side effects: ``git init`` and dependency installation.

Both run as ``asyncio`` tasks started by the scaffolder. A failing command
never raises; its exit code and output are captured in an ``ActionResult``
so callers (and tests) can decide what to do with it.
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from create_ferod_app.config import PackageManager
from create_ferod_app.utils import print_output, print_warning, run_command


@dataclass
class ActionResult:
    """Outcome of one post-scaffold command."""

    name: str
    command: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def summary(self) -> str:
        """Return a one-line, Rich-formatted status."""
        status = "[green]done[/green]" if self.ok else f"[red]failed (exit {self.returncode})[/red]"
        return f"{' '.join(self.command)}: {status}"


async def run_action(
    name: str,
    command: list[str],
    cwd: str | Path,
    timeout: int = 600,
) -> ActionResult:
    """Run *command* in *cwd*, print its output, and return the outcome.

    A missing executable is reported as exit code 127, mirroring a shell.
    """
    try:
        returncode, stdout, stderr = await run_command(command, cwd=cwd, timeout=timeout)
    except OSError as exc:
        returncode, stdout, stderr = 127, "", str(exc)

    result = ActionResult(
        name=name, command=command, returncode=returncode, stdout=stdout, stderr=stderr
    )
    print_output(stdout)
    if not result.ok:
        print_warning(f"{name} failed: {' '.join(command)}")
        print_output(stderr)
    return result


async def git_init(project_dir: str | Path, timeout: int = 600) -> ActionResult:
    """Initialise a git repository in *project_dir*."""
    return await run_action("git", ["git", "init"], project_dir, timeout=timeout)


async def install_dependencies(
    project_dir: str | Path,
    package_manager: PackageManager,
    timeout: int = 600,
) -> ActionResult:
    """Install the project's dependencies with *package_manager*."""
    return await run_action(
        "install", package_manager.install_command(), project_dir, timeout=timeout
    )


def start_action(coro: Coroutine[Any, Any, ActionResult], name: str) -> asyncio.Task[ActionResult]:
    """Schedule *coro* on the running loop and return its task."""
    return asyncio.create_task(coro, name=name)
