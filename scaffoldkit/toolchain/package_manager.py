"""Package manager process management.

Spawns the external package manager (pnpm by default) to generate a base
project and to install dependencies. Every invocation returns a structured
``CommandResult``; only a missing or non-executable binary raises.
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from scaffoldkit.config import ToolchainConfig
from scaffoldkit.utils import console, format_duration, run_command


@dataclass
class CommandResult:
    """Structured result from one external command."""

    command: list[str]
    exit_code: int = -1
    stdout: str = ""
    stderr: str = ""
    duration_seconds: float = 0.0

    @property
    def success(self) -> bool:
        return self.exit_code == 0

    def summary(self) -> str:
        """Return a one-line description of the command and its outcome."""
        status = "ok" if self.success else f"exit {self.exit_code}"
        return f"{' '.join(self.command)} ({status}, {format_duration(self.duration_seconds)})"


class ToolchainError(Exception):
    """Raised when the package manager cannot be started at all."""

    def __init__(self, message: str, command: Sequence[str] = ()):
        self.command = list(command)
        super().__init__(message)


class ProjectGenerator(Protocol):
    """Creates a base project from a framework template."""

    async def create_project(self, cwd: Path, project_name: str) -> CommandResult: ...


class PackageInstaller(Protocol):
    """Installs declared dependencies, or adds the given packages."""

    async def install(self, cwd: Path, packages: Sequence[str] = ()) -> CommandResult: ...


class PackageManagerToolchain:
    """pnpm-compatible implementation of both toolchain capabilities.

    ``create_project`` runs ``<binary> create <create_package> <name>
    --template <framework_template>``. ``install`` runs ``<binary> install``
    when no packages are given and ``<binary> add <packages...>`` otherwise.
    """

    def __init__(self, config: ToolchainConfig | None = None) -> None:
        self.config = config or ToolchainConfig()

    async def create_project(self, cwd: Path, project_name: str) -> CommandResult:
        cmd = [
            self.config.binary,
            "create",
            self.config.create_package,
            project_name,
            "--template",
            self.config.framework_template,
        ]
        return await self._run(cmd, cwd)

    async def install(self, cwd: Path, packages: Sequence[str] = ()) -> CommandResult:
        if packages:
            cmd = [self.config.binary, "add", *packages]
        else:
            cmd = [self.config.binary, "install"]
        return await self._run(cmd, cwd)

    async def _run(self, cmd: list[str], cwd: Path) -> CommandResult:
        console.print(f"$ {' '.join(cmd)}", style="dim", markup=False)
        start = time.monotonic()
        try:
            exit_code, stdout, stderr = await run_command(
                cmd,
                cwd=cwd,
                timeout=self.config.timeout,
                capture=not self.config.stream_output,
            )
        except FileNotFoundError:
            raise ToolchainError(
                f"Package manager not found: '{self.config.binary}'. "
                "Ensure it is installed and in PATH.",
                cmd,
            )
        except PermissionError:
            raise ToolchainError(
                f"Permission denied executing: '{self.config.binary}'. "
                "Check file permissions.",
                cmd,
            )

        result = CommandResult(
            command=cmd,
            exit_code=exit_code,
            stdout=stdout,
            stderr=stderr,
            duration_seconds=time.monotonic() - start,
        )
        if not result.success and stderr:
            for line in stderr.splitlines()[-10:]:
                console.print(f"  {line.strip()}", style="dim", markup=False)
        return result
