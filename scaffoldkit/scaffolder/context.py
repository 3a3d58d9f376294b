"""Immutable state threaded through the scaffolding steps."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path

from scaffoldkit.request import ScaffoldRequest
from scaffoldkit.toolchain import CommandResult

from .batch import BatchResult


@dataclass(frozen=True)
class ScaffoldContext:
    """Where the pipeline currently is.

    Steps never change the process working directory; they return a new
    context with ``cwd`` moved instead.
    """

    target_dir: Path
    cwd: Path
    project_dir: Path | None = None

    @classmethod
    def for_request(cls, request: ScaffoldRequest) -> "ScaffoldContext":
        target = Path(request.target_path).resolve()
        return cls(target_dir=target, cwd=target)

    @property
    def project_root(self) -> Path:
        if self.project_dir is None:
            raise RuntimeError("project directory is not known before init")
        return self.project_dir

    @property
    def src_dir(self) -> Path:
        return self.project_root / "src"

    def move_to(self, path: Path) -> "ScaffoldContext":
        return replace(self, cwd=path)


@dataclass
class ScaffoldReport:
    """What a completed scaffold did, including tolerated batch failures."""

    request: ScaffoldRequest
    project_dir: Path | None = None
    batches: list[BatchResult] = field(default_factory=list)
    commands: list[CommandResult] = field(default_factory=list)

    @property
    def failed_operations(self) -> list[str]:
        return [f"{b.name}: {o.name}" for b in self.batches for o in b.failures]
