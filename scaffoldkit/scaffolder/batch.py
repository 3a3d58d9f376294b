"""Fan-out/fan-in batches of independent filesystem operations.

All operations in a batch are started together and the caller resumes only
after every one of them has settled. The ``BatchPolicy`` decides what a failed
member means for the batch as a whole.
"""

from __future__ import annotations

import asyncio
import shutil
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from scaffoldkit.config import BatchPolicy


class ScaffoldError(Exception):
    """Raised when a scaffolding step fails irrecoverably."""

    def __init__(self, step: str, message: str) -> None:
        self.step = step
        super().__init__(f"{step}: {message}")


class BatchError(ScaffoldError):
    """Raised by an ``all_or_nothing`` batch when any member failed."""

    def __init__(self, result: BatchResult) -> None:
        self.result = result
        names = ", ".join(o.name for o in result.failures)
        super().__init__(result.name, f"{len(result.failures)} operation(s) failed: {names}")


@dataclass
class Operation:
    """A named blocking filesystem call, run in a worker thread."""

    name: str
    func: Callable[[], object]


@dataclass
class OperationOutcome:
    """Settled outcome of one operation: ``error`` is ``None`` on success."""

    name: str
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchResult:
    """Every settled outcome of one batch."""

    name: str
    policy: BatchPolicy
    outcomes: list[OperationOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> list[OperationOutcome]:
        return [o for o in self.outcomes if o.ok]

    @property
    def failures(self) -> list[OperationOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def ok(self) -> bool:
        return not self.failures


async def run_batch(
    name: str,
    operations: list[Operation],
    policy: BatchPolicy = BatchPolicy.BEST_EFFORT,
) -> BatchResult:
    """Run *operations* concurrently and wait until all have settled.

    A failing operation never cancels its siblings.

    Returns:
        The ``BatchResult`` with one outcome per operation, in input order.

    Raises:
        BatchError: If *policy* is ``ALL_OR_NOTHING`` and any operation failed.
    """
    settled = await asyncio.gather(
        *(asyncio.to_thread(op.func) for op in operations),
        return_exceptions=True,
    )
    result = BatchResult(name=name, policy=policy)
    for op, value in zip(operations, settled):
        error = value if isinstance(value, BaseException) else None
        result.outcomes.append(OperationOutcome(name=op.name, error=error))

    if policy is BatchPolicy.ALL_OR_NOTHING and not result.ok:
        raise BatchError(result)
    return result


# ---------------------------------------------------------------------------
# Operation builders
# ---------------------------------------------------------------------------


def remove_tree(path: Path) -> Operation:
    """Recursively delete a directory. Fails if it does not exist."""
    return Operation(name=f"remove {path.name}/", func=lambda: shutil.rmtree(path))


def remove_file(path: Path) -> Operation:
    """Delete a single file. Fails if it does not exist."""
    return Operation(name=f"remove {path.name}", func=path.unlink)


def make_dir(root: Path, relative: str) -> Operation:
    """Create ``root/relative`` and any missing parents."""
    target = root / relative
    return Operation(
        name=f"mkdir {relative}",
        func=lambda: target.mkdir(parents=True, exist_ok=True),
    )


def write_file(root: Path, relative: str, content: str) -> Operation:
    """Overwrite ``root/relative`` with *content*, creating parent dirs."""
    target = (root / relative).resolve()
    return Operation(name=f"write {relative}", func=lambda: _write_file(target, content))


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
