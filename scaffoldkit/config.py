"""scaffoldkit configuration.

Typed configuration for the scaffolding pipeline. All settings use Pydantic v2
models so they are validated at construction time and can be serialised
to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_EXTRA_PACKAGES: list[str] = [
    "react-router-dom",
    "axios",
    "zustand",
    "tailwindcss",
    "@tailwindcss/vite",
]


class BatchPolicy(str, Enum):
    """How a batch of independent filesystem operations treats failures."""

    BEST_EFFORT = "best_effort"
    ALL_OR_NOTHING = "all_or_nothing"


class ToolchainConfig(BaseModel):
    """Settings for the external package manager."""

    binary: str = Field(default="pnpm", min_length=1)
    create_package: str = Field(
        default="vite@latest", description="Initializer passed to `<binary> create`"
    )
    framework_template: str = Field(default="react")
    extra_packages: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTRA_PACKAGES))
    timeout: int | None = Field(
        default=None, ge=1, description="Per-command timeout in seconds (None waits forever)"
    )
    stream_output: bool = Field(
        default=True, description="Pass child stdout/stderr straight to the terminal"
    )


class BatchConfig(BaseModel):
    """Failure policy for each filesystem batch."""

    restructure: BatchPolicy = Field(default=BatchPolicy.BEST_EFFORT)
    rewrite: BatchPolicy = Field(default=BatchPolicy.BEST_EFFORT)


class Config(BaseModel):
    """Global scaffoldkit configuration.

    Created once by the CLI entry point and passed to the scaffolder and the
    toolchain.
    """

    toolchain: ToolchainConfig = Field(default_factory=ToolchainConfig)
    batches: BatchConfig = Field(default_factory=BatchConfig)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Parent directories are created.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON.

        Raises:
            FileNotFoundError: If *path* does not exist.
            pydantic.ValidationError: If the file content is invalid.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            SCAFFOLD_PACKAGE_MANAGER, SCAFFOLD_TIMEOUT,
            SCAFFOLD_EXTRA_PACKAGES (comma separated),
            SCAFFOLD_RESTRUCTURE_POLICY, SCAFFOLD_REWRITE_POLICY.
        """
        toolchain_kwargs: dict[str, Any] = {}
        if os.environ.get("SCAFFOLD_PACKAGE_MANAGER"):
            toolchain_kwargs["binary"] = os.environ["SCAFFOLD_PACKAGE_MANAGER"]
        if os.environ.get("SCAFFOLD_TIMEOUT"):
            toolchain_kwargs["timeout"] = int(os.environ["SCAFFOLD_TIMEOUT"])
        if os.environ.get("SCAFFOLD_EXTRA_PACKAGES"):
            toolchain_kwargs["extra_packages"] = [
                p.strip()
                for p in os.environ["SCAFFOLD_EXTRA_PACKAGES"].split(",")
                if p.strip()
            ]

        batch_kwargs: dict[str, Any] = {}
        if os.environ.get("SCAFFOLD_RESTRUCTURE_POLICY"):
            batch_kwargs["restructure"] = os.environ["SCAFFOLD_RESTRUCTURE_POLICY"]
        if os.environ.get("SCAFFOLD_REWRITE_POLICY"):
            batch_kwargs["rewrite"] = os.environ["SCAFFOLD_REWRITE_POLICY"]

        return cls(
            toolchain=ToolchainConfig(**toolchain_kwargs),
            batches=BatchConfig(**batch_kwargs),
        )
