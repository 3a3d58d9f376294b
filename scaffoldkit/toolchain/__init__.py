"""scaffoldkit toolchain module.

Wraps the external package manager behind two small capability interfaces so
scaffolders never spawn processes directly.

Key classes:
    ProjectGenerator         - creates a base project from a framework template
    PackageInstaller         - installs or adds dependencies
    PackageManagerToolchain  - pnpm-compatible implementation of both
    CommandResult            - exit status and captured output of one command
"""

from .package_manager import (
    CommandResult,
    PackageInstaller,
    PackageManagerToolchain,
    ProjectGenerator,
    ToolchainError,
)

__all__ = [
    "CommandResult",
    "PackageInstaller",
    "PackageManagerToolchain",
    "ProjectGenerator",
    "ToolchainError",
]
