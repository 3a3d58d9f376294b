"""React + Vite scaffolder.

Materialises a front-end project skeleton in four strictly ordered steps:

1. INIT        -- ``mkdir -p`` the target and run ``<pm> create vite``.
2. RESTRUCTURE -- drop the default assets, create the folder convention.
3. REWRITE     -- overwrite six files with the bundled templates.
4. INSTALL     -- ``<pm> install`` then ``<pm> add`` the extra packages.

Any fatal failure raises ``ScaffoldError`` and stops the pipeline where it is;
nothing is rolled back.
"""

from __future__ import annotations

import asyncio

from rich.markup import escape

from scaffoldkit.config import Config
from scaffoldkit.request import ScaffoldRequest
from scaffoldkit.toolchain import CommandResult, PackageInstaller, ProjectGenerator
from scaffoldkit.utils import console, print_step_header, print_success, print_warning

from .batch import (
    BatchResult,
    ScaffoldError,
    make_dir,
    remove_file,
    remove_tree,
    run_batch,
    write_file,
)
from .context import ScaffoldContext, ScaffoldReport
from .templates import REACT_FILES, TemplateRenderer

NEW_DIRECTORIES: tuple[str, ...] = (
    "app",
    "UI",
    "UI/Components",
    "UI/Navbar",
    "home",
    "home/Components",
    "home/store",
)


class ReactScaffolder:
    """Scaffolds the ``react`` template."""

    template_id = "react"

    def __init__(
        self,
        config: Config,
        generator: ProjectGenerator,
        installer: PackageInstaller,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.generator = generator
        self.installer = installer
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    async def scaffold(self, request: ScaffoldRequest) -> ScaffoldReport:
        """Run every step for *request* and return what was done.

        Raises:
            ScaffoldError: On the first fatal step failure.
            ToolchainError: If the package manager cannot be started.
        """
        console.print(
            f"[bold]Scaffolding React project:[/bold] {escape(request.project_name)} "
            f"on {escape(request.target_path)}",
            highlight=False,
        )
        report = ScaffoldReport(request=request)
        ctx = ScaffoldContext.for_request(request)

        print_step_header(1, "INIT")
        ctx = await self.init_project(ctx, request, report)
        report.project_dir = ctx.project_dir
        print_success("Generated base project")

        print_step_header(2, "RESTRUCTURE")
        ctx = await self.restructure_folders(ctx, report)
        print_success("Modified folder structure")

        print_step_header(3, "REWRITE")
        ctx = await self.rewrite_files(ctx, request, report)
        print_success("Modified file contents")

        print_step_header(4, "INSTALL")
        await self.install_dependencies(ctx, report)
        print_success("Installed dependencies")

        return report

    # -- Steps -------------------------------------------------------------

    async def init_project(
        self, ctx: ScaffoldContext, request: ScaffoldRequest, report: ScaffoldReport
    ) -> ScaffoldContext:
        """Create the target directory and generate the base project in it."""
        try:
            await asyncio.to_thread(ctx.target_dir.mkdir, parents=True, exist_ok=True)
        except OSError as exc:
            raise ScaffoldError("init", f"cannot create {ctx.target_dir}: {exc}") from exc

        result = await self.generator.create_project(ctx.cwd, request.project_name)
        self._check_command("init", result, report)

        if request.in_place:
            project_dir = ctx.target_dir
        else:
            project_dir = ctx.target_dir / request.project_name
        return ScaffoldContext(target_dir=ctx.target_dir, cwd=project_dir, project_dir=project_dir)

    async def restructure_folders(
        self, ctx: ScaffoldContext, report: ScaffoldReport
    ) -> ScaffoldContext:
        """Remove default assets and create the folder convention under ``src/``."""
        src = ctx.src_dir
        if not await asyncio.to_thread(src.is_dir):
            raise ScaffoldError("restructure", f"source directory not found: {src}")
        ctx = ctx.move_to(src)

        operations = [
            remove_tree(src / "assets"),
            remove_file(src / "App.css"),
            *(make_dir(src, d) for d in NEW_DIRECTORIES),
        ]
        result = await run_batch("restructure", operations, self.config.batches.restructure)
        self._record_batch(result, report)
        return ctx

    async def rewrite_files(
        self, ctx: ScaffoldContext, request: ScaffoldRequest, report: ScaffoldReport
    ) -> ScaffoldContext:
        """Overwrite the template files relative to ``src/``."""
        contents = self.renderer.render_files(
            REACT_FILES, {"project_name": request.project_name}
        )
        operations = [write_file(ctx.cwd, rel, text) for rel, text in contents.items()]
        result = await run_batch("rewrite", operations, self.config.batches.rewrite)
        self._record_batch(result, report)
        return ctx

    async def install_dependencies(
        self, ctx: ScaffoldContext, report: ScaffoldReport
    ) -> ScaffoldContext:
        """Install declared dependencies, then add the extra packages."""
        ctx = ctx.move_to(ctx.project_root)

        result = await self.installer.install(ctx.cwd)
        self._check_command("install", result, report)

        packages = self.config.toolchain.extra_packages
        if packages:
            result = await self.installer.install(ctx.cwd, packages)
            self._check_command("install", result, report)
        return ctx

    # -- Helpers -----------------------------------------------------------

    @staticmethod
    def _check_command(step: str, result: CommandResult, report: ScaffoldReport) -> None:
        report.commands.append(result)
        if not result.success:
            raise ScaffoldError(step, f"Process exited with code {result.exit_code}")

    @staticmethod
    def _record_batch(result: BatchResult, report: ScaffoldReport) -> None:
        report.batches.append(result)
        for outcome in result.failures:
            print_warning(f"  {result.name}: {outcome.name} failed: {outcome.error}")
