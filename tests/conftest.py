"""Shared pytest fixtures for the scaffoldkit test suite.

Provides:
- A fake toolchain that writes a Vite-like baseline instead of spawning pnpm
- Ready-made configs and requests
- A pre-generated project tree for step-level tests
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from scaffoldkit.config import BatchConfig, BatchPolicy, Config
from scaffoldkit.request import ScaffoldRequest
from scaffoldkit.toolchain import CommandResult


# ---------------------------------------------------------------------------
# Fake toolchain
# ---------------------------------------------------------------------------


def write_vite_baseline(project_dir: Path) -> None:
    """Write the files ``create vite --template react`` would produce."""
    src = project_dir / "src"
    (src / "assets").mkdir(parents=True, exist_ok=True)
    (src / "assets" / "react.svg").write_text("<svg></svg>\n", encoding="utf-8")
    (src / "App.css").write_text("#root { margin: 0 auto; }\n", encoding="utf-8")
    (src / "App.jsx").write_text("export default function App() {}\n", encoding="utf-8")
    (src / "index.css").write_text(":root { color: black; }\n", encoding="utf-8")
    (src / "main.jsx").write_text("import App from './App.jsx'\n", encoding="utf-8")
    (project_dir / "vite.config.js").write_text("export default {}\n", encoding="utf-8")
    (project_dir / "package.json").write_text('{"name": "baseline"}\n', encoding="utf-8")


class FakeToolchain:
    """In-process stand-in for ``PackageManagerToolchain``.

    Records every call as ``(action, cwd, args)`` and, on a successful create,
    writes a baseline project where pnpm would.
    """

    def __init__(
        self,
        create_exit_code: int = 0,
        install_exit_code: int = 0,
        add_exit_code: int = 0,
    ) -> None:
        self.create_exit_code = create_exit_code
        self.install_exit_code = install_exit_code
        self.add_exit_code = add_exit_code
        self.calls: list[tuple[str, Path, tuple[str, ...]]] = []

    async def create_project(self, cwd: Path, project_name: str) -> CommandResult:
        self.calls.append(("create", cwd, (project_name,)))
        if self.create_exit_code == 0:
            write_vite_baseline(cwd if project_name == "." else cwd / project_name)
        return CommandResult(
            command=["pnpm", "create", "vite@latest", project_name],
            exit_code=self.create_exit_code,
        )

    async def install(self, cwd: Path, packages: Sequence[str] = ()) -> CommandResult:
        if packages:
            self.calls.append(("add", cwd, tuple(packages)))
            return CommandResult(command=["pnpm", "add", *packages], exit_code=self.add_exit_code)
        self.calls.append(("install", cwd, ()))
        return CommandResult(command=["pnpm", "install"], exit_code=self.install_exit_code)

    @property
    def actions(self) -> list[str]:
        return [action for action, _, _ in self.calls]


@pytest.fixture
def fake_toolchain() -> FakeToolchain:
    return FakeToolchain()


# ---------------------------------------------------------------------------
# Config & requests
# ---------------------------------------------------------------------------


@pytest.fixture
def config() -> Config:
    """Default configuration (both batches best-effort)."""
    return Config()


@pytest.fixture
def strict_config() -> Config:
    """Configuration where both batches are all-or-nothing."""
    return Config(
        batches=BatchConfig(
            restructure=BatchPolicy.ALL_OR_NOTHING,
            rewrite=BatchPolicy.ALL_OR_NOTHING,
        )
    )


@pytest.fixture
def request_in_tmp(tmp_path: Path) -> ScaffoldRequest:
    """A request for ``myapp`` under a not-yet-existing target directory."""
    return ScaffoldRequest(target_path=str(tmp_path / "apps"), project_name="myapp")


@pytest.fixture
def baseline_project(tmp_path: Path) -> Path:
    """A project directory already holding the Vite baseline."""
    project_dir = tmp_path / "apps" / "myapp"
    write_vite_baseline(project_dir)
    return project_dir


@pytest.fixture
def toolchain_factory() -> type[FakeToolchain]:
    """The ``FakeToolchain`` class, for tests that need custom exit codes."""
    return FakeToolchain


# ---------------------------------------------------------------------------
# Expected React file contents
# ---------------------------------------------------------------------------

REACT_FILE_CONTENTS: dict[str, str] = {
    "../vite.config.js": (
        "import { defineConfig } from 'vite'\n"
        "import react from '@vitejs/plugin-react'\n"
        "import tailwindcss from '@tailwindcss/vite'\n"
        "\n"
        "// https://vite.dev/config/\n"
        "export default defineConfig({\n"
        "  plugins: [\n"
        "    react(),\n"
        "    tailwindcss()\n"
        "  ],\n"
        "})\n"
    ),
    "index.css": "@import 'tailwindcss';\n",
    "App.jsx": (
        "import { BrowserRouter } from 'react-router-dom';\n"
        "import AppContent from './app/AppContent.jsx';\n"
        "\n"
        "function App() {\n"
        "  return (\n"
        "    <BrowserRouter>\n"
        "      <AppContent />\n"
        "    </BrowserRouter>\n"
        "  )\n"
        "}\n"
        "\n"
        "export default App;\n"
    ),
    "app/app.routes.jsx": (
        "import {Routes, Route} from 'react-router-dom';\n"
        'import HomeLayout from "../home/HomeLayout.jsx";\n'
        "\n"
        "export default function AppRoutes(){\n"
        "\treturn(\n"
        "\t\t<Routes>\n"
        '\t\t\t<Route path="/" element={<HomeLayout />} />\n'
        "\t\t</Routes>\n"
        "\t)\n"
        "}\n"
    ),
    "app/AppContent.jsx": (
        'import AppRoutes from "./app.routes.jsx"\n'
        "\n"
        "export default function AppContent(){\n"
        "\treturn(\n"
        '\t\t<main className="min-h-screen flex flex-col gap-2" >\n'
        "\n"
        "\t\t\t<header></header>\n"
        "\n"
        "\t\t\t<div>\n"
        "\t\t\t\t<AppRoutes />\n"
        "\t\t\t</div>\n"
        "\n"
        "\t\t\t<footer></footer>\n"
        "\n"
        "\t\t</main>\n"
        "\t)\n"
        "}\n"
    ),
    "home/HomeLayout.jsx": (
        "export default function HomeLayout(){\n"
        "\treturn(\n"
        "\t\t<>\n"
        "\t\t\tHomeLayout\n"
        "\t\t</>\n"
        "\t)\n"
        "}\n"
    ),
}


@pytest.fixture
def expected_react_files() -> dict[str, str]:
    """Literal content of every React file, keyed by path relative to ``src/``."""
    return dict(REACT_FILE_CONTENTS)
