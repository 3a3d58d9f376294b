"""Jinja2 template rendering for project scaffolding.

Provides the ``TemplateRenderer`` class, which loads ``.j2`` files from the
``scaffoldkit/scaffolder/templates/`` directory, and the static
``TemplateFileSpec`` tables that say where each rendered file lands inside a
generated project.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


@dataclass(frozen=True)
class TemplateFileSpec:
    """One file a scaffolder overwrites.

    Attributes:
        key: Logical name of the file.
        template: Template path relative to the template directory.
        path_from_src: Destination relative to the project's ``src/`` directory.
    """

    key: str
    template: str
    path_from_src: str


REACT_FILES: tuple[TemplateFileSpec, ...] = (
    TemplateFileSpec("vite.config.js", "react/vite.config.js.j2", "../vite.config.js"),
    TemplateFileSpec("index.css", "react/index.css.j2", "index.css"),
    TemplateFileSpec("App.jsx", "react/App.jsx.j2", "App.jsx"),
    TemplateFileSpec("app.routes.jsx", "react/app.routes.jsx.j2", "app/app.routes.jsx"),
    TemplateFileSpec("AppContent.jsx", "react/AppContent.jsx.j2", "app/AppContent.jsx"),
    TemplateFileSpec("HomeLayout.jsx", "react/HomeLayout.jsx.j2", "home/HomeLayout.jsx"),
)


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    Output is byte-for-byte the template text unless the template uses Jinja
    syntax; trailing newlines are kept.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def render(self, template_path: str, context: dict[str, Any] | None = None) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"react/App.jsx.j2"``).
            context: Variables available inside the template.

        Raises:
            jinja2.TemplateNotFound: If the template does not exist.
        """
        template = self.env.get_template(template_path)
        return template.render(**(context or {}))

    def render_files(
        self,
        specs: tuple[TemplateFileSpec, ...],
        context: dict[str, Any] | None = None,
    ) -> dict[str, str]:
        """Render every spec, returning ``{path_from_src: content}``."""
        return {spec.path_from_src: self.render(spec.template, context) for spec in specs}
