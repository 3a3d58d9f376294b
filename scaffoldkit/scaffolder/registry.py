"""Template id -> scaffolder lookup."""

from __future__ import annotations

from scaffoldkit.config import Config
from scaffoldkit.toolchain import PackageInstaller, ProjectGenerator

from .react import ReactScaffolder

TEMPLATES: dict[str, type[ReactScaffolder]] = {
    ReactScaffolder.template_id: ReactScaffolder,
}


class UnknownTemplateError(LookupError):
    """Raised for a template id with no registered scaffolder."""

    def __init__(self, template_id: str) -> None:
        self.template_id = template_id
        super().__init__(f"No available template: {template_id}")


def available_templates() -> list[str]:
    return sorted(TEMPLATES)


def get_scaffolder(
    template_id: str,
    config: Config,
    generator: ProjectGenerator,
    installer: PackageInstaller,
) -> ReactScaffolder:
    """Instantiate the scaffolder registered for *template_id*.

    Raises:
        UnknownTemplateError: If no scaffolder is registered under that id.
    """
    try:
        scaffolder_cls = TEMPLATES[template_id]
    except KeyError:
        raise UnknownTemplateError(template_id) from None
    return scaffolder_cls(config, generator, installer)
