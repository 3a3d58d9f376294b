"""Validated scaffolding request built from CLI input."""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_TEMPLATE = "react"
IN_PLACE = "."


class RequestError(Exception):
    """Raised when CLI input cannot form a valid ``ScaffoldRequest``."""


class ScaffoldRequest(BaseModel):
    """Pydantic model describing one scaffolding run."""

    target_path: str = Field(..., min_length=1, description="Parent directory of the project")
    project_name: str = Field(..., min_length=1, description="Project name, or '.' for in place")
    template_id: str = Field(default=DEFAULT_TEMPLATE)

    @property
    def in_place(self) -> bool:
        """True when the project is generated directly inside ``target_path``."""
        return self.project_name == IN_PLACE


def build_request(
    path: str | None,
    name: str | None,
    template: str | None = None,
) -> ScaffoldRequest:
    """Validate raw flag values and build a ``ScaffoldRequest``.

    Checks run in a fixed order and none of them touches the filesystem.

    Raises:
        RequestError: If a flag is missing or the path uses ``~``.
    """
    if not path or not name:
        raise RequestError("--path OR --name is not defined")
    if path.startswith("~"):
        raise RequestError(
            "Please input a relative or absolute path (e.g. ./apps or /home/...), "
            "'~' is not expanded"
        )
    return ScaffoldRequest(
        target_path=path,
        project_name=name,
        template_id=template or DEFAULT_TEMPLATE,
    )
