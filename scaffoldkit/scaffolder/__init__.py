"""scaffoldkit scaffolder -- turns a directory into a front-end project.

Quick usage::

    from scaffoldkit.config import Config
    from scaffoldkit.request import build_request
    from scaffoldkit.scaffolder import get_scaffolder
    from scaffoldkit.toolchain import PackageManagerToolchain

    config = Config()
    toolchain = PackageManagerToolchain(config.toolchain)
    request = build_request("./apps", "my-app")
    scaffolder = get_scaffolder(request.template_id, config, toolchain, toolchain)
    report = await scaffolder.scaffold(request)
"""

from scaffoldkit.scaffolder.batch import (
    BatchError,
    BatchResult,
    OperationOutcome,
    ScaffoldError,
    run_batch,
)
from scaffoldkit.scaffolder.context import ScaffoldContext, ScaffoldReport
from scaffoldkit.scaffolder.react import ReactScaffolder
from scaffoldkit.scaffolder.registry import (
    UnknownTemplateError,
    available_templates,
    get_scaffolder,
)
from scaffoldkit.scaffolder.templates import REACT_FILES, TemplateFileSpec, TemplateRenderer

__all__ = [
    "BatchError",
    "BatchResult",
    "OperationOutcome",
    "REACT_FILES",
    "ReactScaffolder",
    "ScaffoldContext",
    "ScaffoldError",
    "ScaffoldReport",
    "TemplateFileSpec",
    "TemplateRenderer",
    "UnknownTemplateError",
    "available_templates",
    "get_scaffolder",
    "run_batch",
]
