"""scaffoldkit command-line entry point.

Usage::

    scaffoldkit --path ./apps --name my-app
    scaffoldkit --p ./apps --name . --t react
    python -m scaffoldkit --path ./apps --name my-app --package-manager yarn

Every check on the flags runs before anything touches the filesystem. The
process exits 0 after a completed scaffold and 1 on any failure.
"""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path

from pydantic import ValidationError

from scaffoldkit.config import Config
from scaffoldkit.request import RequestError, build_request
from scaffoldkit.scaffolder import (
    ScaffoldError,
    ScaffoldReport,
    UnknownTemplateError,
    available_templates,
    get_scaffolder,
)
from scaffoldkit.toolchain import PackageManagerToolchain, ToolchainError
from scaffoldkit.utils import console, print_error, print_success, print_summary_table

EXIT_OK = 0
EXIT_FAILURE = 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scaffoldkit",
        description="Scaffold a front-end project skeleton with an external package manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  scaffoldkit --path ./apps --name my-app\n"
            "  scaffoldkit --p /home/me/apps --name . --t react\n"
            "  scaffoldkit --package-manager yarn --save-config scaffold.json\n"
        ),
    )
    parser.add_argument("--path", "--p", dest="path", help="Target parent directory (no '~')")
    parser.add_argument("--name", dest="name", help="Project name, '.' to scaffold in place")
    parser.add_argument(
        "--t", "--template", dest="template", default=None,
        help="Template identifier (default: react)",
    )
    parser.add_argument(
        "--config", dest="config", default=None,
        help="JSON configuration file (replaces SCAFFOLD_* environment settings)",
    )
    parser.add_argument(
        "--package-manager", dest="package_manager", default=None,
        help="Package manager binary (default: pnpm)",
    )
    parser.add_argument(
        "--list-templates", action="store_true",
        help="Print the available template identifiers and exit",
    )
    parser.add_argument(
        "--save-config", dest="save_config", default=None, metavar="FILE",
        help="Write the resolved configuration as JSON to FILE and exit",
    )
    return parser


def _load_config(args: argparse.Namespace) -> Config:
    """Resolve configuration: the --config file (or the environment), then flags."""
    config = Config.load(Path(args.config)) if args.config else Config.from_env()
    if args.package_manager:
        toolchain = config.toolchain.model_copy(update={"binary": args.package_manager})
        config = config.model_copy(update={"toolchain": toolchain})
    return config


def _print_report(report: ScaffoldReport) -> None:
    data = {
        "Template": report.request.template_id,
        "Project": str(report.project_dir),
        "Commands": "\n".join(c.summary() for c in report.commands),
    }
    failed = report.failed_operations
    data["Skipped operations"] = ", ".join(failed) if failed else "none"
    print_summary_table(data, title="Scaffold Summary")


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = _build_parser().parse_args(argv)

    if args.list_templates:
        for template_id in available_templates():
            console.print(template_id)
        return EXIT_OK

    if args.save_config:
        try:
            saved = _load_config(args).save(Path(args.save_config))
        except (OSError, ValueError, ValidationError) as exc:
            print_error(f"Invalid configuration: {exc}")
            return EXIT_FAILURE
        print_success(f"Configuration written to {saved}")
        return EXIT_OK

    try:
        request = build_request(args.path, args.name, args.template)
    except RequestError as exc:
        print_error(str(exc))
        return EXIT_FAILURE

    if request.template_id not in available_templates():
        print_error(str(UnknownTemplateError(request.template_id)))
        return EXIT_FAILURE

    try:
        config = _load_config(args)
    except (OSError, ValueError, ValidationError) as exc:
        print_error(f"Invalid configuration: {exc}")
        return EXIT_FAILURE

    toolchain = PackageManagerToolchain(config.toolchain)
    scaffolder = get_scaffolder(request.template_id, config, toolchain, toolchain)

    try:
        report = asyncio.run(scaffolder.scaffold(request))
    except (ScaffoldError, ToolchainError) as exc:
        print_error(f"Error: {exc}")
        return EXIT_FAILURE

    _print_report(report)
    print_success(f"Project ready at {report.project_dir}")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
