"""CLI entry point for ``modgen`` / ``python -m modgen``.

Usage::

    modgen userProfile
    modgen userProfile --root ./my-api
    modgen userProfile --config modgen.json --no-docs
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError

from modgen.config import GeneratorConfig
from modgen.generator import ModuleGenerator
from modgen.scaffolder.emitter import DirectoryCreationError
from modgen.utils import console


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modgen",
        description="Scaffold an API module and wire it into the route and Swagger registries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  modgen userProfile\n"
            "  modgen userProfile --root ./my-api\n"
            "  modgen userProfile --no-docs\n"
        ),
    )
    parser.add_argument(
        "name",
        nargs="?",
        help="Module name, used verbatim for the folder, file names and URL path",
    )
    parser.add_argument(
        "--root", "-r",
        default=None,
        help="Project root (default: $MODGEN_PROJECT_ROOT or the current directory)",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="JSON configuration file (see GeneratorConfig)",
    )
    parser.add_argument(
        "--no-routes",
        action="store_true",
        help="Do not patch the route registry",
    )
    parser.add_argument(
        "--no-docs",
        action="store_true",
        help="Do not patch the Swagger registry",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the generator and return the process exit code."""
    args = build_parser().parse_args(argv)

    name = (args.name or "").strip()
    if not name:
        console.print("[bold red]Provide a module name. Example:[/bold red]")
        console.print("[yellow]   modgen userProfile[/yellow]")
        return 1

    try:
        if args.config:
            config = GeneratorConfig.load(Path(args.config))
            if args.root:
                config.project_root = Path(args.root)
        else:
            config = GeneratorConfig.from_env(project_root=args.root)
    except (OSError, ValidationError) as exc:
        console.print(f"[bold red]Error:[/bold red] Invalid configuration: {exc}")
        return 1

    if args.no_routes:
        config.patch_routes = False
    if args.no_docs:
        config.patch_docs = False

    generator = ModuleGenerator(config)
    try:
        asyncio.run(generator.generate(name))
    except DirectoryCreationError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
