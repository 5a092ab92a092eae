"""routescribe CLI — generate a typed axios client from backend routes.

Entry point registered as ``routescribe`` in ``pyproject.toml``::

    [project.scripts]
    routescribe = "routescribe.cli:main"
"""

import argparse
import sys

from routescribe.cli._options import add_framework_flags, add_scan_options


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routescribe`` command."""
    parser = argparse.ArgumentParser(
        prog="routescribe",
        description="routescribe — generate an API client from backend route declarations.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- routescribe generate ---------------------------------------------
    generate_parser = subparsers.add_parser("generate", help="Write api.ts or api.js")
    generate_parser.add_argument("--ts", action="store_true", help="Generate api.ts with types")
    generate_parser.add_argument("--js", action="store_true", help="Generate api.js")
    add_framework_flags(generate_parser)
    add_scan_options(generate_parser)

    # -- routescribe routes -----------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List discovered routes and their names")
    add_framework_flags(routes_parser)
    add_scan_options(routes_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "generate":
        from routescribe.cli._generate import run_generate

        run_generate(args)
    elif args.command == "routes":
        from routescribe.cli._routes import run_routes

        run_routes(args)
