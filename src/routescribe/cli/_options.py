"""Shared CLI options: one flag per framework, scan root, verbosity."""

import argparse
import logging
import sys
from typing import NoReturn

from routescribe.frameworks import Framework

_FRAMEWORK_HELP: dict[Framework, str] = {
    Framework.ELYSIA: "ElysiaJS",
    Framework.EXPRESS: "ExpressJS",
    Framework.NESTJS: "NestJS",
    Framework.FASTIFY: "Fastify",
    Framework.ADONIS: "AdonisJS",
    Framework.KOA: "Koa.js",
    Framework.HONO: "Hono",
}


def add_framework_flags(parser: argparse.ArgumentParser) -> None:
    """Add ``--express``, ``--nestjs``, ... flags.

    The flags are independent booleans; ``selected_framework`` enforces
    exactly one.
    """
    for framework in Framework:
        parser.add_argument(
            f"--{framework.value}",
            action="store_true",
            help=f"Scan {_FRAMEWORK_HELP[framework]} route declarations",
        )


def add_scan_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--root", default=".", help="Project directory to scan (default: cwd)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each scanned file")


def fail(message: str) -> NoReturn:
    """Print *message* as an error and exit with status 1."""
    print(f"Error: {message}", file=sys.stderr)
    raise SystemExit(1)


def selected_framework(args: argparse.Namespace) -> Framework:
    """Return the single framework flag set on *args*, or exit with an error."""
    selected = [framework for framework in Framework if getattr(args, framework.value, False)]
    if not selected:
        flags = ", ".join(f"--{name}" for name in Framework.names())
        fail(f"Need to specify one of: {flags}")
    if len(selected) > 1:
        fail(f"Cannot specify multiple frameworks: {', '.join(f.value for f in selected)}")
    return selected[0]


def configure_logging(args: argparse.Namespace, level: str = "warning") -> None:
    """Send library logs to stderr; ``--verbose`` lowers the level to debug."""
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
