"""``routescribe routes`` — list discovered routes.

Scans the root like ``generate`` but prints a table of METHOD, PATH,
and the ``entity.name`` each route would get in the client instead of
writing a file.
"""

import argparse

from routescribe.cli._options import configure_logging, fail, selected_framework
from routescribe.config import GenerateConfig
from routescribe.errors import ConfigurationError
from routescribe.generate import collect_routes
from routescribe.structure import build_structure


def run_routes(args: argparse.Namespace) -> None:
    """Print the routes found under ``args.root``."""
    framework = selected_framework(args)
    config = GenerateConfig(framework=framework, root=args.root)
    configure_logging(args, config.log_level)

    try:
        scan = collect_routes(config)
    except ConfigurationError as exc:
        fail(str(exc))

    structure = build_structure(scan.routes)
    if not structure:
        print("No routes found.")
        return

    # Build rows: (method, path, entity.name)
    rows: list[tuple[str, str, str]] = [
        (entry.method.value.upper(), entry.original_path, f"{entity}.{entry.name}")
        for entity, entries in structure.items()
        for entry in entries
    ]

    # Column widths
    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "CLIENT"))
    sep_len = max_method + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for method, path, name in rows:
        print(fmt.format(method, path, name))
