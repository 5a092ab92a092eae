"""``routescribe generate`` — write the client file.

Validates the format and framework flags, runs the generator over
``--root``, and reports the route count. Exits with code 1 on invalid
flags or a missing root directory.
"""

import argparse
import sys

from routescribe.cli._options import configure_logging, fail, selected_framework
from routescribe.config import GenerateConfig, OutputFormat
from routescribe.errors import ConfigurationError
from routescribe.generate import generate_api


def run_generate(args: argparse.Namespace) -> None:
    """Generate ``api.ts`` (``--ts``) or ``api.js`` (``--js``) in the root.

    ``--ts`` wins when both format flags are given.
    """
    if not args.ts and not args.js:
        fail("Need to specify --ts or --js")
    framework = selected_framework(args)
    output_format = OutputFormat.TS if args.ts else OutputFormat.JS

    config = GenerateConfig(framework=framework, output_format=output_format, root=args.root)
    configure_logging(args, config.log_level)

    try:
        result = generate_api(config)
    except ConfigurationError as exc:
        fail(str(exc))

    if result.route_count == 0:
        print("Warning: No routes found!", file=sys.stderr)
    print(
        f"{config.output_name} generated with {result.route_count} routes "
        f"for {framework.value}!"
    )
