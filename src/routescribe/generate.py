"""End-to-end generation: discover, extract, build, render, write.

Usage::

    from routescribe import GenerateConfig, generate_api

    result = generate_api(GenerateConfig(framework="express", root="backend"))
    print(result.output_path, result.route_count)

No routes found is not an error: the client is still written (with an
empty ``api`` object), a warning is logged, and the caller decides what
to tell the user.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import anyio

from routescribe.config import GenerateConfig
from routescribe.extraction import extract_many
from routescribe.routing.route import RouteRecord
from routescribe.sources import SourceFile, discover_sources, read_sources
from routescribe.structure import Structure, build_structure
from routescribe.templating import render_client

logger = logging.getLogger("routescribe.generate")


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Outcome of one ``generate_api`` run."""

    output_path: Path
    route_count: int
    file_count: int
    structure: Structure


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Route records found in one scan, in file then declaration order."""

    routes: tuple[RouteRecord, ...]
    files: tuple[SourceFile, ...]


async def scan_async(config: GenerateConfig) -> ScanResult:
    """Discover and read sources, then extract their routes concurrently."""
    paths = discover_sources(
        config.root,
        extensions=config.extensions,
        exclude_dirs=config.exclude_dirs,
    )
    logger.debug("Discovered %d candidate files under %s", len(paths), config.root)

    files = await read_sources(paths, max_workers=config.max_workers)
    per_file = await extract_many(
        [source.text for source in files],
        config.framework,
        max_workers=config.max_workers,
    )

    routes: list[RouteRecord] = []
    for source, file_routes in zip(files, per_file, strict=True):
        if file_routes:
            logger.debug("%s: %d routes", source.path, len(file_routes))
            routes.extend(file_routes)
    return ScanResult(routes=tuple(routes), files=tuple(files))


def collect_routes(config: GenerateConfig) -> ScanResult:
    """Synchronous wrapper around ``scan_async``."""
    return anyio.run(scan_async, config)


def generate_api(config: GenerateConfig) -> GenerationResult:
    """Scan ``config.root`` and write the client to ``config.output_path``."""
    scan = collect_routes(config)
    if not scan.routes:
        logger.warning(
            "No %s routes found in %d files under %s",
            config.framework.value,
            len(scan.files),
            config.root,
        )

    structure = build_structure(scan.routes)
    content = render_client(structure, config.output_format)

    output_path = config.output_path
    output_path.write_text(content, encoding="utf-8")
    logger.info(
        "Wrote %s: %d routes across %d entities for %s",
        output_path,
        len(scan.routes),
        len(structure),
        config.framework.value,
    )

    return GenerationResult(
        output_path=output_path,
        route_count=len(scan.routes),
        file_count=len(scan.files),
        structure=structure,
    )
