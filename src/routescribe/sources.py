"""Source discovery — find and read the backend files to scan.

Walks the project root for JavaScript/TypeScript files, pruning
dependency and build directories, and reads them concurrently. Files
come back sorted by their path relative to the root so that every run
over the same tree feeds the extractor in the same order.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

import anyio

from routescribe.errors import ConfigurationError

logger = logging.getLogger("routescribe.sources")

# Previously generated clients at the project root
GENERATED_FILES = frozenset({"api.js", "api.ts"})


@dataclass(frozen=True, slots=True)
class SourceFile:
    """A discovered file and its decoded contents."""

    path: Path
    text: str


def discover_sources(
    root: str | Path,
    *,
    extensions: Sequence[str] = (".js", ".ts"),
    exclude_dirs: Sequence[str] = ("node_modules", "dist", "tests"),
    exclude_files: Iterable[str] = GENERATED_FILES,
) -> list[Path]:
    """Return candidate source files under *root*, sorted by relative path.

    Directories named in *exclude_dirs* are skipped at any depth; files
    named in *exclude_files* are skipped only directly under *root*.
    Raises ``ConfigurationError`` if *root* is not a directory.
    """
    base = Path(root)
    if not base.is_dir():
        msg = f"Source root not found: {base}"
        raise ConfigurationError(msg)

    excluded = frozenset(exclude_dirs)
    skipped = frozenset(exclude_files)
    suffixes = frozenset(extensions)
    found: list[Path] = []
    for dirpath, dirnames, filenames in base.walk():
        dirnames[:] = [name for name in dirnames if name not in excluded]
        for filename in filenames:
            if dirpath == base and filename in skipped:
                continue
            path = dirpath / filename
            if path.suffix in suffixes:
                found.append(path)

    found.sort(key=lambda path: path.relative_to(base).as_posix())
    return found


async def read_sources(paths: Sequence[Path], *, max_workers: int = 8) -> list[SourceFile]:
    """Read *paths* concurrently, keeping their order.

    Files that cannot be read or decoded as UTF-8 are logged and left out.
    """
    texts: list[str | None] = [None] * len(paths)
    limiter = anyio.CapacityLimiter(max(1, max_workers))

    async def _read(index: int, path: Path) -> None:
        async with limiter:
            try:
                texts[index] = await anyio.Path(path).read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Skipping unreadable source %s: %s", path, exc)

    async with anyio.create_task_group() as tg:
        for index, path in enumerate(paths):
            tg.start_soon(_read, index, path)

    return [
        SourceFile(path=path, text=text)
        for path, text in zip(paths, texts, strict=True)
        if text is not None
    ]
