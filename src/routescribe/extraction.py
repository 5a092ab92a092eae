"""Route extraction — apply a framework's rule to raw source text.

Produces ``RouteRecord`` values in the order their declarations appear.
Text without declarations yields an empty list; that is the common case
for most files in a project and is not an error.

Per-file extraction is independent, so ``extract_many`` runs files in
anyio worker threads and reassembles the results in input order. The
structure builder that consumes them is order-dependent and stays
single-threaded.
"""

import re
from collections.abc import Sequence

import anyio
from anyio import to_thread

from routescribe.frameworks import DecoratorRule, ExtractionRule, Framework, VerbCallRule
from routescribe.routing.route import HttpVerb, RouteRecord

_REPEATED_SLASHES = re.compile(r"/{2,}")


def join_route_path(prefix: str, fragment: str) -> str:
    """Join a controller prefix and a method path fragment.

    Each non-empty part is forced to start with ``/``; two empty parts
    give ``/``; runs of slashes produced by the join collapse to one.

    Examples::

        ("users", ":id")   -> "/users/:id"
        ("/users/", "/x")  -> "/users/x"
        ("", "")           -> "/"
        ("users", "")      -> "/users"
    """
    full = ""
    if prefix:
        full += prefix if prefix.startswith("/") else f"/{prefix}"
    if fragment:
        full += fragment if fragment.startswith("/") else f"/{fragment}"
    if not full:
        return "/"
    return _REPEATED_SLASHES.sub("/", full)


def _extract_verb_calls(rule: VerbCallRule, source: str) -> list[RouteRecord]:
    return [
        RouteRecord(method=HttpVerb.parse(verb), path=path)
        for verb, path in rule.find(source)
    ]


def _extract_decorated(rule: DecoratorRule, source: str) -> list[RouteRecord]:
    prefix = rule.find_prefix(source)
    return [
        RouteRecord(method=HttpVerb.parse(verb), path=join_route_path(prefix, fragment))
        for verb, fragment in rule.find(source)
    ]


def extract_routes(source: str, framework: Framework | str) -> list[RouteRecord]:
    """Extract route records from one source text.

    Raises ``UnsupportedFramework`` if *framework* is a string that names
    no supported framework.
    """
    rule: ExtractionRule = Framework.parse(framework).rule
    match rule:
        case DecoratorRule():
            return _extract_decorated(rule, source)
        case VerbCallRule():
            return _extract_verb_calls(rule, source)


async def extract_many(
    sources: Sequence[str],
    framework: Framework | str,
    *,
    max_workers: int = 8,
) -> list[list[RouteRecord]]:
    """Extract routes from many source texts concurrently.

    Returns one list per input text, in input order regardless of the
    order in which worker threads finish.
    """
    resolved = Framework.parse(framework)
    results: list[list[RouteRecord]] = [[] for _ in sources]
    limiter = anyio.CapacityLimiter(max(1, max_workers))

    async def _extract(index: int, source: str) -> None:
        results[index] = await to_thread.run_sync(
            extract_routes, source, resolved, limiter=limiter
        )

    async with anyio.create_task_group() as tg:
        for index, source in enumerate(sources):
            tg.start_soon(_extract, index, source)

    return results
