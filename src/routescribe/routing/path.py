"""Path template parsing: entity derivation and parameter extraction.

Both functions look at the path string only, never at the verb, so two
routes with the same path always land in the same entity.
"""

import re

ROOT_ENTITY = "root"

# :identifier tokens anywhere in a path template
_PARAM_PATTERN = re.compile(r":([A-Za-z0-9_]+)")


def is_param(segment: str) -> bool:
    """Return True if *segment* is a path parameter (``:id``)."""
    return segment.startswith(":")


def split_path(path: str) -> tuple[str, tuple[str, ...]]:
    """Split a path template into ``(entity, remainder)``.

    Empty segments are dropped, so trailing or repeated slashes do not
    matter. The entity is the first segment unless the path is empty or
    starts with a parameter, in which case it is ``"root"`` and every
    segment stays in the remainder.

    Examples::

        "/users"             -> ("users", ())
        "/users/:id/avatar"  -> ("users", (":id", "avatar"))
        "/:slug"             -> ("root", (":slug",))
        "/"                  -> ("root", ())
    """
    segments = tuple(part for part in path.split("/") if part)
    if not segments or is_param(segments[0]):
        return ROOT_ENTITY, segments
    return segments[0], segments[1:]


def extract_params(path: str) -> tuple[str, ...]:
    """Return the ``:identifier`` names in *path*, left to right.

    Independent of entity derivation: a leading parameter that puts the
    route under ``root`` is still reported here.
    """
    return tuple(_PARAM_PATTERN.findall(path))
