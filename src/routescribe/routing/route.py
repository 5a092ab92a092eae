"""HttpVerb, RouteRecord, and MethodEntry."""

from dataclasses import dataclass
from enum import Enum


class HttpVerb(Enum):
    """HTTP verbs recognised in route declarations."""

    GET = "get"
    POST = "post"
    PUT = "put"
    DELETE = "delete"
    PATCH = "patch"

    @classmethod
    def parse(cls, token: str) -> "HttpVerb":
        """Normalize a verb token as written in source (``get``, ``Get``, ``GET``)."""
        return cls(token.lower())

    @property
    def has_body(self) -> bool:
        """Verbs whose generated client call accepts a request body."""
        return self in (HttpVerb.POST, HttpVerb.PUT, HttpVerb.PATCH)


@dataclass(frozen=True, slots=True)
class RouteRecord:
    """One recognised route declaration.

    ``path`` is kept verbatim as written in source, using ``:name``
    segments for path parameters.
    """

    method: HttpVerb
    path: str


@dataclass(frozen=True, slots=True)
class MethodEntry:
    """A named client method derived from a route record.

    ``name`` is unique within its entity; ``params`` lists every
    ``:identifier`` token of ``original_path`` in order, duplicates kept.
    """

    name: str
    original_path: str
    method: HttpVerb
    params: tuple[str, ...] = ()
