"""Pattern library — one extraction rule per supported backend framework.

Rules are tolerant regular expressions over raw source text, not a
parser. A declaration is recognised only when it is written on one line
with a quoted literal path; anything else (template-literal paths,
computed strings, routers assembled from data at runtime) is silently
not recognised.

Two rule shapes exist:

- ``VerbCallRule``: ``<receiver>.<verb>("<path>")`` calls. Either a fixed
  set of receiver names is accepted, or any receiver (including none, as
  in a chained ``.get(...)``) except an excluded set.
- ``DecoratorRule``: a class-level ``@Controller(prefix)`` plus
  per-method ``@Get(path)`` / ``@Post(path)`` ... decorators.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from routescribe.errors import UnsupportedFramework

VERBS: tuple[str, ...] = ("get", "post", "put", "delete", "patch")

_VERB_GROUP = rf"(?P<verb>(?i:{'|'.join(VERBS)}))"

# Quoted path literal: same quote on both ends, no quotes or newlines inside
_PATH_LITERAL = r"(?P<quote>['\"])(?P<path>[^'\"\r\n]+)(?P=quote)"
_OPTIONAL_LITERAL = r"(?:(?P<quote>['\"])(?P<path>[^'\"\r\n]*)(?P=quote))?"

# Any JS identifier; the lookbehind keeps matches from starting mid-word
_IDENTIFIER = r"(?<![\w$])[A-Za-z_$][\w$]*"


def _compile_verb_call(receivers: frozenset[str]) -> re.Pattern[str]:
    if receivers:
        names = "|".join(re.escape(name) for name in sorted(receivers))
        receiver = rf"(?<![\w$])(?P<receiver>{names})"
    else:
        receiver = rf"(?P<receiver>{_IDENTIFIER})?"
    return re.compile(rf"{receiver}\s*\.\s*{_VERB_GROUP}\s*\(\s*{_PATH_LITERAL}")


@dataclass(frozen=True, slots=True)
class VerbCallRule:
    """Matches ``<receiver>.<verb>("<path>")`` call declarations.

    With an empty ``receivers`` set any receiver is accepted, and a call
    with no receiver at all (``.get("/x")`` continuing a chain) matches
    too; names in ``excluded_receivers`` are rejected.
    """

    receivers: frozenset[str] = frozenset()
    excluded_receivers: frozenset[str] = frozenset()
    pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", _compile_verb_call(self.receivers))

    def find(self, source: str) -> Iterator[tuple[str, str]]:
        """Yield ``(verb_token, path)`` for each declaration, in text order."""
        for match in self.pattern.finditer(source):
            if match.group("receiver") in self.excluded_receivers:
                continue
            yield match.group("verb"), match.group("path")


@dataclass(frozen=True, slots=True)
class DecoratorRule:
    """Matches ``@Controller(prefix)`` plus ``@Get(path)``-style decorators.

    Method decorators are scanned across the whole text, not scoped to
    the class that carries the controller prefix.
    """

    controller: str = "Controller"
    decorators: tuple[str, ...] = tuple(verb.capitalize() for verb in VERBS)
    prefix_pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)
    method_pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        prefix = re.compile(rf"@{re.escape(self.controller)}\s*\(\s*{_OPTIONAL_LITERAL}\s*\)")
        names = "|".join(re.escape(name) for name in self.decorators)
        method = re.compile(rf"@(?P<verb>{names})\s*\(\s*{_OPTIONAL_LITERAL}\s*\)")
        object.__setattr__(self, "prefix_pattern", prefix)
        object.__setattr__(self, "method_pattern", method)

    def find_prefix(self, source: str) -> str:
        """Return the first controller prefix, or ``""`` when absent or bare."""
        match = self.prefix_pattern.search(source)
        if match is None:
            return ""
        return match.group("path") or ""

    def find(self, source: str) -> Iterator[tuple[str, str]]:
        """Yield ``(verb_token, path_fragment)`` per method decorator, in text order."""
        for match in self.method_pattern.finditer(source):
            yield match.group("verb"), match.group("path") or ""


type ExtractionRule = VerbCallRule | DecoratorRule


class Framework(Enum):
    """Supported backend frameworks, each bound to its extraction rule."""

    ELYSIA = "elysia"
    EXPRESS = "express"
    NESTJS = "nestjs"
    FASTIFY = "fastify"
    ADONIS = "adonis"
    KOA = "koa"
    HONO = "hono"

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Identifiers in declaration order (the order the CLI lists them)."""
        return tuple(member.value for member in cls)

    @classmethod
    def parse(cls, name: "str | Framework") -> "Framework":
        """Resolve an identifier, raising ``UnsupportedFramework`` if unknown."""
        if isinstance(name, Framework):
            return name
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise UnsupportedFramework(name=name, supported=cls.names()) from None

    @property
    def rule(self) -> ExtractionRule:
        return _RULES[self]


_APP_OR_ROUTER = frozenset({"app", "router"})

_RULES: dict[Framework, ExtractionRule] = {
    Framework.ELYSIA: VerbCallRule(excluded_receivers=_APP_OR_ROUTER),
    Framework.EXPRESS: VerbCallRule(receivers=_APP_OR_ROUTER),
    Framework.NESTJS: DecoratorRule(),
    Framework.FASTIFY: VerbCallRule(receivers=frozenset({"fastify", "app"})),
    Framework.ADONIS: VerbCallRule(receivers=frozenset({"Route"})),
    Framework.KOA: VerbCallRule(receivers=frozenset({"router"})),
    Framework.HONO: VerbCallRule(receivers=_APP_OR_ROUTER),
}
