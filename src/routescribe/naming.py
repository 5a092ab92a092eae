"""Method name inference.

Turns a route's verb and the path segments after its entity into a
readable client method name, then makes it unique within the entity.

Base names, in priority order:

1. No remainder (``/users``): a verb default such as ``getAll`` or ``create``.
2. Remainder ends in a parameter (``/users/:id``): ``get`` + ``ByUserId``.
   A parameter named exactly ``id`` borrows the singular entity name;
   any other parameter is used as-is (``/posts/:slug`` -> ``getBySlug``).
3. Remainder ends in a known action word (``/auth/login``): the static
   segments in lower camel case (``login``, ``advancedSearch``). The
   verb is ignored.
4. Anything else: verb prefix + static segments (``/users/:id/avatar``
   with PUT -> ``updateAvatar``).

Collisions retry with the capitalized verb appended, then with an
increasing integer suffix on the base name.
"""

import re
from collections.abc import Sequence

from routescribe.routing.path import is_param
from routescribe.routing.route import HttpVerb

ACTION_WORDS = frozenset({
    "login", "register", "signup", "signin", "logout", "search", "find",
    "upload", "download", "submit", "verify", "check", "reset", "forgot-password",
})

# Names for a route with nothing after the entity segment
_COLLECTION_NAMES: dict[HttpVerb, str] = {
    HttpVerb.GET: "getAll",
    HttpVerb.POST: "create",
    HttpVerb.PUT: "update",
    HttpVerb.PATCH: "update",
    HttpVerb.DELETE: "deleteAll",
}

# Prefixes for routes ending in a parameter; POST falls back to the verb
_LOOKUP_PREFIXES: dict[HttpVerb, str] = {
    HttpVerb.GET: "get",
    HttpVerb.PUT: "update",
    HttpVerb.PATCH: "update",
    HttpVerb.DELETE: "delete",
}

_ACTION_PREFIXES: dict[HttpVerb, str] = {
    **_LOOKUP_PREFIXES,
    HttpVerb.POST: "create",
}

_SEPARATOR_PATTERN = re.compile(r"[-_](.)")


def pascal_case(value: str) -> str:
    """Capitalize the first character and fold ``-x`` / ``_x`` into ``X``.

    Only the first character is upper-cased; the rest keeps its case
    (``user_id`` -> ``UserId``, ``avatarURL`` -> ``AvatarURL``).
    """
    if not value:
        return ""
    rest = _SEPARATOR_PATTERN.sub(lambda m: m.group(1).upper(), value[1:])
    return value[0].upper() + rest


def camel_case(value: str) -> str:
    """``pascal_case`` with the first character lower-cased."""
    pascal = pascal_case(value)
    if not pascal:
        return ""
    return pascal[0].lower() + pascal[1:]


def singularize(entity: str) -> str:
    """Strip one trailing ``s`` (``users`` -> ``user``)."""
    return entity[:-1] if entity.endswith("s") else entity


def _param_suffix(param: str, entity: str) -> str:
    if param == "id":
        return f"By{pascal_case(singularize(entity))}Id"
    return f"By{pascal_case(param)}"


def base_name(method: HttpVerb, remainder: Sequence[str], entity: str) -> str:
    """Derive a method name before collision handling.

    *remainder* holds the path segments after the entity segment, with
    parameters still prefixed by ``:``.
    """
    if not remainder:
        return _COLLECTION_NAMES.get(method, method.value)

    last = remainder[-1]
    if is_param(last):
        prefix = _LOOKUP_PREFIXES.get(method, method.value)
        return prefix + _param_suffix(last[1:], entity)

    static = [segment for segment in remainder if not is_param(segment)]
    if last.lower() in ACTION_WORDS:
        return camel_case("_".join(static))

    prefix = _ACTION_PREFIXES.get(method, method.value)
    return prefix + "".join(pascal_case(segment) for segment in static)


def resolve_collision(name: str, method: HttpVerb, used: set[str]) -> str:
    """Return a variant of *name* not in *used* and record it there.

    Tries *name*, then *name* + capitalized verb, then *name* + 1, 2, ...
    """
    candidate = name
    if candidate in used:
        candidate = name + pascal_case(method.value)
    counter = 1
    while candidate in used:
        candidate = f"{name}{counter}"
        counter += 1
    used.add(candidate)
    return candidate
