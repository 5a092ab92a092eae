"""Build the client view model and render it through kida.

Parameter naming in generated signatures: a parameter literally named
``id`` becomes ``<singular entity>Id`` (``/users/:id`` -> ``userId``);
every other name is lower-camel-cased (``post_slug`` -> ``postSlug``).
Verbs that carry a body take ``data`` after the path parameters, and
every method ends with an optional axios ``config``; a parameter whose
name collides with either is suffixed (``:data`` -> ``data2``). Method
names that are not JS identifiers (``get*``, ``getById?``) are quoted.
"""

import json
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from kida import DictLoader, Environment

from routescribe.config import OutputFormat
from routescribe.naming import camel_case, singularize
from routescribe.routing.route import MethodEntry
from routescribe.structure import Structure
from routescribe.templating._templates import TEMPLATES

_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$]*$")
_PARAM_TOKEN = re.compile(r":([A-Za-z0-9_]+)")
_NON_IDENTIFIER = re.compile(r"[^\w$]")

# Words that cannot name an arrow-function parameter
_RESERVED_WORDS = frozenset({
    "await", "break", "case", "catch", "class", "const", "continue", "debugger",
    "default", "delete", "do", "else", "enum", "export", "extends", "false",
    "finally", "for", "function", "if", "implements", "import", "in", "instanceof",
    "interface", "let", "new", "null", "package", "private", "protected", "public",
    "return", "static", "super", "switch", "this", "throw", "true", "try",
    "typeof", "var", "void", "while", "with", "yield",
})


@dataclass(frozen=True, slots=True)
class ClientMethod:
    """One rendered ``name: (args) => axios.verb(url, ...)`` property."""

    name: str
    verb: str
    label: str
    path: str
    signature: str
    arguments: str


@dataclass(frozen=True, slots=True)
class EntityBlock:
    """One ``entity: { ... }`` group of the generated client."""

    key: str
    methods: tuple[ClientMethod, ...]


def create_environment() -> Environment:
    """Create the kida Environment holding the client templates.

    Autoescaping is off: the output is JavaScript, not HTML.
    """
    return Environment(
        loader=DictLoader(TEMPLATES),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def argument_name(param: str, entity: str) -> str:
    """Map a path parameter to its generated argument name."""
    if param == "id":
        name = f"{camel_case(singularize(entity))}Id"
    else:
        name = camel_case(param)
    name = _NON_IDENTIFIER.sub("_", name)
    if not _JS_IDENTIFIER.match(name) or name in _RESERVED_WORDS:
        return f"_{name}"
    return name


def argument_names(
    params: Sequence[str],
    entity: str,
    *,
    reserved: Iterable[str] = (),
) -> dict[str, str]:
    """Map each distinct path parameter to a unique argument name.

    A repeated parameter maps once. Names already taken, by an earlier
    parameter or by *reserved* (``axios``, ``data``, ``config``), get a numeric
    suffix: ``/users/:id/links/:userId`` -> ``userId``, ``userId2``.
    """
    taken = set(reserved)
    names: dict[str, str] = {}
    for param in dict.fromkeys(params):
        base = argument_name(param, entity)
        name, counter = base, 2
        while name in taken:
            name = f"{base}{counter}"
            counter += 1
        taken.add(name)
        names[param] = name
    return names


def object_key(name: str) -> str:
    """Names that are not JS identifiers are emitted quoted."""
    if _JS_IDENTIFIER.match(name):
        return name
    return json.dumps(name)


def url_template(path: str, entity: str, names: Mapping[str, str] | None = None) -> str:
    """Backtick template literal with each ``:param`` replaced by ``${arg}``."""
    if names is None:
        names = argument_names(_PARAM_TOKEN.findall(path), entity)
    url = _PARAM_TOKEN.sub(lambda m: f"${{{names[m.group(1)]}}}", path)
    return f"`{url}`"


def build_method(entry: MethodEntry, entity: str, *, typed: bool) -> ClientMethod:
    """Build the view of one method entry."""
    body = entry.method.has_body
    reserved = ("axios", "data", "config") if body else ("axios", "config")
    names = argument_names(entry.params, entity, reserved=reserved)
    args = list(names.values())
    call_args = [url_template(entry.original_path, entity, names)]
    if body:
        args.append("data")
        call_args.append("data")
    call_args.append("config")

    if typed:
        rendered = [f"{arg}: any" for arg in args]
        rendered.append("config?: AxiosRequestConfig")
    else:
        rendered = [*args, "config"]

    return ClientMethod(
        name=object_key(entry.name),
        verb=entry.method.value,
        label=entry.method.value.upper(),
        path=entry.original_path,
        signature=", ".join(rendered),
        arguments=", ".join(call_args),
    )


def build_entities(structure: Structure, *, typed: bool) -> list[EntityBlock]:
    """Build the view model, entities in sorted order."""
    return [
        EntityBlock(
            key=object_key(entity),
            methods=tuple(build_method(entry, entity, typed=typed) for entry in entries),
        )
        for entity, entries in structure.items()
    ]


def render_client(
    structure: Structure,
    output_format: OutputFormat | str = OutputFormat.TS,
    *,
    env: Environment | None = None,
) -> str:
    """Render the axios client source for *structure*."""
    fmt = OutputFormat.parse(output_format)
    typed = fmt is OutputFormat.TS
    environment = env or create_environment()
    template = environment.get_template("client")
    return template.render({
        "typed": typed,
        "entities": build_entities(structure, typed=typed),
    })
