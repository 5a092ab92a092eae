"""Group route records by entity and give each a method name.

Each ``EntityGroup`` owns the names already assigned within it, so name
collision handling is local to one build. Nothing here is module-level
state: two builds never see each other's names.

Records are processed strictly in the order given (file order, then
declaration order), because which route keeps a plain name and which
one gets a suffix depends on who came first.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

from routescribe.naming import base_name, resolve_collision
from routescribe.routing.path import extract_params, split_path
from routescribe.routing.route import MethodEntry, RouteRecord


@dataclass(slots=True)
class EntityGroup:
    """Methods inferred for one entity, plus the names they already use."""

    name: str
    methods: list[MethodEntry] = field(default_factory=list)
    used_names: set[str] = field(default_factory=set)

    def add(self, route: RouteRecord, remainder: tuple[str, ...]) -> MethodEntry:
        """Name *route*, append it, and return the new entry."""
        name = resolve_collision(
            base_name(route.method, remainder, self.name),
            route.method,
            self.used_names,
        )
        entry = MethodEntry(
            name=name,
            original_path=route.path,
            method=route.method,
            params=extract_params(route.path),
        )
        self.methods.append(entry)
        return entry


class Structure(Mapping[str, tuple[MethodEntry, ...]]):
    """Immutable mapping of entity name -> method entries.

    Keys iterate in sorted order; entries keep declaration order.
    """

    __slots__ = ("_entities",)

    def __init__(self, groups: Iterable[EntityGroup] = ()) -> None:
        ordered = sorted(groups, key=lambda group: group.name)
        self._entities: dict[str, tuple[MethodEntry, ...]] = {
            group.name: tuple(group.methods) for group in ordered
        }

    def __getitem__(self, entity: str) -> tuple[MethodEntry, ...]:
        return self._entities[entity]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __repr__(self) -> str:
        return f"Structure({self._entities!r})"

    @property
    def method_count(self) -> int:
        """Total number of method entries across all entities."""
        return sum(len(entries) for entries in self._entities.values())


def build_structure(routes: Iterable[RouteRecord]) -> Structure:
    """Group *routes* by entity and assign each a unique method name.

    Returns an empty ``Structure`` when there are no routes.
    """
    groups: dict[str, EntityGroup] = {}
    for route in routes:
        entity, remainder = split_path(route.path)
        group = groups.get(entity)
        if group is None:
            group = groups[entity] = EntityGroup(entity)
        group.add(route, remainder)
    return Structure(groups.values())
