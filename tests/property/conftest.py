# tests/property/conftest.py
"""Shared Hypothesis strategies for property-based tests.

Graphs are generated as plain data (GraphSpec) and materialized into a
realm inside each test, so every example starts from fresh objects.

Usage:
    from tests.property.conftest import GraphSpec, build_graph, graph_specs

    @given(spec=graph_specs())
    def test_closure(spec: GraphSpec) -> None:
        realm = Realm()
        nodes = build_graph(realm, spec)
        ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from hypothesis import strategies as st

from hardener.contracts.descriptors import DataDescriptor
from hardener.realm import HostObject, Realm

# Small key alphabet so that generated graphs share keys across nodes and
# exercise shadowing through prototype chains.
PROPERTY_KEYS = ("a", "b", "c", "d")

# Prototype choices: an index into the node list, or one of these markers.
OBJECT_PROTOTYPE = "object_prototype"
NULL_PROTOTYPE = "null"

primitive_values = st.none() | st.booleans() | st.integers() | st.text(max_size=10)


@dataclass(frozen=True)
class GraphSpec:
    """Shape of a generated object graph. Node 0 is the root.

    Attributes:
        prototypes: Per node, a node index or a prototype marker.
        links: (source, key, target) node-valued properties.
        primitives: (node, key, value) primitive-valued properties.
    """

    prototypes: tuple[int | str, ...]
    links: tuple[tuple[int, str, int], ...]
    primitives: tuple[tuple[int, str, Any], ...]

    @property
    def size(self) -> int:
        return len(self.prototypes)

    def value_reachable(self) -> set[int]:
        """Nodes reachable from the root through property values only."""
        reached = {0}
        frontier = [0]
        while frontier:
            current = frontier.pop()
            for source, _, target in self.links:
                if source == current and target not in reached:
                    reached.add(target)
                    frontier.append(target)
        return reached

    def closes_over_prototypes(self) -> bool:
        """True if every reachable node's prototype is intrinsic, null or reachable."""
        reached = self.value_reachable()
        for index in reached:
            proto = self.prototypes[index]
            if isinstance(proto, int) and proto not in reached:
                return False
        return True


@st.composite
def graph_specs(draw: st.DrawFn, max_nodes: int = 8) -> GraphSpec:
    """Generate arbitrary graphs: cycles, shared children and prototype wiring."""
    size = draw(st.integers(min_value=1, max_value=max_nodes))
    indices = st.integers(min_value=0, max_value=size - 1)
    keys = st.sampled_from(PROPERTY_KEYS)

    prototypes = tuple(
        draw(st.one_of(st.just(OBJECT_PROTOTYPE), st.just(NULL_PROTOTYPE), indices)) for _ in range(size)
    )
    raw_links = draw(st.lists(st.tuples(indices, keys, indices), max_size=size * 3))
    raw_primitives = draw(st.lists(st.tuples(indices, keys, primitive_values), max_size=size * 2))

    # One value per (node, key); links win over primitives.
    taken: set[tuple[int, str]] = set()
    links = []
    for source, key, target in raw_links:
        if (source, key) not in taken:
            taken.add((source, key))
            links.append((source, key, target))
    primitives = []
    for node, key, value in raw_primitives:
        if (node, key) not in taken:
            taken.add((node, key))
            primitives.append((node, key, value))

    return GraphSpec(prototypes=prototypes, links=tuple(links), primitives=tuple(primitives))


def build_graph(realm: Realm, spec: GraphSpec) -> list[HostObject]:
    """Materialize a generated graph in realm.

    Prototype chains that run into a cycle are cut to null.
    """
    nodes = [realm.new_object() for _ in range(spec.size)]
    for index, proto in enumerate(spec.prototypes):
        if proto == NULL_PROTOTYPE:
            realm.set_prototype_of(nodes[index], None)
        elif isinstance(proto, int) and not _creates_cycle(spec.prototypes, index):
            realm.set_prototype_of(nodes[index], nodes[proto])
    for source, key, target in spec.links:
        realm.define_property(nodes[source], key, _writable(nodes[target]))
    for node, key, value in spec.primitives:
        realm.define_property(nodes[node], key, _writable(value))
    return nodes


def effective_spec(spec: GraphSpec) -> GraphSpec:
    """Return the graph with prototype cycles cut exactly as build_graph cuts them."""
    prototypes = tuple(
        NULL_PROTOTYPE if isinstance(proto, int) and _creates_cycle(spec.prototypes, index) else proto
        for index, proto in enumerate(spec.prototypes)
    )
    return GraphSpec(prototypes=prototypes, links=spec.links, primitives=spec.primitives)


def _creates_cycle(prototypes: tuple[int | str, ...], start: int) -> bool:
    seen = {start}
    current = prototypes[start]
    while isinstance(current, int):
        if current in seen:
            return True
        seen.add(current)
        current = prototypes[current]
    return False


def _writable(value: Any) -> DataDescriptor:
    return DataDescriptor(value=value, writable=True, enumerable=True, configurable=True)
