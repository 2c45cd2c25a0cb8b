"""Dependency graph utilities.

Provides topological sorting for determining build order in a monorepo.
Packages must be built in dependency order so that when package A depends
on package B, B is built first.

Unlike a strict topological sort, circular dependency chains do not abort
the ordering: packages that take part in a cycle are moved to the end of
the order, followed by packages that have no internal edges at all.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from .models import GraphNode

DependencyLookup = Callable[[str], Iterable[str]]


def build_edges(
    ids: Sequence[str], dependency_lookup: DependencyLookup
) -> list[tuple[str, str]]:
    """Collect (from, to) edges meaning "from depends on to".

    Dependencies are kept in the order the lookup returns them, with
    duplicates, self references and ids outside ``ids`` dropped. Unordered
    results (sets) are ordered by position in ``ids`` so the edge list does
    not depend on string hashing.
    """
    position = {pkg: i for i, pkg in enumerate(ids)}
    edges: list[tuple[str, str]] = []

    for pkg in ids:
        raw = dependency_lookup(pkg)
        deps = [d for d in dict.fromkeys(raw) if d != pkg and d in position]
        if isinstance(raw, (set, frozenset)):
            deps.sort(key=position.__getitem__)
        edges.extend((pkg, dep) for dep in deps)

    return edges


def build_nodes(edges: Iterable[tuple[str, str]]) -> dict[str, GraphNode]:
    """Create graph nodes lazily from an edge list.

    Nodes are created the first time either endpoint is referenced, so the
    dict order is the discovery order. Packages without edges get no node.
    """
    nodes: dict[str, GraphNode] = {}
    for src, dest in edges:
        if src not in nodes:
            nodes[src] = GraphNode(id=src)
        if dest not in nodes:
            nodes[dest] = GraphNode(id=dest)
        nodes[src].vertices.append(dest)
    return nodes


def _visit(
    nodes: dict[str, GraphNode],
    root: str,
    visited: set[str],
    circular: dict[str, GraphNode],
    order: list[str],
) -> None:
    """Depth-first post-order walk from ``root`` using an explicit stack.

    Each frame carries the ancestor path from the root to its node. A child
    already on that path closes a cycle: both the current node and the
    child are marked circular, and the walk carries on into the child.
    """
    visited.add(root)
    stack = [(root, (root,), iter(nodes[root].vertices))]

    while stack:
        node_id, path, children = stack[-1]
        child = next(children, None)

        if child is None:
            stack.pop()
            if node_id not in circular:
                order.append(node_id)
            continue

        if child in path:
            print(f"  CIRCULAR: closed chain: {child} is in {node_id}")
            circular.setdefault(node_id, nodes[node_id])
            circular.setdefault(child, nodes[child])

        if child not in visited:
            visited.add(child)
            stack.append((child, path + (child,), iter(nodes[child].vertices)))


def topo_sort(ids: Sequence[str], dependency_lookup: DependencyLookup) -> list[str]:
    """Order packages so that dependencies come before dependents.

    Args:
        ids: Package identifiers, e.g. workspace package names. Must not be
             empty.
        dependency_lookup: Returns the ids a package directly depends on.
             Ids outside ``ids`` and self references are ignored. Errors it
             raises propagate to the caller.

    Returns:
        Every id exactly once: the acyclic part in dependency order, then
        packages in circular chains (fewest dependencies first, ties in
        discovery order), then packages with no edges in input order.

    Example:
        If A depends on B, B depends on C, and D stands alone:
        topo_sort([A, B, C, D], lookup) → [C, B, A, D]
    """
    if len(ids) == 1:
        return list(ids)

    edges = build_edges(ids, dependency_lookup)
    nodes = build_nodes(edges)

    visited: set[str] = set()
    circular: dict[str, GraphNode] = {}
    order: list[str] = []

    for key in nodes:
        if key not in visited:
            _visit(nodes, key, visited, circular, order)

    # Fewest dependencies first, ties in discovery order
    discovery = {key: i for i, key in enumerate(nodes)}
    circular_sorted = sorted(
        circular, key=lambda k: (circular[k].out_degree, discovery[k])
    )

    standalones = [pkg for pkg in ids if pkg not in nodes]

    return order + circular_sorted + standalones
