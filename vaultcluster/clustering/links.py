"""Link graph analysis within and between clusters."""

from collections import deque
from collections.abc import Sequence

import networkx as nx

from vaultcluster.domain.cluster import Cluster
from vaultcluster.domain.vault import ResolvedLinks


def build_link_graph(note_ids: Sequence[str], resolved_links: ResolvedLinks) -> nx.Graph:
    """Build an undirected weighted graph over a set of notes.

    Only links whose source and target are both in ``note_ids`` are kept.
    Weights of A->B and B->A are summed onto one edge. Self links are ignored.

    Args:
        note_ids: Notes to include as nodes, in a stable order
        resolved_links: Source path -> target path -> link count

    Returns:
        Graph with a ``position`` attribute on each node and ``weight`` on each edge
    """
    graph = nx.Graph()
    for position, note_id in enumerate(note_ids):
        if note_id not in graph:
            graph.add_node(note_id, position=position)

    for source in list(graph.nodes):
        for target, weight in resolved_links.get(source, {}).items():
            if target == source or target not in graph or weight <= 0:
                continue
            if graph.has_edge(source, target):
                graph[source][target]["weight"] += weight
            else:
                graph.add_edge(source, target, weight=weight)

    return graph


def order_by_connectivity(graph: nx.Graph) -> list[list[str]]:
    """Order notes so that linked notes sit next to each other.

    Connected components come largest first (ties by the position of their
    earliest note). Each component is walked breadth-first from its most
    connected note, visiting neighbours by descending link weight; ties are
    always broken by original note position.

    Returns:
        One ordered list of notes per connected component
    """

    def position(node: str) -> int:
        return graph.nodes[node]["position"]

    components = sorted(
        nx.connected_components(graph),
        key=lambda component: (-len(component), min(position(node) for node in component)),
    )

    ordered = []
    for component in components:
        start = min(
            component,
            key=lambda node: (-graph.degree(node, weight="weight"), position(node)),
        )
        visited = {start}
        queue = deque([start])
        walk = []
        while queue:
            node = queue.popleft()
            walk.append(node)
            neighbours = sorted(
                graph[node].items(),
                key=lambda item: (-item[1]["weight"], position(item[0])),
            )
            for neighbour, _ in neighbours:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        ordered.append(walk)

    return ordered


def calculate_link_density(note_ids: Sequence[str], resolved_links: ResolvedLinks) -> float:
    """Fraction of possible ordered note pairs that are linked.

    Link density = distinct internal links (A->B with A != B) / (n * (n - 1)).
    Links to notes outside ``note_ids`` do not count.
    """
    members = set(note_ids)
    n = len(members)
    if n < 2:
        return 0.0

    internal_links = 0
    for source in members:
        targets = resolved_links.get(source, {})
        internal_links += sum(
            1
            for target, weight in targets.items()
            if weight > 0 and target != source and target in members
        )

    return min(1.0, internal_links / (n * (n - 1)))


def analyze_links(clusters: Sequence[Cluster], resolved_links: ResolvedLinks) -> list[Cluster]:
    """Return copies of the clusters with their internal link density computed."""
    return [
        cluster.model_copy(
            update={
                "internal_link_density": calculate_link_density(cluster.note_ids, resolved_links)
            }
        )
        for cluster in clusters
    ]
