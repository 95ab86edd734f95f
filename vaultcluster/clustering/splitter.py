"""Splitting oversized clusters along link connectivity."""

import math

from loguru import logger

from vaultcluster.config import ClusteringConfig
from vaultcluster.domain.cluster import Cluster, union_ordered
from vaultcluster.domain.vault import ResolvedLinks

from .links import build_link_graph, calculate_link_density, order_by_connectivity


def split_large_cluster(
    cluster: Cluster, resolved_links: ResolvedLinks, config: ClusteringConfig
) -> list[Cluster]:
    """Split a cluster above the maximum size into connectivity-respecting parts.

    Notes are grouped into linked components, then packed into parts that aim
    for a balanced size. A component that fits under the maximum cluster size
    always stays in a single part; only larger components are spread over
    several parts.

    Args:
        cluster: Cluster to split
        resolved_links: Source path -> target path -> link count
        config: Clustering configuration

    Returns:
        The parts in split order, or ``[cluster]`` if it is not oversized
    """
    if cluster.size <= config.max_cluster_size:
        return [cluster]

    target_size = _balanced_chunk_size(cluster.size, config)
    graph = build_link_graph(cluster.note_ids, resolved_links)
    components = order_by_connectivity(graph)
    chunks = _pack_components(components, target_size, config.max_cluster_size)

    logger.info(
        f"Splitting cluster {cluster.id} ({cluster.size} notes) into {len(chunks)} parts "
        f"(target {target_size}, at most {config.max_cluster_size} notes)"
    )

    parts = []
    for index, chunk in enumerate(chunks, start=1):
        linked = graph.subgraph(chunk).number_of_edges() > 0
        parts.append(
            Cluster(
                note_ids=chunk,
                folder_path=cluster.folder_path,
                candidate_names=[*cluster.candidate_names, f"Part {index}"],
                dominant_tags=list(cluster.dominant_tags),
                internal_link_density=calculate_link_density(chunk, resolved_links),
                reasons=union_ordered(cluster.reasons, ["links"] if linked else []),
            )
        )
    return parts


def _balanced_chunk_size(total: int, config: ClusteringConfig) -> int:
    """Chunk size that spreads ``total`` notes evenly over the fewest parts.

    Parts aim for the midpoint between the size bounds and never exceed the
    maximum.
    """
    midpoint = (config.min_cluster_size + config.max_cluster_size) // 2
    target = max(1, min(config.max_cluster_size, midpoint))
    num_chunks = math.ceil(total / target)
    return math.ceil(total / num_chunks)


def _pack_components(
    components: list[list[str]], target_size: int, max_size: int
) -> list[list[str]]:
    """Pack ordered components into chunks.

    Components up to ``target_size`` go whole into the first chunk that stays
    within the target. Components up to ``max_size`` get a chunk of their own.
    Components above ``max_size`` are laid out contiguously over fresh chunks
    of ``target_size``.
    """
    chunks: list[list[str]] = []

    for component in components:
        if len(component) > max_size:
            for start in range(0, len(component), target_size):
                chunks.append(component[start : start + target_size])
            continue

        for chunk in chunks:
            if len(chunk) + len(component) <= target_size:
                chunk.extend(component)
                break
        else:
            chunks.append(list(component))

    return chunks
