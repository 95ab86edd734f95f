"""Merging undersized clusters with similar neighbours."""

from collections.abc import Sequence

from loguru import logger

from vaultcluster.config import ClusteringConfig
from vaultcluster.domain.cluster import Cluster, union_ordered


def merge_small_clusters(clusters: Sequence[Cluster], config: ClusteringConfig) -> list[Cluster]:
    """Merge undersized clusters with compatible undersized clusters.

    Undersized clusters are visited in input order. Each one that has not
    been absorbed yet absorbs later compatible clusters until it reaches the
    minimum size. Absorbed clusters are not reconsidered. Clusters already at
    or above the minimum pass through untouched, and undersized clusters
    without a compatible partner are kept as they are.

    Args:
        clusters: Current clusters
        config: Clustering configuration

    Returns:
        Clusters in the position of their first input
    """
    small_positions = [
        position
        for position, cluster in enumerate(clusters)
        if cluster.size < config.min_cluster_size
    ]
    if len(small_positions) < 2:
        return list(clusters)

    result: dict[int, Cluster] = {
        position: cluster
        for position, cluster in enumerate(clusters)
        if cluster.size >= config.min_cluster_size
    }
    absorbed: set[int] = set()

    for index, position in enumerate(small_positions):
        if position in absorbed:
            continue

        current = clusters[position]
        for other_position in small_positions[index + 1 :]:
            if current.size >= config.min_cluster_size:
                break
            if other_position in absorbed:
                continue

            other = clusters[other_position]
            if are_compatible(current, other, config):
                logger.debug(
                    f"Merging cluster {other.id} ({other.size} notes) into "
                    f"{current.id} ({current.size} notes)"
                )
                current = merge_clusters(current, other)
                absorbed.add(other_position)

        result[position] = current

    logger.info(
        f"Merged {len(absorbed)} undersized clusters, "
        f"{len(clusters)} clusters -> {len(result)} clusters"
    )
    return [result[position] for position in sorted(result)]


def are_compatible(a: Cluster, b: Cluster, config: ClusteringConfig) -> bool:
    """Check whether two undersized clusters may be merged.

    Both must be below the minimum size and fit together under the maximum.
    They must then share the same non-empty folder or at least one dominant tag.
    """
    if a.size >= config.min_cluster_size or b.size >= config.min_cluster_size:
        return False
    if len(set(a.note_ids) | set(b.note_ids)) > config.max_cluster_size:
        return False

    same_folder = bool(a.folder_path) and a.folder_path == b.folder_path
    return same_folder or has_overlapping_tags(a.dominant_tags, b.dominant_tags)


def has_overlapping_tags(tags_a: Sequence[str], tags_b: Sequence[str]) -> bool:
    return not set(tags_a).isdisjoint(tags_b)


def merge_clusters(a: Cluster, b: Cluster) -> Cluster:
    """Merge two clusters into a new one.

    The larger cluster is the base (``a`` on ties): its notes come first and it
    supplies the folder path and candidate names. Tags and reasons are
    unioned and link density is weighted by size.
    """
    base, other = (a, b) if a.size >= b.size else (b, a)
    total = base.size + other.size
    weighted = base.internal_link_density * base.size + other.internal_link_density * other.size
    density = weighted / total if total else 0.0

    return Cluster(
        note_ids=union_ordered(base.note_ids, other.note_ids),
        folder_path=base.folder_path,
        candidate_names=list(base.candidate_names),
        dominant_tags=union_ordered(base.dominant_tags, other.dominant_tags),
        internal_link_density=density,
        reasons=union_ordered(base.reasons, other.reasons),
    )
