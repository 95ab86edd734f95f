"""Bringing cluster sizes within the configured bounds."""

from collections.abc import Sequence

from loguru import logger

from vaultcluster.config import ClusteringConfig
from vaultcluster.domain.cluster import Cluster
from vaultcluster.domain.vault import ResolvedLinks

from .merger import merge_small_clusters
from .splitter import split_large_cluster


def normalize_cluster_sizes(
    clusters: Sequence[Cluster], resolved_links: ResolvedLinks, config: ClusteringConfig
) -> list[Cluster]:
    """Split oversized clusters, then merge undersized ones.

    Splitting runs first so the merger only ever sees clusters at or below
    the maximum size.

    Args:
        clusters: Clusters to normalize
        resolved_links: Source path -> target path -> link count
        config: Clustering configuration

    Returns:
        Normalized clusters
    """
    split: list[Cluster] = []
    for cluster in clusters:
        split.extend(split_large_cluster(cluster, resolved_links, config))

    normalized = merge_small_clusters(split, config)

    remaining_small = sum(1 for cluster in normalized if cluster.size < config.min_cluster_size)
    if remaining_small:
        logger.info(f"{remaining_small} clusters stay below the minimum size with no merge partner")

    return normalized
