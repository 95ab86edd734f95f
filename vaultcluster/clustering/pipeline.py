"""End-to-end clustering pipeline over a vault snapshot."""

from collections.abc import Mapping, Sequence
from typing import Any

from loguru import logger
from pydantic import BaseModel

from vaultcluster.config import ClusteringConfig
from vaultcluster.domain.cluster import Cluster
from vaultcluster.domain.vault import Snapshot

from .initial import cluster_by_folder
from .links import analyze_links
from .normalizer import normalize_cluster_sizes
from .tags import annotate_dominant_tags


class PipelineStats(BaseModel):
    """Aggregate statistics about a clustering run."""

    total_notes: int = 0
    total_clusters: int = 0
    average_cluster_size: float = 0.0
    min_cluster_size: int = 0
    max_cluster_size: int = 0
    undersized_clusters: int = 0  # below the configured minimum, no merge partner
    oversized_clusters: int = 0


class PipelineResult(BaseModel):
    clusters: list[Cluster] = []
    stats: PipelineStats = PipelineStats()


def run_clustering_pipeline(
    snapshot: Snapshot, config: ClusteringConfig | Mapping[str, Any] | None = None
) -> PipelineResult:
    """Cluster every note of a snapshot.

    The pipeline executes the following steps:
    1. Group notes by folder
    2. Detect dominant tags per cluster
    3. Normalize cluster sizes (split large, merge small)
    4. Compute internal link density per cluster

    Args:
        snapshot: Files, metadata and resolved links of the vault
        config: Configuration, or a mapping of overrides on top of the defaults

    Returns:
        Final clusters and statistics

    Raises:
        ValueError: If the configuration's size bounds are inconsistent
    """
    config = _resolve_config(config)

    clusters = cluster_by_folder(snapshot.files, config)
    clusters = annotate_dominant_tags(clusters, snapshot.metadata, config)
    clusters = normalize_cluster_sizes(clusters, snapshot.resolved_links, config)
    clusters = analyze_links(clusters, snapshot.resolved_links)

    stats = calculate_stats(clusters, config)
    logger.info(
        f"Clustered {stats.total_notes} notes into {stats.total_clusters} clusters "
        f"(average size {stats.average_cluster_size:.1f})"
    )
    return PipelineResult(clusters=clusters, stats=stats)


def calculate_stats(clusters: Sequence[Cluster], config: ClusteringConfig) -> PipelineStats:
    if not clusters:
        return PipelineStats()

    sizes = [cluster.size for cluster in clusters]
    total_notes = sum(sizes)

    return PipelineStats(
        total_notes=total_notes,
        total_clusters=len(clusters),
        average_cluster_size=total_notes / len(clusters),
        min_cluster_size=min(sizes),
        max_cluster_size=max(sizes),
        undersized_clusters=sum(1 for size in sizes if size < config.min_cluster_size),
        oversized_clusters=sum(1 for size in sizes if size > config.max_cluster_size),
    )


def _resolve_config(config: ClusteringConfig | Mapping[str, Any] | None) -> ClusteringConfig:
    if config is None:
        return ClusteringConfig()
    if isinstance(config, ClusteringConfig):
        # Instances built with model_construct skip validation
        return config.check_size_bounds()
    return ClusteringConfig(**config)
