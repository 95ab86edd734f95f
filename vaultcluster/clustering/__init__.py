"""Structural clustering of vault notes by folder, tags and links."""

from vaultcluster.clustering.folders import (
    generate_candidate_names,
    get_folders_by_depth,
    is_subfolder_of,
)
from vaultcluster.clustering.initial import cluster_by_folder
from vaultcluster.clustering.merger import merge_small_clusters
from vaultcluster.clustering.normalizer import normalize_cluster_sizes
from vaultcluster.clustering.pipeline import (
    PipelineResult,
    PipelineStats,
    run_clustering_pipeline,
)
from vaultcluster.clustering.splitter import split_large_cluster

__all__ = [
    "PipelineResult",
    "PipelineStats",
    "cluster_by_folder",
    "generate_candidate_names",
    "get_folders_by_depth",
    "is_subfolder_of",
    "merge_small_clusters",
    "normalize_cluster_sizes",
    "run_clustering_pipeline",
    "split_large_cluster",
]
