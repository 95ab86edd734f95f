"""Seed clustering by folder placement."""

from collections.abc import Sequence

from loguru import logger

from vaultcluster.config import ClusteringConfig
from vaultcluster.domain.cluster import Cluster
from vaultcluster.domain.vault import FileInfo

from .folders import generate_candidate_names, is_root


def cluster_by_folder(files: Sequence[FileInfo], config: ClusteringConfig) -> list[Cluster]:
    """Group notes by their containing folder.

    Produces one cluster per distinct folder, plus one for root-level notes if
    there are any. Clusters come out in order of first encounter and members
    keep their input order.

    Args:
        files: Every note in the vault
        config: Clustering configuration

    Returns:
        Seed clusters, one per folder
    """
    folder_map: dict[str, list[str]] = {}

    for file in files:
        folder = "" if is_root(file.folder) else file.folder
        folder_map.setdefault(folder, []).append(file.path)

    clusters = [
        Cluster(
            note_ids=note_ids,
            folder_path=folder,
            candidate_names=generate_candidate_names(folder),
            internal_link_density=0.0,
            reasons=["folder"],
        )
        for folder, note_ids in folder_map.items()
    ]

    logger.info(f"Grouped {len(files)} notes into {len(clusters)} folder clusters")
    for cluster in clusters:
        if cluster.size > config.max_cluster_size:
            logger.debug(
                f"Folder '{cluster.folder_path or '/'}' holds {cluster.size} notes, "
                f"above the maximum of {config.max_cluster_size}"
            )
    return clusters
