"""Dominant tag detection for clusters."""

from collections import Counter
from collections.abc import Mapping, Sequence

from loguru import logger

from vaultcluster.config import ClusteringConfig
from vaultcluster.domain.cluster import Cluster, union_ordered
from vaultcluster.domain.vault import FileMetadata


def normalize_tag(tag: str) -> str:
    """Lowercase a tag and make sure it carries a single leading '#'."""
    cleaned = tag.strip().lower()
    return cleaned if cleaned.startswith("#") else f"#{cleaned}"


def get_tag_counts(note_ids: Sequence[str], metadata: Mapping[str, FileMetadata]) -> Counter[str]:
    """Count how many notes carry each tag.

    A tag repeated within one note is counted once for that note.
    """
    counts: Counter[str] = Counter()
    for note_id in note_ids:
        meta = metadata.get(note_id)
        if meta is None:
            continue
        counts.update({normalize_tag(tag) for tag in meta.tags if tag.strip("# ")})
    return counts


def find_dominant_tags(
    tag_counts: Mapping[str, int], total_notes: int, config: ClusteringConfig
) -> list[str]:
    """Find tags carried by at least the configured fraction of notes.

    Args:
        tag_counts: Tag -> number of notes carrying it
        total_notes: Number of notes in the cluster
        config: Clustering configuration

    Returns:
        Dominant tags, most frequent first, ties by name
    """
    if total_notes == 0:
        return []

    dominant = [
        tag
        for tag, count in tag_counts.items()
        if count / total_notes >= config.dominant_tag_threshold
    ]
    dominant.sort(key=lambda tag: (-tag_counts[tag], tag))
    return dominant[: config.max_dominant_tags]


def annotate_dominant_tags(
    clusters: Sequence[Cluster], metadata: Mapping[str, FileMetadata], config: ClusteringConfig
) -> list[Cluster]:
    """Fill in dominant tags for each cluster from note metadata.

    Membership is left untouched. Clusters that end up with dominant tags
    gain the "tags" reason.
    """
    annotated = []
    for cluster in clusters:
        tag_counts = get_tag_counts(cluster.note_ids, metadata)
        dominant_tags = find_dominant_tags(tag_counts, cluster.size, config)
        if not dominant_tags:
            annotated.append(cluster)
            continue

        logger.debug(f"Cluster {cluster.id} dominant tags: {', '.join(dominant_tags)}")
        annotated.append(
            cluster.model_copy(
                update={
                    "dominant_tags": dominant_tags,
                    "reasons": union_ordered(cluster.reasons, ["tags"]),
                }
            )
        )
    return annotated
