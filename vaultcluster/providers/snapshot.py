"""Materializing a vault snapshot from its providers."""

from loguru import logger

from vaultcluster.domain.vault import Snapshot

from .base import MetadataProvider, VaultProvider


def build_snapshot(vault: VaultProvider, metadata_provider: MetadataProvider) -> Snapshot:
    """Read files, metadata and links into a Snapshot.

    Notes without cached metadata are left out of the metadata map; they still
    take part in clustering.

    Args:
        vault: Provider listing the vault's notes
        metadata_provider: Provider for per-note metadata and resolved links

    Returns:
        Snapshot ready for the clustering pipeline
    """
    files = vault.list_files()

    metadata = {}
    for file in files:
        meta = metadata_provider.get_metadata(file.path)
        if meta is None:
            logger.debug(f"No cached metadata for {file.path}")
            continue
        metadata[file.path] = meta

    resolved_links = {
        source: dict(targets) for source, targets in metadata_provider.get_resolved_links().items()
    }

    logger.info(
        f"Built snapshot with {len(files)} files, {len(metadata)} metadata entries "
        f"and {len(resolved_links)} linking notes"
    )
    return Snapshot(files=files, metadata=metadata, resolved_links=resolved_links)
