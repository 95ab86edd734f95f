from typing import Callable

import pytest

from vaultcluster.config import ClusteringConfig
from vaultcluster.domain.cluster import Cluster
from vaultcluster.domain.vault import FileInfo, FileMetadata, Snapshot
from tests.fakes import FakeMetadataProvider, FakeVaultProvider


@pytest.fixture
def config() -> ClusteringConfig:
    return ClusteringConfig(min_cluster_size=3, max_cluster_size=10)


@pytest.fixture
def make_cluster() -> Callable[..., Cluster]:
    """Factory for clusters with generated note paths."""

    def _make_cluster(
        size: int,
        folder_path: str = "test",
        prefix: str = "note",
        **kwargs,
    ) -> Cluster:
        note_ids = [f"{folder_path}/{prefix}{i}.md" for i in range(size)]
        return Cluster(note_ids=note_ids, folder_path=folder_path, **kwargs)

    return _make_cluster


@pytest.fixture
def vault_paths() -> list[str]:
    return [
        "react/React Basics.md",
        "react/React Hooks.md",
        "react/State.md",
        "golf/Golf Swing.md",
        "golf/Putting.md",
        "Inbox.md",
    ]


@pytest.fixture
def vault_metadata() -> dict[str, FileMetadata]:
    return {
        "react/React Basics.md": FileMetadata(tags=["#react", "frontend"]),
        "react/React Hooks.md": FileMetadata(tags=["#react", "#hooks"]),
        "react/State.md": FileMetadata(tags=["#React"]),
        "golf/Golf Swing.md": FileMetadata(tags=["#golf"]),
    }


@pytest.fixture
def vault_links() -> dict[str, dict[str, int]]:
    return {
        "react/React Basics.md": {"react/React Hooks.md": 2, "missing/Gone.md": 1},
        "react/React Hooks.md": {"react/React Basics.md": 1},
        "golf/Putting.md": {"golf/Golf Swing.md": 1},
    }


@pytest.fixture
def fake_vault(vault_paths: list[str]) -> FakeVaultProvider:
    return FakeVaultProvider(vault_paths)


@pytest.fixture
def fake_metadata_provider(
    vault_metadata: dict[str, FileMetadata], vault_links: dict[str, dict[str, int]]
) -> FakeMetadataProvider:
    return FakeMetadataProvider(metadata=vault_metadata, resolved_links=vault_links)


@pytest.fixture
def snapshot(
    vault_paths: list[str],
    vault_metadata: dict[str, FileMetadata],
    vault_links: dict[str, dict[str, int]],
) -> Snapshot:
    return Snapshot(
        files=[FileInfo.from_path(path) for path in vault_paths],
        metadata=vault_metadata,
        resolved_links=vault_links,
    )
