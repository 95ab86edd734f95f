from typing import List, Optional, Protocol

from vaultcluster.domain.vault import FileInfo, FileMetadata, ResolvedLinks


class VaultProvider(Protocol):
    """Protocol for listing the notes of a vault."""

    def list_files(self) -> List[FileInfo]:
        """Get every markdown note in the vault."""
        ...


class MetadataProvider(Protocol):
    """Protocol for reading cached per-note metadata and the link graph."""

    def get_metadata(self, path: str) -> Optional[FileMetadata]:
        """Get metadata for a note, or None if it is not cached."""
        ...

    def get_resolved_links(self) -> ResolvedLinks:
        """Get the resolved link graph (source path -> target path -> count)."""
        ...
