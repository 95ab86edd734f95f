"""Vault snapshot domain models."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

ResolvedLinks = dict[str, dict[str, int]]


class FileInfo(BaseModel):
    """A note file as listed by the vault.

    Attributes:
        path: Vault-relative path, unique within a snapshot (e.g. "work/Plan.md")
        basename: File name without extension
        folder: Containing folder, empty string for root-level notes
        created_at: Creation timestamp (seconds since epoch)
        modified_at: Modification timestamp (seconds since epoch)
    """

    path: str
    basename: str
    folder: str = ""
    created_at: float = 0.0
    modified_at: float = 0.0

    @classmethod
    def from_path(cls, path: str, created_at: float = 0.0, modified_at: float = 0.0) -> "FileInfo":
        """Build a FileInfo deriving basename and folder from the path."""
        folder, _, name = path.rpartition("/")
        basename = name.rsplit(".", 1)[0] if "." in name else name
        return cls(
            path=path,
            basename=basename,
            folder=folder,
            created_at=created_at,
            modified_at=modified_at,
        )


class FileMetadata(BaseModel):
    """Cached metadata for a single note."""

    tags: list[str] = []
    links: list[str] = []
    headings: list[str] = []
    frontmatter: dict[str, Any] = {}
    word_count: int = 0


class Snapshot(BaseModel):
    """A full, read-only view of a vault used as pipeline input.

    Attributes:
        files: Every note in the vault
        metadata: Per-path metadata; notes without an entry have no tags
        resolved_links: Source path -> target path -> link count
    """

    files: list[FileInfo] = []
    metadata: dict[str, FileMetadata] = {}
    resolved_links: ResolvedLinks = Field(default_factory=dict)

    @field_validator("files")
    @classmethod
    def check_unique_paths(cls, files: list[FileInfo]) -> list[FileInfo]:
        seen: set[str] = set()
        for file in files:
            if file.path in seen:
                raise ValueError(f"Duplicate note path in snapshot: {file.path}")
            seen.add(file.path)
        return files
