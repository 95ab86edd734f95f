"""Cluster domain models."""

import time
import uuid
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ClusterReason = Literal["folder", "tags", "links"]


def generate_cluster_id() -> str:
    """Generate a fresh, collision-free cluster ID."""
    return f"cluster-{uuid.uuid4().hex}"


class Cluster(BaseModel):
    """A group of notes considered topically related.

    Clusters are immutable: pipeline stages build new clusters instead of
    changing existing ones.

    Attributes:
        id: Unique identifier, never reused once the cluster is discarded
        note_ids: Paths of the member notes
        folder_path: Originating folder, empty string for root-level notes
        candidate_names: Name suggestions, most specific first
        dominant_tags: Normalized tags representative of the members
        internal_link_density: Realized internal links over possible ordered pairs
        reasons: Why the cluster was formed, accumulated across stages
        created_at: Construction timestamp (seconds since epoch)
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=generate_cluster_id)
    note_ids: list[str]
    folder_path: str = ""
    candidate_names: list[str] = []
    dominant_tags: list[str] = []
    internal_link_density: float = Field(default=0.0, ge=0.0, le=1.0)
    reasons: list[ClusterReason] = []
    created_at: float = Field(default_factory=time.time)

    @property
    def size(self) -> int:
        return len(self.note_ids)


def union_ordered(*groups: list[str]) -> list[str]:
    """Concatenate lists keeping the first occurrence of each item."""
    return list(dict.fromkeys(item for group in groups for item in group))
