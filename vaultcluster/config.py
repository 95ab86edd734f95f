from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClusteringConfig(BaseSettings):
    """Size bounds and tuning knobs for the clustering pipeline.

    Every field can be overridden by keyword argument or through a
    ``VAULTCLUSTER_<FIELD>`` environment variable.
    """

    model_config = SettingsConfigDict(env_prefix="VAULTCLUSTER_")

    # Cluster size bounds
    min_cluster_size: int = Field(default=3, ge=1)
    max_cluster_size: int = Field(default=50, ge=1)

    # Tag settings
    dominant_tag_threshold: float = Field(default=0.3, gt=0.0, le=1.0)
    max_dominant_tags: int = Field(default=5, ge=1)

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL

    @model_validator(mode="after")
    def validate_size_bounds(self) -> "ClusteringConfig":
        return self.check_size_bounds()

    def check_size_bounds(self) -> "ClusteringConfig":
        """Raise ValueError if the minimum cluster size exceeds the maximum."""
        if self.min_cluster_size > self.max_cluster_size:
            raise ValueError(
                f"min_cluster_size ({self.min_cluster_size}) must not exceed "
                f"max_cluster_size ({self.max_cluster_size})"
            )
        return self


settings = ClusteringConfig()
