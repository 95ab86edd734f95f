"""CLI for clustering a vault snapshot exported as JSON"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from vaultcluster.clustering import run_clustering_pipeline
from vaultcluster.config import ClusteringConfig, settings
from vaultcluster.domain.vault import Snapshot


def main(
    snapshot_file: str,
    outfile: str | None = None,
    min_cluster_size: int | None = None,
    max_cluster_size: int | None = None,
) -> None:
    overrides = {
        key: value
        for key, value in {
            "min_cluster_size": min_cluster_size,
            "max_cluster_size": max_cluster_size,
        }.items()
        if value is not None
    }
    config = ClusteringConfig(**overrides)

    snapshot = Snapshot.model_validate_json(Path(snapshot_file).read_text(encoding="utf-8"))
    result = run_clustering_pipeline(snapshot, config)

    output = result.model_dump_json(indent=2)
    if outfile:
        Path(outfile).write_text(output, encoding="utf-8")
        logger.info(f"Wrote {result.stats.total_clusters} clusters to {outfile}")
    else:
        print(output)


if __name__ == "__main__":
    logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--snapshot", type=str, required=True, help="JSON file with files, metadata and links"
    )
    parser.add_argument(
        "--outfile", type=str, required=False, help="Output JSON file (defaults to stdout)"
    )
    parser.add_argument(
        "--min-cluster-size", type=int, required=False, help="Override the minimum cluster size"
    )
    parser.add_argument(
        "--max-cluster-size", type=int, required=False, help="Override the maximum cluster size"
    )

    args = parser.parse_args()

    main(
        snapshot_file=args.snapshot,
        outfile=args.outfile,
        min_cluster_size=args.min_cluster_size,
        max_cluster_size=args.max_cluster_size,
    )
