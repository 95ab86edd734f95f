from vaultcluster.clustering import split_large_cluster
from vaultcluster.config import ClusteringConfig


def test_split_cluster_into_smaller_chunks(make_cluster, config: ClusteringConfig) -> None:
    cluster = make_cluster(20, dominant_tags=["#tag1"])

    result = split_large_cluster(cluster, {}, config)

    assert len(result) >= 2
    assert all(c.size <= config.max_cluster_size for c in result)
    names = [name for c in result for name in c.candidate_names]
    assert "Part 1" in names
    assert "Part 2" in names


def test_split_partitions_notes_exactly_once(make_cluster, config: ClusteringConfig) -> None:
    cluster = make_cluster(37)
    links = {"test/note0.md": {"test/note30.md": 1, "missing.md": 4}}

    result = split_large_cluster(cluster, links, config)

    all_notes = [note for c in result for note in c.note_ids]
    assert sorted(all_notes) == sorted(cluster.note_ids)
    assert len(all_notes) == len(set(all_notes))


def test_split_preserves_folder_tags_and_names(make_cluster, config: ClusteringConfig) -> None:
    cluster = make_cluster(
        15,
        folder_path="original/path",
        dominant_tags=["#react", "#hooks"],
        candidate_names=["Path", "Original / Path"],
        reasons=["folder", "tags"],
    )

    result = split_large_cluster(cluster, {}, config)

    for index, part in enumerate(result, start=1):
        assert part.folder_path == "original/path"
        assert part.dominant_tags == ["#react", "#hooks"]
        assert part.candidate_names == ["Path", "Original / Path", f"Part {index}"]
        assert part.reasons == ["folder", "tags"]
        assert part.id != cluster.id
    assert len({part.id for part in result}) == len(result)


def test_no_split_at_or_below_max_size(make_cluster, config: ClusteringConfig) -> None:
    cluster = make_cluster(10)

    result = split_large_cluster(cluster, {}, config)

    assert result == [cluster]
    assert result[0].note_ids == cluster.note_ids


def test_keeps_connected_notes_together(config: ClusteringConfig) -> None:
    from vaultcluster.domain.cluster import Cluster

    note_ids = [f"{letter}.md" for letter in "abcdefghijkl"]
    cluster = Cluster(note_ids=note_ids, folder_path="test")
    links = {
        "a.md": {"b.md": 1, "c.md": 1},
        "b.md": {"c.md": 1},
    }

    result = split_large_cluster(cluster, links, config)

    with_a = next(c for c in result if "a.md" in c.note_ids)
    assert "b.md" in with_a.note_ids
    assert "c.md" in with_a.note_ids


def test_keeps_late_component_together(make_cluster) -> None:
    config = ClusteringConfig(min_cluster_size=2, max_cluster_size=4)
    cluster = make_cluster(9)
    links = {
        "test/note6.md": {"test/note7.md": 1},
        "test/note7.md": {"test/note8.md": 1},
    }

    result = split_large_cluster(cluster, links, config)

    chain = {"test/note6.md", "test/note7.md", "test/note8.md"}
    assert any(chain <= set(c.note_ids) for c in result)
    assert all(c.size <= config.max_cluster_size for c in result)


def test_component_larger_than_max_is_split(make_cluster, config: ClusteringConfig) -> None:
    cluster = make_cluster(25)
    links = {f"test/note{i}.md": {f"test/note{i + 1}.md": 1} for i in range(24)}

    result = split_large_cluster(cluster, links, config)

    assert all(c.size <= config.max_cluster_size for c in result)
    assert sum(c.size for c in result) == 25
    assert all(c.internal_link_density > 0 for c in result)


def test_split_is_deterministic(make_cluster, config: ClusteringConfig) -> None:
    cluster = make_cluster(23)
    links = {"test/note3.md": {"test/note17.md": 2}, "test/note9.md": {"test/note1.md": 1}}

    first = split_large_cluster(cluster, links, config)
    second = split_large_cluster(cluster, links, config)

    assert [c.note_ids for c in first] == [c.note_ids for c in second]


def test_component_above_target_but_within_max_stays_whole() -> None:
    from vaultcluster.domain.cluster import Cluster

    config = ClusteringConfig(min_cluster_size=1, max_cluster_size=4)
    cluster = Cluster(note_ids=[f"{letter}.md" for letter in "abcde"], folder_path="test")
    links = {"a.md": {"b.md": 1}, "b.md": {"c.md": 1}}

    result = split_large_cluster(cluster, links, config)

    assert [sorted(c.note_ids) for c in result] == [["a.md", "b.md", "c.md"], ["d.md", "e.md"]]
    assert all(c.size <= config.max_cluster_size for c in result)


def test_long_chain_within_max_is_not_cut(make_cluster, config: ClusteringConfig) -> None:
    cluster = make_cluster(11)
    links = {f"test/note{i}.md": {f"test/note{i + 1}.md": 1} for i in range(6)}

    result = split_large_cluster(cluster, links, config)

    chain = {f"test/note{i}.md" for i in range(7)}
    assert any(chain == set(c.note_ids) for c in result)
    assert all(c.size <= config.max_cluster_size for c in result)
    all_notes = [note for c in result for note in c.note_ids]
    assert sorted(all_notes) == sorted(cluster.note_ids)


def test_links_reason_only_on_linked_parts(config: ClusteringConfig) -> None:
    from vaultcluster.domain.cluster import Cluster

    note_ids = [f"{letter}.md" for letter in "abcdefghijkl"]
    cluster = Cluster(note_ids=note_ids, folder_path="test", reasons=["folder"])
    links = {"a.md": {"b.md": 1, "c.md": 1}}

    result = split_large_cluster(cluster, links, config)

    assert len(result) == 2
    with_a, without_a = result
    assert "a.md" in with_a.note_ids
    assert with_a.reasons == ["folder", "links"]
    assert without_a.reasons == ["folder"]
