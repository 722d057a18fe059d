"""
Unit tests for the length-bucketed cluster index
"""

from logmine.context.indexing import ClusterIndex
from logmine.models import Pattern, WILDCARD


class TestClusterIndex:
    """Test cluster storage, lookup and read-out"""

    def test_empty_index(self):
        index = ClusterIndex()

        assert len(index) == 0
        assert index.candidates(3) == ()
        assert index.all() == []
        assert index.nearest(("a", "b")) == (None, 1.0)

    def test_insert_new_creates_fixed_pattern(self):
        index = ClusterIndex()

        cluster = index.insert_new(("a", "b", "c"))

        assert cluster.cluster_id == 0
        assert cluster.count == 1
        assert cluster.pattern == Pattern(("a", "b", "c"))
        assert cluster.pattern.wildcard_count == 0
        assert cluster.representative == ("a", "b", "c")

    def test_buckets_by_length(self):
        index = ClusterIndex()
        first = index.insert_new(("a", "b"))
        second = index.insert_new(("a", "b", "c"))
        third = index.insert_new(("x", "y"))

        assert list(index.candidates(2)) == [first, third]
        assert list(index.candidates(3)) == [second]
        assert index.lengths() == [2, 3]

    def test_update_merges_and_counts(self):
        index = ClusterIndex()
        cluster = index.insert_new(("a", "b", "c"))

        index.update(cluster, ("a", "b", "d"))

        assert cluster.count == 2
        assert cluster.pattern == Pattern(("a", "b", WILDCARD))

    def test_all_reports_each_cluster_once_in_creation_order(self):
        index = ClusterIndex()
        a = index.insert_new(("a",))
        index.insert_new(("b", "c"))
        index.update(a, ("z",))

        assert index.all() == [
            (Pattern((WILDCARD,)), 2),
            (Pattern(("b", "c")), 1),
        ]

    def test_nearest_prefers_lowest_distance(self):
        index = ClusterIndex()
        index.insert_new(("a", "x", "y", "z"))
        closer = index.insert_new(("a", "b", "c", "z"))

        best, d = index.nearest(("a", "b", "c", "d"))

        assert best is closer
        assert d == 0.25

    def test_nearest_ties_go_to_first_created(self):
        index = ClusterIndex()
        first = index.insert_new(("a", "b", "x"))
        index.insert_new(("a", "b", "y"))

        best, d = index.nearest(("a", "b", "z"))

        assert best is first
        assert d == 1 / 3

    def test_nearest_within_excludes_far_clusters(self):
        index = ClusterIndex()
        index.insert_new(("a", "b", "c", "d"))

        assert index.nearest(("w", "x", "y", "d"), within=0.5) == (None, 1.0)

    def test_absorb_and_combine(self):
        index = ClusterIndex()
        cluster = index.absorb(Pattern(("a", WILDCARD)), 5, ("a", "b"))

        index.combine(cluster, Pattern(("c", "d")), 3)

        assert cluster.count == 8
        assert cluster.pattern == Pattern((WILDCARD, WILDCARD))

    def test_summaries_are_detached_and_filtered(self):
        index = ClusterIndex()
        big = index.insert_new(("a", "b"))
        index.update(big, ("a", "c"))
        index.insert_new(("x",))

        summaries = index.summaries(min_members=2)
        index.update(big, ("q", "c"))

        assert len(summaries) == 1
        assert summaries[0].count == 2
        assert summaries[0].pattern == Pattern(("a", WILDCARD))

    def test_candidates_is_a_read_only_snapshot(self):
        index = ClusterIndex()
        first = index.insert_new(("a", "b"))

        bucket = index.candidates(2)
        index.insert_new(("c", "d"))

        assert bucket == (first,)
        assert not hasattr(bucket, 'append')
        assert len(index.candidates(2)) == 2
