"""Tests for class-map deduplication."""

from cssatom.engine.dedup import dedupe_last_occurrence, remove_identical_properties


class TestDedupeLastOccurrence:
    def test_no_duplicates_unchanged(self):
        assert dedupe_last_occurrence(["a", "b", "c"]) == ["a", "b", "c"]

    def test_adjacent_duplicates(self):
        assert dedupe_last_occurrence(["a", "a"]) == ["a"]

    def test_last_occurrence_wins(self):
        assert dedupe_last_occurrence(["a", "b", "a"]) == ["b", "a"]

    def test_interleaved(self):
        assert dedupe_last_occurrence(["a", "b", "a", "c", "b"]) == ["a", "c", "b"]

    def test_empty(self):
        assert dedupe_last_occurrence([]) == []

    def test_accepts_iterables(self):
        assert dedupe_last_occurrence(iter(["x", "y", "x"])) == ["y", "x"]


class TestRemoveIdenticalProperties:
    def test_per_selector(self):
        class_map = {".a": ["x", "x"], ".b": ["y", "z", "y"]}
        assert remove_identical_properties(class_map) == {".a": ["x"], ".b": ["z", "y"]}

    def test_does_not_mutate_input(self):
        class_map = {".a": ["x", "x"]}
        remove_identical_properties(class_map)
        assert class_map == {".a": ["x", "x"]}

    def test_key_order_kept(self):
        class_map = {".z": ["1"], ".a": ["2"], ".m": ["3"]}
        assert list(remove_identical_properties(class_map)) == [".z", ".a", ".m"]
