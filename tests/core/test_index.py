"""
Unit tests for the movie -> credits index.
"""

from app.core.index import build_index
from app.core.models import Credit


class TestBuildIndex:
    """Tests for build_index() and CreditIndex lookups."""

    def test_lookup_by_movie_id(self, credits):
        index = build_index(credits)
        assert index.credits_for("603") == (credits[0],)
        assert index.credits_for("27205") == (credits[1],)

    def test_missing_movie_returns_empty(self, credits):
        """A movie without credits is a normal, empty result."""
        assert build_index(credits).credits_for("862") == ()

    def test_empty_collection(self):
        index = build_index([])
        assert len(index) == 0
        assert index.credits_for("anything") == ()

    def test_same_object_on_every_call(self, credits):
        index = build_index(credits)
        first = index.credits_for("603")
        assert index.credits_for("603") is first
        assert index.credits_for("missing") is index.credits_for("other-missing")

    def test_duplicates_kept_in_load_order(self):
        """Several credits for one id are tolerated and kept together."""
        a = Credit.from_parts("1", crew=["A (Director)"], cast=[])
        b = Credit.from_parts("2", crew=[], cast=[])
        c = Credit.from_parts("1", crew=["C (Writer)"], cast=[])
        index = build_index([a, b, c])

        assert index.credits_for("1") == (a, c)
        assert index.duplicate_ids() == ["1"]
        assert len(index) == 2

    def test_contains(self, credits):
        index = build_index(credits)
        assert "603" in index
        assert "862" not in index

    def test_accepts_generator(self, credits):
        index = build_index(c for c in credits)
        assert len(index) == 3
