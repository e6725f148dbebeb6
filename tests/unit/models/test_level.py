"""Tests for outline level parsing, depth and relations."""

import pytest

from reqtree.models.level import (
    LevelRelation,
    RelationKind,
    level_depth,
    level_relation,
    parse_level,
    strip_trailing_zeros,
)


class TestParseLevel:
    """Tests for parse_level()."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("1", (1,)),
            ("1.2.3", (1, 2, 3)),
            ("2.0", (2, 0)),
            ("2.10", (2, 10)),
            ("+3.1", (3, 1)),
        ],
    )
    def test_parses_dotted_integers(self, level: str, expected: tuple) -> None:
        """Test that every integer segment becomes one key element."""
        assert parse_level(level) == expected

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("1.a.2", (1, 2)),
            ("1..2", (1, 2)),
            ("1.-2", (1,)),
            (" 1.2", (2,)),
            ("x", ()),
            ("", ()),
        ],
    )
    def test_malformed_segments_dropped(self, level: str, expected: tuple) -> None:
        """Test that malformed segments are skipped rather than failing."""
        assert parse_level(level) == expected


class TestStripTrailingZeros:
    """Tests for strip_trailing_zeros()."""

    def test_strips_only_trailing_zeros(self) -> None:
        """Test that inner zeros are kept."""
        assert strip_trailing_zeros((2, 0, 1, 0, 0)) == (2, 0, 1)

    def test_all_zero_key_becomes_empty(self) -> None:
        """Test that a key of zeros strips to the empty key."""
        assert strip_trailing_zeros((0, 0)) == ()

    def test_empty_key(self) -> None:
        """Test that the empty key is unchanged."""
        assert strip_trailing_zeros(()) == ()


class TestLevelDepth:
    """Tests for level_depth()."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("1", 0),
            ("2.0", 0),
            ("2.10", 1),
            ("1.2.1", 2),
            ("1.2.0.0", 1),
            ("", 0),
            ("0", 0),
            ("garbage", 0),
        ],
    )
    def test_depth(self, level: str, expected: int) -> None:
        """Test depth for plain, heading and degenerate levels."""
        assert level_depth(level) == expected

    def test_accepts_parsed_key(self) -> None:
        """Test that a parsed key gives the same depth as its string."""
        assert level_depth((3, 4, 0)) == level_depth("3.4.0") == 1


class TestLevelRelation:
    """Tests for level_relation() and LevelRelation."""

    def test_same_level_headings(self) -> None:
        """Test that two top-level headings are at the same level."""
        assert level_relation("1.0", "2.0") == LevelRelation.same()

    def test_same_level_under_different_parents(self) -> None:
        """Test that depth, not ancestry, decides the relation."""
        assert level_relation("1.1", "2.3") == LevelRelation.same()

    def test_out_level_one(self) -> None:
        """Test that a deeper item is OutLevel from the heading's view."""
        assert level_relation("2.0", "1.2") == LevelRelation.out_level(1)

    def test_out_level_two(self) -> None:
        """Test that the distance counts every level in between."""
        assert level_relation("2.0", "1.2.1") == LevelRelation.out_level(2)

    def test_in_level(self) -> None:
        """Test that a shallower item is InLevel from the deeper item's view."""
        relation = level_relation("1.2", "1.0")

        assert relation == LevelRelation.in_level(1)
        assert relation.kind is RelationKind.IN
        assert relation.distance == 1

    @pytest.mark.parametrize(
        ("a", "b"),
        [("1", "1.2.3"), ("2.0", "2.1"), ("1.1", "3.4"), ("4.5.6", "7")],
    )
    def test_antisymmetric_kind_symmetric_distance(self, a: str, b: str) -> None:
        """Test that swapping the arguments inverts the relation."""
        forward = level_relation(a, b)
        backward = level_relation(b, a)

        assert forward.inverse() == backward
        assert forward.distance == backward.distance
        assert (forward.kind is RelationKind.SAME) == (
            backward.kind is RelationKind.SAME
        )

    def test_string_form(self) -> None:
        """Test the readable names of the three relation kinds."""
        assert str(LevelRelation.same()) == "SameLevel"
        assert str(LevelRelation.out_level(2)) == "OutLevel(2)"
        assert str(LevelRelation.in_level(1)) == "InLevel(1)"
