"""
Unit tests for the Range type and its containment check.
"""

import pytest

from verrange import Range, Version, parse_range, parse_version


A = Version.of(1, 0)
B = Version.of(2, 0)


class TestConstruction:
    """Tests for building ranges."""

    def test_needs_a_bound(self):
        """Test that a range without bounds cannot be built."""
        with pytest.raises(ValueError):
            Range(None, False, None, False)

    def test_factories(self):
        """Test the flags each factory sets."""
        assert Range.between(A, B) == Range(A, False, B, False)
        assert Range.between_open(A, B) == Range(A, True, B, True)
        assert Range.between_closed_open(A, B) == Range(A, False, B, True)
        assert Range.between_open_closed(A, B) == Range(A, True, B, False)
        assert Range.at_least(A) == Range(A, False, None, False)
        assert Range.more_than(A) == Range(A, True, None, False)
        assert Range.at_most(B) == Range(None, False, B, False)
        assert Range.less_than(B) == Range(None, False, B, True)
        assert Range.exactly(B) == Range(B, False, B, False)

    def test_immutable(self):
        """Test that ranges cannot be modified."""
        r = Range.exactly(A)
        with pytest.raises(AttributeError):
            r.lower = B


class TestEquality:
    """Tests for structural equality."""

    def test_flags_of_absent_bounds_ignored(self):
        """Test that an absent bound's flag does not matter."""
        assert Range(A, False, None, True) == Range(A, False, None, False)
        assert Range(None, True, B, False) == Range(None, False, B, False)
        assert hash(Range(A, False, None, True)) == hash(Range(A, False, None, False))

    def test_flags_of_present_bounds_matter(self):
        """Test that a present bound's flag does matter."""
        assert Range.between(A, B) != Range.between_open(A, B)
        assert Range.at_least(A) != Range.more_than(A)

    def test_bounds_matter(self):
        """Test that different bounds make different ranges."""
        assert Range.exactly(A) != Range.exactly(B)
        assert Range.at_least(A) != Range.at_most(A)
        assert Range.exactly(A) != "[1.0]"


class TestContains:
    """Tests for Range.contains."""

    def test_between_closed(self, v):
        """Test [1.0,2.0]."""
        r = Range.between(A, B)
        assert r.contains(v(1, 0))
        assert r.contains(v(1, 1))
        assert r.contains(v(2, 0))

    def test_between_open(self, v):
        """Test (1.0,2.0)."""
        r = Range.between_open(A, B)
        assert not r.contains(v(1, 0))
        assert r.contains(v(1, 1))
        assert not r.contains(v(2, 0))

    def test_between_closed_open(self, v):
        """Test [1.0,2.0)."""
        r = Range.between_closed_open(A, B)
        assert r.contains(v(1, 0))
        assert r.contains(v(1, 1))
        assert not r.contains(v(2, 0))

    def test_between_open_closed(self, v):
        """Test (1.0,2.0]."""
        r = Range.between_open_closed(A, B)
        assert not r.contains(v(1, 0))
        assert r.contains(v(1, 1))
        assert r.contains(v(2, 0))

    def test_at_least(self, v):
        """Test [1.0,)."""
        r = Range.at_least(A)
        assert r.contains(v(1, 0))
        assert not r.contains(v(1, 0, "-"))
        assert r.contains(v(1, 0, "+"))
        assert r.contains(v(1, 0, 0, "-"))

    def test_more_than(self, v):
        """Test (1.0,)."""
        r = Range.more_than(A)
        assert not r.contains(v(1, 0))
        assert not r.contains(v(1, 0, "-"))
        assert r.contains(v(1, 0, "+"))
        assert not r.contains(v(1, "-"))

    def test_at_most(self, v):
        """Test (,2.0]."""
        r = Range.at_most(B)
        assert r.contains(v(2, 0))
        assert r.contains(v(2, 0, "-"))
        assert not r.contains(v(2, 0, "+"))
        assert not r.contains(v(2, 0, 0, "-"))

    def test_less_than(self, v):
        """Test (,2.0)."""
        r = Range.less_than(B)
        assert not r.contains(v(2, 0))
        assert r.contains(v(2, 0, "-"))
        assert not r.contains(v(2, 0, "+"))
        assert r.contains(v(2, "-"))
        assert not r.contains(v(2, "+"))

    def test_exactly(self, v):
        """Test [2.0]."""
        r = Range.exactly(B)
        assert r.contains(v(2, 0))
        assert not r.contains(v(2, 0, 0))
        assert not r.contains(v(2, 0, "-"))
        assert not r.contains(v(2, "-"))
        assert not r.contains(v(2, 0, "+"))
        assert not r.contains(v(2, "+"))

    @pytest.mark.parametrize("text", ["1", "1.0.3", "2.0-rc1", "23w32", "b3"])
    def test_exactly_and_bump(self, text):
        """Test that an exact range holds its version but not the next one."""
        version = parse_version(text)
        r = Range.exactly(version)
        assert r.contains(version)
        assert not r.contains(version.bump(len(version) - 1))

    def test_operator_forms(self, v):
        """Test the 'in' operator and calling a range as a predicate."""
        r = Range.between(A, B)
        assert v(1, 5) in r
        assert v(3) not in r
        assert list(filter(r, [v(0, 9), v(1, 2), v(2, 1)])) == [v(1, 2)]


class TestApproximately:
    """Tests for Range.approximately."""

    def test_numeric_tail(self, v):
        """Test the range built for a version ending in a number."""
        assert Range.approximately(v(2, 0)) == Range.between(v(2, 0), v(2, 0, 0, "-"))

    def test_word_tail(self, v):
        """Test that a version ending in a word gives an exact range."""
        assert Range.approximately(v(2, "a")) == Range.exactly(v(2, "a"))

    def test_contains(self, v):
        """Test which versions an approximate range holds."""
        r = Range.approximately(v(2, 0))
        assert r.contains(v(2, 0))
        assert r.contains(v(2, 0, 0, "-"))
        assert not r.contains(v(2, 0, "+"))
        assert not r.contains(v(2, 0, 0))
        assert not r.contains(v(2, 0, "-", 1))
        assert not r.contains(v(1, 9))


class TestRender:
    """Tests for range rendering."""

    @pytest.mark.parametrize(
        "r,expected",
        [
            (Range.between(A, B), "[1.0,2.0]"),
            (Range.between_open(A, B), "(1.0,2.0)"),
            (Range.between_closed_open(A, B), "[1.0,2.0)"),
            (Range.between_open_closed(A, B), "(1.0,2.0]"),
            (Range.at_least(A), "[1.0,)"),
            (Range.more_than(A), "(1.0,)"),
            (Range.at_most(B), "(,2.0]"),
            (Range.less_than(B), "(,2.0)"),
            (Range.exactly(B), "[2.0]"),
        ],
    )
    def test_str(self, r, expected):
        """Test the interval notation of each kind of range."""
        assert str(r) == expected

    @pytest.mark.parametrize(
        "text", ["[1.0,2.0)", "(1.0,)", "(,2.0]", "[2.0]", ">=1.2", "1.*", "=1.0-rc1"]
    )
    def test_reparse(self, text):
        """Test that a rendered range parses back to the same range."""
        r = parse_range(text)
        assert parse_range(str(r)) == r

    def test_repr(self):
        """Test the debugging representation."""
        assert repr(Range.at_least(A)) == "Range('[1.0,)')"
