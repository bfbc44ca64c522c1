"""
Version components and the total order between them.

A version is a sequence of three kinds of token:

Numeric
  An unsigned 64-bit integer, e.g. the ``10`` in ``1.10``.
Alphabetic
  A run of letters, e.g. the ``rc`` in ``2.0rc1``.
SuffixMarker
  The ``+`` or ``-`` that opens a trailing segment, e.g. ``1.0-beta`` or
  ``1.0+build``. It carries no text of its own.

Any two components are comparable. Across kinds the order is::

    negative suffix < alphabetic < numeric < positive suffix

so ``-`` segments rank as pre-releases and ``+`` segments as post-releases.
"""

import functools
from dataclasses import dataclass
from typing import Union

from .constants import MAX_NUMERIC, NEGATIVE_SUFFIX, POSITIVE_SUFFIX


@functools.total_ordering
class _Ordered:
    """Mixin routing the rich comparisons through compare_components."""

    __slots__ = ()

    def __lt__(self, other):
        if not isinstance(other, (Numeric, Alphabetic, SuffixMarker)):
            return NotImplemented
        return compare_components(self, other) < 0


@dataclass(frozen=True)
class Numeric(_Ordered):
    value: int

    kind = "numeric"

    def __post_init__(self):
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"Numeric component needs an int, got {self.value!r}")
        if self.value < 0 or self.value > MAX_NUMERIC:
            raise ValueError(
                f"Numeric component must be between 0 and {MAX_NUMERIC}, got {self.value}"
            )

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Alphabetic(_Ordered):
    word: str

    kind = "word"

    def __post_init__(self):
        if not isinstance(self.word, str):
            raise TypeError(f"Alphabetic component needs a str, got {self.word!r}")
        # isalpha() is False for the empty string
        if not self.word.isalpha():
            raise ValueError(
                f"Alphabetic component must be a non-empty run of letters, got {self.word!r}"
            )

    def __str__(self):
        return self.word


@dataclass(frozen=True)
class SuffixMarker(_Ordered):
    positive: bool

    kind = "suffix"

    def __str__(self):
        return POSITIVE_SUFFIX if self.positive else NEGATIVE_SUFFIX


Component = Union[Numeric, Alphabetic, SuffixMarker]


def _rank(component: Component) -> int:
    """Position of a component's kind in the cross-kind order."""
    if isinstance(component, SuffixMarker):
        return 3 if component.positive else 0
    if isinstance(component, Alphabetic):
        return 1
    if isinstance(component, Numeric):
        return 2
    raise TypeError(f"Not a version component: {component!r}")


def compare_components(a: Component, b: Component) -> int:
    """
    Compare two components of any kind.

    Returns:
      -1 if a orders before b
       0 if they are equal
       1 if a orders after b
    """
    rank_a = _rank(a)
    rank_b = _rank(b)
    if rank_a != rank_b:
        return -1 if rank_a < rank_b else 1

    # Same kind from here on; two markers of the same polarity are equal
    if isinstance(a, Numeric):
        left, right = a.value, b.value
    elif isinstance(a, Alphabetic):
        left, right = a.word, b.word
    else:
        return 0

    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def suffix(positive: bool) -> SuffixMarker:
    """Return the suffix marker for a '+' (positive) or '-' (negative) segment."""
    return SuffixMarker(bool(positive))


def component_of(value) -> Component:
    """
    Build a component from a literal.

    ints become Numeric, "+" and "-" become suffix markers, any other string
    becomes Alphabetic. Components are returned unchanged.
    """
    if isinstance(value, (Numeric, Alphabetic, SuffixMarker)):
        return value
    if isinstance(value, bool):
        raise TypeError("Cannot construct a version component from a bool")
    if isinstance(value, int):
        return Numeric(value)
    if isinstance(value, str):
        if value == POSITIVE_SUFFIX:
            return SuffixMarker(True)
        if value == NEGATIVE_SUFFIX:
            return SuffixMarker(False)
        return Alphabetic(value)
    raise TypeError(
        f"Cannot construct a version component from {type(value).__name__}"
    )
