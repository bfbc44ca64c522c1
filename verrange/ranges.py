"""
Version ranges.

A Range has an optional lower and an optional upper bound, each inclusive or
exclusive. At least one bound must be present. Ranges render in interval
notation, which parse_range() reads back::

    [1.0,2.0)   1.0 <= v < 2.0
    (1.0,)      v > 1.0
    (,2.0]      v <= 2.0
    [2.0]       v == 2.0
"""

from typing import Optional

from .components import Numeric
from .constants import (
    CLOSE_EXCLUSIVE,
    CLOSE_INCLUSIVE,
    INTERVAL_SEPARATOR,
    OPEN_EXCLUSIVE,
    OPEN_INCLUSIVE,
)
from .versions import Version


class Range:
    """An interval of versions, open or closed at either end."""

    __slots__ = ("lower", "lower_exclusive", "upper", "upper_exclusive")

    def __init__(
        self,
        lower: Optional[Version],
        lower_exclusive: bool,
        upper: Optional[Version],
        upper_exclusive: bool,
    ):
        """
        Args:
            lower: The lower bound, or None for no lower bound
            lower_exclusive: Whether the lower bound itself is excluded;
                ignored when lower is None
            upper: The upper bound, or None for no upper bound
            upper_exclusive: Whether the upper bound itself is excluded;
                ignored when upper is None

        Raises:
            ValueError: If both bounds are None
        """
        if lower is None and upper is None:
            raise ValueError(
                "Cannot construct a range with no ends; lower or upper must be set"
            )
        object.__setattr__(self, "lower", lower)
        object.__setattr__(self, "lower_exclusive", bool(lower_exclusive))
        object.__setattr__(self, "upper", upper)
        object.__setattr__(self, "upper_exclusive", bool(upper_exclusive))

    def __setattr__(self, name, value):
        raise AttributeError("Range objects are immutable")

    @classmethod
    def between(cls, lower: Version, upper: Version) -> "Range":
        """[lower, upper]"""
        return cls(lower, False, upper, False)

    @classmethod
    def between_open(cls, lower: Version, upper: Version) -> "Range":
        """(lower, upper)"""
        return cls(lower, True, upper, True)

    @classmethod
    def between_closed_open(cls, lower: Version, upper: Version) -> "Range":
        """[lower, upper)"""
        return cls(lower, False, upper, True)

    @classmethod
    def between_open_closed(cls, lower: Version, upper: Version) -> "Range":
        """(lower, upper]"""
        return cls(lower, True, upper, False)

    @classmethod
    def at_least(cls, lower: Version) -> "Range":
        """[lower, )"""
        return cls(lower, False, None, True)

    @classmethod
    def more_than(cls, lower: Version) -> "Range":
        """(lower, )"""
        return cls(lower, True, None, True)

    @classmethod
    def at_most(cls, upper: Version) -> "Range":
        """(, upper]"""
        return cls(None, True, upper, False)

    @classmethod
    def less_than(cls, upper: Version) -> "Range":
        """(, upper)"""
        return cls(None, True, upper, True)

    @classmethod
    def exactly(cls, version: Version) -> "Range":
        """[version, version]"""
        return cls(version, False, version, False)

    @classmethod
    def approximately(cls, version: Version) -> "Range":
        """
        Match a version and its trailing-zero pre-release.

        For a version ending in a number the range is
        ``[version, version.0-]``, so ``approximately(2.0)`` holds ``2.0`` and
        ``2.0.0-`` but not ``2.0+``, ``2.0.0`` or ``2.0-1``. Any other version
        gives ``exactly(version)``.
        """
        if isinstance(version[-1], Numeric):
            return cls(version, False, version.append(0, "-"), False)
        return cls.exactly(version)

    def contains(self, version: Version) -> bool:
        """Return True if no bound of this range rejects version."""
        if self.lower is not None:
            result = self.lower.compare_to(version)
            if result > 0 or (result == 0 and self.lower_exclusive):
                return False

        if self.upper is not None:
            result = self.upper.compare_to(version)
            if result < 0 or (result == 0 and self.upper_exclusive):
                return False

        return True

    def __contains__(self, version):
        return self.contains(version)

    def __call__(self, version: Version) -> bool:
        return self.contains(version)

    def _key(self):
        # Flags of absent bounds do not take part in equality
        return (
            self.lower,
            self.lower_exclusive if self.lower is not None else None,
            self.upper,
            self.upper_exclusive if self.upper is not None else None,
        )

    def __eq__(self, other):
        if not isinstance(other, Range):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        if (
            self.lower is not None
            and self.lower == self.upper
            and not self.lower_exclusive
            and not self.upper_exclusive
        ):
            return f"{OPEN_INCLUSIVE}{self.lower}{CLOSE_INCLUSIVE}"

        if self.lower is None:
            opening, lower = OPEN_EXCLUSIVE, ""
        else:
            opening = OPEN_EXCLUSIVE if self.lower_exclusive else OPEN_INCLUSIVE
            lower = str(self.lower)

        if self.upper is None:
            closing, upper = CLOSE_EXCLUSIVE, ""
        else:
            closing = CLOSE_EXCLUSIVE if self.upper_exclusive else CLOSE_INCLUSIVE
            upper = str(self.upper)

        return f"{opening}{lower}{INTERVAL_SEPARATOR}{upper}{closing}"

    def __repr__(self):
        return f"Range('{self}')"
