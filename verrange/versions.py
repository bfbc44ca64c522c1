"""
The Version value type.

A Version is an immutable, non-empty sequence of components. Versions are
totally ordered: they compare component by component, and when one is a
prefix of the other the first extra component decides. An extra negative
suffix marker (a pre-release tag) makes the longer version older, anything
else makes it newer::

    1.0 < 1.0.0
    1.0.0-rc1 < 1.0.0
    1.0.0 < 1.0.0+build
"""

import functools
from typing import Iterator, Tuple

from .components import (
    Alphabetic,
    Component,
    Numeric,
    SuffixMarker,
    compare_components,
    component_of,
)
from .constants import MAX_NUMERIC
from .errors import InvalidOperation


def compare_versions(a: "Version", b: "Version") -> int:
    """
    Compare two versions.

    Returns:
      -1 if a < b
       0 if a == b
       1 if a > b
    """
    shared = min(len(a), len(b))
    for i in range(shared):
        result = compare_components(a[i], b[i])
        if result != 0:
            return result

    if len(a) == len(b):
        return 0

    # The longer one wins unless its first extra component is a '-' marker
    longer, sign = (a, 1) if len(a) > len(b) else (b, -1)
    extra = longer[shared]
    if isinstance(extra, SuffixMarker) and not extra.positive:
        return -sign
    return sign


@functools.total_ordering
class Version:
    """An immutable, totally ordered sequence of version components."""

    __slots__ = ("_components",)

    def __init__(self, components):
        components = tuple(components)
        if not components:
            raise ValueError("A version needs at least one component")
        for c in components:
            if not isinstance(c, (Numeric, Alphabetic, SuffixMarker)):
                raise TypeError(f"Not a version component: {c!r}")
        object.__setattr__(self, "_components", components)

    @classmethod
    def of(cls, *parts) -> "Version":
        """
        Build a version from literals.

        ints become numeric components, "+" and "-" become suffix markers and
        other strings become words. Versions are spliced in whole.

        >>> str(Version.of(1, 0, "-", "rc", 1))
        '1.0-rc1'
        """
        components = []
        for part in parts:
            if isinstance(part, Version):
                components.extend(part._components)
            else:
                components.append(component_of(part))
        return cls(components)

    @property
    def components(self) -> Tuple[Component, ...]:
        return self._components

    def __setattr__(self, name, value):
        raise AttributeError("Version objects are immutable")

    def __len__(self):
        return len(self._components)

    def __getitem__(self, index):
        return self._components[index]

    def __iter__(self) -> Iterator[Component]:
        return iter(self._components)

    def compare_to(self, other: "Version") -> int:
        """Return -1, 0 or 1 as this version is older, equal or newer than other."""
        return compare_versions(self, other)

    def __eq__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self._components == other._components

    def __lt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) < 0

    def __hash__(self):
        return hash(self._components)

    def append(self, *others) -> "Version":
        """Return a new version with the given versions or literals added at the end."""
        return Version.of(self, *others)

    def bump(self, index: int) -> "Version":
        """
        Return a copy with the numeric component at index incremented.

        Raises:
            InvalidOperation: If the component is not numeric, or is already
                at the largest value a numeric component can hold
            IndexError: If index is out of range
        """
        component = self._components[index]
        if not isinstance(component, Numeric):
            raise InvalidOperation(
                f"Cannot bump component {index} of {self}: '{component}' is not numeric"
            )
        if component.value >= MAX_NUMERIC:
            raise InvalidOperation(
                f"Cannot bump component {index} of {self}: value would overflow"
            )

        components = list(self._components)
        components[index] = Numeric(component.value + 1)
        return Version(components)

    def __str__(self):
        parts = []
        previous = None
        for component in self._components:
            # Only two numbers or two words in a row need a dot between them
            if (
                previous is not None
                and not isinstance(component, SuffixMarker)
                and type(previous) is type(component)
            ):
                parts.append(".")
            parts.append(str(component))
            previous = component
        return "".join(parts)

    def __repr__(self):
        return f"Version('{self}')"
