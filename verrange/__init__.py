"""
verrange - parse version strings and version ranges, and test one against the other.

Versions are sequences of numbers, words and '+'/'-' suffix markers with a
total order between them::

    >>> from verrange import parse_version, parse_range
    >>> parse_version("1.0.0") > parse_version("1.0.0-rc1")
    True
    >>> parse_range("[1.0,2.0)").contains(parse_version("1.9.3"))
    True

Range expressions accept intervals (``[1.0,2.0)``, ``(,3]``), comparisons
(``>=1.2``, ``<2``, ``=1.0.1``), wildcards (``1.*``) and bare versions.
"""

import logging

from .components import (
    Alphabetic,
    Component,
    Numeric,
    SuffixMarker,
    compare_components,
    component_of,
    suffix,
)
from .errors import (
    InvalidOperation,
    MalformedRange,
    MalformedRangeVersion,
    MalformedVersion,
    VersionError,
)
from .parser import RangeParser, VersionParser, parse_range, parse_version
from .ranges import Range
from .version import __version__
from .versions import Version, compare_versions

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    "Alphabetic",
    "Component",
    "InvalidOperation",
    "MalformedRange",
    "MalformedRangeVersion",
    "MalformedVersion",
    "Numeric",
    "Range",
    "RangeParser",
    "SuffixMarker",
    "Version",
    "VersionError",
    "VersionParser",
    "__version__",
    "compare_components",
    "compare_versions",
    "component_of",
    "parse_range",
    "parse_version",
    "suffix",
]
