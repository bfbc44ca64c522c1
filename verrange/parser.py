"""
Parsers for version strings and range expressions.

Both parsers are hand-written state machines that walk the input one
character at a time. The range parser hands every embedded version token to
the version parser in prefix mode, which parses as much as forms a version and
reports where it stopped, then carries on scanning from there.

Version grammar::

    version        ::= component-run ( ('+' | '-') component-run )*
    component-run  ::= component ( '.'? component )*
    component      ::= digits | letters

Range grammar::

    range     ::= version | version '.' '*' | cmp version | interval
    cmp       ::= '>=' | '>' | '<=' | '<' | '='
    interval  ::= ('[' | '(') ( version ',' version? | ',' version ) (']' | ')')

Examples::

    1.0.2a3     -> [1, 0, 2, a, 3]
    23w32a      -> [23, w, 32, a]
    1.0-1       -> [1, 0, -, 1]

    1.*         -> [1.0,2.0)
    >1.0        -> (1.0,)
    1.0         -> [1.0]
    (1.23,1.37) -> (1.23,1.37)
"""

import logging
from typing import Optional, Tuple

from .components import Alphabetic, Numeric, SuffixMarker
from .constants import (
    CLOSE_EXCLUSIVE,
    CLOSE_INCLUSIVE,
    EQUALS,
    GREATER,
    INTERVAL_SEPARATOR,
    LESS,
    MAX_NUMERIC,
    OPEN_EXCLUSIVE,
    OPEN_INCLUSIVE,
    POSITIVE_SUFFIX,
    SEPARATOR,
    SUFFIX_CHARS,
    WILDCARD,
    ascii_only_default,
)
from .errors import (
    InvalidOperation,
    MalformedRange,
    MalformedRangeVersion,
    MalformedVersion,
)
from .ranges import Range
from .versions import Version

logger = logging.getLogger(__name__)

# Version parser states
_COMPONENT_START = 0
_IN_NUMBER = 1
_IN_WORD = 2

# Range parser states
_RANGE_START = 0
_GREATER = 1
_LESS = 2
_EQUALS = 3
_GREATER_EQUAL = 4
_LESS_EQUAL = 5
_INTERVAL = 6


class VersionParser:
    """
    Turns version strings into Version objects.

    Args:
        ascii_only: Only accept ASCII letters and digits. When None, the
            VERRANGE_ASCII_ONLY environment variable decides.
    """

    def __init__(self, ascii_only: Optional[bool] = None):
        if ascii_only is None:
            ascii_only = ascii_only_default()
        self.ascii_only = ascii_only

    def is_digit(self, char: str) -> bool:
        if self.ascii_only and not char.isascii():
            return False
        return char.isdecimal()

    def is_letter(self, char: str) -> bool:
        if self.ascii_only and not char.isascii():
            return False
        return char.isalpha()

    def starts_component(self, char: str) -> bool:
        return self.is_digit(char) or self.is_letter(char)

    def parse(self, text: str, start: int = 0, end: Optional[int] = None) -> Version:
        """
        Parse text[start:end] as a version; every character must belong to it.

        Raises:
            MalformedVersion: On an unexpected character, empty input or a
                number too large for a numeric component
        """
        version, _ = self._scan(text, start, end, prefix=False)
        return version

    def parse_prefix(
        self, text: str, start: int = 0, end: Optional[int] = None
    ) -> Tuple[Version, int]:
        """
        Parse the longest version at text[start:end].

        Returns:
            The version and the index just past its last digit or letter

        Raises:
            MalformedVersion: If no component could be read, or a number is
                too large for a numeric component
        """
        return self._scan(text, start, end, prefix=True)

    def _scan(
        self, text: str, start: int, end: Optional[int], prefix: bool
    ) -> Tuple[Version, int]:
        if not isinstance(text, str):
            raise TypeError(f"Expected a version string, got {type(text).__name__}")
        if end is None:
            end = len(text)

        components = []
        state = _COMPONENT_START
        run_start = start
        last_good = start
        i = start
        while i < end:
            c = text[i]
            if state == _COMPONENT_START:
                if self.is_digit(c):
                    state = _IN_NUMBER
                elif self.is_letter(c):
                    state = _IN_WORD
                elif prefix:
                    break
                else:
                    raise MalformedVersion(
                        f"Unexpected character '{c}' at the start of a version component",
                        text,
                        i,
                    )
                run_start = i
                last_good = i + 1
            elif (state == _IN_NUMBER and self.is_digit(c)) or (
                state == _IN_WORD and self.is_letter(c)
            ):
                last_good = i + 1
            else:
                components.append(self._close_run(text, run_start, i, state))
                if state == _IN_NUMBER and self.is_letter(c):
                    state = _IN_WORD
                    run_start = i
                    last_good = i + 1
                elif state == _IN_WORD and self.is_digit(c):
                    state = _IN_NUMBER
                    run_start = i
                    last_good = i + 1
                elif c == SEPARATOR:
                    state = _COMPONENT_START
                elif c in SUFFIX_CHARS:
                    components.append(SuffixMarker(c == POSITIVE_SUFFIX))
                    state = _COMPONENT_START
                elif prefix:
                    state = _COMPONENT_START
                    break
                else:
                    raise MalformedVersion(
                        f"Unexpected character '{c}' in version component", text, i
                    )
            i += 1

        if state != _COMPONENT_START:
            components.append(self._close_run(text, run_start, i, state))

        if not components:
            raise MalformedVersion("Version string cannot be empty", text, start)

        return Version(components), last_good

    def _close_run(self, text: str, run_start: int, run_end: int, state: int):
        run = text[run_start:run_end]
        if state == _IN_WORD:
            return Alphabetic(run)

        try:
            value = int(run)
        except ValueError:
            # int() refuses digit strings past the interpreter's conversion limit
            value = MAX_NUMERIC + 1
        if value > MAX_NUMERIC:
            raise MalformedVersion(
                f"Number '{run}' is too large for a version component", text, run_start
            )
        return Numeric(value)


class RangeParser:
    """
    Turns range expressions into Range objects.

    Args:
        version_parser: Parser used for the versions inside the expression
        ascii_only: Passed to the default version parser when none is given
    """

    def __init__(
        self,
        version_parser: Optional[VersionParser] = None,
        ascii_only: Optional[bool] = None,
    ):
        if version_parser is None:
            version_parser = VersionParser(ascii_only=ascii_only)
        self.version_parser = version_parser

    def parse(self, text: str) -> Range:
        """
        Parse a range expression.

        Raises:
            MalformedRange: If the expression does not follow the range
                grammar. A MalformedRangeVersion, which is also a
                MalformedVersion, is raised when the problem sits in one of
                the embedded versions.
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected a range string, got {type(text).__name__}")
        result = self._parse(text)
        logger.debug(f"Parsed range {text!r} as {result}")
        return result

    def _parse(self, text: str) -> Range:
        starts_version = self.version_parser.starts_component
        state = _RANGE_START
        lower_exclusive = False

        for i, c in enumerate(text):
            if state == _RANGE_START:
                if starts_version(c):
                    return self._bare_version(text, i)
                elif c == GREATER:
                    state = _GREATER
                elif c == LESS:
                    state = _LESS
                elif c == EQUALS:
                    state = _EQUALS
                elif c == OPEN_EXCLUSIVE:
                    state = _INTERVAL
                    lower_exclusive = True
                elif c == OPEN_INCLUSIVE:
                    state = _INTERVAL
                else:
                    raise MalformedRange(
                        f"Unexpected character '{c}' in version range", text, i
                    )
            elif state in (_GREATER, _LESS) and c == EQUALS:
                state = _GREATER_EQUAL if state == _GREATER else _LESS_EQUAL
            elif state == _INTERVAL:
                return self._interval(text, i, lower_exclusive)
            else:
                return self._comparison(text, i, state)

        raise MalformedRange("Unexpected end of string in version range", text, len(text))

    def _version_at(self, text: str, start: int) -> Tuple[Version, int]:
        try:
            return self.version_parser.parse_prefix(text, start)
        except MalformedVersion as e:
            raise MalformedRangeVersion(e.message, text, e.position) from e

    def _bare_version(self, text: str, start: int) -> Range:
        version, i = self._version_at(text, start)
        if i == len(text):
            return Range.exactly(version)

        if text[i] != SEPARATOR:
            raise MalformedRangeVersion(
                f"Unexpected character '{text[i]}' in version component", text, i
            )
        i += 1
        if i == len(text):
            raise MalformedRange("Unexpected end of string in version pattern", text, i)
        if text[i] != WILDCARD:
            raise MalformedRangeVersion(
                f"Unexpected character '{text[i]}' in version component", text, i
            )
        i += 1
        if i < len(text):
            raise MalformedRange(
                f"Unexpected character '{text[i]}' after version pattern", text, i
            )

        try:
            upper = version.bump(-1).append(0)
        except InvalidOperation as e:
            raise MalformedRange(
                f"Wildcard needs a version ending in a number, got '{version}'",
                text,
                start,
            ) from e
        return Range.between_closed_open(version.append(0), upper)

    def _comparison(self, text: str, start: int, state: int) -> Range:
        if not self.version_parser.starts_component(text[start]):
            raise MalformedRange(
                f"Unexpected character '{text[start]}' in version range", text, start
            )

        version, i = self._version_at(text, start)
        if i < len(text):
            raise MalformedRangeVersion(
                f"Unexpected character '{text[i]}' in version component", text, i
            )

        if state == _GREATER:
            return Range.more_than(version)
        if state == _LESS:
            return Range.less_than(version)
        if state == _GREATER_EQUAL:
            return Range.at_least(version)
        if state == _LESS_EQUAL:
            return Range.at_most(version)
        return Range.exactly(version)

    def _interval(self, text: str, start: int, lower_exclusive: bool) -> Range:
        starts_version = self.version_parser.starts_component
        c = text[start]

        if starts_version(c):
            lower, i = self._version_at(text, start)
            self._require_more(text, i)
            if text[i] == INTERVAL_SEPARATOR:
                i += 1
                self._require_more(text, i)
                if starts_version(text[i]):
                    upper, i = self._version_at(text, i)
                    self._require_more(text, i)
                    after_version = True
                else:
                    upper = None
                    after_version = False
            else:
                upper = lower
                after_version = True
        elif c == INTERVAL_SEPARATOR:
            i = start + 1
            self._require_more(text, i)
            if not starts_version(text[i]):
                if text[i] in (CLOSE_INCLUSIVE, CLOSE_EXCLUSIVE):
                    raise MalformedRange(
                        "Version interval needs at least one bound", text, i
                    )
                raise MalformedRange(
                    f"Unexpected character '{text[i]}' in version interval", text, i
                )
            lower = None
            upper, i = self._version_at(text, i)
            self._require_more(text, i)
            after_version = True
        else:
            raise MalformedRange(
                f"Unexpected character '{c}' in version interval", text, start
            )

        c = text[i]
        if c == CLOSE_EXCLUSIVE:
            upper_exclusive = True
        elif c == CLOSE_INCLUSIVE:
            upper_exclusive = False
        elif after_version:
            raise MalformedRangeVersion(
                f"Unexpected character '{c}' in version component", text, i
            )
        else:
            raise MalformedRange(
                f"Unexpected character '{c}' in version interval", text, i
            )

        i += 1
        if i < len(text):
            raise MalformedRange(
                f"Unexpected character '{text[i]}' after version interval", text, i
            )

        return Range(lower, lower_exclusive, upper, upper_exclusive)

    @staticmethod
    def _require_more(text: str, i: int) -> None:
        if i >= len(text):
            raise MalformedRange(
                "Unexpected end of string in version interval", text, i
            )


def parse_version(text: str, ascii_only: Optional[bool] = None) -> Version:
    """Parse a version string such as '1.0.2a3' or '2.0-rc1'."""
    return VersionParser(ascii_only=ascii_only).parse(text)


def parse_range(text: str, ascii_only: Optional[bool] = None) -> Range:
    """Parse a range expression such as '[1.0,2.0)', '>=1.2' or '1.*'."""
    return RangeParser(ascii_only=ascii_only).parse(text)
