"""Path exclusion matcher use case for request path rewriting."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from casefold.domain.settings import CasefoldSettings

logger = logging.getLogger(__name__)


class GlobPatternError(ValueError):
    """Raised when an exclude pattern is not valid glob syntax."""


def _class_char(pattern: str, index: int) -> tuple[str, int]:
    """Read one possibly escaped character of a character class.

    Returns:
        Tuple of (character, index after it).

    Raises:
        GlobPatternError: On an unescaped '-' or ']', or at end of pattern.
    """
    if index >= len(pattern):
        raise GlobPatternError("unterminated character class")

    char = pattern[index]
    if char in "-]":
        raise GlobPatternError(f"unexpected {char!r} in character class")
    if char == "\\":
        index += 1
        if index >= len(pattern):
            raise GlobPatternError("unterminated character class")
        char = pattern[index]
    return char, index + 1


def _translate_class(pattern: str, index: int) -> tuple[str, int]:
    """Translate a character class starting just after its '['.

    Grammar: '[' [ '^' ] { lo [ '-' hi ] } ']', with at least one range.
    A range whose lo sorts after hi is valid but matches nothing.

    Returns:
        Tuple of (regex fragment, index after the closing ']').
    """
    negate = index < len(pattern) and pattern[index] == "^"
    if negate:
        index += 1

    ranges: list[str] = []
    count = 0
    while True:
        if count and index < len(pattern) and pattern[index] == "]":
            index += 1
            break

        lo, index = _class_char(pattern, index)
        hi = lo
        if index < len(pattern) and pattern[index] == "-":
            hi, index = _class_char(pattern, index + 1)
        count += 1

        if lo == hi:
            ranges.append(re.escape(lo))
        elif lo < hi:
            ranges.append(f"{re.escape(lo)}-{re.escape(hi)}")

    if not ranges:
        return ("." if negate else "(?!)"), index
    return f"[{'^' if negate else ''}{''.join(ranges)}]", index


def translate_glob(pattern: str) -> str:
    """Translate a shell glob to a regular expression.

    Syntax:
        '*'        any run of characters, '/' included
        '?'        any single character
        '[...]'    character class; '[^...]' negates it
        '\\c'        the literal character c

    The whole pattern is validated, so a syntax error anywhere is reported
    even if a path would fail to match before reaching it.

    Args:
        pattern: Glob pattern.

    Returns:
        Regex matching the whole string.

    Raises:
        GlobPatternError: If the pattern is malformed (unclosed or empty
            class, trailing backslash).
    """
    parts: list[str] = []
    index = 0
    while index < len(pattern):
        char = pattern[index]
        index += 1
        if char == "*":
            if not parts or parts[-1] != ".*":
                parts.append(".*")
        elif char == "?":
            parts.append(".")
        elif char == "[":
            fragment, index = _translate_class(pattern, index)
            parts.append(fragment)
        elif char == "\\":
            if index >= len(pattern):
                raise GlobPatternError("trailing backslash")
            parts.append(re.escape(pattern[index]))
            index += 1
        else:
            parts.append(re.escape(char))

    return "(?s:" + "".join(parts) + r")\Z"


class PathExclusionMatcher:
    """Matches request paths against configured exclusion patterns.

    Patterns use shell-glob syntax (see translate_glob) and are matched
    against the whole leading-slash path as one flat string, so '*' also
    matches '/'. Matching is case-sensitive: a pattern names the exact
    casing it protects from rewriting.

    Examples:
        - '/health' - exact path match
        - '/api/CaseSensitive/*' - everything below /api/CaseSensitive
        - '/downloads/*.ZIP' - upper-case .ZIP files at any depth
        - '*.css' - any path ending in .css

    Attributes:
        excluded_paths: Tuple of glob patterns to check against.
    """

    def __init__(self, excluded_paths: tuple[str, ...]) -> None:
        """Initialize the path exclusion matcher.

        Empty patterns are ignored. A malformed pattern is logged and
        never matches.

        Args:
            excluded_paths: Tuple of glob patterns to exclude.
        """
        self._excluded_paths = excluded_paths
        self._compiled_patterns: list[re.Pattern[str]] = []

        for pattern in excluded_paths:
            if not pattern:
                continue
            try:
                self._compiled_patterns.append(re.compile(translate_glob(pattern)))
            except GlobPatternError as e:
                logger.warning(
                    f"Ignoring invalid casefold exclude pattern {pattern!r}: {e}"
                )

    @property
    def excluded_paths(self) -> tuple[str, ...]:
        """Return the configured exclusion patterns."""
        return self._excluded_paths

    def is_excluded(self, path: str) -> bool:
        """Check if a path should be left as it is.

        Args:
            path: The request path to check (without query string).

        Returns:
            True if the path matches any exclusion pattern, False otherwise.
        """
        for compiled in self._compiled_patterns:
            if compiled.match(path):
                return True
        return False

    @classmethod
    def from_settings(cls, settings: CasefoldSettings) -> PathExclusionMatcher:
        """Create a PathExclusionMatcher from CasefoldSettings.

        Args:
            settings: The casefold settings containing exclude patterns.

        Returns:
            A PathExclusionMatcher configured with the settings' patterns.
        """
        return cls(excluded_paths=settings.exclude)
