"""Casefold settings domain entity."""

from dataclasses import dataclass
from enum import Enum

from casefold.domain.exceptions import CasefoldConfigError

DEFAULT_HEADER_NAME = "X-Original-URI"


class CasefoldMode(Enum):
    """Path transformation strategy.

    Values are the strings accepted in configuration.
    """

    LOWER = "lower"
    FOLD = "fold"
    FILESYSTEM = "fs"

    @classmethod
    def parse(cls, value: "str | CasefoldMode | None") -> tuple["CasefoldMode", bool]:
        """Resolve a configured mode string.

        Matching ignores surrounding whitespace and case. An empty or missing
        value selects LOWER.

        Args:
            value: Raw mode from configuration, or an existing CasefoldMode.

        Returns:
            Tuple of (mode, recognized). Unrecognized values resolve to LOWER
            with recognized=False so the caller can warn about them.
        """
        if isinstance(value, CasefoldMode):
            return value, True
        if value is None:
            return cls.LOWER, True

        normalized = str(value).strip().lower()
        if not normalized:
            return cls.LOWER, True

        for mode in cls:
            if mode.value == normalized:
                return mode, True

        return cls.LOWER, False


@dataclass(frozen=True)
class CasefoldSettings:
    """Casefold configuration settings.

    Value object built once at startup and shared read-only between all
    concurrent requests.

    Attributes:
        mode: Transformation strategy. Defaults to LOWER.
        root: Directory that request paths are resolved against in
              FILESYSTEM mode. Ignored by the other modes.
        exclude: Glob patterns; a request path matching any of them is never
                 rewritten. Uses tuple for immutability.
        header_name: Header carrying the pre-rewrite path on the request
                     and the response. Defaults to X-Original-URI.
        enabled: When False every request passes through unchanged.
    """

    mode: CasefoldMode = CasefoldMode.LOWER
    root: str | None = None
    exclude: tuple[str, ...] = ()
    header_name: str = DEFAULT_HEADER_NAME
    enabled: bool = True

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        self._validate_mode()
        self._validate_root()
        self._validate_exclude()
        self._validate_header_name()

    def _validate_mode(self) -> None:
        """Validate mode is a CasefoldMode member."""
        if not isinstance(self.mode, CasefoldMode):
            raise CasefoldConfigError(
                f"mode must be a CasefoldMode, got: {self.mode!r}. "
                "Use load_settings() to parse mode strings."
            )

    def _validate_root(self) -> None:
        """Validate root is a string free of control characters."""
        if self.root is None:
            return

        if not isinstance(self.root, str):
            raise CasefoldConfigError(
                f"root must be a string, got: {type(self.root).__name__}"
            )

        if any(ord(c) < 32 or c == "\x7f" for c in self.root):
            raise CasefoldConfigError(
                f"root contains control characters, got: {self.root!r}"
            )

    def _validate_exclude(self) -> None:
        """Validate exclude is a tuple of strings."""
        if not isinstance(self.exclude, tuple):
            raise CasefoldConfigError(
                f"exclude must be a tuple of patterns, got: {type(self.exclude).__name__}"
            )

        for pattern in self.exclude:
            if not isinstance(pattern, str):
                raise CasefoldConfigError(
                    f"exclude patterns must be strings, got: {pattern!r}"
                )

    def _validate_header_name(self) -> None:
        """Validate header_name is a usable HTTP header token."""
        if not self.header_name or not self.header_name.strip():
            raise CasefoldConfigError("header_name cannot be empty or whitespace-only")

        if any(ord(c) <= 32 or c == "\x7f" or c == ":" for c in self.header_name):
            raise CasefoldConfigError(
                f"header_name contains whitespace, control characters or ':', "
                f"got: {self.header_name!r}"
            )

    @property
    def has_root(self) -> bool:
        """Return True if a non-empty canonical root is configured."""
        return bool(self.root and self.root.strip())
