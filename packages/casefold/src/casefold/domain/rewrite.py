"""Rewrite outcome value object."""

from dataclasses import dataclass
from urllib.parse import quote


@dataclass(frozen=True)
class RewriteOutcome:
    """Result of deciding whether a request path should be rewritten.

    Attributes:
        original: The request path as received.
        path: The path routing should continue with. Equal to original
              unless rewritten.
        rewritten: True if path differs from original.
    """

    original: str
    path: str
    rewritten: bool

    def __post_init__(self) -> None:
        """Validate outcome consistency."""
        if self.rewritten:
            if self.path == self.original:
                raise ValueError("rewritten outcome must change the path")
            if not self.path.startswith("/"):
                raise ValueError(
                    f"rewritten path must start with '/', got: {self.path!r}"
                )
        elif self.path != self.original:
            raise ValueError("unchanged outcome must keep the original path")

    @classmethod
    def unchanged(cls, original: str) -> "RewriteOutcome":
        """Create an outcome that leaves the path as it is."""
        return cls(original=original, path=original, rewritten=False)

    @classmethod
    def rewrite(cls, original: str, path: str) -> "RewriteOutcome":
        """Create an outcome that replaces original with path.

        Falls back to unchanged when path equals original.
        """
        if path == original:
            return cls.unchanged(original)
        return cls(original=original, path=path, rewritten=True)

    @property
    def emit_original_header(self) -> bool:
        """Return True if the original-path header should be set."""
        return self.rewritten


# Characters left as-is when a path is placed in a header or raw_path
_PATH_SAFE = "/:@!$&'()*+,;=-._~"


def quote_path(path: str) -> str:
    """Percent-encode a decoded path for use on the wire.

    Header values and ASGI raw_path must be ASCII; non-ASCII characters are
    UTF-8 percent-encoded, everything else a path may hold is kept.

    Args:
        path: Decoded request path.

    Returns:
        ASCII form of path.
    """
    return quote(path, safe=_PATH_SAFE)
