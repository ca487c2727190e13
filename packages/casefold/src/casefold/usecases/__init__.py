"""Use cases: Application logic layer."""

from casefold.usecases.caser import FoldCaser, LowerCaser, create_caser
from casefold.usecases.config_parser import ConfigParser
from casefold.usecases.filesystem_canonicalizer import FilesystemCanonicalizer
from casefold.usecases.path_exclusion_matcher import PathExclusionMatcher
from casefold.usecases.path_rewriter import PathRewriter, decide

__all__ = [
    "ConfigParser",
    "FilesystemCanonicalizer",
    "FoldCaser",
    "LowerCaser",
    "PathExclusionMatcher",
    "PathRewriter",
    "create_caser",
    "decide",
]
