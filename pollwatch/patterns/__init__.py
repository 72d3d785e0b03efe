"""Path pattern expansion and matching.

Components:
- expand: extended glob (brace alternation) to a set of basic globs
- BasicGlob: a validated basic glob that can enumerate matching paths

Usage:
    from pollwatch.patterns import BasicGlob, expand

    for pattern in sorted(expand("config.{yml,yaml}")):
        for path in BasicGlob.compile(pattern).iter_matches():
            print(path)
"""

from .basic_glob import BasicGlob, to_native_glob, validate_basic_glob
from .expander import Alternatives, Literal, Token, expand, tokenize

__all__ = [
    "Alternatives",
    "BasicGlob",
    "Literal",
    "Token",
    "expand",
    "to_native_glob",
    "tokenize",
    "validate_basic_glob",
]
