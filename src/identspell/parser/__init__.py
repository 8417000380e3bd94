"""
identspell.parser - JavaScript source host

Parses JavaScript with esprima and exposes comments, nodes by type and
parent links to the spelling rule.
"""

from identspell.parser.source import (
    Comment,
    SourceFile,
    is_node,
    iter_children,
    parse_file,
    parse_source,
)

__all__ = [
    "Comment",
    "SourceFile",
    "is_node",
    "iter_children",
    "parse_file",
    "parse_source",
]
