"""
Parsed JavaScript Source

Wraps an ESTree produced by ``esprima`` and exposes what the rule needs:
the file's comments, the nodes of a given type in document order, and
each node's parent.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import esprima

from identspell.errors import ParseError

logger = logging.getLogger(__name__)

# Node attributes that never hold child nodes.
_SKIP_KEYS = frozenset({
    "type", "loc", "range", "comments", "tokens", "errors",
    "leadingComments", "trailingComments", "innerComments",
})


@dataclass(frozen=True)
class Comment:
    """A source comment: body text without delimiters, start position."""
    value: str
    line: int
    column: int = 0
    kind: str = "Line"  # 'Line' or 'Block'


def is_node(value: Any) -> bool:
    """True for ESTree node objects (anything with a string ``type``)."""
    return hasattr(value, "__dict__") and isinstance(getattr(value, "type", None), str)


def iter_children(node: Any) -> Iterator[Any]:
    """Yield the direct child nodes of *node* in attribute order."""
    for key, value in vars(node).items():
        if key in _SKIP_KEYS or value is None:
            continue
        if isinstance(value, list):
            for item in value:
                if is_node(item):
                    yield item
        elif is_node(value):
            yield value


class SourceFile:
    """
    A parsed JavaScript file.

    Usage:
        file = parse_source("var answer = 42;")
        for node in file.iterate_nodes_by_type("Identifier"):
            parent = file.parent_of(node)
    """

    def __init__(self, program: Any, source: str = "", filename: str = "<unknown>",
                 comments: Optional[List[Comment]] = None):
        self.program = program
        self.source = source
        self.filename = filename
        self._comments = comments if comments is not None else []
        self._parents: Dict[int, Any] = {}
        self._by_type: Dict[str, List[Any]] = defaultdict(list)
        self._index(program)

    def _index(self, root: Any) -> None:
        # Iterative pre-order walk; deeply nested code must not hit the
        # recursion limit.
        stack = [(root, None)]
        while stack:
            node, parent = stack.pop()
            self._parents[id(node)] = parent
            self._by_type[node.type].append(node)
            children = list(iter_children(node))
            for child in reversed(children):
                stack.append((child, node))

    def get_comments(self) -> List[Comment]:
        return list(self._comments)

    def iterate_nodes_by_type(self, node_type: str) -> Iterator[Any]:
        """Yield every node of *node_type* in document order."""
        return iter(self._by_type.get(node_type, ()))

    def parent_of(self, node: Any) -> Optional[Any]:
        return self._parents.get(id(node))

    def __repr__(self):
        return f"SourceFile({self.filename!r}, {len(self._parents)} nodes)"


def _convert_comments(raw_comments) -> List[Comment]:
    comments = []
    for raw in raw_comments or []:
        start = raw.loc.start
        comments.append(Comment(
            value=raw.value,
            line=start.line,
            column=start.column,
            kind="Block" if "Block" in raw.type else "Line",
        ))
    return comments


def parse_source(source: str, filename: str = "<unknown>", module: bool = False) -> SourceFile:
    """
    Parse JavaScript source text.

    Args:
        source: JavaScript code
        filename: Name used in error messages and findings
        module: Parse as an ES module instead of a script

    Raises:
        ParseError: if esprima rejects the source
    """
    options = {"loc": True, "comment": True}
    try:
        if module:
            program = esprima.parseModule(source, options)
        else:
            program = esprima.parseScript(source, options)
    except Exception as e:
        # esprima reports syntax errors as its own Error type carrying
        # lineNumber/column attributes.
        raise ParseError(
            getattr(e, "description", None) or str(e),
            filename=filename,
            line=getattr(e, "lineNumber", None),
            column=getattr(e, "column", None),
        ) from e

    comments = _convert_comments(getattr(program, "comments", None))
    logger.debug("Parsed %s: %d comments", filename, len(comments))
    return SourceFile(program, source=source, filename=filename, comments=comments)


def parse_file(filepath, module: bool = False) -> SourceFile:
    """Parse a JavaScript file from disk."""
    path = Path(filepath)
    text = path.read_text(encoding="utf-8", errors="replace")
    return parse_source(text, filename=str(path), module=module)
