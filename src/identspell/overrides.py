"""
Inline Override Index

Comments can switch words and names on or off from a given line onward::

    // jscs:allowWords concat, dest, dist, src
    /* identspell:disallowNamesAsIdentifiers EOL */

The index is built once per file from its comments and is read-only
while the file is checked.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from identspell.model import Axis
from identspell.words import word_set

logger = logging.getLogger(__name__)

DIRECTIVE_MARKERS = ("jscs", "identspell")


class RuleKind(Enum):
    """What an inline directive targets."""
    WORDS = "allowWords"
    WORDS_IN_IDENTIFIERS = "allowWordsInIdentifiers"
    WORDS_IN_PROPERTIES = "allowWordsInProperties"
    NAMES = "allowNames"
    NAMES_AS_IDENTIFIERS = "allowNamesAsIdentifiers"
    NAMES_AS_PROPERTIES = "allowNamesAsProperties"

    @property
    def matches_names(self) -> bool:
        """Whole-name kinds compare names; the rest compare sub-words."""
        return self.value.startswith("allowNames")

    @property
    def scope(self) -> Optional[Axis]:
        """The only axis this kind applies to, or None for both."""
        if self.value.endswith("Identifiers"):
            return Axis.IDENTIFIER
        if self.value.endswith("Properties"):
            return Axis.PROPERTY
        return None

    def applies_to(self, axis: Axis) -> bool:
        return self.scope is None or self.scope is axis

    @classmethod
    def from_suffix(cls, suffix: str) -> "RuleKind":
        return cls("allow" + suffix)


# Longer suffixes still win: "Words" fails on the mandatory whitespace and
# the regex engine backtracks into "WordsInIdentifiers".
DIRECTIVE_RE = re.compile(
    r"(?:" + "|".join(DIRECTIVE_MARKERS) + r")\s*:\s*(allow|disallow)("
    + "|".join(kind.value[len("allow"):] for kind in RuleKind)
    + r")\s+([\s\S]*)"
)


@dataclass(frozen=True)
class Directive:
    """One word or name switched on or off from *line* onward."""
    rule: RuleKind
    name: str
    allowed: bool
    line: int

    def matches(self, axis: Axis, name: str) -> bool:
        if not self.rule.applies_to(axis):
            return False
        if self.rule.matches_names:
            return self.name == name
        return self.name.lower() in word_set(name)


def parse_directives(text: str, line: int) -> List[Directive]:
    """Parse one comment body; returns [] when it holds no directive."""
    match = DIRECTIVE_RE.match(text.strip())
    if not match:
        return []

    verb, suffix, names = match.groups()
    rule = RuleKind.from_suffix(suffix)
    directives = []
    for name in names.split(","):
        name = name.strip()
        if not name:
            continue
        directives.append(Directive(rule, name, verb == "allow", line))
    return directives


class OverrideIndex:
    """Line-ordered directives answering "is this allowed here?"."""

    def __init__(self, directives: Iterable[Directive] = ()):
        # Stable sort: comments on the same line keep their order.
        self._directives: Tuple[Directive, ...] = tuple(
            sorted(directives, key=lambda d: d.line))

    @classmethod
    def from_comments(cls, comments) -> "OverrideIndex":
        """Build the index from parser comments (``value`` and ``line``)."""
        directives = []
        for comment in comments:
            directives.extend(parse_directives(comment.value, comment.line))
        index = cls(directives)
        logger.debug("Override index holds %d directives", len(index))
        return index

    @property
    def directives(self) -> Tuple[Directive, ...]:
        return self._directives

    def __len__(self) -> int:
        return len(self._directives)

    def resolve(self, axis: Axis, name: str, line: int) -> bool:
        """
        True if the latest matching directive at or before *line* allows
        *name* on *axis*; False when it disallows or nothing matches.
        """
        allowed = False
        for directive in self._directives:
            if directive.line > line:
                break
            if directive.matches(axis, name):
                allowed = directive.allowed
        return allowed
