"""
Compound Name Splitter

Breaks identifier and property names such as ``fooBar``, ``XMLParser``,
``MAX_SIZE`` or ``$stateParams`` into their constituent words, keeping
each word's character offset inside the original name.
"""

import re
from typing import List, NamedTuple

# Latin-1 letters are accepted so names like ``crèmeBrûlée`` split sanely.
_UPPER = "[A-Z\xc0-\xd6\xd8-\xde]"
_LOWER = "[a-z\xdf-\xf6\xf8-\xff]+"

# Alternatives are tried in order:
#   1. an acronym run that is followed by a capitalized word (XML|Parser)
#   2. an optional capital followed by lowercase letters (foo, Bar)
#   3. any remaining run of capitals (ASDF)
#   4. a run of digits
WORD_RE = re.compile(
    f"{_UPPER}+(?={_UPPER}{_LOWER})"
    f"|{_UPPER}?{_LOWER}"
    f"|{_UPPER}+"
    f"|[0-9]+"
)


class Word(NamedTuple):
    """A lower-cased sub-word and its offset within the source name."""
    text: str
    offset: int


def split_words(name: str) -> List[Word]:
    """
    Split *name* into lower-cased words.

    Digit runs are matched so they act as boundaries, but they are never
    returned: numbers are not spell-checked.

    >>> [w.text for w in split_words("asdfASDFAsdf")]
    ['asdf', 'asdf', 'asdf']
    """
    words = []
    for match in WORD_RE.finditer(str(name)):
        text = match.group()
        if text.isdigit():
            continue
        words.append(Word(text.lower(), match.start()))
    return words


def word_set(name: str) -> frozenset:
    """Return the distinct lower-cased words of *name*."""
    return frozenset(w.text for w in split_words(name))
