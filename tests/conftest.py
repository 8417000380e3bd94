"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from identspell.dictionaries import resource_name
from identspell.errors import WordlistNotFoundError
from identspell.linter import Linter
from identspell.parser import parse_source


# =============================================================================
# WORD-LIST FIXTURES
# =============================================================================

ENGLISH = {
    "a", "age", "data", "directory", "element", "error", "file", "for",
    "function", "good", "helper", "i", "mode", "number", "object",
    "params", "parser", "property", "reaching", "source", "state",
    "string", "true", "value", "video",
}

WORDLISTS = {
    "english": ENGLISH,
    "english/american": ENGLISH | {"color"},
    "english/british": ENGLISH | {"colour"},
}


class MemoryWordlistLoader:
    """Word-list loader backed by a dict; records every load."""

    def __init__(self, wordlists=None):
        self.wordlists = WORDLISTS if wordlists is None else wordlists
        self.loaded = []

    def load(self, language):
        if language not in self.wordlists:
            raise WordlistNotFoundError(language, resource_name(language))
        self.loaded.append(language)
        return frozenset(self.wordlists[language])


@pytest.fixture
def loader():
    """In-memory word lists: english plus american/british variants."""
    return MemoryWordlistLoader()


@pytest.fixture
def linter(loader):
    """A Linter configured with ``requireDictionaryWords: true``."""
    linter = Linter(loader)
    linter.configure({"requireDictionaryWords": True})
    return linter


@pytest.fixture
def make_linter(loader):
    """Factory: Linter configured with the given rule option."""
    def _make(option=True):
        linter = Linter(loader)
        linter.configure({"requireDictionaryWords": option})
        return linter
    return _make


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def count(linter, *lines) -> int:
    """Number of findings for the source made of *lines*."""
    return linter.check_string("\n".join(lines)).error_count


def positions(linter, source: str) -> list:
    """(line, col, word) for each finding, in source order."""
    return [(f.line, f.col, f.word) for f in linter.check_string(source).sorted_findings()]


def parse(source: str):
    return parse_source(source, filename="test.js")
