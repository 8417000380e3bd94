"""
Dictionary Resolver

Turns validated rule options into the immutable dictionaries used while
checking a file:

- word dictionaries (lower-case, queried per sub-word) for the base,
  identifier and property axes
- name dictionaries (verbatim whole names) for the same three levels
- the exclude set, which always beats the word dictionaries

Language word-lists come from a ``WordlistLoader``. The default loader
looks for plugins in the ``identspell.wordlists`` entry point group and
then falls back to the frequency lists bundled with ``pyspellchecker``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from importlib.metadata import entry_points
from typing import Dict, Iterable, Optional, Protocol, Tuple

from spellchecker import SpellChecker

from identspell.errors import WordlistNotFoundError
from identspell.model import Axis
from identspell.options import DictionaryWordsOptions

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "identspell.wordlists"

# One resource holds every English variant.
WORDLIST_RESOURCES = {
    "english": "wordlist-english",
    "american": "wordlist-english",
    "british": "wordlist-english",
    "canadian": "wordlist-english",
}

# Language names served by pyspellchecker's bundled frequency lists. The
# English list mixes regional spellings, so regional variants (american,
# british, canadian, english/<variant>) must come from a word-list plugin.
SPELLCHECKER_LANGUAGES = {
    "english": "en",
    "spanish": "es",
    "french": "fr",
    "portuguese": "pt",
    "german": "de",
    "italian": "it",
    "russian": "ru",
    "arabic": "ar",
    "dutch": "nl",
}


def resource_name(language: str) -> str:
    """Name of the word-list resource that provides *language*."""
    base = language.split("/", 1)[0]
    return WORDLIST_RESOURCES.get(base, f"wordlist-{base}")


# =============================================================================
# DICTIONARIES
# =============================================================================

@dataclass(frozen=True)
class Dictionary:
    """A named, immutable set of words or names."""
    name: str
    entries: frozenset = frozenset()

    def __contains__(self, item: str) -> bool:
        return item in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    @classmethod
    def of_words(cls, name: str, words: Iterable[str]) -> "Dictionary":
        """Build a word dictionary; words are stored lower-cased."""
        return cls(name, frozenset(str(w).lower() for w in words))

    @classmethod
    def of_names(cls, name: str, names: Iterable[str]) -> "Dictionary":
        """Build a name dictionary; names are stored verbatim."""
        return cls(name, frozenset(str(n) for n in names))


@dataclass(frozen=True)
class DictionarySet:
    """Dictionaries composed by logical OR."""
    dictionaries: Tuple[Dictionary, ...] = ()

    def __contains__(self, item: str) -> bool:
        return any(item in d for d in self.dictionaries)

    def __iter__(self):
        return iter(self.dictionaries)

    def __len__(self) -> int:
        return len(self.dictionaries)

    def extended(self, dictionary: Optional[Dictionary]) -> "DictionarySet":
        """Return a new set with *dictionary* appended (skipped when empty)."""
        if dictionary is None or not dictionary.entries:
            return self
        return DictionarySet(self.dictionaries + (dictionary,))


@dataclass(frozen=True)
class Dictionaries:
    """Everything the checker consults, per axis."""
    words: DictionarySet
    identifier_words: DictionarySet
    property_words: DictionarySet
    names: DictionarySet
    identifier_names: DictionarySet
    property_names: DictionarySet
    excluded: Dictionary = field(default_factory=lambda: Dictionary("excludeWords"))

    def for_axis(self, axis: Axis) -> Tuple[DictionarySet, DictionarySet]:
        """Return ``(word_dictionaries, name_dictionaries)`` for *axis*."""
        if axis is Axis.IDENTIFIER:
            return self.identifier_words, self.identifier_names
        return self.property_words, self.property_names

    def is_known_word(self, axis: Axis, word: str) -> bool:
        """True if the lower-cased *word* passes on *axis*."""
        if word in self.excluded:
            return False
        words, _ = self.for_axis(axis)
        return word in words

    def is_allowed_name(self, axis: Axis, name: str) -> bool:
        """True if the whole *name* is allowed verbatim on *axis*."""
        _, names = self.for_axis(axis)
        return name in names


# =============================================================================
# WORD-LIST LOADING
# =============================================================================

class WordlistLoader(Protocol):
    """Resolves a language name to its words."""

    def load(self, language: str) -> frozenset:
        """Return the words of *language* or raise WordlistNotFoundError."""
        ...


class PackageWordlistLoader:
    """
    Default word-list loader.

    Resolution order for a language name:

    1. an entry point of that name in the ``identspell.wordlists`` group;
       the loaded object is an iterable of words or a callable returning one
    2. pyspellchecker's bundled frequency list, for plain language names
       only; it cannot tell regional variants apart
    3. ``WordlistNotFoundError`` naming ``wordlist-<language>``

    Loaded lists are cached, so one loader can be shared between rules.
    """

    def __init__(self, group: str = ENTRY_POINT_GROUP):
        self.group = group
        self._cache: Dict[str, frozenset] = {}

    def load(self, language: str) -> frozenset:
        if language not in self._cache:
            words = self._load_plugin(language)
            if words is None:
                words = self._load_bundled(language)
            self._cache[language] = frozenset(str(w).lower() for w in words)
            logger.debug("Loaded word list %r (%d words)",
                         language, len(self._cache[language]))
        return self._cache[language]

    def _load_plugin(self, language: str) -> Optional[Iterable[str]]:
        for ep in entry_points(group=self.group):
            if ep.name == language:
                provided = ep.load()
                return provided() if callable(provided) else provided
        return None

    def _load_bundled(self, language: str) -> Iterable[str]:
        code = SPELLCHECKER_LANGUAGES.get(language)
        if code is None:
            raise WordlistNotFoundError(language, resource_name(language))
        try:
            checker = SpellChecker(language=code, distance=1)
        except ValueError as exc:
            raise WordlistNotFoundError(language, resource_name(language)) from exc
        return checker.word_frequency.dictionary.keys()


_default_loader: Optional[PackageWordlistLoader] = None


def get_default_loader() -> PackageWordlistLoader:
    """Get the process-wide default loader, creating it if needed."""
    global _default_loader

    if _default_loader is None:
        _default_loader = PackageWordlistLoader()

    return _default_loader


# =============================================================================
# RESOLVER
# =============================================================================

def build_dictionaries(options: DictionaryWordsOptions,
                       loader: Optional[WordlistLoader] = None) -> Dictionaries:
    """
    Compose the per-axis dictionaries described by *options*.

    Every language list is loaded here, so a missing one fails while the
    rule is being configured rather than on the first checked file.
    """
    loader = loader or get_default_loader()

    words = DictionarySet(tuple(
        Dictionary(language, loader.load(language))
        for language in options.dictionaries
    ))
    words = words.extended(Dictionary.of_words("allowWords", options.allow_words))

    names = DictionarySet().extended(
        Dictionary.of_names("allowNames", options.allow_names))

    return Dictionaries(
        words=words,
        identifier_words=words.extended(Dictionary.of_words(
            "allowWordsInIdentifiers", options.allow_words_in_identifiers)),
        property_words=words.extended(Dictionary.of_words(
            "allowWordsInProperties", options.allow_words_in_properties)),
        names=names,
        identifier_names=names.extended(Dictionary.of_names(
            "allowNamesAsIdentifiers", options.allow_names_as_identifiers)),
        property_names=names.extended(Dictionary.of_names(
            "allowNamesAsProperties", options.allow_names_as_properties)),
        excluded=Dictionary.of_words("excludeWords", options.exclude_words),
    )
