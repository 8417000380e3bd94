"""
requireDictionaryWords rule

Only allow words defined in a dictionary or by you.

Type: ``True`` or a mapping

Values:
  - ``True``: use the ``"english"`` dictionary
  - mapping:
    - ``dictionaries``: (default ``["english"]``) word-list names, e.g.
      ``"english"``, ``"spanish"``; regional variants such as
      ``"american"`` or ``"english/british"`` need a word-list plugin
    - ``allowWords``: additional words allowed anywhere
    - ``allowWordsInIdentifiers``: additional words allowed only in identifiers
    - ``allowWordsInProperties``: additional words allowed only in properties
    - ``allowNames``: whole names ignored by spellcheck
    - ``allowNamesAsIdentifiers``: whole names ignored when used as identifiers
    - ``allowNamesAsProperties``: whole names ignored when used as properties
    - ``excludeWords``: words to exclude from the dictionaries

Example::

    "requireDictionaryWords": {
        "dictionaries": ["english", "english/american"],
        "allowWords": ["transclude"],
        "allowWordsInProperties": ["chmod"],
        "allowNamesAsIdentifiers": ["$stateParams", "util"],
        "allowNamesAsProperties": ["src"],
        "excludeWords": ["i"]
    }

Words and names can also be allowed (and later disallowed) inline::

    // jscs:allowNamesAsIdentifiers EOL
    var EOL = require('os').EOL;
    // jscs:disallowNamesAsIdentifiers EOL
"""

import logging
from typing import Any, Optional

from identspell.classifier import iter_occurrences
from identspell.dictionaries import Dictionaries, WordlistLoader, build_dictionaries
from identspell.errors import ConfigurationError
from identspell.model import Occurrence
from identspell.options import OPTION_NAME, DictionaryWordsOptions, parse_options
from identspell.overrides import OverrideIndex
from identspell.words import split_words

logger = logging.getLogger(__name__)


class RequireDictionaryWords:
    """Reports declared names made of words missing from the dictionaries."""

    code = "S001"

    def __init__(self, loader: Optional[WordlistLoader] = None):
        self.loader = loader
        self.options: Optional[DictionaryWordsOptions] = None
        self.dictionaries: Optional[Dictionaries] = None

    def configure(self, options: Any) -> None:
        """
        Validate *options* and load every dictionary they name.

        Raises:
            ConfigurationError: on a malformed option or a missing word-list
        """
        self.options = parse_options(options, self.get_option_name())
        self.dictionaries = build_dictionaries(self.options, self.loader)

    def get_option_name(self) -> str:
        return OPTION_NAME

    def check(self, file, errors) -> None:
        """Check every significant name in *file*, reporting into *errors*."""
        if self.dictionaries is None:
            raise ConfigurationError(f"{self.get_option_name()} rule used before configure()")

        overrides = OverrideIndex.from_comments(file.get_comments())
        for occurrence in iter_occurrences(file):
            self.check_occurrence(occurrence, overrides, errors)

    def check_occurrence(self, occurrence: Occurrence, overrides: OverrideIndex, errors) -> int:
        """Check one name; returns the number of diagnostics added."""
        axis, name, location = occurrence.axis, occurrence.name, occurrence.location
        if overrides.resolve(axis, name, location.line):
            return 0
        if self.dictionaries.is_allowed_name(axis, name):
            return 0

        added = 0
        for word in split_words(name):
            if self.dictionaries.is_known_word(axis, word.text):
                continue
            errors.add(f'Non-dictionary word "{word.text}"', location.shifted(word.offset),
                       word=word.text)
            added += 1
        return added
