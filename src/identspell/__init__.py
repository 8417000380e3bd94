"""
identspell - identifier spell-checking for JavaScript

Splits declared names like ``fileDirectory`` or ``XMLParser`` into words
and reports the ones missing from the configured dictionaries.
"""

__version__ = "0.1.0"
__author__ = "identspell contributors"

from identspell.errors import ConfigurationError, ParseError, WordlistNotFoundError
from identspell.linter import Linter, check_string
from identspell.rule import RequireDictionaryWords
from identspell.words import split_words
