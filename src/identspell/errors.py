"""
Exception hierarchy for identspell.

Configuration problems are fatal and raised while a rule is configured.
Spelling problems are never exceptions; they are reported as findings.
"""

from typing import Optional


class IdentspellError(Exception):
    """Base class for all identspell errors."""


class ConfigurationError(IdentspellError):
    """Invalid rule options or an unusable configuration file."""


class WordlistNotFoundError(ConfigurationError):
    """A requested language word-list is not installed."""

    def __init__(self, language: str, resource_name: str):
        self.language = language
        self.resource_name = resource_name
        super().__init__(
            f'Word list "{resource_name}" is not installed but required for '
            f'spell-checking. Install a package that provides "{resource_name}" '
            f'(an "identspell.wordlists" entry point named "{language}") '
            f'or remove "{language}" from the dictionaries option'
        )


class ParseError(IdentspellError):
    """Source text rejected by the JavaScript parser."""

    def __init__(self, message: str, filename: str = "<unknown>",
                 line: Optional[int] = None, column: Optional[int] = None):
        self.filename = filename
        self.line = line
        self.column = column
        if line is not None:
            super().__init__(f"{filename}:{line}: {message}")
        else:
            super().__init__(f"{filename}: {message}")
