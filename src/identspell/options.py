"""
Rule Options

Validated form of the ``requireDictionaryWords`` option. The option is
either ``True`` (English word-list, nothing else allowed) or a mapping of
camelCase keys to arrays of strings.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from identspell.errors import ConfigurationError

OPTION_NAME = "requireDictionaryWords"
DEFAULT_DICTIONARIES = ("english",)


class DictionaryWordsOptions(BaseModel):
    """Options accepted by the dictionary words rule."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    dictionaries: List[str] = Field(default_factory=lambda: list(DEFAULT_DICTIONARIES))
    allow_words: List[str] = Field(default_factory=list, alias="allowWords")
    allow_words_in_identifiers: List[str] = Field(
        default_factory=list, alias="allowWordsInIdentifiers")
    allow_words_in_properties: List[str] = Field(
        default_factory=list, alias="allowWordsInProperties")
    allow_names: List[str] = Field(default_factory=list, alias="allowNames")
    allow_names_as_identifiers: List[str] = Field(
        default_factory=list, alias="allowNamesAsIdentifiers")
    allow_names_as_properties: List[str] = Field(
        default_factory=list, alias="allowNamesAsProperties")
    exclude_words: List[str] = Field(default_factory=list, alias="excludeWords")


def parse_options(value: Any, option_name: str = OPTION_NAME) -> DictionaryWordsOptions:
    """
    Validate a raw option value.

    Raises:
        ConfigurationError: if the value is neither ``True`` nor a mapping,
            or if a list option is not an array of strings.
    """
    if value is True:
        return DictionaryWordsOptions()
    if not isinstance(value, Mapping):
        raise ConfigurationError(
            f"{option_name} option requires a true or object value "
            f"or should be removed"
        )

    try:
        return DictionaryWordsOptions.model_validate(dict(value))
    except ValidationError as exc:
        error = exc.errors()[0]
        key = error["loc"][0] if error["loc"] else "?"
        if len(error["loc"]) > 1:
            raise ConfigurationError(
                f"{option_name}.{key} option requires an array of strings, "
                f"got {error['input']!r} at index {error['loc'][1]}"
            ) from exc
        raise ConfigurationError(
            f"{option_name}.{key} option requires an array value "
            f"or should be removed"
        ) from exc
