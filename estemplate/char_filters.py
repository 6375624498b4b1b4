"""
Character filters preprocess the stream of characters before it is passed to the tokenizer.

See https://www.elastic.co/guide/en/elasticsearch/reference/current/analysis-charfilters.html
"""

from typing import Annotated

from pydantic import Field

from estemplate.entity import Joined, NamedEntity, Required, ScalarStrings, Strings
from estemplate.mapping_rule import MappingRule


class CharFilter(NamedEntity):
    """Base class for character filters, which can be used in Analysis.char_filter"""


class CharFilterHTMLStrip(CharFilter):
    kind = "html_strip"

    escaped_tags: Strings = []


class CharFilterMapping(CharFilter):
    """
    Replaces keys by values. Mappings can be given as MappingRule objects (always rendered as a list)
    or as raw "key => value" strings (rendered as a bare string if there is only one).
    If both are given, the raw mappings take precedence.
    """

    kind = "mapping"

    mappings: list[MappingRule] = []
    raw_mappings: Annotated[ScalarStrings, Field(serialization_alias="mappings")] = []
    mappings_path: str | None = None

    def add_mapping(self, key: str | list[str], value: str | list[str]) -> "CharFilterMapping":
        return self.add("mappings", MappingRule(key, value))


class CharFilterPatternReplace(CharFilter):
    kind = "pattern_replace"

    pattern: Annotated[str | None, Required()] = None
    replacement: str | None = None
    flags: Annotated[Strings, Joined("|")] = []
