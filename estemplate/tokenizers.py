"""
Tokenizers receive a stream of characters and break it up into individual tokens.

See https://www.elastic.co/guide/en/elasticsearch/reference/current/analysis-tokenizers.html
"""

from typing import Annotated

from estemplate.entity import Joined, NamedEntity, OneOf, Strings
from estemplate.models import TokenChars


class Tokenizer(NamedEntity):
    """Base class for tokenizers, which can be used in Analysis.tokenizer"""


class TokenizerCharGroup(Tokenizer):
    kind = "char_group"

    tokenize_on_chars: Strings = []


class TokenizerClassic(Tokenizer):
    kind = "classic"

    max_token_length: int | None = None


class TokenizerEdgeNGram(Tokenizer):
    kind = "edge_ngram"

    min_gram: int | None = None
    max_gram: int | None = None
    token_chars: Annotated[Strings, OneOf(TokenChars)] = []


class TokenizerKeyword(Tokenizer):
    kind = "keyword"

    buffer_size: int | None = None


class TokenizerLetter(Tokenizer):
    kind = "letter"


class TokenizerLowercase(Tokenizer):
    kind = "lowercase"


class TokenizerNGram(Tokenizer):
    kind = "ngram"

    min_gram: int | None = None
    max_gram: int | None = None
    token_chars: Annotated[Strings, OneOf(TokenChars)] = []


class TokenizerPathHierarchy(Tokenizer):
    kind = "path_hierarchy"

    delimiter: str | None = None
    replacement: str | None = None
    buffer_size: int | None = None
    reverse: bool | None = None
    skip: int | None = None


class TokenizerPattern(Tokenizer):
    kind = "pattern"

    pattern: str | None = None
    flags: Annotated[Strings, Joined("|")] = []
    group: int | None = None


class TokenizerSimplePattern(Tokenizer):
    kind = "simple_pattern"

    pattern: str | None = None


class TokenizerSimplePatternSplit(Tokenizer):
    kind = "simple_pattern_split"

    pattern: str | None = None


class TokenizerStandard(Tokenizer):
    kind = "standard"

    max_token_length: int | None = None


class TokenizerThai(Tokenizer):
    kind = "thai"


class TokenizerUAXURLEmail(Tokenizer):
    kind = "uax_url_email"

    max_token_length: int | None = None


class TokenizerWhitespace(Tokenizer):
    kind = "whitespace"

    max_token_length: int | None = None
