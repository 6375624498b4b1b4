"""
Analyzers convert text into tokens: zero or more character filters, exactly one tokenizer,
and zero or more token filters.

See https://www.elastic.co/guide/en/elasticsearch/reference/current/analysis-analyzers.html
"""

from typing import Annotated

from estemplate.entity import Joined, NamedEntity, Required, ScalarStrings, Strings


class Analyzer(NamedEntity):
    """Base class for analyzers, which can be used in Analysis.analyzer"""


class AnalyzerCustom(Analyzer):
    kind = "custom"

    tokenizer: Annotated[str | None, Required()] = None
    char_filter: Strings = []
    filter: Strings = []
    position_increment_gap: int | None = None


class AnalyzerFingerprint(Analyzer):
    kind = "fingerprint"

    separator: str | None = None
    max_output_size: int | None = None
    stopwords: ScalarStrings = []
    stopwords_path: str | None = None


class AnalyzerKeyword(Analyzer):
    kind = "keyword"


class AnalyzerPattern(Analyzer):
    kind = "pattern"

    pattern: str | None = None
    flags: Annotated[Strings, Joined("|")] = []
    lowercase: bool | None = None
    stopwords: ScalarStrings = []
    stopwords_path: str | None = None


class AnalyzerSimple(Analyzer):
    kind = "simple"


class AnalyzerStandard(Analyzer):
    kind = "standard"

    max_token_length: int | None = None
    stopwords: ScalarStrings = []
    stopwords_path: str | None = None


class AnalyzerStop(Analyzer):
    kind = "stop"

    stopwords: ScalarStrings = []
    stopwords_path: str | None = None


class AnalyzerWhitespace(Analyzer):
    kind = "whitespace"
