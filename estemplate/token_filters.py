"""
Token filters accept a stream of tokens from a tokenizer and can modify tokens (e.g. lowercasing),
delete tokens (e.g. remove stopwords) or add tokens (e.g. synonyms).

See https://www.elastic.co/guide/en/elasticsearch/reference/current/analysis-tokenfilters.html
"""

from typing import Annotated, Any

from pydantic import Field

from estemplate.entity import NamedEntity, OneOf, Required, ScalarOrList, ScalarStrings, Strings
from estemplate.mapping_rule import MappingRule
from estemplate.models import (
    BeiderMorseLanguage,
    BeiderMorseNameType,
    BeiderMorseRuleType,
    CJKScript,
    EdgeNGramSide,
    KeepTypesMode,
    LowercaseLanguage,
    PayloadEncoding,
    PhoneticEncoder,
    StemmerLanguage,
    SynonymFormat,
)
from estemplate.script import Script


class TokenFilter(NamedEntity):
    """Base class for token filters, which can be used in Analysis.filter"""


class TokenFilterASCIIFolding(TokenFilter):
    kind = "asciifolding"

    preserve_original: bool | None = None


class TokenFilterCJKBigram(TokenFilter):
    kind = "cjk_bigram"

    ignored_scripts: Annotated[Strings, OneOf(CJKScript)] = []
    output_unigrams: bool | None = None


class TokenFilterCommonGrams(TokenFilter):
    kind = "common_grams"
    alternatives = [("common_words", "common_words_path")]

    common_words: Strings = []
    common_words_path: str | None = None
    ignore_case: bool | None = None
    query_mode: bool | None = None


class TokenFilterConditional(TokenFilter):
    """Applies a set of token filters to tokens that match the conditions of a predicate script"""

    kind = "condition"

    filter: Annotated[Strings, Required()] = []
    script: Annotated[Script | None, Required()] = None


class TokenFilterDelimitedPayload(TokenFilter):
    kind = "delimited_payload"

    delimiter: str | None = None
    encoding: Annotated[str | None, OneOf(PayloadEncoding)] = None


class _Decompounder(TokenFilter):
    word_list: Strings = []
    word_list_path: str | None = None
    max_subword_size: int | None = None
    min_subword_size: int | None = None
    min_word_size: int | None = None
    only_longest_match: bool | None = None


class TokenFilterDictionaryDecompounder(_Decompounder):
    kind = "dictionary_decompounder"
    alternatives = [("word_list", "word_list_path")]


class TokenFilterHyphenationDecompounder(_Decompounder):
    kind = "hyphenation_decompounder"
    alternatives = [("word_list", "word_list_path")]

    hyphenation_patterns_path: Annotated[str | None, Required()] = None


class TokenFilterEdgeNGram(TokenFilter):
    kind = "edge_ngram"

    max_gram: int | None = None
    min_gram: int | None = None
    side: Annotated[str | None, OneOf(EdgeNGramSide)] = None


class TokenFilterElision(TokenFilter):
    kind = "elision"
    alternatives = [("articles", "articles_path")]

    articles: Strings = []
    articles_path: str | None = None
    articles_case: bool | None = None


class TokenFilterFingerprint(TokenFilter):
    kind = "fingerprint"

    max_output_size: int | None = None
    separator: str | None = None


class TokenFilterHunspell(TokenFilter):
    kind = "hunspell"

    ignore_case: bool | None = None
    locale: Annotated[str | None, Required()] = None
    dictionary: str | None = None
    dedup: bool | None = None
    longest_only: bool | None = None


class TokenFilterKeepTypes(TokenFilter):
    kind = "keep_types"

    types: Annotated[Strings, Required()] = []
    mode: Annotated[str | None, OneOf(KeepTypesMode)] = None


class TokenFilterKeepWords(TokenFilter):
    kind = "keep"
    alternatives = [("keep_words", "keep_words_path")]

    keep_words: Strings = []
    keep_words_path: str | None = None
    keep_words_case: bool | None = None


class TokenFilterKeywordMarker(TokenFilter):
    kind = "keyword_marker"

    keywords: Strings = []
    keywords_path: str | None = None
    keywords_pattern: str | None = None
    ignore_case: bool | None = None


class TokenFilterLength(TokenFilter):
    kind = "length"

    min: int | None = None
    max: int | None = None


class TokenFilterLimitTokenCount(TokenFilter):
    kind = "limit"

    max_token_count: int | None = None
    consume_all_tokens: bool | None = None


class TokenFilterLowercase(TokenFilter):
    kind = "lowercase"

    language: Annotated[str | None, OneOf(LowercaseLanguage)] = None


class TokenFilterMinHash(TokenFilter):
    kind = "min_hash"

    hash_count: int | None = None
    bucket_count: int | None = None
    hash_set_size: int | None = None
    with_rotation: bool | None = None


class TokenFilterMultiplexer(TokenFilter):
    kind = "multiplexer"

    filters: Strings = []
    preserve_original: bool | None = None


class TokenFilterNGram(TokenFilter):
    kind = "ngram"

    max_gram: int | None = None
    min_gram: int | None = None


class TokenFilterPatternCapture(TokenFilter):
    kind = "pattern_capture"

    preserve_original: bool | None = None
    patterns: Strings = []


class TokenFilterPatternReplace(TokenFilter):
    kind = "pattern_replace"

    pattern: str | None = None
    replacement: str | None = None


class TokenFilterPhonetic(TokenFilter):
    kind = "phonetic"

    encoder: Annotated[str | None, OneOf(PhoneticEncoder)] = None
    replace: bool | None = None


class TokenFilterPhoneticBeiderMorse(TokenFilter):
    kind = "phonetic"
    constants = {"encoder": "beider_morse"}

    rule_type: Annotated[str | None, OneOf(BeiderMorseRuleType)] = None
    name_type: Annotated[str | None, OneOf(BeiderMorseNameType)] = None
    languageset: Annotated[Strings, OneOf(BeiderMorseLanguage)] = []


class TokenFilterPhoneticDoubleMetaphone(TokenFilter):
    kind = "phonetic"
    constants = {"encoder": "double_metaphone"}

    replace: bool | None = None
    max_code_len: int | None = None


class TokenFilterPredicateScript(TokenFilter):
    kind = "predicate_token_filter"

    script: Annotated[Script | None, Required()] = None


class TokenFilterShingle(TokenFilter):
    kind = "shingle"

    max_shingle_size: int | None = None
    min_shingle_size: int | None = None
    output_unigrams: bool | None = None
    output_unigrams_if_no_shingles: bool | None = None
    token_separator: str | None = None
    filter_token: str | None = None


class TokenFilterSnowball(TokenFilter):
    kind = "snowball"

    language: str | None = None


class TokenFilterStemmer(TokenFilter):
    kind = "stemmer"

    language: Annotated[str | None, OneOf(StemmerLanguage)] = None


class TokenFilterStemmerOverride(TokenFilter):
    """Overrides stemming with custom "word => stem" rules, the rules are always rendered as a list"""

    kind = "stemmer_override"
    alternatives = [("rules", "rules_path")]

    rules: list[MappingRule] = []
    rules_path: str | None = None

    def add_rule(self, key: str | list[str], value: str) -> "TokenFilterStemmerOverride":
        return self.add("rules", MappingRule(key, value))


class TokenFilterStop(TokenFilter):
    kind = "stop"

    stopwords: ScalarStrings = []
    stopwords_path: str | None = None
    ignore_case: bool | None = None
    remove_trailing: bool | None = None


class TokenFilterSynonym(TokenFilter):
    """
    Synonyms can be given as MappingRule objects or as raw strings in the solr or wordnet format.
    A single synonym is rendered as a bare string. Raw synonyms take precedence over rules.
    """

    kind = "synonym"

    synonyms: Annotated[list[MappingRule], ScalarOrList()] = []
    raw_synonyms: Annotated[ScalarStrings, Field(serialization_alias="synonyms")] = []
    synonyms_path: str | None = None
    expand: bool | None = None
    lenient: bool | None = None
    format: Annotated[str | None, OneOf(SynonymFormat)] = None
    tokenizer: str | None = None
    ignore_case: bool | None = None

    def add_synonym(self, key: Any, value: Any = None):
        """Add a synonym rule: equivalent words (key only) or an explicit mapping (key => value)"""
        return self.add("synonyms", MappingRule(key, value))


class TokenFilterSynonymGraph(TokenFilterSynonym):
    kind = "synonym_graph"


class TokenFilterTruncate(TokenFilter):
    kind = "truncate"

    limit: int | None = None


class TokenFilterUnique(TokenFilter):
    kind = "unique"

    only_on_same_position: bool | None = None


class TokenFilterWordDelimiter(TokenFilter):
    kind = "word_delimiter"

    generate_word_parts: bool | None = None
    generate_number_parts: bool | None = None
    catenate_words: bool | None = None
    catenate_numbers: bool | None = None
    catenate_all: bool | None = None
    split_on_case_change: bool | None = None
    preserve_original: bool | None = None
    split_on_numerics: bool | None = None
    stem_english_possessive: bool | None = None
    protected_words: ScalarStrings = []
    protected_words_path: str | None = None
    type_table: ScalarStrings = []
    type_table_path: str | None = None


class TokenFilterWordDelimiterGraph(TokenFilterWordDelimiter):
    kind = "word_delimiter_graph"
