"""
Fixed option sets accepted by Elasticsearch for enumerated string settings.

These are only checked by Entity.check (through the OneOf marker), never while building.
"""

from typing import Literal

######################## MAPPING PARAMETERS #########################

IndexOptions = Literal["docs", "freqs", "positions", "offsets"]

SimilarityName = Literal["BM25", "classic", "boolean"]

TermVector = Literal[
    "no",
    "yes",
    "with_positions",
    "with_offsets",
    "with_positions_offsets",
    "with_positions_payloads",
    "with_positions_offsets_payloads",
]

GeoOrientation = Literal["right", "ccw", "counterclockwise", "left", "cw", "clockwise"]
GeoStrategy = Literal["recursive", "term"]
GeoTree = Literal["geohash", "quadtree"]

######################## SIMILARITIES #########################

DFRBasicModel = Literal["g", "if", "in", "ine"]
DFRAfterEffect = Literal["b", "l"]
Normalization = Literal["no", "h1", "h2", "h3", "z"]
DFIIndependenceMeasure = Literal["standardized", "saturated", "chisquared"]
IBDistribution = Literal["ll", "spl"]
IBLambda = Literal["df", "ttf"]

######################## TEXT ANALYSIS #########################

TokenChars = Literal["letter", "digit", "whitespace", "punctuation", "symbol"]
CJKScript = Literal["han", "hangul", "hiragana", "katakana"]
PayloadEncoding = Literal["float", "identity", "int"]
EdgeNGramSide = Literal["front", "back"]
KeepTypesMode = Literal["include", "exclude"]
LowercaseLanguage = Literal["greek", "irish", "turkish"]
SynonymFormat = Literal["solr", "wordnet"]

PhoneticEncoder = Literal[
    "metaphone",
    "double_metaphone",
    "soundex",
    "refined_soundex",
    "caverphone1",
    "caverphone2",
    "cologne",
    "nysiis",
    "koelnerphonetik",
    "haasephonetik",
    "beider_morse",
    "daitch_mokotoff",
]
BeiderMorseRuleType = Literal["exact", "approx"]
BeiderMorseNameType = Literal["ashkenazi", "sephardic", "generic"]
BeiderMorseLanguage = Literal[
    "any",
    "common",
    "cyrillic",
    "english",
    "french",
    "german",
    "hebrew",
    "hungarian",
    "polish",
    "romanian",
    "russian",
    "spanish",
]

StemmerLanguage = Literal[
    "arabic",
    "armenian",
    "basque",
    "bengali",
    "light_bengali",
    "brazilian",
    "bulgarian",
    "catalan",
    "czech",
    "danish",
    "dutch",
    "dutch_kp",
    "english",
    "light_english",
    "minimal_english",
    "possessive_english",
    "porter2",
    "lovins",
    "finnish",
    "light_finnish",
    "french",
    "light_french",
    "minimal_french",
    "galician",
    "minimal_galician",
    "german",
    "german2",
    "light_german",
    "minimal_german",
    "greek",
    "hindi",
    "hungarian",
    "light_hungarian",
    "indonesian",
    "irish",
    "italian",
    "light_italian",
    "sorani",
    "latvian",
    "lithuanian",
    "norwegian",
    "light_norwegian",
    "minimal_norwegian",
    "light_nyrorsk",
    "minimal_nyrorsk",
    "portuguese",
    "light_portuguese",
    "minimal_portuguese",
    "portuguese_rslp",
    "romanian",
    "russian",
    "light_russian",
    "spanish",
    "light_spanish",
    "swedish",
    "light_swedish",
    "turkish",
]

######################## INDEX SETTINGS #########################

ScriptLanguage = Literal["painless", "expression", "mustache", "java"]
AllocationType = Literal["include", "require", "exclude"]
SlowlogType = Literal["search", "indexing"]
SlowlogLevel = Literal["warn", "info", "debug", "trace"]
