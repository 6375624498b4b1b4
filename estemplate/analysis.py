from typing import Annotated

from pydantic import Field

from estemplate.analyzers import Analyzer
from estemplate.char_filters import CharFilter
from estemplate.entity import Entity, Named, Slot
from estemplate.normalizers import Normalizer
from estemplate.token_filters import TokenFilter
from estemplate.tokenizers import Tokenizer


class Analysis(Entity):
    """
    The analysis settings of an index: named analyzers (plus the default analyzer),
    tokenizers, normalizers, token filters and character filters.
    """

    wrap_key = "analysis"

    default_analyzer: Annotated[Analyzer | None, Slot("default"), Field(serialization_alias="analyzer")] = None
    analyzer: Annotated[list[Analyzer], Named()] = []
    tokenizer: Annotated[list[Tokenizer], Named()] = []
    normalizer: Annotated[list[Normalizer], Named()] = []
    filter: Annotated[list[TokenFilter], Named()] = []
    char_filter: Annotated[list[CharFilter], Named()] = []
