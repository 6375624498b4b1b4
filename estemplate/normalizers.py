from estemplate.entity import NamedEntity, Strings


class Normalizer(NamedEntity):
    """Base class for normalizers, which can be used in Analysis.normalizer"""


class NormalizerCustom(Normalizer):
    """Normalizers are like analyzers, but produce a single token (so they have no tokenizer)"""

    kind = "custom"

    char_filter: Strings = []
    filter: Strings = []
