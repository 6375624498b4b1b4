"""
Similarities define how matching documents are scored.

See https://www.elastic.co/guide/en/elasticsearch/reference/current/index-modules-similarity.html
"""

from typing import Annotated

from pydantic import Field

from estemplate.entity import NamedEntity, Number, OneOf
from estemplate.models import (
    DFIIndependenceMeasure,
    DFRAfterEffect,
    DFRBasicModel,
    IBDistribution,
    IBLambda,
    Normalization,
)
from estemplate.script import Script


class Similarity(NamedEntity):
    """Base class for similarities, which can be used in Index.similarity"""


class SimilarityBM25(Similarity):
    kind = "BM25"

    k1: Number | None = None
    b: Number | None = None
    discount_overlaps: bool | None = None


class SimilarityDFR(Similarity):
    kind = "DFR"

    basic_model: Annotated[str | None, OneOf(DFRBasicModel)] = None
    after_effect: Annotated[str | None, OneOf(DFRAfterEffect)] = None
    normalization: Annotated[str | None, OneOf(Normalization)] = None


class SimilarityDFI(Similarity):
    kind = "DFI"

    independence_measure: Annotated[str | None, OneOf(DFIIndependenceMeasure)] = None


class SimilarityIB(Similarity):
    kind = "IB"

    distribution: Annotated[str | None, OneOf(IBDistribution)] = None
    lambda_: Annotated[str | None, OneOf(IBLambda), Field(serialization_alias="lambda")] = None
    normalization: Annotated[str | None, OneOf(Normalization)] = None


class SimilarityLMDirichlet(Similarity):
    kind = "LMDirichlet"

    mu: Number | None = None


class SimilarityLMJelinekMercer(Similarity):
    kind = "LMJelinekMercer"

    lambda_: Annotated[Number | None, Field(serialization_alias="lambda")] = None


class SimilarityScripted(Similarity):
    """A similarity defined by a script computing the weight (optional) and the score of a document"""

    kind = "scripted"

    weight_script: Script | None = None
    script: Script | None = None
