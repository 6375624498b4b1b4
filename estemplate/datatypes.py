"""
Field datatypes, used as mapping properties, multi-fields and dynamic template mappings.

See https://www.elastic.co/guide/en/elasticsearch/reference/current/mapping-types.html
"""

from typing import Annotated, Any, Literal

from pydantic import Field

from estemplate.entity import (
    Entity,
    Joined,
    Merged,
    Named,
    NamedEntity,
    Number,
    OneOf,
    Required,
    ScalarStrings,
)
from estemplate.models import (
    GeoOrientation,
    GeoStrategy,
    GeoTree,
    IndexOptions,
    SimilarityName,
    TermVector,
)
from estemplate.util import normalize

######################## DATATYPE OPTIONS #########################


class DateFormat(Entity):
    """A date format, e.g. DateFormat("date_optional_time", strict=True) renders as strict_date_optional_time"""

    format: str = ""
    strict: bool = False

    def __init__(self, format: str | None = None, /, **data: Any):
        if format is not None:
            data["format"] = format
        super().__init__(**data)

    def source(self, include_name: bool = False) -> str:
        return f"strict_{self.format}" if self.strict else self.format


class FielddataFrequencyFilter(Entity):
    """Only load terms into memory whose document frequency falls between min and max"""

    wrap_key = "fielddata_frequency_filter"

    min: Number | None = None
    max: Number | None = None
    min_segment_size: int | None = None

    def __init__(self, min: Number | None = None, max: Number | None = None, /, **data: Any):
        data.update({k: v for k, v in dict(min=min, max=max).items() if v is not None})
        super().__init__(**data)


class IndexPrefixes(Entity):
    """Index term prefixes of min_chars to max_chars characters to speed up prefix searches"""

    wrap_key = "index_prefixes"

    min_chars: int | None = None
    max_chars: int | None = None

    def __init__(self, min_chars: int | None = None, max_chars: int | None = None, /, **data: Any):
        data.update({k: v for k, v in dict(min_chars=min_chars, max_chars=max_chars).items() if v is not None})
        super().__init__(**data)

    def extra_checks(self) -> list[str]:
        invalid = []
        if self.min_chars is None or self.min_chars <= 0:
            invalid.append("min_chars")
        if self.max_chars is not None and self.max_chars > 20:
            invalid.append("max_chars")
        return invalid


class Relation(Entity):
    """A parent/child relation of a join field, rendered as {parent: child} or {parent: [children]}"""

    wrap_key = "relations"

    parent: str = ""
    children: ScalarStrings = []

    def __init__(self, parent: str | None = None, /, *children: str, **data: Any):
        if parent is not None:
            data["parent"] = parent
        if children:
            data["children"] = list(children)
        super().__init__(**data)

    def render_options(self) -> dict[str, Any]:
        if not self.children:
            return {}
        return {self.parent: normalize(self.children)}


######################## DATATYPES #########################


class Datatype(NamedEntity):
    """Base class for all field datatypes. Every datatype can copy its values to other fields."""

    copy_to: ScalarStrings = []


class DatatypeAlias(Datatype):
    kind = "alias"

    path: Annotated[str | None, Required()] = None


class DatatypeBinary(Datatype):
    kind = "binary"

    doc_values: bool | None = None
    store: bool | None = None


class DatatypeBoolean(Datatype):
    kind = "boolean"

    boost: Number | None = None
    doc_values: bool | None = None
    index: bool | None = None
    null_value: bool | None = None
    store: bool | None = None


class _Numeric(Datatype):
    coerce: bool | None = None
    boost: Number | None = None
    doc_values: bool | None = None
    ignore_malformed: bool | None = None
    index: bool | None = None
    null_value: Number | None = None
    store: bool | None = None


class DatatypeByte(_Numeric):
    kind = "byte"


class DatatypeShort(_Numeric):
    kind = "short"


class DatatypeInteger(_Numeric):
    kind = "integer"


class DatatypeLong(_Numeric):
    kind = "long"


class DatatypeFloat(_Numeric):
    kind = "float"


class DatatypeHalfFloat(_Numeric):
    kind = "half_float"


class DatatypeDouble(_Numeric):
    kind = "double"


class DatatypeScaledFloat(_Numeric):
    kind = "scaled_float"

    scaling_factor: Annotated[Number | None, Required()] = None


class DatatypeCompletion(Datatype):
    kind = "completion"

    analyzer: str | None = None
    search_analyzer: str | None = None
    preserve_separators: bool | None = None
    preserve_position_increments: bool | None = None
    max_input_length: int | None = None


class DatatypeDate(Datatype):
    """
    A date field. Formats given as DateFormat objects are joined with "||",
    a raw format string (e.g. "yyyy-MM-dd||epoch_millis") takes precedence.
    """

    kind = "date"

    boost: Number | None = None
    doc_values: bool | None = None
    format: Annotated[list[DateFormat], Joined("||")] = []
    raw_format: Annotated[str | None, Field(serialization_alias="format")] = None
    locale: str | None = None
    ignore_malformed: bool | None = None
    index: bool | None = None
    null_value: str | None = None
    store: bool | None = None


class DatatypeDateNanoseconds(DatatypeDate):
    kind = "date_nanos"


class _Range(Datatype):
    coerce: bool | None = None
    boost: Number | None = None
    index: bool | None = None
    store: bool | None = None


class DatatypeIntegerRange(_Range):
    kind = "integer_range"


class DatatypeFloatRange(_Range):
    kind = "float_range"


class DatatypeLongRange(_Range):
    kind = "long_range"


class DatatypeDoubleRange(_Range):
    kind = "double_range"


class DatatypeDateRange(_Range):
    kind = "date_range"


class DatatypeIPRange(_Range):
    kind = "ip_range"


class DatatypeDenseVector(Datatype):
    kind = "dense_vector"

    dims: Annotated[int | None, Required()] = None


class DatatypeFlattened(Datatype):
    kind = "flattened"

    boost: Number | None = None
    depth_limit: int | None = None
    doc_values: bool | None = None
    eager_global_ordinals: bool | None = None
    ignore_above: int | None = None
    index: bool | None = None
    index_options: Annotated[str | None, OneOf(IndexOptions)] = None
    null_value: str | None = None
    similarity: Annotated[str | None, OneOf(SimilarityName)] = None
    split_queries_on_whitespace: bool | None = None


class DatatypeGeoPoint(Datatype):
    kind = "geo_point"

    ignore_malformed: bool | None = None
    ignore_z_value: bool | None = None
    null_value: Any = None


class DatatypeGeoShape(Datatype):
    kind = "geo_shape"

    tree: Annotated[str | None, OneOf(GeoTree)] = None
    precision: str | None = None
    tree_levels: str | None = None
    strategy: Annotated[str | None, OneOf(GeoStrategy)] = None
    distance_error_pct: Number | None = None
    orientation: Annotated[str | None, OneOf(GeoOrientation)] = None
    points_only: bool | None = None
    ignore_malformed: bool | None = None
    ignore_z_value: bool | None = None
    coerce: bool | None = None


class DatatypeIP(Datatype):
    kind = "ip"

    boost: Number | None = None
    doc_values: bool | None = None
    index: bool | None = None
    null_value: str | None = None
    store: bool | None = None


class DatatypeJoin(Datatype):
    """Parent/child relations within documents of the same index"""

    kind = "join"

    relations: Annotated[list[Relation], Merged(), Required()] = []
    eager_global_ordinals: bool | None = None

    def add_relation(self, parent: str, *children: str) -> "DatatypeJoin":
        return self.add("relations", Relation(parent, *children))


class DatatypeKeyword(Datatype):
    kind = "keyword"

    boost: Number | None = None
    doc_values: bool | None = None
    eager_global_ordinals: bool | None = None
    fields: Annotated[list[Datatype], Named()] = []
    ignore_above: int | None = None
    index: bool | None = None
    index_options: Annotated[str | None, OneOf(IndexOptions)] = None
    norms: bool | None = None
    null_value: str | None = None
    store: bool | None = None
    similarity: Annotated[str | None, OneOf(SimilarityName)] = None
    normalizer: str | None = None
    split_queries_on_whitespace: bool | None = None


class DatatypeAnnotatedText(Datatype):
    kind = "annotated_text"


class DatatypeMurmur3(Datatype):
    kind = "murmur3"


class DatatypeNested(Datatype):
    kind = "nested"

    dynamic: bool | Literal["strict"] | None = None
    properties: Annotated[list[Datatype], Named()] = []


class DatatypeObject(Datatype):
    kind = "object"

    dynamic: bool | Literal["strict"] | None = None
    enabled: bool | None = None
    properties: Annotated[list[Datatype], Named()] = []


class DatatypePercolator(Datatype):
    kind = "percolator"


class DatatypeRankFeature(Datatype):
    kind = "rank_feature"

    positive_score_impact: bool | None = None


class DatatypeRankFeatures(Datatype):
    kind = "rank_features"


class DatatypeSearchAsYouType(Datatype):
    kind = "search_as_you_type"

    max_shingle_size: int | None = None
    analyzer: str | None = None
    index: bool | None = None
    index_options: Annotated[str | None, OneOf(IndexOptions)] = None
    norms: bool | None = None
    store: bool | None = None
    search_analyzer: str | None = None
    search_quote_analyzer: str | None = None
    similarity: Annotated[str | None, OneOf(SimilarityName)] = None
    term_vector: Annotated[str | None, OneOf(TermVector)] = None

    def extra_checks(self) -> list[str]:
        if self.max_shingle_size is not None and not 2 <= self.max_shingle_size <= 4:
            return ["max_shingle_size"]
        return []


class DatatypeShape(Datatype):
    kind = "shape"

    orientation: Annotated[str | None, OneOf(GeoOrientation)] = None
    ignore_malformed: bool | None = None
    ignore_z_value: bool | None = None
    coerce: bool | None = None


class DatatypeSparseVector(Datatype):
    kind = "sparse_vector"


class DatatypeText(Datatype):
    kind = "text"

    analyzer: str | None = None
    boost: Number | None = None
    eager_global_ordinals: bool | None = None
    fielddata: bool | None = None
    fielddata_frequency_filter: FielddataFrequencyFilter | None = None
    fields: Annotated[list[Datatype], Named()] = []
    index: bool | None = None
    index_options: Annotated[str | None, OneOf(IndexOptions)] = None
    index_prefixes: IndexPrefixes | None = None
    index_phrases: bool | None = None
    norms: bool | None = None
    position_increment_gap: int | None = None
    store: bool | None = None
    search_analyzer: str | None = None
    search_quote_analyzer: str | None = None
    similarity: Annotated[str | None, OneOf(SimilarityName)] = None
    term_vector: Annotated[str | None, OneOf(TermVector)] = None

    def extra_checks(self) -> list[str]:
        # the frequency filter only applies to in-memory fielddata
        if self.fielddata_frequency_filter is not None and not self.fielddata:
            return ["fielddata_frequency_filter"]
        return []


class DatatypeTokenCount(Datatype):
    kind = "token_count"

    analyzer: str | None = None
    enable_position_increments: bool | None = None
    boost: Number | None = None
    doc_values: bool | None = None
    index: bool | None = None
    null_value: Number | None = None
    store: bool | None = None


def _concrete(cls: type[Datatype]) -> list[type[Datatype]]:
    result = [cls] if cls.kind else []
    for sub in cls.__subclasses__():
        result += _concrete(sub)
    return result


# datatype class per type name, e.g. DATATYPES["keyword"] is DatatypeKeyword
DATATYPES: dict[str, type[Datatype]] = {cls.kind: cls for cls in _concrete(Datatype) if cls.kind}
