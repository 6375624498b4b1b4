import pytest

from estemplate.datatypes import (
    DATATYPES,
    DatatypeAlias,
    DatatypeDate,
    DatatypeDateNanoseconds,
    DatatypeJoin,
    DatatypeKeyword,
    DatatypeLong,
    DatatypeObject,
    DatatypeScaledFloat,
    DatatypeSearchAsYouType,
    DatatypeText,
    DateFormat,
    FielddataFrequencyFilter,
    IndexPrefixes,
    Relation,
)
from estemplate.errors import InvalidEntityError


def test_text():
    assert DatatypeText("test", index=True).to_json(include_name=True) == '{"test":{"index":true,"type":"text"}}'
    t = DatatypeText("test", index=True, fields=[DatatypeText("english", analyzer="english")])
    assert t.to_json(include_name=True) == (
        '{"test":{"fields":{"english":{"analyzer":"english","type":"text"}},"index":true,"type":"text"}}'
    )
    t = DatatypeText("test", index=True, analyzer="standard", fielddata_frequency_filter=FielddataFrequencyFilter(0.001, 0.1))
    assert t.to_json() == (
        '{"analyzer":"standard","fielddata_frequency_filter":{"max":0.1,"min":0.001},"index":true,"type":"text"}'
    )
    t = DatatypeText("test", index_prefixes=IndexPrefixes(2, 5), copy_to="all_text")
    assert t.source() == {"type": "text", "copy_to": "all_text", "index_prefixes": {"min_chars": 2, "max_chars": 5}}


def test_text_checks():
    """The frequency filter needs fielddata, index prefixes need sensible lengths"""
    t = DatatypeText("test", fielddata_frequency_filter=FielddataFrequencyFilter(0.001, 0.1, min_segment_size=500))
    with pytest.raises(InvalidEntityError) as e:
        t.check()
    assert e.value.fields == ["fielddata_frequency_filter"]
    t.set(fielddata=True).check()
    with pytest.raises(InvalidEntityError) as e:
        DatatypeText("test", term_vector="sometimes", similarity="BM25").check()
    assert e.value.fields == ["term_vector"]
    IndexPrefixes(1, 20).check()
    with pytest.raises(InvalidEntityError) as e:
        IndexPrefixes(0, 21).check()
    assert e.value.fields == ["min_chars", "max_chars"]


def test_keyword():
    k = DatatypeKeyword("test", index=True, fields=[DatatypeKeyword("keyword")])
    assert k.to_json(include_name=True) == '{"test":{"fields":{"keyword":{"type":"keyword"}},"index":true,"type":"keyword"}}'
    assert DatatypeKeyword("test", index=True, normalizer="my_normalizer").to_json() == (
        '{"index":true,"normalizer":"my_normalizer","type":"keyword"}'
    )


def test_object():
    o = DatatypeObject("test", enabled=True).add("properties", DatatypeObject("inner", dynamic=True))
    assert o.to_json(include_name=True) == (
        '{"test":{"enabled":true,"properties":{"inner":{"dynamic":true,"type":"object"}},"type":"object"}}'
    )
    assert DatatypeObject("test", dynamic="strict").to_json() == '{"dynamic":"strict","type":"object"}'


def test_date_format():
    assert DateFormat("date_optional_time", strict=True).source() == "strict_date_optional_time"
    assert DateFormat("epoch_millis").source(include_name=True) == "epoch_millis"


def test_date():
    d = DatatypeDate("test", format=[DateFormat("date_optional_time", strict=True), DateFormat("epoch_millis")])
    assert d.to_json(include_name=True) == '{"test":{"format":"strict_date_optional_time||epoch_millis","type":"date"}}'
    d = DatatypeDate("test", format=[DateFormat("epoch_millis")], raw_format="strict_date_optional_time||epoch_millis")
    d.set(ignore_malformed=True)
    assert d.to_json() == '{"format":"strict_date_optional_time||epoch_millis","ignore_malformed":true,"type":"date"}'
    d = DatatypeDateNanoseconds("test", format=[DateFormat("strict_date_optional_time_nanos")])
    assert d.source() == {"type": "date_nanos", "format": "strict_date_optional_time_nanos"}


def test_join():
    assert DatatypeJoin("test", eager_global_ordinals=True).to_json(include_name=True) == (
        '{"test":{"eager_global_ordinals":true,"type":"join"}}'
    )
    j = DatatypeJoin("test").add_relation("parent", "children")
    assert j.to_json(include_name=True) == '{"test":{"relations":{"parent":"children"},"type":"join"}}'
    j = DatatypeJoin("test", relations=[Relation("parent_1", "children_1", "children_2")])
    j.add("relations", Relation("children_1").add("children", "children_3"))
    assert j.to_json() == '{"relations":{"children_1":"children_3","parent_1":["children_1","children_2"]},"type":"join"}'
    with pytest.raises(InvalidEntityError) as e:
        DatatypeJoin("test").check()
    assert e.value.fields == ["relations"]


def test_relation():
    """A relation without children renders as an empty mapping"""
    assert Relation("parent").source() == {}
    assert Relation("parent", "child").source(include_name=True) == {"relations": {"parent": "child"}}


def test_required_options():
    with pytest.raises(InvalidEntityError) as e:
        DatatypeAlias("test").check(include_name=True)
    assert e.value.fields == ["path"]
    DatatypeAlias("route", path="distance").check(include_name=True)
    with pytest.raises(InvalidEntityError) as e:
        DatatypeScaledFloat().check(include_name=True)
    assert e.value.fields == ["name", "scaling_factor"]


def test_numbers():
    """Integer values stay integers, also for options that accept floats"""
    assert DatatypeScaledFloat("price", scaling_factor=100).to_json() == '{"scaling_factor":100,"type":"scaled_float"}'
    assert DatatypeLong("count", null_value=0, boost=1.5).to_json() == '{"boost":1.5,"null_value":0,"type":"long"}'


def test_search_as_you_type():
    DatatypeSearchAsYouType("test", max_shingle_size=3).check()
    with pytest.raises(InvalidEntityError) as e:
        DatatypeSearchAsYouType("test", max_shingle_size=5).check()
    assert e.value.fields == ["max_shingle_size"]


def test_datatypes_registry():
    assert DATATYPES["keyword"] is DatatypeKeyword
    assert DATATYPES["date_nanos"] is DatatypeDateNanoseconds
    assert DATATYPES["scaled_float"] is DatatypeScaledFloat
    assert "" not in DATATYPES
    for kind, cls in DATATYPES.items():
        assert cls("test").source()["type"] == kind
