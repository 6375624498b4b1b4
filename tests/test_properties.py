import datetime
from typing import Annotated, Any, Optional

import pytest
from pydantic import BaseModel

from estemplate.datatypes import Datatype, DatatypeKeyword, DatatypeNested, DatatypeObject, DatatypeText
from estemplate.mappings import Mappings
from estemplate.properties import ESField, infer_type, properties_from_model, to_properties


class Comment(BaseModel):
    text: Annotated[str, ESField()]
    votes: Annotated[int, ESField()] = 0


class Author(BaseModel):
    name: Annotated[str, ESField(type="keyword")]
    comments: Annotated[list[Comment], ESField()] = []


class Article(BaseModel):
    title: Annotated[str, ESField()]
    url: Annotated[str, ESField("link", "keyword")]
    published: Annotated[Optional[datetime.datetime], ESField()] = None
    score: Annotated[float | None, ESField()] = None
    draft: Annotated[bool, ESField()] = False
    tags: Annotated[list[str], ESField()] = []
    extra: Annotated[dict[str, Any], ESField()] = {}
    author: Annotated[Author | None, ESField()] = None
    comments: Annotated[list[Comment], ESField()] = []
    internal: str = ""


def test_infer_type():
    assert infer_type(str) == "text"
    assert infer_type(int) == "integer"
    assert infer_type(bool) == "boolean"
    assert infer_type(float) == "float"
    assert infer_type(datetime.date) == "date"
    assert infer_type(datetime.datetime) == "date"
    assert infer_type(Optional[int]) == "integer"
    assert infer_type(list[str]) == "text"
    assert infer_type(dict[str, int]) == "object"
    assert infer_type(Author) == "object"
    assert infer_type(list[Author]) == "nested"
    assert infer_type(int | str) is None
    assert infer_type(bytes) is None


def test_properties_from_model():
    properties = to_properties(properties_from_model(Article))
    assert properties == {
        "title": {"type": "text"},
        "link": {"type": "keyword"},
        "published": {"type": "date"},
        "score": {"type": "float"},
        "draft": {"type": "boolean"},
        "tags": {"type": "text"},
        "extra": {"type": "object"},
        "author": {"type": "object", "properties": {"name": {"type": "keyword"}}},
        "comments": {
            "type": "nested",
            "properties": {"text": {"type": "text"}, "votes": {"type": "integer"}},
        },
    }


def test_datatype_classes():
    """Each property is an instance of the datatype class, named by the field"""
    datatypes = {d.name: d for d in properties_from_model(Article)}
    assert isinstance(datatypes["title"], DatatypeText)
    assert isinstance(datatypes["link"], DatatypeKeyword)
    assert isinstance(datatypes["author"], DatatypeObject)
    assert isinstance(datatypes["comments"], DatatypeNested)


def test_nested_limit():
    """Object and nested fields deeper than the limit are left out"""
    properties = to_properties(properties_from_model(Article, nested_limit=2))
    assert properties["author"]["properties"]["comments"]["properties"]["votes"] == {"type": "integer"}
    properties = to_properties(properties_from_model(Article, nested_limit=0))
    assert "author" not in properties
    assert "comments" not in properties
    assert properties["title"] == {"type": "text"}


def test_builder():
    """The builder can customize every generated datatype"""
    calls = []

    def builder(name: str, nested_count: int, type: str, datatype: Datatype) -> Datatype:
        calls.append((name, nested_count, type))
        if type == "text":
            datatype.set(analyzer="english")
        return datatype

    properties = to_properties(properties_from_model(Comment, builder=builder))
    assert properties == {"text": {"type": "text", "analyzer": "english"}, "votes": {"type": "integer"}}
    assert calls == [("text", 0, "text"), ("votes", 0, "integer")]
    properties_from_model(Author, builder=builder)
    assert ("text", 1, "text") in calls
    assert ("comments", 0, "nested") in calls


def test_type_aliases():
    class Doc(BaseModel):
        created: Annotated[str, ESField(type="date_nanoseconds")]
        hash: Annotated[str, ESField(type="mapper_murmur3")]

    assert to_properties(properties_from_model(Doc)) == {"created": {"type": "date_nanos"}, "hash": {"type": "murmur3"}}


def test_unknown_types():
    class Unknown(BaseModel):
        data: Annotated[bytes, ESField()]
        either: Annotated[int | str, ESField()]
        title: Annotated[str, ESField()]

    # fields of which the type cannot be inferred are skipped
    assert to_properties(properties_from_model(Unknown)) == {"title": {"type": "text"}}

    class Invalid(BaseModel):
        title: Annotated[str, ESField(type="string")]

    with pytest.raises(ValueError):
        properties_from_model(Invalid)


def test_builder_drops_fields():
    """Fields for which the builder returns None are left out"""

    def builder(name: str, nested_count: int, type: str, datatype: Datatype) -> Datatype | None:
        return None if name == "votes" else datatype

    datatypes = properties_from_model(Comment, builder=builder)
    assert [d.name for d in datatypes] == ["text"]
    assert Mappings(properties=datatypes).source() == {"properties": {"text": {"type": "text"}}}
