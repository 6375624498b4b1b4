"""
Generate mapping properties from (pydantic) document models.

Only fields annotated with an ESField marker are included:

    class Article(BaseModel):
        title: Annotated[str, ESField()]                     # text, inferred from str
        url: Annotated[str, ESField("link", "keyword")]      # keyword named link
        authors: Annotated[list[Author], ESField()]          # nested, recursing into Author
        internal: str                                        # skipped

    properties_from_model(Article)
"""

import datetime
import inspect
import logging
import types
from typing import Any, Callable, Union, get_args, get_origin

from pydantic import BaseModel

from estemplate.datatypes import DATATYPES, Datatype

# datatype names that are accepted as alternative spelling
TYPE_ALIASES = {"date_nanoseconds": "date_nanos", "mapper_murmur3": "murmur3", "mapper_annotated_text": "annotated_text"}

Builder = Callable[[str, int, str, Datatype], Datatype | None]


class ESField:
    """Marker for model fields that should be included in the mapping, optionally with explicit name and type"""

    def __init__(self, name: str | None = None, type: str | None = None):
        self.name = name
        self.type = type


def default_builder(name: str, nested_count: int, type: str, datatype: Datatype) -> Datatype:
    return datatype


def _unwrap(annotation: Any) -> tuple[Any, bool]:
    """Strip Optional and sequence types, returning the element type and whether it is a list of models"""
    origin = get_origin(annotation)
    if origin in (Union, types.UnionType):
        args = [a for a in get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return _unwrap(args[0])
        return annotation, False
    if origin in (list, set, tuple, frozenset):
        args = [a for a in get_args(annotation) if a is not Ellipsis]
        if not args:
            return Any, False
        element, _ = _unwrap(args[0])
        return element, _is_model(element)
    return annotation, False


def _is_model(annotation: Any) -> bool:
    return inspect.isclass(annotation) and issubclass(annotation, BaseModel)


def infer_type(annotation: Any) -> str | None:
    """Guess the datatype name for a python type annotation, or None if it cannot be guessed"""
    element, is_nested = _unwrap(annotation)
    if is_nested:
        return "nested"
    if get_origin(element) is dict or element is dict or _is_model(element):
        return "object"
    if not inspect.isclass(element):
        return None
    # bool is a subclass of int, and datetime of date
    if issubclass(element, bool):
        return "boolean"
    if issubclass(element, int):
        return "integer"
    if issubclass(element, float):
        return "float"
    if issubclass(element, str):
        return "text"
    if issubclass(element, datetime.date):
        return "date"
    return None


def properties_from_model(model: type[BaseModel], nested_limit: int = 1, builder: Builder | None = None) -> list[Datatype]:
    """
    Create a datatype for each ESField of the model. Object and nested fields are recursed into
    (as long as the nesting depth is below nested_limit, otherwise they are left out).
    The builder is called for every datatype, and can be used to customize (or replace) it.
    Fields for which the builder returns None are left out.

    Raises:
        ValueError: for unknown explicit datatype names
    """
    return _generate(model, 0, nested_limit, builder or default_builder)


def _generate(model: type[BaseModel], nested_count: int, nested_limit: int, builder: Builder) -> list[Datatype]:
    datatypes = []
    for field, info in model.model_fields.items():
        marker = next((m for m in info.metadata if isinstance(m, ESField)), None)
        if marker is None:
            continue
        name = marker.name or field
        if marker.type:
            kind = TYPE_ALIASES.get(marker.type, marker.type)
            if kind not in DATATYPES:
                raise ValueError(f"Undefined datatype {marker.type!r} for field {field!r}")
        else:
            kind = infer_type(info.annotation)
            if kind is None:
                logging.debug(f"Skipping field {field!r}: cannot infer datatype from {info.annotation}")
                continue
        datatype = DATATYPES[kind](name)
        if kind in ("object", "nested"):
            if nested_count >= nested_limit:
                logging.debug(f"Skipping field {field!r}: nesting deeper than {nested_limit}")
                continue
            element, _ = _unwrap(info.annotation)
            if _is_model(element):
                datatype.set(properties=_generate(element, nested_count + 1, nested_limit, builder))
        if (built := builder(name, nested_count, kind, datatype)) is not None:
            datatypes.append(built)
    return datatypes


def to_properties(datatypes: list[Datatype]) -> dict[str, Any]:
    """Render a list of datatypes as mapping properties, i.e. {name: datatype}"""
    return {datatype.name: datatype.source() for datatype in datatypes}
