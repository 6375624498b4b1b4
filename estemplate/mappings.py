"""
Mappings define how documents and their fields are stored and indexed.

See https://www.elastic.co/guide/en/elasticsearch/reference/current/mapping.html
"""

from typing import Annotated

from pydantic import Field

from estemplate.datatypes import Datatype, DateFormat
from estemplate.entity import Entity, Named, NamedEntity, Wrapped
from estemplate.meta_fields import (
    MetaFieldFieldNames,
    MetaFieldMeta,
    MetaFieldRouting,
    MetaFieldSize,
    MetaFieldSource,
)


class DynamicTemplate(NamedEntity):
    """
    Custom mapping applied to dynamically added fields, selected on the detected datatype
    (match_mapping_type), the field name (match, unmatch, match_pattern) or the full dotted path
    (path_match, path_unmatch).
    """

    match_mapping_type: str | None = None
    match_pattern: str | None = None
    match: str | None = None
    unmatch: str | None = None
    path_match: str | None = None
    path_unmatch: str | None = None
    mapping: Datatype | None = None


class Mappings(Entity):
    wrap_key = "mappings"

    dynamic_templates: Annotated[list[DynamicTemplate], Wrapped()] = []
    date_detection: bool | None = None
    dynamic_date_formats: list[DateFormat] = []
    numeric_detection: bool | None = None
    meta_source: Annotated[MetaFieldSource | None, Field(serialization_alias="_source")] = None
    size: Annotated[MetaFieldSize | None, Field(serialization_alias="_size")] = None
    field_names: Annotated[MetaFieldFieldNames | None, Field(serialization_alias="_field_names")] = None
    routing: Annotated[MetaFieldRouting | None, Field(serialization_alias="_routing")] = None
    meta: Annotated[MetaFieldMeta | None, Field(serialization_alias="_meta")] = None
    properties: Annotated[list[Datatype], Named()] = []

    def field(self, *properties: Datatype) -> "Mappings":
        """Add one or more fields to the mapping properties"""
        return self.add("properties", *properties)
