"""
Meta fields customize how a document's metadata (e.g. _source or _routing) is treated.

See https://www.elastic.co/guide/en/elasticsearch/reference/current/mapping-fields.html
"""

import json
from typing import Any

from pydantic import BaseModel

from estemplate.entity import Entity, Strings
from estemplate.errors import RenderError


class MetaFieldSource(Entity):
    wrap_key = "_source"

    enabled: bool | None = None
    includes: Strings = []
    excludes: Strings = []


class MetaFieldSize(Entity):
    wrap_key = "_size"

    enabled: bool | None = None


class MetaFieldFieldNames(Entity):
    wrap_key = "_field_names"

    enabled: bool | None = None


class MetaFieldRouting(Entity):
    wrap_key = "_routing"

    required: bool | None = None


class MetaFieldMeta(Entity):
    """
    Custom application specific metadata, given as a (json serializable) value or as raw json text.
    The raw json takes precedence. Either way the result needs to be a json object.
    """

    wrap_key = "_meta"

    value: Any = None
    raw_json: str = ""

    def render_options(self) -> dict[str, Any]:
        if self.raw_json:
            try:
                options = json.loads(self.raw_json)
            except json.JSONDecodeError as e:
                raise RenderError(f"Invalid _meta json: {e}") from e
        elif self.value is None:
            return {}
        elif isinstance(self.value, BaseModel):
            options = self.value.model_dump(mode="json", by_alias=True)
        else:
            try:
                options = json.loads(json.dumps(self.value))
            except (TypeError, ValueError) as e:
                raise RenderError(f"Cannot serialize _meta value: {e}") from e
        if not isinstance(options, dict):
            raise RenderError(f"_meta should be a json object, not {type(options).__name__}")
        return options
