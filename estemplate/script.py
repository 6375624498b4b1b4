from typing import Annotated, Any

from pydantic import Field

from estemplate.entity import Entity, OneOf
from estemplate.models import ScriptLanguage


class Script(Entity):
    """A stored (id) or inline (source) script, used by scripted similarities and script token filters"""

    wrap_key = "script"
    alternatives = [("script_source", "id")]

    lang: Annotated[str | None, OneOf(ScriptLanguage)] = None
    script_source: Annotated[str | None, Field(serialization_alias="source")] = None
    id: str | None = None
    params: dict[str, Any] = {}

    def __init__(self, script_source: str | None = None, /, **data: Any):
        if script_source is not None:
            data["script_source"] = script_source
        super().__init__(**data)

    def param(self, key: str, value: Any) -> "Script":
        return self.set(params={**self.params, key: value})
