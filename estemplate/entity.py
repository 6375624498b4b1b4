"""
The render contract shared by every template building block.

An Entity is a pydantic model where every option is optional: None (or an empty list) means
"not set" and is left out of the rendered source, anything else (including False, 0 and "")
is rendered under its wire key. The wire key is the field name, unless the field declares a
serialization_alias (e.g. "shard.check_on_startup").

How a field is rendered is declared with markers in its Annotated metadata:

- ScalarOrList: repeatable attribute, rendered as a bare value if there is exactly one value
- Joined: values joined by a separator (e.g. regex flags joined by "|")
- Named: list of entities, rendered as a mapping keyed by each child's name
- Slot: single entity, rendered under a fixed key in the same mapping as a Named list
- Wrapped: entity (or list of entities) rendered including its name (e.g. dynamic_templates)
- Merged: list of entities whose rendered mappings are merged into one mapping
- Prefixed: list of entities whose rendered keys are merged into the parent with a dotted prefix

Validation is a separate opt-in step (Entity.check), it is never triggered by rendering.
Markers used by check:

- Required: field needs to be set
- OneOf: field value (or every value in a list) needs to be in a fixed set of literals
"""

import copy
from typing import Annotated, Any, ClassVar, Iterable, get_args

from pydantic import BaseModel, BeforeValidator, ConfigDict
from typing_extensions import Self

from estemplate.errors import InvalidEntityError, RenderError
from estemplate.util import as_list, dumps, merge_prefixed, normalize


class ScalarOrList:
    pass


class Named:
    pass


class Wrapped:
    pass


class Merged:
    pass


class Required:
    pass


class Slot:
    def __init__(self, key: str):
        self.key = key


class Joined:
    def __init__(self, separator: str):
        self.separator = separator


class Prefixed:
    def __init__(self, prefix: str):
        self.prefix = prefix


class OneOf:
    """Restrict a field to the values of a Literal type (or to the given values)"""

    def __init__(self, *options: Any):
        allowed: set[Any] = set()
        for option in options:
            allowed.update(get_args(option) or (option,))
        self.allowed = frozenset(allowed)

    def accepts(self, value: Any) -> bool:
        if isinstance(value, list):
            return all(v in self.allowed for v in value)
        return value in self.allowed


# ints are kept as ints (pydantic would turn 2 into 2.0 for a plain float field)
Number = int | float
# a list of strings that also accepts a single string
Strings = Annotated[list[str], BeforeValidator(as_list)]
# a repeatable attribute, rendered as a bare string if it holds exactly one value
ScalarStrings = Annotated[list[str], BeforeValidator(as_list), ScalarOrList()]


def is_unset(value: Any) -> bool:
    return value is None or (isinstance(value, (list, dict)) and len(value) == 0)


def _marker(metadata: Iterable[Any], cls: type) -> Any:
    for item in metadata:
        if isinstance(item, cls):
            return item
    return None


def _render(value: Any) -> Any:
    if isinstance(value, Entity):
        return value.source(include_name=False)
    return value


class Entity(BaseModel):
    """Base class for all template entities. Subclasses declare their options as (optional) fields."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    # literal "type" emitted by this kind of entity, if any
    kind: ClassVar[str | None] = None
    # other literals emitted by every entity of this kind
    constants: ClassVar[dict[str, Any]] = {}
    # fixed key used by source(include_name=True); named entities use their name instead
    wrap_key: ClassVar[str] = ""
    # groups of fields of which at least one needs to be set (checked by check())
    alternatives: ClassVar[list[tuple[str, ...]]] = []

    def set(self, **options: Any) -> Self:
        """Set one or more options, returning this entity for chaining"""
        for field, value in options.items():
            setattr(self, field, value)
        return self

    def add(self, field: str, *values: Any) -> Self:
        """Append values to a list option, returning this entity for chaining"""
        setattr(self, field, [*getattr(self, field), *values])
        return self

    def wrapper(self) -> str:
        return self.wrap_key

    def render_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {}
        if self.kind is not None:
            options["type"] = self.kind
        options.update(self.constants)
        for field, info in type(self).model_fields.items():
            if field == "name":
                continue
            value = getattr(self, field)
            if is_unset(value):
                continue
            key = info.serialization_alias or field
            self._render_field(options, key, value, info.metadata)
        return options

    @staticmethod
    def _render_field(options: dict[str, Any], key: str, value: Any, metadata: list[Any]) -> None:
        if isinstance(value, list):
            if prefixed := _marker(metadata, Prefixed):
                for child in value:
                    merge_prefixed(options, prefixed.prefix, _render(child))
            elif _marker(metadata, Named):
                named = options.setdefault(key, {})
                for child in value:
                    named[child.name] = _render(child)
            elif _marker(metadata, Merged):
                merged = options.setdefault(key, {})
                for child in value:
                    rendered = _render(child)
                    if not isinstance(rendered, dict):
                        raise RenderError(f"Cannot merge {type(child).__name__} into {key!r}, expected a mapping")
                    merged.update(rendered)
            elif _marker(metadata, Wrapped):
                options[key] = [child.source(include_name=True) for child in value]
            else:
                rendered = [_render(v) for v in value]
                if joined := _marker(metadata, Joined):
                    options[key] = joined.separator.join(rendered)
                elif _marker(metadata, ScalarOrList):
                    options[key] = normalize(rendered)
                else:
                    options[key] = rendered
        elif isinstance(value, Entity):
            rendered = value.source(include_name=True) if _marker(metadata, Wrapped) else _render(value)
            if slot := _marker(metadata, Slot):
                options.setdefault(key, {})[slot.key] = rendered
            else:
                options[key] = rendered
        else:
            # rendered output never shares containers with the entity
            options[key] = copy.deepcopy(value)

    def source(self, include_name: bool = False) -> Any:
        """
        Render this entity to a json-serializable value.
        If include_name is True, the options are wrapped in a mapping keyed by the entity's name
        (or the fixed key for unnamed entities such as "index" or "mappings")
        """
        options = self.render_options()
        if not include_name:
            return options
        return {self.wrapper(): options}

    def to_json(self, include_name: bool = False, **kwargs: Any) -> str:
        return dumps(self.source(include_name), **kwargs)

    def invalid_fields(self, include_name: bool = False) -> list[str]:
        """List the names of all missing or invalid fields (see check)"""
        invalid: list[str] = []
        if include_name and "name" in type(self).model_fields and not getattr(self, "name"):
            invalid.append("name")
        for field, info in type(self).model_fields.items():
            value = getattr(self, field)
            missing = is_unset(value) or value == ""
            one_of = _marker(info.metadata, OneOf)
            if _marker(info.metadata, Required) and missing:
                invalid.append(field)
            elif one_of and not missing and not one_of.accepts(value):
                invalid.append(field)
        for fields in self.alternatives:
            if all(is_unset(getattr(self, f)) for f in fields):
                invalid.append(" || ".join(fields))
        invalid.extend(self.extra_checks())
        return invalid

    def extra_checks(self) -> list[str]:
        """Hook for entity specific checks, returns a list of invalid field names"""
        return []

    def check(self, include_name: bool = False) -> None:
        """
        Validate this entity. This is never done automatically when rendering.

        Raises:
            InvalidEntityError: listing all missing or invalid fields
        """
        if invalid := self.invalid_fields(include_name):
            raise InvalidEntityError(invalid)


class NamedEntity(Entity):
    """An entity that is referred to by name, e.g. an analyzer or a field in the mapping"""

    name: str = ""

    def __init__(self, name: str = "", /, **data: Any):
        if name:
            data["name"] = name
        super().__init__(**data)

    def wrapper(self) -> str:
        return self.name
