from typing import Any

from estemplate.entity import Entity, Strings


class MappingRule(Entity):
    """
    A `key => value` rule as used by mapping character filters, synonym filters and stemmer overrides.
    Multiple keys or values are joined with ", ", e.g. "i-pod, i pod => ipod".
    A rule with only keys (or only values) renders as just that side, e.g. "universe, cosmos".
    """

    key: Strings = []
    value: Strings = []

    def __init__(self, key: Any = None, value: Any = None, /, **data: Any):
        if key is not None:
            data["key"] = key
        if value is not None:
            data["value"] = value
        super().__init__(**data)

    def add_key(self, *keys: str) -> "MappingRule":
        return self.add("key", *keys)

    def add_value(self, *values: str) -> "MappingRule":
        return self.add("value", *values)

    def source(self, include_name: bool = False) -> str:
        key = ", ".join(k for k in self.key if k)
        value = ", ".join(v for v in self.value if v)
        if key and value:
            return f"{key} => {value}"
        return key or value
