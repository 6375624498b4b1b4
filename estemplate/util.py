import importlib
import json
from typing import Any, Iterable, Mapping, Sequence

from pydantic import BaseModel

from estemplate.config import get_settings
from estemplate.errors import RenderError


def normalize(values: Sequence[Any]) -> Any:
    """
    Render a repeatable attribute: None (absent) if there are no values,
    the bare value if there is exactly one, and a list otherwise
    """
    if len(values) == 0:
        return None
    if len(values) == 1:
        return values[0]
    return list(values)


def merge_prefixed(target: dict[str, Any], prefix: str, mapping: Any) -> None:
    """
    Copy every key of mapping into target, prepending the dotted prefix.
    Only the top level is prefixed, values are copied as is.
    """
    if not isinstance(mapping, Mapping):
        raise RenderError(f"Cannot merge {type(mapping).__name__} under {prefix!r}, expected a mapping")
    for key, value in mapping.items():
        target[f"{prefix}.{key}"] = value


def as_list(value: Any) -> Any:
    """Accept a single value wherever a list of values is expected"""
    if value is None:
        return []
    if isinstance(value, (str, bytes, BaseModel)) or not isinstance(value, Iterable):
        return [value]
    return list(value)


def dumps(source: Any, **kwargs) -> str:
    """Dump a rendered source to json using the configured output settings"""
    settings = get_settings()
    options: dict[str, Any] = dict(
        sort_keys=settings.sort_keys,
        ensure_ascii=settings.ensure_ascii,
        indent=settings.indent,
    )
    options.update(kwargs)
    if options["indent"] is None:
        options.setdefault("separators", (",", ":"))
    return json.dumps(source, **options)


def import_target(target: str) -> Any:
    """
    Import an object given as module:attribute (e.g. myproject.templates:LOGS_TEMPLATE).
    The attribute can be a dotted path within the module.
    """
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise ValueError(f"Cannot parse target {target!r}, use module:attribute")
    obj = importlib.import_module(module_name)
    for part in attribute.split("."):
        obj = getattr(obj, part)
    return obj
