"""
The index template: settings and mappings applied to every new index matching one of the patterns.

See https://www.elastic.co/guide/en/elasticsearch/reference/current/indices-templates.html
"""

from typing import Annotated, Any

from estemplate.entity import NamedEntity, Required, Strings, Wrapped
from estemplate.index import Index
from estemplate.mappings import Mappings


class IndexTemplate(NamedEntity):
    """
    An index template. The name is only used when rendering with include_name=True,
    i.e. as {name: template}, the body for PUT _template/<name> is template.source().
    """

    index_patterns: Annotated[Strings, Required()] = []
    order: int | None = None
    version: int | None = None
    settings: Annotated[Index | None, Wrapped()] = None
    mappings: Mappings | None = None
    aliases: dict[str, dict[str, Any]] = {}

    def alias(self, name: str, **options: Any) -> "IndexTemplate":
        """Add an alias for indices created from this template, e.g. alias("logs", is_write_index=False)"""
        return self.set(aliases={**self.aliases, name: options})
