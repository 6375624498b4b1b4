"""Builders for Elasticsearch index templates."""

from estemplate.analysis import Analysis
from estemplate.entity import Entity, NamedEntity
from estemplate.errors import InvalidEntityError, RenderError, TemplateError
from estemplate.index import Index, RoutingAllocation, SlowlogThreshold
from estemplate.mapping_rule import MappingRule
from estemplate.mappings import DynamicTemplate, Mappings
from estemplate.script import Script
from estemplate.template import IndexTemplate

__all__ = [
    "Analysis",
    "DynamicTemplate",
    "Entity",
    "Index",
    "IndexTemplate",
    "InvalidEntityError",
    "MappingRule",
    "Mappings",
    "NamedEntity",
    "RenderError",
    "RoutingAllocation",
    "Script",
    "SlowlogThreshold",
    "TemplateError",
]
