"""
Index settings, both static (fixed at index creation) and dynamic (changeable on a live index).

See https://www.elastic.co/guide/en/elasticsearch/reference/current/index-modules.html
"""

from typing import Annotated, Any

from pydantic import Field

from estemplate.analysis import Analysis
from estemplate.entity import Entity, Named, OneOf, Prefixed, Required, ScalarStrings, Slot, Strings
from estemplate.mappings import Mappings
from estemplate.models import AllocationType, SlowlogLevel, SlowlogType
from estemplate.similarities import Similarity


class RoutingAllocation(Entity):
    """
    Shard allocation filtering: allocate shards only to (include), only to nodes with all of (require)
    or not to (exclude) nodes whose attribute matches one of the values.
    Renders as {"include._name": "node_1,node_2"}, which Index prefixes with "routing.allocation".
    """

    wrap_key = "routing.allocation"

    allocation_type: Annotated[str, OneOf(AllocationType), Required()] = ""
    attribute: Annotated[str, Required()] = ""
    values: Annotated[Strings, Required()] = []

    def __init__(self, allocation_type: str | None = None, attribute: str | None = None, /, *values: str, **data: Any):
        if allocation_type is not None:
            data["allocation_type"] = allocation_type
        if attribute is not None:
            data["attribute"] = attribute
        if values:
            data["values"] = list(values)
        super().__init__(**data)

    @classmethod
    def include(cls, attribute: str, *values: str) -> "RoutingAllocation":
        return cls("include", attribute, *values)

    @classmethod
    def require(cls, attribute: str, *values: str) -> "RoutingAllocation":
        return cls("require", attribute, *values)

    @classmethod
    def exclude(cls, attribute: str, *values: str) -> "RoutingAllocation":
        return cls("exclude", attribute, *values)

    def render_options(self) -> dict[str, Any]:
        if not (self.allocation_type and self.attribute and self.values):
            return {}
        return {f"{self.allocation_type}.{self.attribute}": ",".join(self.values)}


class SlowlogThreshold(Entity):
    """
    Log search (query and fetch phase) or indexing (index phase) operations slower than the given time value.
    Renders as {"slowlog.threshold.query.warn": "10s"}, which Index prefixes with the slowlog type.
    """

    slowlog_type: Annotated[str, OneOf(SlowlogType), Required()] = ""
    phase: Annotated[str, Required()] = ""
    level: Annotated[str, OneOf(SlowlogLevel), Required()] = ""
    value: Annotated[str, Required()] = ""

    def __init__(self, slowlog_type: str | None = None, phase: str | None = None,
                 level: str | None = None, value: str | None = None, /, **data: Any):
        positional = dict(slowlog_type=slowlog_type, phase=phase, level=level, value=value)
        data.update({k: v for k, v in positional.items() if v is not None})
        super().__init__(**data)

    @classmethod
    def search(cls, phase: str, level: str, value: str) -> "SlowlogThreshold":
        return cls("search", phase, level, value)

    @classmethod
    def indexing(cls, phase: str, level: str, value: str) -> "SlowlogThreshold":
        return cls("indexing", phase, level, value)

    def wrapper(self) -> str:
        return self.slowlog_type

    def render_options(self) -> dict[str, Any]:
        if not (self.phase and self.level and self.value):
            return {}
        return {f"slowlog.threshold.{self.phase}.{self.level}": self.value}


def _setting(key: str) -> Any:
    return Field(serialization_alias=key)


class Index(Entity):
    """
    The index settings, rendered under "index" with their dotted setting names,
    e.g. Index(number_of_shards=1, shard_check_on_startup="checksum")
    renders as {"number_of_shards": 1, "shard.check_on_startup": "checksum"}
    """

    wrap_key = "index"

    ######## static settings ########
    number_of_shards: int | None = None
    shard_check_on_startup: Annotated[str | None, _setting("shard.check_on_startup")] = None
    codec: str | None = None
    routing_partition_size: int | None = None
    load_fixed_bitset_filters_eagerly: bool | None = None

    ######## dynamic settings ########
    number_of_replicas: int | None = None
    auto_expand_replicas: str | None = None
    search_idle_after: Annotated[str | None, _setting("search.idle.after")] = None
    refresh_interval: str | None = None
    max_result_window: int | None = None
    max_inner_result_window: int | None = None
    max_rescore_window: int | None = None
    max_docvalue_fields_search: int | None = None
    max_script_fields: int | None = None
    max_ngram_diff: int | None = None
    max_shingle_diff: int | None = None
    blocks_read_only: Annotated[bool | None, _setting("blocks.read_only")] = None
    blocks_read_only_allow_delete: Annotated[bool | None, _setting("blocks.read_only_allow_delete")] = None
    blocks_read: Annotated[bool | None, _setting("blocks.read")] = None
    blocks_write: Annotated[bool | None, _setting("blocks.write")] = None
    blocks_metadata: Annotated[bool | None, _setting("blocks.metadata")] = None
    max_refresh_listeners: int | None = None
    analyze_max_token_count: Annotated[int | None, _setting("analyze.max_token_count")] = None
    highlight_max_analyzed_offset: Annotated[int | None, _setting("highlight.max_analyzed_offset")] = None
    max_terms_count: int | None = None
    max_regex_length: int | None = None
    routing_allocation_enable: Annotated[str | None, _setting("routing.allocation.enable")] = None
    routing_rebalance_enable: Annotated[str | None, _setting("routing.rebalance.enable")] = None
    gc_deletes: str | None = None
    default_pipeline: str | None = None
    final_pipeline: str | None = None

    ######## analysis ########
    analysis: Analysis | None = None

    ######## shard allocation ########
    routing_allocation: Annotated[list[RoutingAllocation], Prefixed("routing.allocation")] = []
    unassigned_node_left_delayed_timeout: Annotated[str | None, _setting("unassigned.node_left.delayed_timeout")] = None
    priority: int | None = None
    routing_allocation_total_shards_per_node: Annotated[
        int | None, _setting("routing.allocation.total_shards_per_node")
    ] = None

    ######## mapping ########
    mappings: Mappings | None = None
    mapping_total_fields_limit: Annotated[int | None, _setting("mapping.total_fields.limit")] = None
    mapping_depth_limit: Annotated[int | None, _setting("mapping.depth.limit")] = None
    mapping_nested_fields_limit: Annotated[int | None, _setting("mapping.nested_fields.limit")] = None
    mapping_nested_objects_limit: Annotated[int | None, _setting("mapping.nested_objects.limit")] = None
    mapping_field_name_length_limit: Annotated[int | None, _setting("mapping.field_name_length.limit")] = None

    ######## merging ########
    merge_scheduler_max_thread_count: Annotated[int | None, _setting("merge.scheduler.max_thread_count")] = None

    ######## similarity ########
    default_similarity: Annotated[Similarity | None, Slot("default"), _setting("similarity")] = None
    similarity: Annotated[list[Similarity], Named()] = []

    ######## slowlog ########
    search_slowlog_threshold: Annotated[list[SlowlogThreshold], Prefixed("search")] = []
    search_slowlog_level: Annotated[str | None, OneOf(SlowlogLevel), _setting("search.slowlog.level")] = None
    indexing_slowlog_threshold: Annotated[list[SlowlogThreshold], Prefixed("indexing")] = []
    indexing_slowlog_level: Annotated[str | None, OneOf(SlowlogLevel), _setting("indexing.slowlog.level")] = None
    indexing_slowlog_source: Annotated[str | None, _setting("indexing.slowlog.source")] = None
    indexing_slowlog_reformat: Annotated[bool | None, _setting("indexing.slowlog.reformat")] = None

    ######## store ########
    store_type: Annotated[str | None, _setting("store.type")] = None
    store_preload: Annotated[Strings, _setting("store.preload")] = []

    ######## translog ########
    translog_sync_interval: Annotated[str | None, _setting("translog.sync_interval")] = None
    translog_durability: Annotated[str | None, _setting("translog.durability")] = None
    translog_flush_threshold_size: Annotated[str | None, _setting("translog.flush_threshold_size")] = None
    translog_retention_size: Annotated[str | None, _setting("translog.retention.size")] = None
    translog_retention_age: Annotated[str | None, _setting("translog.retention.age")] = None

    ######## history retention ########
    soft_deletes_enabled: Annotated[bool | None, _setting("soft_deletes.enabled")] = None
    soft_deletes_retention_lease_period: Annotated[str | None, _setting("soft_deletes.retention_lease.period")] = None

    ######## index sorting ########
    sort_field: Annotated[ScalarStrings, _setting("sort.field")] = []
    sort_order: Annotated[str | None, _setting("sort.order")] = None
    sort_mode: Annotated[str | None, _setting("sort.mode")] = None
    sort_missing: Annotated[str | None, _setting("sort.missing")] = None

    ######## index lifecycle management ########
    lifecycle_name: Annotated[str | None, _setting("lifecycle.name")] = None
    lifecycle_rollover_alias: Annotated[str | None, _setting("lifecycle.rollover_alias")] = None
    lifecycle_parse_origination_date: Annotated[bool | None, _setting("lifecycle.parse_origination_date")] = None
    lifecycle_origination_date: Annotated[int | None, _setting("lifecycle.origination_date")] = None
