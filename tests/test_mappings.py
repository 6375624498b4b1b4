import pytest
from pydantic import BaseModel, ConfigDict, Field

from estemplate.datatypes import DatatypeKeyword, DatatypeText, DateFormat
from estemplate.errors import RenderError
from estemplate.mappings import DynamicTemplate, Mappings
from estemplate.meta_fields import (
    MetaFieldFieldNames,
    MetaFieldMeta,
    MetaFieldRouting,
    MetaFieldSize,
    MetaFieldSource,
)

META = {"class": "MyApp::User", "version": {"min": "1.0", "max": "1.3"}}


class Version(BaseModel):
    min: str
    max: str


class UserMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    app_class: str = Field(alias="class")
    version: Version


def test_dynamic_templates():
    template = DynamicTemplate("template_1", match_mapping_type="string", mapping=DatatypeText(analyzer="{name}"))
    m = Mappings(dynamic_templates=[template])
    assert m.to_json(include_name=True) == (
        '{"mappings":{"dynamic_templates":[{"template_1":{"mapping":{"analyzer":"{name}","type":"text"},'
        '"match_mapping_type":"string"}}]}}'
    )
    m.add("dynamic_templates", DynamicTemplate("longs_as_strings", match="long_*", unmatch="*_text"))
    assert m.source()["dynamic_templates"][1] == {"longs_as_strings": {"match": "long_*", "unmatch": "*_text"}}


def test_date_detection():
    m = Mappings(date_detection=True, dynamic_date_formats=[DateFormat("date_optional_time", strict=True)])
    assert m.to_json(include_name=True) == (
        '{"mappings":{"date_detection":true,"dynamic_date_formats":["strict_date_optional_time"]}}'
    )


def test_meta_source():
    m = Mappings(meta_source=MetaFieldSource(enabled=False))
    assert m.to_json(include_name=True) == '{"mappings":{"_source":{"enabled":false}}}'


def test_properties():
    m = Mappings().field(DatatypeText("field_1", analyzer="standard"), DatatypeKeyword("field_2", store=False))
    assert m.to_json() == (
        '{"properties":{"field_1":{"analyzer":"standard","type":"text"},"field_2":{"store":false,"type":"keyword"}}}'
    )


def test_meta_fields():
    m = Mappings(
        size=MetaFieldSize(enabled=True),
        field_names=MetaFieldFieldNames(enabled=False),
        routing=MetaFieldRouting(required=True),
        numeric_detection=False,
    )
    assert m.source() == {
        "_size": {"enabled": True},
        "_field_names": {"enabled": False},
        "_routing": {"required": True},
        "numeric_detection": False,
    }
    s = MetaFieldSource(includes=["*.count", "meta.*"])
    assert s.to_json(include_name=True) == '{"_source":{"includes":["*.count","meta.*"]}}'
    s = MetaFieldSource(excludes="meta.description").add("excludes", "meta.other.*")
    assert s.to_json(include_name=True) == '{"_source":{"excludes":["meta.description","meta.other.*"]}}'
    assert MetaFieldRouting(required=True).source(include_name=True) == {"_routing": {"required": True}}


def test_meta():
    expected = '{"_meta":{"class":"MyApp::User","version":{"max":"1.3","min":"1.0"}}}'
    assert MetaFieldMeta(value=META).to_json(include_name=True) == expected
    assert MetaFieldMeta(raw_json='{"class": "MyApp::User", "version": {"min": "1.0", "max": "1.3"}}').to_json(
        include_name=True
    ) == expected
    assert MetaFieldMeta(value=META).to_json() == '{"class":"MyApp::User","version":{"max":"1.3","min":"1.0"}}'
    # the raw json wins
    assert MetaFieldMeta(value={"a": 1}, raw_json='{"b": 2}').source() == {"b": 2}
    assert MetaFieldMeta().source(include_name=True) == {"_meta": {}}


def test_meta_model():
    """Pydantic models are dumped using their aliases"""
    value = UserMeta(app_class="MyApp::User", version=Version(min="1.0", max="1.3"))
    assert MetaFieldMeta(value=value).source() == META


def test_meta_errors():
    with pytest.raises(RenderError):
        MetaFieldMeta(raw_json="{not json").source()
    with pytest.raises(RenderError):
        MetaFieldMeta(raw_json="[1, 2]").source()
    with pytest.raises(RenderError):
        MetaFieldMeta(value={"when": object()}).source()
    with pytest.raises(RenderError):
        MetaFieldMeta(value="just a string").source()
    with pytest.raises(RenderError):
        Mappings(meta=MetaFieldMeta(raw_json="null")).source(include_name=True)
