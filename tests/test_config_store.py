import pytest
from tortoise.exceptions import OperationalError

from publick.models import ConfigProperty
from publick.utils.config_store import ConfigurationService

COMPONENT = "Test component"


@pytest.mark.asyncio
async def test_get_default_when_unset(app_with_lifespan):
    assert await ConfigurationService.get_property(COMPONENT, "missing") is None
    assert await ConfigurationService.get_property(COMPONENT, "missing", 5) == 5
    assert await ConfigurationService.get_string_property(COMPONENT, "missing", "fallback") == "fallback"
    assert await ConfigurationService.get_boolean_property(COMPONENT, "missing", True) is True
    assert await ConfigurationService.get_boolean_property(COMPONENT, "missing") is False


@pytest.mark.asyncio
async def test_set_then_get_returns_last_value(app_with_lifespan):
    assert await ConfigurationService.set_property(COMPONENT, "key", "first")
    assert await ConfigurationService.get_string_property(COMPONENT, "key") == "first"

    assert await ConfigurationService.set_property(COMPONENT, "key", "second")
    assert await ConfigurationService.get_string_property(COMPONENT, "key") == "second"
    assert await ConfigProperty.filter(component=COMPONENT, name="key").count() == 1


@pytest.mark.asyncio
async def test_properties_are_scoped_by_component(app_with_lifespan):
    assert await ConfigurationService.set_property(COMPONENT, "key", "a")
    assert await ConfigurationService.set_property("Other component", "key", "b")

    assert await ConfigurationService.get_string_property(COMPONENT, "key") == "a"
    assert await ConfigurationService.get_string_property("Other component", "key") == "b"

    props = await ConfigurationService.get_properties(COMPONENT)
    assert [prop.to_json() for prop in props] == [{"component": COMPONENT, "name": "key", "value": "a"}]
    assert len(await ConfigurationService.get_properties()) == 2


@pytest.mark.asyncio
async def test_boolean_conversion(app_with_lifespan):
    assert await ConfigurationService.set_property(COMPONENT, "flag", True)
    assert await ConfigurationService.get_boolean_property(COMPONENT, "flag") is True
    assert await ConfigurationService.get_string_property(COMPONENT, "flag") == "true"

    assert await ConfigurationService.set_property(COMPONENT, "flag", "TRUE")
    assert await ConfigurationService.get_boolean_property(COMPONENT, "flag") is True

    assert await ConfigurationService.set_property(COMPONENT, "flag", "false")
    assert await ConfigurationService.get_boolean_property(COMPONENT, "flag", True) is False

    assert await ConfigurationService.set_property(COMPONENT, "flag", "yes")
    assert await ConfigurationService.get_boolean_property(COMPONENT, "flag", True) is True


@pytest.mark.asyncio
async def test_none_value_falls_back_to_default(app_with_lifespan):
    assert await ConfigurationService.set_property(COMPONENT, "key", None)
    assert await ConfigurationService.get_string_property(COMPONENT, "key", "fallback") == "fallback"


@pytest.mark.asyncio
async def test_delete_property(app_with_lifespan):
    assert await ConfigurationService.set_property(COMPONENT, "key", 1)
    assert await ConfigurationService.delete_property(COMPONENT, "key")
    assert not await ConfigurationService.delete_property(COMPONENT, "key")
    assert await ConfigurationService.get_property(COMPONENT, "key", "gone") == "gone"


@pytest.mark.asyncio
async def test_set_property_failure_returns_false(app_with_lifespan, monkeypatch):
    async def _fail(*args, **kwargs):
        raise OperationalError("database is locked")

    monkeypatch.setattr(ConfigProperty, "get_or_none", _fail)
    assert not await ConfigurationService.set_property(COMPONENT, "key", "value")


@pytest.mark.asyncio
async def test_set_unserializable_value_returns_false(app_with_lifespan):
    assert not await ConfigurationService.set_property(COMPONENT, "key", object())
    assert await ConfigurationService.get_property(COMPONENT, "key") is None
