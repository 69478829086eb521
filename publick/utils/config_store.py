import logging

from tortoise.exceptions import BaseORMException

from publick.models import ConfigProperty

logger = logging.getLogger(__name__)


class ConfigurationService:
    """Runtime key-value configuration, addressed by component id and property name."""

    @classmethod
    async def get_property(cls, component: str, name: str, default=None):
        prop = await ConfigProperty.get_or_none(component=component, name=name)
        if prop is None:
            return default

        value = prop.value
        return default if value is None else value

    @classmethod
    async def get_string_property(cls, component: str, name: str, default: str | None = None) -> str | None:
        value = await cls.get_property(component, name)
        if value is None:
            return default
        if isinstance(value, bool):
            return "true" if value else "false"

        return str(value)

    @classmethod
    async def get_boolean_property(cls, component: str, name: str, default: bool = False) -> bool:
        value = await cls.get_property(component, name)
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in {"true", "false"}:
            return value.lower() == "true"

        return default

    @classmethod
    async def get_properties(cls, component: str | None = None) -> list[ConfigProperty]:
        query = ConfigProperty.all() if component is None else ConfigProperty.filter(component=component)
        return await query.order_by("component", "name")

    @classmethod
    async def set_property(cls, component: str, name: str, value) -> bool:
        """
        Create or overwrite a property.

        Returns False if the store rejected the write; the error is logged, never raised.
        """
        try:
            raw_value = ConfigProperty.dump_value(value)
            prop = await ConfigProperty.get_or_none(component=component, name=name)
            if prop is None:
                await ConfigProperty.create(component=component, name=name, raw_value=raw_value)
            else:
                await prop.update(raw_value=raw_value)
        except (BaseORMException, TypeError, ValueError) as e:
            logger.error("Could not save property %s of %s: %s", name, component, e)
            return False

        return True

    @classmethod
    async def delete_property(cls, component: str, name: str) -> bool:
        try:
            deleted = await ConfigProperty.filter(component=component, name=name).delete()
        except BaseORMException as e:
            logger.error("Could not delete property %s of %s: %s", name, component, e)
            return False

        return deleted > 0
