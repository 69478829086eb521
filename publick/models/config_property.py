import json

from tortoise import fields

from publick.models._utils import Model


class ConfigProperty(Model):
    id: int = fields.BigIntField(pk=True)
    component: str = fields.CharField(max_length=255)
    name: str = fields.CharField(max_length=255)
    raw_value: str = fields.TextField()

    class Meta:
        unique_together = (("component", "name"),)

    @property
    def value(self) -> str | bool | int | float | list | dict | None:
        return json.loads(self.raw_value)

    @staticmethod
    def dump_value(value) -> str:
        return json.dumps(value)

    def to_json(self) -> dict:
        return {
            "component": self.component,
            "name": self.name,
            "value": self.value,
        }
