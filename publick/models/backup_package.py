from datetime import datetime

from tortoise import fields

from publick.models._utils import Model

BACKUP_NAME_MAX_LENGTH = 255


class BackupPackage(Model):
    id: int = fields.BigIntField(pk=True)
    name: str = fields.CharField(max_length=BACKUP_NAME_MAX_LENGTH, unique=True)
    created_at: datetime = fields.DatetimeField(auto_now_add=True)
    properties: list[dict] = fields.JSONField(default=list)

    def to_json(self) -> dict:
        return {
            "name": self.name,
            "created_at": int(self.created_at.timestamp()),
            "properties_count": len(self.properties),
        }
