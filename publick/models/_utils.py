from tortoise import Model as _Model


class Model(_Model):
    async def update(self, **kwargs) -> None:
        await self.update_from_dict(kwargs)
        await self.save(update_fields=list(kwargs.keys()))
