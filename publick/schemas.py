from pydantic import BaseModel


class EditRecaptchaData(BaseModel):
    site_key: str | None = None
    secret_key: str | None = None
    enabled: bool | None = None
