from pydantic import BaseModel


class RecaptchaSiteKeyData(BaseModel):
    site_key: str | None
    enabled: bool


class RecaptchaSettingsData(BaseModel):
    site_key: str | None
    secret_key: str | None
    enabled: bool


class RecaptchaVerifyData(BaseModel):
    success: bool


class BackupPackageData(BaseModel):
    name: str
    created_at: int
    properties_count: int
