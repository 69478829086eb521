from fastapi import APIRouter, Depends

from publick.errors import Errors
from publick.response_schemas import RecaptchaSettingsData
from publick.schemas import EditRecaptchaData
from publick.utils.admin_auth import admin_auth
from publick.utils.recaptcha import ReCaptcha

router = APIRouter(prefix="/admin", dependencies=[Depends(admin_auth)])


async def recaptcha_settings() -> dict:
    return {
        "site_key": await ReCaptcha.get_site_key(),
        "secret_key": await ReCaptcha.get_secret_key(),
        "enabled": await ReCaptcha.get_enabled(),
    }


@router.get("/recaptcha", response_model=RecaptchaSettingsData)
async def get_recaptcha():
    return await recaptcha_settings()


@router.patch("/recaptcha", response_model=RecaptchaSettingsData)
async def edit_recaptcha(data: EditRecaptchaData):
    setters = {
        "site_key": ReCaptcha.set_site_key,
        "secret_key": ReCaptcha.set_secret_key,
        "enabled": ReCaptcha.set_enabled,
    }
    for field, value in data.model_dump(exclude_unset=True).items():
        if field == "enabled" and value is None:
            continue
        if not await setters[field](value):
            raise Errors.CONFIG_SAVE_FAILED.format(field)

    return await recaptcha_settings()
