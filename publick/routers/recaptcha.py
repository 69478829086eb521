from fastapi import APIRouter, Request

from publick.response_schemas import RecaptchaSiteKeyData, RecaptchaVerifyData
from publick.utils.recaptcha import ReCaptcha

router = APIRouter(prefix="/recaptcha")


@router.get("", response_model=RecaptchaSiteKeyData)
async def get_site_key():
    enabled = await ReCaptcha.get_enabled()
    return {
        "site_key": await ReCaptcha.get_site_key() if enabled else None,
        "enabled": enabled,
    }


@router.post("/verify", response_model=RecaptchaVerifyData)
async def verify_response(request: Request):
    return {"success": await ReCaptcha.verify_request(request)}
