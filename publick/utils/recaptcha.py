import logging

from fastapi import Request
from httpx import AsyncClient, HTTPError

from publick import config
from publick.utils.config_store import ConfigurationService

logger = logging.getLogger(__name__)


class ReCaptcha:
    """reCAPTCHA keys stored in the runtime configuration and token verification against Google."""

    URL = "https://www.google.com/recaptcha/api/siteverify"

    COMPONENT = "Publick reCAPTCHA settings"
    SITE_KEY = "recaptcha.siteKey"
    SECRET_KEY = "recaptcha.secretKey"
    ENABLED = "recaptcha.enabled"
    ENABLED_DEFAULT = False

    REQUEST_PARAMETER = "g-recaptcha-response"
    FORWARDED_FOR_HEADER = "x-forwarded-for"

    @classmethod
    async def get_site_key(cls) -> str | None:
        return await ConfigurationService.get_string_property(cls.COMPONENT, cls.SITE_KEY, None)

    @classmethod
    async def set_site_key(cls, site_key: str | None) -> bool:
        return await ConfigurationService.set_property(cls.COMPONENT, cls.SITE_KEY, site_key)

    @classmethod
    async def get_secret_key(cls) -> str | None:
        return await ConfigurationService.get_string_property(cls.COMPONENT, cls.SECRET_KEY, None)

    @classmethod
    async def set_secret_key(cls, secret_key: str | None) -> bool:
        return await ConfigurationService.set_property(cls.COMPONENT, cls.SECRET_KEY, secret_key)

    @classmethod
    async def get_enabled(cls) -> bool:
        return await ConfigurationService.get_boolean_property(cls.COMPONENT, cls.ENABLED, cls.ENABLED_DEFAULT)

    @classmethod
    async def set_enabled(cls, enabled: bool) -> bool:
        return await ConfigurationService.set_property(cls.COMPONENT, cls.ENABLED, enabled)

    @classmethod
    async def verify(cls, response: str | None, remote_ip: str | None) -> bool:
        """
        Check a widget response token with Google.

        Returns False without contacting Google when reCAPTCHA is disabled, the secret key is not set,
        or the token or ip is empty. Transport and parse errors are logged and also yield False.
        """
        secret_key = await cls.get_secret_key()
        if not await cls.get_enabled() or not secret_key or not response or not remote_ip:
            return False

        params = {"secret": secret_key, "response": response, "remoteip": remote_ip}
        try:
            async with AsyncClient(timeout=config.RECAPTCHA_TIMEOUT) as client:
                resp = await client.get(cls.URL, params=params)
                resp.raise_for_status()
                data = resp.json()
        except HTTPError as e:
            logger.error("Could not validate recaptcha: %r", e)
            return False
        except ValueError as e:
            logger.error("Could not parse recaptcha response: %r", e)
            return False

        success = data.get("success") if isinstance(data, dict) else None
        if not isinstance(success, bool):
            logger.error("Recaptcha response has no boolean \"success\" field: %r", data)
            return False

        return success

    @classmethod
    async def verify_request(cls, request: Request) -> bool:
        response = request.query_params.get(cls.REQUEST_PARAMETER)
        if response is None and request.headers.get("content-type", "").startswith(
                ("application/x-www-form-urlencoded", "multipart/form-data")):
            form = await request.form()
            response = form.get(cls.REQUEST_PARAMETER)

        return await cls.verify(response if isinstance(response, str) else None, cls.get_ip_address(request))

    @classmethod
    def get_ip_address(cls, request: Request) -> str | None:
        """
        Client address sent to Google as `remoteip`.

        Prefers the X-Forwarded-For header over the direct connection address. When proxies appended
        their own hops, only the leftmost (originating client) entry is used, not the whole header value.
        """
        if (forwarded_for := request.headers.get(cls.FORWARDED_FOR_HEADER)) is not None:
            return forwarded_for.split(",")[0].strip()

        return request.client.host if request.client is not None else None
