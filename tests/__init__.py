from urllib.parse import urlencode

from publick.utils.recaptcha import ReCaptcha

ADMIN_TOKEN = "test-admin-token"
ADMIN_HEADERS = {"Authorization": ADMIN_TOKEN}


def recaptcha_url(secret: str, response: str, remote_ip: str) -> str:
    return f"{ReCaptcha.URL}?{urlencode({'secret': secret, 'response': response, 'remoteip': remote_ip})}"


async def configure_recaptcha(enabled: bool = True, site_key: str | None = "site-key",
                              secret_key: str | None = "secret-key") -> None:
    await ReCaptcha.set_enabled(enabled)
    await ReCaptcha.set_site_key(site_key)
    await ReCaptcha.set_secret_key(secret_key)
