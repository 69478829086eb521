from hmac import compare_digest

from fastapi import Request

from publick import config
from publick.errors import Errors


async def admin_auth(request: Request) -> str:
    token = request.headers.get("authorization")
    if not token or not config.ADMIN_TOKEN or not compare_digest(token.encode("utf8"), config.ADMIN_TOKEN.encode("utf8")):
        raise Errors.INVALID_TOKEN

    return token
