import asyncio
import sys

from tortoise import Tortoise

from publick import config
from publick.utils.recaptcha import ReCaptcha


async def main():
    site_key = input("Site key: ").strip()
    secret_key = input("Secret key: ").strip()
    enabled = input("Enable reCAPTCHA? [y/N]: ").strip().lower() in {"y", "yes"}

    await Tortoise.init(
        config=None, config_file=None, db_url=config.DB_CONNECTION_STRING, modules={"models": ["publick.models"]}
    )
    await Tortoise.generate_schemas(safe=True)

    saved = await ReCaptcha.set_site_key(site_key or None) and await ReCaptcha.set_secret_key(secret_key or None) \
        and await ReCaptcha.set_enabled(enabled)

    await Tortoise.close_connections()
    if not saved:
        print("Failed to save reCAPTCHA settings!")
        return sys.exit(1)

    print("reCAPTCHA settings saved successfully!")
    sys.exit()


if __name__ == "__main__":
    asyncio.run(main())
