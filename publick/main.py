import logging
from pathlib import Path

from aerich import Command
from fastapi import FastAPI, Request
from starlette.responses import JSONResponse
from tortoise import Tortoise
from tortoise.contrib.fastapi import register_tortoise

from publick import config
from publick.exceptions import CustomBodyException
from publick.routers import admin, backup, recaptcha

app = FastAPI()
app.include_router(admin.router)
app.include_router(backup.router)
app.include_router(recaptcha.router)


@app.on_event("startup")
async def setup_logging():
    # No-op when the server (or pytest) already configured the root logger
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("publick").setLevel(config.LOG_LEVEL)


@app.on_event("startup")
async def migrate_orm():  # pragma: no cover
    if config.DB_CONNECTION_STRING == "sqlite://:memory:":
        return
    migrations_dir = "data/migrations"

    command = Command({
        "connections": {"default": config.DB_CONNECTION_STRING},
        "apps": {"models": {"models": ["publick.models", "aerich.models"], "default_connection": "default"}},
    }, location=migrations_dir)
    await command.init()
    if Path(migrations_dir).exists():
        await command.migrate()
        await command.upgrade(True)
    else:
        await command.init_db(True)
    await Tortoise.close_connections()


register_tortoise(
    app,
    db_url=config.DB_CONNECTION_STRING,
    modules={"models": ["publick.models"]},
    generate_schemas=True,
)


# noinspection PyUnusedLocal
@app.exception_handler(CustomBodyException)
async def custom_exception_handler(request: Request, exc: CustomBodyException):
    return JSONResponse(status_code=exc.status_code, content=exc.body)
