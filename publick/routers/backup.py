import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form
from tortoise.exceptions import IntegrityError
from tortoise.transactions import in_transaction

from publick.errors import Errors
from publick.models import BackupPackage
from publick.models.backup_package import BACKUP_NAME_MAX_LENGTH
from publick.response_schemas import BackupPackageData
from publick.utils.admin_auth import admin_auth
from publick.utils.backup_client import BackupClient
from publick.utils.config_store import ConfigurationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix=BackupClient.PATH, dependencies=[Depends(admin_auth)])


@router.get("", response_model=list[BackupPackageData])
async def get_packages():
    return [package.to_json() for package in await BackupPackage.all().order_by("created_at", "id")]


async def create_package(name: str) -> BackupPackage:
    properties = [prop.to_json() for prop in await ConfigurationService.get_properties()]
    try:
        package = await BackupPackage.create(name=name, properties=properties)
    except IntegrityError:
        raise Errors.BACKUP_EXISTS.format(name)

    logger.info("Created backup %s with %d properties", name, len(properties))
    return package


async def install_package(name: str) -> BackupPackage:
    """Replace the whole configuration with the package snapshot. Nothing is changed if any write fails."""
    if (package := await BackupPackage.get_or_none(name=name)) is None:
        raise Errors.UNKNOWN_BACKUP.format(name)

    snapshot = {(prop["component"], prop["name"]) for prop in package.properties}
    async with in_transaction():
        for prop in await ConfigurationService.get_properties():
            if (prop.component, prop.name) in snapshot:
                continue
            if not await ConfigurationService.delete_property(prop.component, prop.name):
                raise Errors.CONFIG_SAVE_FAILED.format(prop.name)

        for prop in package.properties:
            if not await ConfigurationService.set_property(prop["component"], prop["name"], prop["value"]):
                raise Errors.CONFIG_SAVE_FAILED.format(prop["name"])

    logger.info("Installed backup %s", name)
    return package


async def delete_package(name: str) -> BackupPackage:
    if (package := await BackupPackage.get_or_none(name=name)) is None:
        raise Errors.UNKNOWN_BACKUP.format(name)

    await package.delete()
    logger.info("Deleted backup %s", name)
    return package


ACTIONS = {
    BackupClient.ACTION_CREATE: create_package,
    BackupClient.ACTION_INSTALL: install_package,
    BackupClient.ACTION_DELETE: delete_package,
}


@router.post("", response_model=BackupPackageData)
async def backup_action(action: Annotated[str, Form()], name: Annotated[str, Form()] = ""):
    if (handler := ACTIONS.get(action)) is None:
        raise Errors.UNKNOWN_ACTION.format(action)
    if not (name := name.strip()) or len(name) > BACKUP_NAME_MAX_LENGTH:
        raise Errors.INVALID_BACKUP_NAME

    package = await handler(name)
    return package.to_json()
