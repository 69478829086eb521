from httpx import AsyncClient, Response

from publick import config


class BackupClient:
    """Client for the backup admin endpoint: lists, creates, installs and deletes backup packages."""

    PATH = "/bin/admin/backup"

    ACTION_CREATE = "create_package"
    ACTION_INSTALL = "install_package"
    ACTION_DELETE = "delete_package"

    def __init__(self, base_url: str | None = None, token: str | None = None):
        self.base_url = (base_url or config.BACKUP_BASE_URL).rstrip("/")
        self.token = token

    def _headers(self) -> dict:
        return {"Authorization": self.token} if self.token else {}

    async def _post(self, data: dict) -> Response:
        async with AsyncClient(base_url=self.base_url, headers=self._headers()) as client:
            return await client.post(self.PATH, data=data)

    async def get_packages(self) -> Response:
        async with AsyncClient(base_url=self.base_url, headers=self._headers()) as client:
            return await client.get(self.PATH)

    async def create_backup(self, name: str) -> Response:
        return await self._post({"action": self.ACTION_CREATE, "name": name})

    async def install_backup(self, name: str) -> Response:
        return await self._post({"action": self.ACTION_INSTALL, "name": name})

    async def delete_backup(self, name: str) -> Response:
        return await self._post({"action": self.ACTION_DELETE, "name": name})
