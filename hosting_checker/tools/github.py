# Copyright © 2025 Red Hat
# SPDX-License-Identifier: Apache-2.0

"""
This module is a minimal GitHub REST API client.
"""

import logging

import httpx

from hosting_checker.models.repository import Repository

logger = logging.getLogger(__name__)


class NotFound(Exception):
    """The requested GitHub resource does not exist."""


def make_httpx_client(
    api_url: str, token: str | None, timeout: float
) -> httpx.AsyncClient:
    """Setup the httpx client for the GitHub API."""
    headers = {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": "2022-11-28",
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return httpx.AsyncClient(
        base_url=api_url,
        headers=headers,
        timeout=timeout,
        follow_redirects=True,
    )


class GitHub:
    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def _get(self, path: str, **kwargs) -> httpx.Response:
        logger.debug("GET %s", path)
        resp = await self.client.get(path, **kwargs)
        if resp.status_code == 404:
            raise NotFound(path)
        return resp.raise_for_status()

    async def get_user(self, name: str) -> dict:
        return (await self._get(f"/users/{name}")).json()

    async def get_organization(self, name: str) -> dict:
        return (await self._get(f"/orgs/{name}")).json()

    async def get_repository(self, owner: str, name: str) -> Repository:
        resp = await self._get(f"/repos/{owner}/{name}")
        return Repository.model_validate(resp.json())

    async def get_file_contents(self, owner: str, name: str, path: str) -> str:
        """Return the raw content of a file at the root of the default branch."""
        resp = await self._get(
            f"/repos/{owner}/{name}/contents/{path}",
            headers={"Accept": "application/vnd.github.raw+json"},
        )
        return resp.text

    async def has_readme(self, owner: str, name: str) -> bool:
        try:
            await self._get(f"/repos/{owner}/{name}/readme")
        except NotFound:
            return False
        return True

    async def close(self) -> None:
        await self.client.aclose()
