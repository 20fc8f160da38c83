# Copyright © 2025 Red Hat
# SPDX-License-Identifier: Apache-2.0

"""
This module defines the global environment shared by the other modules.
"""

import logging

from hosting_checker.config import Settings
from hosting_checker.tools.github import GitHub, make_httpx_client
from hosting_checker.tools.jira_client import Jira


class Env:
    """The hosting checker application environment"""

    def __init__(
        self,
        debug,
        base_settings: Settings | None = None,
    ):
        if not base_settings:
            # pydantic is magic and it auto load the missing named argument from the environment.
            settings = Settings()  # type: ignore
        else:
            settings = base_settings
        self.settings = settings
        self.dry_run = settings.DEBUG_HOSTING

        lvl = logging.DEBUG if debug or settings.DEBUG_HOSTING else logging.INFO
        logging.basicConfig(format="%(asctime)s %(levelname)9s %(message)s", level=lvl)
        self.log = logging.getLogger("hosting_checker")

        self.jira = Jira(
            settings.JIRA_URL,
            settings.JIRA_USERNAME,
            settings.JIRA_PASSWORD,
            settings.HTTP_TIMEOUT,
        )
        self.github = GitHub(
            make_httpx_client(
                settings.GITHUB_API_URL,
                settings.GITHUB_API_TOKEN,
                settings.HTTP_TIMEOUT,
            )
        )

    async def close(self):
        await self.github.close()
