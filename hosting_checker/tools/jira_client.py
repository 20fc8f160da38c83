# Copyright © 2025 Red Hat
# SPDX-License-Identifier: Apache-2.0

from jira import JIRA, JIRAError
import logging
import requests

from hosting_checker.errors import IssueTrackerError

logger = logging.getLogger(__name__)


def field_to_str(value) -> str:
    """Convert a raw JIRA field value into text.

    >>> field_to_str(None)
    ''
    >>> field_to_str({"value": "Yes"})
    'Yes'
    >>> field_to_str(["alice", "bob"])
    'alice\\nbob'
    """
    match value:
        case None:
            return ""
        case str():
            return value
        case {"value": str() as v}:
            return v
        case {"name": str() as v}:
            return v
        case list():
            return "\n".join(field_to_str(v) for v in value)
        case _:
            return str(value)


class Jira:
    def __init__(
        self,
        server: str,
        username: str | None,
        password: str | None,
        timeout: float = 30.0,
    ):
        basic_auth = (username, password) if username and password else None
        self.client = JIRA(
            server=server,
            basic_auth=basic_auth,
            timeout=timeout,
            get_server_info=False,
        )

    def get_issue_fields(self, key: str) -> dict[str, str]:
        """Fetch an issue and return its fields indexed by display name."""
        logger.info("Fetching JIRA issue %s", key)
        try:
            issue = self.client.issue(key, expand="names")
        except (JIRAError, requests.RequestException) as e:
            raise IssueTrackerError(f"Failed to fetch issue {key}: {e}") from e

        names: dict[str, str] = issue.raw.get("names", {})
        fields: dict = issue.raw.get("fields", {})
        return {
            names.get(field_id, field_id): field_to_str(value)
            for field_id, value in fields.items()
        }

    def add_comment(self, key: str, body: str) -> None:
        logger.info("Posting comment on %s", key)
        try:
            self.client.add_comment(key, body)
        except (JIRAError, requests.RequestException) as e:
            raise IssueTrackerError(f"Failed to comment on {key}: {e}") from e
