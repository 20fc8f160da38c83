# Copyright © 2025 Red Hat
# SPDX-License-Identifier: Apache-2.0

"""
This module checks the committers and the repository on GitHub.
"""

import logging
import re

import httpx

import hosting_checker.messages as msg
from hosting_checker.checks.fields import parse_repository_url
from hosting_checker.config import (
    FIELD_COMMITTERS,
    FIELD_REPOSITORY_URL,
    UPSTREAM_ORG_PREFIX,
)
from hosting_checker.models.finding import Finding
from hosting_checker.models.repository import Repository
from hosting_checker.tools.github import GitHub, NotFound

logger = logging.getLogger(__name__)


def split_users(value: str) -> list[str]:
    """Split the committers field.

    >>> split_users("alice, bob;\\ncarol,,")
    ['alice', 'bob', 'carol']
    """
    return [user.strip() for user in re.split(r"[\n;,]", value) if user.strip()]


async def verify_users(github: GitHub, users: list[str]) -> list[Finding]:
    orgs, invalids = [], []
    for user in users:
        try:
            await github.get_user(user)
            continue
        except (NotFound, httpx.HTTPError) as e:
            logger.debug("%s is not a user: %r", user, e)
        try:
            await github.get_organization(user)
            orgs.append(user)
        except (NotFound, httpx.HTTPError) as e:
            logger.debug("%s is not an organization: %r", user, e)
            invalids.append(user)

    findings = []
    if orgs:
        findings.append(msg.organizations_not_users(orgs))
    if invalids:
        findings.append(msg.invalid_usernames(invalids))
    return findings


def upstream_parent(repo: Repository) -> str | None:
    """Return the parent name when the repository is a fork of an upstream repository.

    >>> repo = dict(name="b", full_name="a/b", owner=dict(login="a"), fork=True)
    >>> upstream_parent(Repository(**repo, parent=dict(full_name="jenkinsci/b")))
    'jenkinsci/b'
    >>> upstream_parent(Repository(**repo, parent=dict(id=42))) is None
    True
    """
    try:
        parent = repo.parent["full_name"] if repo.parent else None
    except (KeyError, TypeError) as e:
        logger.debug("Could not read the parent of %s: %r", repo.full_name, e)
        return None
    if isinstance(parent, str) and parent.startswith(UPSTREAM_ORG_PREFIX):
        return parent
    return None


async def verify(github: GitHub, issue: dict[str, str]) -> list[Finding]:
    findings = await verify_users(github, split_users(issue.get(FIELD_COMMITTERS, "")))

    parsed = parse_repository_url(issue.get(FIELD_REPOSITORY_URL, ""))
    if not parsed:
        return findings
    owner, name = parsed

    if name.endswith(".git"):
        findings.append(msg.repository_url_has_git_suffix())
        name = name[: -len(".git")]

    try:
        repo = await github.get_repository(owner, name)
    except Exception as e:
        logger.info("Failed to fetch repository %s/%s: %r", owner, name, e)
        findings.append(msg.invalid_repository())
        return findings

    if not await github.has_readme(owner, name):
        findings.append(msg.missing_readme())

    if parent := upstream_parent(repo):
        findings.append(msg.fork_of_upstream(parent))

    return findings
