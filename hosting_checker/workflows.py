# Copyright © 2025 Red Hat
# SPDX-License-Identifier: Apache-2.0

"""
This module defines the hosting request check workflow.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeAlias

import hosting_checker.checks.fields
import hosting_checker.checks.github
import hosting_checker.checks.maven
from hosting_checker.env import Env
from hosting_checker.models.finding import Finding
from hosting_checker.report import format_comment

Verifier: TypeAlias = Callable[[Env, dict[str, str]], Awaitable[list[Finding]]]


async def verify_fields(env: Env, issue: dict[str, str]) -> list[Finding]:
    return hosting_checker.checks.fields.verify(issue)


async def verify_github(env: Env, issue: dict[str, str]) -> list[Finding]:
    return await hosting_checker.checks.github.verify(env.github, issue)


async def verify_maven(env: Env, issue: dict[str, str]) -> list[Finding]:
    return await hosting_checker.checks.maven.verify(env.github, issue)


VERIFIERS: list[tuple[str, Verifier]] = [
    ("fields", verify_fields),
    ("github", verify_github),
    ("maven", verify_maven),
]


async def run_checks(env: Env, issue: dict[str, str]) -> set[Finding]:
    """Run every verifier in order and collect their findings."""
    findings: set[Finding] = set()
    for name, verifier in VERIFIERS:
        env.log.debug("Running %s verifier", name)
        try:
            findings.update(await verifier(env, issue))
        except Exception:
            env.log.exception("The %s verifier failed", name)
    return findings


async def fetch_issue(env: Env, key: str) -> dict[str, str]:
    return await asyncio.to_thread(env.jira.get_issue_fields, key)


async def report_issue(env: Env, key: str, issue: dict[str, str]) -> str:
    """Check the issue fields and comment the result on the issue."""
    findings = await run_checks(env, issue)
    comment = format_comment(findings)
    env.log.info("%s: %d finding(s)", key, len(findings))
    if env.dry_run:
        env.log.info("Dry run, not posting comment on %s:\n%s", key, comment)
    else:
        await asyncio.to_thread(env.jira.add_comment, key, comment)
    return comment


async def check_issue(env: Env, key: str) -> str:
    """Check a hosting request and comment the result on the issue."""
    issue = await fetch_issue(env, key)
    return await report_issue(env, key, issue)
