# Copyright © 2025 Red Hat
# SPDX-License-Identifier: Apache-2.0

"""
This module checks the hosting request fields.
"""

import re

import hosting_checker.messages as msg
from hosting_checker.config import (
    FIELD_COMMITTERS,
    FIELD_NEW_REPOSITORY_NAME,
    FIELD_REPOSITORY_URL,
)
from hosting_checker.models.finding import Finding

REPOSITORY_URL = re.compile(r"(https://github\.com/)?(\S+?)/(\S+?)/?")


def parse_repository_url(url: str) -> tuple[str, str] | None:
    """Extract the owner and the name of a GitHub repository.

    >>> parse_repository_url("https://github.com/foo/bar")
    ('foo', 'bar')
    >>> parse_repository_url("foo/bar.git")
    ('foo', 'bar.git')
    >>> parse_repository_url("not a url") is None
    True
    """
    if m := REPOSITORY_URL.fullmatch(url.strip()):
        return (m.group(2), m.group(3))
    return None


def verify(issue: dict[str, str]) -> list[Finding]:
    findings = []

    if not issue.get(FIELD_COMMITTERS, "").strip():
        findings.append(msg.missing_committers())

    url = issue.get(FIELD_REPOSITORY_URL, "").strip()
    if not url or not parse_repository_url(url):
        findings.append(msg.invalid_repository_url(url))

    name = issue.get(FIELD_NEW_REPOSITORY_NAME, "").strip()
    if not name:
        findings.append(msg.missing_repository_name())
    else:
        lowered = name.lower()
        if "jenkins" in lowered or "hudson" in lowered:
            findings.append(msg.repository_name_contains_jenkins(name))
        if not name.endswith("-plugin"):
            findings.append(msg.repository_name_missing_suffix(name))
        if name != lowered:
            findings.append(msg.repository_name_not_lowercase(name))

    return findings
