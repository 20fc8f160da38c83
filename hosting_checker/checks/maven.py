# Copyright © 2025 Red Hat
# SPDX-License-Identifier: Apache-2.0

"""
This module checks the pom.xml of the repository.
"""

import logging
import re
import xml.etree.ElementTree as ET

from defusedxml.common import DefusedXmlException
from defusedxml.ElementTree import fromstring

import hosting_checker.messages as msg
from hosting_checker.checks.fields import parse_repository_url
from hosting_checker.config import (
    BUILD_DESCRIPTOR,
    FIELD_NEW_REPOSITORY_NAME,
    FIELD_REPOSITORY_URL,
    JENKINS_VERSION_PROPERTY,
    PARENT_GROUP_ID,
)
from hosting_checker.errors import InvalidBuildDescriptor
from hosting_checker.models.finding import Finding
from hosting_checker.tools.github import GitHub, NotFound

logger = logging.getLogger(__name__)


def parse_pom(content: str) -> ET.Element:
    """Parse a pom.xml and drop the XML namespaces from the tags.

    >>> parse_pom('<project xmlns="http://maven.apache.org/POM/4.0.0"><name>x</name></project>').findtext("name")
    'x'
    """
    try:
        root = fromstring(content)
    except (ET.ParseError, DefusedXmlException) as e:
        raise InvalidBuildDescriptor(f"{BUILD_DESCRIPTOR}: {e}") from e
    for elem in root.iter():
        if isinstance(elem.tag, str) and "}" in elem.tag:
            elem.tag = elem.tag.split("}", 1)[1]
    return root


def child(elem: ET.Element, tag: str) -> ET.Element | None:
    """Lookup a direct child by its tag, tags may contain dots."""
    for c in elem:
        if c.tag == tag:
            return c
    return None


def text(elem: ET.Element | None) -> str | None:
    if elem is None:
        return None
    return (elem.text or "").strip()


def parse_version(version: str) -> tuple[int, int, int]:
    """Read the major, minor and incremental components of a version.

    >>> parse_version("2.107.3")
    (2, 107, 3)
    >>> parse_version("1.625")
    (1, 625, 0)
    >>> parse_version("2.60-SNAPSHOT")
    (2, 60, 0)
    """
    numbers = re.split(r"[-+]", version.strip(), maxsplit=1)[0].split(".")
    if len(numbers) > 3 or not all(n.isdigit() for n in numbers):
        raise ValueError(f"{version}: invalid version")
    components = [int(n) for n in numbers] + [0, 0]
    return (components[0], components[1], components[2])


def verify_artifact_id(pom: ET.Element, repository_name: str) -> list[Finding]:
    artifact_id = text(child(pom, "artifactId"))
    if artifact_id is None:
        raise InvalidBuildDescriptor("missing <artifactId>")

    findings = []
    expected = repository_name.removesuffix("-plugin")
    if artifact_id.lower() != expected.lower():
        findings.append(msg.artifact_id_mismatch(artifact_id, expected))
    if "jenkins" in artifact_id.lower():
        findings.append(msg.artifact_id_contains_jenkins())
    if artifact_id != artifact_id.lower():
        findings.append(msg.artifact_id_not_lowercase())
    return findings


def verify_name(pom: ET.Element) -> list[Finding]:
    name = text(child(pom, "name"))
    if name is None:
        return [msg.missing_display_name()]
    if not name:
        return [msg.blank_display_name()]
    if "jenkins" in name.lower():
        return [msg.display_name_contains_jenkins()]
    return []


def verify_parent(pom: ET.Element) -> list[Finding]:
    parent = child(pom, "parent")
    if parent is None:
        return []

    findings = []
    if text(child(parent, "groupId")) != PARENT_GROUP_ID:
        findings.append(msg.wrong_parent_group_id())

    version = text(child(parent, "version"))
    if version:
        try:
            findings.extend(verify_parent_version(pom, version))
        except Exception:
            logger.exception("Failed to check the parent pom version")
    return findings


def verify_parent_version(pom: ET.Element, version: str) -> list[Finding]:
    findings = []
    if parse_version(version)[0] == 2:
        properties = child(pom, "properties")
        override = None
        if properties is not None:
            override = text(child(properties, JENKINS_VERSION_PROPERTY))
        jenkins_version = override or version
        if parse_version(jenkins_version)[2] <= 0:
            findings.append(msg.non_lts_jenkins_version(jenkins_version))
    else:
        findings.append(msg.parent_version_too_old(version))
    return findings


def verify_license(pom: ET.Element) -> list[Finding]:
    licenses = child(pom, "licenses")
    if licenses is None or child(licenses, "license") is None:
        return [msg.missing_license()]
    return []


def verify_pom(content: str, repository_name: str) -> list[Finding]:
    """Run the pom.xml checks, a malformed pom.xml stops the checks."""
    findings: list[Finding] = []
    try:
        pom = parse_pom(content)
        if repository_name:
            findings.extend(verify_artifact_id(pom, repository_name))
        findings.extend(verify_name(pom))
        findings.extend(verify_parent(pom))
        findings.extend(verify_license(pom))
    except InvalidBuildDescriptor as e:
        logger.info("Invalid build descriptor: %s", e)
        findings.append(msg.invalid_build_descriptor())
    return findings


async def verify(github: GitHub, issue: dict[str, str]) -> list[Finding]:
    url = issue.get(FIELD_REPOSITORY_URL, "").strip()
    parsed = parse_repository_url(url)
    if not parsed:
        return [msg.invalid_repository_url(url)]
    owner, name = parsed

    repo = await github.get_repository(owner, name)
    try:
        content = await github.get_file_contents(
            repo.owner.login, repo.name, BUILD_DESCRIPTOR
        )
    except NotFound:
        return [msg.missing_build_descriptor()]

    return verify_pom(content, issue.get(FIELD_NEW_REPOSITORY_NAME, "").strip())
