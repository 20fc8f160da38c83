# Copyright © 2025 Red Hat
# SPDX-License-Identifier: Apache-2.0

"""
This module defines the findings reported on hosting requests.

Each finding kind has its own constructor so that the text is rendered once,
when the finding is created, and so that validators reporting the same
problem produce equal findings.
"""

from hosting_checker.config import (
    FIELD_COMMITTERS,
    FIELD_NEW_REPOSITORY_NAME,
    FIELD_REPOSITORY_URL,
    JENKINS_VERSION_PROPERTY,
    MIN_PARENT_VERSION,
    PARENT_GROUP_ID,
)
from hosting_checker.models.finding import Finding, Severity


def required(message: str, subitems: list[Finding] | None = None) -> Finding:
    return Finding(Severity.REQUIRED, message, tuple(subitems or ()))


def warning(message: str) -> Finding:
    return Finding(Severity.WARNING, message)


def info(message: str) -> Finding:
    return Finding(Severity.INFO, message)


# Issue fields


def missing_committers() -> Finding:
    return required(f"Missing list of users to authorize in '{FIELD_COMMITTERS}'")


def invalid_repository_url(url: str) -> Finding:
    return required(
        f"Repository URL '{url}' is not a valid GitHub repository "
        "(check that you do not have .git at the end, GitHub API doesn't support this)."
    )


def missing_repository_name() -> Finding:
    rules = [
        "Must match the artifactId (with -plugin added) from your build file "
        "(pom.xml/build.gradle).",
        "Must end in -plugin if hosting request is for a Jenkins plugin.",
        "Must be all lowercase.",
        "Must NOT contain \"Jenkins\".",
        "Must use hyphens ( - ) instead of spaces.",
    ]
    return required(
        "You must specify the repository name to fork your repository into in "
        f"'{FIELD_NEW_REPOSITORY_NAME}' field with the following rules:",
        [info(rule) for rule in rules],
    )


def repository_name_contains_jenkins(name: str) -> Finding:
    return required(
        f"'{FIELD_NEW_REPOSITORY_NAME}' must not contain \"jenkins\" or \"hudson\": {name}"
    )


def repository_name_missing_suffix(name: str) -> Finding:
    return required(f"'{FIELD_NEW_REPOSITORY_NAME}' must end with \"-plugin\": {name}")


def repository_name_not_lowercase(name: str) -> Finding:
    return required(f"'{FIELD_NEW_REPOSITORY_NAME}' must be all lowercase: {name}")


# GitHub


def organizations_not_users(names: list[str]) -> Finding:
    return required(
        f"The following names in '{FIELD_COMMITTERS}' are organizations "
        f"instead of users, this is not supported: {', '.join(names)}"
    )


def invalid_usernames(names: list[str]) -> Finding:
    return required(
        f"The following usernames in '{FIELD_COMMITTERS}' are not valid "
        f"GitHub usernames: {', '.join(names)}"
    )


def repository_url_has_git_suffix() -> Finding:
    return required(
        f"The '{FIELD_REPOSITORY_URL}' must not end with \".git\", please remove it"
    )


def invalid_repository() -> Finding:
    return required(
        f"The '{FIELD_REPOSITORY_URL}' field does not point to a valid GitHub repository"
    )


def missing_readme() -> Finding:
    return required(
        "Repository does not contain a README, please add one describing "
        "what the plugin does"
    )


def fork_of_upstream(parent: str) -> Finding:
    return required(
        f"Repository is currently a fork of {parent}, please contact GitHub "
        "support to have the fork relationship removed"
    )


# Build descriptor


def missing_build_descriptor() -> Finding:
    return warning(
        "No pom.xml found in root of project, if you are using a different "
        "build system, or this is not a plugin, you can disregard this message"
    )


def invalid_build_descriptor() -> Finding:
    return required("Invalid pom.xml file found")


def artifact_id_mismatch(artifact_id: str, expected: str) -> Finding:
    return required(
        f"The <artifactId> from the pom.xml ({artifact_id}) is incorrect, "
        f"it should be '{expected}' ('{FIELD_NEW_REPOSITORY_NAME}' without '-plugin')"
    )


def artifact_id_contains_jenkins() -> Finding:
    return required("The <artifactId> from the pom.xml should not contain \"Jenkins\"")


def artifact_id_not_lowercase() -> Finding:
    return required("The <artifactId> from the pom.xml should be all lower case")


def blank_display_name() -> Finding:
    return required("The <name> field in the pom.xml should not be blank or missing")


def display_name_contains_jenkins() -> Finding:
    return required("The <name> should not contain \"Jenkins\"")


def missing_display_name() -> Finding:
    return required("The pom.xml file does not contain a valid <name> for the project")


def wrong_parent_group_id() -> Finding:
    return required(f"The groupId for your parent pom is not \"{PARENT_GROUP_ID}\".")


def non_lts_jenkins_version(version: str) -> Finding:
    return info(
        f"Your pom.xml's <{JENKINS_VERSION_PROPERTY}>({version})"
        f"</{JENKINS_VERSION_PROPERTY}> does not use an LTS release. "
        "It is recommended that you use an LTS release as your minimum dependency."
    )


def parent_version_too_old(version: str) -> Finding:
    return required(
        f"The parent pom version '{version}' should be at least "
        f"{MIN_PARENT_VERSION} or higher"
    )


def missing_license() -> Finding:
    return required(
        "Please specify an open source license in the <licenses> section of your pom.xml"
    )
