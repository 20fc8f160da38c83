# Copyright © 2025 Red Hat
# SPDX-License-Identifier: Apache-2.0

"""
This module defines the system configuration from the process os.environ.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # JIRA configuration
    JIRA_URL: str = "https://issues.jenkins.io"
    JIRA_USERNAME: str | None = None
    JIRA_PASSWORD: str | None = None

    # GitHub configuration, the token is optional but unauthenticated
    # access is heavily rate limited.
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_API_TOKEN: str | None = None

    # When set, the comment is not posted and the logs are verbose.
    DEBUG_HOSTING: bool = False

    # Timeout in seconds for every outbound call.
    HTTP_TIMEOUT: float = 30.0


# Issue fields
FIELD_COMMITTERS = "GitHub Users to Authorize as Committers"
FIELD_REPOSITORY_URL = "Repository URL"
FIELD_NEW_REPOSITORY_NAME = "New Repository Name"

# Accepted webhook events
ISSUE_EVENTS = frozenset(
    ["jira:issue_created", "jira:issue_updated", "issue_created", "issue_updated"]
)

# Hosting rules
UPSTREAM_ORG_PREFIX = "jenkinsci/"
PARENT_GROUP_ID = "org.jenkins-ci.plugins"
MIN_PARENT_VERSION = "2.11"
JENKINS_VERSION_PROPERTY = "jenkins.version"
BUILD_DESCRIPTOR = "pom.xml"
