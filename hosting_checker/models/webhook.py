# Copyright © 2025 Red Hat
# SPDX-License-Identifier: Apache-2.0

from pydantic import BaseModel, ConfigDict


class IssueRef(BaseModel):
    model_config = ConfigDict(extra="ignore")

    key: str


class WebhookPayload(BaseModel):
    """The subset of the JIRA webhook body we care about."""

    model_config = ConfigDict(extra="ignore")

    webhookEvent: str | None = None
    issue: IssueRef | None = None
