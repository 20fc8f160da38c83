# Copyright © 2025 Red Hat
# SPDX-License-Identifier: Apache-2.0

"""
This module defines the FastAPI handlers.
"""

from contextlib import asynccontextmanager

from fastapi import APIRouter, BackgroundTasks, FastAPI, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

import hosting_checker.workflows
from hosting_checker.config import ISSUE_EVENTS
from hosting_checker.env import Env
from hosting_checker.errors import IssueTrackerError
from hosting_checker.models.webhook import WebhookPayload


async def run(env: Env, key: str, issue: dict[str, str]) -> None:
    try:
        await hosting_checker.workflows.report_issue(env, key, issue)
    except Exception:
        env.log.exception("Failed to report on %s", key)


router = APIRouter()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Setup the fastapi app.state"""
    # setup
    app.state.env = Env(debug=False)
    yield
    # teardown
    await app.state.env.close()


def bad_request(reason: str) -> PlainTextResponse:
    return PlainTextResponse(reason, status_code=400)


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.post("/")
async def webhook(request: Request, background_tasks: BackgroundTasks):
    """Check the hosting request referenced by a JIRA webhook."""
    env: Env = request.app.state.env
    try:
        payload = WebhookPayload.model_validate_json(await request.body())
    except ValidationError as e:
        env.log.info("Invalid webhook body: %s", e)
        return bad_request("Invalid webhook body")

    if payload.webhookEvent is None:
        return bad_request("Missing webhookEvent")
    if payload.webhookEvent not in ISSUE_EVENTS:
        return bad_request(f"Unsupported webhookEvent: {payload.webhookEvent}")
    if payload.issue is None:
        return bad_request("Missing issue")

    key = payload.issue.key
    try:
        issue = await hosting_checker.workflows.fetch_issue(env, key)
    except IssueTrackerError as e:
        env.log.warning("Could not fetch %s: %s", key, e)
        return bad_request(f"Could not fetch issue {key}")

    background_tasks.add_task(run, env, key, issue)
    return {"status": "ok"}
