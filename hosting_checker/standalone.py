# Copyright © 2025 Red Hat
# SPDX-License-Identifier: Apache-2.0

"""
A standalone FastApi, served with `uvicorn hosting_checker.standalone:app`.
"""

from fastapi import FastAPI

import hosting_checker.api

app = FastAPI(lifespan=hosting_checker.api.lifespan)
app.include_router(hosting_checker.api.router)
