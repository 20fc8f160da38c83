# Copyright © 2025 Red Hat
# SPDX-License-Identifier: Apache-2.0

from pydantic import BaseModel, ConfigDict


class Owner(BaseModel):
    model_config = ConfigDict(extra="ignore")

    login: str


class Repository(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    full_name: str
    owner: Owner
    fork: bool = False
    # Kept raw, the fork lineage is best effort
    parent: dict | None = None
