# Copyright © 2025 Red Hat
# SPDX-License-Identifier: Apache-2.0

__version__ = "0.1.0"

from .env import Env
from .workflows import check_issue, run_checks

__all__ = ["Env", "check_issue", "run_checks"]
