# Copyright © 2025 Red Hat
# SPDX-License-Identifier: Apache-2.0

"""
This module defines the verification finding.
"""

from dataclasses import dataclass, field
from enum import IntEnum


class Severity(IntEnum):
    INFO = 0
    WARNING = 1
    REQUIRED = 2


@dataclass(frozen=True)
class Finding:
    """A problem reported on a hosting request.

    Two findings are the same when their severity and message match:

    >>> a = Finding(Severity.REQUIRED, "oops")
    >>> a == Finding(Severity.REQUIRED, "oops", (Finding(Severity.INFO, "hint"),))
    True
    >>> a == Finding(Severity.WARNING, "oops")
    False
    """

    severity: Severity
    message: str
    subitems: tuple["Finding", ...] = field(default=(), compare=False)


def rank(severity) -> int:
    """Sort rank of a severity, anything unknown ranks as REQUIRED.

    >>> rank(Severity.INFO), rank(Severity.WARNING), rank("bogus")
    (0, 1, 2)
    """
    match severity:
        case Severity.INFO:
            return 0
        case Severity.WARNING:
            return 1
        case _:
            return 2
