# Copyright © 2025 Red Hat
# SPDX-License-Identifier: Apache-2.0

"""
This module renders the findings into a JIRA comment.
"""

import io
from collections.abc import Iterable
from typing import TextIO

from hosting_checker.models.finding import Finding, Severity, rank


def severity_style(severity) -> tuple[str, str]:
    """Return the label and color of a severity.

    >>> severity_style(Severity.WARNING)
    ('WARNING', 'orange')
    >>> severity_style(None)
    ('REQUIRED', 'red')
    """
    match severity:
        case Severity.INFO:
            return ("INFO", "black")
        case Severity.WARNING:
            return ("WARNING", "orange")
        case _:
            return ("REQUIRED", "red")


def render(findings: Iterable[Finding], out: TextIO, depth: int = 1) -> None:
    """Write the findings as a nested wiki markup list, most severe first.

    >>> out = io.StringIO()
    >>> render([Finding(Severity.INFO, "b"), Finding(Severity.REQUIRED, "a")], out)
    >>> print(out.getvalue(), end="")
    * {color:red}*[REQUIRED]*{color} a
    * {color:black}*[INFO]*{color} b
    """
    items = sorted(findings, key=lambda f: (-rank(f.severity), f.message))
    for finding in items:
        out.write("*" * depth)
        out.write(" ")
        if depth == 1:
            label, color = severity_style(finding.severity)
            out.write(f"{{color:{color}}}*[{label}]*{{color}} ")
        out.write(finding.message)
        out.write("\n")
        if finding.subitems:
            render(finding.subitems, out, depth + 1)


GREETING = "Hello from your friendly Jenkins Hosting Checker\n\n"


def format_comment(findings: Iterable[Finding]) -> str:
    """Build the comment posted on the hosting request."""
    findings = list(findings)
    out = io.StringIO()
    out.write(GREETING)
    if not findings:
        out.write(
            "It looks like you have everything in order for your hosting request. "
            "A human volunteer will check over things that I am not able to check "
            "for (code review, README content, etc) and process the request as "
            "quickly as possible. Thank you for your patience.\n"
        )
        return out.getvalue()

    if any(rank(f.severity) == rank(Severity.REQUIRED) for f in findings):
        out.write(
            "It appears you have some issues with your hosting request. Please see "
            "the list below and correct all issues marked {color:red}REQUIRED{color}. "
            "Your hosting request will not be approved until these issues are "
            "corrected.\n\n"
        )
    else:
        out.write(
            "No blocking issue was found in your hosting request. Please have a "
            "look at the notes below, a human volunteer will process the request "
            "as quickly as possible.\n\n"
        )
    render(findings, out)
    return out.getvalue()
