# Copyright © 2025 Red Hat
# SPDX-License-Identifier: Apache-2.0

import io
import unittest

from hosting_checker.models.finding import Finding, Severity
from hosting_checker.report import format_comment, render


def render_text(findings) -> str:
    out = io.StringIO()
    render(findings, out)
    return out.getvalue()


class TestReport(unittest.TestCase):
    def setUp(self) -> None:
        self.findings = {
            Finding(Severity.INFO, "use an LTS"),
            Finding(Severity.WARNING, "no pom.xml"),
            Finding(
                Severity.REQUIRED,
                "bad name",
                (Finding(Severity.INFO, "rule 1"), Finding(Severity.INFO, "rule 2")),
            ),
        }

    def test_render_order(self) -> None:
        lines = render_text(self.findings).splitlines()
        self.assertEqual(
            lines,
            [
                "* {color:red}*[REQUIRED]*{color} bad name",
                "** rule 1",
                "** rule 2",
                "* {color:orange}*[WARNING]*{color} no pom.xml",
                "* {color:black}*[INFO]*{color} use an LTS",
            ],
        )

    def test_render_is_idempotent(self) -> None:
        self.assertEqual(render_text(self.findings), render_text(self.findings))

    def test_unknown_severity_renders_required(self) -> None:
        text = render_text([Finding("bogus", "odd")])  # type: ignore
        self.assertEqual(text, "* {color:red}*[REQUIRED]*{color} odd\n")

    def test_render_depth(self) -> None:
        out = io.StringIO()
        render([Finding(Severity.REQUIRED, "nested")], out, depth=3)
        self.assertEqual(out.getvalue(), "*** nested\n")

    def test_comment_without_findings(self) -> None:
        comment = format_comment(set())
        self.assertIn("everything in order", comment)
        self.assertNotIn("[REQUIRED]", comment)

    def test_comment_with_required(self) -> None:
        comment = format_comment(self.findings)
        self.assertIn("correct all issues marked", comment)
        self.assertTrue(
            comment.endswith("* {color:black}*[INFO]*{color} use an LTS\n")
        )

    def test_comment_without_required(self) -> None:
        comment = format_comment([Finding(Severity.INFO, "use an LTS")])
        self.assertIn("No blocking issue", comment)
        self.assertIn("[INFO]", comment)
