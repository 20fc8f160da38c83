# Copyright © 2025 Red Hat
# SPDX-License-Identifier: Apache-2.0

import unittest

import hosting_checker.messages as msg
from hosting_checker.checks.maven import parse_version, verify, verify_pom
from hosting_checker.models.finding import Severity

from fakes import POM, FakeGitHub, make_issue, make_pom


class TestPom(unittest.TestCase):
    def test_valid_pom(self) -> None:
        self.assertEqual(verify_pom(make_pom(), "cool-thing-plugin"), [])

    def test_artifact_id_matches(self) -> None:
        findings = verify_pom(make_pom(artifact_id="cool-thing"), "cool-thing-plugin")
        self.assertNotIn(msg.artifact_id_mismatch("cool-thing", "cool-thing"), findings)
        self.assertEqual(findings, [])

    def test_artifact_id_mismatch(self) -> None:
        findings = verify_pom(make_pom(artifact_id="CoolThing"), "cool-thing-plugin")
        self.assertEqual(
            findings,
            [
                msg.artifact_id_mismatch("CoolThing", "cool-thing"),
                msg.artifact_id_not_lowercase(),
            ],
        )

    def test_artifact_id_case_insensitive(self) -> None:
        findings = verify_pom(make_pom(artifact_id="Cool-Thing"), "cool-thing-plugin")
        self.assertEqual(findings, [msg.artifact_id_not_lowercase()])

    def test_artifact_id_jenkins(self) -> None:
        findings = verify_pom(
            make_pom(artifact_id="jenkins-thing"), "jenkins-thing-plugin"
        )
        self.assertEqual(findings, [msg.artifact_id_contains_jenkins()])

    def test_artifact_id_skipped_without_repository_name(self) -> None:
        self.assertEqual(verify_pom(make_pom(artifact_id="CoolThing"), ""), [])

    def test_display_name(self) -> None:
        findings = verify_pom(make_pom(name="  "), "cool-thing-plugin")
        self.assertEqual(findings, [msg.blank_display_name()])
        findings = verify_pom(make_pom(name="Jenkins Cool Thing"), "cool-thing-plugin")
        self.assertEqual(findings, [msg.display_name_contains_jenkins()])

    def test_missing_display_name(self) -> None:
        pom = make_pom().replace("<name>Cool Thing</name>", "")
        findings = verify_pom(pom, "cool-thing-plugin")
        self.assertEqual(findings, [msg.missing_display_name()])

    def test_lts_recommendation(self) -> None:
        # The jenkins.version property overrides the parent version
        self.assertEqual(verify_pom(make_pom(jenkins_version="2.107.1"), ""), [])
        findings = verify_pom(make_pom(jenkins_version="2.107"), "")
        self.assertEqual(findings, [msg.non_lts_jenkins_version("2.107")])
        self.assertEqual(findings[0].severity, Severity.INFO)
        findings = verify_pom(make_pom(jenkins_version="2.107.0"), "")
        self.assertEqual(findings, [msg.non_lts_jenkins_version("2.107.0")])

    def test_lts_recommendation_from_parent(self) -> None:
        findings = verify_pom(make_pom(parent_version="2.107.3", jenkins_version=""), "")
        self.assertEqual(findings, [])
        findings = verify_pom(make_pom(parent_version="2.37", jenkins_version=""), "")
        self.assertEqual(findings, [msg.non_lts_jenkins_version("2.37")])

    def test_old_parent(self) -> None:
        findings = verify_pom(make_pom(parent_version="1.625"), "")
        self.assertEqual(findings, [msg.parent_version_too_old("1.625")])

    def test_parent_group_id(self) -> None:
        pom = make_pom().replace(
            "<groupId>org.jenkins-ci.plugins</groupId>",
            "<groupId>org.example</groupId>",
        )
        self.assertEqual(verify_pom(pom, ""), [msg.wrong_parent_group_id()])

    def test_unparsable_version_is_ignored(self) -> None:
        findings = verify_pom(make_pom(parent_version="${revision}"), "")
        self.assertEqual(findings, [])

    def test_unparsable_version_keeps_group_id(self) -> None:
        pom = make_pom(parent_version="${revision}").replace(
            "<groupId>org.jenkins-ci.plugins</groupId>",
            "<groupId>org.example</groupId>",
        )
        self.assertEqual(verify_pom(pom, ""), [msg.wrong_parent_group_id()])

    def test_missing_license(self) -> None:
        pom = make_pom().replace("<license>", "<!-- ").replace("</license>", " -->")
        self.assertEqual(verify_pom(pom, ""), [msg.missing_license()])
        pom = POM.replace("<licenses>", "").replace("</licenses>", "")
        pom = pom.replace("<license>", "").replace("</license>", "")
        pom = pom.format(
            artifact_id="cool-thing",
            name="Cool Thing",
            parent_version="2.37",
            properties="<jenkins.version>2.107.3</jenkins.version>",
        )
        self.assertEqual(verify_pom(pom, ""), [msg.missing_license()])

    def test_invalid_xml(self) -> None:
        findings = verify_pom("<project><name>", "cool-thing-plugin")
        self.assertEqual(findings, [msg.invalid_build_descriptor()])

    def test_missing_artifact_id(self) -> None:
        pom = make_pom().replace("<artifactId>cool-thing</artifactId>", "")
        findings = verify_pom(pom, "cool-thing-plugin")
        self.assertEqual(findings, [msg.invalid_build_descriptor()])

    def test_entities_are_rejected(self) -> None:
        pom = '<!DOCTYPE project [<!ENTITY x "y">]>' + make_pom().split("?>", 1)[1]
        findings = verify_pom(pom, "cool-thing-plugin")
        self.assertEqual(findings, [msg.invalid_build_descriptor()])

    def test_parse_version(self) -> None:
        self.assertEqual(parse_version("2.107.3"), (2, 107, 3))
        self.assertEqual(parse_version("2"), (2, 0, 0))
        with self.assertRaises(ValueError):
            parse_version("${jenkins.version}")
        with self.assertRaises(ValueError):
            parse_version("1.2.3.4")


class TestMaven(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self) -> None:
        self.github = FakeGitHub()

    async def test_valid(self) -> None:
        self.assertEqual(await verify(self.github, make_issue()), [])

    async def test_invalid_url(self) -> None:
        findings = await verify(self.github, make_issue(url="nope"))
        self.assertEqual(findings, [msg.invalid_repository_url("nope")])

    async def test_missing_pom(self) -> None:
        self.github.files.clear()
        findings = await verify(self.github, make_issue())
        self.assertEqual(findings, [msg.missing_build_descriptor()])
        self.assertEqual(findings[0].severity, Severity.WARNING)

    async def test_pom_checks(self) -> None:
        self.github.files[("alice", "cool-thing", "pom.xml")] = make_pom(
            artifact_id="CoolThing"
        )
        findings = await verify(self.github, make_issue())
        self.assertIn(msg.artifact_id_mismatch("CoolThing", "cool-thing"), findings)
