# Copyright © 2025 Red Hat
# SPDX-License-Identifier: Apache-2.0

"""
This module defines the hosting checker exceptions.
"""


class HostingCheckerError(Exception):
    pass


class IssueTrackerError(HostingCheckerError):
    """The issue tracker request failed."""


class InvalidBuildDescriptor(HostingCheckerError):
    """The build descriptor is missing a mandatory element or is not valid XML."""
