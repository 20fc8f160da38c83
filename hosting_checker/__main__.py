# Copyright © 2025 Red Hat
# SPDX-License-Identifier: Apache-2.0

"""
This module is the CLI entrypoint for debugging purpose.
"""

import argparse
import asyncio

import hosting_checker.env
import hosting_checker.workflows


def usage():
    parser = argparse.ArgumentParser(description="Jenkins Hosting Checker")
    parser.add_argument("--debug", action="store_true")
    parser.add_argument(
        "--post", action="store_true", help="Post the comment on the issue"
    )
    parser.add_argument("ISSUE", help="The hosting request issue key, e.g. HOSTING-42")
    return parser.parse_args()


async def run_cli() -> None:
    args = usage()
    env = hosting_checker.env.Env(args.debug)
    if not args.post:
        env.dry_run = True
    try:
        comment = await hosting_checker.workflows.check_issue(env, args.ISSUE)
        print(comment)
    finally:
        await env.close()


def main():
    asyncio.run(run_cli())


if __name__ == "__main__":
    main()
