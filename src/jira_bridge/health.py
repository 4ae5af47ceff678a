"""Validate Jira bridge configuration and test connectivity: python -m jira_bridge.health"""

from __future__ import annotations

import asyncio
import sys

from pydantic import ValidationError

from jira_bridge.jira.client import JiraClient
from jira_bridge.jira.errors import JiraAPIError
from jira_bridge.settings import JiraSettings


async def check(settings: JiraSettings | None = None) -> int:
    print("Loading settings...")
    if settings is None:
        try:
            settings = JiraSettings()
        except ValidationError as e:
            print(f"FAIL: Could not load settings: {e}")
            print("Ensure JIRA_URL, JIRA_EMAIL, and JIRA_API_TOKEN are set.")
            return 1

    print(f"  JIRA_URL: {settings.url}")
    print(f"  JIRA_EMAIL: {settings.email}")
    print(f"  JIRA_API_TOKEN: {'*' * 8}...{settings.api_token[-4:]}")
    print(f"  JIRA_READ_ONLY_MODE: {settings.read_only_mode}")

    print("\nTesting connectivity...")
    client = JiraClient(
        base_url=settings.url,
        email=settings.email,
        api_token=settings.api_token,
        timeout=settings.timeout,
        ssl_verify=settings.ssl_verify,
    )

    try:
        me = await client.request("GET", "/myself") or {}
        print(f"  OK: Authenticated as {me.get('displayName') or me.get('emailAddress')}")
        return 0
    except JiraAPIError as e:
        print(f"  FAIL: {e}")
        return 1
    finally:
        await client.close()


def main() -> int:
    return asyncio.run(check())


if __name__ == "__main__":
    sys.exit(main())
