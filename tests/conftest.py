"""Shared pytest configuration and fixtures."""

from unittest.mock import AsyncMock

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: marks integration tests")


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless explicitly requested."""
    if not config.getoption("-m", default=None) or "integration" not in config.getoption("-m", default=""):
        skip_integration = pytest.mark.skip(reason="use -m integration to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


@pytest.fixture
def mock_client():
    """Stand-in for the remote client; only ``request`` is used by the tools."""
    return AsyncMock()


@pytest.fixture
def bare_issue():
    """A Jira issue with every optional field missing or null."""
    return {
        "id": "10001",
        "key": "PROJ-1",
        "self": "https://test.atlassian.net/rest/api/3/issue/10001",
        "fields": {
            "summary": "Login button does nothing",
            "status": {"name": "To Do", "statusCategory": {"key": "new", "name": "To Do"}},
            "assignee": None,
            "reporter": None,
            "priority": None,
            "issuetype": {"id": "1", "name": "Bug"},
            "project": {"id": "100", "key": "PROJ", "name": "Project"},
            "description": None,
            "created": "2024-03-01T10:15:30.000+0000",
            "updated": "2024-03-02T08:00:00.000+0000",
            "resolutiondate": None,
            "duedate": None,
            "labels": [],
            "components": [],
            "fixVersions": [],
        },
    }


@pytest.fixture
def full_issue(bare_issue):
    issue = dict(bare_issue)
    issue["fields"] = {
        **bare_issue["fields"],
        "assignee": {"accountId": "a1", "displayName": "Ana Lopez"},
        "reporter": {"accountId": "r1", "displayName": "Ravi Kumar"},
        "priority": {"id": "2", "name": "High"},
        "description": "Steps to reproduce are in the attachment.",
        "resolutiondate": "2024-03-05T12:00:00.000+0000",
        "duedate": "2024-03-10",
        "labels": ["ui", "regression", "auth"],
        "components": [
            {"name": "Frontend", "description": "Web client"},
            {"name": "Auth"},
        ],
        "fixVersions": [
            {"name": "1.2.0", "description": "Spring release", "released": False, "releaseDate": "2024-04-01"},
        ],
    }
    return issue
