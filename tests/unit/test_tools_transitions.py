"""Tests for get_transitions."""

from __future__ import annotations

import json

import pytest

from jira_bridge.tools.transitions import GetTransitions


@pytest.mark.asyncio
async def test_transitions_are_mapped(mock_client):
    mock_client.request.return_value = {
        "expand": "transitions",
        "transitions": [
            {
                "id": "21",
                "name": "Start Progress",
                "hasScreen": False,
                "to": {
                    "id": "3",
                    "name": "In Progress",
                    "description": "Work has started",
                    "statusCategory": {"id": 4, "key": "indeterminate", "name": "In Progress"},
                },
            }
        ],
    }

    result = await GetTransitions().execute({"issueKey": "PROJ-1"}, mock_client)

    mock_client.request.assert_awaited_once_with("GET", "/issue/PROJ-1/transitions")
    assert json.loads(result.text) == {
        "issueKey": "PROJ-1",
        "availableTransitions": [
            {
                "id": "21",
                "name": "Start Progress",
                "to": {
                    "name": "In Progress",
                    "description": "Work has started",
                    "statusCategory": "In Progress",
                },
            }
        ],
    }


@pytest.mark.asyncio
async def test_no_transitions_is_success(mock_client):
    mock_client.request.return_value = {"transitions": []}

    result = await GetTransitions().execute({"issueKey": "PROJ-9"}, mock_client)

    assert not result.is_error
    assert json.loads(result.text) == {"issueKey": "PROJ-9", "availableTransitions": []}
