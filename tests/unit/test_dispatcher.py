"""Tests for Dispatcher routing and error wrapping."""

from __future__ import annotations

import json

import pytest

from jira_bridge.catalog import CATALOG, tool_names
from jira_bridge.dispatcher import Dispatcher
from jira_bridge.jira.errors import JiraNotFoundError
from jira_bridge.tools import TRANSLATORS
from jira_bridge.tools.base import ToolArguments, Translator


class _Exploding(Translator[ToolArguments]):
    name = "explode"
    arguments = ToolArguments

    def __init__(self, error: Exception):
        self.error = error

    async def run(self, args, client):
        raise self.error


def test_catalog_matches_translators():
    assert tool_names() == list(TRANSLATORS)
    assert len(set(tool_names())) == len(CATALOG)


def test_list_tools_returns_catalog(mock_client):
    assert Dispatcher(mock_client).list_tools() == CATALOG


@pytest.mark.asyncio
@pytest.mark.parametrize("name", tool_names())
async def test_missing_arguments_never_reach_client(mock_client, name):
    result = await Dispatcher(mock_client).dispatch(name, None)

    assert result.is_error
    assert "Missing arguments" in result.text
    mock_client.request.assert_not_awaited()


@pytest.mark.asyncio
async def test_unknown_tool(mock_client):
    result = await Dispatcher(mock_client).dispatch("not_a_real_op", {})

    assert result.to_dict() == {
        "content": [{"type": "text", "text": "Error: Unknown tool: not_a_real_op"}],
        "isError": True,
    }
    mock_client.request.assert_not_awaited()


@pytest.mark.asyncio
async def test_missing_required_argument_names_it(mock_client):
    result = await Dispatcher(mock_client).dispatch("get_issue", {})

    assert result.is_error
    assert "issueKey" in result.text
    assert "get_issue" in result.text
    mock_client.request.assert_not_awaited()


@pytest.mark.asyncio
async def test_wrong_argument_type_is_reported(mock_client):
    result = await Dispatcher(mock_client).dispatch(
        "search_issues", {"jql": "project = PROJ", "maxResults": "many"}
    )

    assert result.is_error
    assert "maxResults" in result.text


@pytest.mark.asyncio
async def test_remote_error_message_passed_through(mock_client):
    mock_client.request.side_effect = JiraNotFoundError(
        "Jira API GET /issue/PROJ-9 failed (404 Not Found): Issue does not exist",
        status_code=404,
    )

    result = await Dispatcher(mock_client).dispatch("get_issue", {"issueKey": "PROJ-9"})

    assert result.is_error
    assert result.text == (
        "Error: Jira API GET /issue/PROJ-9 failed (404 Not Found): Issue does not exist"
    )


@pytest.mark.asyncio
async def test_unexpected_exception_is_wrapped(mock_client):
    dispatcher = Dispatcher(mock_client, translators={"explode": _Exploding(RuntimeError("boom"))})

    result = await dispatcher.dispatch("explode", {})

    assert result.is_error
    assert result.text == "Error: boom"


@pytest.mark.asyncio
async def test_exception_without_message_uses_sentinel(mock_client):
    dispatcher = Dispatcher(mock_client, translators={"explode": _Exploding(RuntimeError())})

    result = await dispatcher.dispatch("explode", {})

    assert result.text == "Error: Unknown error"


@pytest.mark.asyncio
async def test_success_returns_translator_envelope(mock_client, bare_issue):
    mock_client.request.return_value = bare_issue

    result = await Dispatcher(mock_client).dispatch("get_issue", {"issueKey": "PROJ-1"})

    assert not result.is_error
    assert len(result.content) == 1
    assert json.loads(result.text)["key"] == "PROJ-1"
    mock_client.request.assert_awaited_once_with("GET", "/issue/PROJ-1")


class TestReadOnlyMode:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "name, arguments",
        [
            ("create_issue", {"projectKey": "PROJ", "summary": "S", "issueType": "Task"}),
            ("update_issue", {"issueKey": "PROJ-1", "summary": "S"}),
            ("add_comment", {"issueKey": "PROJ-1", "comment": "hi"}),
        ],
    )
    async def test_blocks_writes(self, mock_client, name, arguments):
        result = await Dispatcher(mock_client, read_only=True).dispatch(name, arguments)

        assert result.is_error
        assert "READ_ONLY_MODE" in result.text
        mock_client.request.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_allows_reads(self, mock_client):
        mock_client.request.return_value = {"transitions": []}

        result = await Dispatcher(mock_client, read_only=True).dispatch(
            "get_transitions", {"issueKey": "PROJ-1"}
        )

        assert not result.is_error
