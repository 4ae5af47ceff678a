"""Search tool: JQL search with a fixed field selection."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from jira_bridge.jira.client import IssueTrackerClient
from jira_bridge.jira.models import JiraSearchResult
from jira_bridge.tools.base import ToolArguments, Translator
from jira_bridge.tools.issues import issue_summary

DEFAULT_MAX_RESULTS = 50

# Only what issue_summary needs; keeps search responses small.
SEARCH_FIELDS = (
    "key",
    "summary",
    "status",
    "assignee",
    "priority",
    "created",
    "updated",
    "issuetype",
    "project",
)


class SearchIssuesArgs(ToolArguments):
    jql: str
    max_results: int = Field(alias="maxResults", default=DEFAULT_MAX_RESULTS)
    start_at: int = Field(alias="startAt", default=0)


def search_payload(args: SearchIssuesArgs) -> dict[str, Any]:
    return {
        "jql": args.jql,
        "maxResults": args.max_results,
        "startAt": args.start_at,
        "fields": list(SEARCH_FIELDS),
    }


class SearchIssues(Translator[SearchIssuesArgs]):
    name = "search_issues"
    arguments = SearchIssuesArgs

    async def run(self, args: SearchIssuesArgs, client: IssueTrackerClient) -> dict[str, Any]:
        raw = await client.request("POST", "/search", search_payload(args))
        result = JiraSearchResult.model_validate(raw or {})
        return {
            "total": result.total,
            "startAt": result.start_at,
            "maxResults": result.max_results,
            "issues": [issue_summary(issue) for issue in result.issues],
        }
