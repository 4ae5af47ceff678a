"""Transition tool: list the workflow transitions available for an issue."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from jira_bridge.jira.client import IssueTrackerClient
from jira_bridge.jira.models import JiraTransition, JiraTransitionList
from jira_bridge.tools.base import ToolArguments, Translator, segment


def transition_info(transition: JiraTransition) -> dict[str, Any]:
    target = transition.to
    return {
        "id": transition.id,
        "name": transition.name,
        "to": {
            "name": target.name if target else None,
            "description": target.description if target else None,
            "statusCategory": target.status_category.name
            if target and target.status_category
            else None,
        },
    }


class GetTransitionsArgs(ToolArguments):
    issue_key: str = Field(alias="issueKey")


class GetTransitions(Translator[GetTransitionsArgs]):
    name = "get_transitions"
    arguments = GetTransitionsArgs

    async def run(self, args: GetTransitionsArgs, client: IssueTrackerClient) -> dict[str, Any]:
        raw = await client.request("GET", f"/issue/{segment(args.issue_key)}/transitions")
        available = JiraTransitionList.model_validate(raw or {})
        return {
            "issueKey": args.issue_key,
            "availableTransitions": [transition_info(t) for t in available.transitions],
        }
