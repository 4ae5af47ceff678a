"""Project tool: get project details."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from jira_bridge.jira.client import IssueTrackerClient
from jira_bridge.jira.models import JiraProject
from jira_bridge.tools.base import NO_DESCRIPTION, ToolArguments, Translator, segment


def project_info(project: JiraProject) -> dict[str, Any]:
    lead = project.lead
    category = project.project_category
    return {
        "key": project.key,
        "id": project.id,
        "name": project.name,
        "projectTypeKey": project.project_type_key,
        "simplified": project.simplified,
        "lead": {
            "name": lead.name,
            "displayName": lead.display_name,
            "emailAddress": lead.email_address,
        }
        if lead
        else None,
        "description": project.description or NO_DESCRIPTION,
        "projectCategory": {"name": category.name, "description": category.description}
        if category
        else None,
        "avatarUrls": dict(project.avatar_urls),
    }


class GetProjectInfoArgs(ToolArguments):
    project_key: str = Field(alias="projectKey")


class GetProjectInfo(Translator[GetProjectInfoArgs]):
    name = "get_project_info"
    arguments = GetProjectInfoArgs

    async def run(self, args: GetProjectInfoArgs, client: IssueTrackerClient) -> dict[str, Any]:
        raw = await client.request("GET", f"/project/{segment(args.project_key)}")
        return project_info(JiraProject.model_validate(raw))
