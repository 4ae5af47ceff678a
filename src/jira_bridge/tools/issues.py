"""Issue tools: get, create, update (fields, then workflow transition)."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import Field

from jira_bridge.errors import TransitionNotFoundError
from jira_bridge.jira.client import IssueTrackerClient
from jira_bridge.jira.models import (
    JiraCreatedIssue,
    JiraIssue,
    JiraNamed,
    JiraTransitionList,
    JiraUser,
)
from jira_bridge.tools.base import (
    UNASSIGNED,
    UNSPECIFIED_PRIORITY,
    UNSPECIFIED_REPORTER,
    ToolArguments,
    Translator,
    plain_description,
    segment,
)

logger = logging.getLogger("jira_bridge")


# ----------------------------------------------------------------------
# Projections
# ----------------------------------------------------------------------


def display_name(user: JiraUser | None, default: str) -> str:
    return (user.display_name if user else "") or default


def named(ref: JiraNamed | None, default: str | None = None) -> str | None:
    return (ref.name if ref else "") or default


def project_ref(issue: JiraIssue) -> dict[str, str] | None:
    project = issue.fields.project
    if project is None:
        return None
    return {"key": project.key, "name": project.name}


def issue_info(issue: JiraIssue) -> dict[str, Any]:
    """Full projection returned by get_issue."""
    fields = issue.fields
    return {
        "key": issue.key,
        "id": issue.id,
        "summary": fields.summary,
        "status": fields.status.name if fields.status else None,
        "assignee": display_name(fields.assignee, UNASSIGNED),
        "reporter": display_name(fields.reporter, UNSPECIFIED_REPORTER),
        "priority": named(fields.priority, UNSPECIFIED_PRIORITY),
        "issueType": named(fields.issue_type),
        "project": project_ref(issue),
        "description": plain_description(fields.description),
        "created": fields.created,
        "updated": fields.updated,
        "resolutiondate": fields.resolution_date,
        "duedate": fields.due_date,
        "labels": list(fields.labels),
        "components": [
            {"name": c.name, "description": c.description} for c in fields.components
        ],
        "fixVersions": [
            {
                "name": v.name,
                "description": v.description,
                "released": v.released,
                "releaseDate": v.release_date,
            }
            for v in fields.fix_versions
        ],
    }


def issue_summary(issue: JiraIssue) -> dict[str, Any]:
    """Reduced projection used in search listings."""
    fields = issue.fields
    return {
        "key": issue.key,
        "summary": fields.summary,
        "status": fields.status.name if fields.status else None,
        "assignee": display_name(fields.assignee, UNASSIGNED),
        "priority": named(fields.priority, UNSPECIFIED_PRIORITY),
        "issueType": named(fields.issue_type),
        "project": project_ref(issue),
        "created": fields.created,
        "updated": fields.updated,
    }


# ----------------------------------------------------------------------
# Outbound payloads
# ----------------------------------------------------------------------


def _by_name(value: str | None) -> dict[str, str] | None:
    # An explicit null clears the field instead of sending {"name": null}.
    return None if value is None else {"name": value}


def _optional_fields(args: CreateIssueArgs | UpdateIssueArgs) -> dict[str, Any]:
    """Fields shared by create and update, included only when supplied."""
    fields: dict[str, Any] = {}
    if args.supplied("description"):
        fields["description"] = args.description
    if args.supplied("priority"):
        fields["priority"] = _by_name(args.priority)
    if args.supplied("assignee"):
        fields["assignee"] = _by_name(args.assignee)
    if args.supplied("labels"):
        fields["labels"] = args.labels
    if args.supplied("duedate"):
        fields["duedate"] = args.duedate
    return fields


# ----------------------------------------------------------------------
# get_issue
# ----------------------------------------------------------------------


class GetIssueArgs(ToolArguments):
    issue_key: str = Field(alias="issueKey")


class GetIssue(Translator[GetIssueArgs]):
    name = "get_issue"
    arguments = GetIssueArgs

    async def run(self, args: GetIssueArgs, client: IssueTrackerClient) -> dict[str, Any]:
        raw = await client.request("GET", f"/issue/{segment(args.issue_key)}")
        return issue_info(JiraIssue.model_validate(raw))


# ----------------------------------------------------------------------
# create_issue
# ----------------------------------------------------------------------


class CreateIssueArgs(ToolArguments):
    project_key: str = Field(alias="projectKey")
    summary: str
    issue_type: str = Field(alias="issueType")
    description: str | None = None
    priority: str | None = None
    assignee: str | None = None
    labels: list[str] | None = None
    duedate: str | None = None


def create_payload(args: CreateIssueArgs) -> dict[str, Any]:
    fields: dict[str, Any] = {
        "project": {"key": args.project_key},
        "summary": args.summary,
        "issuetype": {"name": args.issue_type},
    }
    fields.update(_optional_fields(args))
    return {"fields": fields}


class CreateIssue(Translator[CreateIssueArgs]):
    name = "create_issue"
    arguments = CreateIssueArgs

    async def run(self, args: CreateIssueArgs, client: IssueTrackerClient) -> str:
        raw = await client.request("POST", "/issue", create_payload(args))
        created = JiraCreatedIssue.model_validate(raw)
        logger.info("Created issue %s in project %s", created.key, args.project_key)
        return f"Issue created successfully: {created.key} (ID: {created.id})"


# ----------------------------------------------------------------------
# update_issue
# ----------------------------------------------------------------------


class UpdateIssueArgs(ToolArguments):
    issue_key: str = Field(alias="issueKey")
    summary: str | None = None
    description: str | None = None
    status: str | None = None
    assignee: str | None = None
    priority: str | None = None
    labels: list[str] | None = None
    duedate: str | None = None


def update_fields(args: UpdateIssueArgs) -> dict[str, Any]:
    """Editable fields for PUT /issue/{key}; status is never part of it."""
    fields: dict[str, Any] = {}
    if args.supplied("summary"):
        fields["summary"] = args.summary
    fields.update(_optional_fields(args))
    return fields


class UpdateIssue(Translator[UpdateIssueArgs]):
    """Two strictly sequential phases: apply fields, then apply the transition.

    Either phase is skipped when it has nothing to do. A missing transition
    fails the call even if the fields were already written; there is no rollback.
    """

    name = "update_issue"
    arguments = UpdateIssueArgs

    async def run(self, args: UpdateIssueArgs, client: IssueTrackerClient) -> str:
        await self.apply_fields(args, client)
        if args.status is not None:
            await self.apply_transition(args.issue_key, args.status, client)
        return f"Issue {args.issue_key} updated successfully"

    async def apply_fields(self, args: UpdateIssueArgs, client: IssueTrackerClient) -> bool:
        fields = update_fields(args)
        if not fields:
            return False
        logger.debug("Updating %s fields: %s", args.issue_key, sorted(fields))
        await client.request("PUT", f"/issue/{segment(args.issue_key)}", {"fields": fields})
        return True

    async def apply_transition(
        self, issue_key: str, status: str, client: IssueTrackerClient
    ) -> None:
        path = f"/issue/{segment(issue_key)}/transitions"
        available = JiraTransitionList.model_validate(await client.request("GET", path) or {})

        # Transition names are matched exactly, case included.
        transition = next((t for t in available.transitions if t.name == status), None)
        if transition is None:
            raise TransitionNotFoundError(issue_key, status)

        logger.debug("Transitioning %s via %s (%s)", issue_key, transition.name, transition.id)
        await client.request("POST", path, {"transition": {"id": transition.id}})
