"""Static declaration of the tools this server advertises."""

from __future__ import annotations

from typing import Any, NamedTuple


class ToolSpec(NamedTuple):
    name: str
    description: str
    input_schema: dict[str, Any]


def _string(description: str) -> dict[str, Any]:
    return {"type": "string", "description": description}


def _string_list(description: str) -> dict[str, Any]:
    return {"type": "array", "items": {"type": "string"}, "description": description}


def _object(properties: dict[str, Any], required: list[str]) -> dict[str, Any]:
    return {"type": "object", "properties": properties, "required": required}


CATALOG: tuple[ToolSpec, ...] = (
    ToolSpec(
        name="get_issue",
        description="Get the full details of a single Jira issue",
        input_schema=_object(
            {"issueKey": _string("The issue key (e.g. PROJ-123)")},
            required=["issueKey"],
        ),
    ),
    ToolSpec(
        name="create_issue",
        description="Create a new Jira issue",
        input_schema=_object(
            {
                "projectKey": _string("Project key"),
                "summary": _string("Issue summary"),
                "description": _string("Issue description"),
                "issueType": _string("Issue type (Bug, Story, Task, Epic, ...)"),
                "priority": _string("Priority (Highest, High, Medium, Low, Lowest)"),
                "assignee": _string("Assignee (username or email)"),
                "labels": _string_list("Issue labels"),
                "duedate": _string("Due date (YYYY-MM-DD)"),
            },
            required=["projectKey", "summary", "issueType"],
        ),
    ),
    ToolSpec(
        name="update_issue",
        description=(
            "Update an existing issue. Field changes are applied first; "
            "a status change is then applied through the matching workflow transition"
        ),
        input_schema=_object(
            {
                "issueKey": _string("The key of the issue to update"),
                "summary": _string("New summary"),
                "description": _string("New description"),
                "status": _string("New status (the exact transition name)"),
                "assignee": _string("New assignee (username or email)"),
                "priority": _string("New priority"),
                "labels": _string_list("New labels (replaces the existing ones)"),
                "duedate": _string("New due date (YYYY-MM-DD)"),
            },
            required=["issueKey"],
        ),
    ),
    ToolSpec(
        name="search_issues",
        description="Search issues using JQL (Jira Query Language)",
        input_schema=_object(
            {
                "jql": _string("JQL query"),
                "maxResults": {
                    "type": "number",
                    "description": "Maximum number of results",
                    "default": 50,
                },
                "startAt": {
                    "type": "number",
                    "description": "Index of the first result",
                    "default": 0,
                },
            },
            required=["jql"],
        ),
    ),
    ToolSpec(
        name="add_comment",
        description="Add a comment to an issue",
        input_schema=_object(
            {
                "issueKey": _string("The issue key"),
                "comment": _string("Comment text"),
            },
            required=["issueKey", "comment"],
        ),
    ),
    ToolSpec(
        name="get_project_info",
        description="Get the details of a project",
        input_schema=_object(
            {"projectKey": _string("Project key")},
            required=["projectKey"],
        ),
    ),
    ToolSpec(
        name="get_transitions",
        description="List the workflow transitions currently available for an issue",
        input_schema=_object(
            {"issueKey": _string("The issue key")},
            required=["issueKey"],
        ),
    ),
)


def tool_names() -> list[str]:
    return [spec.name for spec in CATALOG]
