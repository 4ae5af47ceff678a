"""Pydantic models for Jira API responses.

Only the attributes the tools project are modelled; everything else in the
payload is ignored. Missing optional objects parse as None.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class JiraUser(BaseModel):
    account_id: str = Field(alias="accountId", default="")
    name: str | None = None
    display_name: str = Field(alias="displayName", default="")
    email_address: str | None = Field(alias="emailAddress", default=None)

    model_config = {"populate_by_name": True}


class JiraNamed(BaseModel):
    """Any `{id, name}` reference: priority, issue type, resolution."""

    id: str | None = None
    name: str = ""

    model_config = {"populate_by_name": True}


class JiraStatusCategory(BaseModel):
    key: str | None = None
    name: str | None = None

    model_config = {"populate_by_name": True}


class JiraStatus(BaseModel):
    id: str | None = None
    name: str = ""
    description: str | None = None
    status_category: JiraStatusCategory | None = Field(alias="statusCategory", default=None)

    model_config = {"populate_by_name": True}


class JiraProjectRef(BaseModel):
    id: str | None = None
    key: str = ""
    name: str = ""

    model_config = {"populate_by_name": True}


class JiraComponent(BaseModel):
    name: str = ""
    description: str | None = None

    model_config = {"populate_by_name": True}


class JiraVersion(BaseModel):
    name: str = ""
    description: str | None = None
    released: bool | None = None
    release_date: str | None = Field(alias="releaseDate", default=None)

    model_config = {"populate_by_name": True}


class JiraIssueFields(BaseModel):
    summary: str = ""
    description: Any | None = None
    status: JiraStatus | None = None
    issue_type: JiraNamed | None = Field(alias="issuetype", default=None)
    priority: JiraNamed | None = None
    assignee: JiraUser | None = None
    reporter: JiraUser | None = None
    project: JiraProjectRef | None = None
    created: str | None = None
    updated: str | None = None
    resolution_date: str | None = Field(alias="resolutiondate", default=None)
    due_date: str | None = Field(alias="duedate", default=None)
    labels: list[str] = Field(default_factory=list)
    components: list[JiraComponent] = Field(default_factory=list)
    fix_versions: list[JiraVersion] = Field(alias="fixVersions", default_factory=list)

    model_config = {"populate_by_name": True}


class JiraIssue(BaseModel):
    id: str = ""
    key: str = ""
    self_url: str = Field(alias="self", default="")
    fields: JiraIssueFields = Field(default_factory=JiraIssueFields)

    model_config = {"populate_by_name": True}


class JiraSearchResult(BaseModel):
    start_at: int = Field(alias="startAt", default=0)
    max_results: int = Field(alias="maxResults", default=50)
    total: int = 0
    issues: list[JiraIssue] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class JiraProjectCategory(BaseModel):
    id: str | None = None
    name: str = ""
    description: str | None = None

    model_config = {"populate_by_name": True}


class JiraProject(BaseModel):
    id: str = ""
    key: str = ""
    name: str = ""
    project_type_key: str | None = Field(alias="projectTypeKey", default=None)
    simplified: bool | None = None
    lead: JiraUser | None = None
    description: str | None = None
    project_category: JiraProjectCategory | None = Field(alias="projectCategory", default=None)
    avatar_urls: dict[str, str] = Field(alias="avatarUrls", default_factory=dict)
    self_url: str = Field(alias="self", default="")

    model_config = {"populate_by_name": True}


class JiraTransition(BaseModel):
    id: str = ""
    name: str = ""
    to: JiraStatus | None = None

    model_config = {"populate_by_name": True}


class JiraTransitionList(BaseModel):
    transitions: list[JiraTransition] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class JiraCreatedIssue(BaseModel):
    id: str = ""
    key: str = ""
    self_url: str = Field(alias="self", default="")

    model_config = {"populate_by_name": True}


class JiraComment(BaseModel):
    id: str = ""
    author: JiraUser | None = None
    body: Any | None = None
    created: str | None = None
    updated: str | None = None

    model_config = {"populate_by_name": True}
