"""Comment tool: add a comment to an issue."""

from __future__ import annotations

from pydantic import Field

from jira_bridge.jira.client import IssueTrackerClient
from jira_bridge.jira.models import JiraComment
from jira_bridge.tools.base import ToolArguments, Translator, segment


class AddCommentArgs(ToolArguments):
    issue_key: str = Field(alias="issueKey")
    comment: str


class AddComment(Translator[AddCommentArgs]):
    name = "add_comment"
    arguments = AddCommentArgs

    async def run(self, args: AddCommentArgs, client: IssueTrackerClient) -> str:
        raw = await client.request(
            "POST", f"/issue/{segment(args.issue_key)}/comment", {"body": args.comment}
        )
        comment = JiraComment.model_validate(raw)
        return f"Comment added to issue {args.issue_key} (ID: {comment.id})"
