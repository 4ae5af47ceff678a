"""Shared machinery for translators: argument parsing, result wrapping, sentinels."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from jira_bridge.errors import InvalidArgumentsError, ToolCallError
from jira_bridge.jira.adf import adf_to_text, is_adf
from jira_bridge.jira.client import IssueTrackerClient
from jira_bridge.jira.errors import JiraAPIError
from jira_bridge.results import ToolResult

logger = logging.getLogger("jira_bridge")

UNASSIGNED = "Unassigned"
UNSPECIFIED_REPORTER = "Unspecified"
UNSPECIFIED_PRIORITY = "Unspecified"
NO_DESCRIPTION = "No description"

ArgsT = TypeVar("ArgsT", bound=BaseModel)


class ToolArguments(BaseModel):
    """Base for argument models: camelCase on the wire, unknown keys ignored."""

    model_config = {"populate_by_name": True}

    def supplied(self, field: str) -> bool:
        """True if the caller sent this key, whatever its value."""
        return field in self.model_fields_set


class Translator(ABC, Generic[ArgsT]):
    """Turns one tool call into Jira request(s) and a normalized result.

    Subclasses set ``name`` and ``arguments`` and implement ``run``, which
    returns either a confirmation string or a JSON-serializable projection.
    """

    name: str
    arguments: type[ArgsT]

    async def execute(self, arguments: dict[str, Any], client: IssueTrackerClient) -> ToolResult:
        try:
            args = self.parse(arguments)
            payload = await self.run(args, client)
        except (JiraAPIError, ToolCallError) as e:
            logger.info("%s failed: %s", self.name, e)
            return ToolResult.failure(str(e))
        return ToolResult.success(payload)

    def parse(self, arguments: dict[str, Any]) -> ArgsT:
        try:
            return self.arguments.model_validate(arguments)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc']) or 'arguments'}: {err['msg']}"
                for err in e.errors()
            )
            raise InvalidArgumentsError(f"Invalid arguments for {self.name}: {problems}") from e

    @abstractmethod
    async def run(self, args: ArgsT, client: IssueTrackerClient) -> Any: ...


def segment(value: str) -> str:
    """Percent-encode a key for use as one URL path segment."""
    return quote(value, safe="")


def plain_description(description: Any) -> str:
    """Flatten an ADF or plain-text description, substituting the sentinel when empty."""
    if is_adf(description):
        description = adf_to_text(description)
    return description or NO_DESCRIPTION
