"""Routes a tool call to its translator and wraps every outcome in a ToolResult."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from jira_bridge.catalog import CATALOG, ToolSpec
from jira_bridge.errors import MissingArgumentsError, UnknownToolError
from jira_bridge.guards.read_only import check_read_only
from jira_bridge.jira.client import IssueTrackerClient
from jira_bridge.results import ToolResult
from jira_bridge.tools import TRANSLATORS, Translator
from jira_bridge.utils.timing import timed

logger = logging.getLogger("jira_bridge")


class Dispatcher:
    """Entry point for tool calls coming from the transport.

    ``dispatch`` never raises: missing arguments, unknown tool names, guard
    violations, Jira failures and unexpected errors all come back as a
    ToolResult with ``is_error`` set.
    """

    def __init__(
        self,
        client: IssueTrackerClient,
        translators: Mapping[str, Translator] | None = None,
        read_only: bool = False,
    ):
        self._client = client
        self._translators = dict(TRANSLATORS if translators is None else translators)
        self._read_only = read_only

    def list_tools(self) -> tuple[ToolSpec, ...]:
        return tuple(spec for spec in CATALOG if spec.name in self._translators)

    @timed
    async def dispatch(self, name: str, arguments: Mapping[str, Any] | None) -> ToolResult:
        try:
            if arguments is None:
                raise MissingArgumentsError()
            translator = self._translators.get(name)
            if translator is None:
                raise UnknownToolError(name)
            check_read_only(name, self._read_only)
            result = await translator.execute(dict(arguments), self._client)
        except Exception as e:  # noqa: BLE001
            logger.warning("Tool %s failed: %s", name, e)
            return ToolResult.failure(str(e))

        if result.is_error:
            logger.warning("Tool %s returned an error: %s", name, result.text)
        return result
