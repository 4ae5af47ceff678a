"""Translators, one per tool, keyed by tool name."""

from jira_bridge.tools.base import Translator
from jira_bridge.tools.comments import AddComment
from jira_bridge.tools.issues import CreateIssue, GetIssue, UpdateIssue
from jira_bridge.tools.projects import GetProjectInfo
from jira_bridge.tools.search import SearchIssues
from jira_bridge.tools.transitions import GetTransitions

TRANSLATORS: dict[str, Translator] = {
    translator.name: translator
    for translator in (
        GetIssue(),
        CreateIssue(),
        UpdateIssue(),
        SearchIssues(),
        AddComment(),
        GetProjectInfo(),
        GetTransitions(),
    )
}

__all__ = ["TRANSLATORS", "Translator"]
