"""Atlassian Document Format (ADF) helpers.

Jira REST API v3 returns rich text fields (issue descriptions, comment bodies)
as ADF documents. Tools flatten them to plain text before returning them.
"""

from __future__ import annotations

from typing import Any


def adf_to_text(adf: dict[str, Any] | None) -> str:
    """Extract plain text from an ADF document."""
    if not adf:
        return ""
    return _extract_text(adf).strip()


def is_adf(value: Any) -> bool:
    return isinstance(value, dict) and value.get("type") == "doc"


def _extract_text(node: dict[str, Any]) -> str:
    node_type = node.get("type")
    if node_type == "text":
        return node.get("text", "")
    if node_type == "hardBreak":
        return "\n"
    if node_type in ("mention", "emoji"):
        return node.get("attrs", {}).get("text", "")

    parts = [_extract_text(child) for child in node.get("content", [])]
    separator = "\n" if node_type in ("doc", "codeBlock") else ""
    result = separator.join(parts)
    if node_type == "listItem":
        # The item's paragraph already ends the line.
        result = "- " + result
    if node_type in ("paragraph", "heading", "codeBlock"):
        result += "\n"
    return result
