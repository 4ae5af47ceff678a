"""Permission sets defining read-only vs write tool groups."""

READ_TOOLS = frozenset({
    "get_issue",
    "search_issues",
    "get_project_info",
    "get_transitions",
})

WRITE_TOOLS = frozenset({
    "create_issue",
    "update_issue",
    "add_comment",
})

ALL_TOOLS = READ_TOOLS | WRITE_TOOLS
