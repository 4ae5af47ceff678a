"""Uniform result envelope returned for every tool call."""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, Field

UNKNOWN_ERROR = "Unknown error"


class TextBlock(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """`{content: [{type: "text", text}], isError}` with exactly one text block."""

    content: list[TextBlock]
    is_error: bool = Field(alias="isError", default=False)

    model_config = {"populate_by_name": True}

    @classmethod
    def success(cls, payload: Any) -> ToolResult:
        """Wrap a confirmation string, or any JSON-serializable projection."""
        if isinstance(payload, str):
            text = payload
        else:
            text = json.dumps(payload, indent=2, ensure_ascii=False)
        return cls(content=[TextBlock(text=text)], is_error=False)

    @classmethod
    def failure(cls, message: str | None) -> ToolResult:
        return cls(content=[TextBlock(text=f"Error: {message or UNKNOWN_ERROR}")], is_error=True)

    @property
    def text(self) -> str:
        return self.content[0].text

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
