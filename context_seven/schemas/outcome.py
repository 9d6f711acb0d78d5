"""
Schemas - Tool Outcome

Result of a tool operation: a text payload or a failure message.
"""

from typing import Optional

from pydantic import BaseModel, model_validator


class ToolOutcome(BaseModel):
    """Success payload or descriptive failure for a tool call."""
    ok: bool
    text: Optional[str] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def _validate_coherence(self) -> "ToolOutcome":
        if self.ok and (self.text is None or self.error is not None):
            raise ValueError("ok=true outcomes carry text and no error")
        if not self.ok and self.error is None:
            raise ValueError("ok=false outcomes must include error")
        return self

    @classmethod
    def success(cls, text: str) -> "ToolOutcome":
        return cls(ok=True, text=text)

    @classmethod
    def failure(cls, message: str) -> "ToolOutcome":
        return cls(ok=False, error=message)

    def render(self) -> str:
        """String handed back to the MCP transport."""
        return self.text if self.ok else self.error
