"""Common model types shared across modules."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """A failed compliance run, as printed by ``check --format json``."""

    model_config = {"frozen": True}

    code: str = Field(description="Error code for programmatic handling")
    message: str = Field(description="Human-readable error message")
    file_name: str = Field(default="", description="Document the run was for")
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional error context",
    )

    def __str__(self) -> str:
        if self.file_name:
            return f"[{self.code}] {self.file_name}: {self.message}"
        return f"[{self.code}] {self.message}"
