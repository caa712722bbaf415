"""Compliance record models."""

from enum import Enum

from pydantic import BaseModel, Field


class Maturity(str, Enum):
    """Ordinal maturity label layered over a numeric score."""

    NONE = "None"
    MINIMUM = "Minimum"
    RECOMMENDED = "Recommended"
    ASPIRATIONAL = "Aspirational"


class Record(BaseModel):
    """One evaluation outcome produced by a check.

    Records are immutable. ``id`` names the element the outcome is about:
    ``"doc"`` for document-level checks, a derived unique element id for a
    component, or a standard-defined bucket label.
    """

    model_config = {"frozen": True}

    check_key: int = Field(description="Standard-scoped attribute identifier")
    check_value: str = Field(default="", description="Human-readable outcome")
    id: str = Field(description="Element the record is about")
    score: float = Field(default=0.0, description="Score on the standard's scale")
    required: bool = Field(default=True, description="Counts toward the mandatory bucket")
    maturity: Maturity | None = Field(default=None, description="Optional maturity label")

    @classmethod
    def required_stmt(
        cls,
        key: int,
        id: str,
        value: str,
        score: float,
        maturity: Maturity | None = None,
    ) -> "Record":
        """Create a record counted in the required bucket."""
        return cls(
            check_key=key,
            check_value=value,
            id=id,
            score=score,
            required=True,
            maturity=maturity,
        )

    @classmethod
    def optional_stmt(
        cls,
        key: int,
        id: str,
        value: str,
        score: float,
        maturity: Maturity | None = None,
    ) -> "Record":
        """Create a record counted in the optional bucket."""
        return cls(
            check_key=key,
            check_value=value,
            id=id,
            score=score,
            required=False,
            maturity=maturity,
        )
