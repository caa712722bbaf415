"""Report section models."""

from pydantic import BaseModel, Field

from sbom_comply.models.record import Maturity


class SectionMeta(BaseModel):
    """Static per-standard metadata for one check key."""

    model_config = {"frozen": True}

    title: str = Field(description="Section title")
    section_id: str = Field(description="Clause identifier in the standard")
    data_field: str = Field(description="Data field label")
    required: bool = Field(default=True, description="Whether the field is mandatory")


class Section(BaseModel):
    """A record enriched with report metadata, ready for rendering."""

    model_config = {"frozen": True}

    section_title: str
    section_id: str
    section_data_field: str
    required: bool
    element_id: str
    element_result: str
    score: float
    maturity: Maturity | None = None

    check_key: int = Field(default=0, exclude=True)
