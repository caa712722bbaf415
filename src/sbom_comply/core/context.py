"""Per-run lookups shared by the checks of one compliance run."""

from __future__ import annotations

from pydantic import BaseModel, Field

from sbom_comply.models.document import Document


class RunContext(BaseModel):
    """Lookups derived once from a document and passed to every check.

    Checks read these instead of rebuilding them (or keeping them in
    module state), so two runs never see each other's data.
    """

    model_config = {"frozen": True}

    component_names: dict[str, str] = Field(
        default_factory=dict, description="Component id to component name"
    )
    component_ids: frozenset[str] = Field(
        default_factory=frozenset, description="Ids of every declared component"
    )
    primary_id: str | None = Field(default=None, description="Id of the primary component")
    primary_dependencies: list[str] = Field(
        default_factory=list, description="Direct dependencies of the primary component"
    )
    primary_dependencies_declared: bool = Field(
        default=False,
        description="Primary component has dependencies and all of them are declared components",
    )

    @classmethod
    def from_document(cls, document: Document) -> "RunContext":
        """Derive the lookups for one document."""
        names = {c.id: c.name for c in document.components}
        ids = frozenset(names)
        primary = document.primary_component()
        dependencies = document.primary_dependencies()

        return cls(
            component_names=names,
            component_ids=ids,
            primary_id=primary.id if primary else None,
            primary_dependencies=dependencies,
            primary_dependencies_declared=bool(dependencies) and all(d in ids for d in dependencies),
        )

    def names_of(self, ids: list[str]) -> list[str]:
        """Map component ids to names; unknown ids map to an empty string."""
        return [self.component_names.get(i, "") for i in ids]

    @property
    def primary_dependency_names(self) -> list[str]:
        if not self.primary_dependencies_declared:
            return []
        return self.names_of(self.primary_dependencies)

    def is_primary_dependency(self, component_id: str) -> bool:
        return component_id in self.primary_dependencies
