"""Registry of compliance standards."""

from __future__ import annotations

from sbom_comply.core.standard import Standard
from sbom_comply.utils.errors import MissingSectionMetadataError, UnknownStandardError
from sbom_comply.utils.logging import get_logger

logger = get_logger("registry")


class StandardRegistry:
    """Map standard names and aliases to standard instances.

    Lookups are case-insensitive. A standard is refused at registration
    when any of its check keys lacks report metadata.
    """

    def __init__(self) -> None:
        self._standards: dict[str, Standard] = {}
        self._aliases: dict[str, str] = {}

    def register(self, standard: Standard) -> None:
        """Register a standard under its name and aliases.

        Raises:
            MissingSectionMetadataError: If a check key has no metadata
            ValueError: If a name or alias is already taken
        """
        missing = standard.missing_metadata()
        if missing:
            raise MissingSectionMetadataError(standard.name, missing)

        name = standard.name.lower()
        names = [name] + [a.lower() for a in standard.aliases]
        for n in names:
            if n in self._aliases:
                raise ValueError(f"Standard name already registered: {n}")

        self._standards[name] = standard
        for n in names:
            self._aliases[n] = name
        logger.debug(f"Registered standard {name}")

    def get(self, name: str) -> Standard:
        """Get a standard by name or alias.

        Raises:
            UnknownStandardError: If nothing is registered under the name
        """
        key = self._aliases.get((name or "").strip().lower())
        if key is None:
            raise UnknownStandardError(name, self.names())
        return self._standards[key]

    def __contains__(self, name: str) -> bool:
        return (name or "").strip().lower() in self._aliases

    def names(self) -> list[str]:
        """Registered primary names, sorted."""
        return sorted(self._standards)

    def standards(self) -> list[Standard]:
        return [self._standards[n] for n in self.names()]


_default_registry: StandardRegistry | None = None


def get_default_registry() -> StandardRegistry:
    """Get the registry holding the built-in standards."""
    global _default_registry
    if _default_registry is None:
        from sbom_comply.standards import BUILTIN_STANDARDS

        registry = StandardRegistry()
        for standard_cls in BUILTIN_STANDARDS:
            registry.register(standard_cls())
        _default_registry = registry
    return _default_registry
