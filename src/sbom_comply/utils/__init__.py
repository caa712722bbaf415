"""Utility functions for sbom-comply."""

from sbom_comply.utils.logging import configure_logging, get_logger, get_logger_with_context
from sbom_comply.utils.errors import (
    SbomComplyError,
    ValidationError,
    ConfigurationError,
    UnknownStandardError,
    DocumentNotFoundError,
    DocumentLoadError,
    UnsupportedDocumentError,
    MissingSectionMetadataError,
    validate_file_name,
    validate_output_format,
)
from sbom_comply.utils.config import (
    SbomComplyConfig,
    OutputConfig,
    ComplianceConfig,
    load_config,
    save_config,
    get_config,
    set_config,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "get_logger_with_context",
    # Errors
    "SbomComplyError",
    "ValidationError",
    "ConfigurationError",
    "UnknownStandardError",
    "DocumentNotFoundError",
    "DocumentLoadError",
    "UnsupportedDocumentError",
    "MissingSectionMetadataError",
    "validate_file_name",
    "validate_output_format",
    # Config
    "SbomComplyConfig",
    "OutputConfig",
    "ComplianceConfig",
    "load_config",
    "save_config",
    "get_config",
    "set_config",
]
