"""Error handling utilities for sbom-comply."""

from __future__ import annotations

from typing import Any

from sbom_comply.models.common import ErrorDetail


class SbomComplyError(Exception):
    """Base exception for sbom-comply."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR", details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_error_detail(self, file_name: str = "") -> ErrorDetail:
        """Convert to ErrorDetail model."""
        return ErrorDetail(code=self.code, message=self.message, file_name=file_name, details=self.details)


class ValidationError(SbomComplyError):
    """Validation failed."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="VALIDATION_ERROR", details=details)


class ConfigurationError(SbomComplyError):
    """Configuration error."""

    def __init__(self, message: str, config_key: str | None = None):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, code="CONFIG_ERROR", details=details)


class UnknownStandardError(SbomComplyError):
    """No standard is registered under the requested name."""

    def __init__(self, name: str, available: list[str] | None = None):
        details: dict[str, Any] = {"standard": name}
        if available:
            details["available"] = available
        super().__init__(
            f"Unknown compliance standard: {name}",
            code="UNKNOWN_STANDARD",
            details=details,
        )


class DocumentNotFoundError(SbomComplyError):
    """Document file was not found."""

    def __init__(self, path: str):
        super().__init__(
            f"Document not found: {path}",
            code="DOCUMENT_NOT_FOUND",
            details={"path": path},
        )


class DocumentLoadError(SbomComplyError):
    """Document file could not be read or validated."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Failed to load document {path}: {reason}",
            code="DOCUMENT_LOAD_ERROR",
            details={"path": path},
        )


class UnsupportedDocumentError(SbomComplyError):
    """The standard cannot evaluate this kind of document."""

    def __init__(self, standard: str, reason: str):
        super().__init__(reason, code="UNSUPPORTED_DOCUMENT", details={"standard": standard})


class MissingSectionMetadataError(SbomComplyError):
    """A check key has no report metadata in its standard."""

    def __init__(self, standard: str, check_keys: list[int]):
        keys = ", ".join(str(k) for k in check_keys)
        super().__init__(
            f"Standard {standard} has no section metadata for check key(s): {keys}",
            code="MISSING_METADATA",
            details={"standard": standard, "check_keys": check_keys},
        )


def validate_file_name(file_name: str) -> None:
    """Validate the file name a report is produced for.

    Args:
        file_name: Name of the evaluated SBOM file

    Raises:
        ValidationError: If the name is empty
    """
    if not file_name or not file_name.strip():
        raise ValidationError("File name cannot be empty", field="file_name")


def validate_output_format(output_format: str, supported: list[str]) -> None:
    """Validate an output format name.

    Args:
        output_format: Requested format
        supported: Supported format names

    Raises:
        ValidationError: If the format is empty or unsupported
    """
    if not output_format:
        raise ValidationError("Output format cannot be empty", field="format")

    if output_format.lower() not in supported:
        raise ValidationError(
            f"Unsupported output format: {output_format} (expected one of {', '.join(supported)})",
            field="format",
        )
