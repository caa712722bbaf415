"""Load SBOM documents from disk."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError

from sbom_comply.models.document import Document
from sbom_comply.utils.errors import DocumentLoadError, DocumentNotFoundError
from sbom_comply.utils.logging import get_logger

logger = get_logger("document")


class _TextScalarLoader(yaml.SafeLoader):
    """SafeLoader that keeps numbers and timestamps as their source text.

    Document fields such as spec versions and creation timestamps are
    strings; ``1.5`` or an unquoted RFC 3339 time must not be converted.
    """


_TEXT_TAGS = frozenset(
    {"tag:yaml.org,2002:int", "tag:yaml.org,2002:float", "tag:yaml.org,2002:timestamp"}
)

_TextScalarLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _TEXT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_document(path: Path | str) -> Document:
    """Load a document from a JSON or YAML file.

    The file holds the already-parsed document model; ``.yaml`` and ``.yml``
    files are read as YAML, everything else as JSON.

    Args:
        path: Path to the document file

    Returns:
        The validated document

    Raises:
        DocumentNotFoundError: If the file does not exist
        DocumentLoadError: If the file cannot be parsed or validated
    """
    path = Path(path)
    if not path.is_file():
        raise DocumentNotFoundError(str(path))

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentLoadError(str(path), str(e)) from e

    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.load(text, Loader=_TextScalarLoader)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise DocumentLoadError(str(path), f"invalid syntax: {e}") from e

    if not isinstance(data, dict):
        raise DocumentLoadError(str(path), "expected a mapping at the top level")

    try:
        document = Document.model_validate(data)
    except PydanticValidationError as e:
        raise DocumentLoadError(str(path), f"invalid document: {e.error_count()} error(s)") from e

    logger.debug(f"Loaded {path}: {document.spec_type} with {len(document.components)} components")
    return document
