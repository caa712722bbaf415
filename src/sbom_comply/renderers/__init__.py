"""Output format renderers."""

from sbom_comply.renderers.base import BaseRenderer, OutputFormat, RenderContext, Renderer
from sbom_comply.renderers.json import JSONRenderer
from sbom_comply.renderers.basic import BasicRenderer
from sbom_comply.renderers.detailed import DetailedRenderer
from sbom_comply.utils.errors import validate_output_format

__all__ = [
    "BaseRenderer",
    "OutputFormat",
    "RenderContext",
    "Renderer",
    "JSONRenderer",
    "BasicRenderer",
    "DetailedRenderer",
    "get_renderer",
]


def get_renderer(format: OutputFormat | str) -> BaseRenderer:
    """Get a renderer for the specified format.

    Args:
        format: Output format (OutputFormat enum or string)

    Returns:
        Appropriate renderer instance

    Raises:
        ValidationError: If format is empty or not supported
    """
    if not isinstance(format, OutputFormat):
        validate_output_format(format, [f.value for f in OutputFormat])
        format = OutputFormat(format.lower())

    renderers = {
        OutputFormat.JSON: JSONRenderer,
        OutputFormat.BASIC: BasicRenderer,
        OutputFormat.DETAILED: DetailedRenderer,
    }

    return renderers[format]()
