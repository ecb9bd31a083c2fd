"""Infrastructure layer - external services, feeds and file exporters."""

from .catalogue_feed import InMemoryCatalogueFeed
from .outline_export import OutlineDxfExporter, bounding_box_caption, render_outline_svg
from .pricing_client import DEFAULT_FUNCTION_NAME, HttpPricingClient

__all__ = [
    "DEFAULT_FUNCTION_NAME",
    "HttpPricingClient",
    "InMemoryCatalogueFeed",
    "OutlineDxfExporter",
    "bounding_box_caption",
    "render_outline_svg",
]
