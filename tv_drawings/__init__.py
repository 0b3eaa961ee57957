"""
Chart drawings client.

Build drawing / group / bundle payloads for a charting platform's drawings
storage API, save and fetch them, and parse the heterogeneous responses
into a uniform typed model.

Modules
-------
builder.py   ChartDrawings: outbound drawings, groups, bundles, save / fetch.
parser.py    DrawingParser: inbound payloads → typed models, filters, summary.
errors.py    Error taxonomy.
data/        Models, per-type style tables, HTTP client, services.
infra/       Settings.
"""

from tv_drawings.builder import (
    ChartDrawings,
    DrawingOptions,
    generate_client_id,
    generate_drawing_id,
    generate_link_key,
)
from tv_drawings.data.models import (
    Credentials,
    DrawingPoint,
    DrawingSummary,
    DrawingType,
    ParsedDrawing,
    ParsedDrawingGroup,
    ParsedDrawingsResponse,
)
from tv_drawings.data.services.layout import fetch_layout_drawings
from tv_drawings.errors import (
    ApiError,
    AuthError,
    DrawingsError,
    ParseError,
    RequestError,
    ValidationError,
)
from tv_drawings.parser import DrawingParser

__all__ = [
    "ApiError",
    "AuthError",
    "ChartDrawings",
    "Credentials",
    "DrawingOptions",
    "DrawingParser",
    "DrawingPoint",
    "DrawingSummary",
    "DrawingType",
    "DrawingsError",
    "ParseError",
    "ParsedDrawing",
    "ParsedDrawingGroup",
    "ParsedDrawingsResponse",
    "RequestError",
    "ValidationError",
    "fetch_layout_drawings",
    "generate_client_id",
    "generate_drawing_id",
    "generate_link_key",
]
