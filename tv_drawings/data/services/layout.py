"""
Layout drawings service: fetch a layout's drawings and parse them in one call.

Single Responsibility: composes the builder's authenticated fetch with the
parser; holds no state of its own.
"""

from __future__ import annotations

import logging
from typing import Any

from tv_drawings.builder import ChartDrawings
from tv_drawings.data.models import Credentials, ParsedDrawingsResponse
from tv_drawings.errors import ParseError
from tv_drawings.parser import DrawingParser

logger = logging.getLogger(__name__)


def fetch_layout_drawings(
    layout_id: str,
    symbol: str = "",
    credentials: Credentials | dict[str, Any] | None = None,
    chart_id: str | None = None,
    *,
    parse: bool = True,
) -> ParsedDrawingsResponse | list[dict[str, Any]]:
    """Return the drawings saved on *layout_id*.

    Parameters
    ----------
    layout_id : str
        Layout to read from.
    symbol : str
        Optional instrument filter applied server-side.
    credentials : Credentials | dict, optional
        Session credentials; read from the environment when omitted.
    chart_id : str, optional
        Chart within the layout (``_shared`` by default).
    parse : bool
        When true (default) return a :class:`ParsedDrawingsResponse`;
        otherwise the raw source dicts as a list.
    """
    if credentials is None:
        credentials = Credentials.from_settings()
    client = ChartDrawings(credentials)
    envelope = client.fetch_sources(layout_id, chart_id, symbol)

    if parse:
        return DrawingParser.parse(envelope)

    payload = envelope.get("payload")
    if not isinstance(payload, dict):
        raise ParseError("No drawing data found")
    sources = list((payload.get("sources") or {}).values())
    logger.debug("Returning %d raw source(s) for layout %s", len(sources), layout_id)
    return sources
