"""
Drawing parser.

Turns the loosely-structured ``getDrawings`` response (keyed maps of
drawings and groups, each drawing carrying a differently-shaped style blob
per tool type) into the uniform models of :mod:`tv_drawings.data.models`.

Style extraction is whitelist-based for the kinds listed in
:data:`~tv_drawings.data.styles.STYLE_WHITELISTS`.  Any other kind keeps
its entire style blob so future drawing tools are never silently dropped.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Iterable, Mapping

from pydantic import ValidationError as ModelValidationError

from tv_drawings.data.models import (
    DrawingPoint,
    DrawingSummary,
    DrawingType,
    ParsedDrawing,
    ParsedDrawingGroup,
    ParsedDrawingsResponse,
)
from tv_drawings.data.styles import STYLE_WHITELISTS
from tv_drawings.errors import ParseError

logger = logging.getLogger(__name__)


class DrawingParser:
    """Stateless decoder for charts-storage drawing payloads."""

    DRAWING_TYPES = DrawingType

    # ------------------------------------------------------------------
    # Envelope
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, raw_response: Any) -> ParsedDrawingsResponse:
        """Parse a full ``{success, payload}`` response.

        Raises:
            ParseError: if the response is not an object, reports failure,
                or carries no payload.
        """
        if not isinstance(raw_response, Mapping):
            raise ParseError("Invalid response: response must be an object")
        if raw_response.get("success") is not True:
            raise ParseError("Response indicates failure")

        payload = raw_response.get("payload")
        if not isinstance(payload, Mapping):
            raise ParseError("No payload in response")

        drawings = cls.parse_drawings(payload.get("sources") or {})
        groups = cls.parse_drawing_groups(payload.get("drawing_groups") or {})
        logger.debug("Parsed %d drawing(s) and %d group(s)", len(drawings), len(groups))

        return ParsedDrawingsResponse(
            success=True,
            drawings=drawings,
            groups=groups,
            raw=dict(raw_response),
        )

    # ------------------------------------------------------------------
    # Drawings
    # ------------------------------------------------------------------

    @classmethod
    def parse_drawings(cls, sources: Mapping[str, Any]) -> list[ParsedDrawing]:
        return [cls.parse_drawing(d) for d in sources.values()]

    @classmethod
    def parse_drawing(cls, drawing: Any) -> ParsedDrawing:
        """Parse one raw source entry into a :class:`ParsedDrawing`."""
        if not isinstance(drawing, Mapping) or not isinstance(drawing.get("state"), Mapping):
            raise ParseError("Invalid drawing: missing state")

        state = drawing["state"]
        inner = state.get("state") or {}
        if not isinstance(inner, Mapping):
            raise ParseError(f"Invalid drawing {drawing.get('id')!r}: style state must be an object")

        try:
            return ParsedDrawing(
                id=drawing.get("id"),
                type=state.get("type"),
                symbol=drawing.get("symbol"),
                ownerSource=drawing.get("ownerSource"),
                serverUpdateTime=drawing.get("serverUpdateTime"),
                points=cls.parse_points(state.get("points") or []),
                zorder=state.get("zorder"),
                linkKey=state.get("linkKey"),
                sharingMode=state.get("sharingMode"),
                style=cls.parse_style(inner, state.get("type")),
                groupId=drawing.get("groupId"),
                title=inner.get("title") or "",
                text=inner.get("text") or "",
                interval=inner.get("interval") or "",
                visible=inner.get("visible") is not False,
                frozen=bool(inner.get("frozen", False)),
            )
        except ModelValidationError as exc:
            logger.warning("Drawing %r has malformed fields: %s", drawing.get("id"), exc)
            raise ParseError(f"Invalid drawing {drawing.get('id')!r}: {exc}") from exc

    @staticmethod
    def parse_points(points: Iterable[Mapping[str, Any]]) -> list[DrawingPoint]:
        parsed = []
        for p in points:
            if not isinstance(p, Mapping):
                raise ParseError("Invalid point: point must be an object")
            try:
                parsed.append(
                    DrawingPoint(
                        time_t=p.get("time_t"),
                        price=p.get("price"),
                        offset=p.get("offset") or 0,
                        interval=p.get("interval"),
                    )
                )
            except ModelValidationError as exc:
                raise ParseError(f"Invalid point: {exc}") from exc
        return parsed

    @staticmethod
    def parse_style(state: Mapping[str, Any], drawing_type: str | None = None) -> dict[str, Any]:
        """Extract the style of a drawing from its inner state blob.

        The type is read from the blob itself when it carries one, else
        from *drawing_type* (the enclosing ``state.type``).  Known types
        keep only their whitelisted fields; unknown types keep everything.
        """
        base = {
            "visible": state.get("visible") is not False,
            "frozen": bool(state.get("frozen", False)),
            "symbolStateVersion": state.get("symbolStateVersion"),
            "zOrderVersion": state.get("zOrderVersion"),
        }

        kind = state.get("type") or drawing_type
        fields = STYLE_WHITELISTS.get(kind)
        if fields is None:
            logger.debug("No style whitelist for %r, keeping full state", kind)
            return {**base, **state}
        return {**base, **{name: state.get(name) for name in fields}}

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------

    @staticmethod
    def parse_drawing_groups(groups: Mapping[str, Any]) -> list[ParsedDrawingGroup]:
        return [
            ParsedDrawingGroup(
                id=g.get("id"),
                symbol=g.get("symbol"),
                serverUpdateTime=g.get("serverUpdateTime"),
                name=g.get("name"),
                currencyId=g.get("currencyId"),
                unitId=g.get("unitId"),
            )
            for g in groups.values()
        ]

    # ------------------------------------------------------------------
    # Filters and summary
    # ------------------------------------------------------------------

    @staticmethod
    def filter_by_type(drawings: Iterable[ParsedDrawing], drawing_type: str) -> list[ParsedDrawing]:
        return [d for d in drawings if d.type == drawing_type]

    @staticmethod
    def filter_by_symbol(drawings: Iterable[ParsedDrawing], symbol: str) -> list[ParsedDrawing]:
        return [d for d in drawings if d.symbol == symbol]

    @staticmethod
    def filter_by_group(drawings: Iterable[ParsedDrawing], group_id: str) -> list[ParsedDrawing]:
        return [d for d in drawings if d.groupId == group_id]

    @staticmethod
    def get_summary(drawings: Iterable[ParsedDrawing]) -> DrawingSummary:
        """Count drawings by visibility, frozen state, type, symbol and group."""
        summary = DrawingSummary()
        types: Counter[str] = Counter()
        symbols: Counter[str] = Counter()
        groups: Counter[str] = Counter()

        for d in drawings:
            summary.total += 1
            if d.visible:
                summary.visible += 1
            if d.frozen:
                summary.frozen += 1
            types[d.type] += 1
            symbols[d.symbol] += 1
            if d.groupId:
                summary.grouped += 1
                groups[d.groupId] += 1

        summary.typeCount = dict(types)
        summary.symbolCount = dict(symbols)
        summary.groupCount = dict(groups)
        return summary
