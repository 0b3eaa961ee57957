"""
Data models for the chart drawings client.

Pydantic models for the *parsed* side of the API (what
:class:`~tv_drawings.parser.DrawingParser` produces) plus the credential
shape consumed by the transport.  The *build* side deliberately stays as
plain JSON-ready dicts because that is exactly what the save endpoint
expects on the wire.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class DrawingType(str, Enum):
    """Wire identifiers of the drawing tools the storage API knows about."""

    RECTANGLE = "LineToolRectangle"
    TREND_LINE = "LineToolTrendLine"
    PATH = "LineToolPath"
    TABLE = "LineToolTable"
    HORIZONTAL_LINE = "LineToolHorzLine"
    VERTICAL_LINE = "LineToolVertLine"
    PARALLEL_CHANNEL = "LineToolParallelChannel"
    FIBONACCI_RETRACEMENT = "LineToolFibRetracement"
    FIBONACCI_EXTENSION = "LineToolFibExtension"
    ELLIPSE = "LineToolEllipse"
    CIRCLE = "LineToolCircle"
    ARROW = "LineToolArrow"
    TEXT = "LineToolText"
    NOTE = "LineToolNote"
    CALLOUT = "LineToolCallout"


# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------

class Credentials(BaseModel):
    """Session credentials used to mint access tokens.

    ``id`` is the numeric user id; the token endpoint receives ``-1``
    when it is not set.
    """

    session: str = ""
    signature: str = ""
    id: Optional[int] = None

    @classmethod
    def from_settings(cls, settings: Any = None) -> "Credentials":
        from tv_drawings.infra.config import get_settings

        s = settings or get_settings()
        return cls(
            session=s.tv_session,
            signature=s.tv_signature,
            id=s.tv_user_id if s.tv_user_id != -1 else None,
        )

    @property
    def user_id(self) -> int:
        return self.id if self.id is not None else -1


# ---------------------------------------------------------------------------
# Parsed drawings
# ---------------------------------------------------------------------------

class DrawingPoint(BaseModel):
    """A single anchor point of a drawing."""

    time_t: Optional[int] = Field(default=None, description="Point time, epoch seconds")
    price: Optional[float] = None
    offset: int = 0
    interval: Optional[str] = None


class ParsedDrawing(BaseModel):
    """Uniform, type-independent view of one drawing.

    Field names follow the server's spelling (``zorder``, ``linkKey``,
    ``groupId`` …) so :meth:`to_dict` yields the familiar shape.
    """

    id: Optional[str] = None
    type: Optional[str] = None
    symbol: Optional[str] = None
    ownerSource: Optional[str] = None
    serverUpdateTime: Optional[int] = None
    points: list[DrawingPoint] = Field(default_factory=list)
    zorder: Optional[int] = None
    linkKey: Optional[str] = None
    sharingMode: Optional[int] = None
    style: dict[str, Any] = Field(default_factory=dict)
    groupId: Optional[str] = None
    title: str = ""
    text: str = ""
    interval: str = ""
    visible: bool = True
    frozen: bool = False

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()


class ParsedDrawingGroup(BaseModel):
    """A named group that drawings can reference via ``groupId``."""

    id: Optional[str] = None
    symbol: Optional[str] = None
    serverUpdateTime: Optional[int] = None
    name: Optional[str] = None
    currencyId: Optional[str] = None
    unitId: Optional[str] = None


class ParsedDrawingsResponse(BaseModel):
    """Result of :meth:`DrawingParser.parse`."""

    success: bool
    drawings: list[ParsedDrawing] = Field(default_factory=list)
    groups: list[ParsedDrawingGroup] = Field(default_factory=list)
    raw: dict[str, Any] = Field(default_factory=dict)


class DrawingSummary(BaseModel):
    """Aggregate counts over a sequence of parsed drawings."""

    total: int = 0
    visible: int = 0
    frozen: int = 0
    grouped: int = 0
    typeCount: dict[str, int] = Field(default_factory=dict)
    symbolCount: dict[str, int] = Field(default_factory=dict)
    groupCount: dict[str, int] = Field(default_factory=dict)
