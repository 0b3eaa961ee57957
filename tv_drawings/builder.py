"""
Drawing builder.

:class:`ChartDrawings` constructs the outbound shapes the charts-storage
API accepts: single drawings (trend lines, rectangles), drawing groups and
the ``{sources, drawing_groups, clientId}`` bundle sent by
:meth:`ChartDrawings.save_drawings`.

Every builder operation returns a fresh object or a shallow copy; caller
supplied dicts are never mutated.
"""

from __future__ import annotations

import copy
import logging
import random
import string
import time
from dataclasses import dataclass, field
from typing import Any, Optional

from tv_drawings.data.clients.charts_storage import (
    get_layout_sources,
    issue_access_token,
    put_layout_sources,
)
from tv_drawings.data.models import Credentials, DrawingType
from tv_drawings.data.styles import (
    DEFAULT_INTERVAL,
    DEFAULT_STYLES,
    OWNER_SOURCE,
    SHARING_MODE,
    TREND_LINE_INTERVALS_VISIBILITIES,
    Z_ORDER,
)
from tv_drawings.errors import ParseError, ValidationError
from tv_drawings.infra.config import get_settings

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_letters + string.digits

# Style keys whose value is itself a style object; merged field by field.
_NESTED_STYLE_KEYS = ("middleLine",)


# ---------------------------------------------------------------------------
# Identifier generation
# ---------------------------------------------------------------------------

def _random_string(length: int) -> str:
    return "".join(random.choice(_ID_ALPHABET) for _ in range(length))


def generate_drawing_id() -> str:
    """Return a random 6-character alphanumeric drawing id."""
    return _random_string(6)


def generate_link_key() -> str:
    """Return a random 15-character alphanumeric link key."""
    return _random_string(15)


def generate_client_id() -> str:
    """Return a client id of the form ``<6 chars>/<digit>/<6 chars>``."""
    return f"{generate_drawing_id()}/{random.randint(0, 9)}/{generate_drawing_id()}"


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

@dataclass
class DrawingOptions:
    """Options accepted by the ``create_*`` drawing constructors.

    Attributes
    ----------
    id : str
        Drawing id, unique within a bundle.  Required.
    symbol : str
        Instrument, e.g. ``"BINANCE:BTCUSDT"``.  Required.
    points : list[dict]
        Anchor points as ``{time_t, offset, price, interval}`` dicts.
        Trend lines and rectangles need exactly two.  The ``interval`` of
        the first point becomes the drawing's interval (``"5"`` if absent).
    style : dict, optional
        Overrides merged key by key over the type's default style.  Nested
        style objects (a rectangle's ``middleLine``) are merged field by
        field as well.
    group_id : str, optional
        When set, the drawing is emitted with a top-level ``groupId``.
    """

    id: str = ""
    symbol: str = ""
    points: Optional[list[dict[str, Any]]] = None
    style: dict[str, Any] = field(default_factory=dict)
    group_id: Optional[str] = None


def _merge_style(default_style: dict[str, Any], overrides: dict[str, Any] | None) -> dict[str, Any]:
    style = copy.deepcopy(default_style)
    for key, value in (overrides or {}).items():
        if key in _NESTED_STYLE_KEYS and isinstance(value, dict) and isinstance(style.get(key), dict):
            style[key] = {**style[key], **value}
        else:
            style[key] = value
    return style


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

class ChartDrawings:
    """Builds drawings, groups and bundles, and saves / fetches layouts.

    The credentials are explicit per-instance context: every network call
    made by this instance authenticates with them.
    """

    def __init__(self, credentials: Credentials | dict[str, Any] | None = None) -> None:
        if isinstance(credentials, dict):
            credentials = Credentials(**credentials)
        self.credentials = credentials or Credentials()
        self.base_url = get_settings().charts_storage_url

    # -- identifiers -----------------------------------------------------------

    def generate_drawing_id(self) -> str:
        return generate_drawing_id()

    def generate_link_key(self) -> str:
        return generate_link_key()

    def generate_client_id(self) -> str:
        return generate_client_id()

    # -- drawings --------------------------------------------------------------

    @staticmethod
    def _validate_drawing_options(options: DrawingOptions, expected_points: int) -> None:
        if not options.id:
            raise ValidationError("Drawing ID is required", field="id")
        if not options.symbol:
            raise ValidationError("Symbol is required", field="symbol")
        if not options.points or len(options.points) != expected_points:
            raise ValidationError(
                f"Exactly {expected_points} points are required", field="points"
            )

    def _build_drawing(self, options: DrawingOptions, drawing_type: DrawingType) -> dict[str, Any]:
        style = _merge_style(DEFAULT_STYLES[drawing_type], options.style)
        now = time.time()

        inner_state: dict[str, Any] = {
            **style,
            "symbol": options.symbol,
            "currencyId": None,
            "unitId": None,
            "interval": options.points[0].get("interval") or DEFAULT_INTERVAL,
            "lastUpdateTime": int(now * 1000),
            "adjustedToSplitTime": now,
        }
        if drawing_type is DrawingType.TREND_LINE:
            inner_state["intervalsVisibilities"] = dict(TREND_LINE_INTERVALS_VISIBILITIES)

        drawing: dict[str, Any] = {
            "id": options.id,
            "ownerSource": OWNER_SOURCE,
            "state": {
                "type": drawing_type.value,
                "id": options.id,
                "state": inner_state,
                "points": options.points,
                "zorder": Z_ORDER[drawing_type],
                "ownerSource": OWNER_SOURCE,
                "linkKey": self.generate_link_key(),
                "sharingMode": SHARING_MODE,
            },
            "symbol": options.symbol,
            "currencyId": None,
            "unitId": None,
        }
        if options.group_id:
            drawing["groupId"] = options.group_id

        logger.debug("Built %s %s on %s", drawing_type.value, options.id, options.symbol)
        return drawing

    def create_trend_line(self, options: DrawingOptions) -> dict[str, Any]:
        """Build a two-point trend line."""
        self._validate_drawing_options(options, 2)
        return self._build_drawing(options, DrawingType.TREND_LINE)

    def create_rectangle(self, options: DrawingOptions) -> dict[str, Any]:
        """Build a rectangle spanning two corner points."""
        self._validate_drawing_options(options, 2)
        return self._build_drawing(options, DrawingType.RECTANGLE)

    # -- groups and bundles ----------------------------------------------------

    def create_drawing_group(
        self, name: str, symbol: str, id: str | None = None
    ) -> dict[str, Any]:
        """Build a drawing group; *id* is generated when omitted."""
        if not name:
            raise ValidationError("Group name is required", field="name")
        if not symbol:
            raise ValidationError("Group symbol is required", field="symbol")
        return {
            "id": id or self.generate_drawing_id(),
            "name": name,
            "symbol": symbol,
            "currencyId": None,
            "unitId": None,
        }

    def create_drawing_sources(
        self,
        drawings: list[dict[str, Any]],
        groups: list[dict[str, Any]] | None = None,
    ) -> dict[str, Any]:
        """Assemble drawings and groups into a save-ready bundle."""
        if not isinstance(drawings, list):
            raise ValidationError("drawings must be a list", field="drawings")
        for item in [*drawings, *(groups or [])]:
            if not isinstance(item, dict) or not item.get("id"):
                raise ValidationError("Every drawing and group needs an id", field="id")
        return {
            "sources": {d["id"]: d for d in drawings},
            "drawing_groups": {g["id"]: g for g in groups or []},
            "clientId": self.generate_client_id(),
        }

    def add_drawing_to_group(self, drawing: dict[str, Any], group_id: str) -> dict[str, Any]:
        """Return a shallow copy of *drawing* assigned to *group_id*."""
        if not drawing:
            raise ValidationError("Drawing is required", field="drawing")
        if not group_id:
            raise ValidationError("Group ID is required", field="groupId")
        return {**drawing, "groupId": group_id}

    def get_drawings_by_group(self, bundle: dict[str, Any], group_id: str) -> list[dict[str, Any]]:
        """Return the drawings of *bundle* whose ``groupId`` is *group_id*."""
        if not bundle or not isinstance(bundle.get("sources"), dict):
            raise ValidationError(
                "Drawing sources with a 'sources' map are required", field="sources"
            )
        if not group_id:
            raise ValidationError("Group ID is required", field="groupId")
        return [d for d in bundle["sources"].values() if d.get("groupId") == group_id]

    def get_drawing_groups(self, bundle: dict[str, Any]) -> list[dict[str, Any]]:
        return list(((bundle or {}).get("drawing_groups") or {}).values())

    def remove_drawing_group(self, bundle: dict[str, Any], group_id: str) -> dict[str, Any]:
        """Return a copy of *bundle* without *group_id*.

        Drawings that referenced the group lose their ``groupId`` key
        altogether; drawings in other groups are untouched.
        """
        if not bundle:
            raise ValidationError(
                "Drawing sources with a 'sources' map are required", field="sources"
            )
        if not group_id:
            raise ValidationError("Group ID is required", field="groupId")

        groups = {
            gid: g
            for gid, g in (bundle.get("drawing_groups") or {}).items()
            if gid != group_id
        }
        sources: dict[str, Any] = {}
        for drawing_id, drawing in (bundle.get("sources") or {}).items():
            if drawing.get("groupId") == group_id:
                drawing = {k: v for k, v in drawing.items() if k != "groupId"}
            sources[drawing_id] = drawing

        return {**bundle, "sources": sources, "drawing_groups": groups}

    # -- network ---------------------------------------------------------------

    def get_jwt_token(self, layout_id: str) -> str:
        return issue_access_token(self.credentials, layout_id)

    def save_drawings(
        self,
        layout_id: str,
        bundle: dict[str, Any] | None,
        chart_id: str | None = None,
    ) -> Any:
        """Save *bundle* to *layout_id* and return the API response body."""
        if not layout_id:
            raise ValidationError("Layout ID is required", field="layout_id")
        if not bundle or bundle.get("sources") is None:
            raise ValidationError("Drawing data with sources is required", field="sources")

        chart_id = chart_id or get_settings().default_chart_id
        token = self.get_jwt_token(layout_id)
        return put_layout_sources(self.credentials, layout_id, bundle, token, chart_id)

    def fetch_sources(
        self,
        layout_id: str,
        chart_id: str | None = None,
        symbol: str = "",
    ) -> dict[str, Any]:
        """Fetch the full ``{success, payload}`` envelope of *layout_id*."""
        if not layout_id:
            raise ValidationError("Layout ID is required", field="layout_id")

        chart_id = chart_id or get_settings().default_chart_id
        token = self.get_jwt_token(layout_id)
        return get_layout_sources(layout_id, token, chart_id, symbol)

    def get_drawings(
        self,
        layout_id: str,
        chart_id: str | None = None,
        symbol: str = "",
    ) -> dict[str, Any]:
        """Fetch the ``payload`` (``sources`` + ``drawing_groups``) of a layout."""
        envelope = self.fetch_sources(layout_id, chart_id, symbol)
        payload = envelope.get("payload")
        if not isinstance(payload, dict):
            raise ParseError("No drawing data found")
        logger.info(
            "Fetched %d source(s) from layout %s",
            len(payload.get("sources") or {}),
            layout_id,
        )
        return payload
