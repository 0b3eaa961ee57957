"""
Per-type style tables.

Two kinds of tables live here:

* **Defaults**: the style a freshly built drawing starts from before the
  caller's overrides are merged in (build side).
* **Whitelists**: the fields the parser keeps for each known drawing kind
  (parse side).  They define the public style schema of each kind; any
  other server-internal key is dropped for known kinds.
"""

from __future__ import annotations

from typing import Any

from tv_drawings.data.models import DrawingType

# ---------------------------------------------------------------------------
# Build-side defaults
# ---------------------------------------------------------------------------

TREND_LINE_DEFAULT_STYLE: dict[str, Any] = {
    "linecolor": "rgba(242, 54, 69, 1)",
    "linewidth": 1,
    "linestyle": 0,
    "extendLeft": False,
    "extendRight": False,
    "leftEnd": 0,
    "rightEnd": 0,
    "showLabel": True,
    "horzLabelsAlign": "left",
    "vertLabelsAlign": "middle",
    "textcolor": "rgba(255, 235, 59, 1)",
    "fontsize": 16,
    "bold": False,
    "italic": False,
    "alwaysShowStats": True,
    "showMiddlePoint": True,
    "showPriceLabels": True,
    "showPriceRange": False,
    "showPercentPriceRange": False,
    "showPipsPriceRange": False,
    "showBarsRange": False,
    "showDateTimeRange": False,
    "showDistance": False,
    "showAngle": False,
    "statsPosition": 3,
    "snapTo45Degrees": True,
    "fixedSize": True,
    "symbolStateVersion": 2,
    "zOrderVersion": 2,
    "visible": True,
    "frozen": False,
    "text": "",
    "title": "",
}

RECTANGLE_DEFAULT_STYLE: dict[str, Any] = {
    "color": "rgba(8, 153, 129, 1)",
    "fillBackground": True,
    "backgroundColor": "rgba(248, 187, 208, 0.1939)",
    "linewidth": 1,
    "transparency": 50,
    "showLabel": True,
    "horzLabelsAlign": "center",
    "vertLabelsAlign": "top",
    "textColor": "rgba(255, 235, 59, 1)",
    "fontSize": 18,
    "bold": False,
    "italic": False,
    "extendLeft": False,
    "extendRight": False,
    "middleLine": {
        "showLine": True,
        "lineWidth": 1,
        "lineColor": "#9c27b0",
        "lineStyle": 2,
    },
    "linestyle": 0,
    "symbolStateVersion": 2,
    "zOrderVersion": 2,
    "frozen": False,
    "visible": True,
    "text": "",
    "title": "",
}

DEFAULT_STYLES: dict[DrawingType, dict[str, Any]] = {
    DrawingType.TREND_LINE: TREND_LINE_DEFAULT_STYLE,
    DrawingType.RECTANGLE: RECTANGLE_DEFAULT_STYLE,
}

Z_ORDER: dict[DrawingType, int] = {
    DrawingType.TREND_LINE: -625,
    DrawingType.RECTANGLE: -313,
}

# Fixed for every trend line the builder emits.
TREND_LINE_INTERVALS_VISIBILITIES: dict[str, Any] = {
    "seconds": False,
    "daysTo": 5,
    "months": False,
}

OWNER_SOURCE = "_seriesId"
SHARING_MODE = 1
DEFAULT_INTERVAL = "5"


# ---------------------------------------------------------------------------
# Parse-side whitelists
# ---------------------------------------------------------------------------

BASE_STYLE_FIELDS = ("visible", "frozen", "symbolStateVersion", "zOrderVersion")

RECTANGLE_STYLE_FIELDS = (
    "color",
    "fillBackground",
    "backgroundColor",
    "linewidth",
    "transparency",
    "showLabel",
    "horzLabelsAlign",
    "vertLabelsAlign",
    "textColor",
    "fontSize",
    "bold",
    "italic",
    "extendLeft",
    "extendRight",
    "middleLine",
    "linestyle",
)

TREND_LINE_STYLE_FIELDS = (
    "linecolor",
    "linewidth",
    "linestyle",
    "extendLeft",
    "extendRight",
    "leftEnd",
    "rightEnd",
    "showLabel",
    "horzLabelsAlign",
    "vertLabelsAlign",
    "textcolor",
    "fontsize",
    "bold",
    "italic",
    "alwaysShowStats",
    "showMiddlePoint",
    "showPriceLabels",
    "showPriceRange",
    "showPercentPriceRange",
    "showPipsPriceRange",
    "showBarsRange",
    "showDateTimeRange",
    "showDistance",
    "showAngle",
    "statsPosition",
    "snapTo45Degrees",
    "fixedSize",
    "adjustedToSplitTime",
    "intervalsVisibilities",
)

PATH_STYLE_FIELDS = (
    "lineColor",
    "lineWidth",
    "lineStyle",
    "leftEnd",
    "rightEnd",
    "adjustedToSplitTime",
    "intervalsVisibilities",
)

TABLE_STYLE_FIELDS = (
    "backgroundColor",
    "borderColor",
    "textColor",
    "fontSize",
    "horzAlign",
    "anchored",
    "rowsCount",
    "colsCount",
    "cells",
    "columnWidths",
    "rowHeights",
)

STYLE_WHITELISTS: dict[str, tuple[str, ...]] = {
    DrawingType.RECTANGLE.value: RECTANGLE_STYLE_FIELDS,
    DrawingType.TREND_LINE.value: TREND_LINE_STYLE_FIELDS,
    DrawingType.PATH.value: PATH_STYLE_FIELDS,
    DrawingType.TABLE.value: TABLE_STYLE_FIELDS,
}
"""Drawing type → fields kept by the parser.  Types missing from this
mapping have their whole style blob passed through."""
