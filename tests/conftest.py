"""
Shared test fixtures and helpers.
"""

from __future__ import annotations

import copy
from typing import Any
from unittest.mock import MagicMock

import pytest

from tv_drawings.builder import ChartDrawings, DrawingOptions
from tv_drawings.data.models import Credentials


# ---------------------------------------------------------------------------
# Mock HTTP responses
# ---------------------------------------------------------------------------


def make_response(status_code: int = 200, body: Any = None, reason: str = "") -> MagicMock:
    """Return a MagicMock that behaves like a ``requests.Response``."""
    return MagicMock(status_code=status_code, reason=reason, json=lambda: body)


# ---------------------------------------------------------------------------
# Sample server response: rectangle, trend line, path (grouped), table
# ---------------------------------------------------------------------------

SYMBOL = "BINANCE:UNIUSDT.P"

_SAMPLE_RESPONSE: dict[str, Any] = {
    "success": True,
    "payload": {
        "sources": {
            "25FuOW": {
                "id": "25FuOW",
                "symbol": SYMBOL,
                "ownerSource": "_seriesId",
                "serverUpdateTime": 1749106516920,
                "state": {
                    "type": "LineToolRectangle",
                    "id": "25FuOW",
                    "state": {
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
                        "title": "",
                        "interval": "5",
                        "symbol": SYMBOL,
                        "currencyId": None,
                        "unitId": None,
                        "visible": True,
                        "text": "",
                    },
                    "points": [
                        {"time_t": 1748526300, "offset": 13, "price": 7.009, "interval": "5"},
                        {"time_t": 1748525700, "offset": 0, "price": 6.899, "interval": "5"},
                    ],
                    "zorder": -35180,
                    "ownerSource": "_seriesId",
                    "linkKey": "vrPTpq4C3Ml3",
                    "sharingMode": 1,
                },
            },
            "I66Yuv": {
                "id": "I66Yuv",
                "symbol": SYMBOL,
                "ownerSource": "_seriesId",
                "serverUpdateTime": 1749188307618,
                "state": {
                    "type": "LineToolTrendLine",
                    "id": "I66Yuv",
                    "state": {
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
                        "adjustedToSplitTime": 1749188291.887,
                        "symbolStateVersion": 2,
                        "zOrderVersion": 2,
                        "visible": True,
                        "frozen": False,
                        "symbol": SYMBOL,
                        "currencyId": None,
                        "unitId": None,
                        "intervalsVisibilities": {"seconds": False, "daysTo": 5, "months": False},
                        "title": "",
                        "text": "",
                        "interval": "5",
                    },
                    "points": [
                        {"time_t": 1749165300, "offset": 0, "price": 6.424942779291553, "interval": "5"},
                        {"time_t": 1749150000, "offset": 0, "price": 6.432217983651226, "interval": "5"},
                    ],
                    "zorder": -625,
                    "ownerSource": "_seriesId",
                    "linkKey": "odDQMdNpeYT2",
                    "sharingMode": 1,
                },
            },
            "5Eg8Ci": {
                "id": "5Eg8Ci",
                "symbol": SYMBOL,
                "ownerSource": "_seriesId",
                "serverUpdateTime": 1749178654407,
                "groupId": "9dPnET",
                "state": {
                    "type": "LineToolPath",
                    "id": "5Eg8Ci",
                    "state": {
                        "lineColor": "rgba(255, 235, 59, 0.8408)",
                        "lineWidth": 1,
                        "lineStyle": 0,
                        "leftEnd": 0,
                        "rightEnd": 0,
                        "adjustedToSplitTime": 1749178652.96,
                        "symbolStateVersion": 2,
                        "zOrderVersion": 2,
                        "visible": True,
                        "frozen": False,
                        "symbol": SYMBOL,
                        "currencyId": None,
                        "unitId": None,
                        "title": "",
                        "interval": "240",
                        "intervalsVisibilities": {
                            "seconds": False,
                            "hoursTo": 4,
                            "days": False,
                            "daysTo": 3,
                            "weeks": False,
                            "months": False,
                        },
                    },
                    "points": [
                        {"time_t": 1746907200, "offset": 0, "price": 7.586, "interval": "240"},
                        {"time_t": 1746979200, "offset": 0, "price": 6.715, "interval": "240"},
                    ],
                    "zorder": -1875,
                    "ownerSource": "_seriesId",
                    "linkKey": "Ht8qd5X5oLmH",
                    "sharingMode": 1,
                },
            },
            "dUMWzJ": {
                "id": "dUMWzJ",
                "symbol": SYMBOL,
                "ownerSource": "_seriesId",
                "serverUpdateTime": 1749107304526,
                "state": {
                    "type": "LineToolTable",
                    "id": "dUMWzJ",
                    "state": {
                        "backgroundColor": "#0F0F0F",
                        "borderColor": "#575757",
                        "textColor": "rgba(255, 238, 88, 1)",
                        "fontSize": 14,
                        "horzAlign": "left",
                        "anchored": False,
                        "rowsCount": 3,
                        "colsCount": 4,
                        "cells": [
                            ["3D笔趋势", "下跌中,3D笔HL破了", "3D趋势", "下跌中"],
                            ["4H笔 HL", "已破", "3D HL", "已破"],
                            ["4H笔 LH", "", "等待3D下跌完成,且4H起码要有3笔才行", ""],
                        ],
                        "columnWidths": [129.8231575886497, 129.8231575886497, 129.8231575886497, 120],
                        "rowHeights": [50.2, 32, 68.4],
                        "symbolStateVersion": 2,
                        "zOrderVersion": 2,
                        "frozen": False,
                        "title": "",
                        "interval": "240",
                        "symbol": SYMBOL,
                        "currencyId": None,
                        "unitId": None,
                        "visible": True,
                    },
                    "points": [
                        {"time_t": 1748937600, "offset": 0, "price": 8.135628036585357, "interval": "240"},
                    ],
                    "zorder": -33330,
                    "ownerSource": "_seriesId",
                    "linkKey": "XcojoEdDXd51",
                    "sharingMode": 1,
                },
            },
        },
        "drawing_groups": {
            "9dPnET": {
                "id": "9dPnET",
                "symbol": SYMBOL,
                "serverUpdateTime": 1749182472504,
                "name": "4H笔",
            }
        },
    },
}


@pytest.fixture
def sample_response() -> dict[str, Any]:
    return copy.deepcopy(_SAMPLE_RESPONSE)


# ---------------------------------------------------------------------------
# Builder fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(session="test_session", signature="test_signature", id=12345)


@pytest.fixture
def chart_drawings(credentials: Credentials) -> ChartDrawings:
    return ChartDrawings(credentials)


@pytest.fixture
def two_points() -> list[dict[str, Any]]:
    return [
        {"time_t": 1649165300, "offset": 0, "price": 40000, "interval": "5"},
        {"time_t": 1649150000, "offset": 0, "price": 41000, "interval": "5"},
    ]


@pytest.fixture
def trend_line_options(two_points) -> DrawingOptions:
    return DrawingOptions(id="test123", symbol="BINANCE:BTCUSDT", points=two_points)
