"""
Charts-storage API client.

Thin HTTP layer over the two endpoints the drawings client needs:

1. ``GET {chart_token_url}``: mint a short-lived JWT for a layout using
   the session cookies.
2. ``PUT {charts_storage_url}/layout/{layout_id}/sources`` and
   ``GET {charts_storage_url}/get/layout/{layout_id}/sources``: save and
   fetch the drawing bundle of a layout, authorised by the JWT passed as a
   query parameter.

No retry and no caching: every call is a single request, and every
failure is raised as one of the :mod:`tv_drawings.errors` types.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from tv_drawings.data.models import Credentials
from tv_drawings.errors import ApiError, AuthError, ParseError, RequestError

logger = logging.getLogger(__name__)


def _settings():
    from tv_drawings.infra.config import get_settings
    return get_settings()


USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/136.0.0.0 Safari/537.36"
)

# Browser-like headers the storage endpoint expects on writes.
_BASE_HEADERS = {
    "accept": "*/*",
    "cache-control": "no-cache",
    "content-type": "application/json",
    "origin": "https://www.tradingview.com",
    "pragma": "no-cache",
    "referer": "https://www.tradingview.com/",
    "user-agent": USER_AGENT,
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def gen_auth_cookies(session: str = "", signature: str = "") -> str:
    """Build the ``cookie`` header value for a session.

    Returns an empty string when there is no session.
    """
    if not session:
        return ""
    if not signature:
        return f"sessionid={session}"
    return f"sessionid={session};sessionid_sign={signature}"


def build_headers(credentials: Credentials) -> dict[str, str]:
    """Return the request headers, with the auth cookie when available."""
    headers = dict(_BASE_HEADERS)
    if credentials.session:
        headers["cookie"] = gen_auth_cookies(credentials.session, credentials.signature)
    return headers


def _json_body(resp: requests.Response, url: str) -> Any:
    """Raise :class:`ApiError` on a non-2xx status, else return the JSON body."""
    if not 200 <= resp.status_code < 300:
        logger.warning("Charts storage %s returned status %s", url, resp.status_code)
        raise ApiError(resp.status_code, resp.reason or "")
    try:
        return resp.json()
    except ValueError as exc:
        raise ParseError(f"Invalid JSON in response from {url}") from exc


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def issue_access_token(credentials: Credentials, layout_id: str) -> str:
    """Mint a JWT granting access to *layout_id*.

    Raises:
        AuthError: when no session is configured or the endpoint answers
            without a token.
        ApiError: on a non-success HTTP status.
        RequestError: when the request itself fails.
    """
    if not credentials.session:
        raise AuthError("Session credentials required for JWT token")

    s = _settings()
    url = s.chart_token_url
    try:
        resp = requests.get(
            url,
            headers={
                "cookie": gen_auth_cookies(credentials.session, credentials.signature),
                "User-Agent": USER_AGENT,
            },
            params={"image_url": layout_id, "user_id": credentials.user_id},
            timeout=s.http_timeout,
        )
    except requests.RequestException as exc:
        logger.warning("Chart token request failed: %s", exc)
        raise RequestError(f"Request failed: {exc}") from exc

    data = _json_body(resp, url)
    token = data.get("token") if isinstance(data, dict) else None
    if not token:
        raise AuthError("Failed to get JWT token")
    return token


def put_layout_sources(
    credentials: Credentials,
    layout_id: str,
    bundle: dict[str, Any],
    token: str,
    chart_id: str,
) -> Any:
    """Save *bundle* to the layout's sources and return the response body."""
    s = _settings()
    url = f"{s.charts_storage_url}/layout/{layout_id}/sources"
    try:
        resp = requests.put(
            url,
            json=bundle,
            headers=build_headers(credentials),
            params={"chart_id": chart_id, "layout_id": layout_id, "jwt": token},
            timeout=s.http_timeout,
        )
    except requests.RequestException as exc:
        logger.warning("Saving sources for layout %s failed: %s", layout_id, exc)
        raise RequestError(f"Request failed: {exc}") from exc

    data = _json_body(resp, url)
    logger.info(
        "Saved %d source(s) to layout %s", len(bundle.get("sources") or {}), layout_id
    )
    return data


def get_layout_sources(
    layout_id: str,
    token: str,
    chart_id: str,
    symbol: str = "",
) -> dict[str, Any]:
    """Fetch the raw ``{success, payload}`` envelope of a layout's sources."""
    s = _settings()
    url = f"{s.charts_storage_url}/get/layout/{layout_id}/sources"
    params: dict[str, Any] = {"chart_id": chart_id, "jwt": token}
    if symbol:
        params["symbol"] = symbol

    try:
        resp = requests.get(url, params=params, timeout=s.http_timeout)
    except requests.RequestException as exc:
        logger.warning("Fetching sources for layout %s failed: %s", layout_id, exc)
        raise RequestError(f"Request failed: {exc}") from exc

    data = _json_body(resp, url)
    if not isinstance(data, dict):
        raise ParseError("Invalid response: response must be an object")
    return data
