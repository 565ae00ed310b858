"""Shopping search client: query the Naver shopping API and map results to ItemDto."""

import logging
import re
import time
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import ValidationError

from app.schemas.search import ItemDto

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<[^>]+>")


class SearchNotConfiguredError(Exception):
    """Raised when search is invoked but NAVER_CLIENT_ID / NAVER_CLIENT_SECRET are missing."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class SearchServiceError(Exception):
    """Raised when the search provider is unreachable, times out, or returns an unusable body."""

    def __init__(self, message: str, status_code: int | None = None, cause: Exception | None = None) -> None:
        self.message = message
        self.status_code = status_code
        self.cause = cause
        super().__init__(message)


def _is_search_configured(settings: "Settings") -> bool:
    if not settings.NAVER_CLIENT_ID or not settings.NAVER_CLIENT_ID.strip():
        return False
    if settings.NAVER_CLIENT_SECRET is None:
        return False
    return bool(settings.NAVER_CLIENT_SECRET.get_secret_value().strip())


def _strip_tags(text: str) -> str:
    """Search titles highlight the query with <b> tags."""
    return _TAG_RE.sub("", text or "").strip()


def _parse_price(value: Any) -> int | None:
    """Provider prices are digit strings; anything else has no usable price."""
    try:
        price = int(value)
    except (TypeError, ValueError):
        return None
    return price if price >= 0 else None


def _to_item(raw: dict[str, Any]) -> ItemDto | None:
    lprice = _parse_price(raw.get("lprice"))
    if lprice is None:
        return None
    return ItemDto(
        title=_strip_tags(str(raw.get("title") or "")),
        link=str(raw.get("link") or ""),
        image=str(raw.get("image") or ""),
        lprice=lprice,
    )


def parse_items(body: dict[str, Any]) -> list[ItemDto]:
    """
    Map the provider's "items" array to ItemDto.

    Entries that are not objects, have no title, or carry no parsable lprice are skipped.
    """
    items = body.get("items")
    if not isinstance(items, list):
        raise SearchServiceError("Search response missing 'items' array.")
    result: list[ItemDto] = []
    for raw in items:
        if not isinstance(raw, dict):
            continue
        try:
            item = _to_item(raw)
        except ValidationError:
            continue
        if item is not None and item.title:
            result.append(item)
    return result


async def search_items(query: str, settings: "Settings") -> list[ItemDto]:
    """
    Search the shopping API for query and return up to NAVER_SEARCH_DISPLAY items.

    Raises SearchNotConfiguredError when credentials are missing and
    SearchServiceError on connection failure, timeout, non-200 status or invalid JSON.
    """
    if not _is_search_configured(settings):
        raise SearchNotConfiguredError(
            "Search is not configured; set NAVER_CLIENT_ID and NAVER_CLIENT_SECRET."
        )
    headers = {
        "X-Naver-Client-Id": (settings.NAVER_CLIENT_ID or "").strip(),
        "X-Naver-Client-Secret": settings.NAVER_CLIENT_SECRET.get_secret_value().strip(),
    }
    params = {"query": query, "display": settings.NAVER_SEARCH_DISPLAY}
    timeout = httpx.Timeout(settings.NAVER_REQUEST_TIMEOUT_SEC)
    start = time.perf_counter()

    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.get(settings.NAVER_SEARCH_URL, params=params, headers=headers)
    except httpx.ConnectError as e:
        raise SearchServiceError("Search provider is unreachable.", cause=e) from e
    except httpx.TimeoutException as e:
        raise SearchServiceError(
            "Search request timed out. Try increasing NAVER_REQUEST_TIMEOUT_SEC.", cause=e
        ) from e
    except httpx.HTTPError as e:
        raise SearchServiceError("Search request failed.", cause=e) from e
    elapsed = time.perf_counter() - start

    if response.status_code in (401, 403):
        raise SearchServiceError(
            "Search provider rejected the credentials.", status_code=response.status_code
        )
    if response.status_code != 200:
        raise SearchServiceError(
            f"Search provider returned status {response.status_code}.",
            status_code=response.status_code,
        )
    try:
        body = response.json()
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError (non-UTF-8 body) are both ValueErrors.
        raise SearchServiceError("Search response body is not valid JSON.", cause=e) from e
    if not isinstance(body, dict):
        raise SearchServiceError("Search response is not a JSON object.")

    items = parse_items(body)
    logger.info(
        "Search completed: query=%r items=%s latency=%.3fs", query, len(items), elapsed
    )
    return items
