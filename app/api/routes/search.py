"""Shopping search endpoint: proxy a query to the search provider."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.deps import get_current_user
from app.core.config import get_settings
from app.schemas.auth import CurrentUser
from app.schemas.search import ItemDto
from app.services.search import SearchNotConfiguredError, SearchServiceError, search_items

router = APIRouter()


@router.get("", response_model=list[ItemDto])
async def search(
    query: Annotated[str, Query(min_length=1, max_length=200)],
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> list[ItemDto]:
    """Search the shopping provider; results can be registered via POST /products."""
    try:
        return await search_items(query, get_settings())
    except SearchNotConfiguredError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message) from e
    except SearchServiceError as e:
        if "unreachable" in e.message.lower() or "timed out" in e.message.lower():
            raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message) from e
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message) from e
