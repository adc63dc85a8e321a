"""
Channels API Router.

GET /channels → ["general", "random", ...]
"""

from fastapi import APIRouter, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject

from chat_service.application.queries.channels import (
    ListChannelsHandler,
    ListChannelsQuery,
)
from chat_service.domain.exceptions import PersistenceError

router = APIRouter(prefix="/channels", tags=["channels"])


@router.get(
    "",
    response_model=list[str],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_channels(handler: FromDishka[ListChannelsHandler]):
    try:
        return await handler.execute(ListChannelsQuery())
    except PersistenceError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error retrieving channels",
        ) from e
