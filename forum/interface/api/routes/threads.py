"""Thread routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Depends, status

from forum.application.usecase.thread import (
    AddThreadRequest,
    AddThreadUseCase,
    GetThreadDetailRequest,
    GetThreadDetailUseCase,
)
from forum.domain.error import DomainError
from forum.domain.service import JWTService
from forum.interface.api.auth import bearer_token
from forum.interface.api.schema import (
    AddedThreadData,
    AddedThreadResponse,
    AddedThreadView,
    ThreadData,
    ThreadResponse,
    ThreadView,
)
from forum.interface.error import to_http_exception, unauthenticated

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


@router.post(
    "",
    response_model=AddedThreadResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_thread(
    add_thread_use_case: FromDishka[AddThreadUseCase],
    jwt_service: FromDishka[JWTService],
    payload: Any = Body(default=None),
    token: str | None = Depends(bearer_token),
) -> AddedThreadResponse:
    """Start a new thread.

    Requires authentication.

    Args:
        add_thread_use_case: Add thread use case from DI
        jwt_service: JWT service for token verification (injected)
        payload: Raw request body with ``title`` and ``body``
        token: Bearer token from the Authorization header

    Returns:
        The stored thread's id, title and owner

    Raises:
        HTTPException: If not authenticated or the payload is invalid
    """
    user_id = jwt_service.get_user_id_from_token(token)
    if not user_id:
        raise unauthenticated()

    try:
        added_thread = await add_thread_use_case.execute(
            AddThreadRequest(payload=payload, owner=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e) from e

    return AddedThreadResponse(
        data=AddedThreadData(
            added_thread=AddedThreadView.model_validate(added_thread.model_dump())
        )
    )


@router.get("/{thread_id}", response_model=ThreadResponse)
async def get_thread_detail(
    thread_id: str,
    get_thread_detail_use_case: FromDishka[GetThreadDetailUseCase],
) -> ThreadResponse:
    """Get a thread with its comments, replies and like counts.

    Public endpoint. Deleted comments and replies are shown with placeholder
    content.

    Args:
        thread_id: Thread ID
        get_thread_detail_use_case: Get thread detail use case from DI

    Returns:
        The nested thread view

    Raises:
        HTTPException: If the thread does not exist
    """
    try:
        detail = await get_thread_detail_use_case.execute(
            GetThreadDetailRequest(thread_id=thread_id)
        )
    except DomainError as e:
        raise to_http_exception(e) from e

    return ThreadResponse(
        data=ThreadData(thread=ThreadView.model_validate(detail.model_dump()))
    )
