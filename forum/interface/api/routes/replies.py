"""Reply routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Depends, status

from forum.application.usecase.reply import (
    AddReplyRequest,
    AddReplyUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
)
from forum.domain.error import DomainError
from forum.domain.service import JWTService
from forum.interface.api.auth import bearer_token
from forum.interface.api.schema import (
    AddedReplyData,
    AddedReplyResponse,
    AddedReplyView,
    SuccessResponse,
)
from forum.interface.error import to_http_exception, unauthenticated

router = APIRouter(prefix="/threads", tags=["replies"], route_class=DishkaRoute)


@router.post(
    "/{thread_id}/comments/{comment_id}/replies",
    response_model=AddedReplyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_reply(
    thread_id: str,
    comment_id: str,
    add_reply_use_case: FromDishka[AddReplyUseCase],
    jwt_service: FromDishka[JWTService],
    payload: Any = Body(default=None),
    token: str | None = Depends(bearer_token),
) -> AddedReplyResponse:
    """Reply to a comment.

    Requires authentication.

    Args:
        thread_id: Thread ID
        comment_id: Comment ID
        add_reply_use_case: Add reply use case from DI
        jwt_service: JWT service for token verification (injected)
        payload: Raw request body with ``content``
        token: Bearer token from the Authorization header

    Returns:
        The stored reply's id, content and owner

    Raises:
        HTTPException: If not authenticated, the payload is invalid or the
            thread or comment does not exist
    """
    user_id = jwt_service.get_user_id_from_token(token)
    if not user_id:
        raise unauthenticated()

    try:
        added_reply = await add_reply_use_case.execute(
            AddReplyRequest(
                thread_id=thread_id,
                comment_id=comment_id,
                payload=payload,
                owner=user_id,
            )
        )
    except DomainError as e:
        raise to_http_exception(e) from e

    return AddedReplyResponse(
        data=AddedReplyData(
            added_reply=AddedReplyView.model_validate(added_reply.model_dump())
        )
    )


@router.delete(
    "/{thread_id}/comments/{comment_id}/replies/{reply_id}",
    response_model=SuccessResponse,
)
async def delete_reply(
    thread_id: str,
    comment_id: str,
    reply_id: str,
    delete_reply_use_case: FromDishka[DeleteReplyUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> SuccessResponse:
    """Soft delete one's own reply.

    Requires authentication. Only the reply's owner may delete it.
    """
    user_id = jwt_service.get_user_id_from_token(token)
    if not user_id:
        raise unauthenticated()

    try:
        await delete_reply_use_case.execute(
            DeleteReplyRequest(
                thread_id=thread_id,
                comment_id=comment_id,
                reply_id=reply_id,
                user_id=user_id,
            )
        )
    except DomainError as e:
        raise to_http_exception(e) from e

    return SuccessResponse()
