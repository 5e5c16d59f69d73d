"""Comment routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Depends, status

from forum.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from forum.domain.error import DomainError
from forum.domain.service import JWTService
from forum.interface.api.auth import bearer_token
from forum.interface.api.schema import (
    AddedCommentData,
    AddedCommentResponse,
    AddedCommentView,
    SuccessResponse,
)
from forum.interface.error import to_http_exception, unauthenticated

router = APIRouter(prefix="/threads", tags=["comments"], route_class=DishkaRoute)


@router.post(
    "/{thread_id}/comments",
    response_model=AddedCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    thread_id: str,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    jwt_service: FromDishka[JWTService],
    payload: Any = Body(default=None),
    token: str | None = Depends(bearer_token),
) -> AddedCommentResponse:
    """Comment on a thread.

    Requires authentication.

    Args:
        thread_id: Thread ID
        add_comment_use_case: Add comment use case from DI
        jwt_service: JWT service for token verification (injected)
        payload: Raw request body with ``content``
        token: Bearer token from the Authorization header

    Returns:
        The stored comment's id, content and owner

    Raises:
        HTTPException: If not authenticated, the payload is invalid or the
            thread does not exist
    """
    user_id = jwt_service.get_user_id_from_token(token)
    if not user_id:
        raise unauthenticated()

    try:
        added_comment = await add_comment_use_case.execute(
            AddCommentRequest(thread_id=thread_id, payload=payload, owner=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e) from e

    return AddedCommentResponse(
        data=AddedCommentData(
            added_comment=AddedCommentView.model_validate(added_comment.model_dump())
        )
    )


@router.delete("/{thread_id}/comments/{comment_id}", response_model=SuccessResponse)
async def delete_comment(
    thread_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> SuccessResponse:
    """Soft delete one's own comment.

    Requires authentication. Only the comment's owner may delete it.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the thread or comment
            does not exist, 403 if the user does not own the comment
    """
    user_id = jwt_service.get_user_id_from_token(token)
    if not user_id:
        raise unauthenticated()

    try:
        await delete_comment_use_case.execute(
            DeleteCommentRequest(
                thread_id=thread_id, comment_id=comment_id, user_id=user_id
            )
        )
    except DomainError as e:
        raise to_http_exception(e) from e

    return SuccessResponse()
