"""Like routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from forum.application.usecase.like import ToggleLikeRequest, ToggleLikeUseCase
from forum.domain.error import DomainError
from forum.domain.service import JWTService
from forum.interface.api.auth import bearer_token
from forum.interface.api.schema import SuccessResponse
from forum.interface.error import to_http_exception, unauthenticated

router = APIRouter(prefix="/threads", tags=["likes"], route_class=DishkaRoute)


@router.put(
    "/{thread_id}/comments/{comment_id}/likes", response_model=SuccessResponse
)
async def toggle_like(
    thread_id: str,
    comment_id: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> SuccessResponse:
    """Like a comment, or unlike it if already liked.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the thread or comment
            does not exist, 409 if a concurrent like won the race
    """
    user_id = jwt_service.get_user_id_from_token(token)
    if not user_id:
        raise unauthenticated()

    try:
        await toggle_like_use_case.execute(
            ToggleLikeRequest(
                thread_id=thread_id, comment_id=comment_id, user_id=user_id
            )
        )
    except DomainError as e:
        raise to_http_exception(e) from e

    return SuccessResponse()
