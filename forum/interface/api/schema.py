"""Response envelopes for the HTTP API.

Every success body is ``{"status": "success", "data": {...}}`` with camelCase
keys, so domain models are re-validated into these views before leaving the
API.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class SuccessResponse(APIModel):
    status: Literal["success"] = "success"


# Mutation acknowledgements


class AddedThreadView(APIModel):
    id: str
    title: str
    owner: str


class AddedCommentView(APIModel):
    id: str
    content: str
    owner: str


class AddedReplyView(APIModel):
    id: str
    content: str
    owner: str


class AddedThreadData(APIModel):
    added_thread: AddedThreadView


class AddedCommentData(APIModel):
    added_comment: AddedCommentView


class AddedReplyData(APIModel):
    added_reply: AddedReplyView


class AddedThreadResponse(SuccessResponse):
    data: AddedThreadData


class AddedCommentResponse(SuccessResponse):
    data: AddedCommentData


class AddedReplyResponse(SuccessResponse):
    data: AddedReplyData


# Thread detail


class ReplyView(APIModel):
    id: str
    owner: str
    date: datetime
    content: str


class CommentView(APIModel):
    id: str
    owner: str
    date: datetime
    content: str
    like_count: int
    replies: list[ReplyView]


class ThreadView(APIModel):
    id: str
    title: str
    body: str
    date: datetime
    owner: str
    comments: list[CommentView]


class ThreadData(APIModel):
    thread: ThreadView


class ThreadResponse(SuccessResponse):
    data: ThreadData
