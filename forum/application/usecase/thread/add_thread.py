"""Add thread use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import AddedThread, NewThread
from forum.domain.repository import ThreadRepository
from forum.domain.value import UserId


class AddThreadRequest(BaseModel):
    """Add thread request."""

    payload: Any  # Raw client body, validated as NewThread
    owner: str  # User ID from authenticated user


class AddThreadUseCase(BaseUseCase):
    """Use case for starting a new thread."""

    def __init__(self, thread_repository: ThreadRepository) -> None:
        """Initialize add thread use case.

        Args:
            thread_repository: Thread repository
        """
        self.thread_repository = thread_repository

    async def execute(self, request: AddThreadRequest) -> AddedThread:
        """Execute add thread flow.

        Steps:
        1. Validate payload as NewThread
        2. Store the thread

        Args:
            request: Add thread request

        Returns:
            The stored thread's id, title and owner

        Raises:
            ValidationError: If the payload is missing a field or mistyped
        """
        with logfire.span("add_thread", owner=request.owner):
            new_thread = NewThread.model_validate(request.payload)
            added_thread = await self.thread_repository.add_thread(
                new_thread, UserId(request.owner)
            )
            logfire.info("Thread added", thread_id=added_thread.id)
            return added_thread
