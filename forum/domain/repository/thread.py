"""Thread repository interface."""

from abc import ABC, abstractmethod

from forum.domain.error import MethodNotImplementedError
from forum.domain.model.thread import AddedThread, NewThread, Thread
from forum.domain.value import ThreadId, UserId

_NAME = "THREAD_REPOSITORY"


class ThreadRepository(ABC):
    """Repository for Thread entity.

    Defines the contract for thread persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def add_thread(self, new_thread: NewThread, owner: UserId) -> AddedThread:
        """Store a new thread.

        Args:
            new_thread: The validated thread payload
            owner: ID of the creating user

        Returns:
            The stored thread's id, title and owner
        """
        raise MethodNotImplementedError(_NAME)

    @abstractmethod
    async def get_thread_by_id(self, thread_id: ThreadId) -> Thread:
        """Fetch a thread row.

        Args:
            thread_id: The thread's identifier

        Returns:
            The stored thread

        Raises:
            NotFoundError: If the thread does not exist
        """
        raise MethodNotImplementedError(_NAME)

    @abstractmethod
    async def verify_thread_exist(self, thread_id: ThreadId) -> None:
        """Ensure a thread exists.

        Args:
            thread_id: The thread's identifier

        Raises:
            NotFoundError: If the thread does not exist
        """
        raise MethodNotImplementedError(_NAME)
