"""In-memory thread repository for testing."""

from datetime import datetime, timezone

from forum.domain.error import NotFoundError
from forum.domain.model import AddedThread, NewThread, Thread
from forum.domain.repository.thread import ThreadRepository
from forum.domain.value import THREAD_ID_PREFIX, IdFactory, ThreadId, UserId

from .store import InMemoryStore


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self, store: InMemoryStore, id_generator: IdFactory) -> None:
        self.store = store
        self.id_generator = id_generator

    async def add_thread(self, new_thread: NewThread, owner: UserId) -> AddedThread:
        thread = Thread(
            id=ThreadId(f"{THREAD_ID_PREFIX}{self.id_generator()}"),
            title=new_thread.title,
            body=new_thread.body,
            date=datetime.now(timezone.utc),
            owner=owner,
        )
        self.store.threads[thread.id] = thread
        return AddedThread(id=thread.id, title=thread.title, owner=thread.owner)

    async def get_thread_by_id(self, thread_id: ThreadId) -> Thread:
        thread = self.store.threads.get(thread_id)
        if thread is None:
            raise NotFoundError("thread", thread_id)
        return thread

    async def verify_thread_exist(self, thread_id: ThreadId) -> None:
        if thread_id not in self.store.threads:
            raise NotFoundError("thread", thread_id)
