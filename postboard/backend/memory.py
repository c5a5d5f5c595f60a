import time

from postboard.backend.base import BaseBackend, Post


class InMemoryBackend(BaseBackend):
    """
    Process-local content store.

    Assigns sequential ids and nanosecond timestamps and returns posts in
    insertion order. Backs the development server and the test suite.
    """

    def __init__(self, posts: list[Post] | None = None, clock=time.time_ns):
        self._posts: list[Post] = list(posts or [])
        self._next_id = max((p.id for p in self._posts), default=-1) + 1
        self._clock = clock

    async def list_posts(self) -> list[Post]:
        return list(self._posts)

    async def append_post(self, title: str, body: str, author: str) -> None:
        self._posts.append(
            Post(
                id=self._next_id,
                title=title,
                body=body,
                author=author,
                timestamp=self._clock(),
            )
        )
        self._next_id += 1
