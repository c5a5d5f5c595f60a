from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone


class BackendError(Exception):
    """The content backend answered, but not with something usable."""


@dataclass(frozen=True)
class Post:
    """A post as stored by the content backend. Never edited client-side."""
    id: int
    title: str
    body: str
    author: str
    timestamp: int       # nanoseconds since the Unix epoch, backend-assigned

    @property
    def created_at(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp // 1_000_000 / 1000, tz=timezone.utc)


def post_from_dict(data: dict) -> Post:
    """Map one wire record onto a Post, raising BackendError on bad shapes."""
    try:
        return Post(
            id=int(data["id"]),
            title=str(data["title"]),
            body=str(data["body"]),
            author=str(data["author"]),
            timestamp=int(data["timestamp"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise BackendError(f"malformed post record: {exc}") from exc


class BaseBackend(ABC):
    """The two operations the client consumes from the content service."""

    @abstractmethod
    async def list_posts(self) -> list[Post]:
        """Return the full current collection, in backend order."""
        ...

    @abstractmethod
    async def append_post(self, title: str, body: str, author: str) -> None:
        """Create a post. The created record is not returned. Raises on failure."""
        ...
