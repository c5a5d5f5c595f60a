from dataclasses import dataclass

from postboard.backend.base import BaseBackend, Post
from postboard.results import CallResult, DiagnosticSink, ErrorKind, log_failure
from postboard.session import SessionState
from postboard.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Spinner:
    """Indeterminate progress indicator shown instead of the feed."""


@dataclass(frozen=True)
class PostBlock:
    key: int
    title: str
    body: str
    byline: str


FeedView = Spinner | tuple[PostBlock, ...]


def format_byline(post: Post) -> str:
    local = post.created_at.astimezone()
    return f"By {post.author} | {local.strftime('%Y-%m-%d %H:%M:%S')}"


def to_block(post: Post) -> PostBlock:
    return PostBlock(key=post.id, title=post.title, body=post.body, byline=format_byline(post))


class FeedLoader:
    """Fetches the whole collection from the backend and renders it."""

    def __init__(
        self,
        session: SessionState,
        backend: BaseBackend,
        diagnostics: DiagnosticSink = log_failure,
    ):
        self.session = session
        self.backend = backend
        self.diagnostics = diagnostics

    async def _list(self) -> CallResult:
        try:
            posts = await self.backend.list_posts()
        except Exception as exc:
            return CallResult.failure(ErrorKind.FETCH, exc)
        return CallResult.success(posts)

    async def fetch_posts(self) -> CallResult:
        """
        Replace the session's posts with the backend's current collection.

        A failed fetch is reported to the diagnostic sink and otherwise
        ignored: the previous posts stay on screen.
        """
        async with self.session.busy("fetch"):
            result = await self._list()
            if result.ok:
                self.session.replace_posts(result.value)
                logger.info("feed_fetched", count=len(self.session.posts))
            else:
                self.diagnostics(result)
        return result

    def render(self) -> FeedView:
        if self.session.loading:
            return Spinner()
        return tuple(to_block(post) for post in self.session.posts)
