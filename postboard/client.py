from dataclasses import dataclass

from postboard.backend.base import BaseBackend
from postboard.composer import ComposerView, PostComposer
from postboard.feed import FeedLoader, FeedView
from postboard.results import CallResult, DiagnosticSink, log_failure
from postboard.session import SessionState
from postboard.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PageView:
    toggle_label: str
    composer: ComposerView | None
    feed: FeedView


class BlogClient:
    """
    One page session: feed on top of shared session state, plus the composer.

    Call initialize() once when the session starts.
    """

    def __init__(self, backend: BaseBackend, diagnostics: DiagnosticSink | None = None):
        sink = diagnostics or log_failure
        self.session = SessionState()
        self.feed = FeedLoader(self.session, backend, diagnostics=sink)
        self.composer = PostComposer(self.session, backend, self.feed, diagnostics=sink)
        self._initialized = False

    @property
    def posts(self):
        return self.session.posts

    @property
    def loading(self) -> bool:
        return self.session.loading

    @property
    def form_visible(self) -> bool:
        return self.session.form_visible

    async def initialize(self) -> CallResult:
        if self._initialized:
            raise RuntimeError("session already initialized")
        self._initialized = True
        self.session.reset()
        logger.info("session_started")
        return await self.feed.fetch_posts()

    def toggle_form(self) -> None:
        self.composer.toggle()

    async def fetch_posts(self) -> CallResult:
        return await self.feed.fetch_posts()

    async def submit(self) -> CallResult | None:
        return await self.composer.submit()

    async def on_submit(self, title: str, body: str, author: str) -> CallResult | None:
        """Fill in the three fields and submit them."""
        self.composer.set_field("title", title)
        self.composer.set_field("body", body)
        self.composer.set_field("author", author)
        return await self.composer.submit()

    def render(self) -> PageView:
        return PageView(
            toggle_label=self.composer.toggle_label,
            composer=self.composer.render(),
            feed=self.feed.render(),
        )
