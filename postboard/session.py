"""
Session state shared by the feed loader and the post composer.

Holds the current posts snapshot, the busy flag and the form visibility
flag. Nothing here is persisted beyond the lifetime of the object.
"""

from contextlib import asynccontextmanager
from enum import Enum
from typing import Iterable

from postboard.backend.base import Post
from postboard.utils.logging import get_logger

logger = get_logger(__name__)


class BusyState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"


class SessionState:
    def __init__(self):
        self.posts: tuple[Post, ...] = ()
        self.busy_state = BusyState.IDLE
        self.form_visible = False

    @property
    def loading(self) -> bool:
        return self.busy_state is BusyState.LOADING

    def reset(self) -> None:
        """Start-of-session values: loading, form hidden, no posts."""
        self.busy_state = BusyState.LOADING
        self.form_visible = False
        self.posts = ()

    def toggle_form(self) -> bool:
        self.form_visible = not self.form_visible
        return self.form_visible

    def replace_posts(self, posts: Iterable[Post]) -> None:
        # Wholesale replacement, backend order kept as-is
        self.posts = tuple(posts)

    @asynccontextmanager
    async def busy(self, operation: str):
        """
        Hold the busy flag for the duration of a backend operation.

        The flag goes back to IDLE on every exit path. It is advisory UI
        state, not a lock: overlapping operations are not serialised and
        whichever settles first clears the flag.
        """
        self.busy_state = BusyState.LOADING
        logger.debug("busy_acquired", operation=operation)
        try:
            yield self
        finally:
            self.busy_state = BusyState.IDLE
            logger.debug("busy_released", operation=operation)
