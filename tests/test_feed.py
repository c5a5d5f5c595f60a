from unittest.mock import AsyncMock, MagicMock

import pytest

from postboard.backend.base import BaseBackend
from postboard.backend.memory import InMemoryBackend
from postboard.feed import FeedLoader, PostBlock, Spinner, format_byline
from postboard.results import ErrorKind
from postboard.session import SessionState


def _broken_backend(exc: Exception) -> BaseBackend:
    backend = MagicMock(spec=BaseBackend)
    backend.list_posts = AsyncMock(side_effect=exc)
    return backend


@pytest.mark.asyncio
async def test_fetch_replaces_posts_in_backend_order(three_posts):
    session = SessionState()
    loader = FeedLoader(session, InMemoryBackend(three_posts))

    result = await loader.fetch_posts()

    assert result.ok
    assert list(session.posts) == three_posts
    assert session.loading is False


@pytest.mark.asyncio
async def test_fetch_failure_keeps_previous_posts(three_posts):
    session = SessionState()
    session.replace_posts(three_posts)
    sink = MagicMock()
    loader = FeedLoader(session, _broken_backend(ConnectionError("down")), diagnostics=sink)

    result = await loader.fetch_posts()

    assert not result.ok
    assert result.kind is ErrorKind.FETCH
    assert isinstance(result.error, ConnectionError)
    sink.assert_called_once_with(result)
    assert list(session.posts) == three_posts
    assert session.loading is False


@pytest.mark.asyncio
async def test_fetch_is_loading_while_in_flight(three_posts):
    session = SessionState()
    seen = {}

    class _Probe(InMemoryBackend):
        async def list_posts(self):
            seen["loading"] = session.loading
            seen["view"] = loader.render()
            return await super().list_posts()

    loader = FeedLoader(session, _Probe(three_posts))
    await loader.fetch_posts()

    assert seen["loading"] is True
    assert seen["view"] == Spinner()


@pytest.mark.asyncio
async def test_repeated_fetch_renders_identically(three_posts):
    session = SessionState()
    loader = FeedLoader(session, InMemoryBackend(three_posts))

    await loader.fetch_posts()
    first = loader.render()
    await loader.fetch_posts()
    second = loader.render()

    assert first == second
    assert len(first) == 3


def test_render_empty_collection_has_no_blocks():
    loader = FeedLoader(SessionState(), InMemoryBackend())
    assert loader.render() == ()


def test_render_blocks_carry_post_fields(three_posts):
    session = SessionState()
    session.replace_posts(three_posts)
    blocks = FeedLoader(session, InMemoryBackend()).render()

    assert all(isinstance(b, PostBlock) for b in blocks)
    assert [b.key for b in blocks] == [1, 2, 3]
    assert blocks[1].body == "two\nlines"
    assert blocks[1].byline.startswith("By bob | ")


def test_byline_uses_millisecond_timestamp(three_posts):
    post = three_posts[0]
    local = post.created_at.astimezone()
    assert format_byline(post) == f"By ann | {local.strftime('%Y-%m-%d %H:%M:%S')}"
    assert post.created_at.year == 2024
