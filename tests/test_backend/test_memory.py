import pytest

from postboard.backend.memory import InMemoryBackend


def _ticking_clock(start: int = 1_000):
    state = {"now": start}

    def clock():
        state["now"] += 1
        return state["now"]

    return clock


@pytest.mark.asyncio
async def test_append_assigns_id_and_timestamp():
    backend = InMemoryBackend(clock=_ticking_clock())
    await backend.append_post("A", "B", "C")
    await backend.append_post("D", "E", "F")

    first, second = await backend.list_posts()
    assert (first.id, first.timestamp) == (0, 1001)
    assert (second.id, second.timestamp) == (1, 1002)
    assert (second.title, second.body, second.author) == ("D", "E", "F")


@pytest.mark.asyncio
async def test_ids_continue_after_seeded_posts(three_posts):
    backend = InMemoryBackend(three_posts)
    await backend.append_post("A", "B", "C")
    posts = await backend.list_posts()
    assert posts[-1].id == 4


@pytest.mark.asyncio
async def test_list_returns_a_copy(three_posts):
    backend = InMemoryBackend(three_posts)
    listed = await backend.list_posts()
    listed.clear()
    assert len(await backend.list_posts()) == 3
