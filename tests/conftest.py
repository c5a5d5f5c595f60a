import pytest

from postboard.backend.base import Post


@pytest.fixture
def three_posts() -> list[Post]:
    return [
        Post(id=1, title="First", body="one", author="ann", timestamp=1_724_972_204_000_000_000),
        Post(id=2, title="Second", body="two\nlines", author="bob", timestamp=1_724_972_205_000_000_000),
        Post(id=3, title="Third", body="three", author="cy", timestamp=1_724_972_206_000_000_000),
    ]
