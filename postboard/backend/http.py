import httpx

from postboard.backend.base import BackendError, BaseBackend, Post, post_from_dict
from postboard.config import settings
from postboard.utils.logging import get_logger

logger = get_logger(__name__)

_POSTS_PATH = "/posts"


class HttpBackend(BaseBackend):
    """
    Talks to the content service over HTTP/JSON.

    Errors are raised, not swallowed: deciding what to do with a failed call
    belongs to the caller.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.backend_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.backend_timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        kwargs = {"timeout": self.timeout}
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(**kwargs)

    async def list_posts(self) -> list[Post]:
        url = self.base_url + _POSTS_PATH
        async with self._client() as client:
            response = await client.get(url)
            if response.status_code != 200:
                logger.warning("backend_list_error", status_code=response.status_code)
                raise BackendError(f"GET {url} returned {response.status_code}")
            try:
                data = response.json()
            except ValueError as exc:
                raise BackendError("response is not JSON") from exc

        if not isinstance(data, list):
            raise BackendError("expected a JSON array of posts")

        posts = [post_from_dict(item) for item in data]
        logger.debug("backend_list_ok", count=len(posts))
        return posts

    async def append_post(self, title: str, body: str, author: str) -> None:
        url = self.base_url + _POSTS_PATH
        payload = {"title": title, "body": body, "author": author}
        async with self._client() as client:
            response = await client.post(url, json=payload)
            if response.status_code not in (200, 201, 204):
                logger.warning(
                    "backend_append_error",
                    status_code=response.status_code,
                    body=response.text[:200],
                )
                raise BackendError(f"POST {url} returned {response.status_code}")

        logger.debug("backend_append_ok", author=author)
