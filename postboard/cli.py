"""
Command-line client.

    python -m postboard.cli --list
    python -m postboard.cli --post TITLE BODY AUTHOR
"""

import asyncio
import sys

from postboard.backend.http import HttpBackend
from postboard.client import BlogClient
from postboard.composer import ComposerState
from postboard.rendering import render_page
from postboard.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

_USAGE = "Usage: python -m postboard.cli --list | --post TITLE BODY AUTHOR"


async def _list(client: BlogClient) -> int:
    await client.initialize()
    print(render_page(client.render()))
    return 0


async def _post(client: BlogClient, title: str, body: str, author: str) -> int:
    await client.initialize()
    client.toggle_form()
    result = await client.on_submit(title, body, author)
    print(render_page(client.render()))
    if result is None or client.composer.state is not ComposerState.HIDDEN:
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    setup_logging(json_logs=False)
    client = BlogClient(HttpBackend())

    if args[:1] == ["--list"] and len(args) == 1:
        return asyncio.run(_list(client))
    if args[:1] == ["--post"] and len(args) == 4:
        return asyncio.run(_post(client, *args[1:]))

    logger.warning("cli_bad_arguments", args=args)
    print(_USAGE)
    return 1


if __name__ == "__main__":
    sys.exit(main())
