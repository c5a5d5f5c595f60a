"""Plain-text rendering of a page view, used by the CLI."""

from postboard.client import PageView
from postboard.composer import FIELDS, ComposerView
from postboard.feed import PostBlock, Spinner

_RULE = "-" * 60


def render_block(block: PostBlock) -> str:
    return "\n".join([block.title, "", block.body, "", block.byline])


def render_composer(view: ComposerView) -> str:
    lines = []
    for name in FIELDS:
        lines.append(f"{name.capitalize()}: {view.values.get(name, '')}")
        if name in view.errors:
            lines.append(f"  ! {view.errors[name]}")
    lines.append(f"[{view.submit_label}]")
    return "\n".join(lines)


def render_page(page: PageView) -> str:
    parts = [f"[{page.toggle_label}]"]
    if page.composer is not None:
        parts.append(render_composer(page.composer))
    if isinstance(page.feed, Spinner):
        parts.append("Loading…")
    else:
        for block in page.feed:
            parts.append(_RULE)
            parts.append(render_block(block))
    return "\n".join(parts)
