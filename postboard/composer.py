"""
New-post form: three required fields, validated on submit.

States: HIDDEN -> VISIBLE_EDITING (toggle), VISIBLE_EDITING -> VISIBLE_INVALID
(submit with a blank field), VISIBLE_INVALID -> VISIBLE_EDITING (any edit),
VISIBLE_EDITING -> SUBMITTING (submit, all valid), SUBMITTING -> HIDDEN
(backend accepted) or SUBMITTING -> VISIBLE_EDITING (backend failed, input
kept).
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from postboard.backend.base import BaseBackend
from postboard.feed import FeedLoader
from postboard.results import CallResult, DiagnosticSink, ErrorKind, log_failure
from postboard.session import SessionState
from postboard.utils.logging import get_logger

logger = get_logger(__name__)

FIELDS = ("title", "body", "author")

_REQUIRED_MESSAGES = {
    "title": "Title is required",
    "body": "Body is required",
    "author": "Author is required",
}


class PostDraft(BaseModel):
    title: str = ""
    body: str = ""
    author: str = ""

    @field_validator("title", "body", "author")
    @classmethod
    def _required(cls, value: str, info):
        if not value.strip():
            raise PydanticCustomError("required", _REQUIRED_MESSAGES[info.field_name])
        return value


def validate_draft(values: dict[str, str]) -> tuple[PostDraft | None, dict[str, str]]:
    """Return the validated draft, or None plus one message per failing field."""
    try:
        return PostDraft(**values), {}
    except ValidationError as exc:
        errors: dict[str, str] = {}
        for err in exc.errors():
            field = str(err["loc"][0]) if err["loc"] else ""
            errors.setdefault(field, err["msg"])
        return None, errors


class ComposerState(str, Enum):
    HIDDEN = "hidden"
    VISIBLE_EDITING = "visible_editing"
    VISIBLE_INVALID = "visible_invalid"
    SUBMITTING = "submitting"


@dataclass(frozen=True)
class ComposerView:
    values: dict[str, str]
    errors: dict[str, str]
    submit_label: str = "Submit Post"


class PostComposer:
    def __init__(
        self,
        session: SessionState,
        backend: BaseBackend,
        feed: FeedLoader,
        diagnostics: DiagnosticSink = log_failure,
    ):
        self.session = session
        self.backend = backend
        self.feed = feed
        self.diagnostics = diagnostics
        self.values: dict[str, str] = {name: "" for name in FIELDS}
        self.errors: dict[str, str] = {}
        self._submitting = False

    @property
    def state(self) -> ComposerState:
        if self._submitting:
            return ComposerState.SUBMITTING
        if not self.session.form_visible:
            return ComposerState.HIDDEN
        if self.errors:
            return ComposerState.VISIBLE_INVALID
        return ComposerState.VISIBLE_EDITING

    @property
    def toggle_label(self) -> str:
        return "Cancel" if self.session.form_visible else "New Post"

    def toggle(self) -> None:
        self.session.toggle_form()
        if not self.session.form_visible:
            self.errors = {}

    def set_field(self, name: str, value: str) -> None:
        if name not in self.values:
            raise KeyError(name)
        self.values[name] = value
        self.errors = {}

    def clear(self) -> None:
        self.values = {name: "" for name in FIELDS}
        self.errors = {}

    async def _append(self, draft: PostDraft) -> CallResult:
        try:
            await self.backend.append_post(draft.title, draft.body, draft.author)
        except Exception as exc:
            return CallResult.failure(ErrorKind.SUBMIT, exc)
        return CallResult.success()

    async def submit(self) -> CallResult | None:
        """
        Validate and send the form.

        Returns None when the form is hidden or validation blocked the
        submission, otherwise the outcome of the append call. Backend
        failures are reported to the diagnostic sink and leave the form as
        the user left it.
        """
        if not self.session.form_visible:
            logger.debug("post_submit_ignored", reason="form_hidden")
            return None

        draft, errors = validate_draft(self.values)
        if draft is None:
            self.errors = errors
            logger.info("post_validation_failed", fields=sorted(errors))
            return None

        self.errors = {}
        self._submitting = True
        try:
            async with self.session.busy("submit"):
                result = await self._append(draft)
                if result.ok:
                    logger.info("post_submitted", author=draft.author)
                    self.clear()
                    self.session.form_visible = False
                    self._submitting = False
                    await self.feed.fetch_posts()
                else:
                    self.diagnostics(result)
        finally:
            self._submitting = False
        return result

    def render(self) -> ComposerView | None:
        if not self.session.form_visible:
            return None
        return ComposerView(values=dict(self.values), errors=dict(self.errors))
