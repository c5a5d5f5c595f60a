"""
Outcome of a call to the content backend.

The two call sites (feed fetch, post submit) never raise backend errors to
the UI. They wrap the outcome in a CallResult, hand failures to a
diagnostic sink, and then drop the result.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from postboard.utils.logging import get_logger

logger = get_logger(__name__)


class ErrorKind(str, Enum):
    FETCH = "fetch"
    SUBMIT = "submit"


@dataclass(frozen=True)
class CallResult:
    value: Any = None
    kind: ErrorKind | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.kind is None

    @classmethod
    def success(cls, value: Any = None) -> "CallResult":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, error: BaseException) -> "CallResult":
        return cls(kind=kind, error=error)


DiagnosticSink = Callable[[CallResult], None]


def log_failure(result: CallResult) -> None:
    """Default sink: one structured warning per failed backend call."""
    logger.warning(
        "backend_call_failed",
        kind=result.kind.value if result.kind else None,
        error=str(result.error),
        error_type=type(result.error).__name__,
    )
