"""Typed results for operations that may fail without raising."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from chatstyle.model.diagnostic import Diagnostic


class Status(Enum):
    SUCCESS = "success"
    FAIL = "fail"


class ErrorKind(Enum):
    """Why an operation failed."""

    INVALID_ARGUMENT = "invalid_argument"
    MALFORMED_STRUCTURE = "malformed_structure"
    EVALUATION_FAILURE = "evaluation_failure"
    PIPELINE_FAILURE = "pipeline_failure"
    TRANSPORT_FAILURE = "transport_failure"


@dataclass
class Result:
    """Outcome of a render or delivery: either text or a structured error."""

    status: Status
    text: str = ""
    error: ErrorKind | None = None
    message: str = ""
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @classmethod
    def success(cls, text: str = "", diagnostics: list[Diagnostic] | None = None) -> Result:
        return cls(status=Status.SUCCESS, text=text, diagnostics=list(diagnostics or []))

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> Result:
        return cls(status=Status.FAIL, error=error, message=message)

    @property
    def ok(self) -> bool:
        return self.status is Status.SUCCESS

    def __bool__(self) -> bool:
        return self.ok
