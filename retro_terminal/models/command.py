"""Structured results produced by the command interpreter."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ResultKind(StrEnum):
    TEXT = "text"
    TABLE = "table"
    EDITOR = "editor"
    CHANGE_DIRECTORY = "change_directory"
    CLEAR = "clear"
    SHUTDOWN = "shutdown"
    UNKNOWN_COMMAND = "unknown_command"


class EditorRequest(BaseModel):
    """Hand-off to the modal editor: which file to open and what it holds."""

    name: str
    path: str
    type: str = "text"
    is_new: bool = False
    is_user_created: bool = False
    content: str = ""


class LoadingSpec(BaseModel):
    """Cosmetic delay the shell shows before revealing an already computed result."""

    text: str
    duration_ms: int
    has_progress_bar: bool = False
    is_hack: bool = False


class CommandResult(BaseModel):
    kind: ResultKind = ResultKind.TEXT
    output: str = ""
    rows: list[dict[str, Any]] = Field(default_factory=list)
    exit_code: int = 0
    cwd: str | None = None
    editor: EditorRequest | None = None
    loading: LoadingSpec | None = None

    @property
    def is_error(self) -> bool:
        return self.exit_code != 0
