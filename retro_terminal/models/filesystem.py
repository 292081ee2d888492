"""Result and entry types returned by the virtual filesystem."""

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel


class FsErrorCode(StrEnum):
    """Failure categories a filesystem operation can report."""

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    ALREADY_A_FILE = "already_a_file"
    IS_A_DIRECTORY = "is_a_directory"
    NOT_A_DIRECTORY = "not_a_directory"
    REFUSING_ROOT_DELETION = "refusing_root_deletion"
    INVALID_OPERAND = "invalid_operand"

    @property
    def unix_message(self) -> str:
        """The phrasing coreutils would print for this failure."""
        return UNIX_MESSAGES[self]


UNIX_MESSAGES: dict[FsErrorCode, str] = {
    FsErrorCode.NOT_FOUND: "No such file or directory",
    FsErrorCode.ALREADY_EXISTS: "File exists",
    FsErrorCode.ALREADY_A_FILE: "File exists",
    FsErrorCode.IS_A_DIRECTORY: "Is a directory",
    FsErrorCode.NOT_A_DIRECTORY: "Not a directory",
    FsErrorCode.REFUSING_ROOT_DELETION: "Refusing to remove root directory",
    FsErrorCode.INVALID_OPERAND: "Invalid argument",
}


class FsResult(BaseModel):
    """Status object returned by every mutating filesystem operation."""

    success: bool
    error: FsErrorCode | None = None
    message: str | None = None
    path: str | None = None
    is_new: bool = False
    trash_path: str | None = None

    @classmethod
    def ok(cls, **kwargs) -> "FsResult":
        return cls(success=True, **kwargs)

    @classmethod
    def fail(cls, error: FsErrorCode, message: str) -> "FsResult":
        return cls(success=False, error=error, message=message)


class DirEntry(BaseModel):
    """A direct child of a listed directory."""

    name: str
    path: str
    type: str
    is_user_created: bool = False
    is_directory: bool = False


class FlatEntry(BaseModel):
    """One node of the flattened home tree."""

    name: str
    type: Literal["folder", "file"]
    level: int
    path: str
    parent: str | None = None
    is_user_created: bool = False
    file_type: str | None = None
    is_directory: bool = False


class GrepMatch(BaseModel):
    line_num: int
    content: str
