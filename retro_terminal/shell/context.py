"""Per-invocation context handed to every command handler."""

import random
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from retro_terminal.filesystem.paths import to_display_path
from retro_terminal.filesystem.virtual_fs import VirtualFileSystem
from retro_terminal.models.command import CommandResult, ResultKind
from retro_terminal.models.session import TerminalSession
from retro_terminal.tools.base import ToolError
from retro_terminal.utils.config import ServiceConfig


class CommandError(ToolError):
    """Usage or operand error; the interpreter turns it into the command's output."""

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


@dataclass
class CommandContext:
    name: str
    args: list[str]
    raw: str
    session: TerminalSession
    config: ServiceConfig
    rng: random.Random = field(default_factory=random.Random)
    now: Callable[[], datetime] = datetime.now

    @property
    def fs(self) -> VirtualFileSystem:
        return self.session.fs

    @property
    def user(self) -> str:
        return self.config.TERMINAL_USER

    def resolve(self, path: str) -> str:
        """Normalizes a path argument against the session's working directory."""
        return self.fs.normalize_path(path, self.session.cwd)

    def display(self, path: str) -> str:
        return to_display_path(path, self.config.display_home)

    def flags(self) -> str:
        """All single-dash flag letters concatenated, e.g. `-rf -v` gives `rfv`."""
        return "".join(a[1:] for a in self.args if a.startswith("-") and not a.startswith("--"))

    def operands(self) -> list[str]:
        return [a for a in self.args if not a.startswith("-")]


class OutputBuffer:
    """Collects output lines in order and remembers whether any of them was an error."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.exit_code = 0

    def write(self, text: str) -> None:
        self.lines.append(text)

    def error(self, text: str, exit_code: int = 1) -> None:
        self.lines.append(text)
        self.exit_code = exit_code

    def result(self, kind: ResultKind = ResultKind.TEXT, **kwargs) -> CommandResult:
        return CommandResult(kind=kind, output="\n".join(self.lines), exit_code=self.exit_code, **kwargs)


def usage_error(command: str, message: str) -> CommandError:
    """Builds the two-line coreutils style usage complaint."""
    return CommandError(f"{command}: {message}\nTry '{command} --help' for more information.")


CommandHandler = Callable[[CommandContext], CommandResult]
