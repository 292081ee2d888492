"""
Command interpreter: turns one line of input into a `CommandResult`.

The interpreter owns no state of its own. Everything a command reads or
changes lives on the `TerminalSession` passed to `execute`.
"""

import logging
import random
from collections.abc import Callable
from datetime import datetime

from retro_terminal.content.texts import COMMAND_NOT_FOUND
from retro_terminal.models.command import CommandResult, LoadingSpec, ResultKind
from retro_terminal.models.session import TerminalSession
from retro_terminal.shell.commands.file_commands import FileCommands
from retro_terminal.shell.commands.portfolio_commands import PortfolioCommands
from retro_terminal.shell.commands.system_commands import SystemCommands
from retro_terminal.shell.commands.text_commands import TextCommands
from retro_terminal.shell.constants import (
    EXACT_COMMANDS,
    LOADING_COMMANDS,
    LOADING_JITTER_MS,
    UNKNOWN_COMMAND_EXIT_CODE,
)
from retro_terminal.shell.context import CommandContext, CommandError, CommandHandler
from retro_terminal.utils.config import ServiceConfig

logger = logging.getLogger(__name__)


class CommandInterpreter:
    """Dispatches input lines to command handlers."""

    def __init__(
        self,
        config: ServiceConfig,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.config = config
        self.rng = rng or random.Random()
        self.clock = clock or datetime.now
        self._portfolio = PortfolioCommands()
        self._handlers: dict[str, CommandHandler] = {}
        for group in (FileCommands(), TextCommands(), SystemCommands(), self._portfolio):
            self._handlers.update(group.handlers())

    @property
    def commands(self) -> list[str]:
        return sorted(self._handlers)

    def execute(self, raw_line: str, session: TerminalSession) -> CommandResult:
        """
        Runs one command against the session.

        Never raises: handler failures come back as results with a non-zero
        exit code. A successful `cd` updates `session.cwd`.
        """
        line = raw_line.strip()
        if not line:
            return CommandResult()
        session.history.append(line)
        lowered = line.lower()
        logger.info(f"[{session.session_id}] $ {line}")

        if lowered in ("clear", "cls"):
            return CommandResult(kind=ResultKind.CLEAR)

        project_card = self._portfolio.match_project(lowered)
        if project_card is not None:
            return project_card

        if lowered in EXACT_COMMANDS:
            name, args = EXACT_COMMANDS[lowered]
            typed = name
        else:
            tokens = line.split()
            typed, args = tokens[0], tokens[1:]
            name = typed.lower()

        handler = self._handlers.get(name)
        if handler is None:
            logger.debug(f"Unknown command: {typed}")
            return CommandResult(
                kind=ResultKind.UNKNOWN_COMMAND,
                output=COMMAND_NOT_FOUND.format(command=typed),
                exit_code=UNKNOWN_COMMAND_EXIT_CODE,
            )

        ctx = CommandContext(
            name=name,
            args=args,
            raw=line,
            session=session,
            config=self.config,
            rng=self.rng,
            now=self.clock,
        )
        try:
            result = handler(ctx)
        except CommandError as e:
            result = CommandResult(output=e.message, exit_code=e.exit_code)
        except Exception as e:
            logger.error(f"Command '{line}' failed unexpectedly: {e}", exc_info=True)
            result = CommandResult(output=f"{name}: {e}", exit_code=1)

        if result.kind == ResultKind.CHANGE_DIRECTORY and result.cwd:
            session.cwd = result.cwd
        if name in LOADING_COMMANDS and not result.is_error:
            result.loading = self._loading_spec(name)

        logger.debug(f"[{session.session_id}] {name} -> {result.kind} (exit {result.exit_code})")
        return result

    def _loading_spec(self, name: str) -> LoadingSpec:
        text, duration_ms, has_progress_bar, is_hack = LOADING_COMMANDS[name]
        return LoadingSpec(
            text=text,
            duration_ms=duration_ms + self.rng.randint(0, LOADING_JITTER_MS),
            has_progress_bar=has_progress_bar,
            is_hack=is_hack,
        )
