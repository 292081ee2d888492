# Copyright (c) 2023 Anthropic
# Copyright (c) 2025 ByteDance Ltd. and/or its affiliates.
# SPDX-License-Identifier: MIT
#
# This file has been modified by ByteDance Ltd. and/or its affiliates. on 13 June 2025
#
# Original file was released under MIT License, with the full license text
# available at https://github.com/anthropics/anthropic-quickstarts/blob/main/LICENSE
#
# This modified file is released under the same license.

import asyncio
import logging
from typing import override

from retro_terminal.models.command import CommandResult
from retro_terminal.models.session import TerminalSession
from retro_terminal.shell.interpreter import CommandInterpreter
from retro_terminal.tools.base import Tool, ToolCallArguments, ToolExecResult, ToolParameter

logger = logging.getLogger(__name__)


class TerminalTool(Tool):
    """
    A tool that runs one line of input through the session's simulated shell.
    """

    def __init__(
        self,
        interpreter: CommandInterpreter,
        loading_delays_enabled: bool = True,
        model_provider: str | None = None,
    ):
        super().__init__(model_provider)
        self._interpreter = interpreter
        self._loading_delays_enabled = loading_delays_enabled

    @override
    def get_model_provider(self) -> str | None:
        return self._model_provider

    @override
    def get_name(self) -> str:
        return "terminal"

    @override
    def get_description(self) -> str:
        return """Run a command in the retro terminal of the session.
* Commands operate on an in-memory filesystem rooted at ~ (shown as /home/<user>).
* Nothing is executed on the host; `help` lists the available commands.
* Deleted files are kept under ~/.trash.
* Commands of one session run one at a time, including their loading animation.
"""

    @override
    def get_parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="command",
                type="string",
                description="The command line to run, e.g. 'ls -la' or 'cat about.txt'.",
                required=True,
            ),
        ]

    async def run(self, command: str, session: TerminalSession) -> CommandResult:
        """Executes one command holding the session lock through its loading phase."""
        async with session.lock:
            session.phase = "issued"
            try:
                result = self._interpreter.execute(command, session)
                if result.loading:
                    session.phase = "loading"
                    if self._loading_delays_enabled:
                        await asyncio.sleep(result.loading.duration_ms / 1000)
                session.phase = "complete"
                return result
            finally:
                session.phase = "awaiting_input"

    @override
    async def execute(self, arguments: ToolCallArguments) -> ToolExecResult:
        session = arguments.get("_session")
        if not isinstance(session, TerminalSession):
            return ToolExecResult(error="TerminalSession not found in arguments.", error_code=-1)

        command = arguments.get("command")
        if not isinstance(command, str):
            return ToolExecResult(error="The 'command' parameter is required.", error_code=-1)

        try:
            result = await self.run(command, session)
        except Exception as e:
            logger.error(f"Unexpected error running '{command}': {e}", exc_info=True)
            return ToolExecResult(error=f"An unexpected error occurred: {e}", error_code=1)

        data = result.model_dump(mode="json")
        data["working_directory"] = session.cwd
        return ToolExecResult(output=result.output, error_code=result.exit_code, data=data)
