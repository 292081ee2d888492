# Copyright (c) 2025 ByteDance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""Base class for file editing tools working on a session's virtual filesystem."""

import logging
from abc import ABC, abstractmethod
from typing import override

from retro_terminal.filesystem.paths import get_directory
from retro_terminal.models.filesystem import FsResult
from retro_terminal.models.session import TerminalSession
from retro_terminal.tools.base import Tool, ToolCallArguments, ToolError, ToolExecResult
from retro_terminal.utils.path_utils import resolve_path

logger = logging.getLogger(__name__)


class BaseFileEditorTool(Tool, ABC):
    """Base class for file editing tools with common functionality."""

    def __init__(self, model_provider: str | None = None) -> None:
        super().__init__(model_provider)

    def _resolve_and_validate_path(
        self, path_str: str | None, session: TerminalSession, must_exist: bool = True
    ) -> str:
        """
        Resolve and validate a virtual file path.

        Args:
            path_str: The path string to resolve
            session: The current terminal session
            must_exist: Whether the file must already exist

        Returns:
            The normalized virtual path

        Raises:
            ToolError: If the path is missing, is a directory, or does not exist when required
        """
        path = resolve_path(session, path_str)
        logger.debug(f"Resolved path: {path}")

        fs = session.fs
        if fs.directory_exists(path) and not fs.file_exists(path):
            raise ToolError(f"The path {path} is a directory and this operation is not allowed on directories.")
        if must_exist and not fs.file_exists(path):
            raise ToolError(f"The path {path} does not exist.")
        return path

    def _validate_session(self, arguments: ToolCallArguments) -> TerminalSession:
        """
        Validate and extract the TerminalSession from arguments.

        Raises:
            ToolError: If the session is not found or invalid
        """
        session = arguments.get("_session")
        if not isinstance(session, TerminalSession):
            logger.error("TerminalSession not found in arguments")
            raise ToolError("TerminalSession not found in arguments.")
        return session

    def read_file(self, path: str, session: TerminalSession) -> str:
        """
        Read the content of a virtual file.

        Raises:
            ToolError: If the file does not exist
        """
        content = session.fs.get_file_content(path)
        if content is None:
            raise ToolError(f"The path {path} does not exist.")
        logger.debug(f"Read {path}, content length: {len(content)}")
        return content

    def write_file(self, path: str, content: str, session: TerminalSession) -> FsResult:
        """
        Write content to a virtual file, creating it if needed.

        Raises:
            ToolError: If the path is a directory or its parent directory does not exist
        """
        fs = session.fs
        if fs.directory_exists(path) and not fs.file_exists(path):
            raise ToolError(f"Cannot write {path}: Is a directory")
        if not fs.directory_exists(get_directory(path)):
            raise ToolError(f"Cannot write {path}: No such file or directory")
        logger.debug(f"Writing file: {path}, content length: {len(content)}")
        return fs.save_file(path, content)

    @abstractmethod
    async def _execute_operation(self, arguments: ToolCallArguments, session: TerminalSession) -> ToolExecResult:
        """
        Execute the specific operation for this tool.

        Args:
            arguments: The tool call arguments
            session: The current terminal session

        Returns:
            The result of the operation
        """
        pass

    @override
    async def execute(self, arguments: ToolCallArguments) -> ToolExecResult:
        """
        Execute the tool with common validation and error handling.

        The session lock is held for the whole operation so edits never
        interleave with a running terminal command.
        """
        try:
            session = self._validate_session(arguments)
            async with session.lock:
                return await self._execute_operation(arguments, session)

        except ToolError as e:
            logger.error(f"Tool error in {self.get_name()}: {e}")
            return ToolExecResult(error=str(e), error_code=-1)
        except Exception as e:
            logger.error(f"Unexpected error in {self.get_name()}: {e}", exc_info=True)
            return ToolExecResult(error=f"Unexpected error: {str(e)}", error_code=-1)
