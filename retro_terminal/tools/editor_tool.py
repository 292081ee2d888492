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

import logging
from typing import override

from retro_terminal.filesystem.paths import get_file_name
from retro_terminal.models.command import EditorRequest
from retro_terminal.models.session import TerminalSession
from retro_terminal.shell.commands.file_commands import editor_request
from retro_terminal.tools.base import ToolCallArguments, ToolError, ToolExecResult, ToolParameter
from retro_terminal.tools.base_file_editor import BaseFileEditorTool
from retro_terminal.tools.utils.constants import SNIPPET_LINES
from retro_terminal.tools.utils.formatting_utils import maybe_truncate
from retro_terminal.utils.path_utils import resolve_path

# Настройка логирования
logger = logging.getLogger(__name__)

EditorSubCommands = [
    "open",
    "save",
    "view",
    "str_replace",
    "insert",
]


class FileEditorTool(BaseFileEditorTool):
    """The modal editor's backend: opens, saves and edits virtual files."""

    def __init__(self, model_provider: str | None = None) -> None:
        super().__init__(model_provider)

    @override
    def get_model_provider(self) -> str | None:
        return self._model_provider

    @override
    def get_name(self) -> str:
        return "file_editor"

    @override
    def get_description(self) -> str:
        return """Editor for files of the retro terminal's virtual filesystem
* `open` returns the file the editor should show; a missing file opens empty and is marked new
* `save` writes the whole buffer back; the parent directory must already exist
* `view` displays the result of applying `cat -n`, optionally limited to `view_range`
* `str_replace` replaces `old_str`, which must appear exactly once, with `new_str`
* `insert` inserts `new_str` AFTER line `insert_line` (0 inserts at the top)
"""

    @override
    def get_parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="command",
                type="string",
                description=f"The commands to run. Allowed options are: {', '.join(EditorSubCommands)}.",
                required=True,
                enum=EditorSubCommands,
            ),
            ToolParameter(
                name="path",
                type="string",
                description="Path of the file, relative to the terminal's cwd or rooted at ~. Optional for `open`.",
            ),
            ToolParameter(
                name="content",
                type="string",
                description="`save`: the full buffer to write.",
            ),
            ToolParameter(
                name="old_str",
                type="string",
                description="`str_replace`: the exact text to replace; it must occur once in the file.",
            ),
            ToolParameter(
                name="new_str",
                type="string",
                description="`str_replace`: replacement text (empty when omitted). `insert`: the lines to insert.",
            ),
            ToolParameter(
                name="insert_line",
                type="integer",
                description="`insert`: line number after which `new_str` goes; 0 puts it at the top.",
            ),
            ToolParameter(
                name="view_range",
                type="array",
                description="`view`: [first, last] line window, 1-based and inclusive; a last of -1 reads to the end.",
                items={"type": "integer"},
            ),
        ]

    @override
    async def _execute_operation(self, arguments: ToolCallArguments, session: TerminalSession) -> ToolExecResult:
        command = str(arguments.get("command"))
        logger.debug(f"Processing editor command '{command}' for path '{arguments.get('path')}'")

        match command:
            case "open":
                return self._open_handler(arguments, session)
            case "save":
                return self._save_handler(arguments, session)
            case "view":
                return self._view_handler(arguments, session)
            case "str_replace":
                return self._str_replace_handler(arguments, session)
            case "insert":
                return self._insert_handler(arguments, session)
            case _:
                logger.warning(f"Unknown editor command: {command}")
                return ToolExecResult(
                    error=f"Unrecognized command {command}. Use one of: {', '.join(EditorSubCommands)}",
                    error_code=-1,
                )

    def _open_handler(self, arguments: ToolCallArguments, session: TerminalSession) -> ToolExecResult:
        path_arg = arguments.get("path")
        if not path_arg:
            request = EditorRequest(name="[New File]", path=resolve_path(session, "untitled"), is_new=True)
        else:
            path = self._resolve_and_validate_path(path_arg, session, must_exist=False)
            request = editor_request(session.fs, path)

        if request.is_new:
            status = "[New File]"
        else:
            line_count = request.content.count("\n") + 1
            status = f"{line_count}L, {len(request.content)}B"
        return ToolExecResult(output=f'"{get_file_name(request.path)}" {status}', data=request.model_dump())

    def _save_handler(self, arguments: ToolCallArguments, session: TerminalSession) -> ToolExecResult:
        path_arg = arguments.get("path")
        if not path_arg:
            raise ToolError("E32: No file name")
        content = arguments.get("content")
        if not isinstance(content, str):
            raise ToolError("Parameter `content` is required and must be a string for command: save")

        path = self._resolve_and_validate_path(path_arg, session, must_exist=False)
        result = self.write_file(path, content, session)
        if result.is_new:
            message = f"[New File] {path} created and saved"
        else:
            message = f'"{get_file_name(path)}" written'
        logger.info(f"Editor saved {path} ({len(content)} chars)")
        return ToolExecResult(output=message, data={"path": path, "is_new": result.is_new})

    def _line_window(self, view_range: object, n_lines: int) -> tuple[int, int]:
        """Checks `view_range` against the file and returns a 1-based inclusive window."""
        if not (
            isinstance(view_range, list)
            and len(view_range) == 2
            and all(isinstance(i, int) and not isinstance(i, bool) for i in view_range)
        ):
            raise ToolError("Invalid `view_range`: expected two integers [first, last].")
        first, last = view_range
        if last == -1:
            last = n_lines
        if not 1 <= first <= n_lines:
            raise ToolError(f"Invalid `view_range` {view_range}: the file has lines 1..{n_lines}.")
        if not first <= last <= n_lines:
            raise ToolError(f"Invalid `view_range` {view_range}: the last line must lie in {first}..{n_lines}.")
        return first, last

    def _view_handler(self, arguments: ToolCallArguments, session: TerminalSession) -> ToolExecResult:
        path = self._resolve_and_validate_path(arguments.get("path"), session)
        lines = self.read_file(path, session).split("\n")
        first, last = 1, len(lines)
        view_range = arguments.get("view_range")
        if view_range is not None:
            first, last = self._line_window(view_range, len(lines))
        return ToolExecResult(output=self._make_output("\n".join(lines[first - 1 : last]), path, init_line=first))

    def _str_replace_handler(self, arguments: ToolCallArguments, session: TerminalSession) -> ToolExecResult:
        old_str = arguments.get("old_str")
        if not isinstance(old_str, str) or not old_str:
            raise ToolError("Parameter `old_str` is required and should be a non-empty string for command: str_replace")
        new_str = arguments.get("new_str") or ""
        if not isinstance(new_str, str):
            raise ToolError("Parameter `new_str` should be a string for command: str_replace")

        path = self._resolve_and_validate_path(arguments.get("path"), session)
        content = self.read_file(path, session)

        occurrences = content.count(old_str)
        if occurrences == 0:
            raise ToolError(f"No replacement was performed, old_str `{old_str}` did not appear verbatim in {path}.")
        if occurrences > 1:
            lines = [number for number, line in enumerate(content.split("\n"), start=1) if old_str in line]
            raise ToolError(
                f"No replacement was performed. Multiple occurrences of old_str `{old_str}` in lines {lines} in {path}. Please ensure it is unique"
            )

        updated = content.replace(old_str, new_str)
        self.write_file(path, updated, session)
        first_changed = content.index(old_str)
        first_line = content.count("\n", 0, first_changed)
        return self._edited(path, updated.split("\n"), first_line, new_str.count("\n") + 1)

    def _insert_handler(self, arguments: ToolCallArguments, session: TerminalSession) -> ToolExecResult:
        insert_line = arguments.get("insert_line")
        if isinstance(insert_line, str) and insert_line.lstrip("-").isdigit():
            insert_line = int(insert_line)
        if not isinstance(insert_line, int) or isinstance(insert_line, bool):
            raise ToolError("Parameter `insert_line` is required and must be an integer for command: insert")
        new_str = arguments.get("new_str")
        if not isinstance(new_str, str):
            raise ToolError("Parameter `new_str` is required for command: insert")

        path = self._resolve_and_validate_path(arguments.get("path"), session)
        content = self.read_file(path, session)
        # An empty file has no lines, so only position 0 is valid.
        lines = content.split("\n") if content else []
        if not 0 <= insert_line <= len(lines):
            raise ToolError(
                f"Invalid `insert_line` parameter: {insert_line}. Valid positions are 0..{len(lines)}; 0 inserts at the top."
            )

        inserted = new_str.split("\n")
        updated = lines[:insert_line] + inserted + lines[insert_line:]
        self.write_file(path, "\n".join(updated), session)
        return self._edited(path, updated, insert_line, len(inserted))

    def _edited(self, path: str, lines: list[str], first_changed: int, changed: int) -> ToolExecResult:
        """Success message showing the changed block (0-based `first_changed`) with a little context."""
        start = max(0, first_changed - SNIPPET_LINES)
        snippet = "\n".join(lines[start : first_changed + changed + SNIPPET_LINES])
        logger.debug(f"Edited {path}: {changed} line(s) from line {first_changed + 1}")
        return ToolExecResult(
            output=f"The file {path} has been edited. " + self._make_output(snippet, f"a snippet of {path}", start + 1)
        )

    def _make_output(self, content: str, descriptor: str, init_line: int = 1) -> str:
        """Numbers lines the way `cat -n` does, starting at `init_line`."""
        lines = maybe_truncate(content).expandtabs().split("\n")
        numbered = "\n".join(f"{number:6}\t{line}" for number, line in enumerate(lines, start=init_line))
        return f"Here's the result of running `cat -n` on {descriptor}:\n{numbered}\n"
