import logging
from collections import deque
from typing import override

from retro_terminal.filesystem.paths import is_within
from retro_terminal.models.session import TerminalSession
from retro_terminal.utils.path_utils import resolve_path

from .base import Tool, ToolCallArguments, ToolError, ToolExecResult, ToolParameter
from .utils.constants import DEFAULT_FILE_LIMIT, MAX_BYTE_SIZE, MAX_FILE_LIMIT, MAX_SEARCH_RESULTS
from .utils.file_utils import get_file_info, should_ignore_path
from .utils.formatting_utils import format_file_list, format_search_results, format_tree
from .utils.search_utils import search_virtual_files

logger = logging.getLogger(__name__)

FileExplorerSubCommands = ["list", "tree", "search"]


class FileExplorerTool(Tool):
    """
    Read-only views of a session's virtual filesystem for the file explorer panel.

    - 'list': direct children of a directory, or the whole subtree breadth-first
    - 'tree': the depth-first flattening the sidebar renders
    - 'search': case-insensitive content search with one line of context

    Hidden entries, the trash among them, are skipped by every subcommand.
    """

    def __init__(self, model_provider: str | None = None) -> None:
        super().__init__(model_provider)

    @override
    def get_model_provider(self) -> str | None:
        return self._model_provider

    @override
    def get_name(self) -> str:
        return "file_explorer"

    @override
    def get_description(self) -> str:
        return """Explore the retro terminal's virtual filesystem.
- 'list': Files and directories of a directory with sizes (optionally recursive)
- 'tree': Depth-annotated listing of the whole tree under ~
- 'search': Search file contents; `file_pattern` like '*.txt' narrows the files searched"""

    @override
    def get_parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="subcommand",
                type="string",
                description=f"The command to run. Allowed options are: {', '.join(FileExplorerSubCommands)}.",
                required=True,
                enum=FileExplorerSubCommands,
            ),
            ToolParameter(
                name="path",
                type="string",
                description="Directory for the command, relative to the terminal's cwd. Defaults to the cwd.",
            ),
            ToolParameter(
                name="recursive",
                type="boolean",
                description="Whether 'list' descends into subdirectories.",
            ),
            ToolParameter(
                name="limit",
                type="integer",
                description=f"Maximum number of entries for 'list' and 'tree'. Default: {DEFAULT_FILE_LIMIT}",
            ),
            ToolParameter(
                name="query",
                type="string",
                description="Search query for the 'search' command.",
            ),
            ToolParameter(
                name="file_pattern",
                type="string",
                description="File pattern to search in (e.g., '*.txt'). Default: all files.",
            ),
        ]

    @override
    async def execute(self, arguments: ToolCallArguments) -> ToolExecResult:
        session = arguments.get("_session")
        if not isinstance(session, TerminalSession):
            return ToolExecResult(
                error="TerminalSession not found in arguments. This is an internal server error.",
                error_code=-1,
            )

        subcommand = arguments.get("subcommand")
        if not isinstance(subcommand, str):
            return ToolExecResult(error="Subcommand must be a string.", error_code=-1)

        try:
            async with session.lock:
                match subcommand:
                    case "list":
                        return self._list_handler(session, arguments)
                    case "tree":
                        return self._tree_handler(session, arguments)
                    case "search":
                        return self._search_handler(session, arguments)
                    case _:
                        return ToolExecResult(error=f"Unknown subcommand: {subcommand}", error_code=-1)
        except ToolError as e:
            return ToolExecResult(error=str(e), error_code=-1)

    def _get_limit(self, args: ToolCallArguments) -> int:
        limit = args.get("limit", DEFAULT_FILE_LIMIT)
        if not isinstance(limit, int) or isinstance(limit, bool) or limit <= 0:
            return DEFAULT_FILE_LIMIT
        return min(limit, MAX_FILE_LIMIT)

    def _resolve_directory(self, session: TerminalSession, args: ToolCallArguments) -> str:
        directory = resolve_path(session, args.get("path"), default=session.cwd)
        if not session.fs.directory_exists(directory) or session.fs.file_exists(directory):
            raise ToolError(f"'{directory}' is not a directory.")
        return directory

    def _list_handler(self, session: TerminalSession, args: ToolCallArguments) -> ToolExecResult:
        directory = self._resolve_directory(session, args)
        limit = self._get_limit(args)
        recursive = args.get("recursive") is True

        results: list[dict] = []
        reached_limit = False
        queue = deque([directory])
        while queue and not reached_limit:
            current = queue.popleft()
            for entry in session.fs.list_files(current):
                if should_ignore_path(entry.name):
                    continue
                if len(results) >= limit:
                    reached_limit = True
                    break
                results.append(get_file_info(session.fs, entry))
                if recursive and entry.is_directory:
                    queue.append(entry.path)

        output = format_file_list(results)
        if reached_limit:
            output += f"\n\n... more entries in {directory} (limit of {limit} reached)"
        return ToolExecResult(output=output, data={"directory": directory, "files": results})

    def _tree_handler(self, session: TerminalSession, args: ToolCallArguments) -> ToolExecResult:
        directory = self._resolve_directory(session, args)
        limit = self._get_limit(args)

        tree_data: list[dict] = []
        hidden_roots: list[str] = []
        base_level = None
        for entry in session.fs.get_file_structure():
            if not is_within(entry.path, directory):
                continue
            if any(is_within(entry.path, hidden) for hidden in hidden_roots):
                continue
            if entry.path != directory and should_ignore_path(entry.name):
                hidden_roots.append(entry.path)
                continue
            if base_level is None:
                base_level = entry.level
            if len(tree_data) >= limit:
                break
            tree_data.append(
                {
                    "name": entry.name.rstrip("/"),
                    "is_dir": entry.is_directory,
                    "depth": entry.level - base_level,
                    "path": entry.path,
                }
            )

        output = format_tree(tree_data, directory)
        return ToolExecResult(output=output, data={"root": directory, "tree": tree_data})

    def _search_handler(self, session: TerminalSession, args: ToolCallArguments) -> ToolExecResult:
        query = args.get("query")
        if not isinstance(query, str) or not query.strip():
            raise ToolError("Search query is required and must be a non-empty string.")
        file_pattern = args.get("file_pattern")
        if file_pattern is not None and not isinstance(file_pattern, str):
            raise ToolError("File pattern must be a string.")

        directory = self._resolve_directory(session, args)
        results = search_virtual_files(session.fs, directory, query, file_pattern, MAX_SEARCH_RESULTS)
        logger.debug(f"Search for '{query}' in {directory} found {len(results)} matches")
        return ToolExecResult(output=format_search_results(results, MAX_SEARCH_RESULTS, MAX_BYTE_SIZE))
