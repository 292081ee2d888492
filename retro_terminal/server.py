"""
MCP server definition for the retro terminal.
"""

import logging
from typing import Any, List, Optional

from fastapi.middleware.cors import CORSMiddleware
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from mcp.server.fastmcp import Context, FastMCP

from retro_terminal.content import get_all_texts
from retro_terminal.tools.base import ToolExecResult
from retro_terminal.utils.config import ServiceConfig
from retro_terminal.utils.dependencies import (
    get_base_config,
    get_file_editor_tool_provider,
    get_file_explorer_tool_provider,
    get_session_manager,
    get_terminal_tool_provider,
)

# Get a module-level logger
logger = logging.getLogger(__name__)


class CustomFastMCP(FastMCP):
    """Custom FastMCP server with CORS middleware for the browser front end."""

    def _add_cors_middleware(self, app: Starlette) -> Starlette:
        """A helper to add CORS middleware to a Starlette app."""
        app.user_middleware.insert(
            0,
            Middleware(
                CORSMiddleware,
                allow_origin_regex=".*",  # Allow any origin
                allow_credentials=True,
                allow_methods=["*"],
                allow_headers=["*"],
            ),
        )
        app.middleware_stack = app.build_middleware_stack()
        return app

    def sse_app(self, mount_path: str | None = None) -> Starlette:
        """Overrides the default sse_app to inject CORS middleware."""
        app = super().sse_app(mount_path)
        return self._add_cors_middleware(app)

    def streamable_http_app(self) -> Starlette:
        """Overrides the default streamable_http_app to inject CORS middleware."""
        app = super().streamable_http_app()
        return self._add_cors_middleware(app)


def build_server(config: ServiceConfig) -> CustomFastMCP:
    """Build and configure the FastMCP server instance.

    Args:
        config: The server's service configuration.

    Returns:
        A configured CustomFastMCP instance.
    """
    logger.info(
        "Initializing FastMCP server",
        extra={"host": config.MCP_HOST, "port": config.MCP_PORT},
    )
    return CustomFastMCP(
        "retro-terminal",
        host=config.MCP_HOST,
        port=config.MCP_PORT,
    )


def to_response(result: ToolExecResult) -> dict[str, Any]:
    """Maps a tool result onto the status dictionary every tool returns."""
    if result.error:
        return {"status": "error", "error": result.error, "exit_code": result.error_code}
    payload = result.data if result.data is not None else result.output
    return {"status": "success", "result": payload, "exit_code": result.error_code}


# Get the base configuration for server initialization.
# This is also imported by main.py to run the server.
server_config = get_base_config()
mcp_app = build_server(server_config)


# --- Resources and Prompts ---
@mcp_app.resource("terminal://welcome", mime_type="text/plain")
def welcome_text() -> str:
    """ASCII banner and the hint shown before the first command."""
    return get_all_texts()["welcome"]


@mcp_app.prompt(title="Retro Terminal Guide")
def terminal_guide() -> str:
    """Explains to an agent how to drive the terminal tools."""
    texts = get_all_texts()
    return (
        "You are operating a simulated retro terminal through the `terminal` tool.\n"
        "Everything happens in an in-memory filesystem; nothing touches the host.\n\n"
        f"{texts['help']}\n\n{texts['about']}"
    )


@mcp_app.custom_route("/health", methods=["GET"])
async def health(request: Request) -> JSONResponse:
    """Liveness probe for the browser front end."""
    return JSONResponse({"status": "ok", "sessions": len(get_session_manager().session_ids())})


# --- Tool Definitions ---


@mcp_app.tool(name="terminal")
async def terminal_tool(
    context: Context,
    command: str,
    session_id: str = "default",
) -> dict[str, Any]:
    """
    Runs one command line in the session's retro terminal.

    Args:
        command: The command line, e.g. 'ls -la' or 'mkdir -p notes/2024'.
        session_id: Identifies the terminal session; each one has its own filesystem.

    Returns:
        A dictionary with the structured command result (kind, output, rows, exit_code, ...).
    """
    logger.info(f"Executing terminal command in session '{session_id}': {command}")
    try:
        session = get_session_manager().get_session(session_id)
        tool = get_terminal_tool_provider()
        result = await tool.execute({"command": command, "_session": session})
        return to_response(result)

    except Exception as e:
        logger.error(f"Error executing terminal command: {e}", exc_info=True)
        return {"status": "error", "error": str(e), "exit_code": 1}


# --- File Editor (Feature Flagged) ---
if server_config.FEATURE_EDITOR_ENABLED:
    logger.info("Editor feature is enabled. Registering 'file_editor' tool.")

    @mcp_app.tool(name="file_editor")
    async def file_editor_tool(
        context: Context,
        command: str,
        path: Optional[str] = None,
        content: Optional[str] = None,
        old_str: Optional[str] = None,
        new_str: Optional[str] = None,
        insert_line: Optional[int] = None,
        view_range: Optional[List[int]] = None,
        session_id: str = "default",
    ) -> dict[str, Any]:
        """
        The editor behind nvim/vim/nano/edit (open, save, view, str_replace, insert).

        Args:
            command: The operation. Can be 'open', 'save', 'view', 'str_replace', or 'insert'.
            path: The file path, relative to the terminal's cwd or rooted at ~.
            content: The full buffer for a 'save' operation.
            old_str: The string to search for in a 'str_replace' operation. Must be unique.
            new_str: The replacement string for 'str_replace' or the content for 'insert'.
            insert_line: The line number for an 'insert' operation (inserts AFTER this line).
            view_range: The line range to view (e.g., [10, 25]).
            session_id: Identifies the terminal session.

        Returns:
            A dictionary containing the result of the operation.
        """
        logger.info(f"Executing file_editor command '{command}' on path '{path}'")
        try:
            session = get_session_manager().get_session(session_id)
            editor_tool = get_file_editor_tool_provider()
            args = {
                "command": command,
                "path": path,
                "content": content,
                "old_str": old_str,
                "new_str": new_str,
                "insert_line": insert_line,
                "view_range": view_range,
            }
            # Filter out None values so we don't pass them to the tool
            args = {k: v for k, v in args.items() if v is not None}
            args["_session"] = session

            result = await editor_tool.execute(args)
            return to_response(result)

        except Exception as e:
            logger.error(f"Error executing file_editor command: {e}", exc_info=True)
            return {"status": "error", "error": str(e), "exit_code": 1}
else:
    logger.warning("Editor feature is disabled. The 'file_editor' tool will not be available.")


@mcp_app.tool(name="file_explorer")
async def file_explorer_tool(
    context: Context,
    subcommand: str,
    path: Optional[str] = None,
    recursive: Optional[bool] = None,
    limit: Optional[int] = None,
    query: Optional[str] = None,
    file_pattern: Optional[str] = None,
    session_id: str = "default",
) -> dict[str, Any]:
    """
    Read-only views of the virtual filesystem for the file explorer panel.

    Args:
        subcommand: The view to produce. Can be 'list', 'tree', or 'search'.
        path: Directory to inspect, relative to the terminal's cwd. Defaults to the cwd.
        recursive: For 'list', whether to descend into subdirectories.
        limit: Maximum number of entries for 'list' and 'tree'.
        query: Search query for 'search'.
        file_pattern: File pattern for 'search' (e.g., '*.txt').
        session_id: Identifies the terminal session.

    Returns:
        A dictionary containing the JSON formatted view.
    """
    logger.info(f"Executing file_explorer subcommand '{subcommand}' on path '{path}'")
    try:
        session = get_session_manager().get_session(session_id)
        tool = get_file_explorer_tool_provider()
        args = {
            "subcommand": subcommand,
            "path": path,
            "recursive": recursive,
            "limit": limit,
            "query": query,
            "file_pattern": file_pattern,
        }
        args = {k: v for k, v in args.items() if v is not None}
        args["_session"] = session

        result = await tool.execute(args)
        return to_response(result)

    except Exception as e:
        logger.error(f"Error executing file_explorer subcommand: {e}", exc_info=True)
        return {"status": "error", "error": str(e), "exit_code": 1}


@mcp_app.tool(name="reset_session")
async def reset_session_tool(
    context: Context,
    session_id: str = "default",
) -> dict[str, Any]:
    """
    Restores a session's filesystem, cwd and history to the initial state.

    Returns:
        A dictionary with a confirmation message.
    """
    logger.info(f"Resetting session '{session_id}'")
    try:
        manager = get_session_manager()
        session = manager.get_session(session_id)
        async with session.lock:
            manager.reset_session(session_id)
        return {"status": "success", "result": f"Session '{session_id}' reset", "exit_code": 0}

    except Exception as e:
        logger.error(f"Error resetting session: {e}", exc_info=True)
        return {"status": "error", "error": str(e), "exit_code": 1}
