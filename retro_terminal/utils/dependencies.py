"""
Configuration and dependency management for the retro terminal server.
"""

import logging
from functools import lru_cache

from retro_terminal.shell.interpreter import CommandInterpreter
from retro_terminal.tools.editor_tool import FileEditorTool
from retro_terminal.tools.file_explorer_tool import FileExplorerTool
from retro_terminal.tools.terminal_tool import TerminalTool
from retro_terminal.utils.config import ServiceConfig
from retro_terminal.utils.session_manager import SessionManager

logger = logging.getLogger(__name__)


@lru_cache
def get_base_config() -> ServiceConfig:
    """
    Retrieves the base server configuration from environment variables.

    This function is cached to avoid repeatedly reading and parsing environment
    variables and .env files.

    Returns:
        A cached instance of the ServiceConfig.
    """
    return ServiceConfig()


@lru_cache
def get_session_manager() -> SessionManager:
    """Returns the process-wide SessionManager."""
    config = get_base_config()
    logger.info("Initializing SessionManager singleton.")
    return SessionManager(display_home=config.display_home)


@lru_cache
def get_command_interpreter() -> CommandInterpreter:
    """Returns a cached CommandInterpreter bound to the base configuration."""
    logger.info("Initializing CommandInterpreter singleton.")
    return CommandInterpreter(get_base_config())


# --- Tool Providers ---


@lru_cache
def get_terminal_tool_provider() -> TerminalTool:
    """Returns a cached instance of the TerminalTool."""
    logger.info("Initializing TerminalTool singleton.")
    config = get_base_config()
    return TerminalTool(get_command_interpreter(), loading_delays_enabled=config.LOADING_DELAYS_ENABLED)


@lru_cache
def get_file_editor_tool_provider() -> FileEditorTool:
    """Returns a cached instance of the FileEditorTool."""
    logger.info("Initializing FileEditorTool singleton.")
    return FileEditorTool()


@lru_cache
def get_file_explorer_tool_provider() -> FileExplorerTool:
    """Returns a cached instance of the FileExplorerTool."""
    logger.info("Initializing FileExplorerTool singleton.")
    return FileExplorerTool()
