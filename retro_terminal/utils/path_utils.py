from retro_terminal.models.session import TerminalSession
from retro_terminal.tools.base import ToolError


def resolve_path(session: TerminalSession, path_str: str | None, default: str | None = None) -> str:
    """
    Resolves a user-provided path against the session's working directory.

    Args:
        session: The session whose virtual filesystem and cwd are used.
        path_str: The path string provided by the caller.
        default: Used when `path_str` is empty; when it is None an empty path is an error.

    Returns:
        The normalized virtual path.

    Raises:
        ToolError: If the path is missing or not a string.
    """
    if path_str is None or (isinstance(path_str, str) and not path_str.strip()):
        if default is None:
            raise ToolError("The 'path' parameter is required.")
        path_str = default
    if not isinstance(path_str, str):
        raise ToolError("Path must be a string.")
    return session.fs.normalize_path(path_str, session.cwd)
