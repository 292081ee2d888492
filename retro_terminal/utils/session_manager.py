import logging

from retro_terminal.content.seed_files import DEFAULT_FILES
from retro_terminal.filesystem.virtual_fs import VirtualFileSystem
from retro_terminal.models.session import TerminalSession

logger = logging.getLogger(__name__)


class SessionManager:
    """Manages terminal sessions for all connected front ends."""

    def __init__(self, display_home: str = "/home/guest") -> None:
        # Simple dict as an in-process session storage.
        # Sessions are never persisted; a restart brings back the seed files.
        self._storage: dict[str, TerminalSession] = {}
        self._display_home = display_home

    def get_session(self, session_id: str = "default") -> TerminalSession:
        """Returns or creates the session with the given id."""
        if session_id not in self._storage:
            logger.info(f"Creating terminal session '{session_id}'")
            fs = VirtualFileSystem(seed=DEFAULT_FILES, display_home=self._display_home)
            self._storage[session_id] = TerminalSession(session_id=session_id, fs=fs)
        return self._storage[session_id]

    def reset_session(self, session_id: str = "default") -> TerminalSession:
        """Restores a session to its freshly seeded state."""
        session = self.get_session(session_id)
        session.reset()
        logger.info(f"Session '{session_id}' reset")
        return session

    def session_ids(self) -> list[str]:
        return sorted(self._storage)
