import asyncio
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from retro_terminal.content.seed_files import DEFAULT_FILES
from retro_terminal.filesystem.paths import HOME
from retro_terminal.filesystem.virtual_fs import VirtualFileSystem

CommandPhase = Literal["awaiting_input", "issued", "loading", "complete"]


class TerminalSession(BaseModel):
    """Stores the shell state for a single browser session."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    session_id: str = "default"
    fs: VirtualFileSystem = Field(default_factory=lambda: VirtualFileSystem(seed=DEFAULT_FILES))
    cwd: str = HOME
    history: list[str] = Field(default_factory=list)
    phase: CommandPhase = "awaiting_input"
    theme: Literal["amber", "green"] = "amber"
    sound_enabled: bool = False

    # Serializes every command touching this session's filesystem.
    _lock: asyncio.Lock = PrivateAttr(default_factory=asyncio.Lock)

    @property
    def lock(self) -> asyncio.Lock:
        return self._lock

    def reset(self) -> None:
        self.fs.reset()
        self.cwd = HOME
        self.history.clear()
        self.phase = "awaiting_input"
