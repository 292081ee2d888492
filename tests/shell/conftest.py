"""
Общие фикстуры для тестов интерпретатора команд
"""

import random
from datetime import datetime

import pytest

from retro_terminal.content.seed_files import DEFAULT_FILES
from retro_terminal.filesystem.virtual_fs import VirtualFileSystem
from retro_terminal.models.session import TerminalSession
from retro_terminal.shell.interpreter import CommandInterpreter
from retro_terminal.utils.config import ServiceConfig

TRASH_STAMP = 1700000000000
FIXED_NOW = datetime(2024, 3, 5, 14, 7, 9, 123000)


@pytest.fixture
def config():
    """Конфигурация с именами по умолчанию"""
    return ServiceConfig(TERMINAL_USER="guest", TERMINAL_HOSTNAME="retro-terminal", TERM_WIDTH=80)


@pytest.fixture
def interpreter(config):
    """Интерпретатор с фиксированными генератором и часами"""
    return CommandInterpreter(config, rng=random.Random(42), clock=lambda: FIXED_NOW)


@pytest.fixture
def session():
    """Свежая сессия с начальными файлами"""
    fs = VirtualFileSystem(seed=DEFAULT_FILES, clock=lambda: TRASH_STAMP)
    return TerminalSession(session_id="test", fs=fs)


@pytest.fixture
def run(interpreter, session):
    """Выполняет строку в сессии и возвращает CommandResult"""

    def _run(line: str):
        return interpreter.execute(line, session)

    return _run
