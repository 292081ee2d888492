#!/usr/bin/env python3
"""
Unit тесты для session_manager.py
"""

import pytest

from retro_terminal.tools.base import ToolError
from retro_terminal.utils.path_utils import resolve_path
from retro_terminal.utils.session_manager import SessionManager


class TestSessionManager:
    """Тесты для SessionManager"""

    @pytest.fixture
    def manager(self):
        """Создает менеджер сессий"""
        return SessionManager()

    def test_get_session_is_cached(self, manager):
        """Тест что сессия создается один раз"""
        first = manager.get_session("a")
        assert manager.get_session("a") is first
        assert first.fs.file_exists("~/about.txt")

    def test_sessions_are_isolated(self, manager):
        """Тест независимых файловых систем"""
        manager.get_session("a").fs.save_file("~/only-a.txt", "x")
        assert not manager.get_session("b").fs.file_exists("~/only-a.txt")
        assert manager.session_ids() == ["a", "b"]

    def test_reset_session(self, manager):
        """Тест сброса сессии"""
        session = manager.get_session("a")
        session.fs.create_directory("~/docs")
        session.cwd = "~/docs"
        session.history.append("mkdir docs")
        manager.reset_session("a")
        assert session.cwd == "~"
        assert session.history == []
        assert not session.fs.directory_exists("~/docs")

    def test_display_home(self):
        """Тест пользовательской домашней директории"""
        session = SessionManager(display_home="/home/alice").get_session()
        assert session.fs.normalize_path("/home/alice/x") == "~/x"


class TestResolvePath:
    """Тесты для resolve_path"""

    def test_resolve_against_cwd(self):
        """Тест разрешения относительно cwd"""
        session = SessionManager().get_session()
        session.fs.create_directory("~/docs")
        session.cwd = "~/docs"
        assert resolve_path(session, "a.txt") == "~/docs/a.txt"
        assert resolve_path(session, None, default=session.cwd) == "~/docs"

    def test_missing_path(self):
        """Тест пустого пути без значения по умолчанию"""
        session = SessionManager().get_session()
        with pytest.raises(ToolError, match="The 'path' parameter is required."):
            resolve_path(session, "  ")
