#!/usr/bin/env python3
"""
Unit тесты для editor_tool.py
"""

import pytest

from retro_terminal.content.seed_files import ABOUT_TXT
from retro_terminal.models.session import TerminalSession
from retro_terminal.tools.editor_tool import FileEditorTool


class TestFileEditorTool:
    """Тесты для FileEditorTool"""

    @pytest.fixture
    def editor_tool(self):
        """Создает экземпляр FileEditorTool"""
        return FileEditorTool()

    @pytest.fixture
    def session(self):
        """Создает сессию с файлом из трех строк"""
        session = TerminalSession(session_id="editor-test")
        session.fs.save_file("~/v.txt", "one\ntwo\nthree")
        return session

    async def call(self, editor_tool, session, **arguments):
        return await editor_tool.execute({**arguments, "_session": session})

    @pytest.mark.asyncio
    async def test_open_existing(self, editor_tool, session):
        """Тест открытия существующего файла"""
        result = await self.call(editor_tool, session, command="open", path="about.txt")
        line_count = ABOUT_TXT.count("\n") + 1
        assert result.output == f'"about.txt" {line_count}L, {len(ABOUT_TXT)}B'
        assert result.data["content"] == ABOUT_TXT
        assert result.data["is_new"] is False

    @pytest.mark.asyncio
    async def test_open_new(self, editor_tool, session):
        """Тест открытия несуществующего файла"""
        result = await self.call(editor_tool, session, command="open", path="draft.md")
        assert result.output == '"draft.md" [New File]'
        assert result.data["is_new"] is True
        assert result.data["type"] == "markdown"
        assert not session.fs.file_exists("~/draft.md")

    @pytest.mark.asyncio
    async def test_open_without_path(self, editor_tool, session):
        """Тест открытия без пути"""
        result = await self.call(editor_tool, session, command="open")
        assert result.data["name"] == "[New File]"
        assert result.data["path"] == "~/untitled"

    @pytest.mark.asyncio
    async def test_open_directory(self, editor_tool, session):
        """Тест открытия директории"""
        session.fs.create_directory("~/docs")
        result = await self.call(editor_tool, session, command="open", path="docs")
        assert result.error == "The path ~/docs is a directory and this operation is not allowed on directories."
        assert result.error_code == -1

    @pytest.mark.asyncio
    async def test_save_new_and_existing(self, editor_tool, session):
        """Тест сохранения нового и существующего файла"""
        result = await self.call(editor_tool, session, command="save", path="draft.md", content="# Draft")
        assert result.output == "[New File] ~/draft.md created and saved"
        assert result.data == {"path": "~/draft.md", "is_new": True}
        assert session.fs.get_file_content("~/draft.md") == "# Draft"

        result = await self.call(editor_tool, session, command="save", path="about.txt", content="short")
        assert result.output == '"about.txt" written'
        assert session.fs.get_file_content("~/about.txt") == "short"

    @pytest.mark.asyncio
    async def test_save_relative_to_cwd(self, editor_tool, session):
        """Тест сохранения относительно cwd"""
        session.fs.create_directory("~/docs")
        session.cwd = "~/docs"
        await self.call(editor_tool, session, command="save", path="x.txt", content="x")
        assert session.fs.get_file_content("~/docs/x.txt") == "x"

    @pytest.mark.asyncio
    async def test_save_errors(self, editor_tool, session):
        """Тест ошибок сохранения"""
        result = await self.call(editor_tool, session, command="save", content="x")
        assert result.error == "E32: No file name"

        result = await self.call(editor_tool, session, command="save", path="a.txt")
        assert "content" in result.error

        result = await self.call(editor_tool, session, command="save", path="nope/x.txt", content="x")
        assert result.error == "Cannot write ~/nope/x.txt: No such file or directory"
        assert not session.fs.directory_exists("~/nope")

    @pytest.mark.asyncio
    async def test_view(self, editor_tool, session):
        """Тест просмотра в формате cat -n"""
        result = await self.call(editor_tool, session, command="view", path="v.txt")
        assert result.output == (
            "Here's the result of running `cat -n` on ~/v.txt:\n     1\tone\n     2\ttwo\n     3\tthree\n"
        )

    @pytest.mark.asyncio
    async def test_view_range(self, editor_tool, session):
        """Тест просмотра диапазона строк"""
        result = await self.call(editor_tool, session, command="view", path="v.txt", view_range=[2, -1])
        assert result.output.endswith("     2\ttwo\n     3\tthree\n")

        result = await self.call(editor_tool, session, command="view", path="v.txt", view_range=[0, 1])
        assert result.error.startswith("Invalid `view_range`")

    @pytest.mark.asyncio
    async def test_view_missing(self, editor_tool, session):
        """Тест просмотра несуществующего файла"""
        result = await self.call(editor_tool, session, command="view", path="nope.txt")
        assert result.error == "The path ~/nope.txt does not exist."

    @pytest.mark.asyncio
    async def test_str_replace(self, editor_tool, session):
        """Тест уникальной замены"""
        result = await self.call(editor_tool, session, command="str_replace", path="v.txt", old_str="two", new_str="2")
        assert result.output.startswith("The file ~/v.txt has been edited. ")
        assert session.fs.get_file_content("~/v.txt") == "one\n2\nthree"

    @pytest.mark.asyncio
    async def test_str_replace_not_unique_or_missing(self, editor_tool, session):
        """Тест неуникальной и отсутствующей строки"""
        session.fs.save_file("~/dup.txt", "a\na")
        result = await self.call(editor_tool, session, command="str_replace", path="dup.txt", old_str="a", new_str="b")
        assert "Multiple occurrences" in result.error
        assert session.fs.get_file_content("~/dup.txt") == "a\na"

        result = await self.call(editor_tool, session, command="str_replace", path="v.txt", old_str="zzz")
        assert "did not appear verbatim" in result.error

    @pytest.mark.asyncio
    async def test_insert(self, editor_tool, session):
        """Тест вставки строки"""
        await self.call(editor_tool, session, command="insert", path="v.txt", insert_line=0, new_str="zero")
        assert session.fs.get_file_content("~/v.txt") == "zero\none\ntwo\nthree"

        result = await self.call(editor_tool, session, command="insert", path="v.txt", insert_line=9, new_str="x")
        assert result.error.startswith("Invalid `insert_line` parameter: 9")

    @pytest.mark.asyncio
    async def test_insert_into_empty_file(self, editor_tool, session):
        """Тест вставки в пустой файл"""
        session.fs.save_file("~/empty.txt", "")
        await self.call(editor_tool, session, command="insert", path="empty.txt", insert_line=0, new_str="first")
        assert session.fs.get_file_content("~/empty.txt") == "first"

    @pytest.mark.asyncio
    async def test_unknown_command(self, editor_tool, session):
        """Тест неизвестной команды"""
        result = await self.call(editor_tool, session, command="delete", path="v.txt")
        assert "Unrecognized command delete" in result.error

    @pytest.mark.asyncio
    async def test_missing_session(self, editor_tool):
        """Тест вызова без сессии"""
        result = await editor_tool.execute({"command": "view", "path": "v.txt"})
        assert result.error == "TerminalSession not found in arguments."
