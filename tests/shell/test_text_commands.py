#!/usr/bin/env python3
"""
Unit тесты для текстовых команд: head, tail, wc, grep, find, echo
"""

import pytest

from retro_terminal.models.command import ResultKind


@pytest.fixture
def numbered_file(session):
    """Файл из 15 пронумерованных строк"""
    session.fs.save_file("~/log.txt", "\n".join(f"line {i}" for i in range(1, 16)))
    return "log.txt"


class TestHeadTail:
    """Тесты для head и tail"""

    def test_head_default(self, run, numbered_file):
        """Тест первых 10 строк по умолчанию"""
        output = run(f"head {numbered_file}").output
        assert output.split("\n") == [f"line {i}" for i in range(1, 11)]

    @pytest.mark.parametrize("args", ["-n 3", "-n3", "-3"])
    def test_head_count_forms(self, run, numbered_file, args):
        """Тест разных форм указания числа строк"""
        assert run(f"head {args} {numbered_file}").output == "line 1\nline 2\nline 3"

    def test_tail(self, run, numbered_file):
        """Тест последних строк"""
        assert run(f"tail -n 2 {numbered_file}").output == "line 14\nline 15"
        assert run(f"tail {numbered_file}").output.split("\n")[0] == "line 6"

    def test_invalid_count(self, run, numbered_file):
        """Тест некорректного числа строк"""
        result = run(f"head -n abc {numbered_file}")
        assert result.output == "head: invalid number of lines: 'abc'"
        assert result.exit_code == 1

    def test_missing_file(self, run):
        """Тест несуществующего файла"""
        assert run("tail missing").output == "tail: cannot open 'missing' for reading: No such file or directory"

    def test_directory(self, run):
        """Тест head для директории"""
        run("mkdir docs")
        assert run("head docs").output == "head: error reading 'docs': Is a directory"

    def test_no_arguments(self, run):
        """Тест head без аргументов"""
        assert run("head").output == "head: missing file operand\nTry 'head --help' for more information."


class TestWc:
    """Тесты для wc"""

    @pytest.fixture(autouse=True)
    def wc_file(self, session):
        session.fs.save_file("~/wc.txt", "one two\nthree")

    def test_all_counts(self, run):
        """Тест строк, слов и символов"""
        assert run("wc wc.txt").output == "      2       3      13 wc.txt"

    def test_selected_counts(self, run):
        """Тест выбранных колонок"""
        assert run("wc -l wc.txt").output == "      2 wc.txt"
        assert run("wc -cw wc.txt").output == "      3      13 wc.txt"

    def test_missing(self, run):
        """Тест wc для отсутствующего файла"""
        result = run("wc nope.txt")
        assert result.output == "wc: nope.txt: No such file or directory"
        assert result.exit_code == 1


class TestGrep:
    """Тесты для grep"""

    @pytest.fixture(autouse=True)
    def grep_files(self, session):
        session.fs.save_file("~/notes.txt", "Hello world\nbye\nsay HELLO")
        session.fs.save_file("~/other.txt", "hello again")

    def test_case_insensitive_match(self, run):
        """Тест поиска без учета регистра"""
        result = run("grep hello notes.txt")
        assert result.output == "Hello world\nsay HELLO"
        assert result.exit_code == 0

    def test_line_numbers_table(self, run):
        """Тест grep -n с табличным результатом"""
        result = run("grep -n hello notes.txt")
        assert result.kind == ResultKind.TABLE
        assert result.output == "1:Hello world\n3:say HELLO"
        assert result.rows == [
            {"file": "notes.txt", "line_num": 1, "content": "Hello world"},
            {"file": "notes.txt", "line_num": 3, "content": "say HELLO"},
        ]

    def test_multiple_files_prefix(self, run):
        """Тест префикса имени файла"""
        result = run("grep again notes.txt other.txt")
        assert result.output == "other.txt:hello again"

    def test_quoted_pattern(self, run):
        """Тест паттерна в кавычках"""
        assert run("grep 'bye' notes.txt").output == "bye"

    def test_no_match(self, run):
        """Тест отсутствия совпадений"""
        result = run("grep zzz notes.txt")
        assert result.output == ""
        assert result.exit_code == 1

    def test_usage_errors(self, run):
        """Тест ошибок использования"""
        result = run("grep")
        assert result.output.startswith("Usage: grep [OPTION]... PATTERN [FILE]...")
        assert result.exit_code == 2
        result = run("grep hello")
        assert result.output == "grep: missing file operand"
        assert result.exit_code == 2

    def test_missing_file(self, run):
        """Тест grep по отсутствующему файлу"""
        result = run("grep hello missing.txt")
        assert result.output == "grep: missing.txt: No such file or directory"
        assert result.exit_code == 2


class TestFind:
    """Тесты для find"""

    def test_find_by_name(self, run):
        """Тест поиска по шаблону имени"""
        output = run("find . -name '*.txt'").output.split("\n")
        assert output == ["./about.txt", "./project.txt", "./readme.txt", "./resume.txt"]

    def test_find_iname(self, run):
        """Тест поиска без учета регистра"""
        run("touch NOTES.md")
        assert run("find -iname notes.md").output == "./NOTES.md"
        assert run("find -name notes.md").output == ""

    def test_find_directories(self, run):
        """Тест поиска директорий"""
        run("mkdir -p docs/api")
        assert run("find . -type d").output == ".\n./docs\n./docs/api"

    def test_find_in_subdirectory(self, run):
        """Тест поиска внутри поддиректории"""
        run("mkdir docs")
        run("touch docs/a.md")
        assert run("find docs").output == "docs\ndocs/a.md"
        assert run("find docs/ -name '*.md'").output == "docs/a.md"

    def test_find_keeps_typed_prefix(self, run, session):
        """Тест что пути выводятся относительно аргумента"""
        run("mkdir docs")
        run("touch docs/a.md")
        assert run("find ~/docs").output == "~/docs\n~/docs/a.md"
        session.cwd = "~/docs"
        assert run("find . -type f").output == "./a.md"

    def test_find_errors(self, run):
        """Тест ошибок find"""
        assert run("find missing").output == "find: 'missing': No such file or directory"
        assert run("find . -name").output == "find: missing argument to `-name'"
        assert run("find . -size 1").output == "find: unknown predicate `-size'"
        assert run("find . -type x").output == "find: Unknown argument to -type: x"


class TestEcho:
    """Тесты для echo"""

    def test_echo_text(self, run):
        """Тест простого вывода"""
        assert run("echo hello world").output == "hello world"
        assert run('echo "quoted text"').output == "quoted text"
        assert run("echo -n hi").output == "hi"

    def test_redirect_overwrite_and_append(self, run, session):
        """Тест перенаправления > и >>"""
        result = run("echo hello > out.txt")
        assert result.output == ""
        run("echo more >> out.txt")
        assert session.fs.get_file_content("~/out.txt") == "hello\nmore"
        run("echo reset >out.txt")
        assert session.fs.get_file_content("~/out.txt") == "reset"

    def test_redirect_without_target(self, run):
        """Тест перенаправления без файла"""
        result = run("echo hello >")
        assert result.output == "bash: syntax error near unexpected token `newline'"
        assert result.exit_code == 2

    def test_redirect_errors(self, run):
        """Тест перенаправления в директорию и в несуществующий путь"""
        run("mkdir docs")
        assert run("echo x > docs").output == "bash: docs: Is a directory"
        assert run("echo x > missing/f.txt").output == "bash: missing/f.txt: No such file or directory"
