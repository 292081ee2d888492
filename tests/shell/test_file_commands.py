#!/usr/bin/env python3
"""
Unit тесты для файловых команд: ls, cd, pwd, cat, touch, mkdir, rm, mv, cp, nvim
"""

from retro_terminal.content.seed_files import ABOUT_TXT, README_TXT
from retro_terminal.models.command import ResultKind
from retro_terminal.shell.commands.file_commands import format_size

TRASH = "~/.trash/1700000000000"


class TestLs:
    """Тесты для ls"""

    def test_ls_home(self, run):
        """Тест списка домашней директории"""
        result = run("ls")
        assert result.kind == ResultKind.TABLE
        assert [row["name"] for row in result.rows] == ["about.txt", "project.txt", "readme.txt", "resume.txt"]
        assert "about.txt" in result.output
        assert result.exit_code == 0

    def test_ls_directories_first(self, run):
        """Тест что директории идут первыми"""
        run("mkdir -p notes/2024")
        result = run("ls")
        assert result.rows[0]["name"] == "notes"
        assert result.rows[0]["is_directory"] is True
        assert [row["name"] for row in run("ls notes").rows] == ["2024"]

    def test_ls_missing(self, run):
        """Тест несуществующей директории"""
        result = run("ls missing")
        assert result.output == "ls: cannot access 'missing': No such file or directory"
        assert result.exit_code == 2

    def test_ls_file_operand(self, run):
        """Тест ls для файла"""
        assert run("ls about.txt").output == "about.txt"

    def test_ls_empty_directory(self, run):
        """Тест пустой директории"""
        run("mkdir empty")
        result = run("ls empty")
        assert result.output == ""
        assert result.rows == []

    def test_ls_hidden_only_with_a(self, run):
        """Тест скрытой корзины"""
        run("rm about.txt")
        assert ".trash" not in [row["name"] for row in run("ls").rows]
        assert ".trash" in [row["name"] for row in run("ls -a").rows]

    def test_ls_long_format(self, run):
        """Тест длинного формата"""
        result = run("ls -l")
        lines = result.output.split("\n")
        assert lines[0].startswith("total ")
        assert lines[1] == f"-rw-r--r-- 1 guest guest {len(ABOUT_TXT):>5} Mar  5 14:07 about.txt"

    def test_ls_long_directory_entry(self, run):
        """Тест строки директории в длинном формате"""
        run("mkdir docs")
        lines = run("ls -la").output.split("\n")
        assert lines[1] == "drwxr-xr-x 2 guest guest  4096 Mar  5 14:07 docs"

    def test_format_size_human(self):
        """Тест человекочитаемых размеров"""
        assert format_size(512, human=True) == "512"
        assert format_size(2048, human=True) == "2.0K"
        assert format_size(3 * 1024 * 1024, human=True) == "3.0M"
        assert format_size(2048) == "2048"


class TestNavigation:
    """Тесты для cd и pwd"""

    def test_cd_and_pwd(self, run, session):
        """Тест перехода в директорию"""
        run("mkdir notes")
        result = run("cd notes")
        assert result.kind == ResultKind.CHANGE_DIRECTORY
        assert result.cwd == "~/notes"
        assert session.cwd == "~/notes"
        assert run("pwd").output == "/home/guest/notes"

    def test_cd_parent_and_home(self, run, session):
        """Тест cd .. и cd без аргументов"""
        run("mkdir -p a/b")
        run("cd a/b")
        run("cd ..")
        assert session.cwd == "~/a"
        run("cd")
        assert session.cwd == "~"
        run("cd a")
        run("cd -")
        assert session.cwd == "~"

    def test_cd_absolute_home(self, run, session):
        """Тест абсолютного пути внутри домашней директории"""
        run("mkdir notes")
        run("cd /home/guest/notes")
        assert session.cwd == "~/notes"

    def test_cd_missing(self, run, session):
        """Тест перехода в несуществующую директорию"""
        result = run("cd nonexistent")
        assert result.output == "bash: cd: nonexistent: No such file or directory"
        assert result.exit_code == 1
        assert session.cwd == "~"

    def test_cd_into_file(self, run, session):
        """Тест перехода в файл"""
        result = run("cd about.txt")
        assert result.output == "bash: cd: about.txt: Not a directory"
        assert session.cwd == "~"

    def test_pwd_home(self, run):
        """Тест pwd в домашней директории"""
        assert run("pwd").output == "/home/guest"


class TestCat:
    """Тесты для cat"""

    def test_cat_file(self, run):
        """Тест вывода файла"""
        assert run("cat about.txt").output == ABOUT_TXT

    def test_cat_multiple_with_error(self, run):
        """Тест что ошибки и содержимое идут по порядку"""
        result = run("cat nope.txt readme.txt")
        assert result.output == "cat: nope.txt: No such file or directory\n" + README_TXT
        assert result.exit_code == 1

    def test_cat_directory(self, run):
        """Тест cat для директории"""
        run("mkdir docs")
        assert run("cat docs").output == "cat: docs: Is a directory"

    def test_cat_without_operand(self, run):
        """Тест cat без аргументов"""
        result = run("cat")
        assert result.output == "cat: missing file operand\nTry 'cat --help' for more information."
        assert result.is_error


class TestCreate:
    """Тесты для touch и mkdir"""

    def test_touch_creates_empty_file(self, run, session):
        """Тест создания пустого файла"""
        assert run("touch new.txt").exit_code == 0
        assert session.fs.get_file_content("~/new.txt") == ""

    def test_touch_existing_keeps_content(self, run, session):
        """Тест touch существующего файла"""
        run("touch about.txt")
        assert session.fs.get_file_content("~/about.txt") == ABOUT_TXT

    def test_touch_missing_parent(self, run):
        """Тест touch в несуществующей директории"""
        result = run("touch missing/x.txt")
        assert result.output == "touch: cannot touch 'missing/x.txt': No such file or directory"

    def test_mkdir_existing(self, run):
        """Тест mkdir существующей директории"""
        run("mkdir docs")
        assert run("mkdir docs").output == "mkdir: cannot create directory 'docs': File exists"
        assert run("mkdir about.txt").output == "mkdir: cannot create directory 'about.txt': File exists"
        assert run("mkdir -p docs").exit_code == 0

    def test_mkdir_requires_parent(self, run, session):
        """Тест mkdir без -p"""
        result = run("mkdir a/b")
        assert result.output == "mkdir: cannot create directory 'a/b': No such file or directory"
        assert not session.fs.directory_exists("~/a")

    def test_mkdir_parents_verbose(self, run, session):
        """Тест mkdir -pv"""
        result = run("mkdir -pv a/b/c")
        assert result.output == "mkdir: created directory 'a/b/c'"
        assert session.fs.directory_exists("~/a/b")


class TestRemove:
    """Тесты для rm"""

    def test_rm_file_goes_to_trash(self, run, session):
        """Тест удаления файла в корзину"""
        assert run("rm about.txt").exit_code == 0
        assert not session.fs.file_exists("~/about.txt")
        assert session.fs.get_file_content(f"{TRASH}/about.txt") == ABOUT_TXT

    def test_rm_directory_requires_r(self, run):
        """Тест rm директории без -r"""
        run("mkdir notes")
        assert run("rm notes").output == "rm: cannot remove 'notes': Is a directory"

    def test_rm_recursive(self, run, session):
        """Тест rm -r с содержимым"""
        run("mkdir -p notes/2024")
        run("touch notes/2024/jan.txt")
        result = run("rm -rv notes")
        assert result.output == "removed directory 'notes'"
        assert not session.fs.directory_exists("~/notes")
        assert session.fs.file_exists(f"{TRASH}/notes/2024/jan.txt")

    def test_rm_missing(self, run):
        """Тест удаления несуществующего файла"""
        assert run("rm nope").output == "rm: cannot remove 'nope': No such file or directory"
        result = run("rm -f nope")
        assert result.exit_code == 0
        assert result.output == ""

    def test_rm_home_refused(self, run, session):
        """Тест отказа удалять домашнюю директорию"""
        result = run("rm -r ~")
        assert result.output == "rm: cannot remove '~': Refusing to remove root directory"
        assert session.fs.file_exists("~/about.txt")

    def test_rm_verbose_file(self, run):
        """Тест rm -v"""
        assert run("rm -v about.txt").output == "removed 'about.txt'"


class TestTransfer:
    """Тесты для mv и cp"""

    def test_mv_rename(self, run, session):
        """Тест переименования"""
        assert run("mv about.txt bio.txt").exit_code == 0
        assert session.fs.get_file_content("~/bio.txt") == ABOUT_TXT
        assert not session.fs.file_exists("~/about.txt")

    def test_mv_into_directory(self, run, session):
        """Тест перемещения в директорию"""
        run("mkdir notes")
        assert run("mv -v about.txt notes").output == "renamed 'about.txt' -> 'notes'"
        assert session.fs.file_exists("~/notes/about.txt")

    def test_mv_directory(self, run, session):
        """Тест перемещения директории"""
        run("mkdir -p src/lib")
        run("touch src/lib/util.py")
        run("mv src app")
        assert session.fs.file_exists("~/app/lib/util.py")
        assert not session.fs.directory_exists("~/src")

    def test_mv_errors(self, run):
        """Тест ошибок mv"""
        assert run("mv missing x").output == "mv: cannot move 'missing' to 'x': No such file or directory"
        assert run("mv readme.txt resume.txt").output == "mv: cannot move 'readme.txt' to 'resume.txt': File exists"
        assert run("mv").output == "mv: missing file operand\nTry 'mv --help' for more information."
        assert run("mv about.txt").output == (
            "mv: missing destination file operand after 'about.txt'\nTry 'mv --help' for more information."
        )

    def test_cp_file(self, run, session):
        """Тест копирования файла"""
        assert run("cp -v readme.txt copy.txt").output == "'readme.txt' -> 'copy.txt'"
        assert session.fs.get_file_content("~/copy.txt") == README_TXT
        assert session.fs.file_exists("~/readme.txt")

    def test_cp_directory_needs_r(self, run, session):
        """Тест копирования директории"""
        run("mkdir notes")
        run("touch notes/a.txt")
        assert run("cp notes backup").output == "cp: -r not specified; omitting directory 'notes'"
        assert run("cp -r notes backup").exit_code == 0
        assert session.fs.file_exists("~/backup/a.txt")
        assert session.fs.file_exists("~/notes/a.txt")


class TestEditorCommands:
    """Тесты для nvim/vim/nano/edit"""

    def test_open_existing(self, run):
        """Тест открытия существующего файла"""
        result = run("nvim about.txt")
        assert result.kind == ResultKind.EDITOR
        assert result.editor.content == ABOUT_TXT
        assert result.editor.is_new is False
        assert result.editor.path == "~/about.txt"

    def test_open_new(self, run, session):
        """Тест открытия нового файла"""
        result = run("vim notes.md")
        assert result.editor.is_new is True
        assert result.editor.type == "markdown"
        assert result.editor.content == ""
        assert not session.fs.file_exists("~/notes.md")

    def test_open_without_argument(self, run):
        """Тест редактора без аргумента"""
        result = run("nano")
        assert result.editor.name == "[New File]"
        assert result.editor.path == "~/untitled"

    def test_open_directory(self, run):
        """Тест открытия директории"""
        run("mkdir notes")
        result = run("edit notes")
        assert result.output == "edit: 'notes' is a directory"
        assert result.editor is None


class TestFileDirectoryExclusivity:
    """Тесты что файл не может стать директорией"""

    @staticmethod
    def _assert_about_is_only_a_file(session):
        assert session.fs.file_exists("~/about.txt")
        assert not session.fs.directory_exists("~/about.txt")

    def test_mkdir_below_file(self, run, session):
        """Тест mkdir внутри файла"""
        result = run("mkdir -p about.txt/x")
        assert result.output == "mkdir: cannot create directory 'about.txt/x': Not a directory"
        assert result.exit_code == 1
        assert run("mkdir about.txt/x").output == "mkdir: cannot create directory 'about.txt/x': Not a directory"
        self._assert_about_is_only_a_file(session)

    def test_mv_below_file(self, run, session):
        """Тест mv внутрь файла"""
        result = run("mv readme.txt about.txt/x")
        assert result.output == "mv: cannot move 'readme.txt' to 'about.txt/x': Not a directory"
        assert session.fs.file_exists("~/readme.txt")
        self._assert_about_is_only_a_file(session)

    def test_cp_below_file(self, run, session):
        """Тест cp внутрь файла"""
        result = run("cp readme.txt about.txt/x")
        assert result.output == "cp: cannot copy 'readme.txt' to 'about.txt/x': Not a directory"
        assert not session.fs.file_exists("~/about.txt/x")
        self._assert_about_is_only_a_file(session)

    def test_directory_transfer_below_file(self, run, session):
        """Тест переноса директории внутрь файла"""
        run("mkdir notes")
        assert run("mv notes about.txt/notes").output == (
            "mv: cannot move 'notes' to 'about.txt/notes': Not a directory"
        )
        assert run("cp -r notes about.txt/notes").output == (
            "cp: cannot copy 'notes' to 'about.txt/notes': Not a directory"
        )
        assert session.fs.directory_exists("~/notes")
        self._assert_about_is_only_a_file(session)
