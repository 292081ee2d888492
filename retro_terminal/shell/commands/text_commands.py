"""Text processing commands: head, tail, wc, grep, find and echo."""

import fnmatch
import re

from retro_terminal.filesystem.paths import get_directory
from retro_terminal.models.command import CommandResult, ResultKind
from retro_terminal.shell.constants import DEFAULT_LINE_COUNT
from retro_terminal.shell.context import (
    CommandContext,
    CommandError,
    CommandHandler,
    OutputBuffer,
    usage_error,
)

WC_COLUMNS = "lwc"


def _strip_quotes(text: str) -> str:
    return re.sub(r"^[\"']|[\"']$", "", text)


class TextCommands:
    """Commands that read file contents or write text into files."""

    def handlers(self) -> dict[str, CommandHandler]:
        return {
            "head": self._head_handler,
            "tail": self._tail_handler,
            "wc": self._wc_handler,
            "grep": self._grep_handler,
            "find": self._find_handler,
            "echo": self._echo_handler,
        }

    # --- head / tail ---

    def _parse_count(self, command: str, value: str) -> int:
        try:
            return int(value)
        except ValueError:
            raise CommandError(f"{command}: invalid number of lines: '{value}'")

    def _parse_line_args(self, ctx: CommandContext) -> tuple[int, str]:
        """Accepts `-n N FILE`, `-nN FILE`, `-N FILE` and plain `FILE`."""
        if not ctx.args:
            raise usage_error(ctx.name, "missing file operand")

        count = DEFAULT_LINE_COUNT
        rest = list(ctx.args)
        first = rest[0]
        if first == "-n":
            if len(rest) < 2:
                raise usage_error(ctx.name, "option requires an argument -- 'n'")
            count = self._parse_count(ctx.name, rest[1])
            rest = rest[2:]
        elif first.startswith("-n"):
            count = self._parse_count(ctx.name, first[2:])
            rest = rest[1:]
        elif re.fullmatch(r"-\d+", first):
            count = int(first[1:])
            rest = rest[1:]

        if not rest:
            raise CommandError(f"{ctx.name}: missing file operand")
        return count, rest[0]

    def _slice_handler(self, ctx: CommandContext, from_end: bool) -> CommandResult:
        count, file_arg = self._parse_line_args(ctx)
        path = ctx.resolve(file_arg)
        if ctx.fs.directory_exists(path) and not ctx.fs.file_exists(path):
            raise CommandError(f"{ctx.name}: error reading '{file_arg}': Is a directory")

        content = ctx.fs.get_tail(path, count) if from_end else ctx.fs.get_head(path, count)
        if content is None:
            raise CommandError(f"{ctx.name}: cannot open '{file_arg}' for reading: No such file or directory")
        return CommandResult(output=content)

    def _head_handler(self, ctx: CommandContext) -> CommandResult:
        return self._slice_handler(ctx, from_end=False)

    def _tail_handler(self, ctx: CommandContext) -> CommandResult:
        return self._slice_handler(ctx, from_end=True)

    # --- wc ---

    def _wc_handler(self, ctx: CommandContext) -> CommandResult:
        if not ctx.args:
            raise usage_error("wc", "missing file operand")
        operands = ctx.operands()
        if not operands:
            raise CommandError("wc: missing file operand")

        flags = ctx.flags()
        columns = [c for c in WC_COLUMNS if c in flags] or list(WC_COLUMNS)
        out = OutputBuffer()
        for file_arg in operands:
            path = ctx.resolve(file_arg)
            if ctx.fs.directory_exists(path) and not ctx.fs.file_exists(path):
                out.error(f"wc: {file_arg}: Is a directory")
                continue
            lines = ctx.fs.count_lines(path)
            if lines is None:
                out.error(f"wc: {file_arg}: No such file or directory")
                continue

            counts = {"l": lines, "w": ctx.fs.count_words(path), "c": ctx.fs.get_file_size(path)}
            out.write(" ".join(f"{counts[c]:>7}" for c in columns) + f" {file_arg}")
        return out.result()

    # --- grep ---

    def _grep_handler(self, ctx: CommandContext) -> CommandResult:
        if not ctx.args:
            raise CommandError(
                "Usage: grep [OPTION]... PATTERN [FILE]...\nTry 'grep --help' for more information.",
                exit_code=2,
            )
        operands = ctx.operands()
        if len(operands) < 2:
            raise CommandError("grep: missing file operand", exit_code=2)

        # Matching is always case-insensitive; -i is accepted for familiarity.
        show_line_numbers = "n" in ctx.flags()
        pattern, file_args = _strip_quotes(operands[0]), operands[1:]
        with_names = len(file_args) > 1

        out = OutputBuffer()
        rows: list[dict] = []
        for file_arg in file_args:
            path = ctx.resolve(file_arg)
            if ctx.fs.directory_exists(path) and not ctx.fs.file_exists(path):
                out.error(f"grep: {file_arg}: Is a directory", exit_code=2)
                continue
            matches = ctx.fs.search_in_file(path, pattern)
            if matches is None:
                out.error(f"grep: {file_arg}: No such file or directory", exit_code=2)
                continue

            prefix = f"{file_arg}:" if with_names else ""
            for match in matches:
                rows.append({"file": file_arg, "line_num": match.line_num, "content": match.content})
                if show_line_numbers:
                    out.write(f"{prefix}{match.line_num}:{match.content}")
                else:
                    out.write(f"{prefix}{match.content}")

        if not rows and out.exit_code == 0:
            out.exit_code = 1
        if show_line_numbers and rows:
            return out.result(kind=ResultKind.TABLE, rows=rows)
        return out.result()

    # --- find ---

    def _find_handler(self, ctx: CommandContext) -> CommandResult:
        search_path = "."
        name_pattern: str | None = None
        ignore_case = False
        type_filter: str | None = None

        args = ctx.args
        index = 0
        while index < len(args):
            arg = args[index]
            if arg in ("-name", "-iname", "-type"):
                if index + 1 >= len(args):
                    raise CommandError(f"find: missing argument to `{arg}'")
                value = _strip_quotes(args[index + 1])
                if arg == "-type":
                    if value not in ("f", "d"):
                        raise CommandError(f"find: Unknown argument to -type: {value}")
                    type_filter = value
                else:
                    name_pattern, ignore_case = value, arg == "-iname"
                index += 2
                continue
            if arg.startswith("-"):
                raise CommandError(f"find: unknown predicate `{arg}'")
            search_path = arg
            index += 1

        root = ctx.resolve(search_path)
        if not ctx.fs.directory_exists(root) and not ctx.fs.file_exists(root):
            raise CommandError(f"find: '{search_path}': No such file or directory")

        prefix = root if root.endswith("/") else root + "/"
        shown = search_path.rstrip("/") or search_path
        shown_prefix = shown if shown.endswith("/") else shown + "/"
        matches = []
        for entry in ctx.fs.get_file_structure():
            if entry.path != root and not entry.path.startswith(prefix):
                continue
            name = entry.name.rstrip("/")
            if name_pattern is not None:
                if ignore_case:
                    matched = fnmatch.fnmatchcase(name.lower(), name_pattern.lower())
                else:
                    matched = fnmatch.fnmatchcase(name, name_pattern)
                if not matched:
                    continue
            if type_filter == "f" and entry.is_directory:
                continue
            if type_filter == "d" and not entry.is_directory:
                continue
            matches.append(shown if entry.path == root else shown_prefix + entry.path[len(prefix):])
        return CommandResult(output="\n".join(matches))

    # --- echo ---

    def _echo_handler(self, ctx: CommandContext) -> CommandResult:
        args = list(ctx.args)
        if args and args[0] == "-n":
            args = args[1:]

        words: list[str] = []
        mode: str | None = None
        target: str | None = None
        for index, arg in enumerate(args):
            if arg.startswith(">>"):
                mode, target = ">>", arg[2:] or (args[index + 1] if index + 1 < len(args) else None)
                break
            if arg.startswith(">"):
                mode, target = ">", arg[1:] or (args[index + 1] if index + 1 < len(args) else None)
                break
            words.append(arg)

        text = _strip_quotes(" ".join(words))
        if mode is None:
            return CommandResult(output=text)
        if not target:
            raise CommandError("bash: syntax error near unexpected token `newline'", exit_code=2)

        path = ctx.resolve(target)
        if ctx.fs.directory_exists(path) and not ctx.fs.file_exists(path):
            raise CommandError(f"bash: {target}: Is a directory")
        if not ctx.fs.directory_exists(get_directory(path)):
            raise CommandError(f"bash: {target}: No such file or directory")

        if mode == ">>":
            ctx.fs.append_to_file(path, text)
        else:
            ctx.fs.save_file(path, text)
        return CommandResult()
