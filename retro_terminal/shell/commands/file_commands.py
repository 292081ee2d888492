"""Filesystem commands: ls, cd, pwd, cat, touch, mkdir, rm, mv, cp and the editor launchers."""

import logging
import math

from retro_terminal.filesystem.paths import HOME, get_directory, get_file_name, get_file_type
from retro_terminal.filesystem.virtual_fs import VirtualFileSystem
from retro_terminal.models.command import CommandResult, EditorRequest, ResultKind
from retro_terminal.models.filesystem import DirEntry
from retro_terminal.shell.constants import EDITOR_COMMANDS
from retro_terminal.shell.context import (
    CommandContext,
    CommandError,
    CommandHandler,
    OutputBuffer,
    usage_error,
)

logger = logging.getLogger(__name__)

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
DIRECTORY_SIZE = 4096


def format_size(size: int, human: bool = False) -> str:
    """Size column of `ls -l`; `-h` switches to K/M suffixes."""
    if not human:
        return str(size)
    if size >= 1024 * 1024:
        return f"{size / (1024 * 1024):.1f}M"
    if size >= 1024:
        return f"{size / 1024:.1f}K"
    return str(size)


def editor_request(fs: VirtualFileSystem, path: str) -> EditorRequest:
    """Describes a normalized path for the editor; a missing file opens as new and empty."""
    content = fs.get_file_content(path)
    name = get_file_name(path)
    return EditorRequest(
        name=name,
        path=path,
        type=get_file_type(name),
        is_new=content is None,
        is_user_created=path in fs.get_user_files(),
        content=content or "",
    )


def _is_directory(ctx: CommandContext, path: str) -> bool:
    return ctx.fs.directory_exists(path) and not ctx.fs.file_exists(path)


class FileCommands:
    """Commands that read or mutate the session's virtual filesystem."""

    def handlers(self) -> dict[str, CommandHandler]:
        handlers: dict[str, CommandHandler] = {
            "ls": self._ls_handler,
            "dir": self._ls_handler,
            "cd": self._cd_handler,
            "pwd": self._pwd_handler,
            "cat": self._cat_handler,
            "touch": self._touch_handler,
            "mkdir": self._mkdir_handler,
            "rm": self._rm_handler,
            "mv": self._mv_handler,
            "cp": self._cp_handler,
        }
        for name in EDITOR_COMMANDS:
            handlers[name] = self._editor_handler
        return handlers

    # --- Listing and navigation ---

    def _ls_handler(self, ctx: CommandContext) -> CommandResult:
        flags = ctx.flags()
        operands = ctx.operands()
        target_arg = operands[0] if operands else None
        target = ctx.resolve(target_arg) if target_arg else ctx.session.cwd

        if target_arg and ctx.fs.file_exists(target):
            return CommandResult(output=target_arg)
        if target_arg and not ctx.fs.directory_exists(target):
            raise CommandError(f"ls: cannot access '{target_arg}': No such file or directory", exit_code=2)

        entries = ctx.fs.list_files(target)
        if "a" not in flags:
            entries = [e for e in entries if not e.name.startswith(".")]
        if not entries:
            return CommandResult()

        rows = [{**e.model_dump(), "name": e.name.rstrip("/")} for e in entries]
        if "l" in flags:
            output = self._format_long(ctx, entries, human="h" in flags)
        else:
            output = self._format_columns([row["name"] for row in rows], ctx.config.TERM_WIDTH)
        return CommandResult(kind=ResultKind.TABLE, output=output, rows=rows)

    def _format_long(self, ctx: CommandContext, entries: list[DirEntry], human: bool) -> str:
        now = ctx.now()
        stamp = f"{MONTHS[now.month - 1]} {now.day:>2} {now:%H:%M}"
        user = ctx.user
        total_blocks = 0
        lines = []
        for entry in entries:
            if entry.is_directory:
                total_blocks += 4
                perms, links, size = "drwxr-xr-x", "2", str(DIRECTORY_SIZE)
            else:
                file_size = ctx.fs.get_file_size(entry.path) or 0
                total_blocks += math.ceil(file_size / 1024)
                perms, links, size = "-rw-r--r--", "1", format_size(file_size, human)
            lines.append(f"{perms} {links} {user} {user} {size:>5} {stamp} {entry.name.rstrip('/')}")
        return f"total {total_blocks}\n" + "\n".join(lines)

    def _format_columns(self, names: list[str], width: int) -> str:
        col_width = max(len(n) for n in names) + 2
        num_cols = max(1, width // col_width)
        lines = []
        for start in range(0, len(names), num_cols):
            row = names[start : start + num_cols]
            lines.append("".join(name.ljust(col_width) for name in row).rstrip())
        return "\n".join(lines)

    def _cd_handler(self, ctx: CommandContext) -> CommandResult:
        # No previous-directory tracking; `cd -` behaves like a bare `cd`.
        if not ctx.args or ctx.args[0] == "-":
            return CommandResult(kind=ResultKind.CHANGE_DIRECTORY, cwd=HOME)

        target_arg = ctx.args[0]
        target = ctx.resolve(target_arg)
        if ctx.fs.file_exists(target):
            raise CommandError(f"bash: cd: {target_arg}: Not a directory")
        if not ctx.fs.directory_exists(target):
            raise CommandError(f"bash: cd: {target_arg}: No such file or directory")
        return CommandResult(kind=ResultKind.CHANGE_DIRECTORY, cwd=target)

    def _pwd_handler(self, ctx: CommandContext) -> CommandResult:
        return CommandResult(output=ctx.display(ctx.session.cwd))

    # --- Reading ---

    def _cat_handler(self, ctx: CommandContext) -> CommandResult:
        operands = ctx.operands()
        if not operands:
            raise usage_error("cat", "missing file operand")

        out = OutputBuffer()
        for arg in operands:
            path = ctx.resolve(arg)
            if _is_directory(ctx, path):
                out.error(f"cat: {arg}: Is a directory")
                continue
            content = ctx.fs.get_file_content(path)
            if content is None:
                out.error(f"cat: {arg}: No such file or directory")
            else:
                out.write(content)
        return out.result()

    # --- Mutations ---

    def _touch_handler(self, ctx: CommandContext) -> CommandResult:
        operands = ctx.operands()
        if not operands:
            raise usage_error("touch", "missing file operand")

        out = OutputBuffer()
        for arg in operands:
            path = ctx.resolve(arg)
            if ctx.fs.directory_exists(path) or ctx.fs.file_exists(path):
                continue
            if not ctx.fs.directory_exists(get_directory(path)):
                out.error(f"touch: cannot touch '{arg}': No such file or directory")
                continue
            ctx.fs.create_file(path)
        return out.result()

    def _mkdir_handler(self, ctx: CommandContext) -> CommandResult:
        flags = ctx.flags()
        make_parents, verbose = "p" in flags, "v" in flags
        operands = ctx.operands()
        if not operands:
            raise usage_error("mkdir", "missing operand")

        out = OutputBuffer()
        for arg in operands:
            path = ctx.resolve(arg)
            if ctx.fs.file_exists(path):
                out.error(f"mkdir: cannot create directory '{arg}': File exists")
                continue
            if ctx.fs.directory_exists(path):
                if not make_parents:
                    out.error(f"mkdir: cannot create directory '{arg}': File exists")
                continue
            if not make_parents and ctx.fs.file_exists(get_directory(path)):
                out.error(f"mkdir: cannot create directory '{arg}': Not a directory")
                continue
            if not make_parents and not ctx.fs.directory_exists(get_directory(path)):
                out.error(f"mkdir: cannot create directory '{arg}': No such file or directory")
                continue

            result = ctx.fs.create_directory(path)
            if not result.success:
                out.error(f"mkdir: cannot create directory '{arg}': {result.error.unix_message}")
            elif verbose:
                out.write(f"mkdir: created directory '{arg}'")
        return out.result()

    def _rm_handler(self, ctx: CommandContext) -> CommandResult:
        flags = ctx.flags()
        recursive = "r" in flags.lower()
        force, verbose = "f" in flags, "v" in flags
        operands = ctx.operands()
        if not operands:
            raise usage_error("rm", "missing operand")

        out = OutputBuffer()
        for arg in operands:
            path = ctx.resolve(arg)
            if _is_directory(ctx, path):
                if not recursive:
                    out.error(f"rm: cannot remove '{arg}': Is a directory")
                    continue
                result = ctx.fs.delete_directory(path)
                if not result.success:
                    out.error(f"rm: cannot remove '{arg}': {result.error.unix_message}")
                elif verbose:
                    out.write(f"removed directory '{arg}'")
                continue

            if not ctx.fs.file_exists(path):
                if not force:
                    out.error(f"rm: cannot remove '{arg}': No such file or directory")
                continue
            result = ctx.fs.delete_file(path)
            if not result.success:
                out.error(f"rm: cannot remove '{arg}': {result.error.unix_message}")
            elif verbose:
                out.write(f"removed '{arg}'")
        return out.result()

    def _transfer_operands(self, ctx: CommandContext) -> tuple[str, str, str, str]:
        """Source/destination arguments and their resolved paths for mv and cp."""
        operands = ctx.operands()
        if not operands:
            raise usage_error(ctx.name, "missing file operand")
        if len(operands) < 2:
            raise usage_error(ctx.name, f"missing destination file operand after '{operands[0]}'")

        src_arg, dst_arg = operands[0], operands[1]
        source, dest = ctx.resolve(src_arg), ctx.resolve(dst_arg)
        if _is_directory(ctx, dest):
            dest = ctx.fs.normalize_path(get_file_name(source), dest)
        return src_arg, dst_arg, source, dest

    def _mv_handler(self, ctx: CommandContext) -> CommandResult:
        src_arg, dst_arg, source, dest = self._transfer_operands(ctx)
        if _is_directory(ctx, source):
            result = ctx.fs.move_directory(source, dest)
        else:
            result = ctx.fs.move_file(source, dest)

        if not result.success:
            raise CommandError(f"mv: cannot move '{src_arg}' to '{dst_arg}': {result.error.unix_message}")
        if "v" in ctx.flags():
            return CommandResult(output=f"renamed '{src_arg}' -> '{dst_arg}'")
        return CommandResult()

    def _cp_handler(self, ctx: CommandContext) -> CommandResult:
        src_arg, dst_arg, source, dest = self._transfer_operands(ctx)
        flags = ctx.flags()
        if _is_directory(ctx, source):
            if "r" not in flags.lower():
                raise CommandError(f"cp: -r not specified; omitting directory '{src_arg}'")
            result = ctx.fs.copy_directory(source, dest)
        else:
            result = ctx.fs.copy_file(source, dest)

        if not result.success:
            raise CommandError(f"cp: cannot copy '{src_arg}' to '{dst_arg}': {result.error.unix_message}")
        if "v" in flags:
            return CommandResult(output=f"'{src_arg}' -> '{dst_arg}'")
        return CommandResult()

    # --- Editor ---

    def _editor_handler(self, ctx: CommandContext) -> CommandResult:
        if not ctx.args:
            request = EditorRequest(name="[New File]", path=ctx.resolve("untitled"), is_new=True)
            return CommandResult(kind=ResultKind.EDITOR, editor=request)

        arg = ctx.args[0]
        path = ctx.resolve(arg)
        if _is_directory(ctx, path):
            raise CommandError(f"{ctx.name}: '{arg}' is a directory")

        request = editor_request(ctx.fs, path)
        logger.debug(f"Opening editor for {path} (new={request.is_new})")
        return CommandResult(kind=ResultKind.EDITOR, editor=request)
