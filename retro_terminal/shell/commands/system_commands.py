"""Canned system utilities. Output is derived from the config, session and clock only."""

import calendar

from retro_terminal.content.texts import (
    COW,
    DF,
    ENV,
    FORTUNES,
    FREE,
    MAN_PAGES,
    NEOFETCH,
    PS,
    SHUTDOWN_MESSAGES,
    TOP,
)
from retro_terminal.models.command import CommandResult, ResultKind
from retro_terminal.shell.context import CommandContext, CommandError, CommandHandler

KNOWN_BINARIES = ("ls", "cat", "mkdir", "touch", "rm", "mv", "cp", "pwd", "echo", "grep", "find", "nvim", "vim")
OS_NAME = "RetroOS"
OS_RELEASE = "1.0.0"


class SystemCommands:
    def handlers(self) -> dict[str, CommandHandler]:
        return {
            "whoami": self._whoami_handler,
            "hostname": self._hostname_handler,
            "uname": self._uname_handler,
            "date": self._date_handler,
            "cal": self._cal_handler,
            "uptime": self._uptime_handler,
            "df": lambda ctx: CommandResult(output=DF),
            "free": lambda ctx: CommandResult(output=FREE),
            "ps": lambda ctx: CommandResult(output=PS),
            "top": self._top_handler,
            "htop": self._top_handler,
            "id": self._id_handler,
            "env": self._env_handler,
            "printenv": self._env_handler,
            "which": self._which_handler,
            "man": self._man_handler,
            "history": self._history_handler,
            "exit": self._exit_handler,
            "logout": self._exit_handler,
            "shutdown": self._shutdown_handler,
            "poweroff": self._shutdown_handler,
            "halt": self._shutdown_handler,
            "sudo": self._sudo_handler,
            "neofetch": self._neofetch_handler,
            "screenfetch": self._neofetch_handler,
            "cowsay": self._cowsay_handler,
            "fortune": self._fortune_handler,
        }

    def _whoami_handler(self, ctx: CommandContext) -> CommandResult:
        return CommandResult(output=ctx.user)

    def _hostname_handler(self, ctx: CommandContext) -> CommandResult:
        return CommandResult(output=ctx.config.TERMINAL_HOSTNAME)

    def _uname_handler(self, ctx: CommandContext) -> CommandResult:
        if "a" in ctx.flags():
            return CommandResult(
                output=f"{OS_NAME} {OS_RELEASE} {ctx.config.TERMINAL_HOSTNAME} x86_64 GNU/Linux"
            )
        return CommandResult(output=OS_NAME)

    def _date_handler(self, ctx: CommandContext) -> CommandResult:
        now = ctx.now()
        return CommandResult(output=f"{now:%a %b} {now.day:>2} {now:%H:%M:%S %Y}")

    def _cal_handler(self, ctx: CommandContext) -> CommandResult:
        now = ctx.now()
        text = calendar.TextCalendar(calendar.SUNDAY).formatmonth(now.year, now.month)
        return CommandResult(output=text.rstrip("\n"))

    def _uptime_handler(self, ctx: CommandContext) -> CommandResult:
        now = ctx.now()
        minutes = ctx.rng.randint(5, 64)
        return CommandResult(
            output=f" {now:%H:%M:%S} up {minutes} min,  1 user,  load average: 0.00, 0.01, 0.05"
        )

    def _top_handler(self, ctx: CommandContext) -> CommandResult:
        return CommandResult(output=TOP.format(time=f"{ctx.now():%H:%M:%S}", user=ctx.user))

    def _id_handler(self, ctx: CommandContext) -> CommandResult:
        user = ctx.user
        return CommandResult(output=f"uid=1000({user}) gid=1000({user}) groups=1000({user}),27(sudo)")

    def _env_handler(self, ctx: CommandContext) -> CommandResult:
        return CommandResult(
            output=ENV.format(
                user=ctx.user,
                home=ctx.config.display_home,
                pwd=ctx.display(ctx.session.cwd),
            )
        )

    def _which_handler(self, ctx: CommandContext) -> CommandResult:
        if not ctx.args:
            return CommandResult(exit_code=1)
        command = ctx.args[0]
        if command in KNOWN_BINARIES:
            return CommandResult(output=f"/usr/bin/{command}")
        raise CommandError(f"{command} not found")

    def _man_handler(self, ctx: CommandContext) -> CommandResult:
        if not ctx.args:
            raise CommandError("What manual page do you want?")
        page = MAN_PAGES.get(ctx.args[0].lower())
        if page is None:
            raise CommandError(f"No manual entry for {ctx.args[0]}", exit_code=16)
        return CommandResult(output=page)

    def _history_handler(self, ctx: CommandContext) -> CommandResult:
        lines = [f"{index:>5}  {command}" for index, command in enumerate(ctx.session.history, start=1)]
        return CommandResult(output="\n".join(lines))

    def _exit_handler(self, ctx: CommandContext) -> CommandResult:
        return CommandResult(output='logout: Cannot exit demo terminal. Type "help" for commands.')

    def _shutdown_handler(self, ctx: CommandContext) -> CommandResult:
        output = "\n".join(SHUTDOWN_MESSAGES).format(hostname=ctx.config.TERMINAL_HOSTNAME)
        return CommandResult(kind=ResultKind.SHUTDOWN, output=output)

    def _sudo_handler(self, ctx: CommandContext) -> CommandResult:
        if not ctx.args:
            raise CommandError("usage: sudo <command>")
        user = ctx.user
        raise CommandError(
            f"[sudo] password for {user}: \n"
            f"Sorry, user {user} is not allowed to execute '{' '.join(ctx.args)}' as root."
        )

    def _neofetch_handler(self, ctx: CommandContext) -> CommandResult:
        return CommandResult(output=NEOFETCH.format(user=ctx.user, hostname=ctx.config.TERMINAL_HOSTNAME))

    def _cowsay_handler(self, ctx: CommandContext) -> CommandResult:
        text = " ".join(ctx.args) or "Moo!"
        width = len(text) + 2
        return CommandResult(output=COW.format(top="_" * width, text=text, bottom="-" * width))

    def _fortune_handler(self, ctx: CommandContext) -> CommandResult:
        return CommandResult(output=ctx.rng.choice(FORTUNES))
