"""Portfolio content and the cosmetic toggles of the terminal."""

from retro_terminal.content.portfolio import (
    find_project,
    generate_about,
    generate_contact,
    generate_experience,
    generate_project_card,
    generate_projects,
    generate_skills,
)
from retro_terminal.content.seed_files import RESUME_TXT
from retro_terminal.content.texts import BANNER, COFFEE, HACK_REPORT, HELLO, HELP_LINES
from retro_terminal.models.command import CommandResult
from retro_terminal.shell.context import CommandContext, CommandHandler

ABOUT_FILE = "~/about.txt"
RESUME_FILE = "~/resume.txt"


class PortfolioCommands:
    def handlers(self) -> dict[str, CommandHandler]:
        return {
            "help": lambda ctx: CommandResult(output="\n".join(HELP_LINES)),
            "about": self._about_handler,
            "resume": self._resume_handler,
            "skills": lambda ctx: CommandResult(output=generate_skills()),
            "skill": lambda ctx: CommandResult(output=generate_skills()),
            "projects": lambda ctx: CommandResult(output=generate_projects()),
            "project": lambda ctx: CommandResult(output=generate_projects()),
            "work": lambda ctx: CommandResult(output=generate_projects()),
            "contact": lambda ctx: CommandResult(output=generate_contact()),
            "email": lambda ctx: CommandResult(output=generate_contact()),
            "experience": lambda ctx: CommandResult(output=generate_experience()),
            "exp": lambda ctx: CommandResult(output=generate_experience()),
            "theme": self._theme_handler,
            "toggle": self._theme_handler,
            "sound": self._sound_handler,
            "audio": self._sound_handler,
            "noise": self._sound_handler,
            "banner": lambda ctx: CommandResult(output=BANNER),
            "hack": self._hack_handler,
            "matrix": self._hack_handler,
            "coffee": lambda ctx: CommandResult(output=COFFEE),
            "hello": lambda ctx: CommandResult(output=HELLO),
            "hi": lambda ctx: CommandResult(output=HELLO),
        }

    def match_project(self, line: str) -> CommandResult | None:
        """A project name typed in full prints that project's card."""
        project = find_project(line)
        if project is None:
            return None
        return CommandResult(output=generate_project_card(project))

    def _about_handler(self, ctx: CommandContext) -> CommandResult:
        # The visitor may have edited about.txt; show their version if it is still there.
        content = ctx.fs.get_file_content(ABOUT_FILE)
        return CommandResult(output=content if content is not None else generate_about())

    def _resume_handler(self, ctx: CommandContext) -> CommandResult:
        content = ctx.fs.get_file_content(RESUME_FILE)
        return CommandResult(output=content if content is not None else RESUME_TXT)

    def _theme_handler(self, ctx: CommandContext) -> CommandResult:
        session = ctx.session
        session.theme = "green" if session.theme == "amber" else "amber"
        return CommandResult(output=f"Theme switched to: {session.theme.upper()}")

    def _sound_handler(self, ctx: CommandContext) -> CommandResult:
        session = ctx.session
        session.sound_enabled = not session.sound_enabled
        return CommandResult(output=f"Background CRT hum: {'ON' if session.sound_enabled else 'OFF'}")

    def _hack_handler(self, ctx: CommandContext) -> CommandResult:
        timestamp = ctx.now().isoformat(timespec="milliseconds")
        return CommandResult(output=HACK_REPORT.format(timestamp=timestamp))
