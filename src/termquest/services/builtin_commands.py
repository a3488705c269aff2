"""Built-in commands of the main terminal page."""
from __future__ import annotations

from datetime import datetime
from typing import List

from termquest.services import content
from termquest.services.command_table import CommandContext, CommandTable

HOME_DIRECTORY = "/home/user"
USER_NAME = "user"


def cmd_help(args: List[str], ctx: CommandContext) -> str:
    return content.MAIN_HELP


def cmd_clear(args: List[str], ctx: CommandContext) -> str:
    ctx.output.clear()
    return ""


def cmd_echo(args: List[str], ctx: CommandContext) -> str:
    return " ".join(args)


def cmd_date(args: List[str], ctx: CommandContext) -> str:
    return datetime.now().strftime("%a %b %d %Y %H:%M:%S")


def cmd_whoami(args: List[str], ctx: CommandContext) -> str:
    return USER_NAME


def cmd_pwd(args: List[str], ctx: CommandContext) -> str:
    return HOME_DIRECTORY


def cmd_ls(args: List[str], ctx: CommandContext) -> str:
    return ctx.puzzles.list_files(ctx.session.active)


def cmd_cat(args: List[str], ctx: CommandContext) -> str:
    return ctx.puzzles.read_file(ctx.session.active, args)


def cmd_solve(args: List[str], ctx: CommandContext) -> str:
    return ctx.modes.solve_puzzle(args)


def cmd_puzzle(args: List[str], ctx: CommandContext) -> str:
    return ctx.modes.enter_puzzle()


def cmd_rpg(args: List[str], ctx: CommandContext) -> str:
    return ctx.modes.enter_rpg()


def cmd_commandrace(args: List[str], ctx: CommandContext) -> str:
    return ctx.modes.enter_race()


def cmd_note(args: List[str], ctx: CommandContext) -> str:
    return ctx.modes.enter_note(" ".join(args))


def cmd_notes(args: List[str], ctx: CommandContext) -> str:
    notes = ctx.notes.list_notes()
    if not notes:
        return "No notes yet. Use 'note <title>' to write one."
    lines = ["Saved notes:"]
    for note in notes:
        lines.append(f"  {note.title} (updated {note.updated_at})")
    return content.format_output(lines)


def cmd_quit(args: List[str], ctx: CommandContext) -> str:
    return ctx.modes.quit()


def cmd_history(args: List[str], ctx: CommandContext) -> str:
    return content.format_output(
        [f"{index:>5}  {entry}" for index, entry in enumerate(ctx.session.history, start=1)]
    )


def cmd_man(args: List[str], ctx: CommandContext) -> str:
    if not args:
        return "What manual page do you want?\nFor example, try 'man man'."
    page = content.MAN_PAGES.get(args[0].lower())
    if page is None:
        return f"No manual entry for {args[0]}"
    return page


def cmd_tutorial(args: List[str], ctx: CommandContext) -> str:
    return content.TUTORIAL


def cmd_cheatsheet(args: List[str], ctx: CommandContext) -> str:
    return content.CHEATSHEET


def build_main_command_table() -> CommandTable:
    """Return the command table used on the main terminal page."""
    return CommandTable(
        {
            "help": cmd_help,
            "clear": cmd_clear,
            "echo": cmd_echo,
            "date": cmd_date,
            "whoami": cmd_whoami,
            "pwd": cmd_pwd,
            "ls": cmd_ls,
            "cat": cmd_cat,
            "solve": cmd_solve,
            "puzzle": cmd_puzzle,
            "rpg": cmd_rpg,
            "commandrace": cmd_commandrace,
            "note": cmd_note,
            "notes": cmd_notes,
            "quit": cmd_quit,
            "history": cmd_history,
            "man": cmd_man,
            "tutorial": cmd_tutorial,
            "cheatsheet": cmd_cheatsheet,
        }
    )
