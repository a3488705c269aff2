"""Package hunt page: find and install the decoder to read the secret."""
from __future__ import annotations

from typing import List

from termquest.services import builtin_commands
from termquest.services.apt_simulator import TARGET_PACKAGE
from termquest.services.command_table import CommandContext, CommandTable
from termquest.services.content import format_output

APT_SUBCOMMANDS_HINT = "Try: apt update, apt install, apt remove, apt list, apt search, apt show"

SECRET_MESSAGE = format_output(
    [
        "🎉 Success! You've installed ubdecode and decrypted the file!",
        "",
        "Decrypted message: 'FIT3146_LINUX_HERO_CHALLENGE_COMPLETED'",
        "",
        "You've mastered Ubuntu package management!",
    ]
)

WELCOME_MESSAGE = format_output(
    [
        "Terminal Quest: Software & Package Hunt",
        "",
        "📁 You've found an encrypted file — to decode it, you must install the missing tool: ubdecode.",
        "",
        "⚠️  Package not found. Run updates or check installed software.",
        "",
        "Type 'help' for available commands.",
    ]
)


def cmd_help(args: List[str], ctx: CommandContext) -> str:
    lines = [
        "Available commands:",
        "  help - Show this help message",
        "  clear - Clear the terminal",
        "  apt update - Update package lists",
        "  apt install <package> - Install a package",
        "  apt remove <package> - Remove a package",
        "  dpkg -l - List installed packages",
        "  apt list --installed - List installed packages",
        "  apt search <term> - Search for packages",
        "  apt show <package> - Show package information",
    ]
    if ctx.apt.is_installed(TARGET_PACKAGE):
        lines.append("  ubdecode <file> - Decrypt an encrypted file")
    return format_output(lines)


def _missing(usage: str, hint: str) -> str:
    return format_output([usage, hint])


def cmd_apt(args: List[str], ctx: CommandContext) -> str:
    if not args:
        return _missing("apt: missing command", APT_SUBCOMMANDS_HINT)
    subcommand, rest = args[0], args[1:]
    if subcommand == "update":
        return ctx.apt.update()
    if subcommand == "install":
        if not rest:
            return _missing("apt install: missing package name", "Try: apt install <package-name>")
        return ctx.apt.install(rest[0])
    if subcommand == "remove":
        if not rest:
            return _missing("apt remove: missing package name", "Try: apt remove <package-name>")
        return ctx.apt.remove(rest[0])
    if subcommand == "list":
        if "--installed" in rest:
            return ctx.apt.list_installed()
        return "apt list: use --installed to list installed packages"
    if subcommand == "search":
        if not rest:
            return _missing("apt search: missing search term", "Try: apt search <term>")
        return ctx.apt.search(rest[0])
    if subcommand == "show":
        if not rest:
            return _missing("apt show: missing package name", "Try: apt show <package-name>")
        return ctx.apt.show(rest[0])
    return _missing(f"apt: unknown command '{subcommand}'", APT_SUBCOMMANDS_HINT)


def cmd_dpkg(args: List[str], ctx: CommandContext) -> str:
    if not args:
        return _missing("dpkg: missing command", "Try: dpkg -l")
    if args[0] == "-l":
        return ctx.apt.dpkg_list()
    return _missing(f"dpkg: unknown option '{args[0]}'", "Try: dpkg -l")


def cmd_ubdecode(args: List[str], ctx: CommandContext) -> str:
    if not ctx.apt.is_installed(TARGET_PACKAGE):
        return format_output(
            [
                "ubdecode: command not found",
                "",
                "The ubdecode package is not installed.",
                "Install it using: apt install ubdecode",
            ]
        )
    if not args:
        return _missing("ubdecode: missing file argument", "Usage: ubdecode <file>")
    filename = args[0]
    if not filename.endswith(".enc"):
        return _missing(f"ubdecode: cannot find file '{filename}'", "Try: ubdecode clue.enc")
    return format_output(
        [
            f"🔓 Decrypting {filename}...",
            "✓ Decryption successful!",
            "",
            "📜 Decrypted content:",
            SECRET_MESSAGE,
            "",
            "🎉 Puzzle completed! Congratulations!",
        ]
    )


def build_package_hunt_command_table() -> CommandTable:
    """Return the command table used after navigating to the package hunt."""
    return CommandTable(
        {
            "help": cmd_help,
            "clear": builtin_commands.cmd_clear,
            "apt": cmd_apt,
            "dpkg": cmd_dpkg,
            "ubdecode": cmd_ubdecode,
            "history": builtin_commands.cmd_history,
            "man": builtin_commands.cmd_man,
            "cheatsheet": builtin_commands.cmd_cheatsheet,
        }
    )
