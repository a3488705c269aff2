"""Static text shown by the terminal: help, man pages, tutorial and banners."""
from __future__ import annotations

from typing import Dict


def format_output(lines: list[str]) -> str:
    """Join lines for terminal output."""
    return "\n".join(lines)


WELCOME_MESSAGE = format_output(
    [
        "Welcome to Terminal Quest!",
        "Learn Linux commands by solving puzzles, exploring a dungeon and racing the clock.",
        "Type 'help' for available commands or 'tutorial' to get started.",
    ]
)

MAIN_HELP = format_output(
    [
        "Available commands:",
        "  help - Show this help message",
        "  clear - Clear the terminal",
        "  echo <text> - Echo text",
        "  date - Show current date",
        "  whoami - Show current user",
        "  ls - List files",
        "  pwd - Show current directory",
        "  cat <file> - Print a file",
        "  history - Show previously entered commands",
        "  man <command> - Show the manual page for a command",
        "  tutorial - Walk through the basics",
        "  cheatsheet - Quick reference of common commands",
        "  puzzle - Start a reading puzzle",
        "  solve <answer> - Submit your puzzle answer",
        "  rpg - Start the terminal RPG",
        "  commandrace - Start a command typing race",
        "  note <title> - Write or continue a note",
        "  notes - List saved notes",
        "  quit - Leave the current game",
    ]
)

CHALLENGE_BANNER = format_output(
    [
        "=== Choose your next challenge ===",
        "  puzzle       - Read the clues and crack the code",
        "  rpg          - Explore the dungeon with real commands",
        "  commandrace  - Type commands as fast as you can",
        "Type 'help' for everything else.",
    ]
)

TUTORIAL = format_output(
    [
        "=== Tutorial ===",
        "1. Type 'pwd' to see which directory you are in.",
        "2. Type 'ls' to list the files around you.",
        "3. Type 'cat <file>' to read a file.",
        "4. Use the arrow keys to scroll through earlier commands.",
        "5. Ctrl+U clears the line, Ctrl+W deletes the last word, Ctrl+L clears the screen.",
        "When you are ready, type 'puzzle' to start your first challenge.",
    ]
)

CHEATSHEET = format_output(
    [
        "=== Cheatsheet ===",
        "  pwd              print working directory",
        "  ls -la           list all files with details",
        "  cd <dir>         change directory (cd .. goes up)",
        "  cat <file>       print a file",
        "  mkdir <dir>      create a directory",
        "  rm <file>        remove a file",
        "  cp <src> <dst>   copy a file",
        "  mv <src> <dst>   move or rename a file",
        "  grep <pat> <f>   search for text in a file",
        "  chmod 755 <f>    change file permissions",
        "  apt install <p>  install a package",
        "  man <command>    read the manual",
    ]
)

MAN_PAGES: Dict[str, str] = {
    "ls": format_output(
        [
            "LS(1)",
            "NAME",
            "    ls - list directory contents",
            "SYNOPSIS",
            "    ls [OPTION]... [FILE]...",
            "DESCRIPTION",
            "    -a  do not ignore entries starting with .",
            "    -l  use a long listing format",
        ]
    ),
    "cat": format_output(
        [
            "CAT(1)",
            "NAME",
            "    cat - concatenate files and print on the standard output",
            "SYNOPSIS",
            "    cat [FILE]...",
        ]
    ),
    "pwd": format_output(
        [
            "PWD(1)",
            "NAME",
            "    pwd - print name of current/working directory",
        ]
    ),
    "cd": format_output(
        [
            "CD(1)",
            "NAME",
            "    cd - change the working directory",
            "SYNOPSIS",
            "    cd [DIR]",
            "DESCRIPTION",
            "    'cd ..' moves to the parent directory.",
        ]
    ),
    "echo": format_output(
        [
            "ECHO(1)",
            "NAME",
            "    echo - display a line of text",
        ]
    ),
    "whoami": format_output(
        [
            "WHOAMI(1)",
            "NAME",
            "    whoami - print effective user name",
        ]
    ),
    "grep": format_output(
        [
            "GREP(1)",
            "NAME",
            "    grep - print lines that match patterns",
            "SYNOPSIS",
            "    grep [OPTION]... PATTERNS [FILE]...",
            "DESCRIPTION",
            "    -r  read all files under each directory, recursively",
            "    -i  ignore case distinctions",
        ]
    ),
    "chmod": format_output(
        [
            "CHMOD(1)",
            "NAME",
            "    chmod - change file mode bits",
            "SYNOPSIS",
            "    chmod MODE FILE...",
        ]
    ),
    "apt": format_output(
        [
            "APT(8)",
            "NAME",
            "    apt - command-line interface for the package manager",
            "SYNOPSIS",
            "    apt update | install PKG | remove PKG | list --installed | search TERM | show PKG",
        ]
    ),
    "man": format_output(
        [
            "MAN(1)",
            "NAME",
            "    man - an interface to the system reference manuals",
        ]
    ),
}
