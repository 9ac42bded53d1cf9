"""Interactive command loop for managing users and groups."""

from __future__ import annotations

import re
import sys
from typing import TextIO

from patternkit.users import (
    AlreadyExistsError,
    NotFoundError,
    UserManager,
    format_group,
    format_user,
)

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_NO_GROUP = -1

_HELP = (
    "\nAvailable commands:\n"
    "  createUser {userId} {username} {email} {age} [groupId] - Create new user\n"
    "  deleteUser {userId}          - Delete user\n"
    "  allUsers                     - List all users\n"
    "  getUser {userId}             - Show user details\n"
    "  createGroup {groupId}        - Create new group\n"
    "  deleteGroup {groupId}        - Delete group\n"
    "  allGroups                    - List all groups with members\n"
    "  getGroup {groupId}           - Show group details\n"
    "  help                         - Show this help message\n"
    "  exit                         - Exit the program\n\n"
    "Examples:\n"
    "  createUser 123 Alice alice@example.com 25 456\n"
    "  getGroup 456\n"
    "  deleteUser 123\n\n"
)

_BANNER = "User Management System\nType 'help' for list of commands\n"
_INVALID = "Invalid command. Type 'help' for assistance.\n"


def help_text() -> str:
    """Return the list of available commands."""
    return _HELP


def _parse_int(text: str) -> int:
    """Read a leading 32-bit integer, ignoring anything after it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError("stoi")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError("stoi")
    return value


def _dispatch(manager: UserManager, tokens: list[str]) -> str | None:
    cmd, count = tokens[0], len(tokens)

    if cmd == "exit":
        return None
    if cmd == "help":
        return help_text()
    if cmd == "createUser" and count >= 5:
        user_id = _parse_int(tokens[1])
        age = _parse_int(tokens[4])
        group_id = _parse_int(tokens[5]) if count > 5 else _NO_GROUP
        try:
            manager.create_user(
                user_id,
                tokens[2],
                tokens[3],
                age,
                None if group_id == _NO_GROUP else group_id,
            )
        except AlreadyExistsError:
            return "Error: User already exists\n"
        return "User created successfully\n"
    if cmd == "deleteUser" and count == 2:
        try:
            manager.delete_user(_parse_int(tokens[1]))
        except NotFoundError:
            return "Error: User not found\n"
        return "User deleted successfully\n"
    if cmd == "allUsers" and count == 1:
        return "".join(format_user(user) for user in manager.users())
    if cmd == "getUser" and count == 2:
        try:
            return format_user(manager.get_user(_parse_int(tokens[1])))
        except NotFoundError:
            return "User not found.\n"
    if cmd == "createGroup" and count == 2:
        try:
            manager.create_group(_parse_int(tokens[1]))
        except AlreadyExistsError:
            return "Error: Group already exists\n"
        return "Group created successfully\n"
    if cmd == "deleteGroup" and count == 2:
        try:
            manager.delete_group(_parse_int(tokens[1]))
        except NotFoundError:
            return "Error: Group not found\n"
        return "Group deleted successfully\n"
    if cmd == "allGroups" and count == 1:
        return "".join(format_group(group) for group in manager.groups())
    if cmd == "getGroup" and count == 2:
        try:
            return format_group(manager.get_group(_parse_int(tokens[1])))
        except NotFoundError:
            return "Group not found.\n"
    return _INVALID


def execute(manager: UserManager, line: str) -> str | None:
    """Run one command line against ``manager``.

    Returns the text to show, or None when the command asks to exit.
    """
    tokens = line.split()
    if not tokens:
        return ""
    try:
        return _dispatch(manager, tokens)
    except ValueError as exc:
        return f"Error: Invalid input format. {exc}\n"


def repl(stdin: TextIO, stdout: TextIO) -> None:
    """Read commands from ``stdin`` until ``exit`` or end of input."""
    manager = UserManager()
    stdout.write(_BANNER)
    while True:
        stdout.write("> ")
        stdout.flush()
        raw = stdin.readline()
        if not raw:
            break
        line = raw.rstrip("\r\n")
        if not line:
            continue
        output = execute(manager, line)
        if output is None:
            break
        stdout.write(output)


def main(argv: list[str] | None = None) -> int:
    """Start the interactive command loop on standard input and output."""
    repl(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())