import io

import pytest

from patternkit.cli import execute, help_text, main, repl
from patternkit.users import UserManager, format_group, format_user


@pytest.fixture
def manager():
    return UserManager()


def test_create_user_and_duplicate(manager):
    assert execute(manager, "createUser 1 alice alice@example.com 25") == "User created successfully\n"
    assert execute(manager, "createUser 1 alice alice@example.com 25") == "Error: User already exists\n"


def test_create_user_in_group(manager):
    assert execute(manager, "createGroup 4") == "Group created successfully\n"
    execute(manager, "createUser 1 alice alice@example.com 25 4")
    assert manager.get_user(1).group() is manager.get_group(4)


def test_group_minus_one_means_no_group(manager):
    execute(manager, "createGroup -1")
    execute(manager, "createUser 1 alice alice@example.com 25 -1")
    assert manager.get_user(1).group() is None


def test_get_user_output_matches_formatter(manager):
    execute(manager, "createUser 1 alice alice@example.com 25")
    assert execute(manager, "getUser 1") == format_user(manager.get_user(1))
    assert execute(manager, "getUser 2") == "User not found.\n"


def test_delete_user(manager):
    execute(manager, "createUser 1 alice alice@example.com 25")
    assert execute(manager, "deleteUser 1") == "User deleted successfully\n"
    assert execute(manager, "deleteUser 1") == "Error: User not found\n"


def test_group_commands(manager):
    execute(manager, "createGroup 3")
    assert execute(manager, "createGroup 3") == "Error: Group already exists\n"
    assert execute(manager, "getGroup 3") == format_group(manager.get_group(3))
    assert execute(manager, "deleteGroup 3") == "Group deleted successfully\n"
    assert execute(manager, "deleteGroup 3") == "Error: Group not found\n"
    assert execute(manager, "getGroup 3") == "Group not found.\n"


def test_listing_commands(manager):
    execute(manager, "createUser 2 bob bob@example.com 30")
    execute(manager, "createUser 1 alice alice@example.com 25")
    execute(manager, "createGroup 5")
    assert execute(manager, "allUsers") == "".join(format_user(u) for u in manager.users())
    assert execute(manager, "allGroups") == format_group(manager.get_group(5))


@pytest.mark.parametrize(
    "line",
    ["deleteUser", "deleteUser 1 2", "allUsers now", "createUser 1 alice", "frobnicate"],
)
def test_invalid_commands(manager, line):
    assert execute(manager, line) == "Invalid command. Type 'help' for assistance.\n"


def test_non_numeric_argument(manager):
    assert execute(manager, "getUser abc") == "Error: Invalid input format. stoi\n"


def test_out_of_range_argument(manager):
    assert execute(manager, "createGroup 99999999999").startswith("Error: Invalid input format.")


def test_trailing_garbage_after_number_is_ignored(manager):
    assert execute(manager, "createGroup 12abc") == "Group created successfully\n"
    assert manager.get_group(12).group_id == 12


def test_help_and_exit(manager):
    assert execute(manager, "help") == help_text()
    assert "Available commands:" in help_text()
    assert execute(manager, "exit") is None


def test_blank_line(manager):
    assert execute(manager, "   ") == ""


def test_repl_runs_until_exit():
    stdin = io.StringIO("createGroup 1\n\ngetGroup 1\nexit\ncreateGroup 2\n")
    stdout = io.StringIO()
    repl(stdin, stdout)
    text = stdout.getvalue()
    assert text.startswith("User Management System\nType 'help' for list of commands\n")
    assert "Group created successfully\n" in text
    assert text.count("Group created successfully") == 1


def test_repl_stops_at_end_of_input():
    stdout = io.StringIO()
    repl(io.StringIO("createGroup 1\n"), stdout)
    assert stdout.getvalue().endswith("> ")


def test_main_reads_standard_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("help\nexit\n"))
    assert main() == 0
    assert help_text() in capsys.readouterr().out