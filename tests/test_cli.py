import json

import pytest

from courtshuffle.__main__ import COMMANDS, create_completer, execute, main


@pytest.fixture
def data_file(tmp_path):
    return str(tmp_path / "roster.json")


def _run(data_file, *argv):
    return main(["--data", data_file, "--seed", "3", *argv])


def test_add_players_and_generate_singles(data_file, capsys):
    assert _run(data_file, "add-player", "Alice") == 0
    assert _run(data_file, "add-player", "Bob", "Smith") == 0
    assert _run(data_file, "singles") == 0

    out = capsys.readouterr().out
    assert "Alice added to the roster!" in out
    assert "Bob Smith added to the roster!" in out
    assert "Current Match - Singles" in out
    assert " VS " in out


def test_duplicate_player_exits_with_error(data_file, capsys):
    _run(data_file, "add-player", "Alice")
    assert _run(data_file, "add-player", "alice") == 1
    assert "Player already exists" in capsys.readouterr().out


def test_not_enough_players(data_file, capsys):
    assert _run(data_file, "doubles") == 1
    assert "You need at least 4 players for doubles" in capsys.readouterr().out


def test_history_lists_matches(data_file, capsys):
    for name in "ABCD":
        _run(data_file, "add-player", name)
    _run(data_file, "doubles")
    capsys.readouterr()

    assert _run(data_file, "history") == 0
    out = capsys.readouterr().out
    assert "Recent Matches" in out
    assert "Doubles" in out


def test_data_file_layout(data_file):
    _run(data_file, "add-player", "Alice")
    with open(data_file, encoding="utf-8") as f:
        data = json.load(f)
    players = json.loads(data["badminton-players"])
    assert [p["name"] for p in players] == ["Alice"]


def test_groups_flag(data_file, capsys):
    assert _run(data_file, "--groups", "add-player", "Alice") == 1
    assert "Please select a group first" in capsys.readouterr().out

    assert _run(data_file, "--groups", "add-group", "Tuesday") == 0
    assert _run(data_file, "--groups", "add-player", "Alice") == 0


def test_remove_non_empty_group(data_file, capsys):
    _run(data_file, "--groups", "add-group", "Tuesday")
    _run(data_file, "--groups", "add-player", "Alice")
    with open(data_file, encoding="utf-8") as f:
        group_id = json.loads(json.load(f)["badminton-groups"])[0]["id"]

    assert _run(data_file, "--groups", "remove-group", group_id) == 1
    assert "Cannot delete Tuesday" in capsys.readouterr().out


def test_invalid_config_file(data_file, tmp_path, capsys):
    config = tmp_path / "config.json"
    config.write_text("{oops", encoding="utf-8")
    assert main(["--data", data_file, "--config", str(config), "players"]) == 1
    assert "Invalid JSON" in capsys.readouterr().out


def test_execute_interactive_lines(data_file, capsys):
    from courtshuffle.session import MatchSession

    session = MatchSession.open(data_file)

    assert execute(session, []) == 0
    assert execute(session, ["help"]) == 0
    assert execute(session, ["help", "singles"]) == 0
    assert execute(session, ["bogus"]) == 2
    assert execute(session, ["remove-player"]) == 2
    assert execute(session, ["add-player", "Alice"]) == 0
    assert execute(session, ["players"]) == 0

    out = capsys.readouterr().out
    assert "Unknown command: bogus" in out
    assert "Players (1)" in out


def test_completer_knows_every_command():
    completer = create_completer()
    for command in COMMANDS:
        assert command in completer.options


@pytest.mark.parametrize("limit", ["0", "-1", "few"])
def test_history_limit_must_be_positive(data_file, limit):
    from courtshuffle.session import MatchSession

    session = MatchSession.open(data_file)
    assert execute(session, ["history", "--limit", limit]) == 2
    assert execute(session, ["history", "--limit", "3"]) == 0
