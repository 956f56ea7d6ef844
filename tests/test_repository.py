import json

import pytest

from courtshuffle.constants import GROUP_COLORS
from courtshuffle.exceptions import (
    CourtNotFoundException,
    DuplicateNameException,
    EmptyNameException,
    GroupNotEmptyException,
    GroupNotFoundException,
    InvalidLimitException,
    MissingSelectionException,
    PreconditionException,
    ValidationException,
)
from courtshuffle.controllers import EntityRepository
from courtshuffle.models import Match, RosterState, SessionConfig
from courtshuffle.storage import RosterPersistence


def _stored(store, name):
    return json.loads(store.get(f"badminton-{name}"))


def test_add_player_trims_and_persists(repository, store, notifier):
    player = repository.add_player("  Alice  ")

    assert player.name == "Alice"
    assert player.group_id is None
    assert player.date_added.endswith("Z")
    assert repository.state.players == [player]
    assert _stored(store, "players") == [player.to_dict()]
    assert notifier.last == ("Success", "Alice added to the roster!", "success")


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_add_player_rejects_empty_name(repository, store, name):
    with pytest.raises(EmptyNameException):
        repository.add_player(name)

    assert repository.state.players == []
    assert store.get("badminton-players") is None


def test_duplicate_name_ignores_case(repository):
    repository.add_player("Alice")

    with pytest.raises(DuplicateNameException) as excinfo:
        repository.add_player("alice")

    assert isinstance(excinfo.value, ValidationException)
    assert str(excinfo.value) == "Player already exists"
    assert len(repository.state.players) == 1


def test_duplicate_check_uses_trimmed_name(repository):
    repository.add_player("Bob")
    with pytest.raises(DuplicateNameException):
        repository.add_player("  BOB ")


def test_add_then_remove_restores_roster(repository):
    repository.add_player("Alice")
    repository.add_player("Bob")
    before = set(repository.state.players)

    added = repository.add_player("Carol")
    removed = repository.remove_player(added.id)

    assert removed == added
    assert set(repository.state.players) == before


def test_players_keep_insertion_order(repository):
    names = ["Dana", "Alice", "Carl"]
    for name in names:
        repository.add_player(name)
    assert [p.name for p in repository.state.players] == names


def test_player_ids_are_unique_and_increasing(repository):
    ids = [repository.add_player(f"Player {i}").id for i in range(20)]
    assert len(set(ids)) == 20
    assert [int(i) for i in ids] == sorted(int(i) for i in ids)


def test_remove_unknown_player_is_silent_noop(repository, store, notifier):
    repository.add_player("Alice")
    blob = store.get("badminton-players")
    count = len(notifier.messages)

    assert repository.remove_player("does-not-exist") is None
    assert len(repository.state.players) == 1
    assert store.get("badminton-players") == blob
    assert len(notifier.messages) == count


def test_remove_player_notifies(repository, notifier):
    player = repository.add_player("Alice")
    repository.remove_player(player.id)
    assert notifier.last[:2] == (
        "Player Removed",
        "Alice has been removed from the roster",
    )


def test_clear_players_drops_current_match_but_keeps_history(repository, store):
    alice = repository.add_player("Alice")
    bob = repository.add_player("Bob")
    match = Match(id="m1", type="singles", players=(alice, bob), timestamp="t")
    repository.record_match(match)

    removed = repository.clear_players()

    assert removed == [alice, bob]
    assert repository.state.players == []
    assert repository.state.current_match is None
    assert repository.state.matches == [match]
    assert _stored(store, "players") == []
    assert len(_stored(store, "matches")) == 1


def test_record_match_prepends_history(repository):
    alice = repository.add_player("Alice")
    bob = repository.add_player("Bob")
    first = Match(id="1", type="singles", players=(alice, bob))
    second = Match(id="2", type="singles", players=(bob, alice))

    repository.record_match(first)
    repository.record_match(second)

    assert repository.state.matches == [second, first]
    assert repository.state.current_match == second


def test_recent_matches_limited_to_five(repository):
    alice = repository.add_player("Alice")
    bob = repository.add_player("Bob")
    for i in range(8):
        repository.record_match(Match(id=str(i), type="singles", players=(alice, bob)))

    recent = repository.recent_matches()
    assert [m.id for m in recent] == ["7", "6", "5", "4", "3"]
    assert len(repository.state.matches) == 8
    assert len(repository.recent_matches(2)) == 2


@pytest.mark.parametrize("limit", [0, -1])
def test_recent_matches_rejects_non_positive_limit(repository, limit):
    alice = repository.add_player("Alice")
    bob = repository.add_player("Bob")
    for i in range(3):
        repository.record_match(Match(id=str(i), type="singles", players=(alice, bob)))

    with pytest.raises(InvalidLimitException):
        repository.recent_matches(limit)


# ========== Groups ==========


def test_first_group_becomes_active(grouped_repository, store):
    group = grouped_repository.add_group("Tuesday")

    assert grouped_repository.state.active_group_id == group.id
    assert json.loads(store.get("badminton-active-group")) == group.id


def test_second_group_does_not_change_active(grouped_repository):
    first = grouped_repository.add_group("Tuesday")
    grouped_repository.add_group("Thursday")
    assert grouped_repository.state.active_group_id == first.id


def test_group_colors_cycle_through_palette(grouped_repository):
    groups = [grouped_repository.add_group(f"G{i}") for i in range(len(GROUP_COLORS) + 2)]

    assert [g.color for g in groups[: len(GROUP_COLORS)]] == GROUP_COLORS
    assert groups[len(GROUP_COLORS)].color == GROUP_COLORS[0]
    assert groups[len(GROUP_COLORS) + 1].color == GROUP_COLORS[1]


def test_add_group_rejects_empty_name(grouped_repository):
    with pytest.raises(EmptyNameException):
        grouped_repository.add_group("  ")
    assert grouped_repository.state.groups == []


def test_add_player_uses_active_group(grouped_repository):
    group = grouped_repository.add_group("Tuesday")
    player = grouped_repository.add_player("Alice")
    assert player.group_id == group.id


def test_add_player_requires_group(grouped_repository):
    with pytest.raises(MissingSelectionException):
        grouped_repository.add_player("Alice")
    assert grouped_repository.state.players == []


def test_add_player_unknown_group(grouped_repository):
    grouped_repository.add_group("Tuesday")
    with pytest.raises(GroupNotFoundException):
        grouped_repository.add_player("Alice", "nope")


def test_same_name_allowed_in_different_groups(grouped_repository):
    tuesday = grouped_repository.add_group("Tuesday")
    thursday = grouped_repository.add_group("Thursday")

    grouped_repository.add_player("Alice", tuesday.id)
    grouped_repository.add_player("alice", thursday.id)
    with pytest.raises(DuplicateNameException):
        grouped_repository.add_player("ALICE", tuesday.id)

    assert len(grouped_repository.state.players) == 2


def test_remove_non_empty_group_fails(grouped_repository):
    group = grouped_repository.add_group("Tuesday")
    player = grouped_repository.add_player("Alice")

    with pytest.raises(GroupNotEmptyException) as excinfo:
        grouped_repository.remove_group(group.id)

    assert isinstance(excinfo.value, PreconditionException)
    assert grouped_repository.state.groups == [group]
    assert grouped_repository.state.players == [player]
    assert grouped_repository.state.active_group_id == group.id


def test_remove_active_group_reassigns(grouped_repository, store):
    first = grouped_repository.add_group("Tuesday")
    second = grouped_repository.add_group("Thursday")

    grouped_repository.remove_group(first.id)

    assert grouped_repository.state.groups == [second]
    assert grouped_repository.state.active_group_id == second.id
    assert json.loads(store.get("badminton-active-group")) == second.id


def test_remove_last_group_clears_active(grouped_repository, store):
    group = grouped_repository.add_group("Tuesday")
    grouped_repository.remove_group(group.id)

    assert grouped_repository.state.active_group_id is None
    assert json.loads(store.get("badminton-active-group")) is None


def test_remove_inactive_group_keeps_selection(grouped_repository):
    first = grouped_repository.add_group("Tuesday")
    second = grouped_repository.add_group("Thursday")
    grouped_repository.remove_group(second.id)
    assert grouped_repository.state.active_group_id == first.id


def test_select_group(grouped_repository):
    grouped_repository.add_group("Tuesday")
    second = grouped_repository.add_group("Thursday")

    assert grouped_repository.select_group(second.id) == second
    assert grouped_repository.state.active_group_id == second.id

    with pytest.raises(GroupNotFoundException):
        grouped_repository.select_group("nope")
    assert grouped_repository.state.active_group_id == second.id


def test_clear_players_of_one_group(grouped_repository):
    tuesday = grouped_repository.add_group("Tuesday")
    thursday = grouped_repository.add_group("Thursday")
    grouped_repository.add_player("Alice", tuesday.id)
    bob = grouped_repository.add_player("Bob", thursday.id)

    removed = grouped_repository.clear_players(tuesday.id)

    assert [p.name for p in removed] == ["Alice"]
    assert grouped_repository.state.players == [bob]


def test_clear_players_without_group_only_clears_ungrouped(store, notifier):
    config = SessionConfig(groups_enabled=True, require_group=False)
    repository = EntityRepository(
        RosterState(), RosterPersistence(store, config), config, notifier
    )
    tuesday = repository.add_group("Tuesday")
    alice = repository.add_player("Alice", tuesday.id)
    repository.select_group(None)
    repository.add_player("Drifter")

    removed = repository.clear_players(None)

    assert [p.name for p in removed] == ["Drifter"]
    assert repository.state.players == [alice]


# ========== Courts ==========


def test_add_court(repository, store):
    court = repository.add_court(" Court 1 ")

    assert court.name == "Court 1"
    assert court.is_available is True
    assert repository.state.active_court_id == court.id
    assert _stored(store, "courts") == [court.to_dict()]


def test_remove_court_keeps_match_reference(repository):
    court = repository.add_court("Court 1")
    alice = repository.add_player("Alice")
    bob = repository.add_player("Bob")
    match = Match(id="m", type="singles", players=(alice, bob), court_id=court.id)
    repository.record_match(match)

    repository.remove_court(court.id)

    assert repository.state.courts == []
    assert repository.state.active_court_id is None
    assert repository.state.matches[0].court_id == court.id


def test_remove_active_court_reassigns(repository):
    first = repository.add_court("Court 1")
    second = repository.add_court("Court 2")
    repository.remove_court(first.id)
    assert repository.state.active_court_id == second.id


def test_remove_unknown_court(repository):
    assert repository.remove_court("nope") is None


def test_select_unknown_court(repository):
    with pytest.raises(CourtNotFoundException):
        repository.select_court("nope")
