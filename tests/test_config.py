import json

import pytest

from courtshuffle.exceptions import InvalidConfigurationException
from courtshuffle.models import SessionConfig, load_config


def test_defaults():
    config = SessionConfig()
    assert config.groups_enabled is False
    assert config.require_group is False
    assert config.require_court is False
    assert config.key("players") == "badminton-players"
    assert config.recent_limit == 5


def test_require_group_follows_groups_enabled():
    assert SessionConfig(groups_enabled=True).require_group is True
    assert SessionConfig(groups_enabled=True, require_group=False).require_group is False


def test_require_group_without_groups_is_invalid():
    with pytest.raises(InvalidConfigurationException):
        SessionConfig(require_group=True)


def test_round_trip():
    config = SessionConfig(groups_enabled=True, require_court=True, storage_prefix="club")
    assert SessionConfig.from_dict(config.to_dict()) == config


def test_load_missing_file_gives_defaults(tmp_path):
    assert load_config(tmp_path / "nope.json") == SessionConfig()
    assert load_config(None) == SessionConfig()


def test_load_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"groups_enabled": True, "recent_limit": 10}), encoding="utf-8")

    config = load_config(path)

    assert config.groups_enabled is True
    assert config.require_group is True
    assert config.recent_limit == 10


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[]",
        json.dumps({"groups_enabled": "yes"}),
        json.dumps({"recent_limit": True}),
        json.dumps({"recent_limit": 0}),
        json.dumps({"storage_prefix": ""}),
    ],
)
def test_load_invalid_file(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(InvalidConfigurationException):
        load_config(path)
