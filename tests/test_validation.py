import pytest

from courtshuffle.exceptions import DuplicateNameException, EmptyNameException
from courtshuffle.utils.validation import (
    check_name,
    ensure_unique_name,
    validate_name_strict,
)


def test_check_name_trims():
    result = check_name("  Alice ")
    assert result
    assert result.name == "Alice"


@pytest.mark.parametrize("name", [None, "", "   "])
def test_check_name_empty(name):
    result = check_name(name, "court")
    assert not result
    assert result.error == "Please enter a court name"
    assert not result.duplicate


def test_check_name_duplicate_ignores_case():
    result = check_name(" ALICE", existing=["Bob", "alice"])
    assert not result
    assert result.duplicate
    assert result.error == "Player already exists"


def test_strict_helpers_raise():
    assert validate_name_strict(" Tuesday ", "group") == "Tuesday"
    with pytest.raises(EmptyNameException):
        validate_name_strict(" ", "group")
    with pytest.raises(DuplicateNameException):
        ensure_unique_name("Bob", ["bob"])
    ensure_unique_name("Bob", ["Alice"])
