"""Tests for the role to pending-count strategy table."""

import pytest

from dramaturgy.domain.entities import (
    PENDING_COUNT_STRATEGIES,
    PendingCountStrategy,
    UserRole,
    counting_strategy,
)


@pytest.mark.parametrize(
    ("role", "expected"),
    [
        (UserRole.REGULAR, PendingCountStrategy.PERSONAL_RECENT_REPLIES),
        (UserRole.EXPERT, PendingCountStrategy.GLOBAL_UNSOLVED_QUESTIONS),
        (UserRole.MODERATOR, PendingCountStrategy.GLOBAL_UNSOLVED_QUESTIONS),
        (UserRole.ADMIN, PendingCountStrategy.GLOBAL_UNSOLVED_QUESTIONS),
    ],
)
def test_counting_strategy_by_role(role, expected):
    assert counting_strategy(role) is expected


def test_every_role_has_a_strategy():
    assert set(PENDING_COUNT_STRATEGIES) == set(UserRole)


def test_role_parse_is_case_insensitive():
    assert UserRole.parse("expert") is UserRole.EXPERT
    assert UserRole.parse(" Admin ") is UserRole.ADMIN
    assert counting_strategy("moderator") is PendingCountStrategy.GLOBAL_UNSOLVED_QUESTIONS


def test_role_parse_rejects_unknown_values():
    with pytest.raises(ValueError):
        UserRole.parse("superuser")
