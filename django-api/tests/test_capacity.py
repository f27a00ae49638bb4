"""Unit tests for the capacity evaluator.

Run with: pytest tests/test_capacity.py -v
"""

import pytest

from events.domain import Participant
from events.services.capacity import can_admit, count_named_participants

from fakes import make_event


class TestCanAdmit:
    """can_admit(event, current, additional)"""

    @pytest.mark.parametrize("max_attendees", [None, 0])
    @pytest.mark.parametrize("current", [0, 5, 500])
    def test_unset_or_zero_max_always_admits(self, max_attendees, current):
        event = make_event(max_attendees=max_attendees, show_capacity=True)
        assert can_admit(event, current, 3).admit

    @pytest.mark.parametrize("current", [0, 10, 11, 1000])
    def test_hidden_capacity_always_admits(self, current):
        event = make_event(max_attendees=10, show_capacity=False)
        assert can_admit(event, current, 2).admit

    @pytest.mark.parametrize(
        "current, expected",
        [(0, True), (9, True), (10, False), (11, False)],
    )
    def test_solo_signup_admitted_iff_below_max(self, current, expected):
        event = make_event(max_attendees=10)
        assert can_admit(event, current, 0).admit is expected

    @pytest.mark.parametrize(
        "current, additional, expected",
        [(0, 1, True), (0, 2, False), (1, 0, True), (1, 1, False), (2, 0, False)],
    )
    def test_additional_participants_count_toward_max(self, current, additional, expected):
        event = make_event(max_attendees=2)
        assert can_admit(event, current, additional).admit is expected


class TestCountNamedParticipants:
    def test_only_named_participants_count(self):
        participants = [
            Participant("Bob", "bob@example.com"),
            Participant("   ", "ghost@example.com"),
            Participant(""),
            Participant(" Cara "),
        ]
        assert count_named_participants(participants) == 2

    def test_empty(self):
        assert count_named_participants([]) == 0
