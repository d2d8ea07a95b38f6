"""Tests for application/services/selection.py."""

from collections.abc import Iterator

from filterkit.application.services.selection import (
    Partition,
    count,
    first_match,
    partition,
    select,
)
from filterkit.domain.model.email import Email
from filterkit.domain.model.schedule import DayOfWeek
from filterkit.domain.predicates import days_of_the_week, never, sender_is
from tests.factories import make_email, make_time

INBOX = (
    make_email(sender="a@x.com", subject="1"),
    make_email(sender="b@x.com", subject="2"),
    make_email(sender="a@x.com", subject="3"),
)


class TestSelect:
    """Tests for select."""

    def test_keeps_order(self) -> None:
        """Matching records in input order."""
        assert select(INBOX, sender_is("a@x.com")) == (INBOX[0], INBOX[2])

    def test_none_match(self) -> None:
        """No matches = empty tuple."""
        assert select(INBOX, never()) == ()

    def test_accepts_generator(self) -> None:
        """Any iterable accepted."""
        assert len(select((e for e in INBOX), sender_is("b@x.com"))) == 1


class TestPartition:
    """Tests for partition."""

    def test_split(self) -> None:
        """Every record lands in exactly one side."""
        result = partition(INBOX, sender_is("a@x.com"))
        assert result == Partition(matched=(INBOX[0], INBOX[2]), rejected=(INBOX[1],))
        assert result.total == 3

    def test_empty_input(self) -> None:
        """Empty input = empty partition."""
        assert partition([], sender_is("a@x.com")).total == 0

    def test_schedule(self) -> None:
        """Works with Time records."""
        times = [make_time(day=DayOfWeek.MONDAY), make_time(day=DayOfWeek.FRIDAY)]
        result = partition(times, days_of_the_week(DayOfWeek.FRIDAY))
        assert result.matched == (times[1],)


class TestFirstMatch:
    """Tests for first_match."""

    def test_first(self) -> None:
        """Returns first matching record."""
        assert first_match(INBOX, sender_is("a@x.com")) is INBOX[0]

    def test_none(self) -> None:
        """No match = None."""
        assert first_match(INBOX, sender_is("c@x.com")) is None

    def test_stops_early(self) -> None:
        """Does not consume past the first match."""
        consumed: list[int] = []

        def records() -> Iterator[Email]:
            for i, e in enumerate(INBOX):
                consumed.append(i)
                yield e

        first_match(records(), sender_is("a@x.com"))
        assert consumed == [0]


class TestCount:
    """Tests for count."""

    def test_count(self) -> None:
        """Counts matches."""
        assert count(INBOX, sender_is("a@x.com")) == 2
        assert count(INBOX, never()) == 0
