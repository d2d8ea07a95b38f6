"""Tests for application/services/evaluator.py.

Tests:
- Constants, atoms, NOT, AND semantics
- Schedule atoms against Time
- Argument validation (FAIL-FIRST)
- Deep trees evaluate without recursion
"""

import pytest

from filterkit.application.services.evaluator import evaluate, match_atom
from filterkit.domain.model.schedule import DayOfWeek
from filterkit.domain.predicates import (
    all_of,
    always,
    and_,
    any_of,
    body_contains,
    days_of_the_week,
    hours_of_the_day,
    minutes_of_the_hour,
    months_of_the_year,
    never,
    none_of,
    not_,
    recipient_is,
    sender_is,
    subject_contains,
    weeks_of_the_month,
)
from tests.factories import make_email, make_time


class TestConstants:
    """Tests for always/never evaluation."""

    def test_always_true(self) -> None:
        """always() holds for emails and times."""
        assert evaluate(always(), make_email()) is True
        assert evaluate(always(), make_time()) is True

    def test_never_false(self) -> None:
        """never() holds for nothing."""
        assert evaluate(never(), make_email()) is False
        assert evaluate(never(), make_time()) is False


class TestEmailAtoms:
    """Tests for email atom field tests."""

    def test_sender_is(self) -> None:
        """Sender equality."""
        assert evaluate(sender_is("a@x.com"), make_email(sender="a@x.com")) is True
        assert evaluate(sender_is("a@x.com"), make_email(sender="b@x.com")) is False

    def test_recipient_is_membership(self) -> None:
        """Recipient membership among several."""
        email = make_email(to=["b@x.com", "john@doe.com"])
        assert evaluate(recipient_is("john@doe.com"), email) is True
        assert evaluate(recipient_is("c@x.com"), email) is False

    def test_recipient_is_no_recipients(self) -> None:
        """Empty recipient list matches no recipient."""
        assert evaluate(recipient_is("b@x.com"), make_email(to=[])) is False

    def test_subject_contains_substring(self) -> None:
        """Substring, not whole-word, match."""
        assert evaluate(subject_contains("count"), make_email(subject="50% discount")) is True

    def test_subject_contains_case_sensitive(self) -> None:
        """Case-sensitive match."""
        assert evaluate(subject_contains("Discount"), make_email(subject="discount")) is False

    def test_body_contains(self) -> None:
        """Body substring test does not look at subject."""
        email = make_email(subject="N95", body="masks")
        assert evaluate(body_contains("N95"), email) is False
        assert evaluate(body_contains("mask"), email) is True


class TestTimeAtoms:
    """Tests for schedule atom field tests."""

    def test_minutes(self) -> None:
        """Minute membership."""
        assert evaluate(minutes_of_the_hour(0, 30), make_time(minute=30)) is True
        assert evaluate(minutes_of_the_hour(0, 30), make_time(minute=31)) is False

    def test_hours(self) -> None:
        """Hour membership."""
        assert evaluate(hours_of_the_day(6), make_time(hour=6)) is True
        assert evaluate(hours_of_the_day(6), make_time(hour=7)) is False

    def test_days(self) -> None:
        """Day membership."""
        schedule = days_of_the_week(DayOfWeek.WEDNESDAY)
        assert evaluate(schedule, make_time(day=DayOfWeek.WEDNESDAY)) is True
        assert evaluate(schedule, make_time(day=DayOfWeek.TUESDAY)) is False

    def test_weeks(self) -> None:
        """Week-of-month membership."""
        assert evaluate(weeks_of_the_month(5), make_time(week=5)) is True
        assert evaluate(weeks_of_the_month(5), make_time(week=4)) is False

    def test_months(self) -> None:
        """Month membership."""
        assert evaluate(months_of_the_year(1, 7), make_time(month=7)) is True
        assert evaluate(months_of_the_year(1, 7), make_time(month=8)) is False


class TestCombinators:
    """Tests for NOT and AND interpretation."""

    def test_not_inverts(self) -> None:
        """not_ inverts atom result."""
        email = make_email(sender="a@x.com")
        assert evaluate(not_(sender_is("a@x.com")), email) is False
        assert evaluate(not_(sender_is("z@x.com")), email) is True

    def test_and_truth_table(self) -> None:
        """and_ is true only when both operands are."""
        email = make_email()
        t, f = always(), never()
        assert evaluate(and_(t, t), email) is True
        assert evaluate(and_(t, f), email) is False
        assert evaluate(and_(f, t), email) is False
        assert evaluate(and_(f, f), email) is False

    def test_nested(self) -> None:
        """Nesting interprets structurally."""
        email = make_email(subject="discount", body="N95")
        tree = not_(and_(subject_contains("discount"), not_(body_contains("N95"))))
        assert evaluate(tree, email) is True

    def test_returns_bool(self) -> None:
        """Result is a real bool."""
        assert type(evaluate(sender_is("a@x.com"), make_email())) is bool


class TestDeepTrees:
    """Evaluation is iterative: deep trees stay total."""

    def test_deep_all_of(self) -> None:
        """10 000-deep conjunction evaluates."""
        tree = all_of([sender_is("a@x.com")] * 10_000)
        assert evaluate(tree, make_email(sender="a@x.com")) is True
        assert evaluate(tree, make_email(sender="b@x.com")) is False

    def test_deep_any_of(self) -> None:
        """10 000-deep derived disjunction evaluates."""
        tree = any_of([sender_is(f"u{i}@x.com") for i in range(10_000)])
        assert evaluate(tree, make_email(sender="u9999@x.com")) is True
        assert evaluate(tree, make_email(sender="a@x.com")) is False

    def test_deep_negation_chain(self) -> None:
        """Even-length NOT chain is identity."""
        tree = always()
        for _ in range(10_000):
            tree = not_(tree)
        assert evaluate(tree, make_email()) is True

    def test_deep_none_of(self) -> None:
        """none_of over many predicates."""
        tree = none_of([subject_contains(str(i)) for i in range(5_000)])
        assert evaluate(tree, make_email(subject="x")) is True
        assert evaluate(tree, make_email(subject="4999")) is False


class TestArgumentValidation:
    """Tests for evaluate FAIL-FIRST argument checks."""

    def test_non_predicate_raises(self) -> None:
        """Callables are not predicates."""
        with pytest.raises(TypeError, match="predicate must be a predicate"):
            evaluate(lambda e: True, make_email())  # type: ignore[arg-type]

    def test_non_record_raises(self) -> None:
        """Unknown record type raises."""
        with pytest.raises(TypeError, match="record must be Email or Time"):
            evaluate(always(), {"sender": "a@x.com"})  # type: ignore[arg-type]

    def test_email_predicate_on_time_raises(self) -> None:
        """Email predicate against Time raises before evaluating."""
        with pytest.raises(TypeError, match="EMAIL records"):
            evaluate(sender_is("a@x.com"), make_time())

    def test_schedule_on_email_raises(self) -> None:
        """Schedule against Email raises before evaluating."""
        with pytest.raises(TypeError, match="TIME records"):
            evaluate(not_(hours_of_the_day(6)), make_email())


class TestMatchAtom:
    """Tests for match_atom directly."""

    def test_combinator_is_not_atom(self) -> None:
        """Combinators are not atoms."""
        with pytest.raises(TypeError, match="cannot test And"):
            match_atom(and_(always(), always()), make_email())

    def test_wrong_record_kind(self) -> None:
        """Atom against wrong record raises."""
        with pytest.raises(TypeError, match="cannot test HourOfDayIn against Email"):
            match_atom(hours_of_the_day(1), make_email())
