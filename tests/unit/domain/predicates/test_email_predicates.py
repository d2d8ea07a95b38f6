"""Tests for domain/predicates/email_predicates.py."""

import pytest

from filterkit.domain.exceptions import PredicateConstructionError
from filterkit.domain.model.address import Address
from filterkit.domain.predicates.algebra import any_of, not_
from filterkit.domain.predicates.email_predicates import (
    body_contains,
    body_does_not_contain,
    recipient_in,
    recipient_is,
    recipient_is_not,
    sender_in,
    sender_is,
    sender_is_not,
    subject_contains,
    subject_does_not_contain,
)
from filterkit.domain.predicates.kinds import RecordKind
from filterkit.domain.predicates.nodes import (
    BodyContains,
    RecipientEquals,
    SenderEquals,
    SubjectContains,
)


class TestAtomConstructors:
    """Tests for primitive email atoms."""

    def test_sender_is_from_str(self) -> None:
        """String converted to Address."""
        assert sender_is("a@x.com") == SenderEquals(Address("a@x.com"))

    def test_sender_is_from_address(self) -> None:
        """Address accepted as-is."""
        assert sender_is(Address("a@x.com")) == SenderEquals(Address("a@x.com"))

    def test_recipient_is(self) -> None:
        """recipient_is builds RecipientEquals."""
        assert recipient_is("john@doe.com") == RecipientEquals(Address("john@doe.com"))

    def test_subject_contains(self) -> None:
        """subject_contains builds SubjectContains."""
        assert subject_contains("discount") == SubjectContains("discount")

    def test_body_contains(self) -> None:
        """body_contains builds BodyContains."""
        assert body_contains("N95") == BodyContains("N95")

    def test_subject_is_email(self) -> None:
        """All email atoms range over emails."""
        assert sender_is("a@x.com").subject == RecordKind.EMAIL

    def test_invalid_address_raises(self) -> None:
        """Malformed address surfaces as construction error."""
        with pytest.raises(PredicateConstructionError, match="sender_is"):
            sender_is("not an address")

    def test_wrong_type_raises(self) -> None:
        """Non-address type surfaces as construction error."""
        with pytest.raises(PredicateConstructionError, match="recipient_is"):
            recipient_is(42)  # type: ignore[arg-type]

    def test_empty_phrase_raises(self) -> None:
        """Empty phrase rejected."""
        with pytest.raises(PredicateConstructionError):
            body_contains("")


class TestNegatedHelpers:
    """Tests for *_not / does_not_contain helpers."""

    def test_sender_is_not(self) -> None:
        """sender_is_not = not_(sender_is)."""
        assert sender_is_not("a@x.com") == not_(sender_is("a@x.com"))

    def test_recipient_is_not(self) -> None:
        """recipient_is_not = not_(recipient_is)."""
        assert recipient_is_not("a@x.com") == not_(recipient_is("a@x.com"))

    def test_subject_does_not_contain(self) -> None:
        """subject_does_not_contain = not_(subject_contains)."""
        assert subject_does_not_contain("x") == not_(subject_contains("x"))

    def test_body_does_not_contain(self) -> None:
        """body_does_not_contain = not_(body_contains)."""
        assert body_does_not_contain("x") == not_(body_contains("x"))


class TestMembershipHelpers:
    """Tests for sender_in / recipient_in."""

    def test_sender_in(self) -> None:
        """sender_in = any_of(sender_is ...) in input order."""
        expected = any_of([sender_is("a@x.com"), sender_is("b@x.com")])
        assert sender_in(["a@x.com", "b@x.com"]) == expected

    def test_recipient_in_dedupes(self) -> None:
        """Duplicates collapse, first occurrence kept."""
        expected = any_of([recipient_is("a@x.com"), recipient_is("b@x.com")])
        assert recipient_in(["a@x.com", "b@x.com", Address("a@x.com")]) == expected

    def test_empty_is_never(self) -> None:
        """Empty membership = any_of([]) = never()."""
        assert sender_in([]) == any_of([])

    def test_bare_str_raises(self) -> None:
        """A single str is not an address collection."""
        with pytest.raises(PredicateConstructionError, match="not str"):
            sender_in("a@x.com")

    def test_invalid_member_raises(self) -> None:
        """Invalid member raises with helper name."""
        with pytest.raises(PredicateConstructionError, match="recipient_in"):
            recipient_in(["a@x.com", "bad"])
