"""Email message value object."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from filterkit.domain.model.address import Address


@dataclass(frozen=True, slots=True)
class Email:
    """Email message, the record filtered by email predicates.

    Attributes:
        sender: Sending address
        to: Recipient addresses (may be empty)
        subject: Subject line
        body: Message body
    """

    sender: Address
    to: tuple[Address, ...]
    subject: str
    body: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.sender, Address):
            raise TypeError(f"sender must be Address, got {type(self.sender).__name__}")
        if not isinstance(self.to, tuple):
            raise TypeError(f"to must be tuple, got {type(self.to).__name__}")
        for recipient in self.to:
            if not isinstance(recipient, Address):
                raise TypeError(f"recipients must be Address, got {type(recipient).__name__}")
        if not isinstance(self.subject, str):
            raise TypeError(f"subject must be str, got {type(self.subject).__name__}")
        if not isinstance(self.body, str):
            raise TypeError(f"body must be str, got {type(self.body).__name__}")

    @classmethod
    def create(
        cls,
        sender: Address | str,
        to: Iterable[Address | str],
        subject: str = "",
        body: str = "",
    ) -> Email:
        """Build Email from plain strings or Address objects.

        Args:
            sender: Sender address
            to: Recipient addresses, any iterable
            subject: Subject line
            body: Message body

        Returns:
            Frozen Email
        """
        if isinstance(to, str):
            raise TypeError("to must be an iterable of addresses, not a single str")
        return cls(
            sender=as_address(sender),
            to=tuple(as_address(a) for a in to),
            subject=subject,
            body=body,
        )


def as_address(value: Address | str) -> Address:
    """Coerce str to Address. Address passes through.

    Raises:
        TypeError: If value is neither Address nor str
    """
    if isinstance(value, Address):
        return value
    if isinstance(value, str):
        return Address(value)
    raise TypeError(f"expected Address or str, got {type(value).__name__}")
