"""Email address value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Address:
    """Single email address.

    Attributes:
        email_address: Raw address, "local@domain"
    """

    email_address: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.email_address, str):
            raise TypeError(f"email_address must be str, got {type(self.email_address).__name__}")
        if not self.email_address.strip():
            raise ValueError("email_address must not be empty")
        local, sep, domain = self.email_address.partition("@")
        if not sep or not local or not domain or "@" in domain:
            raise ValueError(
                f"email_address must look like local@domain, got {self.email_address!r}"
            )

    def __str__(self) -> str:
        """Format as raw address."""
        return self.email_address
