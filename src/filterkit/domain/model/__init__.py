"""Domain model: records evaluated by predicates."""

from filterkit.domain.model.address import Address
from filterkit.domain.model.email import Email, as_address
from filterkit.domain.model.schedule import DayOfWeek, Time

__all__ = [
    "Address",
    "DayOfWeek",
    "Email",
    "Time",
    "as_address",
]
