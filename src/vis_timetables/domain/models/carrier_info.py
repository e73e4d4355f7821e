"""Carrier info domain model."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class CarrierInfo:
    """Resolved ticketing information for a line.

    ticket_url None means tickets are bought on board only.
    """

    name: str | None
    ticket_url: str | None


class TicketDisplay(str, Enum):
    """How the ticket box presents a resolved carrier."""

    LINK = "link"
    BOARDING_ONLY = "boarding_only"
    FALLBACK = "fallback"
