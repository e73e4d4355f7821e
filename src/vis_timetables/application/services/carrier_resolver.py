"""Resolution of the carrier and ticket channel of a line."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from vis_timetables.domain.models.carrier_info import CarrierInfo, TicketDisplay

if TYPE_CHECKING:
    from vis_timetables.domain.contracts.carrier_directory import CarrierDirectoryProtocol
    from vis_timetables.domain.models.line import Contact

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CarrierLookup:
    """Inputs every carrier rule sees."""

    line_number: str | None
    contacts: list[Contact]
    sea_line_carriers: dict[str, CarrierInfo]
    ticket_urls: dict[str, str]

    @property
    def operator(self) -> str | None:
        """Operator of the first contact, if any."""
        if not self.contacts:
            return None
        return self.contacts[0].operator


@dataclass(frozen=True)
class CarrierRule:
    """A predicate and the result it produces when it matches."""

    name: str
    matches: Callable[[CarrierLookup], bool]
    result: Callable[[CarrierLookup], CarrierInfo | None]


def _has_sea_line_entry(lookup: CarrierLookup) -> bool:
    return lookup.line_number is not None and lookup.line_number in lookup.sea_line_carriers


def _sea_line_entry(lookup: CarrierLookup) -> CarrierInfo:
    return lookup.sea_line_carriers[lookup.line_number or ""]


def _operator_has_ticket_url(lookup: CarrierLookup) -> bool:
    return lookup.operator is not None and lookup.operator in lookup.ticket_urls


def _operator_with_ticket_url(lookup: CarrierLookup) -> CarrierInfo:
    operator = lookup.operator or ""
    return CarrierInfo(name=operator, ticket_url=lookup.ticket_urls[operator])


def _has_contacts(lookup: CarrierLookup) -> bool:
    return bool(lookup.contacts)


def _operator_without_ticket_url(lookup: CarrierLookup) -> CarrierInfo:
    return CarrierInfo(name=lookup.operator, ticket_url=None)


# Evaluated in order, first match wins
CARRIER_RULES: tuple[CarrierRule, ...] = (
    CarrierRule("sea_line_table", _has_sea_line_entry, _sea_line_entry),
    CarrierRule("operator_ticket_url", _operator_has_ticket_url, _operator_with_ticket_url),
    CarrierRule("operator_only", _has_contacts, _operator_without_ticket_url),
    CarrierRule("unknown", lambda _lookup: True, lambda _lookup: None),
)


class CarrierResolver:
    """Resolves which operator serves a line and where tickets are sold."""

    def __init__(
        self,
        directory: CarrierDirectoryProtocol,
        rules: tuple[CarrierRule, ...] = CARRIER_RULES,
    ) -> None:
        """Initialize the resolver.

        Args:
            directory: Source of the sea line carrier and ticket URL tables.
            rules: Ordered carrier rules, first match wins.
        """
        self._directory = directory
        self._rules = rules

    def resolve(self, line_number: str | None, contacts: list[Contact]) -> CarrierInfo | None:
        """Resolve carrier info for a line.

        Args:
            line_number: Public line number, e.g. "602".
            contacts: Contacts of the line, first one is the operator.

        Returns:
            Carrier info, or None when nothing is known about the carrier.
        """
        lookup = CarrierLookup(
            line_number=line_number,
            contacts=contacts,
            sea_line_carriers=self._directory.sea_line_carriers(),
            ticket_urls=self._directory.ticket_urls(),
        )
        for rule in self._rules:
            if rule.matches(lookup):
                logger.debug(f"Carrier for line {line_number} resolved by rule '{rule.name}'")
                return rule.result(lookup)
        return None

    @staticmethod
    def ticket_display(carrier: CarrierInfo | None) -> TicketDisplay:
        """Decide how the ticket box presents a resolved carrier."""
        if carrier is None or not carrier.name:
            return TicketDisplay.FALLBACK
        if carrier.ticket_url:
            return TicketDisplay.LINK
        return TicketDisplay.BOARDING_ONLY


def normalize_url(url: str) -> str:
    """Prefix a scheme-less website with https://."""
    return url if url.startswith("http") else f"https://{url}"
