"""Protocol for carrier lookup tables."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from vis_timetables.domain.models.carrier_info import CarrierInfo


class CarrierDirectoryProtocol(Protocol):
    """Protocol for the static carrier tables."""

    def sea_line_carriers(self) -> dict[str, "CarrierInfo"]:
        """Get known carriers keyed by public line number.

        Returns:
            Mapping of line number to carrier. A carrier with ticket_url None
            sells tickets on board only.
        """
        ...

    def ticket_urls(self) -> dict[str, str]:
        """Get ticket purchase URLs keyed by operator name.

        Returns:
            Mapping of operator name to ticket shop URL.
        """
        ...
