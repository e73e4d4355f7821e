"""Carrier directory loader."""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Any

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]  # Fallback for older Python

from vis_timetables.adapters.config.app_config import AppConfig
from vis_timetables.domain.contracts.carrier_directory import CarrierDirectoryProtocol
from vis_timetables.domain.models.carrier_info import CarrierInfo

logger = logging.getLogger(__name__)

PACKAGED_CARRIERS_FILE = "carriers.toml"


class StaticCarrierDirectory(CarrierDirectoryProtocol):
    """In-memory carrier tables."""

    def __init__(
        self,
        sea_line_carriers: dict[str, CarrierInfo],
        ticket_urls: dict[str, str],
    ) -> None:
        """Initialize the directory.

        Args:
            sea_line_carriers: Carrier per public line number.
            ticket_urls: Ticket shop URL per operator name.
        """
        self._sea_line_carriers = dict(sea_line_carriers)
        self._ticket_urls = dict(ticket_urls)

    def sea_line_carriers(self) -> dict[str, CarrierInfo]:
        return dict(self._sea_line_carriers)

    def ticket_urls(self) -> dict[str, str]:
        return dict(self._ticket_urls)


class CarrierDirectoryLoader:
    """Loads carrier tables from TOML."""

    @staticmethod
    def load(config: AppConfig) -> StaticCarrierDirectory:
        """Load the carrier directory configured in app config.

        Uses carriers_file when set, otherwise the packaged table.
        """
        if config.carriers_file:
            config_path = Path(config.carriers_file)
            if not config_path.exists():
                raise FileNotFoundError(f"Carriers file not found: {config_path}")
            with open(config_path, "rb") as f:
                toml_data = tomllib.load(f)
            logger.info(f"Loaded carriers from {config_path}")
        else:
            packaged = resources.files("vis_timetables.data").joinpath(PACKAGED_CARRIERS_FILE)
            with packaged.open("rb") as f:
                toml_data = tomllib.load(f)

        return CarrierDirectoryLoader.parse(toml_data)

    @staticmethod
    def parse(toml_data: dict[str, Any]) -> StaticCarrierDirectory:
        """Build a carrier directory from parsed TOML data.

        Raises ValueError if an entry is malformed.
        """
        ticket_urls = toml_data.get("ticket_urls", {})
        if not isinstance(ticket_urls, dict):
            raise ValueError("TOML config 'ticket_urls' must be a table")
        ticket_urls = {str(name): str(url) for name, url in ticket_urls.items()}

        sea_lines = toml_data.get("sea_lines", [])
        if not isinstance(sea_lines, list):
            raise ValueError("TOML config 'sea_lines' must be a list")

        sea_line_carriers: dict[str, CarrierInfo] = {}
        for entry in sea_lines:
            if not isinstance(entry, dict):
                raise ValueError("Each 'sea_lines' entry must be a table")

            line_number = entry.get("line_number")
            carrier = entry.get("carrier")
            if not line_number or not carrier:
                raise ValueError("Each 'sea_lines' entry needs 'line_number' and 'carrier'")
            line_number = str(line_number)
            if line_number in sea_line_carriers:
                raise ValueError(f"Duplicate sea line {line_number} in carriers config")

            if entry.get("boarding_only", False):
                ticket_url = None
            else:
                ticket_url = entry.get("ticket_url") or ticket_urls.get(carrier)
                if ticket_url is None:
                    raise ValueError(
                        f"Sea line {line_number}: set 'ticket_url', add '{carrier}' to "
                        f"'ticket_urls', or mark it 'boarding_only'"
                    )

            sea_line_carriers[line_number] = CarrierInfo(name=str(carrier), ticket_url=ticket_url)

        return StaticCarrierDirectory(sea_line_carriers=sea_line_carriers, ticket_urls=ticket_urls)
