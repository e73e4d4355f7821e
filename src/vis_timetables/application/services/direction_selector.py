"""Direction selection over the routes of a line."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vis_timetables.domain.models.line import Route

logger = logging.getLogger(__name__)


class DirectionSelector:
    """Tracks the selected direction of a line and validates switches.

    The selection is kept even when it no longer matches any route (e.g.
    after the line was re-fetched); current_route is then None instead of
    silently falling back to direction 0.
    """

    def __init__(self, routes: list[Route], selected_direction: int = 0) -> None:
        """Initialize the selector.

        Args:
            routes: Routes of the line, one per direction.
            selected_direction: Currently selected direction index.
        """
        self._routes = sorted(routes, key=lambda r: r.direction)
        self._selected_direction = selected_direction

    @property
    def selected_direction(self) -> int:
        return self._selected_direction

    @property
    def available_directions(self) -> list[int]:
        """Direction indices of the line, ascending."""
        return [route.direction for route in self._routes]

    @property
    def is_multi_direction(self) -> bool:
        return len(self._routes) > 1

    @property
    def show_direction_toggle(self) -> bool:
        """Whether direction tabs are rendered at all (never shown disabled)."""
        return self.is_multi_direction

    @property
    def routes_in_display_order(self) -> list[Route]:
        return list(self._routes)

    @property
    def current_route(self) -> Route | None:
        """Route matching the selection, or None if the selection is stale."""
        for route in self._routes:
            if route.direction == self._selected_direction:
                return route
        return None

    def select(self, direction: int) -> bool:
        """Select a direction.

        Args:
            direction: Direction index to switch to.

        Returns:
            True if direction is now selected, False if the line does not
            offer it (the previous selection is kept).
        """
        if direction not in self.available_directions:
            logger.debug(
                f"Ignoring direction {direction}, available: {self.available_directions}"
            )
            return False
        self._selected_direction = direction
        return True
