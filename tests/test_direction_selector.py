"""Tests for direction selection."""

from vis_timetables.application.services import DirectionSelector
from vis_timetables.domain.models import Route


def _route(direction: int, label: str = "") -> Route:
    return Route(
        id=f"route-{direction}",
        direction=direction,
        direction_label=label or f"Direction {direction}",
        origin="Vis",
        destination="Split",
    )


def test_single_route_is_not_multi_direction() -> None:
    """Given a line with one route, when inspected, then no direction toggle is shown."""
    selector = DirectionSelector([_route(0)])

    assert selector.is_multi_direction is False
    assert selector.show_direction_toggle is False
    assert selector.current_route is not None
    assert selector.current_route.direction == 0


def test_two_routes_select_direction_one() -> None:
    """Given routes with directions 0 and 1, when selecting 1, then the current route is 1."""
    selector = DirectionSelector([_route(0), _route(1)])

    assert selector.is_multi_direction is True
    assert selector.select(1) is True
    assert selector.current_route is not None
    assert selector.current_route.direction == 1


def test_available_directions_are_sorted() -> None:
    """Given routes in arbitrary order, when listing directions, then they are ascending."""
    selector = DirectionSelector([_route(2), _route(0), _route(1)])

    assert selector.available_directions == [0, 1, 2]
    assert [r.direction for r in selector.routes_in_display_order] == [0, 1, 2]


def test_select_unknown_direction_keeps_previous_selection() -> None:
    """Given direction 1 selected, when selecting a missing direction, then 1 stays selected."""
    selector = DirectionSelector([_route(0), _route(1)], selected_direction=1)

    assert selector.select(5) is False
    assert selector.selected_direction == 1
    assert selector.current_route is not None
    assert selector.current_route.direction == 1


def test_stale_selection_has_no_current_route() -> None:
    """Given a selection the routes no longer offer, when inspected, then current route is None."""
    selector = DirectionSelector([_route(0)], selected_direction=1)

    assert selector.current_route is None
    assert selector.selected_direction == 1


def test_no_routes() -> None:
    """Given a line without routes, when inspected, then nothing is selectable."""
    selector = DirectionSelector([])

    assert selector.available_directions == []
    assert selector.current_route is None
    assert selector.select(0) is False
