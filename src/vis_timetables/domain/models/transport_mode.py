"""Transport mode domain model."""

from enum import Enum


class TransportMode(str, Enum):
    """Kind of transport a line belongs to."""

    ROAD = "road"
    SEA = "sea"
