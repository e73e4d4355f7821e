"""Banner domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Banner:
    """Advisory notice shown above the timetable."""

    id: str
    title: str
    body: str | None = None
    is_urgent: bool = False


@dataclass(frozen=True)
class BannerContext:
    """Who is asking for banners and on which screen."""

    device_id: str
    user_mode: str = "visitor"
    municipality: str | None = None
    screen: str = "transport"
