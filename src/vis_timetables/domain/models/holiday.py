"""Holiday domain model."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Holiday:
    """A public holiday on which the PRAZNIK schedule applies."""

    date: date
    name_hr: str
    name_en: str

    def name(self, language: str) -> str:
        """Return the holiday name in the given language."""
        return self.name_en if language == "en" else self.name_hr
