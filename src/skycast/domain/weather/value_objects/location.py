"""Location value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """A place returned by location search.

    ``id`` and ``url`` are only provided by the search endpoint; the
    forecast endpoint describes its location without them.
    """

    id: int | None
    name: str
    region: str | None
    country: str
    lat: float | None = None
    lon: float | None = None
    url: str | None = None

    @property
    def display_name(self) -> str:
        parts = [self.name, self.region, self.country]
        return ", ".join(part for part in parts if part)
