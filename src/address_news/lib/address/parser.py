"""Comma-position parsing of freeform address strings.

Segments are mapped by position only: 0 -> city, 1 -> state,
2 -> country, 3 -> postal code. No semantic inference is attempted, so a
leading street line ("123 Main St, Springfield, IL") lands in ``city``.
"""

from dataclasses import dataclass

DEFAULT_COUNTRY = "USA"


@dataclass(frozen=True)
class ParsedAddress:
    """Address components extracted from a freeform string."""

    address_text: str
    city: str | None = None
    state: str | None = None
    country: str | None = DEFAULT_COUNTRY
    postal_code: str | None = None
    latitude: float | None = None
    longitude: float | None = None

    def to_dict(self) -> dict[str, str | float | None]:
        """Convert to a dict with keys matching the Address model columns.

        Returns:
            Dictionary of column name to value.
        """
        return {
            "address_text": self.address_text,
            "city": self.city,
            "state": self.state,
            "country": self.country,
            "postal_code": self.postal_code,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


def _segment(parts: list[str], index: int) -> str | None:
    if index < len(parts) and parts[index]:
        return parts[index]
    return None


def parse_address(address_text: str) -> ParsedAddress:
    """Split an address on commas and map segments by position.

    Coordinates are always left unset; no geocoding is performed.

    Args:
        address_text: Freeform address, already stripped of outer whitespace.

    Returns:
        ParsedAddress with empty segments mapped to None and the country
        defaulting to ``"USA"``.
    """
    parts = [part.strip() for part in address_text.split(",")]
    return ParsedAddress(
        address_text=address_text,
        city=_segment(parts, 0),
        state=_segment(parts, 1),
        country=_segment(parts, 2) or DEFAULT_COUNTRY,
        postal_code=_segment(parts, 3),
    )
