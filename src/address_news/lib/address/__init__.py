"""Address library — freeform address normalization.

Public API:
    - ParsedAddress: Parsed address component dataclass
    - parse_address: Literal comma-position parser
    - DEFAULT_COUNTRY: Country applied when the third segment is absent
"""

from address_news.lib.address.parser import DEFAULT_COUNTRY, ParsedAddress, parse_address

__all__ = [
    "DEFAULT_COUNTRY",
    "ParsedAddress",
    "parse_address",
]
