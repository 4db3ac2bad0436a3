"""Whether an event's location can be edited through the web form."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence


@dataclass(frozen=True)
class Address:
    """A postal address location."""

    country: str
    postal_code: Optional[str] = None
    region: Optional[str] = None
    locality: Optional[str] = None
    street: Optional[str] = None
    name: Optional[str] = None


class LocationEditState(Enum):
    EDITABLE = "editable"
    MULTIPLE_LOCATIONS = "multiple_locations"
    UNSUPPORTED_LOCATION_TYPE = "unsupported_location_type"
    NO_LOCATIONS = "no_locations"


_REASONS = {
    LocationEditState.EDITABLE: None,
    LocationEditState.MULTIPLE_LOCATIONS: "Event has multiple locations",
    LocationEditState.UNSUPPORTED_LOCATION_TYPE: "Event has an unsupported location type",
    LocationEditState.NO_LOCATIONS: "Event has no locations",
}


@dataclass(frozen=True)
class LocationEditStatus:
    """The editability of an event's location; ``address`` is set when editable."""

    state: LocationEditState
    address: Optional[Address] = None

    def is_editable(self) -> bool:
        return self.state is LocationEditState.EDITABLE

    def edit_reason(self) -> Optional[str]:
        """A human-readable reason the location cannot be edited, if any."""
        return _REASONS[self.state]


def check_location_edit_status(locations: Sequence[Any]) -> LocationEditStatus:
    """Decide editability: none gives an empty address, one address is editable."""
    if not locations:
        return LocationEditStatus(LocationEditState.EDITABLE, Address(country=""))
    if len(locations) > 1:
        return LocationEditStatus(LocationEditState.MULTIPLE_LOCATIONS)
    (location,) = locations
    if isinstance(location, Address):
        return LocationEditStatus(LocationEditState.EDITABLE, location)
    return LocationEditStatus(LocationEditState.UNSUPPORTED_LOCATION_TYPE)