"""Tab selection for event and profile pages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from smokesignal.http.utils import COMMUNITY_EVENT_NSID


@dataclass(frozen=True)
class TabSelector:
    """The tab requested in a query string."""

    tab: Optional[str] = None


@dataclass(frozen=True)
class TabLink:
    """A link to one tab of a tabbed page."""

    name: str
    label: str
    url: str
    active: bool


class RSVPTab(Enum):
    """Which RSVP list of an event is shown."""

    GOING = "going"
    INTERESTED = "interested"
    NOTGOING = "notgoing"

    @classmethod
    def from_selector(cls, tab_selector: TabSelector) -> "RSVPTab":
        """Pick the tab named by the selector; anything unknown shows ``going``."""
        if tab_selector.tab == "interested":
            return cls.INTERESTED
        if tab_selector.tab == "notgoing":
            return cls.NOTGOING
        return cls.GOING

    def __str__(self) -> str:
        return self.value


def default_collection() -> str:
    """The collection an event is looked up in when none is given."""
    return COMMUNITY_EVENT_NSID