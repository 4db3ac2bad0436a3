"""Profile page helpers: handle slugs and profile tabs."""

from __future__ import annotations

from enum import Enum

from smokesignal.http.tabs import TabLink, TabSelector
from smokesignal.http.utils import build_url

HANDLE_PREFIX = "@"
DID_PREFIXES = ("did:web:", "did:plc:")


class InvalidHandleSlugError(ValueError):
    """A profile path segment is neither ``@handle`` nor a supported DID."""

    def __str__(self) -> str:
        return "Invalid handle slug"


class ProfileTab(Enum):
    """Which list of events a profile page shows."""

    RECENTLY_UPDATED = "recentlyupdated"

    @classmethod
    def from_selector(cls, tab_selector: TabSelector) -> "ProfileTab":
        """Profiles have a single tab, whatever the selector asks for."""
        return cls.RECENTLY_UPDATED

    def __str__(self) -> str:
        return self.value


def parse_handle_slug(handle_slug: str) -> tuple[str, str]:
    """Split a slug into ``("handle", name)`` or ``("did", did)``."""
    if handle_slug.startswith(HANDLE_PREFIX):
        return "handle", handle_slug[len(HANDLE_PREFIX):]
    if handle_slug.startswith(DID_PREFIXES):
        return "did", handle_slug
    raise InvalidHandleSlugError(handle_slug)


def profile_tab_links(
    external_base: str, handle_slug: str, active_tab: ProfileTab
) -> list[TabLink]:
    """The tab links shown on a profile page."""
    return [
        TabLink(
            name=ProfileTab.RECENTLY_UPDATED.value,
            label="Recently Updated",
            url=build_url(external_base, f"/{handle_slug}", [("tab", "upcoming")]),
            active=active_tab is ProfileTab.RECENTLY_UPDATED,
        )
    ]