import pytest

from smokesignal.http.profile import (
    InvalidHandleSlugError,
    ProfileTab,
    parse_handle_slug,
    profile_tab_links,
)
from smokesignal.http.tabs import TabSelector


@pytest.mark.parametrize("tab", [None, "recentlyupdated", "upcoming", "anything"])
def test_profile_tab_from_selector_is_always_recently_updated(tab):
    assert ProfileTab.from_selector(TabSelector(tab=tab)) is ProfileTab.RECENTLY_UPDATED


def test_profile_tab_display():
    assert str(ProfileTab.from_selector(TabSelector())) == "recentlyupdated"


def test_parse_handle_slug_handle():
    assert parse_handle_slug("@alice.example.com") == ("handle", "alice.example.com")


@pytest.mark.parametrize("slug", ["did:plc:abc123", "did:web:example.com"])
def test_parse_handle_slug_did(slug):
    assert parse_handle_slug(slug) == ("did", slug)


@pytest.mark.parametrize(
    "slug", ["alice.example.com", "did:key:abc", "", "did:", "plc:abc"]
)
def test_parse_handle_slug_invalid(slug):
    with pytest.raises(InvalidHandleSlugError):
        parse_handle_slug(slug)


def test_invalid_handle_slug_is_value_error():
    with pytest.raises(ValueError):
        parse_handle_slug("nobody")


def test_profile_tab_links():
    links = profile_tab_links("events.example.com", "@alice", ProfileTab.RECENTLY_UPDATED)
    assert len(links) == 1
    (link,) = links
    assert link.name == "recentlyupdated"
    assert link.label == "Recently Updated"
    assert link.active is True
    assert link.url.startswith("https://events.example.com/@alice?")
    assert "tab=upcoming&" in link.url


def test_profile_tab_links_keeps_https_base():
    (link,) = profile_tab_links(
        "https://events.example.com/", "did:plc:abc", ProfileTab.RECENTLY_UPDATED
    )
    assert link.url.startswith("https://events.example.com/did")
    assert "https://https://" not in link.url