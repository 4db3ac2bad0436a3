import pytest

from smokesignal.http.tabs import (
    RSVPTab,
    TabLink,
    TabSelector,
    default_collection,
)


@pytest.mark.parametrize(
    "tab, expected",
    [
        ("going", RSVPTab.GOING),
        ("interested", RSVPTab.INTERESTED),
        ("notgoing", RSVPTab.NOTGOING),
        (None, RSVPTab.GOING),
    ],
)
def test_rsvp_tab_from_tab_selector(tab, expected):
    assert RSVPTab.from_selector(TabSelector(tab=tab)) == expected


def test_rsvp_tab_from_unknown_selector_defaults_to_going():
    assert RSVPTab.from_selector(TabSelector(tab="maybe")) == RSVPTab.GOING
    assert RSVPTab.from_selector(TabSelector(tab="")) == RSVPTab.GOING


def test_rsvp_tab_from_default_selector():
    assert RSVPTab.from_selector(TabSelector()) == RSVPTab.GOING


@pytest.mark.parametrize(
    "tab, expected",
    [
        ("going", "going"),
        ("interested", "interested"),
        ("notgoing", "notgoing"),
        (None, "going"),
    ],
)
def test_rsvp_tab_display(tab, expected):
    assert str(RSVPTab.from_selector(TabSelector(tab=tab))) == expected


def test_rsvp_tab_round_trip_through_selector():
    for tab in RSVPTab:
        assert RSVPTab.from_selector(TabSelector(tab=str(tab))) is tab


def test_collection_param_default():
    assert default_collection() == "community.lexicon.calendar.event"


def test_tab_link_fields():
    link = TabLink(
        name="recentlyupdated",
        label="Recently Updated",
        url="https://example.com/@someone",
        active=True,
    )
    assert link.name == "recentlyupdated"
    assert link.label == "Recently Updated"
    assert link.url == "https://example.com/@someone"
    assert link.active is True