from smokesignal.http.location_edit_status import (
    Address,
    LocationEditState,
    LocationEditStatus,
    check_location_edit_status,
)


def test_no_locations_gives_empty_editable_address():
    status = check_location_edit_status([])
    assert status.is_editable()
    assert status.address == Address(country="")
    assert status.edit_reason() is None


def test_single_address_is_editable():
    address = Address(country="US", locality="Springfield", name="Hall")
    status = check_location_edit_status([address])
    assert status.state is LocationEditState.EDITABLE
    assert status.address == address


def test_multiple_locations_not_editable():
    status = check_location_edit_status([Address(country="US"), Address(country="CA")])
    assert not status.is_editable()
    assert status.edit_reason() == "Event has multiple locations"


def test_unsupported_location_type():
    status = check_location_edit_status([{"geo": "0,0"}])
    assert not status.is_editable()
    assert status.edit_reason() == "Event has an unsupported location type"


def test_no_locations_state_reason():
    status = LocationEditStatus(LocationEditState.NO_LOCATIONS)
    assert not status.is_editable()
    assert status.edit_reason() == "Event has no locations"