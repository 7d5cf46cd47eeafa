import pytest

from citygrid.emergency import (
    Emergency,
    EmergencyRoute,
    format_emergency_id,
    vehicle_type_for,
)


@pytest.mark.parametrize(
    "emergency_type, expected",
    [
        ("Fire", "FireTruck"),
        ("Police", "Police"),
        ("Medical", "Ambulance"),
        ("Anything", "Ambulance"),
    ],
)
def test_vehicle_type_for(emergency_type, expected):
    assert vehicle_type_for(emergency_type) == expected


@pytest.mark.parametrize(
    "counter, expected",
    [(1, "EMG01"), (9, "EMG09"), (10, "EMG10"), (123, "EMG123")],
)
def test_format_emergency_id(counter, expected):
    assert format_emergency_id(counter) == expected


def test_emergency_starts_active_and_unassigned():
    emergency = Emergency("EMG01", "S1", priority=1, emergency_type="Medical")
    assert emergency.is_active is True
    assert emergency.assigned_vehicle_id == ""
    assert emergency.assigned_hospital_id == ""


def test_route_length_follows_route():
    route = EmergencyRoute("AMB01", "S2", ["S1", "S2", "S3"], 5.0)
    assert route.route_length == 3
    assert EmergencyRoute("AMB01", "S2").route_length == 0


def test_routes_do_not_share_default_lists():
    first = EmergencyRoute("A", "S1")
    second = EmergencyRoute("B", "S1")
    first.route.append("S1")
    assert second.route == []