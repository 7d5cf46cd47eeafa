import pytest

from citygrid.bus import Bus
from citygrid.emergency_vehicle import EmergencyVehicle


@pytest.fixture
def ambulance():
    return EmergencyVehicle("AMB01", "Ambulance", "A1", "Rescue", "Stop1")


def test_new_vehicle_is_available(ambulance):
    assert ambulance.is_available is True
    assert ambulance.current_emergency_id == ""
    assert ambulance.priority_level == 1


def test_vehicle_is_a_bus(ambulance):
    assert isinstance(ambulance, Bus)
    assert ambulance.add_stop("Stop2") is True
    assert ambulance.route == ("Stop2",)


def test_dispatch_marks_busy(ambulance):
    assert ambulance.dispatch("EMG01") is True
    assert ambulance.is_available is False
    assert ambulance.current_emergency_id == "EMG01"


def test_dispatch_busy_vehicle_fails(ambulance):
    ambulance.dispatch("EMG01")
    assert ambulance.dispatch("EMG02") is False
    assert ambulance.current_emergency_id == "EMG01"


def test_dispatch_empty_id_raises(ambulance):
    with pytest.raises(ValueError):
        ambulance.dispatch("")


def test_complete_emergency_restores_availability(ambulance):
    ambulance.dispatch("EMG01")
    assert ambulance.complete_emergency() is True
    assert ambulance.is_available is True
    assert ambulance.current_emergency_id == ""


def test_complete_without_emergency_fails(ambulance):
    assert ambulance.complete_emergency() is False


def test_priority_level_ignores_out_of_range(ambulance):
    ambulance.priority_level = 3
    assert ambulance.priority_level == 3
    ambulance.priority_level = 7
    assert ambulance.priority_level == 3
    ambulance.priority_level = 0
    assert ambulance.priority_level == 3


def test_is_valid_requires_vehicle_and_bus_fields(ambulance):
    assert ambulance.is_valid() is True
    assert EmergencyVehicle("AMB02", "Ambulance", "", "Rescue").is_valid() is False
    assert EmergencyVehicle("", "Ambulance", "A1", "Rescue").is_valid() is False
    assert EmergencyVehicle("AMB02", "", "A1", "Rescue").is_valid() is False


def test_describe_available(ambulance):
    lines = ambulance.describe().splitlines()
    assert lines[0] == "Vehicle ID: AMB01"
    assert "Priority Level: 1 (Critical)" in lines
    assert "Status: Available" in lines
    assert not any(line.startswith("Current Emergency") for line in lines)
    assert lines[-1] == "Navigation: Uses city graph edges (automatic pathfinding)"


def test_describe_on_call(ambulance):
    ambulance.priority_level = 2
    ambulance.dispatch("EMG05")
    lines = ambulance.describe().splitlines()
    assert "Priority Level: 2 (Urgent)" in lines
    assert "Status: On Emergency Call" in lines
    assert "Current Emergency: EMG05" in lines