"""Emergencies reported in the city and the routes planned to answer them."""

from __future__ import annotations

from dataclasses import dataclass, field

_VEHICLE_TYPES = {"Fire": "FireTruck", "Police": "Police"}
_DEFAULT_VEHICLE_TYPE = "Ambulance"

PRIORITY_CRITICAL = 1
PRIORITY_URGENT = 2
PRIORITY_NORMAL = 3


@dataclass
class Emergency:
    """A reported emergency and what has been assigned to it."""

    emergency_id: str
    location: str
    latitude: float = 0.0
    longitude: float = 0.0
    priority: int = PRIORITY_NORMAL
    emergency_type: str = ""
    required_specialization: str = ""
    assigned_vehicle_id: str = ""
    assigned_hospital_id: str = ""
    is_active: bool = True


@dataclass
class EmergencyRoute:
    """The path a vehicle takes: its stop, the emergency, then the hospital."""

    vehicle_id: str
    emergency_location: str
    route: list[str] = field(default_factory=list)
    total_distance: float = 0.0
    hospital_id: str = ""
    emergency_id: str = ""

    @property
    def route_length(self) -> int:
        return len(self.route)


def vehicle_type_for(emergency_type: str) -> str:
    """The kind of vehicle sent to an emergency of the given type."""
    return _VEHICLE_TYPES.get(emergency_type, _DEFAULT_VEHICLE_TYPE)


def format_emergency_id(counter: int) -> str:
    """Emergency id for a counter value, zero-padded to at least two digits."""
    return f"EMG{counter:02d}"