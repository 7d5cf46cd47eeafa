"""Emergency vehicles: ambulances, fire trucks and police cars."""

from __future__ import annotations

from collections.abc import Iterable

from citygrid.bus import Bus

_PRIORITY_LABELS = {1: "Critical", 2: "Urgent", 3: "Normal"}


class EmergencyVehicle(Bus):
    """A vehicle that moves over the city graph and answers emergency calls."""

    def __init__(
        self,
        vehicle_id: str = "",
        vehicle_type: str = "",
        bus_no: str = "",
        company: str = "",
        current_stop_id: str = "",
        route: Iterable[str] | None = None,
    ) -> None:
        super().__init__(bus_no, company, current_stop_id, route)
        self.vehicle_id = vehicle_id
        self.vehicle_type = vehicle_type
        self.is_available = True
        self._priority_level = 1
        self.current_emergency_id = ""

    @property
    def priority_level(self) -> int:
        """1 = critical, 2 = urgent, 3 = normal."""
        return self._priority_level

    @priority_level.setter
    def priority_level(self, level: int) -> None:
        # Levels outside 1..3 leave the current level unchanged.
        if level in _PRIORITY_LABELS:
            self._priority_level = level

    def dispatch(self, emergency_id: str) -> bool:
        """Send the vehicle to an emergency. Returns False if it is busy."""
        if not emergency_id:
            raise ValueError("emergency id must not be empty")
        if not self.is_available:
            return False
        self.current_emergency_id = emergency_id
        self.is_available = False
        return True

    def complete_emergency(self) -> bool:
        """Finish the current call. Returns False if there was none."""
        if not self.current_emergency_id:
            return False
        self.current_emergency_id = ""
        self.is_available = True
        return True

    def is_valid(self) -> bool:
        return bool(self.vehicle_id) and bool(self.vehicle_type) and super().is_valid()

    def describe(self) -> str:
        """Multi-line, human-readable summary of the vehicle."""
        label = _PRIORITY_LABELS.get(self._priority_level, "Normal")
        lines = [
            f"Vehicle ID: {self.vehicle_id}",
            f"Type: {self.vehicle_type}",
            f"Bus Number: {self.bus_no}",
            f"Company: {self.company}",
            f"Current Stop: {self.current_stop_id}",
            f"Priority Level: {self._priority_level} ({label})",
            f"Status: {'Available' if self.is_available else 'On Emergency Call'}",
        ]
        if not self.is_available and self.current_emergency_id:
            lines.append(f"Current Emergency: {self.current_emergency_id}")
        lines.append("Navigation: Uses city graph edges (automatic pathfinding)")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"EmergencyVehicle(vehicle_id={self.vehicle_id!r}, "
            f"vehicle_type={self.vehicle_type!r}, bus_no={self.bus_no!r}, "
            f"current_stop_id={self.current_stop_id!r}, "
            f"is_available={self.is_available!r})"
        )