"""The fleet of emergency vehicles and nearest-available-vehicle searches."""

from __future__ import annotations

from collections.abc import Iterator

from citygrid.emergency_vehicle import EmergencyVehicle
from citygrid.routing import (
    CityGraph,
    complete_route_distance_to_vertex,
    route_distance,
)


class VehicleFleet:
    """Registered emergency vehicles, searched over the city graph."""

    def __init__(self, graph: CityGraph | None = None) -> None:
        self.graph = graph
        self._vehicles: dict[str, EmergencyVehicle] = {}

    def __len__(self) -> int:
        return len(self._vehicles)

    def __iter__(self) -> Iterator[EmergencyVehicle]:
        return iter(list(self._vehicles.values()))

    def __contains__(self, vehicle_id: object) -> bool:
        return vehicle_id in self._vehicles

    @property
    def vehicle_count(self) -> int:
        return len(self._vehicles)

    def add(self, vehicle: EmergencyVehicle) -> bool:
        """Register a vehicle. Returns False if its id is already registered.

        Raises ValueError for an incomplete vehicle.
        """
        if not vehicle.is_valid():
            raise ValueError(f"incomplete vehicle: {vehicle!r}")
        if vehicle.vehicle_id in self._vehicles:
            return False
        self._vehicles[vehicle.vehicle_id] = vehicle
        return True

    def find(self, vehicle_id: str) -> EmergencyVehicle | None:
        if not vehicle_id:
            return None
        return self._vehicles.get(vehicle_id)

    def available_of_type(self, vehicle_type: str) -> list[EmergencyVehicle]:
        """Available vehicles of a type, in registration order."""
        if not vehicle_type:
            return []
        return [
            v
            for v in self._vehicles.values()
            if v.vehicle_type == vehicle_type and v.is_available
        ]

    def nearest_available(self, vehicle_type: str, location: str) -> EmergencyVehicle | None:
        """The available vehicle of a type with the shortest graph path to a vertex."""
        if not vehicle_type or not location or self.graph is None:
            return None
        best: EmergencyVehicle | None = None
        best_distance = 0.0
        for vehicle in self.available_of_type(vehicle_type):
            if not vehicle.current_stop_id:
                continue
            distance = route_distance(self.graph, location, vehicle.current_stop_id)
            if distance is None:
                continue
            if best is None or distance < best_distance:
                best, best_distance = vehicle, distance
        return best

    def nearest_available_to(
        self, vehicle_type: str, latitude: float, longitude: float
    ) -> EmergencyVehicle | None:
        """The available vehicle of a type with the shortest complete route from a point.

        The route walks to the nearest stop, rides the graph and walks on to
        the vehicle's stop.
        """
        if self.graph is None:
            return None
        best: EmergencyVehicle | None = None
        best_distance = 0.0
        for vehicle in self.available_of_type(vehicle_type):
            stop_id = vehicle.current_stop_id
            if not stop_id or self.graph.vertex_coordinates(stop_id) is None:
                continue
            distance = complete_route_distance_to_vertex(
                self.graph, latitude, longitude, stop_id
            )
            if distance is None:
                continue
            if best is None or distance < best_distance:
                best, best_distance = vehicle, distance
        return best

    def available_count(self) -> int:
        return sum(1 for v in self._vehicles.values() if v.is_available)

    @staticmethod
    def _listing(header: str, vehicles: list[EmergencyVehicle]) -> str:
        lines = [header]
        for number, vehicle in enumerate(vehicles, start=1):
            lines.append("")
            lines.append(f"[{number}] {vehicle.describe()}")
            lines.append("")
        return "\n".join(lines)

    def describe(self) -> str:
        """Human-readable listing of every vehicle."""
        if not self._vehicles:
            return "No emergency vehicles registered."
        vehicles = list(self._vehicles.values())
        return self._listing(
            f"Registered Emergency Vehicles ({len(vehicles)} vehicles):", vehicles
        )

    def describe_available(self) -> str:
        """Human-readable listing of the vehicles free for dispatch."""
        vehicles = [v for v in self._vehicles.values() if v.is_available]
        if not vehicles:
            return "No available emergency vehicles."
        return self._listing(
            f"Available Emergency Vehicles ({len(vehicles)} vehicles):", vehicles
        )

    def release_all(self) -> None:
        """End every vehicle's current call."""
        for vehicle in self._vehicles.values():
            vehicle.complete_emergency()

    def clear(self) -> None:
        """Forget every registered vehicle."""
        self._vehicles.clear()