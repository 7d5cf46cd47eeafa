"""Registry of public facilities with lookups and nearest-facility queries."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from citygrid.facility import Facility
from citygrid.geo import distance_squared, parse_coordinates, sector_coordinates
from citygrid.routing import CityGraph, route_distance

# Squared-degree distances at or beyond this are never reported as nearest.
_SEARCH_LIMIT = 1_000_000.0

_FIELDS_PER_ROW = 5


class FacilityManager:
    """Keeps every registered facility and answers searches over the city graph."""

    def __init__(self, graph: CityGraph | None = None) -> None:
        self.graph = graph
        self._by_id: dict[str, Facility] = {}
        self._by_name: dict[str, Facility] = {}

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self):
        return iter(list(self._by_id.values()))

    def __contains__(self, facility_id: object) -> bool:
        return facility_id in self._by_id

    @property
    def facility_count(self) -> int:
        return len(self._by_id)

    def add_facility(self, facility: Facility) -> bool:
        """Register a facility. Returns False if its id is already registered.

        Raises ValueError for a facility missing its id, name, type or vertex.
        """
        if not facility.is_valid():
            raise ValueError(f"incomplete facility: {facility!r}")
        if facility.facility_id in self._by_id:
            return False
        self._by_id[facility.facility_id] = facility
        self._by_name.setdefault(facility.name, facility)
        return True

    def find_by_id(self, facility_id: str) -> Facility | None:
        if not facility_id:
            return None
        return self._by_id.get(facility_id)

    def find_by_name(self, name: str) -> Facility | None:
        if not name:
            return None
        return self._by_name.get(name)

    def find_by_type(self, facility_type: str) -> list[Facility]:
        """All facilities of a type, in registration order."""
        if not facility_type:
            return []
        return [f for f in self._by_id.values() if f.facility_type == facility_type]

    def _nearest_by_path(self, stop_id: str, candidates: Iterable[Facility]) -> Facility | None:
        best: Facility | None = None
        best_distance = 0.0
        for facility in candidates:
            distance = route_distance(self.graph, stop_id, facility.vertex_id)
            if distance is None:
                continue
            if best is None or distance < best_distance:
                best, best_distance = facility, distance
        return best

    def nearest_to_stop(self, stop_id: str) -> Facility | None:
        """The facility with the shortest graph path from a stop, if any is reachable."""
        if not stop_id or self.graph is None or not self._by_id:
            return None
        return self._nearest_by_path(stop_id, self._by_id.values())

    def nearest_to(self, latitude: float, longitude: float) -> Facility | None:
        """The facility closest to a point.

        A facility's position is its graph vertex when known, otherwise the
        approximate location of its sector.
        """
        best: Facility | None = None
        best_distance = _SEARCH_LIMIT
        for facility in self._by_id.values():
            coordinates = None
            if self.graph is not None:
                coordinates = self.graph.vertex_coordinates(facility.vertex_id)
            if coordinates is None:
                coordinates = sector_coordinates(facility.sector)
            distance = distance_squared(latitude, longitude, *coordinates)
            if distance < best_distance:
                best, best_distance = facility, distance
        return best

    def nearest_of_type(self, facility_type: str, stop_id: str) -> Facility | None:
        """The reachable facility of a type with the shortest graph path from a stop."""
        if not facility_type or not stop_id or self.graph is None or not self._by_id:
            return None
        return self._nearest_by_path(stop_id, self.find_by_type(facility_type))

    def load_rows(self, rows: Iterable[Sequence[str]]) -> int:
        """Load facilities from rows of ``id, name, type, sector, "lat, lon"``.

        Each facility becomes a graph vertex joined to its nearest stop. Short
        rows, bad coordinates, incomplete and duplicate facilities are skipped.
        Returns the number loaded; raises ValueError when there is no graph.
        """
        if self.graph is None:
            raise ValueError("a city graph is needed to load facilities")
        loaded = 0
        for row in rows:
            if len(row) < _FIELDS_PER_ROW:
                continue
            facility_id, name, facility_type, sector, coordinate_text = row[:_FIELDS_PER_ROW]
            try:
                latitude, longitude = parse_coordinates(coordinate_text)
            except ValueError:
                continue
            facility = Facility(facility_id, name, facility_type, sector, facility_id)
            try:
                if not self.add_facility(facility):
                    continue
            except ValueError:
                continue
            if facility_id not in self.graph:
                self.graph.add_vertex(facility_id, name, latitude, longitude, facility)
                self.graph.connect_to_nearest_stop(facility_id)
            loaded += 1
        return loaded

    def clear(self) -> None:
        """Forget every registered facility."""
        self._by_id.clear()
        self._by_name.clear()

    def describe(self) -> str:
        """Human-readable listing of all facilities."""
        if not self._by_id:
            return "No facilities registered."
        lines = [f"Registered Facilities ({len(self._by_id)} facilities):"]
        for number, facility in enumerate(self._by_id.values(), start=1):
            lines.append(f"  [{number}] {facility.describe()}")
            lines.append("")
        return "\n".join(lines)