"""Registry of airports, direct flights between them and nearest-airport queries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from citygrid.airport import Airport
from citygrid.geo import haversine_km, parse_coordinates
from citygrid.routing import CityGraph

_FIELDS_PER_ROW = 5


class AirportManager:
    """Keeps every registered airport and links them on the city graph."""

    def __init__(self, graph: CityGraph | None = None) -> None:
        self.graph = graph
        self._by_id: dict[str, Airport] = {}
        self._by_name: dict[str, Airport] = {}
        self._by_code: dict[str, Airport] = {}

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator[Airport]:
        return iter(list(self._by_id.values()))

    def __contains__(self, airport_id: object) -> bool:
        return airport_id in self._by_id

    @property
    def airport_count(self) -> int:
        return len(self._by_id)

    def add_airport(self, airport: Airport) -> bool:
        """Register an airport. Returns False if its id is already registered.

        With a graph, the airport becomes a vertex joined to its nearest stop
        and to every other airport by a direct flight weighted by air distance.
        Raises ValueError for an airport missing its id, name, code or vertex.
        """
        if not airport.is_valid():
            raise ValueError(f"incomplete airport: {airport!r}")
        if airport.airport_id in self._by_id:
            return False
        self._by_id[airport.airport_id] = airport
        self._by_name.setdefault(airport.name, airport)
        self._by_code.setdefault(airport.code, airport)

        graph = self.graph
        if graph is not None:
            if airport.airport_id not in graph:
                graph.add_vertex(
                    airport.airport_id,
                    airport.name,
                    airport.latitude,
                    airport.longitude,
                    airport,
                )
                graph.connect_to_nearest_stop(airport.airport_id)
            for other in self._by_id.values():
                if other.airport_id == airport.airport_id or other.airport_id not in graph:
                    continue
                graph.add_edge(
                    airport.airport_id,
                    other.airport_id,
                    self._flight_km(airport, other),
                )
        return True

    @staticmethod
    def _flight_km(first: Airport, second: Airport) -> float:
        return haversine_km(first.latitude, first.longitude, second.latitude, second.longitude)

    def find_by_id(self, airport_id: str) -> Airport | None:
        if not airport_id:
            return None
        return self._by_id.get(airport_id)

    def find_by_name(self, name: str) -> Airport | None:
        if not name:
            return None
        return self._by_name.get(name)

    def find_by_code(self, code: str) -> Airport | None:
        if not code:
            return None
        return self._by_code.get(code)

    def nearest_to_stop(self, stop_id: str) -> Airport | None:
        """The airport closest to a vertex of the graph, or None if unknown."""
        if not stop_id or self.graph is None or not self._by_id:
            return None
        coordinates = self.graph.vertex_coordinates(stop_id)
        if coordinates is None:
            return None
        return self.nearest_to(*coordinates)

    def nearest_to(self, latitude: float, longitude: float) -> Airport | None:
        """The airport with the shortest great-circle distance to a point."""
        best: Airport | None = None
        best_distance = 0.0
        for airport in self._by_id.values():
            distance = haversine_km(latitude, longitude, airport.latitude, airport.longitude)
            if best is None or distance < best_distance:
                best, best_distance = airport, distance
        return best

    def _require(self, airport_id: str) -> Airport:
        airport = self.find_by_id(airport_id)
        if airport is None:
            raise KeyError(f"unknown airport: {airport_id}")
        return airport

    def air_distance(self, from_id: str, to_id: str) -> float:
        """Straight-line distance in km between two airports.

        Raises KeyError if either airport is unknown.
        """
        return self._flight_km(self._require(from_id), self._require(to_id))

    def airport_path(self, from_id: str, to_id: str) -> tuple[list[str], float]:
        """The direct flight between two airports and its length in km.

        Raises KeyError if either airport is unknown.
        """
        origin = self._require(from_id)
        destination = self._require(to_id)
        return [from_id, to_id], self._flight_km(origin, destination)

    def load_rows(self, rows: Iterable[Sequence[str]]) -> int:
        """Load airports from rows of ``id, name, code, city, "lat, lon"``.

        Short rows, bad coordinates, incomplete and duplicate airports are
        skipped. Returns the number loaded.
        """
        loaded = 0
        for row in rows:
            if len(row) < _FIELDS_PER_ROW:
                continue
            airport_id, name, code, city, coordinate_text = row[:_FIELDS_PER_ROW]
            try:
                latitude, longitude = parse_coordinates(coordinate_text)
            except ValueError:
                continue
            airport = Airport(airport_id, name, code, city, airport_id, latitude, longitude)
            try:
                if not self.add_airport(airport):
                    continue
            except ValueError:
                continue
            loaded += 1
        return loaded

    def clear(self) -> None:
        """Forget every registered airport."""
        self._by_id.clear()
        self._by_name.clear()
        self._by_code.clear()

    def describe(self) -> str:
        """Human-readable listing of all airports."""
        if not self._by_id:
            return "No airports registered."
        lines = [f"Registered Airports ({len(self._by_id)} airports):"]
        for number, airport in enumerate(self._by_id.values(), start=1):
            lines.append(f"  [{number}] {airport.describe()}")
            lines.append("")
        return "\n".join(lines)