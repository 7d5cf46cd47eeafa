"""The shared city graph and route-distance helpers built on it."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import Any

from citygrid.geo import haversine_km


@dataclass
class _Vertex:
    vertex_id: str
    name: str
    latitude: float
    longitude: float
    data: Any
    is_stop: bool


class CityGraph:
    """Undirected weighted graph of stops and places, with edge weights in km."""

    def __init__(self) -> None:
        self._vertices: dict[str, _Vertex] = {}
        self._edges: dict[str, dict[str, float]] = {}

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def add_vertex(
        self,
        vertex_id: str,
        name: str,
        latitude: float,
        longitude: float,
        data: Any = None,
        *,
        stop: bool = False,
    ) -> None:
        """Add a place to the graph. Raises ValueError for an empty or used id."""
        if not vertex_id:
            raise ValueError("vertex id must not be empty")
        if vertex_id in self._vertices:
            raise ValueError(f"vertex already exists: {vertex_id}")
        self._vertices[vertex_id] = _Vertex(
            vertex_id, name, latitude, longitude, data, stop
        )
        self._edges[vertex_id] = {}

    def add_stop(self, stop_id: str, name: str, latitude: float, longitude: float) -> None:
        """Add a bus stop to the graph."""
        self.add_vertex(stop_id, name, latitude, longitude, stop=True)

    def _vertex(self, vertex_id: str) -> _Vertex:
        try:
            return self._vertices[vertex_id]
        except KeyError:
            raise KeyError(f"unknown vertex: {vertex_id}") from None

    def add_edge(self, first: str, second: str, weight: float | None = None) -> None:
        """Join two vertices both ways.

        Without a weight, the great-circle distance between them is used.
        """
        a = self._vertex(first)
        b = self._vertex(second)
        if first == second:
            raise ValueError("an edge needs two different vertices")
        if weight is None:
            weight = haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)
        if weight < 0.0:
            raise ValueError("edge weight must not be negative")
        self._edges[first][second] = weight
        self._edges[second][first] = weight

    def neighbours(self, vertex_id: str) -> dict[str, float]:
        """Adjacent vertices and the weights of the edges to them."""
        self._vertex(vertex_id)
        return dict(self._edges[vertex_id])

    def vertex_coordinates(self, vertex_id: str) -> tuple[float, float] | None:
        vertex = self._vertices.get(vertex_id)
        if vertex is None:
            return None
        return vertex.latitude, vertex.longitude

    def vertex_data(self, vertex_id: str) -> Any:
        return self._vertex(vertex_id).data

    def vertex_name(self, vertex_id: str) -> str:
        return self._vertex(vertex_id).name

    def is_stop(self, vertex_id: str) -> bool:
        vertex = self._vertices.get(vertex_id)
        return vertex is not None and vertex.is_stop

    def stops(self) -> list[str]:
        """Ids of all bus stops, in the order they were added."""
        return [v.vertex_id for v in self._vertices.values() if v.is_stop]

    def find_nearest_stop(
        self, latitude: float, longitude: float, exclude: str | None = None
    ) -> str | None:
        """The stop closest to a point, or None when there are no stops."""
        best_id: str | None = None
        best_distance = 0.0
        for vertex in self._vertices.values():
            if not vertex.is_stop or vertex.vertex_id == exclude:
                continue
            distance = haversine_km(latitude, longitude, vertex.latitude, vertex.longitude)
            if best_id is None or distance < best_distance:
                best_id, best_distance = vertex.vertex_id, distance
        return best_id

    def connect_to_nearest_stop(self, vertex_id: str) -> str | None:
        """Join a vertex to its nearest stop; returns that stop or None."""
        vertex = self._vertex(vertex_id)
        stop_id = self.find_nearest_stop(vertex.latitude, vertex.longitude, exclude=vertex_id)
        if stop_id is not None:
            self.add_edge(vertex_id, stop_id)
        return stop_id

    def shortest_path(self, start: str, end: str) -> tuple[list[str], float] | None:
        """Cheapest path and its length, or None if either end is unknown or unreachable."""
        if start not in self._vertices or end not in self._vertices:
            return None
        order = itertools.count()
        best: dict[str, float] = {start: 0.0}
        previous: dict[str, str] = {}
        queue = [(0.0, next(order), start)]
        done: set[str] = set()
        while queue:
            distance, _, current = heapq.heappop(queue)
            if current in done:
                continue
            if current == end:
                path = [end]
                while path[-1] != start:
                    path.append(previous[path[-1]])
                path.reverse()
                return path, distance
            done.add(current)
            for neighbour, weight in self._edges[current].items():
                candidate = distance + weight
                if neighbour not in best or candidate < best[neighbour]:
                    best[neighbour] = candidate
                    previous[neighbour] = current
                    heapq.heappush(queue, (candidate, next(order), neighbour))
        return None


def route_distance(graph: CityGraph | None, start: str, end: str) -> float | None:
    """Length of the shortest path over graph edges, or None if there is none."""
    if graph is None or not start or not end:
        return None
    found = graph.shortest_path(start, end)
    return None if found is None else found[1]


def complete_route_distance(
    graph: CityGraph | None,
    source_lat: float,
    source_lon: float,
    dest_lat: float,
    dest_lon: float,
) -> float | None:
    """Walk to the nearest stop, ride the graph, then walk to the destination.

    Returns the total in kilometres, or None when no route exists.
    """
    if graph is None:
        return None
    source_stop = graph.find_nearest_stop(source_lat, source_lon)
    if source_stop is None:
        return None
    dest_stop = graph.find_nearest_stop(dest_lat, dest_lon)
    if dest_stop is None:
        return None
    ride = route_distance(graph, source_stop, dest_stop)
    if ride is None:
        return None
    source_stop_lat, source_stop_lon = graph.vertex_coordinates(source_stop)
    dest_stop_lat, dest_stop_lon = graph.vertex_coordinates(dest_stop)
    walk_in = haversine_km(source_lat, source_lon, source_stop_lat, source_stop_lon)
    walk_out = haversine_km(dest_stop_lat, dest_stop_lon, dest_lat, dest_lon)
    return walk_in + ride + walk_out


def complete_route_distance_to_vertex(
    graph: CityGraph | None, source_lat: float, source_lon: float, vertex_id: str
) -> float | None:
    """Complete route distance from a point to the location of a vertex."""
    if graph is None or not vertex_id:
        return None
    coordinates = graph.vertex_coordinates(vertex_id)
    if coordinates is None:
        return None
    return complete_route_distance(graph, source_lat, source_lon, *coordinates)