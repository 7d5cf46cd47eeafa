"""Airports that join the city graph to air travel."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Airport:
    """An airport with its IATA code, city and location on the city graph."""

    airport_id: str = ""
    name: str = ""
    code: str = ""
    city: str = ""
    vertex_id: str = ""
    latitude: float = 0.0
    longitude: float = 0.0

    def is_valid(self) -> bool:
        """True when the identifier, name, code and vertex are all set."""
        return all((self.airport_id, self.name, self.code, self.vertex_id))

    def describe(self) -> str:
        """Multi-line, human-readable summary of the airport."""
        return "\n".join(
            (
                f"Airport ID: {self.airport_id}",
                f"Name: {self.name}",
                f"IATA Code: {self.code}",
                f"City: {self.city}",
                f"Vertex ID: {self.vertex_id}",
                f"Coordinates: ({self.latitude:g}, {self.longitude:g})",
            )
        )