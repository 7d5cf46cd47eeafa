"""Public facilities such as mosques, parks and water coolers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Facility:
    """A public facility attached to a vertex of the city graph."""

    facility_id: str = ""
    name: str = ""
    facility_type: str = ""
    sector: str = ""
    vertex_id: str = ""

    def is_valid(self) -> bool:
        """True when the identifier, name, type and vertex are all set."""
        return all((self.facility_id, self.name, self.facility_type, self.vertex_id))

    def describe(self) -> str:
        """Multi-line, human-readable summary of the facility."""
        return "\n".join(
            (
                f"Facility ID: {self.facility_id}",
                f"Name: {self.name}",
                f"Type: {self.facility_type}",
                f"Sector: {self.sector}",
                f"Vertex ID: {self.vertex_id}",
            )
        )