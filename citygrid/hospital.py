"""Hospitals and their emergency capacity."""

from __future__ import annotations


class Hospital:
    """A hospital with its location sector, emergency beds and specialisations."""

    __slots__ = ("hospital_id", "name", "sector", "_emergency_beds", "specialization")

    def __init__(
        self,
        hospital_id: str = "",
        name: str = "",
        sector: str = "",
        emergency_beds: int = 0,
        specialization: str = "",
    ) -> None:
        self.hospital_id = hospital_id
        self.name = name
        self.sector = sector
        self.emergency_beds = emergency_beds
        self.specialization = specialization

    @property
    def emergency_beds(self) -> int:
        """Number of free emergency beds; never negative."""
        return self._emergency_beds

    @emergency_beds.setter
    def emergency_beds(self, beds: int) -> None:
        self._emergency_beds = beds if beds >= 0 else 0

    def has_available_beds(self) -> bool:
        """True when at least one emergency bed is free."""
        return self._emergency_beds > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hospital):
            return NotImplemented
        return (
            self.hospital_id,
            self.name,
            self.sector,
            self.emergency_beds,
            self.specialization,
        ) == (
            other.hospital_id,
            other.name,
            other.sector,
            other.emergency_beds,
            other.specialization,
        )

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return (
            f"Hospital(hospital_id={self.hospital_id!r}, name={self.name!r}, "
            f"sector={self.sector!r}, emergency_beds={self.emergency_beds!r}, "
            f"specialization={self.specialization!r})"
        )