"""Medicines sold by pharmacies."""

from __future__ import annotations


class Medicine:
    """A medicine with its name, chemical formula and non-negative price."""

    __slots__ = ("name", "formula", "_price")

    def __init__(self, name: str = "", formula: str = "", price: float = 0.0) -> None:
        self.name = name
        self.formula = formula
        self.price = price

    @property
    def price(self) -> float:
        return self._price

    @price.setter
    def price(self, value: float) -> None:
        self._price = value if value >= 0.0 else 0.0

    def matches_name(self, name: str) -> bool:
        """True if the name matches exactly (case-sensitive)."""
        return self.name == name

    def matches_formula(self, formula: str) -> bool:
        """True if the formula matches exactly (case-sensitive)."""
        return self.formula == formula

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Medicine):
            return NotImplemented
        return (self.name, self.formula, self.price) == (
            other.name,
            other.formula,
            other.price,
        )

    def __hash__(self) -> int:
        return hash((self.name, self.formula, self.price))

    def __repr__(self) -> str:
        return (
            f"Medicine(name={self.name!r}, formula={self.formula!r}, "
            f"price={self.price!r})"
        )