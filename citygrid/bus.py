"""Buses and the ordered list of stops each one serves."""

from __future__ import annotations

from collections.abc import Iterable


class Bus:
    """A bus with its operating company, current stop and ordered route."""

    def __init__(
        self,
        bus_no: str = "",
        company: str = "",
        current_stop_id: str = "",
        route: Iterable[str] | None = None,
    ) -> None:
        self.bus_no = bus_no
        self.company = company
        self.current_stop_id = current_stop_id
        self._route: list[str] = []
        for stop_id in route or ():
            self.add_stop(stop_id)

    @property
    def route(self) -> tuple[str, ...]:
        """The stops of the route, in travel order."""
        return tuple(self._route)

    @property
    def route_length(self) -> int:
        return len(self._route)

    @staticmethod
    def _require_stop_id(stop_id: str) -> None:
        if not stop_id:
            raise ValueError("stop id must not be empty")

    def add_stop(self, stop_id: str) -> bool:
        """Append a stop to the route. Returns False if it is already on it."""
        self._require_stop_id(stop_id)
        if stop_id in self._route:
            return False
        self._route.append(stop_id)
        return True

    def insert_stop(self, position: int, stop_id: str) -> bool:
        """Insert a stop before ``position`` (0 to route length).

        Returns False if the stop is already on the route; raises IndexError
        for a position outside the route.
        """
        self._require_stop_id(stop_id)
        if not 0 <= position <= len(self._route):
            raise IndexError(f"position {position} outside route")
        if stop_id in self._route:
            return False
        self._route.insert(position, stop_id)
        return True

    def remove_stop(self, stop_id: str) -> bool:
        """Remove a stop from the route. Returns False if it was not on it."""
        self._require_stop_id(stop_id)
        try:
            self._route.remove(stop_id)
        except ValueError:
            return False
        return True

    def remove_stop_at(self, position: int) -> str:
        """Remove and return the stop at ``position``."""
        if not 0 <= position < len(self._route):
            raise IndexError(f"position {position} outside route")
        return self._route.pop(position)

    def stop_at(self, position: int) -> str:
        """The stop at ``position`` on the route."""
        if not 0 <= position < len(self._route):
            raise IndexError(f"position {position} outside route")
        return self._route[position]

    def has_stop(self, stop_id: str) -> bool:
        return bool(stop_id) and stop_id in self._route

    def move_to_next_stop(self) -> bool:
        """Advance to the next stop, wrapping from the last back to the first.

        A bus with no current stop moves to the first one. Returns False when
        the route is empty or the current stop is not on the route.
        """
        if not self._route:
            return False
        if not self.current_stop_id:
            self.current_stop_id = self._route[0]
            return True
        try:
            position = self._route.index(self.current_stop_id)
        except ValueError:
            return False
        self.current_stop_id = self._route[(position + 1) % len(self._route)]
        return True

    def set_current_location(self, stop_id: str) -> bool:
        """Place the bus at a stop on its route. Returns False if not on it."""
        if not self.has_stop(stop_id):
            return False
        self.current_stop_id = stop_id
        return True

    def is_valid(self) -> bool:
        return bool(self.bus_no) and bool(self.company)

    def _describe_route(self) -> str:
        if not self._route:
            return "   No route defined."
        return "   Route: " + " -> ".join(self._route)

    def describe(self) -> str:
        """Multi-line, human-readable summary of the bus and its route."""
        return "\n".join(
            (
                f"Bus Number: {self.bus_no}",
                f"Company: {self.company}",
                f"Current Stop: {self.current_stop_id}",
                f"Route Length: {self.route_length} stops",
                self._describe_route(),
            )
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(bus_no={self.bus_no!r}, company={self.company!r}, "
            f"current_stop_id={self.current_stop_id!r}, route={list(self._route)!r})"
        )