# citygrid

A small in-memory model of city services that share one graph of bus stops and
places. It covers public facilities, airports with direct flights, buses on
circular routes, emergency vehicles, hospitals and medicines.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `citygrid.geo` has the distance and parsing helpers:
  - `haversine_km` gives great-circle distance in kilometres.
  - `distance_squared` gives squared planar distance, for comparisons.
  - `sector_coordinates` gives the approximate coordinates of an Islamabad
    sector such as `"G-10"`, `"F8"` or `"Blue Area"`. Unknown sectors map to
    the city centre.
  - `parse_coordinates` reads `"lat, lon"` text, with or without surrounding
    double quotes. It raises `ValueError` when the text is empty or has no
    comma.
  - `parse_number` and `parse_int` read a leading number leniently and return
    0 when none is found.
- `citygrid.routing` has `CityGraph`, an undirected weighted graph:
  - `add_stop` adds a bus stop and `add_vertex` adds a place.
  - `add_edge` joins two vertices. Without a weight it uses their
    great-circle distance.
  - `find_nearest_stop`, `connect_to_nearest_stop` and `shortest_path` answer
    queries over the graph. `shortest_path` is Dijkstra's algorithm and returns
    `(path, km)` or `None`.
  - Three helpers measure trips. `route_distance` measures the path over graph
    edges. `complete_route_distance` and `complete_route_distance_to_vertex`
    measure a walk to the nearest stop, the ride, and the walk from the last
    stop.
- `citygrid.facility` has `Facility`. `citygrid.facility_manager` has
  `FacilityManager`:
  - It looks facilities up with `find_by_id`, `find_by_name` and
    `find_by_type`.
  - It finds the nearest facility with `nearest_to_stop` (by graph path),
    `nearest_to` (by point) and `nearest_of_type`.
  - `load_rows` takes rows of `id, name, type, sector, "lat, lon"`. Each loaded
    facility becomes a graph vertex joined to its nearest stop.
- `citygrid.airport` has `Airport`. `citygrid.airport_manager` has
  `AirportManager`:
  - Each airport added becomes a vertex, is joined to its nearest stop, and
    gets a direct-flight edge to every other airport.
  - `air_distance` and `airport_path` raise `KeyError` for unknown airports.
  - `load_rows` takes rows of `id, name, code, city, "lat, lon"`.
- `citygrid.bus` has `Bus`, with an ordered route of unique stops.
  `move_to_next_stop` wraps from the last stop back to the first.
- `citygrid.emergency_vehicle` has `EmergencyVehicle`, a `Bus` with a vehicle
  id, a type and a priority level of 1 to 3. `dispatch` and
  `complete_emergency` change whether it is available.
- `citygrid.fleet` has `VehicleFleet`, which registers emergency vehicles:
  - `nearest_available` finds the free vehicle of a type with the shortest
    graph path from a vertex.
  - `nearest_available_to` does the same from a point, using the complete
    walk-ride-walk distance.
  - `release_all` ends every vehicle's current call.
- `citygrid.emergency` has the `Emergency` and `EmergencyRoute` records, plus
  `vehicle_type_for` and `format_emergency_id`:
  - `vehicle_type_for` maps `"Fire"` to `"FireTruck"`, `"Police"` to
    `"Police"` and anything else to `"Ambulance"`.
  - `format_emergency_id(1)` gives `"EMG01"`.
- `citygrid.hospital` has `Hospital`. `citygrid.medicine` has `Medicine`. Bed
  counts and prices never go below zero.

Managers raise `ValueError` when given a record with required fields missing.
They return `False` when an id is already registered.

## Example

```python
from citygrid.routing import CityGraph
from citygrid.facility_manager import FacilityManager
from citygrid.emergency_vehicle import EmergencyVehicle
from citygrid.fleet import VehicleFleet
from citygrid.emergency import format_emergency_id

graph = CityGraph()
graph.add_stop("Stop1", "G-10 Markaz", 33.684, 73.025)
graph.add_stop("Stop2", "F-8 Markaz", 33.700, 73.037)
graph.add_edge("Stop1", "Stop2", 2.1)

facilities = FacilityManager(graph)
facilities.load_rows([
    ["FCL01", "Central Park", "Park", "F-8", "33.701, 73.036"],
])
print(facilities.nearest_to_stop("Stop1").name)   # Central Park

fleet = VehicleFleet(graph)
fleet.add(EmergencyVehicle("AMB01", "Ambulance", "B900", "CityRescue", "Stop1"))
ambulance = fleet.nearest_available("Ambulance", "Stop2")
ambulance.dispatch(format_emergency_id(1))
print(ambulance.current_emergency_id)             # EMG01
```

## What it does not do

- There is no registry of hospitals, pharmacies or doctors. `Hospital` and
  `Medicine` are plain records.
- There is no coordinator that takes emergency reports, queues them by
  priority, picks a hospital and builds an `EmergencyRoute`. The records and
  the vehicle search are here, but the dispatching itself is left to the
  caller.
- No files are read. The `load_rows` methods take rows that the caller has
  already split, for example with the standard `csv` module.
- Nothing is stored. Everything lives in memory, and there is no command-line
  program.