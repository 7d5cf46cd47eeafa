"""City services on a shared graph of stops and places: facilities, airports, buses, emergency vehicles, hospitals and medicines."""

__version__ = "0.1.0"