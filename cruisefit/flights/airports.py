"""
Airport Table
Static airport code to coordinate mapping (decimal degrees).
"""

from types import MappingProxyType
from typing import Mapping

from .models import Coordinate

AIRPORTS: Mapping[str, Coordinate] = MappingProxyType({
    "ANC": Coordinate(61.17, -149.99),  # Anchorage
    "CAY": Coordinate(4.82, -52.36),  # Cayenne
    "DOH": Coordinate(25.27, 51.61),  # Doha
    "DXB": Coordinate(25.25, 55.37),  # Dubai
    "GRU": Coordinate(-23.43, -46.47),  # Sao Paulo Guarulhos
    "HEL": Coordinate(60.32, 24.97),  # Helsinki
    "HEM": Coordinate(60.25, 25.04),  # Helsinki Malmi
    "HNL": Coordinate(21.32, -157.92),  # Honolulu
    "ICN": Coordinate(37.47, 126.44),  # Seoul Incheon
    "JFK": Coordinate(40.64, -73.78),  # New York JFK
    "LAX": Coordinate(33.94, -118.41),  # Los Angeles
    "LHR": Coordinate(51.47, -0.46),  # London Heathrow
    "MEM": Coordinate(35.04, -89.98),  # Memphis
    "OGG": Coordinate(20.89, -156.44),  # Kahului, Maui
    "ORY": Coordinate(48.73, 2.37),  # Paris Orly
    "PER": Coordinate(-31.94, 115.97),  # Perth
    "PPT": Coordinate(-17.56, -149.61),  # Papeete
    "SCL": Coordinate(-33.39, -70.79),  # Santiago
    "SEA": Coordinate(47.45, -122.31),  # Seattle-Tacoma
    "SFO": Coordinate(37.62, -122.38),  # San Francisco
    "SYD": Coordinate(-33.95, 151.18),  # Sydney
    "YYZ": Coordinate(43.68, -79.63),  # Toronto Pearson
    "PVG": Coordinate(31.15, 121.81),  # Shanghai Pudong
})
