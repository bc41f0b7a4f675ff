"""
Flight Catalog
Observed block times of long-haul flights, as raw records.

Each record holds a display name, a whitespace-padded block of "HH:MM"
durations (one per line), and source/destination airport codes. Use
flights.resolver.load_catalog to turn them into Flight objects.
"""

from typing import Any, Dict, List

FLIGHT_RECORDS: List[Dict[str, Any]] = [
    {
        "name": "QTR780",
        "times": """
            13:08
            13:21
            13:17
            13:10
            13:09
            13:22
            13:05
        """,
        "src": "GRU",
        "dst": "DOH",
    },
    {
        "name": "FWI70Q",
        "times": """
            08:29
            08:25
            08:43
            08:34
        """,
        "src": "ORY",
        "dst": "CAY",
    },
    {
        "name": "FDX1413",
        "times": """
            08:19
            08:19
            08:03
            08:02
            08:12
        """,
        "src": "MEM",
        "dst": "HNL",
    },
    {
        "name": "UA863",
        "times": """
            14:10
            13:42
            14:02
            13:43
            13:46
            14:34
            14:45
        """,
        "src": "SFO",
        "dst": "SYD",
    },
    {
        "name": "VIR9M",
        "times": """
            07:45
            07:47
            07:42
            07:24
            07:35
            07:43
        """,
        "src": "LHR",
        "dst": "JFK",
    },
    {
        "name": "QFA11",
        "times": """
            13:12
            13:13
            13:25
            13:00
        """,
        "src": "SYD",
        "dst": "LAX",
    },
    {
        "name": "FIN15",
        "times": """
            08:38
            08:53
            08:52
            08:47
            08:48
            08:43
            08:33
        """,
        "src": "HEL",
        "dst": "JFK",
    },
    {
        "name": "KE251",
        "times": """
            07:29
            07:15
        """,
        "src": "ICN",
        "dst": "ANC",
    },
    {
        "name": "EK420",
        "times": """
            10:15
            10:23
            10:13
        """,
        "src": "DXB",
        "dst": "PER",
    },
    {
        "name": "HA30",
        "times": """
            05:45
            05:24
            05:02
            05:03
            05:15
            05:19
            05:23
        """,
        "src": "OGG",
        "dst": "SEA",
    },
    {
        "name": "UA115",
        "times": """
            08:14
            07:59
            07:57
            08:06
            08:06
        """,
        "src": "SFO",
        "dst": "PPT",
    },
    {
        "name": "CES7208",
        "times": """
            13:52
            14:15
            14:20
        """,
        "src": "YYZ",
        "dst": "PVG",
    },
]
