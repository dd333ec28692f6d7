"""
Zone Reference Data
Static locality lists used to classify a pickup/delivery pair into a zone.

Zones:
    Z_A - within city
    Z_B - within state
    Z_C - metro to metro
    Z_D - rest of India
    Z_E - north east / special
"""

from types import MappingProxyType

METRO_CITIES = frozenset(
    [
        "Mumbai",
        "Delhi",
        "Bangalore",
        "Chennai",
        "Kolkata",
        "Hyderabad",
        "Pune",
        "Ahmedabad",
        "Surat",
        "Jaipur",
        "Lucknow",
        "Kanpur",
        "Nagpur",
        "Indore",
        "Thane",
        "Bhopal",
        "Visakhapatnam",
        "Pimpri-Chinchwad",
    ]
)

NORTH_EAST_STATES = frozenset(
    [
        "Arunachal Pradesh",
        "Assam",
        "Manipur",
        "Meghalaya",
        "Mizoram",
        "Nagaland",
        "Sikkim",
        "Tripura",
    ]
)

ZONE_NAMES = MappingProxyType(
    {
        "Z_A": "Zone A",
        "Z_B": "Zone B",
        "Z_C": "Zone C",
        "Z_D": "Zone D",
        "Z_E": "Zone E",
    }
)
