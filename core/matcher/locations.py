#!/usr/bin/env python3
"""
Location lookup tables used by the location criterion.

Kept as data so callers (and tests) can substitute their own tables
without touching the scorer.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Mapping

CITY_REGIONS: Mapping[str, str] = MappingProxyType({
    'mumbai': 'maharashtra',
    'pune': 'maharashtra',
    'bangalore': 'karnataka',
    'hyderabad': 'telangana',
    'chennai': 'tamil nadu',
    'delhi': 'delhi',
    'gurgaon': 'delhi',
    'noida': 'delhi',
    'goa': 'goa',
})

MAJOR_METROS: FrozenSet[str] = frozenset({
    'mumbai', 'delhi', 'bangalore', 'hyderabad', 'chennai', 'pune',
})


@dataclass(frozen=True)
class LocationTables:
    """City-to-region map and the set of well-connected metro cities."""
    city_regions: Mapping[str, str] = field(default_factory=lambda: CITY_REGIONS)
    major_metros: FrozenSet[str] = MAJOR_METROS

    def region_of(self, city: str) -> str:
        """Region for a lower-cased city; unmapped cities are their own region."""
        return self.city_regions.get(city, city)

    def is_major_metro(self, city: str) -> bool:
        return city in self.major_metros


DEFAULT_LOCATION_TABLES = LocationTables()
