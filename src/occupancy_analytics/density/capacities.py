"""
Area Capacities
===============

Explicit, validated area -> capacity table.

Lookup order for an area:
    1. Caller overrides (merged over the table with ``with_overrides``)
    2. Built-in defaults (``DEFAULT_AREA_CAPACITIES``)
    3. A single default capacity for unknown areas

Explicit capacities carried on an ``AreaReading`` take precedence over the
table; that resolution happens in the scorer.
"""

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from occupancy_analytics.exceptions import InputValidationError


DEFAULT_CAPACITY = 50.0

DEFAULT_AREA_CAPACITIES: Mapping[str, float] = MappingProxyType({
    "Centro": 80,
    "Coreto": 50,
    "Bancos Norte": 60,
    "Bancos Sul": 60,
    "Caminhos": 200,
})


def _check_capacity(name: str, capacity: float) -> float:
    try:
        capacity = float(capacity)
    except (TypeError, ValueError) as e:
        raise InputValidationError(f"capacity for {name!r} must be numeric") from e
    if not math.isfinite(capacity) or capacity <= 0:
        raise InputValidationError(f"capacity for {name!r} must be positive, got {capacity}")
    return capacity


@dataclass(frozen=True)
class CapacityTable:
    """
    Immutable capacity lookup.
    
    Attributes:
        capacities: Area name -> capacity
        default_capacity: Capacity for areas not in the table
    """
    
    capacities: Mapping[str, float] = field(
        default_factory=lambda: dict(DEFAULT_AREA_CAPACITIES)
    )
    default_capacity: float = DEFAULT_CAPACITY
    
    def __post_init__(self) -> None:
        """Validate every capacity and freeze the mapping."""
        checked = {
            name: _check_capacity(name, capacity)
            for name, capacity in self.capacities.items()
        }
        object.__setattr__(self, "capacities", MappingProxyType(checked))
        object.__setattr__(
            self,
            "default_capacity",
            _check_capacity("<default>", self.default_capacity),
        )
    
    def with_overrides(self, overrides: Optional[Mapping[str, float]]) -> "CapacityTable":
        """Return a new table with ``overrides`` applied over this one."""
        if not overrides:
            return self
        merged = {**self.capacities, **overrides}
        return CapacityTable(capacities=merged, default_capacity=self.default_capacity)
    
    def capacity_for(self, area_name: str) -> float:
        """Capacity of ``area_name``, or the default for unknown areas."""
        return self.capacities.get(area_name, self.default_capacity)
    
    def __contains__(self, area_name: object) -> bool:
        return area_name in self.capacities
