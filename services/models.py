# services/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class VehicleType:
    type: str
    count: int


@dataclass(frozen=True)
class Business:
    """Orman işletmesi; dört kaynaktan birleştirilir, bir sorgu ömrü kadar yaşar."""
    id: str
    name: str
    district_id: str
    total_vehicles: int = 0
    used_in_fire_vehicles: int = 0
    danger_level: str = "low"
    vehicle_types: Tuple[VehicleType, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class VehicleData:
    business_name: str
    total_vehicles: int
    used_vehicles: int
    excess: int


@dataclass(frozen=True)
class DangerRankingData:
    business_name: str
    danger_score: int
    level: str


@dataclass(frozen=True)
class MonthlyFireData:
    month: str
    count: int


@dataclass(frozen=True)
class YearlyFireData:
    year: int
    count: int


@dataclass(frozen=True)
class TreeTypeData:
    tree_type: str
    count: int


@dataclass(frozen=True)
class FireCauseData:
    cause: str
    count: int
