"""
Input Schemas
=============

Pydantic models for the raw readings supplied by the data-access layer.

Every component validates its input through this module, so malformed data
(non-numeric values, missing fields, non-positive capacities) is rejected
once, at the boundary, with an ``InputValidationError``.

Alternate field names used by upstream payloads are normalized here:
    - AreaReading.area_name      <- "area_name" | "name" | "area"
    - AreaReading.people_count   <- "people_count" | "people"
    - FlowSample.count           <- "people" | "value" | "count"
    - QualitySnapshot.last_update <- "last_update" | "lastUpdate"

Input Contract (AnalyticsSnapshot):
    {
        "hourly": [{"timestamp": 1707321600000, "value": 42}, ...],
        "daily": [[1707264000000, 380], ...],
        "flow": [{"people": 12}, {"value": 7}, 3],
        "areas": [{"area_name": "Centro", "people_count": 55}],
        "capacity_overrides": {"Centro": 100},
        "sensors": [{"id": "s1"}],
        "lastUpdate": 1707321600000,
        "periods_ahead": 7
    }
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Sequence

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)

from occupancy_analytics.exceptions import InputValidationError


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Representable epoch-ms range, one day inside datetime.min/max so that
# conversion to any local timezone stays in range.
MIN_EPOCH_MS = (datetime(1, 1, 2, tzinfo=timezone.utc) - EPOCH) // timedelta(milliseconds=1)
MAX_EPOCH_MS = (datetime(9999, 12, 30, tzinfo=timezone.utc) - EPOCH) // timedelta(milliseconds=1)


def _check_epoch_ms(value: float) -> float:
    if not MIN_EPOCH_MS <= value <= MAX_EPOCH_MS:
        raise ValueError(f"timestamp {value} is outside the representable range")
    return value


def epoch_ms_to_datetime(value: float) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime."""
    return EPOCH + timedelta(milliseconds=_check_epoch_ms(value))


class TimeSeriesPoint(BaseModel):
    """
    One time-stamped observation.

    Accepts either a mapping ``{"timestamp": ..., "value": ...}`` or a
    two-element ``[timestamp, value]`` pair.

    Attributes:
        timestamp: Epoch time in milliseconds
        value: Observed count or metric
    """

    model_config = ConfigDict(frozen=True)

    timestamp: int = Field(..., description="Epoch time in milliseconds")
    value: float = Field(..., description="Observed value")

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError("time series pair must have exactly 2 elements")
            return {"timestamp": data[0], "value": data[1]}
        return data

    @field_validator("timestamp")
    @classmethod
    def _in_range(cls, value: int) -> int:
        return _check_epoch_ms(value)

    @field_validator("value")
    @classmethod
    def _finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("value must be finite")
        return value


class AreaReading(BaseModel):
    """
    People count observed in one named area.

    Attributes:
        area_name: Area identifier, used to look up the capacity
        people_count: Observed number of people
        capacity: Explicit capacity; falls back to the capacity table if None
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    area_name: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("area_name", "name", "area"),
    )
    people_count: int = Field(
        ...,
        ge=0,
        validation_alias=AliasChoices("people_count", "people"),
    )
    capacity: Optional[float] = Field(
        default=None,
        gt=0,
        description="Maximum occupancy for this area",
    )

    @field_validator("capacity")
    @classmethod
    def _finite_capacity(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and not math.isfinite(value):
            raise ValueError("capacity must be finite")
        return value


class FlowSample(BaseModel):
    """
    One flow measurement (people counted in a period).

    Upstream payloads expose the same quantity as either ``people`` or
    ``value``; ``people`` wins when both are present. A bare number is
    accepted as the count itself.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    count: float = Field(
        ...,
        validation_alias=AliasChoices("people", "value", "count"),
    )

    @model_validator(mode="before")
    @classmethod
    def _from_number(cls, data: Any) -> Any:
        if isinstance(data, (int, float)) and not isinstance(data, bool):
            return {"count": data}
        if isinstance(data, dict):
            # A null under a preferred name defers to the next alias
            return {key: value for key, value in data.items() if value is not None}
        return data

    @field_validator("count")
    @classmethod
    def _finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("count must be finite")
        return value


def _coerce_epoch_ms(value: Any) -> Any:
    """Interpret bare numbers as epoch milliseconds (UTC)."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return epoch_ms_to_datetime(value)
    return value


def _ensure_aware(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class QualitySnapshot(BaseModel):
    """
    Inputs used to score data quality.

    Attributes:
        sensors: Sensor inventory (content is not inspected, only presence)
        areas: Latest per-area readings
        last_update: Time of the most recent refresh (epoch ms or ISO 8601)
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sensors: Optional[List[Any]] = None
    areas: Optional[List[AreaReading]] = None
    last_update: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("last_update", "lastUpdate"),
    )

    @field_validator("last_update", mode="before")
    @classmethod
    def _epoch_ms(cls, value: Any) -> Any:
        return _coerce_epoch_ms(value)

    @field_validator("last_update")
    @classmethod
    def _aware(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _ensure_aware(value)


class AnalyticsSnapshot(BaseModel):
    """
    Complete input bundle for one analysis cycle.

    Attributes:
        hourly: Hourly occupancy series (seasonal patterns)
        daily: Daily occupancy series (forecast)
        flow: Flow samples (descriptive statistics)
        areas: Latest per-area readings (density)
        capacity_overrides: Caller capacities, applied over the built-in table
        sensors: Sensor inventory
        last_update: Time of the most recent refresh
        periods_ahead: Forecast horizon; configured default if None
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    hourly: List[TimeSeriesPoint] = Field(default_factory=list)
    daily: List[TimeSeriesPoint] = Field(default_factory=list)
    flow: List[FlowSample] = Field(default_factory=list)
    areas: List[AreaReading] = Field(default_factory=list)
    capacity_overrides: Dict[str, float] = Field(default_factory=dict)
    sensors: Optional[List[Any]] = None
    last_update: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("last_update", "lastUpdate"),
    )
    periods_ahead: Optional[int] = Field(default=None, ge=1)

    @field_validator("last_update", mode="before")
    @classmethod
    def _epoch_ms(cls, value: Any) -> Any:
        return _coerce_epoch_ms(value)

    @field_validator("last_update")
    @classmethod
    def _aware(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _ensure_aware(value)

    @field_validator("capacity_overrides")
    @classmethod
    def _positive_capacities(cls, value: Dict[str, float]) -> Dict[str, float]:
        for name, capacity in value.items():
            if not math.isfinite(capacity) or capacity <= 0:
                raise ValueError(f"capacity for {name!r} must be positive")
        return value

    def quality_snapshot(self) -> QualitySnapshot:
        """Project the fields relevant to data-quality scoring."""
        return QualitySnapshot(
            sensors=self.sensors,
            areas=self.areas,
            last_update=self.last_update,
        )


# =============================================================================
# Boundary Parsers
# =============================================================================

_SERIES = TypeAdapter(List[TimeSeriesPoint])
_AREAS = TypeAdapter(List[AreaReading])
_FLOW = TypeAdapter(List[FlowSample])


def _validate(adapter: TypeAdapter, raw: Any, what: str) -> Any:
    try:
        return adapter.validate_python(raw)
    except ValidationError as e:
        raise InputValidationError(f"Invalid {what}: {e}", errors=e.errors()) from e


def parse_series(raw: Optional[Sequence[Any]]) -> List[TimeSeriesPoint]:
    """Validate a time series; ``None`` is treated as empty."""
    if raw is None:
        return []
    return _validate(_SERIES, list(raw), "time series")


def parse_areas(raw: Optional[Sequence[Any]]) -> List[AreaReading]:
    """Validate per-area readings; ``None`` is treated as empty."""
    if raw is None:
        return []
    return _validate(_AREAS, list(raw), "area readings")


def parse_flow_samples(raw: Optional[Sequence[Any]]) -> List[FlowSample]:
    """Validate flow samples; ``None`` is treated as empty."""
    if raw is None:
        return []
    return _validate(_FLOW, list(raw), "flow samples")


def parse_quality_snapshot(raw: Any) -> Optional[QualitySnapshot]:
    """Validate a quality snapshot; ``None`` passes through."""
    if raw is None or isinstance(raw, QualitySnapshot):
        return raw
    return _validate(TypeAdapter(QualitySnapshot), raw, "quality snapshot")


def parse_snapshot(raw: Any) -> AnalyticsSnapshot:
    """Validate a complete analysis bundle."""
    if isinstance(raw, AnalyticsSnapshot):
        return raw
    return _validate(TypeAdapter(AnalyticsSnapshot), raw, "analytics snapshot")
