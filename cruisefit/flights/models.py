"""
Flight Data Model
Immutable records for airports, flights, and analysis results.

Input records (Coordinate, Flight) are validated on construction and never
mutated. Everything derived by the analyzer lives in separate result records
(AnalyzedFlight, ScaleFactor, BatchResult).
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..errors import EmptyBatchError, EmptySampleListError, MalformedDurationError
from ..utils import validate_coordinates


@dataclass(frozen=True)
class Coordinate:
    """A point on Earth's surface in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not validate_coordinates(self.latitude, self.longitude):
            raise ValueError(
                f"Invalid coordinate: ({self.latitude}, {self.longitude})"
            )


@dataclass(frozen=True)
class Flight:
    """A route with its observed durations (fractional hours)."""

    name: str
    samples: Tuple[float, ...]
    source: Coordinate
    destination: Coordinate
    source_code: Optional[str] = None
    destination_code: Optional[str] = None

    def __post_init__(self) -> None:
        # Accept any iterable of samples, store a tuple
        object.__setattr__(self, "samples", tuple(self.samples))

        if not self.samples:
            raise EmptySampleListError(f"Flight {self.name} has no duration samples")

        for sample in self.samples:
            if not sample > 0:
                raise MalformedDurationError(
                    f"Flight {self.name} has a non-positive duration: {sample}"
                )

    @property
    def average_duration(self) -> float:
        """Arithmetic mean of the duration samples."""
        return sum(self.samples) / len(self.samples)

    @property
    def route(self) -> Optional[str]:
        """Route label like "GRU-DOH", if both airport codes are known."""
        if self.source_code and self.destination_code:
            return f"{self.source_code}-{self.destination_code}"
        return None


@dataclass(frozen=True)
class ScaleFactor:
    """Fitted speed: total distance over total duration of a batch."""

    total_distance: float
    total_duration: float

    @property
    def value(self) -> float:
        if self.total_duration <= 0:
            raise EmptyBatchError("Scale factor undefined for zero total duration")
        return self.total_distance / self.total_duration

    def predict(self, duration: float) -> float:
        """Distance the fitted speed covers in the given duration."""
        return self.value * duration


@dataclass(frozen=True)
class AnalyzedFlight:
    """Derived, write-once analysis result for one flight."""

    flight: Flight
    average_duration: float
    distance: float
    error: float  # Signed fractional deviation from the fit
    color: Tuple[int, int, int]

    @property
    def name(self) -> str:
        return self.flight.name

    @property
    def error_percent(self) -> float:
        return self.error * 100


@dataclass(frozen=True)
class BatchResult:
    """One complete fit of a flight list under a single distance metric."""

    name: str
    metric_name: str
    scale: ScaleFactor
    flights: Tuple[AnalyzedFlight, ...]
    implied_speed_kmh: Optional[float] = None

    @property
    def mean_absolute_error(self) -> float:
        """Mean of |error| over the batch; lower means a better linear fit."""
        return sum(abs(f.error) for f in self.flights) / len(self.flights)
