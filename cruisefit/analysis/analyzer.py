"""
Flight Speed Analyzer
Fits one global speed constant per distance model and measures how far each
flight deviates from it.

Algorithm (per batch):
1. Measure every flight: mean duration and model distance
2. Fold the totals into a single ScaleFactor (distance per hour)
3. With the finished scale, compute each flight's signed error and color

Step 3 never starts before step 2 has consumed every flight; the scale
factor is a whole-batch quantity.
"""

import math
from typing import Iterable, List, Optional, Sequence, Tuple

from ..config import Settings
from ..errors import EmptyBatchError
from ..flights.models import AnalyzedFlight, BatchResult, Flight, ScaleFactor
from ..geometry.distance import DistanceMetric
from .colors import error_to_color

# (average duration in hours, distance in metric units)
Measurement = Tuple[float, float]


def fit_scale(measurements: Iterable[Measurement]) -> ScaleFactor:
    """
    Fit the batch scale factor: total distance over total duration.

    Args:
        measurements: (average_duration, distance) per flight

    Returns:
        Immutable ScaleFactor

    Raises:
        EmptyBatchError: If there are no measurements or the ratio is not a
            usable positive number
    """
    total_duration = 0.0
    total_distance = 0.0
    count = 0

    for duration, distance in measurements:
        total_duration += duration
        total_distance += distance
        count += 1

    if count == 0:
        raise EmptyBatchError("Cannot fit a scale factor to an empty batch")

    scale = ScaleFactor(total_distance=total_distance, total_duration=total_duration)
    if not math.isfinite(scale.value) or scale.value <= 0:
        raise EmptyBatchError(
            f"Scale factor is undefined: {total_distance} / {total_duration}"
        )

    return scale


def calculate_error(duration: float, distance: float, scale: ScaleFactor) -> float:
    """
    Signed fractional deviation of a distance from the fitted prediction.

    Returns -1 for zero distance; unbounded above.
    """
    prediction = scale.predict(duration)
    return (distance - prediction) / prediction


class FlightAnalyzer:
    """
    Fits flight durations against a distance metric.

    The analyzer holds no batch state: every call to analyze() computes its
    own scale factor, so batches under different metrics are independent.
    """

    def __init__(self, color_scale: float = Settings.COLOR_ERROR_SCALE):
        """
        Initialize flight analyzer.

        Args:
            color_scale: Factor applied to each error before mapping it to a
                color (2.0 doubles the contrast; report text is unaffected)
        """
        if not color_scale > 0:
            raise ValueError(f"Color scale must be positive, got {color_scale}")
        self.color_scale = color_scale

    def measure(
        self, flights: Sequence[Flight], metric: DistanceMetric
    ) -> List[Measurement]:
        """Pass 1: average duration and model distance of every flight."""
        return [
            (flight.average_duration, metric(flight.source, flight.destination))
            for flight in flights
        ]

    def analyze(
        self,
        flights: Sequence[Flight],
        metric: DistanceMetric,
        name: Optional[str] = None,
    ) -> BatchResult:
        """
        Run a complete two-pass fit of one batch.

        Args:
            flights: Flights with resolved coordinates (not modified)
            metric: Distance model to fit against
            name: Batch header (default: metric label)

        Returns:
            BatchResult with one AnalyzedFlight per input flight, in order

        Raises:
            EmptyBatchError: If flights is empty
        """
        if not flights:
            raise EmptyBatchError("Cannot analyze an empty flight list")

        measurements = self.measure(flights, metric)
        scale = fit_scale(measurements)

        analyzed = []
        for flight, (duration, distance) in zip(flights, measurements):
            error = calculate_error(duration, distance, scale)
            analyzed.append(
                AnalyzedFlight(
                    flight=flight,
                    average_duration=duration,
                    distance=distance,
                    error=error,
                    color=error_to_color(error * self.color_scale),
                )
            )

        return BatchResult(
            name=name or metric.label,
            metric_name=metric.key,
            scale=scale,
            flights=tuple(analyzed),
            implied_speed_kmh=scale.value * metric.km_per_unit,
        )

    def analyze_all(
        self, flights: Sequence[Flight], metrics: Iterable[DistanceMetric]
    ) -> List[BatchResult]:
        """Run one independent batch per metric, in the given order."""
        return [self.analyze(flights, metric) for metric in metrics]
