"""
Tests for the flight speed analyzer.
"""

import math

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from cruisefit.analysis import FlightAnalyzer
from cruisefit.analysis.analyzer import calculate_error, fit_scale
from cruisefit.errors import EmptyBatchError
from cruisefit.flights import AIRPORTS, load_catalog
from cruisefit.flights.models import Flight, ScaleFactor
from cruisefit.geometry import AE_MAP, SPHERE


def make_flight(name, src, dst, samples):
    return Flight(
        name=name,
        samples=samples,
        source=AIRPORTS[src],
        destination=AIRPORTS[dst],
        source_code=src,
        destination_code=dst,
    )


@pytest.fixture
def catalog():
    """Complete flight catalog."""
    return load_catalog()


@pytest.fixture
def analyzer():
    return FlightAnalyzer()


class TestFitScale:
    """Tests for fit_scale function."""

    def test_ratio_of_totals(self):
        """Scale is total distance over total time, not a mean of ratios."""
        scale = fit_scale([(1.0, 1.0), (3.0, 1.0)])
        assert scale.total_duration == 4.0
        assert scale.total_distance == 2.0
        assert scale.value == 0.5

    def test_accepts_generator(self):
        scale = fit_scale((t, 2 * t) for t in (1.0, 2.0, 3.0))
        assert scale.value == pytest.approx(2.0)

    def test_empty(self):
        with pytest.raises(EmptyBatchError):
            fit_scale([])

    def test_zero_distance(self):
        """A batch without any distance has no usable scale."""
        with pytest.raises(EmptyBatchError):
            fit_scale([(1.0, 0.0), (2.0, 0.0)])


class TestCalculateError:
    """Tests for calculate_error function."""

    def test_exact(self):
        assert calculate_error(2.0, 1.0, ScaleFactor(1.0, 2.0)) == 0.0

    def test_signed(self):
        scale = ScaleFactor(1.0, 1.0)
        assert calculate_error(1.0, 1.5, scale) == pytest.approx(0.5)
        assert calculate_error(2.0, 1.0, scale) == pytest.approx(-0.5)

    def test_zero_distance(self):
        assert calculate_error(5.0, 0.0, ScaleFactor(1.0, 1.0)) == -1.0


class TestFlightAnalyzer:
    """Tests for FlightAnalyzer class."""

    def test_init(self, analyzer):
        assert analyzer.color_scale == 2.0

    @pytest.mark.parametrize("color_scale", [0, -1.0])
    def test_invalid_color_scale(self, color_scale):
        with pytest.raises(ValueError):
            FlightAnalyzer(color_scale=color_scale)

    def test_empty_batch(self, analyzer):
        """Empty input fails instead of producing NaN."""
        with pytest.raises(EmptyBatchError):
            analyzer.analyze([], SPHERE)

    def test_single_flight_exact_fit(self, analyzer):
        """A lone flight defines the scale, so its error is zero."""
        flight = make_flight("TST1", "GRU", "DOH", (1.5, 2.5))

        batch = analyzer.analyze([flight], SPHERE)
        result = batch.flights[0]

        assert result.average_duration == 2.0
        assert result.error == 0.0
        assert result.color == (255, 255, 255)

    def test_degenerate_flight(self):
        """Same source and destination means zero distance and error -1."""
        flights = [
            make_flight("HOP", "HEL", "HEL", (0.5,)),
            make_flight("FIN15", "HEL", "JFK", (8.75,)),
        ]

        batch = FlightAnalyzer(color_scale=1.0).analyze(flights, SPHERE)

        assert batch.flights[0].distance == 0.0
        assert batch.flights[0].error == -1.0
        assert batch.flights[0].color == (255, 0, 0)

    def test_color_scale_applied(self):
        """Doubling the error changes the color, not the error itself."""
        flights = [
            make_flight("A", "LHR", "JFK", (7.5,)),
            make_flight("B", "SFO", "SYD", (10.0,)),
        ]

        plain = FlightAnalyzer(color_scale=1.0).analyze(flights, SPHERE)
        doubled = FlightAnalyzer(color_scale=2.0).analyze(flights, SPHERE)

        for p, d in zip(plain.flights, doubled.flights):
            assert p.error == d.error
            assert p.color != d.color

    def test_gru_doh_end_to_end(self, analyzer, catalog):
        """Error sign follows whether the distance beats the prediction."""
        batch = analyzer.analyze(catalog, SPHERE)
        qtr = next(f for f in batch.flights if f.name == "QTR780")

        prediction = batch.scale.predict(qtr.average_duration)
        assert math.isfinite(qtr.error)
        assert qtr.distance == pytest.approx(
            SPHERE(AIRPORTS["GRU"], AIRPORTS["DOH"])
        )
        assert (qtr.error > 0) == (qtr.distance > prediction)

    def test_weighted_errors_cancel(self, analyzer, catalog):
        """Residuals against the fitted scale sum to zero."""
        batch = analyzer.analyze(catalog, AE_MAP)
        residual = sum(
            f.error * batch.scale.predict(f.average_duration) for f in batch.flights
        )
        assert residual == pytest.approx(0.0, abs=1e-9)

    def test_order_and_names(self, analyzer, catalog):
        batch = analyzer.analyze(catalog, SPHERE)

        assert batch.name == "Sphere"
        assert batch.metric_name == "sphere"
        assert [f.flight for f in batch.flights] == catalog

    def test_custom_batch_name(self, analyzer, catalog):
        assert analyzer.analyze(catalog, SPHERE, name="Globe").name == "Globe"

    def test_inputs_not_modified(self, analyzer, catalog):
        before = list(catalog)
        analyzer.analyze(catalog, SPHERE)
        assert catalog == before

    def test_implied_speed(self, analyzer, catalog):
        """Sphere fit recovers a plausible jet cruise speed."""
        batch = analyzer.analyze(catalog, SPHERE)
        assert 600 < batch.implied_speed_kmh < 1100

    def test_analyze_all_independent(self, analyzer, catalog):
        """Each metric gets its own scale factor."""
        sphere, ae_map = analyzer.analyze_all(catalog, [SPHERE, AE_MAP])

        assert sphere.name == "Sphere"
        assert ae_map.name == "AE Map"
        assert sphere.scale.value != ae_map.scale.value
        assert sphere.scale == analyzer.analyze(catalog, SPHERE).scale
        assert ae_map.scale == analyzer.analyze(catalog, AE_MAP).scale
