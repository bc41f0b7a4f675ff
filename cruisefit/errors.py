"""
CruiseFit Errors

Validation failures raised before or during a batch fit. All of them are
fatal for the batch: the scale factor is shared by every flight, so a single
bad input invalidates the whole fit.
"""


class CruiseFitError(ValueError):
    """Base class for all CruiseFit input validation errors."""


class MalformedDurationError(CruiseFitError):
    """A duration field is not a usable non-negative number."""


class EmptySampleListError(CruiseFitError):
    """A flight has no duration samples."""


class EmptyBatchError(CruiseFitError):
    """The flight list of a batch is empty, so no scale factor exists."""


class UnknownAirportCodeError(CruiseFitError, KeyError):
    """A flight references an airport code missing from the airport table."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""
