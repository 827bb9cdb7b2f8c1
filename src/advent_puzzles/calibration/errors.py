"""Errors raised while extracting calibration values."""


class NoValueFoundError(ValueError):
    """A line has no digit or spelled digit in the scanned direction."""


class AggregationFailedError(ValueError):
    """A line failed while summing calibration values; nothing was summed."""
