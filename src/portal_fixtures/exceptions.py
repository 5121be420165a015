"""
Fixture Generation Errors

Every failure aborts the fixture run; nothing here is meant to be recovered
from locally.
"""


class FixtureError(Exception):
    """Base class for fixture generation errors."""
    pass


class BeaconAPIError(FixtureError):
    """Exception raised for beacon API related errors."""
    pass


class TransportError(BeaconAPIError):
    """The beacon endpoint was unreachable, timed out or answered with a non-2xx status."""
    pass


class DecodeError(BeaconAPIError):
    """A payload did not match the expected JSON shape or SSZ encoding for its fork."""
    pass


class InvariantViolation(FixtureError):
    """A derived value broke a structural invariant, e.g. a proof of the wrong length."""
    pass


class PreconditionError(FixtureError):
    """The run cannot start, e.g. the target fixture file does not exist."""
    pass
