"""Error taxonomy surfaced by the pickup service.

Schedule errors are raised before anything touches the network. The remaining
errors describe where a submitted request stopped; none of them imply that a
pickup was scheduled.
"""

from freightpickup.services.pickup.classifier import PickupFault


class PickupError(Exception):
    """Base class for every pickup request failure."""


class ScheduleValidationError(PickupError, ValueError):
    """The requested pickup window was rejected locally."""


class DateMismatch(ScheduleValidationError):
    """Start and end of the window fall on different calendar dates."""


class PastSchedule(ScheduleValidationError):
    """Start of the window is not in the future."""


class InsufficientLeadTime(ScheduleValidationError):
    """Start of the window is closer than the carrier's minimum notice."""


class TimezoneMismatch(ScheduleValidationError):
    """Only one of the window start and the current time carries a timezone."""


class EncodingError(PickupError):
    """The wire request could not be serialized to JSON."""


class TransportError(PickupError):
    """No response was obtained from the carrier (network failure or timeout)."""


class RemoteRejection(PickupError):
    """The carrier answered without a confirmation number."""

    def __init__(self, fault: PickupFault, status_code: int | None = None) -> None:
        self.fault = fault
        self.status_code = status_code
        super().__init__(self._summary())

    def _summary(self) -> str:
        if self.fault.errors:
            first = self.fault.errors[0].primary_error_code
            return f"pickup request rejected [{first.code}] {first.description}"
        if self.fault.fault_string:
            return f"pickup request rejected: {self.fault.fault_string}"
        return f"pickup request rejected (status={self.status_code})"
