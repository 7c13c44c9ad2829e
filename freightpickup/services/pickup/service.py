"""Pickup request orchestration.

One call walks BUILT -> VALIDATED -> MAPPED -> SENT -> CLASSIFIED exactly
once. CLASSIFIED is reached only with a confirmation; a carrier fault, like
every other failure, moves the request to FAILED and surfaces a typed error.
A failed pickup is never resubmitted here.
"""

from collections.abc import Callable
from datetime import datetime
from time import perf_counter

from freightpickup.common.config import CarrierConfig
from freightpickup.common.logging import customer_context_ctx, logger, pickup_state_ctx
from freightpickup.common.metrics import (
    carrier_http_responses_total,
    pickup_failure_total,
    pickup_latency_seconds,
    pickup_requests_total,
    pickup_success_total,
)
from freightpickup.common.state_machine import validate_transition
from freightpickup.common.tracing import tracer
from freightpickup.services.pickup.classifier import PickupConfirmation, classify
from freightpickup.services.pickup.errors import (
    EncodingError,
    PickupError,
    RemoteRejection,
    ScheduleValidationError,
    TransportError,
)
from freightpickup.services.pickup.models import PickupDescription
from freightpickup.services.pickup.schedule import validate_schedule
from freightpickup.services.pickup.transport import HttpTransport, Transport
from freightpickup.services.pickup.wire import encode_wire_request, to_wire_request


CONTENT_TYPE = "application/json"

_FAILURE_REASONS: dict[type[PickupError], str] = {
    ScheduleValidationError: "validation",
    EncodingError: "encoding",
    TransportError: "transport",
    RemoteRejection: "rejected",
}


class _PickupAttempt:
    """Tracks lifecycle state for a single request_pickup call."""

    def __init__(self) -> None:
        self.state = "BUILT"

    def advance(self, new_state: str) -> None:
        validate_transition(self.state, new_state)
        logger.debug("pickup state %s -> %s", self.state, new_state)
        self.state = new_state
        pickup_state_ctx.set(new_state)


class PickupService:
    """Schedules freight pickups against the configured carrier endpoint."""

    def __init__(
        self,
        config: CarrierConfig,
        transport: Transport | None = None,
        clock: Callable[[], datetime] | None = None,
        service_name: str = "freight-pickup",
    ) -> None:
        self.config = config
        self.transport = transport or HttpTransport()
        self.clock = clock
        self.service_name = service_name

    def _failure_reason(self, exc: PickupError) -> str:
        for error_type, reason in _FAILURE_REASONS.items():
            if isinstance(exc, error_type):
                return reason
        return "unknown"

    async def request_pickup(self, description: PickupDescription) -> PickupConfirmation:
        """Validate, submit and classify one pickup request.

        Raises a `ScheduleValidationError` subclass before any network call,
        `EncodingError` if the payload cannot be serialized, `TransportError`
        when no response arrives within the timeout, and `RemoteRejection`
        when the carrier answers without a confirmation number.
        """

        context_token = customer_context_ctx.set(description.customer_context)
        state_token = pickup_state_ctx.set("BUILT")
        pickup_requests_total.labels(service=self.service_name).inc()
        attempt = _PickupAttempt()
        started = perf_counter()
        try:
            confirmation = await self._run(attempt, description)
        except PickupError as exc:
            attempt.advance("FAILED")
            pickup_failure_total.labels(service=self.service_name, reason=self._failure_reason(exc)).inc()
            logger.warning("pickup request failed: %s", exc)
            raise
        else:
            pickup_success_total.labels(service=self.service_name).inc()
            logger.info("pickup scheduled confirmation_number=%s", confirmation.confirmation_number)
            return confirmation
        finally:
            pickup_latency_seconds.labels(service=self.service_name).observe(max(0.0, perf_counter() - started))
            pickup_state_ctx.reset(state_token)
            customer_context_ctx.reset(context_token)

    async def _run(self, attempt: _PickupAttempt, description: PickupDescription) -> PickupConfirmation:
        now = self.clock() if self.clock else None
        validate_schedule(description.schedule.start, description.schedule.end, now=now)
        attempt.advance("VALIDATED")

        wire = to_wire_request(description, self.config.credentials)
        attempt.advance("MAPPED")

        payload = encode_wire_request(wire)
        with tracer.start_as_current_span("ups.freight_pickup") as span:
            span.set_attribute("carrier.endpoint", self.config.endpoint_url)
            response = await self.transport.post(
                self.config.endpoint_url, CONTENT_TYPE, payload, self.config.timeout_seconds
            )
            span.set_attribute("http.status_code", response.status_code)
        attempt.advance("SENT")
        carrier_http_responses_total.labels(
            service=self.service_name, status_code=str(response.status_code)
        ).inc()

        outcome = classify(response.body)
        if not isinstance(outcome, PickupConfirmation):
            raise RemoteRejection(outcome, status_code=response.status_code)
        attempt.advance("CLASSIFIED")
        return outcome
