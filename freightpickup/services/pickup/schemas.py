"""API response schemas for the pickup endpoint."""

from pydantic import BaseModel

from freightpickup.services.pickup.classifier import ErrorDetail


class PickupResponse(BaseModel):
    """Confirmation returned to clients after the carrier accepts a pickup."""

    confirmation_number: str
    customer_context: str
    status_code: str
    status_description: str


class PickupRejectionResponse(BaseModel):
    """Carrier fault detail forwarded to clients on rejection."""

    fault_code: str
    fault_string: str
    errors: list[ErrorDetail]
    parse_error: str | None = None
    carrier_status_code: int | None = None
    body: str
