"""Classify raw carrier responses as a confirmation or a fault.

The carrier sends no success flag. A non-empty
`FreightPickupResponse.PickupRequestConfirmationNumber` is the only success
signal; every other body, including ones that are not JSON at all, is a
failure. The confirmation number is read on its own, so an oddly typed status
or transaction reference never turns a scheduled pickup into a failure. The
raw body is kept on both outcomes for operator diagnosis.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from freightpickup.common.logging import logger


class ResponseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, coerce_numbers_to_str=True)


class CodeDescription(ResponseModel):
    code: str = Field(default="", alias="Code")
    description: str = Field(default="", alias="Description")


class _TransactionReference(ResponseModel):
    customer_context: str = Field(default="", alias="CustomerContext")


class _FreightPickupResponse(ResponseModel):
    response: Any = Field(default=None, alias="Response")
    confirmation_number: str | None = Field(default=None, alias="PickupRequestConfirmationNumber")


class _SuccessEnvelope(ResponseModel):
    freight_pickup_response: _FreightPickupResponse = Field(
        default_factory=_FreightPickupResponse, alias="FreightPickupResponse"
    )


class ErrorDetail(ResponseModel):
    """One carrier error entry; a fault carries one or more.

    Keys beyond severity and primary code (`Location`, `SubErrorCode`, ...)
    are kept in `model_extra`.
    """

    model_config = ConfigDict(extra="allow")

    severity: str = Field(default="", alias="Severity")
    primary_error_code: CodeDescription = Field(default_factory=CodeDescription, alias="PrimaryErrorCode")


class _Errors(ResponseModel):
    error_detail: list[ErrorDetail] = Field(default_factory=list, alias="ErrorDetail")

    @field_validator("error_detail", mode="before")
    @classmethod
    def _single_entry_as_list(cls, value: Any) -> Any:
        # A lone entry arrives as an object rather than a one-element array.
        if isinstance(value, dict):
            return [value]
        return value


class _FaultDetail(ResponseModel):
    errors: _Errors = Field(default_factory=_Errors, alias="Errors")


class _Fault(ResponseModel):
    fault_code: str = Field(default="", alias="faultcode")
    fault_string: str = Field(default="", alias="faultstring")
    detail: _FaultDetail = Field(default_factory=_FaultDetail, alias="detail")


class _FaultEnvelope(ResponseModel):
    fault: _Fault = Field(alias="Fault")


class PickupConfirmation(BaseModel):
    """Pickup accepted; the carrier also emails the requester."""

    confirmation_number: str
    customer_context: str = ""
    status_code: str = ""
    status_description: str = ""
    raw_body: bytes = b""


class PickupFault(BaseModel):
    """Pickup not scheduled.

    `parse_error` is set when the body was not a recognizable fault envelope;
    `errors` is then empty but `raw_body` still holds what the carrier sent.
    """

    fault_code: str = ""
    fault_string: str = ""
    errors: list[ErrorDetail] = Field(default_factory=list)
    parse_error: str | None = None
    raw_body: bytes = b""


def _optional_block(model: type[ResponseModel], container: Any, key: str) -> ResponseModel:
    """Validate `container[key]` as `model`, falling back to an empty block."""

    if not isinstance(container, dict):
        return model()
    try:
        return model.model_validate(container.get(key) or {})
    except ValidationError:
        logger.info("ignoring malformed %s in pickup confirmation", key)
        return model()


def _parse_fault(raw: bytes) -> PickupFault:
    try:
        envelope = _FaultEnvelope.model_validate_json(raw)
    except ValidationError as exc:
        return PickupFault(parse_error=f"unrecognized response body: {exc.error_count()} error(s)", raw_body=raw)
    fault = envelope.fault
    return PickupFault(
        fault_code=fault.fault_code,
        fault_string=fault.fault_string,
        errors=list(fault.detail.errors.error_detail),
        raw_body=raw,
    )


def classify(raw: bytes) -> PickupConfirmation | PickupFault:
    """Return a confirmation when a non-empty confirmation number is present, else a fault."""

    try:
        envelope = _SuccessEnvelope.model_validate_json(raw)
    except ValidationError:
        envelope = None

    if envelope is not None and envelope.freight_pickup_response.confirmation_number:
        response = envelope.freight_pickup_response
        status = _optional_block(CodeDescription, response.response, "ResponseStatus")
        reference = _optional_block(_TransactionReference, response.response, "TransactionReference")
        logger.debug("pickup confirmed body=%s", raw.decode("utf-8", errors="replace"))
        return PickupConfirmation(
            confirmation_number=response.confirmation_number,
            customer_context=reference.customer_context,
            status_code=status.code,
            status_description=status.description,
            raw_body=raw,
        )

    fault = _parse_fault(raw)
    logger.warning(
        "pickup request failed fault_code=%s entries=%s parse_error=%s body=%s",
        fault.fault_code,
        len(fault.errors),
        fault.parse_error,
        raw.decode("utf-8", errors="replace"),
    )
    return fault
