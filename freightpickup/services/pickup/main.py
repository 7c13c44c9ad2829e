"""HTTP surface for scheduling freight pickups."""

from fastapi import FastAPI, Header, HTTPException
from fastapi.responses import JSONResponse

from freightpickup.common.config import CarrierConfig, settings
from freightpickup.common.logging import configure_logging
from freightpickup.common.metrics import metrics_response
from freightpickup.common.startup import log_startup_config
from freightpickup.common.tracing import instrument_app, setup_tracing
from freightpickup.services.pickup.errors import (
    EncodingError,
    RemoteRejection,
    ScheduleValidationError,
    TransportError,
)
from freightpickup.services.pickup.models import PickupDescription
from freightpickup.services.pickup.schemas import PickupRejectionResponse, PickupResponse
from freightpickup.services.pickup.service import PickupService

configure_logging()
setup_tracing(settings.service_name)
carrier_config = CarrierConfig.from_settings(settings)
log_startup_config(settings.service_name, carrier_config, ["SERVICE_NAME", "LOG_LEVEL", "UPS_PRODUCTION"])
service = PickupService(carrier_config, service_name=settings.service_name)

app = FastAPI(title="Freight Pickup")
instrument_app(app)


def enforce_api_key(x_api_key: str | None) -> None:
    """Reject requests without the configured API key; open when none is configured."""

    if settings.api_key and x_api_key != settings.api_key:
        raise HTTPException(status_code=401, detail="invalid API key")


@app.post("/pickups", response_model=PickupResponse)
async def request_pickup(req: PickupDescription, x_api_key: str | None = Header(default=None)):
    """Submit one pickup request to the carrier and return its confirmation."""

    enforce_api_key(x_api_key)
    try:
        confirmation = await service.request_pickup(req)
    except ScheduleValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except RemoteRejection as exc:
        fault = exc.fault
        body = PickupRejectionResponse(
            fault_code=fault.fault_code,
            fault_string=fault.fault_string,
            errors=fault.errors,
            parse_error=fault.parse_error,
            carrier_status_code=exc.status_code,
            body=fault.raw_body.decode("utf-8", errors="replace"),
        )
        return JSONResponse(status_code=502, content=body.model_dump(mode="json"))
    except TransportError as exc:
        raise HTTPException(status_code=504, detail=str(exc)) from exc
    except EncodingError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return PickupResponse(
        confirmation_number=confirmation.confirmation_number,
        customer_context=confirmation.customer_context,
        status_code=confirmation.status_code,
        status_description=confirmation.status_description,
    )


@app.get("/metrics")
def metrics():
    """Prometheus scrape endpoint."""

    return metrics_response()


@app.get("/health")
def health():
    """Container health probe endpoint."""

    return {"ok": True}
