"""Shared pickup fixtures: a fixed clock and a complete pickup description."""

from datetime import datetime, timedelta

import pytest

from freightpickup.common.config import CarrierConfig, Credentials
from freightpickup.services.pickup.models import PickupDescription
from freightpickup.services.pickup.transport import TransportResponse


NOW = datetime(2026, 10, 19, 8, 0)


class FakeTransport:
    """Records every POST and replays a canned response or error."""

    def __init__(self, body: bytes = b"", status_code: int = 200, error: Exception | None = None) -> None:
        self.body = body
        self.status_code = status_code
        self.error = error
        self.calls: list[dict] = []

    async def post(self, url: str, content_type: str, payload: bytes, timeout: float) -> TransportResponse:
        self.calls.append({"url": url, "content_type": content_type, "payload": payload, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return TransportResponse(status_code=self.status_code, body=self.body)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def pickup_payload() -> dict:
    """JSON-shaped pickup description: ready 11:00-16:00 on the fixed date."""

    return {
        "customer_context": "order-4711",
        "requester": {
            "name": "Acme Widgets",
            "attention_name": "Shipping Dept",
            "email_address": "shipping@acme.example",
            "phone": {"number": "5555550100"},
        },
        "ship_from": {
            "name": "Acme Widgets Plant 2",
            "attention_name": "Dock Supervisor",
            "address": {
                "address_line": "100 Industrial Pkwy",
                "city": "Dayton",
                "state_province_code": "OH",
                "postal_code": "45402",
                "country_code": "US",
            },
            "phone": {"number": "5555550199"},
        },
        "shipment_detail": {
            "hazmat": False,
            "packaging_type": {"code": "SKD", "description": "Skid"},
            "number_of_pieces": 4,
            "description_of_commodity": "Machine parts",
            "weight": "1250.50",
        },
        "destination_postal_code": "30301",
        "destination_country_code": "US",
        "additional_comments": "Call on arrival",
        "schedule": {
            "start": (NOW + timedelta(hours=3)).isoformat(),
            "end": (NOW + timedelta(hours=8)).isoformat(),
        },
    }


@pytest.fixture
def description(pickup_payload) -> PickupDescription:
    return PickupDescription.model_validate(pickup_payload)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(username="acme-web", password="s3cret", access_key="ABC123KEY")


@pytest.fixture
def carrier_config(credentials) -> CarrierConfig:
    return CarrierConfig(credentials=credentials)


@pytest.fixture
def transport_factory():
    """Build a `FakeTransport` with a canned body, status or error."""

    return FakeTransport
